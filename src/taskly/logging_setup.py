"""Logging configuration for the command line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "taskly-rich"


def setup_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Attach a stderr RichHandler to the ``taskly`` logger.

    Safe to call more than once; the previous handler is replaced so that
    repeated invocations in one process (tests) do not stack handlers.
    """
    logger = logging.getLogger("taskly")
    resolved = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(resolved)
