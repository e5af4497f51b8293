"""Argument validation for Taskly commands."""

import logging
import re
from typing import Iterable, Optional, Tuple

from ..errors import UsageError, ValidationError
from ..task import Priority

logger = logging.getLogger(__name__)

# Leading integer, the way the task number has always been read ("2nd" -> 2)
LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

PRIORITY_PREFIX = "--priority="


def parse_add_arguments(args: Iterable[str]) -> Tuple[str, Priority]:
    """Build the title and priority for ``taskly add``.

    Args:
        args: Raw tokens after the command. Tokens starting with ``--`` are
            not part of the title; the first ``--priority=<value>`` token
            selects the priority, and its value ends at the next ``=``.

    Returns:
        Tuple of (title, priority)

    Raises:
        UsageError: If no title tokens remain
        ValidationError: If the priority is not high, medium or low
    """
    args = list(args)
    title = " ".join(arg for arg in args if not arg.startswith("--"))
    if not title.strip():
        raise UsageError("Usage: taskly add <task-title> [--priority=high|medium|low]")

    priority_arg = next((arg for arg in args if arg.startswith(PRIORITY_PREFIX)), None)
    if priority_arg is None:
        return title, Priority.LOW

    priority = priority_arg.split("=")[1]
    try:
        return title, Priority(priority)
    except ValueError:
        logger.debug("Rejected priority %r", priority)
        raise ValidationError("Priority must be: high, medium, or low") from None


def parse_task_number(value: Optional[str], task_count: int, command: str) -> int:
    """Turn a user supplied task number into a zero-based index.

    Args:
        value: The raw argument, or None when it was omitted
        task_count: Number of tasks currently in the store
        command: Command name used in the usage message

    Returns:
        Index into the task list

    Raises:
        UsageError: If no number was given
        ValidationError: If the number is not in ``1..task_count``
    """
    if value is None:
        raise UsageError(f"Usage: taskly {command} <task-number>")

    match = LEADING_INT_RE.match(value)
    number = int(match.group(1)) if match else None

    if number is None or number < 1 or number > task_count:
        logger.debug("Rejected task number %r with %d task(s)", value, task_count)
        raise ValidationError(f"Invalid task number. Use 1-{task_count}")

    return number - 1
