"""Storage layer for Taskly: one JSON array of tasks in a single file."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .task import Task, generate_id
from .theme import get_error_console

logger = logging.getLogger(__name__)


class TaskStore:
    """File-backed task list.

    Every command loads the whole list, changes it in memory and writes
    it back. Read and write failures are reported on the error console and
    absorbed: a failed load behaves like an empty store and a failed save
    leaves the command to carry on.
    """

    def __init__(self, path: Path, error_console: Optional[Console] = None):
        self.path = Path(path)
        self.error_console = error_console or get_error_console()

    def _report(self, action: str, error: Exception) -> None:
        logger.debug("Error %s tasks at %s", action, self.path, exc_info=error)
        self.error_console.print(f"❌ Error {action} tasks: {error}")

    def load(self) -> List[Task]:
        """Load tasks from the file; a missing file is an empty list."""
        if not self.path.exists():
            logger.debug("Task file %s does not exist yet", self.path)
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)

            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")

            tasks = [Task.from_dict(item) for item in data]

        except (OSError, TypeError, ValueError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            self._report("loading", e)
            return []

        logger.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: List[Task]) -> bool:
        """Overwrite the file with the full task list.

        Returns:
            True if the file was written, False if the error was reported
        """
        try:
            content = json.dumps([task.to_dict() for task in tasks], indent=2, ensure_ascii=False)

            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)

        except (OSError, TypeError, ValueError) as e:
            self._report("saving", e)
            return False

        logger.debug("Saved %d task(s) to %s", len(tasks), self.path)
        return True

    def generate_id(self) -> str:
        """Return a fresh task identifier."""
        return generate_id()
