"""Task data model for the Taskly application."""

import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from .utils.datetime import now_utc, ensure_aware, to_iso_string, parse_iso_string


_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Keys written for every task; anything else found on disk is kept in ``extra``.
KNOWN_KEYS = ("id", "title", "priority", "completed", "created", "completedAt")


class Priority(Enum):
    """Task priority levels."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Generate an opaque task identifier.

    The identifier is the current time in milliseconds followed by a random
    suffix, both in base 36. Collisions are not checked against the store.
    """
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = _to_base36(secrets.randbelow(36 ** 10)).rjust(10, "0")
    return timestamp + suffix


@dataclass
class Task:
    """A single to-do entry."""

    id: str
    title: str
    priority: Priority = Priority.LOW
    completed: bool = False
    created: datetime = field(default_factory=now_utc)
    completed_at: Optional[datetime] = None

    # Keys from the file this version does not know about
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.created = ensure_aware(self.created)
        self.completed_at = ensure_aware(self.completed_at)

    def complete(self) -> bool:
        """Mark the task as completed.

        Returns:
            False if the task was already completed (nothing changes),
            True otherwise.
        """
        if self.completed:
            return False
        self.completed = True
        self.completed_at = now_utc()
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert the task to its on-disk JSON object."""
        data = dict(self.extra)
        data.update({
            "id": self.id,
            "title": self.title,
            "priority": self.priority.value,
            "completed": self.completed,
            "created": to_iso_string(self.created),
        })
        if self.completed_at is not None:
            data["completedAt"] = to_iso_string(self.completed_at)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Create a Task from its on-disk JSON object.

        Raises:
            ValueError: If the record is not an object or holds a
                non-string title, an unknown priority or an unparseable
                timestamp
        """
        if not isinstance(data, dict):
            raise ValueError(f"Task record must be an object, got {type(data).__name__}")

        title = data.get("title", "")
        if not isinstance(title, str):
            raise ValueError(f"Task title must be a string, got {type(title).__name__}")

        return cls(
            id=str(data.get("id", "")),
            title=title,
            priority=Priority(data.get("priority", Priority.LOW.value)),
            completed=bool(data.get("completed", False)),
            created=parse_iso_string(data.get("created")) or now_utc(),
            completed_at=parse_iso_string(data.get("completedAt")),
            extra={k: v for k, v in data.items() if k not in KNOWN_KEYS},
        )
