"""Datetime utilities with consistent UTC timezone handling.

Task timestamps are stored as ISO 8601 strings in UTC with millisecond
precision and a trailing ``Z`` so that files written by older Taskly
releases and by this one look the same.
"""

from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    """Return current datetime in UTC timezone.

    Returns:
        Current datetime with timezone=UTC
    """
    return datetime.now(timezone.utc)


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure datetime is timezone-aware, assuming UTC if naive.

    Args:
        dt: Datetime to check/convert, or None

    Returns:
        Timezone-aware datetime, or None if input was None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume UTC
        return dt.replace(tzinfo=timezone.utc)

    return dt


def to_iso_string(dt: Optional[datetime]) -> Optional[str]:
    """Convert datetime to a UTC ISO string such as ``2025-01-31T09:15:02.123Z``.

    Args:
        dt: Datetime to convert, or None

    Returns:
        ISO format string, or None if input was None
    """
    if dt is None:
        return None

    utc_dt = ensure_aware(dt).astimezone(timezone.utc)
    return utc_dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso_string(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 string into an aware datetime.

    Accepts the ``Z`` suffix on every supported Python version.

    Raises:
        ValueError: If the value is not a string holding a valid ISO 8601
            timestamp
    """
    if value is None or value == "":
        return None

    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be a string, got {type(value).__name__}")

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return ensure_aware(datetime.fromisoformat(value))
