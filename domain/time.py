"""
Domain time utilities (pure).

Centralized timestamp validation and the clock used to stamp submissions.

Behavior and error messages must remain consistent across the domain model.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def require_utc_timestamp(name: str, value: datetime) -> None:
    """
    Enforces that record timestamps are UTC.

    Invariants:
    - Timestamps must be timezone-aware.
    - Timestamps must have UTC offset 0.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware (UTC)")
    if value.utcoffset() != timedelta(0):
        raise ValueError(f"{name} must be a UTC timestamp (offset 0)")


def utc_now() -> datetime:
    """Default clock for stores: the current instant in UTC."""

    return datetime.now(timezone.utc)


def epoch_millis(value: datetime) -> int:
    """Whole milliseconds since the Unix epoch for a UTC timestamp."""

    require_utc_timestamp("timestamp", value)
    return (value - _EPOCH) // timedelta(milliseconds=1)


def to_iso_utc(value: datetime) -> str:
    """Serialize a UTC timestamp as ISO-8601 with millisecond precision and 'Z'."""

    require_utc_timestamp("timestamp", value)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
