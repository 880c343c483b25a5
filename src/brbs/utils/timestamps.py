"""Timestamp helpers.

Fixture and document timestamps are ISO-8601 strings. Some carry only a date
(``2024-06-01``), some a full time with a ``Z`` or numeric offset. Everything is
normalized to timezone-aware UTC ``datetime`` objects on the way in and to
``isoformat()`` strings on the way out.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

#: Sort sentinel for records without a timestamp.
EPOCH_MIN = datetime.min.replace(tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a document value into an aware UTC datetime.

    Args:
        value: An ISO-8601 string, a ``date``/``datetime``, or None.

    Returns:
        The UTC datetime, or None if the value is missing or unparseable.
        Naive values are treated as UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    return as_utc(parsed)


def as_utc(value: datetime) -> datetime:
    """Return `value` as an aware UTC datetime, reading naive values as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime | None) -> str | None:
    """Render a datetime as an ISO-8601 UTC string (None passes through)."""
    if value is None:
        return None
    return as_utc(value).isoformat()


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
