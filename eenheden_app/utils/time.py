"""
Time helpers for creation timestamps and contract start dates.

All timestamps are timezone-aware UTC. Contract start dates are plain
calendar dates.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union


def utc_now() -> datetime:
    """Current wall-clock time as a UTC datetime."""
    return datetime.now(timezone.utc)


def today_utc() -> date:
    """Current calendar date in UTC."""
    return utc_now().date()


def ensure_date(value: Optional[Union[date, datetime, str]]) -> date:
    """
    Normalize a start date given as date, datetime or ISO string.

    Args:
        value: Date-like value; None means today (UTC)

    Returns:
        Calendar date

    Raises:
        ValueError: If a string is not an ISO date
    """
    if value is None:
        return today_utc()

    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])

    raise ValueError(f"Unsupported date value: {value!r}")


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a timestamp to timezone-aware UTC.

    Naive values are taken to be UTC already.

    Raises:
        ValueError: If the value is not a datetime
    """
    if not isinstance(value, datetime):
        raise ValueError(f"Unsupported timestamp value: {value!r}")

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)

    return value.astimezone(timezone.utc)
