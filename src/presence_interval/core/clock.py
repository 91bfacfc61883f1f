"""
Clock helpers.

The interval never reads the wall clock on its own initiative; callers pass
"now" explicitly or fall back to utc_now().
"""

from datetime import datetime, timedelta, UTC
from typing import Any


def utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(UTC)


def is_utc(value: Any) -> bool:
    """
    Check whether a value is a datetime tagged as UTC.

    Naive datetimes are rejected, and so are zones that merely happen to
    sit at a zero offset under another name (e.g. "GMT").

    Args:
        value: Candidate timestamp

    Returns:
        True if value is a UTC-tagged datetime
    """
    if not isinstance(value, datetime) or value.tzinfo is None:
        return False
    return value.utcoffset() == timedelta(0) and value.tzname() == "UTC"


def add_years(moment: datetime, years: int) -> datetime:
    """
    Shift a datetime by whole calendar years.

    February 29 lands on February 28 when the target year is not a leap year.
    """
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, day=28)
