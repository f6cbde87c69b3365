"""
Date formatting helpers for commit records.
"""

import datetime
from typing import Optional

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
# months and years are fixed hour-based approximations
_MONTH = 720 * _HOUR
_YEAR = 8760 * _HOUR


def as_aware(when: datetime.datetime) -> datetime.datetime:
    if when.tzinfo is None:
        return when.replace(tzinfo=datetime.timezone.utc)
    return when


def _plural(count: int, unit: str) -> str:
    if count == 1:
        return f"1 {unit} ago"
    return f"{count} {unit}s ago"


def pretty_date(when: datetime.datetime, now: Optional[datetime.datetime] = None) -> str:
    """
    Describe how long ago a timestamp was, e.g. "3 days ago".

    Every tier truncates toward zero using its own divisor, so 119 seconds is
    still "1 minute ago" and 59 days is "1 month ago". Timestamps in the
    future fall under the one-minute threshold and read "just now".

    Args:
        when: The timestamp to describe. Naive values are taken as UTC.
        now: Reference time, defaults to the current time.

    Returns:
        Human readable relative date.
    """
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    seconds = (as_aware(now) - as_aware(when)).total_seconds()

    if seconds < _MINUTE:
        return "just now"
    if seconds < _HOUR:
        return _plural(int(seconds // _MINUTE), "minute")
    if seconds < _DAY:
        return _plural(int(seconds // _HOUR), "hour")
    if seconds < 30 * _DAY:
        return _plural(int(seconds // _DAY), "day")
    if seconds < 365 * _DAY:
        return _plural(int(seconds // _MONTH), "month")
    return _plural(int(seconds // _YEAR), "year")


def format_rfc3339(when: datetime.datetime) -> str:
    """Format a timestamp as RFC 3339 with second precision, UTC as ``Z``."""
    text = as_aware(when).isoformat(timespec="seconds")
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text
