"""Shared model helpers: lenient date parsing and clock arithmetic."""

import math
from datetime import date, datetime, time, timezone

SECONDS_PER_DAY = 86400


def parse_date(value: object) -> date | None:
    """Parse a record date leniently.

    Accepts ``date``, ``datetime``, ``YYYY-MM-DD`` strings and ISO timestamps
    (a trailing ``Z`` included); aware timestamps give their UTC date.
    Returns None for anything unparsable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return strip_tz(value).date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        # Same day basis as the clock
        return strip_tz(datetime.fromisoformat(text)).date()
    except ValueError:
        return None


def parse_datetime(value: object) -> datetime | None:
    """Parse a timestamp leniently; bare dates become midnight."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def strip_tz(dt: datetime) -> datetime:
    """Return a naive UTC datetime; aware values are converted first."""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def start_of_day(now: datetime) -> datetime:
    return datetime.combine(strip_tz(now).date(), time.min)


def days_until(target: date, now: datetime) -> int:
    """Whole days from ``now`` to the start of ``target``, rounded up.

    Zero or negative once the target day has started.
    """
    remaining = datetime.combine(target, time.min) - strip_tz(now)
    return math.ceil(remaining.total_seconds() / SECONDS_PER_DAY)
