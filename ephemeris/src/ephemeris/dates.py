"""Calendar date parsing and the shared noon-UTC anchor."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta

from ephemeris.errors import InvalidDateError

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

MS_PER_DAY = 86_400_000


def parse_date(value: object) -> date:
    """Parse a calendar date from a ``date``, ``datetime`` or ``YYYY-MM-DD`` string.

    Aware datetimes are converted to UTC before the calendar date is taken.
    Anything else raises ``InvalidDateError``; no other formats are coerced.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"Expected a date or 'YYYY-MM-DD' string, got {type(value).__name__}")

    if not _ISO_DATE_RE.fullmatch(value):
        raise InvalidDateError(f"Invalid date '{value}'. Expected YYYY-MM-DD.")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date '{value}': {exc}") from exc


def noon_utc(target: date) -> datetime:
    """Anchor a calendar date at 12:00 UTC to stay clear of timezone day boundaries."""
    return datetime(target.year, target.month, target.day, 12, 0, 0, tzinfo=UTC)


def day_of_year(target: date) -> int:
    """Whole days from day 0 of the year (Dec 31 00:00) to the noon anchor.

    Equivalent to the 1-based ordinal day: Jan 1 -> 1, Dec 31 -> 365/366.
    """
    day_zero = datetime(target.year, 1, 1, tzinfo=UTC) - timedelta(days=1)
    elapsed = noon_utc(target) - day_zero
    return int(elapsed.total_seconds() * 1000 // MS_PER_DAY)


def format_date(target: date) -> str:
    return target.isoformat()
