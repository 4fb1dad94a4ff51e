"""Calendar date primitives used by the statistics engine.

Dates are plain ``datetime.date`` values. Day arithmetic never goes
through timestamps, so there are no timezone or DST surprises.
"""

import calendar
import re
from datetime import date, timedelta

# Canonical text form of an entry date
DATE_FORMAT = "%Y-%m-%d"

_ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def days_between(start: date, end: date) -> int:
    """Return the signed number of days from ``start`` to ``end``."""
    return (end - start).days


def add_days(day: date, days: int) -> date:
    """Return ``day`` shifted by ``days`` (negative moves backward)."""
    return day + timedelta(days=days)


def today() -> date:
    """Return the local calendar date."""
    return date.today()


def parse_date(text: str) -> date:
    """Parse a ``YYYY-MM-DD`` string.

    Args:
        text: Date string in canonical form.

    Returns:
        The parsed date.

    Raises:
        ValueError: If the string is not a valid ``YYYY-MM-DD`` date.
    """
    if not _ISO_DATE_RE.fullmatch(text):
        raise ValueError(f"Invalid date '{text}': expected YYYY-MM-DD")
    return date.fromisoformat(text)


def month_days(year: int, month: int) -> list[date]:
    """Return every date of the given month in order."""
    _, last_day = calendar.monthrange(year, month)
    return [date(year, month, day) for day in range(1, last_day + 1)]
