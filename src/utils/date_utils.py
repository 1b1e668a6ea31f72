"""Helpers for ISO calendar-date strings.

Records keep dates as fixed-width ``YYYY-MM-DD`` strings, so plain string
comparison orders them chronologically.
"""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta


def coerce_iso_date(value) -> str | None:
    """Normalize a date-like value to an ISO ``YYYY-MM-DD`` string.

    Args:
        value: A ``date``, ``datetime``, string, or None.

    Returns:
        str | None: The ISO date string, or None for empty values.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    cleaned = str(value).strip()
    if not cleaned:
        return None
    return cleaned[:10]


def parse_iso_date(value: str) -> date:
    """Parse an ISO date string.

    Raises:
        ValueError: If the value is not a valid ``YYYY-MM-DD`` date.
    """
    return date.fromisoformat(value.strip())


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def add_months(origin: date, months: int) -> date:
    """Return origin shifted by whole months, clamping the day."""
    month_index = origin.month - 1 + months
    year = origin.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(origin.day, last_day))


def month_bounds(year: int, month: int) -> tuple[str, str]:
    """Return the first and last ISO day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return (
        date(year, month, 1).isoformat(),
        date(year, month, last_day).isoformat(),
    )


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) pair preceding the given month."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


__all__ = [
    "coerce_iso_date",
    "parse_iso_date",
    "iter_days",
    "add_months",
    "month_bounds",
    "previous_month",
]
