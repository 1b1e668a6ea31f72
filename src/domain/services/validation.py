"""Domain validation helpers."""

from datetime import date

from src.domain.constants import PERIOD_DAILY, PERIOD_LOOKBACK_DAYS
from src.utils.date_utils import parse_iso_date


def validate_date_range(start_date: str, end_date: str) -> tuple[date, date]:
    """Parse and check an inclusive ISO date range.

    Args:
        start_date: First day of the range.
        end_date: Last day of the range.

    Returns:
        tuple[date, date]: Parsed start and end dates.

    Raises:
        ValueError: If a date is malformed or start is after end.
    """
    try:
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
    except (AttributeError, ValueError) as exc:
        raise ValueError(
            f"Invalid date range: {start_date!r} to {end_date!r}"
        ) from exc
    if start > end:
        raise ValueError(
            f"Start date {start_date} is after end date {end_date}"
        )
    return start, end


def normalize_period(period: str | None) -> str:
    """Return a known period name, defaulting to daily."""
    cleaned = (period or "").strip().lower()
    if cleaned in PERIOD_LOOKBACK_DAYS:
        return cleaned
    return PERIOD_DAILY


__all__ = ["validate_date_range", "normalize_period"]
