"""Tests for date and decimal helpers."""

from datetime import date, datetime
from decimal import Decimal

from src.utils.date_utils import (
    add_months,
    coerce_iso_date,
    iter_days,
    month_bounds,
    previous_month,
)
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


def test_coerce_iso_date_normalizes_inputs() -> None:
    assert coerce_iso_date(date(2024, 3, 1)) == "2024-03-01"
    assert coerce_iso_date(datetime(2024, 3, 1, 13, 45)) == "2024-03-01"
    assert coerce_iso_date("2024-03-01T00:00:00") == "2024-03-01"
    assert coerce_iso_date("  ") is None
    assert coerce_iso_date(None) is None


def test_add_months_clamps_to_month_end() -> None:
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)


def test_month_helpers() -> None:
    assert month_bounds(2024, 2) == ("2024-02-01", "2024-02-29")
    assert previous_month(2024, 1) == (2023, 12)
    assert previous_month(2024, 7) == (2024, 6)


def test_iter_days_is_inclusive() -> None:
    days = list(iter_days(date(2024, 2, 28), date(2024, 3, 1)))

    assert days == [date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]


def test_coerce_decimal_handles_sql_values() -> None:
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal("") == Decimal("0")
    assert coerce_decimal(12.5) == Decimal("12.5")
    assert coerce_decimal("7.10") == Decimal("7.10")
    assert coerce_optional_decimal(None) is None
    assert coerce_optional_decimal(3) == Decimal("3")
