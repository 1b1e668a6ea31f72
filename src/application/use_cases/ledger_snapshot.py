"""Shared helpers for loading ledger records in application use cases."""

from dataclasses import dataclass
from datetime import date, timedelta

from src.application.ports.record_store import RecordStorePort
from src.domain.constants import (
    PERIOD_LOOKBACK_DAYS,
    PERIOD_SERIES_WINDOW_DAYS,
)
from src.domain.models import (
    BalanceAdjustment,
    Category,
    ManualEntry,
    Payable,
    Receivable,
)
from src.domain.policies import filter_by_company
from src.domain.services.validation import normalize_period


@dataclass(frozen=True)
class LedgerSnapshot:
    """Records of one company read from the store for a single call.

    Attributes:
        payables: Payables, active and inactive.
        receivables: Receivables, active and inactive.
        entries: Manual cash entries.
        adjustments: Balance adjustments.
        categories: Every category.
    """

    payables: list[Payable]
    receivables: list[Receivable]
    entries: list[ManualEntry]
    adjustments: list[BalanceAdjustment]
    categories: list[Category]


def load_snapshot(
    record_store: RecordStorePort,
    company_id: str | None,
    logger,
) -> LedgerSnapshot:
    """Read every record kind for a company and log the counts.

    Args:
        record_store: Port providing ledger records.
        company_id: Company filter, or None for every company.
        logger: Logger compatible with logging.Logger-like API.

    Returns:
        LedgerSnapshot: Records scoped to the company.
    """
    snapshot = LedgerSnapshot(
        payables=filter_by_company(
            record_store.list_payables(company_id),
            company_id,
        ),
        receivables=filter_by_company(
            record_store.list_receivables(company_id),
            company_id,
        ),
        entries=filter_by_company(
            record_store.list_manual_entries(company_id),
            company_id,
        ),
        adjustments=filter_by_company(
            record_store.list_balance_adjustments(company_id),
            company_id,
        ),
        categories=record_store.list_categories(),
    )
    logger.info(
        f"Fetched {len(snapshot.payables)} payables, "
        f"{len(snapshot.receivables)} receivables, "
        f"{len(snapshot.entries)} manual entries, "
        f"{len(snapshot.adjustments)} adjustments "
        f"for company={company_id or 'all'}"
    )
    return snapshot


def lookback_window(period: str | None, today: date) -> tuple[str, str]:
    """Return the ISO window of a named period ending today."""
    days = PERIOD_LOOKBACK_DAYS[normalize_period(period)]
    return (today - timedelta(days=days)).isoformat(), today.isoformat()


def series_window(period: str | None, today: date) -> tuple[date, date]:
    """Return the projected series window centred on today."""
    days = PERIOD_SERIES_WINDOW_DAYS[normalize_period(period)]
    return today - timedelta(days=days), today + timedelta(days=days)


__all__ = [
    "LedgerSnapshot",
    "load_snapshot",
    "lookback_window",
    "series_window",
]
