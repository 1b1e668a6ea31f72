"""Day-by-day running balance over the merged ledger."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models import (
    CashFlowDataPoint,
    ManualEntry,
    Payable,
    Receivable,
)
from src.domain.policies import dedupe_by_id
from src.domain.services.ledger import (
    select_ledger_payables,
    select_ledger_receivables,
)
from src.utils.date_utils import iter_days


@dataclass
class _DayBucket:
    income: Decimal = field(default_factory=lambda: Decimal("0"))
    expense: Decimal = field(default_factory=lambda: Decimal("0"))
    has_confirmed: bool = False


def compute_initial_balance(
    start_date: str,
    *,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    entries: Iterable[ManualEntry],
    honor_active_in_history: bool = False,
) -> Decimal:
    """Return the confirmed cash position before ``start_date``.

    Only settled payables/receivables and confirmed manual entries dated
    strictly before the start count; pending money never seeds a balance.
    Settled records are keyed by ``ledger_date``, the same day the daily
    walk books them on.
    """
    balance = Decimal("0")
    for receivable in select_ledger_receivables(
        receivables,
        honor_active_in_history,
    ):
        if receivable.is_settled and receivable.ledger_date < start_date:
            balance += receivable.effective_amount
    for payable in select_ledger_payables(payables, honor_active_in_history):
        if payable.is_settled and payable.ledger_date < start_date:
            balance -= payable.effective_amount
    for entry in dedupe_by_id(entries):
        if not entry.is_confirmed or entry.date >= start_date:
            continue
        if entry.is_income:
            balance += entry.amount
        elif entry.is_expense:
            balance -= entry.amount
    return balance


def _bucket_activity(
    start_date: str,
    end_date: str,
    payables: list[Payable],
    receivables: list[Receivable],
    entries: list[ManualEntry],
) -> dict[str, _DayBucket]:
    buckets: dict[str, _DayBucket] = defaultdict(_DayBucket)

    def _in_window(value: str) -> bool:
        return start_date <= value <= end_date

    for receivable in receivables:
        day = receivable.ledger_date
        if not _in_window(day):
            continue
        bucket = buckets[day]
        bucket.income += receivable.effective_amount
        bucket.has_confirmed = bucket.has_confirmed or receivable.is_settled
    for payable in payables:
        day = payable.ledger_date
        if not _in_window(day):
            continue
        bucket = buckets[day]
        bucket.expense += payable.effective_amount
        bucket.has_confirmed = bucket.has_confirmed or payable.is_settled
    for entry in entries:
        if not _in_window(entry.date):
            continue
        bucket = buckets[entry.date]
        if entry.is_income:
            bucket.income += entry.amount
        elif entry.is_expense:
            bucket.expense += entry.amount
        else:
            continue
        bucket.has_confirmed = bucket.has_confirmed or entry.is_confirmed
    return buckets


def compute_daily_points(
    start: date,
    end: date,
    *,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    entries: Iterable[ManualEntry],
    project_after: date | None = None,
    honor_active_in_history: bool = False,
) -> list[CashFlowDataPoint]:
    """Walk the ledger one day at a time carrying the balance forward.

    Settled records land on their settlement date and open ones on their
    due date, so pending money shows up as a projection on the day it is
    expected. The balance at the end of each day is the balance at the
    start of the next.

    Args:
        start: First day of the series.
        end: Last day of the series (inclusive).
        payables: Payables feeding expenses.
        receivables: Receivables feeding income.
        entries: Manual entries of any status.
        project_after: When set, days after it without confirmed activity
            are flagged as projected. Leave unset for closed ranges.
        honor_active_in_history: Drop settled rows of inactive records.

    Returns:
        list[CashFlowDataPoint]: One point per day in ascending order.
    """
    if start > end:
        return []
    start_iso = start.isoformat()
    ledger_payables = select_ledger_payables(
        payables,
        honor_active_in_history,
    )
    ledger_receivables = select_ledger_receivables(
        receivables,
        honor_active_in_history,
    )
    ledger_entries = dedupe_by_id(entries)

    running = compute_initial_balance(
        start_iso,
        payables=ledger_payables,
        receivables=ledger_receivables,
        entries=ledger_entries,
    )
    buckets = _bucket_activity(
        start_iso,
        end.isoformat(),
        ledger_payables,
        ledger_receivables,
        ledger_entries,
    )

    points: list[CashFlowDataPoint] = []
    for day in iter_days(start, end):
        day_iso = day.isoformat()
        bucket = buckets.get(day_iso, _DayBucket())
        day_initial = running
        running = running + bucket.income - bucket.expense
        projected = (
            project_after is not None
            and day > project_after
            and not bucket.has_confirmed
        )
        points.append(
            CashFlowDataPoint(
                date=day_iso,
                income=bucket.income,
                expense=bucket.expense,
                balance=running,
                initial_balance=day_initial,
                final_balance=running,
                projected=projected,
            )
        )
    return points


def balance_on(
    points: Iterable[CashFlowDataPoint],
    day: str,
) -> Decimal | None:
    """Return the end-of-day balance for ``day`` when it is in the series."""
    for point in points:
        if point.date == day:
            return point.balance
    return None


__all__ = ["compute_initial_balance", "compute_daily_points", "balance_on"]
