"""Merge payables, receivables, manual entries and adjustments."""

from collections.abc import Iterable

from src.domain.constants import (
    BALANCE_ADJUSTMENT_LABEL,
    BALANCE_INITIAL,
    DEFAULT_ACCOUNT_LABEL,
    ENTRY_CONFIRMED,
    ENTRY_PENDING,
    EXPENSE,
    INCOME,
    MOVEMENT_BALANCE_ADJUSTMENT,
    MOVEMENT_INITIAL_BALANCE,
    MOVEMENT_NORMAL,
    NO_CATEGORY_LABEL,
    NOT_AVAILABLE,
    RECURRENCE_NONE,
)
from src.domain.models import (
    BalanceAdjustment,
    Category,
    DailyMovement,
    ManualEntry,
    Payable,
    Receivable,
)
from src.domain.policies import (
    dedupe_by_id,
    visible_in_forward_view,
    visible_in_history,
)


def in_range(value: str | None, start: str, end: str) -> bool:
    """Return True when an ISO date lies in the inclusive range."""
    return value is not None and start <= value <= end


def select_ledger_payables(
    payables: Iterable[Payable],
    honor_active_in_history: bool = False,
) -> list[Payable]:
    """Return payables that may appear on the ledger.

    Paid payables are history; open ones are projections and require the
    record to be active.
    """
    selected = []
    for payable in dedupe_by_id(payables):
        if payable.is_settled:
            if visible_in_history(payable, honor_active_in_history):
                selected.append(payable)
        elif visible_in_forward_view(payable):
            selected.append(payable)
    return selected


def select_ledger_receivables(
    receivables: Iterable[Receivable],
    honor_active_in_history: bool = False,
) -> list[Receivable]:
    """Return receivables that may appear on the ledger."""
    selected = []
    for receivable in dedupe_by_id(receivables):
        if receivable.is_settled:
            if visible_in_history(receivable, honor_active_in_history):
                selected.append(receivable)
        elif visible_in_forward_view(receivable):
            selected.append(receivable)
    return selected


def _category_name(
    categories: dict[str, Category],
    category_id: str | None,
) -> str:
    category = categories.get(category_id or "")
    return category.name if category else NO_CATEGORY_LABEL


def adjustment_to_movement(adjustment: BalanceAdjustment) -> DailyMovement:
    """Project a balance adjustment onto the ledger as a confirmed row."""
    is_initial = adjustment.balance_type == BALANCE_INITIAL
    label = "Initial" if is_initial else "Final"
    return DailyMovement(
        id=f"balance-{adjustment.id}",
        date=adjustment.date,
        type=INCOME if is_initial else EXPENSE,
        movement_type=(
            MOVEMENT_INITIAL_BALANCE
            if is_initial
            else MOVEMENT_BALANCE_ADJUSTMENT
        ),
        description=(
            f"Balance adjustment - {label}: {adjustment.description}"
        ),
        category_id="",
        category_name=BALANCE_ADJUSTMENT_LABEL,
        amount=adjustment.amount,
        payment_method=NOT_AVAILABLE,
        account=adjustment.account or DEFAULT_ACCOUNT_LABEL,
        status=ENTRY_CONFIRMED,
    )


def receivable_to_movement(
    receivable: Receivable,
    categories: dict[str, Category],
) -> DailyMovement:
    """Project a receivable onto its received or due date."""
    return DailyMovement(
        id=f"receivable-{receivable.id}",
        date=receivable.ledger_date,
        type=INCOME,
        movement_type=MOVEMENT_NORMAL,
        description=receivable.description,
        category_id=receivable.category_id or "",
        category_name=_category_name(categories, receivable.category_id),
        amount=receivable.amount,
        payment_method=receivable.payment_method or NOT_AVAILABLE,
        account=DEFAULT_ACCOUNT_LABEL,
        status=ENTRY_CONFIRMED if receivable.is_settled else ENTRY_PENDING,
        discount=receivable.discount,
        recurrence=_recurrence_label(receivable.recurrence),
        due_date=receivable.due_date,
        actual_date=receivable.received_date,
    )


def payable_to_movement(
    payable: Payable,
    categories: dict[str, Category],
) -> DailyMovement:
    """Project a payable onto its payment or due date."""
    return DailyMovement(
        id=f"payable-{payable.id}",
        date=payable.ledger_date,
        type=EXPENSE,
        movement_type=MOVEMENT_NORMAL,
        description=payable.description,
        category_id=payable.category_id or "",
        category_name=_category_name(categories, payable.category_id),
        amount=payable.amount,
        payment_method=payable.payment_method or NOT_AVAILABLE,
        account=DEFAULT_ACCOUNT_LABEL,
        status=ENTRY_CONFIRMED if payable.is_settled else ENTRY_PENDING,
        late_fees=payable.late_fees,
        discount=payable.discount,
        recurrence=_recurrence_label(payable.recurrence),
        due_date=payable.due_date,
        actual_date=payable.payment_date,
    )


def entry_to_movement(
    entry: ManualEntry,
    categories: dict[str, Category],
) -> DailyMovement:
    """Project a manual entry, keeping its own status."""
    subcategory = categories.get(entry.subcategory_id or "")
    return DailyMovement(
        id=f"manual-{entry.id}",
        date=entry.date,
        type=entry.type,
        movement_type=entry.movement_type or MOVEMENT_NORMAL,
        description=entry.description,
        category_id=entry.category_id or "",
        category_name=_category_name(categories, entry.category_id),
        amount=entry.amount,
        payment_method=entry.payment_method or NOT_AVAILABLE,
        account=entry.account or DEFAULT_ACCOUNT_LABEL,
        status=entry.status,
        competence_date=entry.competence_date,
        subcategory_id=entry.subcategory_id,
        subcategory_name=subcategory.name if subcategory else None,
        gross_amount=entry.gross_amount,
        fees=entry.fees,
        document=entry.document,
        cost_center=entry.cost_center,
        recurrence=entry.recurrence,
        due_date=entry.due_date,
        actual_date=entry.actual_date,
    )


def _recurrence_label(recurrence: str | None) -> str | None:
    if not recurrence or recurrence == RECURRENCE_NONE:
        return None
    return recurrence


def merge_movements(
    start_date: str,
    end_date: str,
    *,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    entries: Iterable[ManualEntry],
    adjustments: Iterable[BalanceAdjustment],
    categories: Iterable[Category],
    honor_active_in_history: bool = False,
) -> list[DailyMovement]:
    """Build the unified ledger for an inclusive date range.

    Rows are ordered by date; within a date adjustments come first, then
    receivables, payables and manual entries.

    Args:
        start_date: First ISO day of the range.
        end_date: Last ISO day of the range.
        payables: Payables to project.
        receivables: Receivables to project.
        entries: Manual cash entries.
        adjustments: Balance adjustments.
        categories: Categories used to resolve display names.
        honor_active_in_history: Drop settled rows of inactive records.

    Returns:
        list[DailyMovement]: Merged ledger rows.
    """
    category_map = {category.id: category for category in categories}
    movements: list[DailyMovement] = []
    movements.extend(
        adjustment_to_movement(adjustment)
        for adjustment in dedupe_by_id(adjustments)
        if in_range(adjustment.date, start_date, end_date)
    )
    movements.extend(
        receivable_to_movement(receivable, category_map)
        for receivable in select_ledger_receivables(
            receivables,
            honor_active_in_history,
        )
        if in_range(receivable.ledger_date, start_date, end_date)
    )
    movements.extend(
        payable_to_movement(payable, category_map)
        for payable in select_ledger_payables(
            payables,
            honor_active_in_history,
        )
        if in_range(payable.ledger_date, start_date, end_date)
    )
    movements.extend(
        entry_to_movement(entry, category_map)
        for entry in dedupe_by_id(entries)
        if in_range(entry.date, start_date, end_date)
    )
    return sorted(movements, key=lambda movement: movement.date)


__all__ = [
    "in_range",
    "select_ledger_payables",
    "select_ledger_receivables",
    "adjustment_to_movement",
    "receivable_to_movement",
    "payable_to_movement",
    "entry_to_movement",
    "merge_movements",
]
