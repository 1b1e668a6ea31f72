"""Domain models for persisted ledger records."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import (
    EXPENSE,
    INCOME,
    MOVEMENT_NORMAL,
    PAYABLE_PAID,
    PAYABLE_PENDING,
    RECEIVABLE_PENDING,
    RECEIVABLE_RECEIVED,
    RECURRENCE_NONE,
    ENTRY_CONFIRMED,
)


@dataclass(frozen=True)
class Category:
    """Classification used by payables, receivables and manual entries.

    Attributes:
        id: Category identifier.
        name: Display name.
        type: Either ``income`` or ``expense``.
        dre_category: Optional income statement bucket tag.
    """

    id: str
    name: str
    type: str = EXPENSE
    dre_category: str | None = None


@dataclass(frozen=True)
class Payable:
    """An obligation to pay.

    Dates are ISO ``YYYY-MM-DD`` strings. ``recurrence_group_id`` and
    ``recurrence_expanded_through`` track which future instances were
    already generated from a recurring origin.
    """

    id: str
    description: str
    amount: Decimal
    due_date: str
    status: str = PAYABLE_PENDING
    payment_date: str | None = None
    late_fees: Decimal | None = None
    discount: Decimal | None = None
    recurrence: str = RECURRENCE_NONE
    recurrence_end: str | None = None
    active: bool = True
    company_id: str | None = None
    category_id: str | None = None
    supplier_id: str | None = None
    cost_center_id: str | None = None
    payment_method: str | None = None
    notes: str | None = None
    recurrence_group_id: str | None = None
    recurrence_expanded_through: str | None = None

    @property
    def is_settled(self) -> bool:
        return self.status == PAYABLE_PAID

    @property
    def effective_amount(self) -> Decimal:
        """Amount plus late fees, net of discount."""
        return (
            self.amount
            + (self.late_fees or Decimal("0"))
            - (self.discount or Decimal("0"))
        )

    @property
    def ledger_date(self) -> str:
        """Payment date once paid, due date while still open."""
        if self.is_settled and self.payment_date:
            return self.payment_date
        return self.due_date


@dataclass(frozen=True)
class Receivable:
    """A right to receive money."""

    id: str
    description: str
    amount: Decimal
    due_date: str
    status: str = RECEIVABLE_PENDING
    received_date: str | None = None
    discount: Decimal | None = None
    payment_method: str | None = None
    recurrence: str = RECURRENCE_NONE
    recurrence_period: str | None = None
    active: bool = True
    company_id: str | None = None
    category_id: str | None = None
    client_id: str | None = None
    notes: str | None = None

    @property
    def is_settled(self) -> bool:
        return self.status == RECEIVABLE_RECEIVED

    @property
    def effective_amount(self) -> Decimal:
        """Amount net of discount."""
        return self.amount - (self.discount or Decimal("0"))

    @property
    def ledger_date(self) -> str:
        """Received date once received, due date while still open."""
        if self.is_settled and self.received_date:
            return self.received_date
        return self.due_date


@dataclass(frozen=True)
class ManualEntry:
    """A free-form cash movement not tied to a payable or receivable."""

    id: str
    date: str
    type: str
    description: str
    amount: Decimal
    movement_type: str = MOVEMENT_NORMAL
    status: str = ENTRY_CONFIRMED
    category_id: str | None = None
    subcategory_id: str | None = None
    competence_date: str | None = None
    gross_amount: Decimal | None = None
    fees: Decimal | None = None
    payment_method: str | None = None
    account: str | None = None
    document: str | None = None
    cost_center: str | None = None
    recurrence: str | None = None
    due_date: str | None = None
    actual_date: str | None = None
    company_id: str | None = None

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE

    @property
    def is_confirmed(self) -> bool:
        return self.status == ENTRY_CONFIRMED


@dataclass(frozen=True)
class BalanceAdjustment:
    """A manual correction seeding the balance on a given date."""

    id: str
    date: str
    balance_type: str
    description: str
    amount: Decimal
    account: str | None = None
    company_id: str | None = None


__all__ = [
    "Category",
    "Payable",
    "Receivable",
    "ManualEntry",
    "BalanceAdjustment",
]
