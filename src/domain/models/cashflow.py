"""Domain models derived from the merged cash flow ledger."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import EXPENSE


@dataclass(frozen=True)
class DailyMovement:
    """Unified ledger row merged from every record kind.

    Attributes:
        id: Source-prefixed identifier (``payable-<id>``, ``manual-<id>``...).
        date: Ledger date the movement lands on.
        type: ``income`` or ``expense``.
        movement_type: Movement kind (normal, withdrawal...).
        status: ``confirmed``, ``pending`` or ``overdue``.
        amount: Face amount of the source record.
    """

    id: str
    date: str
    type: str
    movement_type: str
    description: str
    category_id: str
    category_name: str
    amount: Decimal
    payment_method: str
    account: str
    status: str
    competence_date: str | None = None
    subcategory_id: str | None = None
    subcategory_name: str | None = None
    gross_amount: Decimal | None = None
    late_fees: Decimal | None = None
    discount: Decimal | None = None
    fees: Decimal | None = None
    document: str | None = None
    cost_center: str | None = None
    recurrence: str | None = None
    due_date: str | None = None
    actual_date: str | None = None

    @property
    def effective_amount(self) -> Decimal:
        """Amount with late fees added and discount removed."""
        return (
            self.amount
            + (self.late_fees or Decimal("0"))
            - (self.discount or Decimal("0"))
        )

    @property
    def signed_amount(self) -> Decimal:
        """Effective amount, negative for expenses."""
        if self.type == EXPENSE:
            return -self.effective_amount
        return self.effective_amount


@dataclass(frozen=True)
class CashFlowDataPoint:
    """Aggregated cash position for a single calendar day."""

    date: str
    income: Decimal
    expense: Decimal
    balance: Decimal
    initial_balance: Decimal
    final_balance: Decimal
    projected: bool = False

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class CashFlowSummary:
    """Period totals split between confirmed and pending money."""

    total_income: Decimal
    total_expense: Decimal
    net_flow: Decimal
    projected_balance: Decimal
    current_balance: Decimal
    initial_balance: Decimal
    final_balance: Decimal
    total_income_pending: Decimal
    total_expense_pending: Decimal
    total_income_confirmed: Decimal
    total_expense_confirmed: Decimal


@dataclass(frozen=True)
class CashFlowKPIs:
    """Ratio indicators computed over a daily series."""

    average_balance: Decimal
    income_vs_expense: Decimal
    delinquency_rate: Decimal
    immediate_liquidity: Decimal
    burn_rate: Decimal


@dataclass(frozen=True)
class CashFlowAlert:
    """Severity-tagged alert raised from the current ledger state."""

    id: str
    type: str
    message: str
    severity: str
    date: str
    related_id: str | None = None


@dataclass(frozen=True)
class DashboardStats:
    """Headline figures for the dashboard landing page."""

    total_revenue: Decimal
    total_expenses: Decimal
    balance: Decimal
    projected_balance: Decimal
    overdue_payables: int
    overdue_receivables: int
    due_today_count: int
    due_this_week_count: int
    total_discounts: Decimal


@dataclass(frozen=True)
class CategoryExpense:
    """Expense total for a category within a date range."""

    category_id: str
    category_name: str
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class DREData:
    """Simplified income statement for one month.

    Only revenue, deductions, costs and operational expenses are fed from
    transactions; tax, depreciation and financial lines stay at zero.
    """

    gross_revenue: Decimal
    deductions: Decimal
    net_revenue: Decimal
    costs: Decimal
    gross_profit: Decimal
    operational_expenses: Decimal
    operational_profit: Decimal
    ebitda: Decimal
    net_profit: Decimal
    contribution_margin: Decimal
    irpj: Decimal = Decimal("0")
    csll: Decimal = Decimal("0")
    pis: Decimal = Decimal("0")
    cofins: Decimal = Decimal("0")
    icms: Decimal = Decimal("0")
    iss: Decimal = Decimal("0")
    other_taxes: Decimal = Decimal("0")
    depreciation: Decimal = Decimal("0")
    amortization: Decimal = Decimal("0")
    financial_result: Decimal = Decimal("0")
    profit_before_tax: Decimal = Decimal("0")
    tax_expense: Decimal = Decimal("0")
    net_income: Decimal = Decimal("0")


@dataclass(frozen=True)
class DREComparison:
    """Income statement for a month next to the previous month."""

    year: int
    month: int
    current: DREData
    previous: DREData
    gross_revenue_change: Decimal
    net_profit_change: Decimal



__all__ = [
    "DailyMovement",
    "CashFlowDataPoint",
    "CashFlowSummary",
    "CashFlowKPIs",
    "CashFlowAlert",
    "DashboardStats",
    "CategoryExpense",
    "DREData",
    "DREComparison",
]
