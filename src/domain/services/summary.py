"""Period summaries, KPI ratios and dashboard statistics."""

from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import (
    BALANCE_INITIAL,
    EXPENSE,
    LIQUIDITY_HORIZON_DAYS,
    UPCOMING_HORIZON_DAYS,
)
from src.domain.models import (
    BalanceAdjustment,
    CashFlowDataPoint,
    CashFlowKPIs,
    CashFlowSummary,
    Category,
    CategoryExpense,
    DashboardStats,
    ManualEntry,
    Payable,
    Receivable,
)
from src.domain.policies import dedupe_by_id, visible_in_forward_view
from src.domain.services.ledger import (
    in_range,
    select_ledger_payables,
    select_ledger_receivables,
)


ZERO = Decimal("0")


def _total(values: Iterable[Decimal]) -> Decimal:
    return sum(values, ZERO)


def compute_summary(
    start_date: str,
    end_date: str,
    *,
    points: Sequence[CashFlowDataPoint],
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    entries: Iterable[ManualEntry],
    adjustments: Iterable[BalanceAdjustment],
    current_balance: Decimal,
    honor_active_in_history: bool = False,
) -> CashFlowSummary:
    """Summarize confirmed and pending money for an inclusive period.

    Args:
        start_date: First ISO day of the period.
        end_date: Last ISO day of the period.
        points: Running balance series covering the same window.
        payables: Payables to summarize.
        receivables: Receivables to summarize.
        entries: Manual cash entries.
        adjustments: Balance adjustments; ``initial`` ones seed the period.
        current_balance: Balance reported as the current position.
        honor_active_in_history: Drop settled rows of inactive records.

    Returns:
        CashFlowSummary: Period totals.
    """
    ledger_payables = select_ledger_payables(
        payables,
        honor_active_in_history,
    )
    ledger_receivables = select_ledger_receivables(
        receivables,
        honor_active_in_history,
    )
    ledger_entries = dedupe_by_id(entries)

    confirmed_income = _total(
        receivable.effective_amount
        for receivable in ledger_receivables
        if receivable.is_settled
        and in_range(receivable.received_date, start_date, end_date)
    ) + _total(
        entry.amount
        for entry in ledger_entries
        if entry.is_income
        and entry.is_confirmed
        and in_range(entry.date, start_date, end_date)
    )
    confirmed_expense = _total(
        payable.effective_amount
        for payable in ledger_payables
        if payable.is_settled
        and in_range(payable.payment_date, start_date, end_date)
    ) + _total(
        entry.amount
        for entry in ledger_entries
        if entry.is_expense
        and entry.is_confirmed
        and in_range(entry.date, start_date, end_date)
    )
    pending_income = _total(
        receivable.effective_amount
        for receivable in ledger_receivables
        if not receivable.is_settled
        and in_range(receivable.due_date, start_date, end_date)
    )
    pending_expense = _total(
        payable.effective_amount
        for payable in ledger_payables
        if not payable.is_settled
        and in_range(payable.due_date, start_date, end_date)
    )
    initial_balance = _total(
        adjustment.amount
        for adjustment in dedupe_by_id(adjustments)
        if adjustment.balance_type == BALANCE_INITIAL
        and in_range(adjustment.date, start_date, end_date)
    )
    net_flow = _total(
        point.net
        for point in points
        if in_range(point.date, start_date, end_date)
    )

    return CashFlowSummary(
        total_income=confirmed_income + initial_balance,
        total_expense=confirmed_expense,
        net_flow=net_flow,
        projected_balance=(
            (confirmed_income + pending_income)
            - (confirmed_expense + pending_expense)
        ),
        current_balance=current_balance,
        initial_balance=initial_balance,
        final_balance=confirmed_income - confirmed_expense,
        total_income_pending=pending_income,
        total_expense_pending=pending_expense,
        total_income_confirmed=confirmed_income,
        total_expense_confirmed=confirmed_expense,
    )


def compute_delinquency_rate(
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    today: str,
) -> Decimal:
    """Share of open accounts already past due; 0 when nothing is open."""
    open_accounts = [
        account
        for account in [*dedupe_by_id(payables), *dedupe_by_id(receivables)]
        if not account.is_settled and visible_in_forward_view(account)
    ]
    if not open_accounts:
        return ZERO
    overdue = sum(1 for account in open_accounts if account.due_date < today)
    return Decimal(overdue) / Decimal(len(open_accounts))


def compute_kpis(
    points: Sequence[CashFlowDataPoint],
    *,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    today: date,
    current_balance: Decimal,
) -> CashFlowKPIs:
    """Compute ratio indicators from a running balance series.

    Every ratio falls back to a constant when its denominator is zero:
    income/expense and delinquency to 0, liquidity to 1, burn rate to 0.
    """
    today_iso = today.isoformat()
    horizon_end = (
        today + timedelta(days=LIQUIDITY_HORIZON_DAYS - 1)
    ).isoformat()

    average_balance = ZERO
    if points:
        average_balance = _total(p.balance for p in points) / len(points)

    total_income = _total(point.income for point in points)
    total_expense = _total(point.expense for point in points)
    income_vs_expense = ZERO
    if total_income > 0:
        income_vs_expense = (total_income - total_expense) / total_income

    near_term_expense = _total(
        point.expense
        for point in points
        if in_range(point.date, today_iso, horizon_end)
    )
    immediate_liquidity = Decimal("1")
    if near_term_expense > 0:
        immediate_liquidity = current_balance / near_term_expense

    spending_days = [
        point.expense
        for point in points
        if not point.projected and point.expense > 0
    ]
    burn_rate = ZERO
    if spending_days:
        burn_rate = _total(spending_days) / len(spending_days)

    return CashFlowKPIs(
        average_balance=average_balance,
        income_vs_expense=income_vs_expense,
        delinquency_rate=compute_delinquency_rate(
            payables,
            receivables,
            today_iso,
        ),
        immediate_liquidity=immediate_liquidity,
        burn_rate=burn_rate,
    )


def compute_dashboard_stats(
    *,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    entries: Iterable[ManualEntry],
    today: date,
    start_date: str | None = None,
    end_date: str | None = None,
    honor_active_in_history: bool = False,
) -> DashboardStats:
    """Compute headline dashboard figures, optionally date-bounded.

    Payables and receivables are keyed by settlement date once settled and
    by due date otherwise. Without bounds every record counts.
    """
    today_iso = today.isoformat()
    week_end = (today + timedelta(days=UPCOMING_HORIZON_DAYS)).isoformat()
    bounded = start_date is not None and end_date is not None

    def _keep(value: str | None) -> bool:
        return not bounded or in_range(value, start_date, end_date)

    all_payables = select_ledger_payables(payables, honor_active_in_history)
    all_receivables = select_ledger_receivables(
        receivables,
        honor_active_in_history,
    )
    period_payables = [p for p in all_payables if _keep(p.ledger_date)]
    period_receivables = [r for r in all_receivables if _keep(r.ledger_date)]
    period_entries = [e for e in dedupe_by_id(entries) if _keep(e.date)]

    total_revenue = _total(
        r.effective_amount for r in period_receivables if r.is_settled
    ) + _total(
        e.amount
        for e in period_entries
        if e.is_income and e.is_confirmed
    )
    total_expenses = _total(
        p.effective_amount for p in period_payables if p.is_settled
    ) + _total(
        e.amount
        for e in period_entries
        if e.is_expense and e.is_confirmed
    )
    pending_receivables = _total(
        r.effective_amount for r in period_receivables if not r.is_settled
    )
    pending_payables = _total(
        p.effective_amount for p in period_payables if not p.is_settled
    )

    overdue_cutoff = start_date if bounded else today_iso
    overdue_scope_payables = period_payables if bounded else all_payables
    overdue_scope_receivables = (
        period_receivables if bounded else all_receivables
    )
    overdue_payables = sum(
        1
        for p in overdue_scope_payables
        if not p.is_settled and p.due_date < overdue_cutoff
    )
    overdue_receivables = sum(
        1
        for r in overdue_scope_receivables
        if not r.is_settled and r.due_date < overdue_cutoff
    )
    open_accounts = [
        account
        for account in [*period_payables, *period_receivables]
        if not account.is_settled
    ]
    due_today_count = sum(
        1 for account in open_accounts if account.due_date == today_iso
    )
    due_this_week_count = sum(
        1
        for account in open_accounts
        if in_range(account.due_date, today_iso, week_end)
    )
    total_discounts = _total(
        account.discount or ZERO
        for account in [*period_payables, *period_receivables]
    )

    balance = total_revenue - total_expenses
    return DashboardStats(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        balance=balance,
        projected_balance=balance + pending_receivables - pending_payables,
        overdue_payables=overdue_payables,
        overdue_receivables=overdue_receivables,
        due_today_count=due_today_count,
        due_this_week_count=due_this_week_count,
        total_discounts=total_discounts,
    )


def compute_category_expenses(
    start_date: str,
    end_date: str,
    *,
    payables: Iterable[Payable],
    entries: Iterable[ManualEntry],
    categories: Iterable[Category],
    honor_active_in_history: bool = False,
) -> list[CategoryExpense]:
    """Break expenses in a range down by expense category.

    Returns:
        list[CategoryExpense]: Categories with a non-zero amount, each with
        its share of the range total in percent.
    """
    period_payables = [
        payable
        for payable in select_ledger_payables(
            payables,
            honor_active_in_history,
        )
        if in_range(payable.ledger_date, start_date, end_date)
    ]
    period_entries = [
        entry
        for entry in dedupe_by_id(entries)
        if entry.is_expense and in_range(entry.date, start_date, end_date)
    ]
    total = _total(p.effective_amount for p in period_payables) + _total(
        e.amount for e in period_entries
    )

    breakdown: list[CategoryExpense] = []
    for category in categories:
        if category.type != EXPENSE:
            continue
        amount = _total(
            p.effective_amount
            for p in period_payables
            if p.category_id == category.id
        ) + _total(
            e.amount for e in period_entries if e.category_id == category.id
        )
        if amount <= 0:
            continue
        percentage = (amount / total) * Decimal("100") if total else ZERO
        breakdown.append(
            CategoryExpense(
                category_id=category.id,
                category_name=category.name,
                amount=amount,
                percentage=percentage,
            )
        )
    return sorted(breakdown, key=lambda item: item.amount, reverse=True)


def select_upcoming(
    accounts: Iterable[Payable] | Iterable[Receivable],
    *,
    today: date,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list:
    """Return active open accounts due soon, earliest first.

    With an explicit range, accounts due inside it are returned; otherwise
    everything due up to a week from today, overdue included.
    """
    if start_date is None or end_date is None:
        start_date = ""
        end_date = (today + timedelta(days=UPCOMING_HORIZON_DAYS)).isoformat()
    upcoming = [
        account
        for account in dedupe_by_id(accounts)
        if not account.is_settled
        and visible_in_forward_view(account)
        and start_date <= account.due_date <= end_date
    ]
    return sorted(upcoming, key=lambda account: account.due_date)


__all__ = [
    "compute_summary",
    "compute_delinquency_rate",
    "compute_kpis",
    "compute_dashboard_stats",
    "compute_category_expenses",
    "select_upcoming",
]
