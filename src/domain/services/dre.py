"""Simplified income statement (DRE) from settled accounts."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    DRE_COSTS,
    DRE_DEDUCTIONS,
    DRE_OPERATIONAL_EXPENSES,
    DRE_REVENUE,
)
from src.domain.models import (
    Category,
    DREComparison,
    DREData,
    Payable,
    Receivable,
)
from src.domain.policies import dedupe_by_id, visible_in_history
from src.domain.services.ledger import in_range
from src.utils.date_utils import month_bounds, previous_month


ZERO = Decimal("0")


def compute_dre(
    year: int,
    month: int,
    *,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    categories: Iterable[Category],
    logger: Logger,
    honor_active_in_history: bool = False,
) -> DREData:
    """Bucket one month of settled accounts into an income statement.

    Receivables feed gross revenue and deductions; payables feed costs and
    operational expenses, according to their category's ``dre_category``.
    Records without a known category are left out of every bucket.
    """
    start, end = month_bounds(year, month)
    category_map = {category.id: category for category in categories}
    buckets = {
        DRE_REVENUE: ZERO,
        DRE_DEDUCTIONS: ZERO,
        DRE_COSTS: ZERO,
        DRE_OPERATIONAL_EXPENSES: ZERO,
    }
    uncategorized = 0

    for receivable in dedupe_by_id(receivables):
        if not receivable.is_settled:
            continue
        if not visible_in_history(receivable, honor_active_in_history):
            continue
        if not in_range(receivable.ledger_date, start, end):
            continue
        category = category_map.get(receivable.category_id or "")
        if category is None:
            uncategorized += 1
            continue
        if category.dre_category in (DRE_REVENUE, DRE_DEDUCTIONS):
            buckets[category.dre_category] += receivable.effective_amount

    for payable in dedupe_by_id(payables):
        if not payable.is_settled:
            continue
        if not visible_in_history(payable, honor_active_in_history):
            continue
        if not in_range(payable.ledger_date, start, end):
            continue
        category = category_map.get(payable.category_id or "")
        if category is None:
            uncategorized += 1
            continue
        if category.dre_category in (DRE_COSTS, DRE_OPERATIONAL_EXPENSES):
            buckets[category.dre_category] += payable.effective_amount

    if uncategorized:
        logger.debug(
            f"DRE {year}-{month:02d}: skipped {uncategorized} settled "
            f"accounts without a category"
        )

    gross_revenue = buckets[DRE_REVENUE]
    deductions = buckets[DRE_DEDUCTIONS]
    costs = buckets[DRE_COSTS]
    operational_expenses = buckets[DRE_OPERATIONAL_EXPENSES]
    net_revenue = gross_revenue - deductions
    gross_profit = net_revenue - costs
    operational_profit = gross_profit - operational_expenses

    return DREData(
        gross_revenue=gross_revenue,
        deductions=deductions,
        net_revenue=net_revenue,
        costs=costs,
        gross_profit=gross_profit,
        operational_expenses=operational_expenses,
        operational_profit=operational_profit,
        ebitda=operational_profit,
        net_profit=operational_profit,
        contribution_margin=net_revenue - costs,
        profit_before_tax=operational_profit,
        net_income=operational_profit,
    )


def percentage_change(
    current: Decimal,
    previous: Decimal,
    *,
    absolute_base: bool = False,
) -> Decimal:
    """Return the change from previous to current in percent.

    Args:
        current: Value for the current month.
        previous: Value for the previous month.
        absolute_base: Divide by ``|previous|`` so sign flips stay readable.

    Returns:
        Decimal: Percentage change, 0 when there is no usable base.
    """
    if absolute_base:
        if previous == 0:
            return ZERO
        return (current - previous) / abs(previous) * Decimal("100")
    if previous <= 0:
        return ZERO
    return (current - previous) / previous * Decimal("100")


def compare_dre(
    year: int,
    month: int,
    *,
    payables: Iterable[Payable],
    receivables: Iterable[Receivable],
    categories: Iterable[Category],
    logger: Logger,
    honor_active_in_history: bool = False,
) -> DREComparison:
    """Compute the DRE for a month and the month before it."""
    payables = list(payables)
    receivables = list(receivables)
    categories = list(categories)
    current = compute_dre(
        year,
        month,
        payables=payables,
        receivables=receivables,
        categories=categories,
        logger=logger,
        honor_active_in_history=honor_active_in_history,
    )
    prev_year, prev_month = previous_month(year, month)
    previous = compute_dre(
        prev_year,
        prev_month,
        payables=payables,
        receivables=receivables,
        categories=categories,
        logger=logger,
        honor_active_in_history=honor_active_in_history,
    )
    return DREComparison(
        year=year,
        month=month,
        current=current,
        previous=previous,
        gross_revenue_change=percentage_change(
            current.gross_revenue,
            previous.gross_revenue,
        ),
        net_profit_change=percentage_change(
            current.net_profit,
            previous.net_profit,
            absolute_base=True,
        ),
    )


__all__ = ["compute_dre", "percentage_change", "compare_dre"]
