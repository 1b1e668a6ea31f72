"""Tests for the monthly income statement."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import Category, Payable, Receivable
from src.domain.services.dre import compare_dre, compute_dre, percentage_change


CATEGORIES = [
    Category(id="sales", name="Sales", type="income", dre_category="revenue"),
    Category(id="tax", name="Taxes", type="income", dre_category="deductions"),
    Category(id="cogs", name="Goods", dre_category="costs"),
    Category(
        id="admin",
        name="Admin",
        dre_category="operational_expenses",
    ),
]


def _received(receivable_id, amount, day, category_id="sales", **kw):
    return Receivable(
        id=receivable_id,
        description=receivable_id,
        amount=Decimal(amount),
        due_date=day,
        status="received",
        received_date=day,
        category_id=category_id,
        **kw,
    )


def _paid(payable_id, amount, day, category_id="cogs", **kw):
    return Payable(
        id=payable_id,
        description=payable_id,
        amount=Decimal(amount),
        due_date=day,
        status="paid",
        payment_date=day,
        category_id=category_id,
        **kw,
    )


def test_gross_profit_is_revenue_minus_costs() -> None:
    """10,000 revenue and 4,000 costs give a 6,000 gross profit."""
    dre = compute_dre(
        2024,
        3,
        payables=[_paid("p1", "4000", "2024-03-12")],
        receivables=[_received("r1", "10000", "2024-03-10")],
        categories=CATEGORIES,
        logger=MagicMock(),
    )

    assert dre.gross_revenue == Decimal("10000")
    assert dre.costs == Decimal("4000")
    assert dre.gross_profit == Decimal("6000")
    assert dre.net_profit == Decimal("6000")
    assert dre.tax_expense == Decimal("0")


def test_statement_lines_cascade() -> None:
    logger = MagicMock()
    receivables = [
        _received("r1", "10000", "2024-03-10", discount=Decimal("100")),
        _received("r2", "500", "2024-03-11", category_id="tax"),
        _received("r3", "700", "2024-03-12", category_id="unknown"),
        Receivable(
            id="pending",
            description="pending",
            amount=Decimal("999"),
            due_date="2024-03-15",
            category_id="sales",
        ),
        _received("april", "1", "2024-04-01"),
    ]
    payables = [
        _paid("p1", "4000", "2024-03-05", late_fees=Decimal("50")),
        _paid("p2", "1200", "2024-03-20", category_id="admin"),
        _paid("p3", "300", "2024-03-21", category_id=None),
    ]

    dre = compute_dre(
        2024,
        3,
        payables=payables,
        receivables=receivables,
        categories=CATEGORIES,
        logger=logger,
    )

    assert dre.gross_revenue == Decimal("9900")
    assert dre.deductions == Decimal("500")
    assert dre.net_revenue == Decimal("9400")
    assert dre.costs == Decimal("4050")
    assert dre.gross_profit == Decimal("5350")
    assert dre.operational_expenses == Decimal("1200")
    assert dre.operational_profit == Decimal("4150")
    assert dre.contribution_margin == Decimal("5350")
    assert dre.ebitda == dre.net_profit == Decimal("4150")
    logger.debug.assert_called_once()


def test_compare_dre_reports_changes_against_previous_month() -> None:
    receivables = [
        _received("feb", "8000", "2024-02-10"),
        _received("mar", "10000", "2024-03-10"),
    ]
    payables = [_paid("p1", "4000", "2024-03-12")]

    comparison = compare_dre(
        2024,
        3,
        payables=payables,
        receivables=receivables,
        categories=CATEGORIES,
        logger=MagicMock(),
    )

    assert comparison.previous.gross_revenue == Decimal("8000")
    assert comparison.gross_revenue_change == Decimal("25")
    assert comparison.net_profit_change == Decimal("-25")


def test_compare_dre_wraps_january_to_previous_december() -> None:
    comparison = compare_dre(
        2024,
        1,
        payables=[],
        receivables=[_received("dec", "100", "2023-12-31")],
        categories=CATEGORIES,
        logger=MagicMock(),
    )

    assert comparison.previous.gross_revenue == Decimal("100")
    assert comparison.current.gross_revenue == Decimal("0")


def test_percentage_change_handles_degenerate_bases() -> None:
    assert percentage_change(Decimal("50"), Decimal("0")) == Decimal("0")
    assert percentage_change(Decimal("50"), Decimal("-10")) == Decimal("0")
    assert percentage_change(
        Decimal("50"),
        Decimal("0"),
        absolute_base=True,
    ) == Decimal("0")
    assert percentage_change(
        Decimal("50"),
        Decimal("-100"),
        absolute_base=True,
    ) == Decimal("150")
