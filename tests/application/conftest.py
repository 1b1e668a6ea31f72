"""Shared fixtures for application use case tests."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    BalanceAdjustment,
    Category,
    ManualEntry,
    Payable,
    Receivable,
)
from src.infrastructure.settings import LedgerSettings


def build_store(
    payables=(),
    receivables=(),
    entries=(),
    adjustments=(),
    categories=(),
) -> MagicMock:
    """Return a record store mock serving the given records."""
    store = MagicMock()
    store.list_payables.return_value = list(payables)
    store.list_receivables.return_value = list(receivables)
    store.list_manual_entries.return_value = list(entries)
    store.list_balance_adjustments.return_value = list(adjustments)
    store.list_categories.return_value = list(categories)
    return store


@pytest.fixture
def ledger_store() -> MagicMock:
    """Store with a small March ledger around TODAY."""
    return build_store(
        payables=[
            Payable(
                id="rent",
                description="Rent",
                amount=Decimal("800"),
                due_date="2024-03-05",
                status="paid",
                payment_date="2024-03-05",
                category_id="rent",
                company_id="acme",
            ),
            Payable(
                id="energy",
                description="Energy",
                amount=Decimal("150"),
                due_date="2024-03-10",
                category_id="utilities",
                company_id="acme",
            ),
            Payable(
                id="internet",
                description="Internet",
                amount=Decimal("100"),
                due_date="2024-03-18",
                category_id="utilities",
                company_id="acme",
            ),
        ],
        receivables=[
            Receivable(
                id="inv-1",
                description="Invoice 1",
                amount=Decimal("2000"),
                due_date="2024-03-01",
                status="received",
                received_date="2024-03-02",
                category_id="sales",
                company_id="acme",
            ),
            Receivable(
                id="inv-2",
                description="Invoice 2",
                amount=Decimal("500"),
                due_date="2024-03-15",
                category_id="sales",
                company_id="acme",
            ),
        ],
        entries=[
            ManualEntry(
                id="opening",
                date="2024-02-28",
                type="income",
                description="Opening cash",
                amount=Decimal("1000"),
                company_id="acme",
            ),
        ],
        adjustments=[
            BalanceAdjustment(
                id="b1",
                date="2024-03-01",
                balance_type="initial",
                description="Bank opening",
                amount=Decimal("1000"),
                company_id="acme",
            ),
        ],
        categories=[
            Category(
                id="sales",
                name="Sales",
                type="income",
                dre_category="revenue",
            ),
            Category(id="rent", name="Rent", dre_category="costs"),
            Category(
                id="utilities",
                name="Utilities",
                dre_category="operational_expenses",
            ),
        ],
    )


@pytest.fixture
def make_store():
    """Return the store factory for tests needing custom records."""
    return build_store


@pytest.fixture
def settings() -> LedgerSettings:
    return LedgerSettings()


@pytest.fixture
def today() -> date:
    return date(2024, 3, 15)
