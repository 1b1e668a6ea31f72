"""Domain models package."""

from .cashflow import (
    CashFlowAlert,
    CashFlowDataPoint,
    CashFlowKPIs,
    CashFlowSummary,
    CategoryExpense,
    DailyMovement,
    DashboardStats,
    DREComparison,
    DREData,
)
from .records import (
    BalanceAdjustment,
    Category,
    ManualEntry,
    Payable,
    Receivable,
)

__all__ = [
    "BalanceAdjustment",
    "Category",
    "ManualEntry",
    "Payable",
    "Receivable",
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
