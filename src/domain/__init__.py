"""Domain package for business rules and core models."""

from .models import (
    BalanceAdjustment,
    CashFlowAlert,
    CashFlowDataPoint,
    CashFlowKPIs,
    CashFlowSummary,
    Category,
    CategoryExpense,
    DailyMovement,
    DashboardStats,
    DREComparison,
    DREData,
    ManualEntry,
    Payable,
    Receivable,
)
from .policies import (
    dedupe_by_id,
    filter_by_company,
    visible_in_forward_view,
    visible_in_history,
)
from .services import (
    compare_dre,
    compute_daily_points,
    compute_kpis,
    compute_summary,
    expand_payable_recurrence,
    generate_alerts,
    merge_movements,
)

__all__ = [
    "BalanceAdjustment",
    "CashFlowAlert",
    "CashFlowDataPoint",
    "CashFlowKPIs",
    "CashFlowSummary",
    "Category",
    "CategoryExpense",
    "DailyMovement",
    "DashboardStats",
    "DREComparison",
    "DREData",
    "ManualEntry",
    "Payable",
    "Receivable",
    "dedupe_by_id",
    "filter_by_company",
    "visible_in_forward_view",
    "visible_in_history",
    "compare_dre",
    "compute_daily_points",
    "compute_kpis",
    "compute_summary",
    "expand_payable_recurrence",
    "generate_alerts",
    "merge_movements",
]
