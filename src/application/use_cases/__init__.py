"""Application use cases package."""

from .expand_recurrence import ExpandPayableRecurrenceUseCase
from .get_daily_movements import GetDailyMovementsUseCase
from .get_cash_flow import GetCashFlowSeriesUseCase
from .get_cash_flow_summary import GetCashFlowSummaryUseCase
from .get_cash_flow_kpis import GetCashFlowKPIsUseCase
from .get_cash_flow_alerts import GetCashFlowAlertsUseCase
from .get_dre import GetDREUseCase
from .get_dashboard_stats import GetDashboardStatsUseCase
from .get_category_expenses import GetCategoryExpensesUseCase
from .get_upcoming_accounts import (
    GetUpcomingAccountsUseCase,
    UpcomingAccounts,
)

__all__ = [
    "ExpandPayableRecurrenceUseCase",
    "GetDailyMovementsUseCase",
    "GetCashFlowSeriesUseCase",
    "GetCashFlowSummaryUseCase",
    "GetCashFlowKPIsUseCase",
    "GetCashFlowAlertsUseCase",
    "GetDREUseCase",
    "GetDashboardStatsUseCase",
    "GetCategoryExpensesUseCase",
    "GetUpcomingAccountsUseCase",
    "UpcomingAccounts",
]
