"""Domain services package."""

from .alerts import generate_alerts
from .dre import compare_dre, compute_dre, percentage_change
from .ledger import merge_movements
from .recurrence import RecurrenceExpansion, expand_payable_recurrence
from .running_balance import (
    balance_on,
    compute_daily_points,
    compute_initial_balance,
)
from .summary import (
    compute_category_expenses,
    compute_dashboard_stats,
    compute_delinquency_rate,
    compute_kpis,
    compute_summary,
    select_upcoming,
)
from .validation import normalize_period, validate_date_range

__all__ = [
    "generate_alerts",
    "compare_dre",
    "compute_dre",
    "percentage_change",
    "merge_movements",
    "RecurrenceExpansion",
    "expand_payable_recurrence",
    "balance_on",
    "compute_daily_points",
    "compute_initial_balance",
    "compute_category_expenses",
    "compute_dashboard_stats",
    "compute_delinquency_rate",
    "compute_kpis",
    "compute_summary",
    "select_upcoming",
    "normalize_period",
    "validate_date_range",
]
