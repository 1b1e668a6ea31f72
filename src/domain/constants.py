"""Domain constants for the cash flow ledger."""

PAYABLE_PENDING = "pending"
PAYABLE_PAID = "paid"
PAYABLE_OVERDUE = "overdue"

RECEIVABLE_PENDING = "pending"
RECEIVABLE_RECEIVED = "received"
RECEIVABLE_OVERDUE = "overdue"

ENTRY_CONFIRMED = "confirmed"
ENTRY_PENDING = "pending"
ENTRY_OVERDUE = "overdue"

INCOME = "income"
EXPENSE = "expense"

MOVEMENT_NORMAL = "normal"
MOVEMENT_BALANCE_ADJUSTMENT = "balance_adjustment"
MOVEMENT_WITHDRAWAL = "withdrawal"
MOVEMENT_INITIAL_BALANCE = "initial_balance"

BALANCE_INITIAL = "initial"
BALANCE_FINAL = "final"

RECURRENCE_NONE = "none"
RECURRENCE_WEEKLY = "weekly"
RECURRENCE_MONTHLY = "monthly"
RECURRENCE_YEARLY = "yearly"
RECURRING_KINDS = (RECURRENCE_WEEKLY, RECURRENCE_MONTHLY, RECURRENCE_YEARLY)
MAX_RECURRENCE_INSTANCES = 100

DRE_REVENUE = "revenue"
DRE_DEDUCTIONS = "deductions"
DRE_COSTS = "costs"
DRE_OPERATIONAL_EXPENSES = "operational_expenses"

PERIOD_DAILY = "daily"
PERIOD_WEEKLY = "weekly"
PERIOD_MONTHLY = "monthly"
# Lookback ending today used by summaries and movement listings.
PERIOD_LOOKBACK_DAYS = {
    PERIOD_DAILY: 0,
    PERIOD_WEEKLY: 28,
    PERIOD_MONTHLY: 90,
}
# Half-width of the projected series centred on today.
PERIOD_SERIES_WINDOW_DAYS = {
    PERIOD_DAILY: 7,
    PERIOD_WEEKLY: 28,
    PERIOD_MONTHLY: 90,
}
LIQUIDITY_HORIZON_DAYS = 7
UPCOMING_HORIZON_DAYS = 7

SEVERITY_LOW = "low"
SEVERITY_MEDIUM = "medium"
SEVERITY_HIGH = "high"

ALERT_NEGATIVE_BALANCE = "negative_balance"
ALERT_OVERDUE_ACCOUNT = "overdue_account"
ALERT_LATE_RECEIPT = "late_receipt"

NO_CATEGORY_LABEL = "No category"
BALANCE_ADJUSTMENT_LABEL = "Balance adjustment"
DEFAULT_ACCOUNT_LABEL = "Main account"
NOT_AVAILABLE = "N/A"


__all__ = [name for name in dir() if name.isupper()]
