"""CLI adapter printing a cash flow report.

The report period comes from ``REPORT_PERIOD`` (daily, weekly, monthly).
When both ``REPORT_START_DATE`` and ``REPORT_END_DATE`` are set, the
report covers that explicit range instead.
"""

from datetime import date
import os

from src.application.use_cases.get_cash_flow_alerts import (
    GetCashFlowAlertsUseCase,
)
from src.application.use_cases.get_cash_flow_kpis import (
    GetCashFlowKPIsUseCase,
)
from src.application.use_cases.get_cash_flow_summary import (
    GetCashFlowSummaryUseCase,
)
from src.infrastructure.container import build_record_store, build_settings
from src.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _parse_date(value: str | None, logger) -> str | None:
    """Validate an ISO date string.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        str | None: The date string, or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print summary, KPIs and alerts for the configured period."""
    logger = get_app_logger()
    settings = build_settings()
    record_store = build_record_store()
    period = os.getenv("REPORT_PERIOD", "monthly")
    start_date = _parse_date(os.getenv("REPORT_START_DATE"), logger)
    end_date = _parse_date(os.getenv("REPORT_END_DATE"), logger)
    get_usage_logger().info(
        f"cash_flow_report period={period} start={start_date} end={end_date}"
    )

    summary_use_case = GetCashFlowSummaryUseCase(
        record_store,
        logger=logger,
        settings=settings,
    )
    kpis_use_case = GetCashFlowKPIsUseCase(
        record_store,
        logger=logger,
        settings=settings,
    )
    alerts_use_case = GetCashFlowAlertsUseCase(
        record_store,
        logger=logger,
        settings=settings,
    )

    try:
        if start_date and end_date:
            label = f"{start_date} to {end_date}"
            summary = summary_use_case.execute_range(start_date, end_date)
            kpis = kpis_use_case.execute_range(start_date, end_date)
        else:
            label = period
            summary = summary_use_case.execute_period(period)
            kpis = kpis_use_case.execute_period(period)
    except ValueError as exc:
        logger.error(str(exc))
        return
    alerts = alerts_use_case.execute()

    print(f"Cash flow report ({label})")
    print(
        f"Income: confirmed={summary.total_income_confirmed}, "
        f"pending={summary.total_income_pending}"
    )
    print(
        f"Expense: confirmed={summary.total_expense_confirmed}, "
        f"pending={summary.total_expense_pending}"
    )
    print(
        f"Net flow={summary.net_flow}, "
        f"current balance={summary.current_balance}, "
        f"projected balance={summary.projected_balance}"
    )
    print(
        f"KPIs: average balance={kpis.average_balance:.2f}, "
        f"income vs expense={kpis.income_vs_expense:.2%}, "
        f"delinquency={kpis.delinquency_rate:.2%}, "
        f"liquidity={kpis.immediate_liquidity:.2f}, "
        f"burn rate={kpis.burn_rate:.2f}"
    )
    print(f"Alerts: {len(alerts)}")
    for alert in alerts:
        print(f"[{alert.severity}] {alert.message}")


if __name__ == "__main__":  # pragma: no cover
    main()
