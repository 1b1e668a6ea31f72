"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_cash_flow import GetCashFlowSeriesUseCase
from src.application.use_cases.get_cash_flow_alerts import (
    GetCashFlowAlertsUseCase,
)
from src.application.use_cases.get_cash_flow_kpis import (
    GetCashFlowKPIsUseCase,
)
from src.application.use_cases.get_cash_flow_summary import (
    GetCashFlowSummaryUseCase,
)
from src.application.use_cases.get_daily_movements import (
    GetDailyMovementsUseCase,
)
from src.application.use_cases.get_dre import GetDREUseCase
from src.domain.constants import SEVERITY_HIGH
from src.domain.models import (
    CashFlowAlert,
    CashFlowDataPoint,
    CashFlowKPIs,
    CashFlowSummary,
    DailyMovement,
    DREComparison,
)
from src.infrastructure.container import build_record_store
from src.infrastructure.logging.logger import get_usage_logger


PERIOD_LABELS = {
    "Daily": "daily",
    "Weekly": "weekly",
    "Monthly": "monthly",
}

DRE_ROWS = (
    ("Gross revenue", "gross_revenue"),
    ("Deductions", "deductions"),
    ("Net revenue", "net_revenue"),
    ("Costs", "costs"),
    ("Gross profit", "gross_profit"),
    ("Operational expenses", "operational_expenses"),
    ("Operational profit", "operational_profit"),
    ("Net profit", "net_profit"),
)


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas are importable for Altair charts.

    Returns:
        tuple[bool, str | None]: Whether charts can render, and an error
        message when they cannot.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, (
            "numpy is installed but incomplete (missing ndarray). "
            "Reinstall numpy to render charts."
        )
    if not hasattr(pandas, "Timestamp"):
        return False, (
            "pandas is installed but incomplete (missing Timestamp). "
            "Reinstall pandas to render charts."
        )
    return True, None


def _fetch_summary(period: str) -> CashFlowSummary:
    """Fetch the period summary from the ledger database."""
    use_case = GetCashFlowSummaryUseCase(build_record_store())
    return use_case.execute_period(period)


@st.cache_data(show_spinner=False)
def _load_summary(period: str) -> CashFlowSummary:
    """Cached wrapper around _fetch_summary for Streamlit sessions."""
    return _fetch_summary(period)


def _fetch_kpis(period: str) -> CashFlowKPIs:
    """Fetch KPIs over the projected series."""
    use_case = GetCashFlowKPIsUseCase(build_record_store())
    return use_case.execute_period(period)


@st.cache_data(show_spinner=False)
def _load_kpis(period: str) -> CashFlowKPIs:
    """Cached wrapper around _fetch_kpis."""
    return _fetch_kpis(period)


def _fetch_series(period: str) -> list[CashFlowDataPoint]:
    """Fetch the running balance series centred on today."""
    use_case = GetCashFlowSeriesUseCase(build_record_store())
    return use_case.execute_period(period)


@st.cache_data(show_spinner=False)
def _load_series(period: str) -> list[CashFlowDataPoint]:
    """Cached wrapper around _fetch_series."""
    return _fetch_series(period)


def _fetch_alerts() -> list[CashFlowAlert]:
    """Fetch today's alerts."""
    use_case = GetCashFlowAlertsUseCase(build_record_store())
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_alerts(day: date) -> list[CashFlowAlert]:
    """Cached wrapper around _fetch_alerts, keyed by day."""
    _ = day
    return _fetch_alerts()


def _fetch_movements(start_date: str, end_date: str) -> list[DailyMovement]:
    """Fetch merged movements for a range."""
    use_case = GetDailyMovementsUseCase(build_record_store())
    return use_case.execute_range(start_date, end_date)


@st.cache_data(show_spinner=False)
def _load_movements(start_date: str, end_date: str) -> list[DailyMovement]:
    """Cached wrapper around _fetch_movements."""
    return _fetch_movements(start_date, end_date)


def _fetch_dre(year: int, month: int) -> DREComparison:
    """Fetch the DRE comparison for a month."""
    use_case = GetDREUseCase(build_record_store())
    return use_case.execute(year, month)


@st.cache_data(show_spinner=False)
def _load_dre(year: int, month: int) -> DREComparison:
    """Cached wrapper around _fetch_dre."""
    return _fetch_dre(year, month)


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"R$ {value:,.2f}"


def _format_percent(value: Decimal) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


def _prepare_series_chart_data(
    points: Sequence[CashFlowDataPoint],
) -> list[dict[str, str | float]]:
    """Convert series points into Altair-ready records."""
    return [
        {
            "date": point.date,
            "balance": float(point.balance),
            "income": float(point.income),
            "expense": float(point.expense),
            "kind": "Projected" if point.projected else "Actual",
            "balance_label": _format_currency(point.balance),
        }
        for point in points
    ]


def _render_balance_chart(points: Sequence[CashFlowDataPoint]) -> None:
    """Render the running balance as a line chart."""
    st.subheader("Running balance")
    if not points:
        st.info("No cash flow data available for the chart.")
        return
    data = _prepare_series_chart_data(points)
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("balance:Q", title="Balance"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Actual", "Projected"],
                range=["#1b9aaa", "#f4a261"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("balance_label:N"),
            alt.Tooltip("income:Q", format=",.2f"),
            alt.Tooltip("expense:Q", format=",.2f"),
        ],
    ).properties(height=360)
    st.altair_chart(chart, width="stretch")


def _render_metrics(summary: CashFlowSummary, kpis: CashFlowKPIs) -> None:
    """Render headline summary and KPI metrics."""
    income_col, expense_col, balance_col = st.columns(3)
    income_col.metric(
        "Income",
        _format_currency(summary.total_income),
        f"pending {_format_currency(summary.total_income_pending)}",
    )
    expense_col.metric(
        "Expense",
        _format_currency(summary.total_expense),
        f"pending {_format_currency(summary.total_expense_pending)}",
        delta_color="inverse",
    )
    balance_col.metric(
        "Current balance",
        _format_currency(summary.current_balance),
        f"projected {_format_currency(summary.projected_balance)}",
    )
    liquidity_col, delinquency_col, burn_col = st.columns(3)
    liquidity_col.metric(
        "Immediate liquidity",
        f"{kpis.immediate_liquidity:.2f}",
    )
    delinquency_col.metric(
        "Delinquency",
        f"{kpis.delinquency_rate * 100:.1f}%",
    )
    burn_col.metric("Burn rate", _format_currency(kpis.burn_rate))


def _render_alerts(alerts: Sequence[CashFlowAlert]) -> None:
    """Render alerts, high severity as errors."""
    st.subheader("Alerts")
    if not alerts:
        st.success("No alerts today.")
        return
    for alert in alerts:
        if alert.severity == SEVERITY_HIGH:
            st.error(alert.message)
        else:
            st.warning(alert.message)


def _render_movements(movements: Sequence[DailyMovement]) -> None:
    """Render the merged ledger table."""
    st.subheader("Movements")
    st.caption(f"{len(movements)} movements shown")
    data = [
        {
            "Date": movement.date,
            "Description": movement.description,
            "Category": movement.category_name,
            "Type": movement.type,
            "Status": movement.status,
            "Amount": _format_currency(movement.effective_amount),
        }
        for movement in movements
    ]
    st.dataframe(data, width="stretch", hide_index=True, height=420)


def _dre_table(comparison: DREComparison) -> list[dict[str, str]]:
    """Build DRE table rows for the current and previous month."""
    return [
        {
            "Line": label,
            "Current": _format_currency(getattr(comparison.current, field)),
            "Previous": _format_currency(
                getattr(comparison.previous, field)
            ),
        }
        for label, field in DRE_ROWS
    ]


def _render_dre(comparison: DREComparison) -> None:
    """Render the DRE comparison table."""
    st.subheader(f"DRE {comparison.year}-{comparison.month:02d}")
    revenue_col, profit_col = st.columns(2)
    revenue_col.metric(
        "Gross revenue",
        _format_currency(comparison.current.gross_revenue),
        _format_percent(comparison.gross_revenue_change),
    )
    profit_col.metric(
        "Net profit",
        _format_currency(comparison.current.net_profit),
        _format_percent(comparison.net_profit_change),
    )
    st.dataframe(_dre_table(comparison), width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Cash Flow Ledger", layout="wide")
    st.title("Cash Flow Ledger")

    page = st.sidebar.selectbox("Page", ["Dashboard", "Movements", "DRE"])
    get_usage_logger().info(f"dashboard page={page}")
    today = date.today()

    if page == "Dashboard":
        period_label = st.sidebar.selectbox("Period", list(PERIOD_LABELS))
        period = PERIOD_LABELS[period_label]
        _render_metrics(_load_summary(period), _load_kpis(period))
        charts_ok, charts_error = _check_altair_dependencies()
        if charts_ok:
            _render_balance_chart(_load_series(period))
        else:
            st.warning(charts_error)
        _render_alerts(_load_alerts(today))
    elif page == "Movements":
        start_date = st.sidebar.date_input("Start", value=today)
        end_date = st.sidebar.date_input("End", value=today)
        if start_date > end_date:
            st.warning("Start date must not be after end date.")
            return
        _render_movements(
            _load_movements(start_date.isoformat(), end_date.isoformat())
        )
    else:
        year = int(
            st.sidebar.number_input("Year", value=today.year, step=1)
        )
        month = int(
            st.sidebar.number_input(
                "Month",
                min_value=1,
                max_value=12,
                value=today.month,
                step=1,
            )
        )
        _render_dre(_load_dre(year, month))


if __name__ == "__main__":  # pragma: no cover
    main()
