"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.adapters.interface.streamlit import app
from src.domain.models import (
    CashFlowAlert,
    CashFlowDataPoint,
    DREComparison,
    DREData,
)


def _dre(revenue: str) -> DREData:
    values = {
        field: Decimal("0")
        for field in (
            "deductions",
            "net_revenue",
            "costs",
            "gross_profit",
            "operational_expenses",
            "operational_profit",
            "ebitda",
            "net_profit",
            "contribution_margin",
        )
    }
    return DREData(gross_revenue=Decimal(revenue), **values)


def _comparison() -> DREComparison:
    return DREComparison(
        year=2024,
        month=3,
        current=_dre("2000"),
        previous=_dre("1000"),
        gross_revenue_change=Decimal("100"),
        net_profit_change=Decimal("-5"),
    )


def test_fetch_summary_invokes_use_case(monkeypatch):
    """_fetch_summary should build the store and run the period summary."""
    fake_summary = SimpleNamespace(net_flow=Decimal("10"))

    class _FakeUseCase:
        def __init__(self, record_store):
            assert record_store == "store"

        def execute_period(self, period):
            assert period == "weekly"
            return fake_summary

    monkeypatch.setattr(app, "build_record_store", lambda: "store")
    monkeypatch.setattr(app, "GetCashFlowSummaryUseCase", _FakeUseCase)

    assert app._fetch_summary("weekly") is fake_summary


def test_load_movements_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_movements."""
    movements = ["cached"]
    monkeypatch.setattr(
        app,
        "_fetch_movements",
        lambda start, end: movements,
    )

    assert app._load_movements("2031-01-01", "2031-01-31") == movements


def test_prepare_series_chart_data_labels_projection():
    points = [
        CashFlowDataPoint(
            date="2024-03-15",
            income=Decimal("500"),
            expense=Decimal("0"),
            balance=Decimal("2550"),
            initial_balance=Decimal("2050"),
            final_balance=Decimal("2550"),
        ),
        CashFlowDataPoint(
            date="2024-03-16",
            income=Decimal("0"),
            expense=Decimal("0"),
            balance=Decimal("2550"),
            initial_balance=Decimal("2550"),
            final_balance=Decimal("2550"),
            projected=True,
        ),
    ]

    data = app._prepare_series_chart_data(points)

    assert [row["kind"] for row in data] == ["Actual", "Projected"]
    assert data[0]["balance"] == 2550.0
    assert data[0]["balance_label"] == "R$ 2,550.00"


def test_dre_table_lists_every_line():
    rows = app._dre_table(_comparison())

    assert [row["Line"] for row in rows] == [
        label for label, _ in app.DRE_ROWS
    ]
    assert rows[0] == {
        "Line": "Gross revenue",
        "Current": "R$ 2,000.00",
        "Previous": "R$ 1,000.00",
    }


def test_format_percent_signs_positive_changes():
    assert app._format_percent(Decimal("12.345")) == "+12.3%"
    assert app._format_percent(Decimal("-5")) == "-5.0%"


class _FakeColumn:
    def __init__(self, owner) -> None:
        self._owner = owner

    def metric(self, label, value, delta=None, **_kwargs):
        self._owner.metrics[label] = (value, delta)


class _FakeSidebar:
    def __init__(self, choices, dates=()) -> None:
        self._choices = choices
        self._dates = list(dates)

    def selectbox(self, label, options):
        return self._choices.get(label, options[0])

    def date_input(self, label, value):
        return self._dates.pop(0) if self._dates else value

    def number_input(self, label, value, **_kwargs):
        return self._choices.get(label, value)


class _FakeStreamlit:
    def __init__(self, choices=None, dates=()) -> None:
        self.sidebar = _FakeSidebar(choices or {}, dates)
        self.config_called = False
        self.title_called = False
        self.metrics: dict[str, tuple] = {}
        self.subheaders: list[str] = []
        self.captions: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.successes: list[str] = []
        self.dataframe_payload = None
        self.chart = None

    def set_page_config(self, **kwargs):
        self.config_called = True
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_called = True

    def columns(self, count: int):
        return [_FakeColumn(self) for _ in range(count)]

    def subheader(self, text: str):
        self.subheaders.append(text)

    def caption(self, text: str):
        self.captions.append(text)

    def info(self, text: str):
        self.captions.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def dataframe(self, data, **kwargs):
        self.dataframe_payload = (data, kwargs)

    def altair_chart(self, chart, **kwargs):
        self.chart = chart


def _summary():
    return SimpleNamespace(
        total_income=Decimal("3000"),
        total_income_pending=Decimal("500"),
        total_expense=Decimal("800"),
        total_expense_pending=Decimal("250"),
        current_balance=Decimal("2200"),
        projected_balance=Decimal("1450"),
    )


def _kpis():
    return SimpleNamespace(
        immediate_liquidity=Decimal("25.5"),
        delinquency_rate=Decimal("0.25"),
        burn_rate=Decimal("150"),
    )


def _patch_common(monkeypatch, fake_st):
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", lambda: MagicMock())


def test_main_renders_dashboard(monkeypatch):
    """The dashboard shows metrics and routes alerts by severity."""
    fake_st = _FakeStreamlit({"Period": "Weekly"})
    _patch_common(monkeypatch, fake_st)
    requested = []
    monkeypatch.setattr(
        app,
        "_load_summary",
        lambda period: requested.append(period) or _summary(),
    )
    monkeypatch.setattr(app, "_load_kpis", lambda period: _kpis())
    monkeypatch.setattr(app, "_load_series", lambda period: [])
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (True, None),
    )
    monkeypatch.setattr(
        app,
        "_load_alerts",
        lambda day: [
            CashFlowAlert(
                id="negative-balance",
                type="negative_balance",
                message="Negative balance: R$ -10.00",
                severity="high",
                date="2024-03-15",
            ),
            CashFlowAlert(
                id="payable-due-today-x",
                type="payable_due_today",
                message="Pay TODAY: X (R$ 5.00)",
                severity="medium",
                date="2024-03-15",
            ),
        ],
    )

    app.main()

    assert fake_st.config_called
    assert fake_st.title_called
    assert requested == ["weekly"]
    assert fake_st.metrics["Income"] == (
        "R$ 3,000.00",
        "pending R$ 500.00",
    )
    assert fake_st.metrics["Delinquency"][0] == "25.0%"
    assert fake_st.errors == ["Negative balance: R$ -10.00"]
    assert fake_st.warnings == ["Pay TODAY: X (R$ 5.00)"]


def test_main_warns_when_charts_unavailable(monkeypatch):
    fake_st = _FakeStreamlit()
    _patch_common(monkeypatch, fake_st)
    monkeypatch.setattr(app, "_load_summary", lambda period: _summary())
    monkeypatch.setattr(app, "_load_kpis", lambda period: _kpis())
    monkeypatch.setattr(app, "_load_alerts", lambda day: [])
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "numpy missing"),
    )

    app.main()

    assert fake_st.warnings == ["numpy missing"]
    assert fake_st.chart is None
    assert fake_st.successes == ["No alerts today."]


def test_main_renders_movements(monkeypatch):
    fake_st = _FakeStreamlit(
        {"Page": "Movements"},
        dates=[date(2024, 3, 1), date(2024, 3, 31)],
    )
    _patch_common(monkeypatch, fake_st)
    movement = SimpleNamespace(
        date="2024-03-05",
        description="Rent",
        category_name="Rent",
        type="expense",
        status="paid",
        effective_amount=Decimal("800"),
    )
    monkeypatch.setattr(
        app,
        "_load_movements",
        lambda start, end: [movement] if start == "2024-03-01" else [],
    )

    app.main()

    table_data, kwargs = fake_st.dataframe_payload
    assert table_data[0]["Amount"] == "R$ 800.00"
    assert kwargs["hide_index"] is True
    assert fake_st.captions == ["1 movements shown"]


def test_main_rejects_reversed_movement_range(monkeypatch):
    fake_st = _FakeStreamlit(
        {"Page": "Movements"},
        dates=[date(2024, 3, 31), date(2024, 3, 1)],
    )
    _patch_common(monkeypatch, fake_st)
    loader = MagicMock()
    monkeypatch.setattr(app, "_load_movements", loader)

    app.main()

    loader.assert_not_called()
    assert fake_st.warnings == ["Start date must not be after end date."]


def test_main_renders_dre(monkeypatch):
    fake_st = _FakeStreamlit({"Page": "DRE", "Year": 2024, "Month": 3})
    _patch_common(monkeypatch, fake_st)
    calls = []
    monkeypatch.setattr(
        app,
        "_load_dre",
        lambda year, month: calls.append((year, month)) or _comparison(),
    )

    app.main()

    assert calls == [(2024, 3)]
    assert fake_st.subheaders == ["DRE 2024-03"]
    assert fake_st.metrics["Gross revenue"] == ("R$ 2,000.00", "+100.0%")
    assert fake_st.metrics["Net profit"][1] == "-5.0%"
