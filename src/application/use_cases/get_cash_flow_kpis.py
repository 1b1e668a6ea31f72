"""Use case to compute cash flow KPI ratios."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import (
    LedgerSnapshot,
    load_snapshot,
    series_window,
)
from src.domain.models import CashFlowKPIs
from src.domain.services.running_balance import (
    balance_on,
    compute_daily_points,
)
from src.domain.services.summary import compute_kpis
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetCashFlowKPIsUseCase:
    """Compute KPIs over a projected period or a closed range."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        settings: LedgerSettings | None = None,
        today_provider: Callable[[], date] | None = None,
    ) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._settings = settings or LedgerSettings.from_env()
        self._today = today_provider or date.today

    def execute_period(
        self,
        period: str | None = None,
        company_id: str | None = None,
    ) -> CashFlowKPIs:
        """Return KPIs over the series centred on today."""
        today = self._today()
        start, end = series_window(period, today)
        snapshot = self._load(company_id)
        points = compute_daily_points(
            start,
            end,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            project_after=today,
            honor_active_in_history=self._settings.history_honors_active,
        )
        current_balance = balance_on(points, today.isoformat())
        return self._kpis(snapshot, points, today, current_balance)

    def execute_range(
        self,
        start_date: str,
        end_date: str,
        company_id: str | None = None,
    ) -> CashFlowKPIs:
        """Return KPIs over an inclusive range.

        The current balance is the balance at the end of today when today
        falls inside the range, else the closing balance of the range.

        Raises:
            ValueError: If the range is malformed or reversed.
        """
        start, end = validate_date_range(start_date, end_date)
        today = self._today()
        snapshot = self._load(company_id)
        points = compute_daily_points(
            start,
            end,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            honor_active_in_history=self._settings.history_honors_active,
        )
        current_balance = balance_on(points, today.isoformat())
        if current_balance is None:
            current_balance = points[-1].balance
        return self._kpis(snapshot, points, today, current_balance)

    def _load(self, company_id: str | None) -> LedgerSnapshot:
        return load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )

    def _kpis(self, snapshot, points, today, current_balance) -> CashFlowKPIs:
        kpis = compute_kpis(
            points,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            today=today,
            current_balance=current_balance,
        )
        self._logger.info(
            f"KPIs computed: average_balance={kpis.average_balance}, "
            f"delinquency={kpis.delinquency_rate}, "
            f"liquidity={kpis.immediate_liquidity}"
        )
        return kpis


__all__ = ["GetCashFlowKPIsUseCase"]
