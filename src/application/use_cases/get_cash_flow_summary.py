"""Use case to summarize confirmed and pending cash flow."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import (
    LedgerSnapshot,
    load_snapshot,
    lookback_window,
)
from src.domain.models import CashFlowSummary
from src.domain.services.running_balance import compute_daily_points
from src.domain.services.summary import (
    compute_dashboard_stats,
    compute_summary,
)
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetCashFlowSummaryUseCase:
    """Summarize a named period or an explicit date range."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        settings: LedgerSettings | None = None,
        today_provider: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            settings: Optional settings; read from the environment if unset.
            today_provider: Optional callable returning today's date.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._settings = settings or LedgerSettings.from_env()
        self._today = today_provider or date.today

    def execute_period(
        self,
        period: str | None = None,
        company_id: str | None = None,
    ) -> CashFlowSummary:
        """Summarize the named period ending today.

        The current balance is the running balance at the end of today.
        """
        start_date, end_date = lookback_window(period, self._today())
        start, end = validate_date_range(start_date, end_date)
        snapshot = self._load(company_id)
        points = self._series(snapshot, start, end)
        current_balance = points[-1].balance
        return self._summarize(
            start_date,
            end_date,
            snapshot,
            points,
            current_balance,
        )

    def execute_range(
        self,
        start_date: str,
        end_date: str,
        company_id: str | None = None,
    ) -> CashFlowSummary:
        """Summarize an inclusive date range.

        The current balance is the all-time settled balance.

        Raises:
            ValueError: If the range is malformed or reversed.
        """
        start, end = validate_date_range(start_date, end_date)
        snapshot = self._load(company_id)
        points = self._series(snapshot, start, end)
        stats = compute_dashboard_stats(
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            today=self._today(),
            honor_active_in_history=self._settings.history_honors_active,
        )
        return self._summarize(
            start_date,
            end_date,
            snapshot,
            points,
            stats.balance,
        )

    def _load(self, company_id: str | None) -> LedgerSnapshot:
        return load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )

    def _series(self, snapshot: LedgerSnapshot, start: date, end: date):
        return compute_daily_points(
            start,
            end,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            honor_active_in_history=self._settings.history_honors_active,
        )

    def _summarize(
        self,
        start_date: str,
        end_date: str,
        snapshot: LedgerSnapshot,
        points,
        current_balance,
    ) -> CashFlowSummary:
        summary = compute_summary(
            start_date,
            end_date,
            points=points,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            adjustments=snapshot.adjustments,
            current_balance=current_balance,
            honor_active_in_history=self._settings.history_honors_active,
        )
        self._logger.info(
            f"Summary {start_date} to {end_date}: "
            f"income={summary.total_income}, "
            f"expense={summary.total_expense}, net={summary.net_flow}"
        )
        return summary


__all__ = ["GetCashFlowSummaryUseCase"]
