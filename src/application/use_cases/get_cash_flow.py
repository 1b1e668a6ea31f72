"""Use case to compute the day-by-day running balance series."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import (
    load_snapshot,
    series_window,
)
from src.domain.models import CashFlowDataPoint
from src.domain.services.running_balance import compute_daily_points
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetCashFlowSeriesUseCase:
    """Compute the running balance for a period or an explicit range."""

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
    ) -> list[CashFlowDataPoint]:
        """Return a series centred on today with projected future days.

        Args:
            period: ``daily``, ``weekly`` or ``monthly``.
            company_id: Optional company filter.

        Returns:
            list[CashFlowDataPoint]: One point per day of the window.
        """
        today = self._today()
        start, end = series_window(period, today)
        return self._compute(start, end, company_id, project_after=today)

    def execute_range(
        self,
        start_date: str,
        end_date: str,
        company_id: str | None = None,
    ) -> list[CashFlowDataPoint]:
        """Return the series for an inclusive range, never projected.

        Raises:
            ValueError: If the range is malformed or reversed.
        """
        start, end = validate_date_range(start_date, end_date)
        return self._compute(start, end, company_id, project_after=None)

    def _compute(
        self,
        start: date,
        end: date,
        company_id: str | None,
        project_after: date | None,
    ) -> list[CashFlowDataPoint]:
        snapshot = load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )
        points = compute_daily_points(
            start,
            end,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            project_after=project_after,
            honor_active_in_history=self._settings.history_honors_active,
        )
        if points:
            self._logger.info(
                f"Cash flow series {start} to {end}: opening="
                f"{points[0].initial_balance}, closing={points[-1].balance}"
            )
        return points


__all__ = ["GetCashFlowSeriesUseCase"]
