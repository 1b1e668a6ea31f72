"""Use case to compute headline dashboard statistics."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import load_snapshot
from src.domain.models import DashboardStats
from src.domain.services.summary import compute_dashboard_stats
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetDashboardStatsUseCase:
    """Compute revenue, expenses and due date counters."""

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

    def execute(
        self,
        start_date: str | None = None,
        end_date: str | None = None,
        company_id: str | None = None,
    ) -> DashboardStats:
        """Return dashboard statistics, bounded when both dates are given.

        Raises:
            ValueError: If a given range is malformed or reversed.
        """
        if start_date is not None and end_date is not None:
            validate_date_range(start_date, end_date)
        snapshot = load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )
        stats = compute_dashboard_stats(
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            today=self._today(),
            start_date=start_date,
            end_date=end_date,
            honor_active_in_history=self._settings.history_honors_active,
        )
        self._logger.info(
            f"Dashboard stats: revenue={stats.total_revenue}, "
            f"expenses={stats.total_expenses}"
        )
        return stats


__all__ = ["GetDashboardStatsUseCase"]
