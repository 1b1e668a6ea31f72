"""Use case to list the merged daily ledger."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import (
    load_snapshot,
    lookback_window,
)
from src.domain.models import DailyMovement
from src.domain.services.ledger import merge_movements
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetDailyMovementsUseCase:
    """Merge payables, receivables, entries and adjustments by day."""

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

    def execute(
        self,
        day: str,
        company_id: str | None = None,
    ) -> list[DailyMovement]:
        """Return the movements of a single day."""
        return self.execute_range(day, day, company_id)

    def execute_range(
        self,
        start_date: str,
        end_date: str,
        company_id: str | None = None,
    ) -> list[DailyMovement]:
        """Return the movements of an inclusive date range.

        Raises:
            ValueError: If the range is malformed or reversed.
        """
        validate_date_range(start_date, end_date)
        snapshot = load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )
        movements = merge_movements(
            start_date,
            end_date,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            adjustments=snapshot.adjustments,
            categories=snapshot.categories,
            honor_active_in_history=self._settings.history_honors_active,
        )
        self._logger.info(
            f"Merged {len(movements)} movements from {start_date} "
            f"to {end_date}"
        )
        return movements

    def execute_period(
        self,
        period: str | None = None,
        company_id: str | None = None,
    ) -> list[DailyMovement]:
        """Return the movements of a named period ending today."""
        start_date, end_date = lookback_window(period, self._today())
        return self.execute_range(start_date, end_date, company_id)


__all__ = ["GetDailyMovementsUseCase"]
