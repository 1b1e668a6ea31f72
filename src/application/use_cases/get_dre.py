"""Use case to build the monthly income statement (DRE)."""

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import load_snapshot
from src.domain.models import DREComparison
from src.domain.services.dre import compare_dre
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetDREUseCase:
    """Compare a month's income statement with the previous month."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        settings: LedgerSettings | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            settings: Optional settings; read from the environment if unset.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._settings = settings or LedgerSettings.from_env()

    def execute(
        self,
        year: int,
        month: int,
        company_id: str | None = None,
    ) -> DREComparison:
        """Return the DRE for ``year``/``month`` and the month before.

        Raises:
            ValueError: If the month is outside 1..12.
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Invalid month: {month}")
        snapshot = load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )
        comparison = compare_dre(
            year,
            month,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            categories=snapshot.categories,
            logger=self._logger,
            honor_active_in_history=self._settings.history_honors_active,
        )
        self._logger.info(
            f"DRE {year}-{month:02d}: gross_revenue="
            f"{comparison.current.gross_revenue}, "
            f"net_profit={comparison.current.net_profit}"
        )
        return comparison


__all__ = ["GetDREUseCase"]
