"""Use case to raise cash flow alerts for today."""

from collections.abc import Callable
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import load_snapshot
from src.domain.models import CashFlowAlert
from src.domain.services.alerts import generate_alerts
from src.domain.services.running_balance import compute_daily_points
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetCashFlowAlertsUseCase:
    """Evaluate balance and due date alerts against today."""

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

    def execute(self, company_id: str | None = None) -> list[CashFlowAlert]:
        """Return every alert raised by today's ledger state."""
        today = self._today()
        snapshot = load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )
        today_point = compute_daily_points(
            today,
            today,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            entries=snapshot.entries,
            honor_active_in_history=self._settings.history_honors_active,
        )[0]
        alerts = generate_alerts(
            current_balance=today_point.balance,
            payables=snapshot.payables,
            receivables=snapshot.receivables,
            today=today.isoformat(),
        )
        self._logger.info(
            f"Generated {len(alerts)} alerts; "
            f"balance today={today_point.balance}"
        )
        return alerts


__all__ = ["GetCashFlowAlertsUseCase"]
