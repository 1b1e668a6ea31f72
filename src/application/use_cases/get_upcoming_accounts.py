"""Use case to list payables and receivables due soon."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import load_snapshot
from src.domain.models import Payable, Receivable
from src.domain.services.summary import select_upcoming
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


@dataclass(frozen=True)
class UpcomingAccounts:
    """Open accounts due soon.

    Attributes:
        payables: Pending payables, earliest due first.
        receivables: Pending receivables, earliest due first.
    """

    payables: list[Payable]
    receivables: list[Receivable]


class GetUpcomingAccountsUseCase:
    """Select active open accounts due in a range or the coming week."""

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
    ) -> UpcomingAccounts:
        """Return upcoming payables and receivables.

        Without a range, everything due up to a week from today is
        returned, overdue accounts included.
        """
        if start_date is not None and end_date is not None:
            validate_date_range(start_date, end_date)
        snapshot = load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )
        today = self._today()
        upcoming = UpcomingAccounts(
            payables=select_upcoming(
                snapshot.payables,
                today=today,
                start_date=start_date,
                end_date=end_date,
            ),
            receivables=select_upcoming(
                snapshot.receivables,
                today=today,
                start_date=start_date,
                end_date=end_date,
            ),
        )
        self._logger.info(
            f"Upcoming accounts: {len(upcoming.payables)} payables, "
            f"{len(upcoming.receivables)} receivables"
        )
        return upcoming


__all__ = ["GetUpcomingAccountsUseCase", "UpcomingAccounts"]
