"""Use case to break expenses down by category."""

from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.ledger_snapshot import load_snapshot
from src.domain.models import CategoryExpense
from src.domain.services.summary import compute_category_expenses
from src.domain.services.validation import validate_date_range
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class GetCategoryExpensesUseCase:
    """List expense categories by amount for a date range."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        settings: LedgerSettings | None = None,
    ) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._settings = settings or LedgerSettings.from_env()

    def execute(
        self,
        start_date: str,
        end_date: str,
        company_id: str | None = None,
    ) -> list[CategoryExpense]:
        validate_date_range(start_date, end_date)
        snapshot = load_snapshot(
            self._record_store,
            company_id or self._settings.company_id,
            self._logger,
        )
        breakdown = compute_category_expenses(
            start_date,
            end_date,
            payables=snapshot.payables,
            entries=snapshot.entries,
            categories=snapshot.categories,
            honor_active_in_history=self._settings.history_honors_active,
        )
        self._logger.info(
            f"Category expenses {start_date} to {end_date}: "
            f"{len(breakdown)} categories"
        )
        return breakdown


__all__ = ["GetCategoryExpensesUseCase"]
