"""Use case to expand a recurring payable into future instances."""

from collections.abc import Callable

from src.application.ports.record_store import RecordStorePort
from src.domain.models import Payable
from src.domain.services.recurrence import (
    RecurrenceExpansion,
    expand_payable_recurrence,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings


class ExpandPayableRecurrenceUseCase:
    """Persist the future instances of a recurring payable."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        settings: LedgerSettings | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port used to read and write payables.
            logger: Optional logger compatible with logging.Logger-like API.
            settings: Optional settings; read from the environment if unset.
            id_factory: Optional callable returning ids for new payables.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._settings = settings or LedgerSettings.from_env()
        self._id_factory = id_factory

    def execute(self, payable: Payable) -> RecurrenceExpansion:
        """Expand and persist the instances of ``payable``.

        Instances already covered by the payable's watermark are not
        written again. Instances and the new watermark are written in one
        store call. Store errors propagate.

        Args:
            payable: Origin payable, as just created or updated.

        Returns:
            RecurrenceExpansion: Instances written and the new watermark.
        """
        expansion = expand_payable_recurrence(
            payable,
            logger=self._logger,
            max_instances=self._settings.recurrence_max_instances,
            id_factory=self._id_factory,
        )
        if not expansion.instances:
            self._logger.debug(
                f"No new recurrence instances for payable {payable.id}"
            )
            return expansion

        written = self._record_store.insert_recurrence_instances(
            expansion.instances,
            payable.id,
            expansion.group_id,
            expansion.expanded_through,
        )
        self._logger.info(
            f"Inserted {written} recurrence instances for payable "
            f"{payable.id} through {expansion.expanded_through}"
        )
        return expansion

    def execute_by_id(self, payable_id: str) -> RecurrenceExpansion | None:
        """Load a payable by id and expand it.

        Returns:
            RecurrenceExpansion | None: The expansion, or None when the
            payable does not exist.
        """
        payable = self._record_store.get_payable(payable_id)
        if payable is None:
            self._logger.warning(f"Payable {payable_id} not found")
            return None
        return self.execute(payable)


__all__ = ["ExpandPayableRecurrenceUseCase"]
