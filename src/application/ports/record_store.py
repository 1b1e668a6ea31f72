"""Port for reading ledger records and writing recurrence instances."""

from typing import Protocol

from src.domain.models import (
    BalanceAdjustment,
    Category,
    ManualEntry,
    Payable,
    Receivable,
)


class RecordStorePort(Protocol):
    """Port exposing the persisted records the engine aggregates.

    Every list operation is scoped to a company when ``company_id`` is
    given, and returns all records otherwise.
    """

    def list_payables(self, company_id: str | None = None) -> list[Payable]:
        """Return payables, active and inactive."""

    def get_payable(self, payable_id: str) -> Payable | None:
        """Return one payable by id, or None when it does not exist."""

    def list_receivables(
        self,
        company_id: str | None = None,
    ) -> list[Receivable]:
        """Return receivables, active and inactive."""

    def list_manual_entries(
        self,
        company_id: str | None = None,
    ) -> list[ManualEntry]:
        """Return manual cash flow entries."""

    def list_balance_adjustments(
        self,
        company_id: str | None = None,
    ) -> list[BalanceAdjustment]:
        """Return balance adjustments."""

    def list_categories(self) -> list[Category]:
        """Return every category."""

    def insert_recurrence_instances(
        self,
        instances: list[Payable],
        origin_id: str,
        group_id: str,
        expanded_through: str | None,
    ) -> int:
        """Write instances and the origin's watermark atomically.

        Returns the number of instances written. Nothing is committed when
        either write fails.
        """


__all__ = ["RecordStorePort"]
