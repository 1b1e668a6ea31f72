"""SQLAlchemy-backed record store for ledger records."""

from dataclasses import asdict

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.domain.constants import (
    ENTRY_CONFIRMED,
    MOVEMENT_NORMAL,
    PAYABLE_PENDING,
    RECEIVABLE_PENDING,
    RECURRENCE_NONE,
)
from src.domain.models import (
    BalanceAdjustment,
    Category,
    ManualEntry,
    Payable,
    Receivable,
)
from src.utils.date_utils import coerce_iso_date
from src.utils.decimal_utils import coerce_decimal, coerce_optional_decimal


SELECT_PAYABLES_SQL = """
SELECT id, description, amount, due_date, payment_date, status,
       late_fees, discount, recurrence, recurrence_end, active,
       company_id, category_id, supplier_id, cost_center_id,
       payment_method, notes, recurrence_group_id,
       recurrence_expanded_through
FROM accounts_payable
WHERE 1=1
"""

SELECT_RECEIVABLES_SQL = """
SELECT id, description, amount, due_date, received_date, status,
       discount, payment_method, recurrence, recurrence_period, active,
       company_id, category_id, client_id, notes
FROM accounts_receivable
WHERE 1=1
"""

SELECT_MANUAL_ENTRIES_SQL = """
SELECT id, date, competence_date, type, movement_type, description,
       category_id, subcategory_id, amount, gross_amount, fees,
       payment_method, account, status, document, cost_center,
       recurrence, due_date, actual_date, company_id
FROM cash_flow_entries
WHERE 1=1
"""

SELECT_BALANCE_ADJUSTMENTS_SQL = """
SELECT id, date, balance_type, description, amount, account, company_id
FROM balance_adjustments
WHERE 1=1
"""

SELECT_CATEGORIES_SQL = text(
    """
    SELECT id, name, type, dre_category
    FROM categories
    """
)

INSERT_PAYABLES_SQL = text(
    """
    INSERT INTO accounts_payable (
        id, description, amount, due_date, payment_date, status,
        late_fees, discount, recurrence, recurrence_end, active,
        company_id, category_id, supplier_id, cost_center_id,
        payment_method, notes, recurrence_group_id,
        recurrence_expanded_through
    )
    VALUES (
        :id, :description, :amount, :due_date, :payment_date, :status,
        :late_fees, :discount, :recurrence, :recurrence_end, :active,
        :company_id, :category_id, :supplier_id, :cost_center_id,
        :payment_method, :notes, :recurrence_group_id,
        :recurrence_expanded_through
    )
    """
)

UPDATE_RECURRENCE_WATERMARK_SQL = text(
    """
    UPDATE accounts_payable
    SET recurrence_group_id = :group_id,
        recurrence_expanded_through = :expanded_through
    WHERE id = :id
    """
)


class SqlAlchemyRecordStore(RecordStorePort):
    """Record store backed by the ledger database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def list_payables(self, company_id: str | None = None) -> list[Payable]:
        query, params = self._scoped_query(SELECT_PAYABLES_SQL, company_id)
        rows = self._fetch_all(query, params)
        payables = [self._payable_from_row(row) for row in rows]
        return sorted(payables, key=lambda row: (row.due_date, row.id))

    def get_payable(self, payable_id: str) -> Payable | None:
        query = text(SELECT_PAYABLES_SQL + " AND id = :id")
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            row = conn.execute(query, {"id": payable_id}).first()
        if not row:
            return None
        return self._payable_from_row(row)

    def list_receivables(
        self,
        company_id: str | None = None,
    ) -> list[Receivable]:
        query, params = self._scoped_query(SELECT_RECEIVABLES_SQL, company_id)
        rows = self._fetch_all(query, params)
        receivables = [
            Receivable(
                id=str(row.id),
                description=row.description,
                amount=coerce_decimal(row.amount),
                due_date=coerce_iso_date(row.due_date),
                status=row.status or RECEIVABLE_PENDING,
                received_date=coerce_iso_date(row.received_date),
                discount=coerce_optional_decimal(row.discount),
                payment_method=row.payment_method,
                recurrence=row.recurrence or RECURRENCE_NONE,
                recurrence_period=row.recurrence_period,
                active=self._coerce_active(row.active),
                company_id=row.company_id,
                category_id=row.category_id,
                client_id=row.client_id,
                notes=row.notes,
            )
            for row in rows
        ]
        return sorted(receivables, key=lambda row: (row.due_date, row.id))

    def list_manual_entries(
        self,
        company_id: str | None = None,
    ) -> list[ManualEntry]:
        query, params = self._scoped_query(
            SELECT_MANUAL_ENTRIES_SQL,
            company_id,
        )
        rows = self._fetch_all(query, params)
        entries = [
            ManualEntry(
                id=str(row.id),
                date=coerce_iso_date(row.date),
                type=row.type,
                description=row.description,
                amount=coerce_decimal(row.amount),
                movement_type=row.movement_type or MOVEMENT_NORMAL,
                status=row.status or ENTRY_CONFIRMED,
                category_id=row.category_id,
                subcategory_id=row.subcategory_id,
                competence_date=coerce_iso_date(row.competence_date),
                gross_amount=coerce_optional_decimal(row.gross_amount),
                fees=coerce_optional_decimal(row.fees),
                payment_method=row.payment_method,
                account=row.account,
                document=row.document,
                cost_center=row.cost_center,
                recurrence=row.recurrence,
                due_date=coerce_iso_date(row.due_date),
                actual_date=coerce_iso_date(row.actual_date),
                company_id=row.company_id,
            )
            for row in rows
        ]
        return sorted(entries, key=lambda row: (row.date, row.id))

    def list_balance_adjustments(
        self,
        company_id: str | None = None,
    ) -> list[BalanceAdjustment]:
        query, params = self._scoped_query(
            SELECT_BALANCE_ADJUSTMENTS_SQL,
            company_id,
        )
        rows = self._fetch_all(query, params)
        adjustments = [
            BalanceAdjustment(
                id=str(row.id),
                date=coerce_iso_date(row.date),
                balance_type=row.balance_type,
                description=row.description,
                amount=coerce_decimal(row.amount),
                account=row.account,
                company_id=row.company_id,
            )
            for row in rows
        ]
        return sorted(adjustments, key=lambda row: (row.date, row.id))

    def list_categories(self) -> list[Category]:
        rows = self._fetch_all(SELECT_CATEGORIES_SQL, {})
        categories = [
            Category(
                id=str(row.id),
                name=row.name,
                type=row.type,
                dre_category=row.dre_category,
            )
            for row in rows
        ]
        return sorted(categories, key=lambda row: (row.name.lower(), row.id))

    def insert_recurrence_instances(
        self,
        instances: list[Payable],
        origin_id: str,
        group_id: str,
        expanded_through: str | None,
    ) -> int:
        """Insert recurrence instances and move the origin's watermark.

        Both statements run in one transaction, so a failed watermark
        update rolls the inserted instances back.

        Args:
            instances: Payables generated from the origin.
            origin_id: Id of the origin payable.
            group_id: Recurrence group shared by origin and instances.
            expanded_through: Due date of the last instance written.

        Returns:
            int: Number of payables inserted.
        """
        payload = [asdict(payable) for payable in instances]
        if not payload:
            return 0
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(INSERT_PAYABLES_SQL, payload)
            conn.execute(
                UPDATE_RECURRENCE_WATERMARK_SQL,
                {
                    "id": origin_id,
                    "group_id": group_id,
                    "expanded_through": expanded_through,
                },
            )
        return len(payload)

    def _fetch_all(self, query, params: dict[str, str]) -> list:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(query, params).all()

    @staticmethod
    def _scoped_query(base_sql: str, company_id: str | None):
        params: dict[str, str] = {}
        sql = base_sql
        if company_id:
            sql += " AND company_id = :company_id"
            params["company_id"] = company_id
        return text(sql), params

    @staticmethod
    def _coerce_active(value) -> bool:
        if value is None:
            return True
        return bool(value)

    @classmethod
    def _payable_from_row(cls, row) -> Payable:
        return Payable(
            id=str(row.id),
            description=row.description,
            amount=coerce_decimal(row.amount),
            due_date=coerce_iso_date(row.due_date),
            status=row.status or PAYABLE_PENDING,
            payment_date=coerce_iso_date(row.payment_date),
            late_fees=coerce_optional_decimal(row.late_fees),
            discount=coerce_optional_decimal(row.discount),
            recurrence=row.recurrence or RECURRENCE_NONE,
            recurrence_end=row.recurrence_end,
            active=cls._coerce_active(row.active),
            company_id=row.company_id,
            category_id=row.category_id,
            supplier_id=row.supplier_id,
            cost_center_id=row.cost_center_id,
            payment_method=row.payment_method,
            notes=row.notes,
            recurrence_group_id=row.recurrence_group_id,
            recurrence_expanded_through=coerce_iso_date(
                row.recurrence_expanded_through
            ),
        )


__all__ = [
    "SqlAlchemyRecordStore",
    "INSERT_PAYABLES_SQL",
    "UPDATE_RECURRENCE_WATERMARK_SQL",
]
