"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import RecordStorePort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.record_store import SqlAlchemyRecordStore
from src.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> RecordStorePort:
    """Return the record store backed by the ledger database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordStore(resolved_db)


def build_settings() -> LedgerSettings:
    """Return ledger settings sourced from the environment."""
    return LedgerSettings.from_env()


__all__ = [
    "build_database_adapter",
    "build_record_store",
    "build_settings",
]
