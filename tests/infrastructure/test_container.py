"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.infrastructure import container
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.record_store import SqlAlchemyRecordStore
from src.infrastructure.settings import LedgerSettings


def test_build_database_adapter_returns_sqlalchemy_adapter() -> None:
    adapter = container.build_database_adapter()

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)


def test_build_record_store_uses_given_port() -> None:
    """An explicit port should be wired into the record store."""
    db_port = MagicMock()

    store = container.build_record_store(db_port=db_port)

    assert isinstance(store, SqlAlchemyRecordStore)
    assert store._db_port is db_port


def test_build_record_store_defaults_to_adapter(monkeypatch) -> None:
    sentinel = MagicMock()
    monkeypatch.setattr(container, "build_database_adapter", lambda: sentinel)

    store = container.build_record_store()

    assert store._db_port is sentinel


def test_build_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("LEDGER_COMPANY_ID", "acme")

    settings = container.build_settings()

    assert isinstance(settings, LedgerSettings)
    assert settings.company_id == "acme"
