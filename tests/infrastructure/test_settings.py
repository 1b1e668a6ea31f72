"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


def _clear_env(monkeypatch) -> None:
    for name in (
        "LEDGER_COMPANY_ID",
        "LEDGER_HISTORY_HONORS_ACTIVE",
        "LEDGER_RECURRENCE_MAX_INSTANCES",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults(monkeypatch) -> None:
    _clear_env(monkeypatch)

    settings = LedgerSettings.from_env()

    assert settings.company_id is None
    assert settings.history_honors_active is False
    assert settings.recurrence_max_instances == 100


def test_from_env_reads_values(monkeypatch) -> None:
    """Configured values should be parsed from the environment."""
    _clear_env(monkeypatch)
    monkeypatch.setenv("LEDGER_COMPANY_ID", " acme ")
    monkeypatch.setenv("LEDGER_HISTORY_HONORS_ACTIVE", "Yes")
    monkeypatch.setenv("LEDGER_RECURRENCE_MAX_INSTANCES", "24")

    settings = LedgerSettings.from_env()

    assert settings.company_id == "acme"
    assert settings.history_honors_active is True
    assert settings.recurrence_max_instances == 24


def test_from_env_falls_back_on_invalid_cap(monkeypatch) -> None:
    """Invalid caps should log a warning and use the default."""
    _clear_env(monkeypatch)
    fake_logger = MagicMock()
    monkeypatch.setattr(
        settings_module,
        "get_app_logger",
        lambda: fake_logger,
    )

    monkeypatch.setenv("LEDGER_RECURRENCE_MAX_INSTANCES", "many")
    assert LedgerSettings.from_env().recurrence_max_instances == 100

    monkeypatch.setenv("LEDGER_RECURRENCE_MAX_INSTANCES", "0")
    assert LedgerSettings.from_env().recurrence_max_instances == 100

    assert fake_logger.warning.call_count == 2
