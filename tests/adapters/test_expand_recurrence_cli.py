"""Tests for the expand_recurrence_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from src.adapters import expand_recurrence_cli


@pytest.fixture
def fake_use_case(monkeypatch):
    use_case = MagicMock()
    store = object()
    monkeypatch.setattr(
        expand_recurrence_cli,
        "get_app_logger",
        lambda: MagicMock(),
    )
    monkeypatch.setattr(
        expand_recurrence_cli,
        "get_usage_logger",
        lambda: MagicMock(),
    )
    monkeypatch.setattr(
        expand_recurrence_cli,
        "build_record_store",
        lambda: store,
    )
    monkeypatch.setattr(
        expand_recurrence_cli,
        "build_settings",
        lambda: None,
    )

    def _build(record_store, logger, settings):
        assert record_store is store
        return use_case

    monkeypatch.setattr(
        expand_recurrence_cli,
        "ExpandPayableRecurrenceUseCase",
        _build,
    )
    monkeypatch.delenv("RECURRENCE_PAYABLE_ID", raising=False)
    return use_case


def test_main_prints_created_instances(fake_use_case, capsys):
    fake_use_case.execute_by_id.return_value = SimpleNamespace(
        instances=[object(), object()],
        group_id="rent",
        expanded_through="2024-05-05",
    )

    expand_recurrence_cli.main(["rent"])

    fake_use_case.execute_by_id.assert_called_once_with("rent")
    assert capsys.readouterr().out.strip() == (
        "Created 2 instances for payable rent "
        "(group rent, through 2024-05-05)."
    )


def test_main_reads_id_from_environment(
    fake_use_case,
    monkeypatch,
    capsys,
):
    monkeypatch.setenv("RECURRENCE_PAYABLE_ID", "missing")
    fake_use_case.execute_by_id.return_value = None

    expand_recurrence_cli.main([])

    assert "Payable missing not found." in capsys.readouterr().out


def test_main_without_id_does_nothing(fake_use_case, capsys):
    expand_recurrence_cli.main([])

    fake_use_case.execute_by_id.assert_not_called()
    assert capsys.readouterr().out == ""
