"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place files in logs/<subdir>/<stamp>_<prefix>."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = logger_module.LoggerBuilder()
    ledger_logger = (
        builder.name("ledger.recurrence")
        .subdir("recurrence")
        .prefix("recurrence_logs")
        .console(True)
        .level(logging.DEBUG)
        .build()
    )

    assert ledger_logger.name == "ledger.recurrence"
    assert ledger_logger.level == logging.DEBUG
    file_handlers = [
        h
        for h in ledger_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = (
        tmp_path / "logs" / "recurrence" / "20240315_recurrence_logs.log"
    )
    assert file_handlers[0].baseFilename == str(expected)
    assert builder.build() is ledger_logger


def test_default_handlers_apply_formatter(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates_every_level(monkeypatch):
    """Logger methods should forward to the built logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    logger_module.Logger._instance = None

    wrapper = logger_module.Logger("ledger.test")
    wrapper.info("fetched 3 payables")
    wrapper.warning("cap reached")
    wrapper.error("store failed")
    wrapper.debug("no category")
    wrapper.critical("halt")

    fake_logger.info.assert_called_with("fetched 3 payables")
    fake_logger.warning.assert_called_with("cap reached")
    fake_logger.error.assert_called_with("store failed")
    fake_logger.debug.assert_called_with("no category")
    fake_logger.critical.assert_called_with("halt")
    assert logger_module.Logger("other") is wrapper
    logger_module.Logger._instance = None


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built_names: list[str] = []

    def _fake_build(self):
        built_names.append(self._name)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == ["ledger.app", "ledger.usage"]
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None
