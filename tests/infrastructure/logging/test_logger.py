"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_to_dated_file_under_project_logs(
    tmp_path,
    monkeypatch,
):
    """LoggerBuilder should place the log file under logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = logger_module.LoggerBuilder()
    ledger_logger = (
        builder.name("ledger.test.rollup")
        .subdir("rollup")
        .prefix("rollup_logs")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert ledger_logger.name == "ledger.test.rollup"
    assert ledger_logger.level == logging.WARNING
    assert ledger_logger.propagate is False
    assert len(ledger_logger.handlers) == 1
    expected_path = tmp_path / "logs" / "rollup" / "20240315_rollup_logs.log"
    assert ledger_logger.handlers[0].baseFilename == str(expected_path)
    assert expected_path.parent.is_dir()
    # An already configured logger is returned untouched.
    assert builder.console(True).build() is ledger_logger
    assert len(ledger_logger.handlers) == 1


def test_logger_builder_uses_injected_handler_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories should be used by build."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen = {}

    def _file_factory(path, formatter):
        seen["path"] = path
        seen["file_fmt"] = formatter
        return file_handler

    def _console_factory(formatter):
        seen["console_fmt"] = formatter
        return console_handler

    built = (
        logger_module.LoggerBuilder()
        .name("ledger.test.factories")
        .formatter(lambda: fmt)
        .file_handler(_file_factory)
        .console_handler(_console_factory)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen["file_fmt"] is fmt
    assert seen["console_fmt"] is fmt
    assert seen["path"].parent == tmp_path / "logs" / "app"


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    file_handler.close()

    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should call the wrapped logging.Logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("ledger")
    logger.info("fetched %s rows", 3)
    logger.warning("wallet unavailable")
    logger.error("does not reconcile")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("fetched %s rows", 3)
    fake_logger.warning.assert_called_with("wallet unavailable")
    fake_logger.error.assert_called_with("does not reconcile")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should each return one instance."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()
    usage_logger_1 = logger_module.get_usage_logger()
    usage_logger_2 = logger_module.get_usage_logger()

    assert app_logger_1 is app_logger_2
    assert usage_logger_1 is usage_logger_2
    assert app_logger_1 is not usage_logger_1
    assert isinstance(app_logger_1.logger, MagicMock)
