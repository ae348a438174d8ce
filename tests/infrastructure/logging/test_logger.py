"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def _stub_paths(monkeypatch, tmp_path):
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250301"),
    )


def test_builder_writes_under_project_logs_directory(tmp_path, monkeypatch):
    """The builder should create the dated log file in logs/<subdir>."""
    _stub_paths(monkeypatch, tmp_path)

    builder = logger_module.LoggerBuilder()
    report_logger = (
        builder.name("finance.test.reports")
        .subdir("reports")
        .prefix("report_logs")
        .console(True)
        .level(logging.WARNING)
        .formatter(logger_module.LoggerBuilder._default_formatter)
        .file_handler(logger_module.LoggerBuilder._default_file_handler)
        .console_handler(logger_module.LoggerBuilder._default_console_handler)
        .build()
    )

    assert report_logger.name == "finance.test.reports"
    assert report_logger.level == logging.WARNING
    assert report_logger.propagate is False
    file_handlers = [
        h
        for h in report_logger.handlers
        if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = tmp_path / "logs" / "reports" / "20250301_report_logs.log"
    assert file_handlers[0].baseFilename == str(expected)
    assert expected.parent.is_dir()
    # Building twice must not stack handlers.
    assert builder.build() is report_logger
    assert len(report_logger.handlers) == 2


def test_builder_without_console_only_adds_file_handler(tmp_path, monkeypatch):
    """Console output is opt-in."""
    _stub_paths(monkeypatch, tmp_path)

    quiet = (
        logger_module.LoggerBuilder()
        .name("finance.test.quiet")
        .subdir("quiet")
        .build()
    )

    assert len(quiet.handlers) == 1
    assert isinstance(quiet.handlers[0], logging.FileHandler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "finance.log",
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
    """Logger info/warning/error/etc. should call the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("finance")
    logger.info("balance computed")
    logger.warning("invalid budget window")
    logger.error("missing FINANCE_DB_URL")
    logger.debug("dbg")
    logger.critical("crit")

    fake_logger.info.assert_called_with("balance computed")
    fake_logger.warning.assert_called_with("invalid budget window")
    fake_logger.error.assert_called_with("missing FINANCE_DB_URL")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_use_their_own_directories(monkeypatch):
    """AppLogger and UsageLogger should configure distinct subdirs."""
    configured = []

    def _fake_build(self):
        configured.append(
            (self._name, self._subdir, self._prefix, self._console)
        )
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger_1 = logger_module.get_app_logger()
    app_logger_2 = logger_module.get_app_logger()
    usage_logger_1 = logger_module.get_usage_logger()
    usage_logger_2 = logger_module.get_usage_logger()

    assert app_logger_1 is app_logger_2
    assert usage_logger_1 is usage_logger_2
    assert app_logger_1 is not usage_logger_1
    assert configured == [
        ("finance.app", "app", "app_logs", True),
        ("finance.usage", "usage", "usage_logs", False),
    ]
