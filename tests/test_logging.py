"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from genconfig.core.observability.logging_config import (
    PACKAGE_LOGGER,
    LogSettings,
    level_from_name,
    setup_logging,
)


class TestLogSettings:
    def test_defaults_from_empty_env(self):
        settings = LogSettings.from_env({})
        assert settings == LogSettings(level=logging.WARNING, log_file=None, file_level=None)

    def test_from_env(self):
        settings = LogSettings.from_env({
            "GENCONFIG_LOG_LEVEL": "info",
            "GENCONFIG_LOG_FILE": "/tmp/gen.log",
            "GENCONFIG_LOG_FILE_LEVEL": "DEBUG",
        })
        assert settings.level == logging.INFO
        assert settings.log_file == "/tmp/gen.log"
        assert settings.file_level == logging.DEBUG

    def test_reads_process_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("GENCONFIG_LOG_LEVEL", "ERROR")
        monkeypatch.delenv("GENCONFIG_LOG_FILE", raising=False)
        assert LogSettings.from_env().level == logging.ERROR


class TestSetupLogging:
    def test_configures_package_logger_only(self):
        root_handlers = list(logging.getLogger().handlers)
        logger = setup_logging(LogSettings(level=logging.INFO))
        assert logger.name == PACKAGE_LOGGER == "genconfig"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert logging.getLogger().handlers == root_handlers

    def test_warning_console_format(self):
        logger = setup_logging(LogSettings())
        record = logging.LogRecord("genconfig.x", logging.WARNING, __file__, 1, "careful", None, None)
        assert logger.handlers[0].format(record) == "genconfig: careful"

    def test_debug_console_format_has_location(self):
        logger = setup_logging(LogSettings(level=logging.DEBUG))
        record = logging.LogRecord("genconfig.x", logging.DEBUG, __file__, 7, "detail", None, None)
        assert "genconfig.x:7 detail" in logger.handlers[0].format(record)

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "gen.log"
        logger = setup_logging(
            LogSettings(level=logging.WARNING, log_file=str(log_file), file_level=logging.DEBUG)
        )
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.getLogger("genconfig.test").debug("hello file")
        assert "hello file" in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(LogSettings())
        logger = setup_logging(LogSettings())
        assert len(logger.handlers) == 1

    def test_records_still_propagate(self, caplog: pytest.LogCaptureFixture):
        setup_logging(LogSettings())
        with caplog.at_level(logging.WARNING):
            logging.getLogger("genconfig.test").warning("seen upstream")
        assert "seen upstream" in caplog.text


class TestLevelFromName:
    def test_names(self):
        assert level_from_name("debug") == logging.DEBUG
        assert level_from_name(" ERROR ") == logging.ERROR

    def test_fallback(self):
        assert level_from_name(None) == logging.WARNING
        assert level_from_name("") == logging.WARNING
        assert level_from_name("chatty") == logging.WARNING
