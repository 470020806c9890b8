"""
Unit tests for configuration and logging setup

Author: F-Value Calculator Project
Date: 2026-10-19
"""

import logging

import pytest

from fvalue_calc import config
from fvalue_calc.logging_config import setup_logging


@pytest.fixture
def package_logger():
    """Package logger, restored after the test."""
    logger = logging.getLogger("fvalue_calc")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLogLevel:
    """Test FVALUE_LOG_LEVEL handling."""

    def test_default(self, monkeypatch):
        monkeypatch.delenv("FVALUE_LOG_LEVEL", raising=False)
        assert config.get_log_level() == logging.INFO

    def test_override(self, monkeypatch):
        monkeypatch.setenv("FVALUE_LOG_LEVEL", "debug")
        assert config.get_log_level() == logging.DEBUG

    def test_unknown_level(self, monkeypatch):
        monkeypatch.setenv("FVALUE_LOG_LEVEL", "LOUD")
        assert config.get_log_level() == logging.INFO


class TestSetupLogging:
    """Test package logger configuration."""

    def test_console_handler(self, package_logger):
        logger = setup_logging(logging.DEBUG)
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_no_duplicate_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_file_handler(self, package_logger, tmp_path):
        log_file = tmp_path / "fvalue.log"
        setup_logging(logging.INFO, str(log_file))
        package_logger.info("hello")
        for handler in package_logger.handlers:
            handler.flush()
        assert len(package_logger.handlers) == 2
        assert "hello" in log_file.read_text(encoding="utf-8")
        for handler in package_logger.handlers:
            handler.close()


class TestDisplaySettings:
    def test_decimals(self):
        assert config.DISPLAY_DECIMALS == 3

    def test_curve_range(self):
        assert config.CURVE_T_MIN < config.CURVE_T_MAX
        assert config.CURVE_POINTS > 1
