"""
Tests for Infrastructure Logging
"""

import logging

import pytest
import structlog

from intentflow import Intent, create_intent_engine, logging_middleware
from intentflow.infra.logging import configure_logging, get_logger


class TestConfigureLogging:
    """Test configure_logging function."""

    @pytest.fixture(autouse=True)
    def reset_logging(self):
        """Reset logging configuration after each test."""
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "info"])
    def test_levels(self, level):
        configure_logging(log_level=level)
        assert structlog.is_configured()

    def test_invalid_level_defaults_to_info(self):
        configure_logging(log_level="INVALID")
        assert logging.getLogger().level == logging.INFO

    def test_json_format(self, capsys):
        configure_logging(log_level="DEBUG", json_format=True)
        get_logger("json_test").info("hello", extra_key="extra_value")

        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"extra_key": "extra_value"' in err

    def test_multiple_calls(self):
        configure_logging(log_level="INFO")
        configure_logging(log_level="DEBUG", json_format=True)
        assert structlog.is_configured()

    async def test_engine_failure_logged_by_middleware(self, capsys):
        configure_logging(log_level="DEBUG", json_format=True)
        engine = create_intent_engine(initial_state={}, middleware=[logging_middleware])

        def fail(intent, ctx):
            raise RuntimeError("boom")

        engine.on("FAIL", fail)
        with pytest.raises(RuntimeError):
            await engine.emit(Intent("FAIL"))

        err = capsys.readouterr().err
        assert '"intent_type": "FAIL"' in err
        assert '"event": "intent_failed"' in err


class TestGetLogger:
    """Test get_logger function."""

    def test_get_logger_returns_logger(self):
        logger = get_logger("test_logger")
        assert logger.bind is not None

    def test_get_logger_can_log(self):
        logger = get_logger("test_logger")
        logger.info("test message", extra_key="extra_value")
