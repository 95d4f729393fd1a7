"""Tests for structlog configuration."""

import logging

import pytest
import structlog

from zenith_app.logging.config import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_renderer(self):
        configure_logging(level="debug", format_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert logging.getLogger().level == logging.DEBUG

    def test_console_renderer_by_default(self):
        configure_logging()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.INFO

    def test_reconfigure_moves_level(self):
        configure_logging(level="INFO")
        configure_logging(level="WARNING")

        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level 'VERBOSE'"):
            configure_logging(level="VERBOSE")
