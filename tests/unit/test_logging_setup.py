"""
Unit tests for the loguru sink configuration.
"""

import io

from loguru import logger

from storyscore.config.settings import settings
from storyscore.logging_setup import configure_logging


def test_settings_level_in_tests():
    assert settings.log_level.upper() == "WARNING"


def test_sink_filters_below_level(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr("sys.stderr", stream)
    try:
        configure_logging("warning")
        logger.info("[TEST] hidden")
        logger.warning("[TEST] shown")
    finally:
        monkeypatch.undo()
        configure_logging(settings.log_level)

    output = stream.getvalue()
    assert "[TEST] shown" in output
    assert "hidden" not in output
    assert "WARNING" in output


def test_replaces_existing_sinks():
    messages = []
    logger.add(messages.append, level="DEBUG")

    configure_logging(settings.log_level)
    logger.error("[TEST] after reconfigure")

    assert messages == []
