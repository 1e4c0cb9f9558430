"""Tests for RealEventLog over the logging module."""

import logging
from pathlib import Path

import pytest

from appinstall.integrations.event_log.real import EVENT_LOGGER_NAME, RealEventLog


@pytest.fixture
def clean_logger():
    """Detach handlers added under the test source after each test."""
    names: list[str] = []
    yield names
    for name in names:
        logger = logging.getLogger(f"{EVENT_LOGGER_NAME}.{name}")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_ensure_source_adds_single_handler(clean_logger: list[str]) -> None:
    clean_logger.append("test-idempotent")
    event_log = RealEventLog()

    event_log.ensure_source("test-idempotent")
    event_log.ensure_source("test-idempotent")

    logger = logging.getLogger(f"{EVENT_LOGGER_NAME}.test-idempotent")
    assert len(logger.handlers) == 1


def test_write_to_file_includes_source_and_code(tmp_path: Path, clean_logger: list[str]) -> None:
    clean_logger.append("test-file")
    log_path = tmp_path / "logs" / "events.log"
    event_log = RealEventLog(log_path=log_path)

    event_log.ensure_source("test-file")
    event_log.write("test-file", "warning", 1018, "Could not restart service")
    for handler in logging.getLogger(f"{EVENT_LOGGER_NAME}.test-file").handlers:
        handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert "WARNING [test-file:1018] Could not restart service" in content
