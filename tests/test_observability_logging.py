"""Tests for structured logging configuration helpers."""

import json

import pytest
import structlog

from storable.observability import (
    observability_configure_default_logging,
    observability_configure_logging,
    observability_get_logger,
)


def test_observability_json_output_renders_one_object_per_event(capsys: pytest.CaptureFixture[str]) -> None:
    """Render JSON log events to stderr with level, logger name, and fields.

    Args:
        capsys: Output capture fixture.

    Returns:
        None: Assertions validate rendered event content.

    Raises:
        AssertionError: Raised when rendered output differs.
    """

    observability_configure_logging(log_level="INFO", json_output=True)
    logger = observability_get_logger("tests.observability")

    logger.debug("hidden_event")
    logger.info("visible_event", imported_count=2)

    captured_lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert len(captured_lines) == 1
    event_payload = json.loads(captured_lines[0])
    assert event_payload["event"] == "visible_event"
    assert event_payload["level"] == "info"
    assert event_payload["logger"] == "tests.observability"
    assert event_payload["imported_count"] == 2
    assert "timestamp" in event_payload

    observability_configure_logging(log_level="WARNING")


def test_observability_logger_created_before_configuration_follows_reconfiguration(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Apply the latest level filter to loggers created at module import time.

    Args:
        capsys: Output capture fixture.

    Returns:
        None: Assertions validate filtering after reconfiguration.

    Raises:
        AssertionError: Raised when an early logger keeps a stale configuration.
    """

    observability_configure_logging(log_level="WARNING", json_output=True)
    logger = observability_get_logger("tests.observability.early")

    observability_configure_logging(log_level="DEBUG", json_output=True)
    logger.debug("debug_event")

    captured_lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert len(captured_lines) == 1
    assert json.loads(captured_lines[0])["logger"] == "tests.observability.early"

    observability_configure_logging(log_level="WARNING")


def test_observability_default_configuration_hides_debug_events(capsys: pytest.CaptureFixture[str]) -> None:
    """Keep unconfigured library use quiet and off stdout.

    Args:
        capsys: Output capture fixture.

    Returns:
        None: Assertions validate default filtering and stream.

    Raises:
        AssertionError: Raised when debug events leak with default configuration.
    """

    structlog.reset_defaults()
    assert observability_configure_default_logging() is True
    assert observability_configure_default_logging() is False

    logger = observability_get_logger("tests.observability.default")
    logger.debug("collection_import_started")
    logger.warning("visible_warning")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "collection_import_started" not in captured.err
    assert "visible_warning" in captured.err

    observability_configure_logging(log_level="WARNING")


def test_observability_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unsupported log level"):
        observability_configure_logging(log_level="chatty")
