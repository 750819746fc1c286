"""Structured logging configuration and logger access helpers.

Importing this module installs a WARNING-level stderr configuration when the
host process has not configured structlog yet, so library use stays quiet
until `observability_configure_logging` is called explicitly.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any, TextIO

import structlog

_OBSERVABILITY_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_OBSERVABILITY_DEFAULT_LOG_LEVEL = "WARNING"


class _ObservabilityNamedPrintLogger(structlog.PrintLogger):
    """Print logger carrying the module name it was created for."""

    def __init__(self, file: TextIO, name: str | None) -> None:
        super().__init__(file=file)
        self.name = name


def observability_configure_logging(log_level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog processors and level filtering for the process.

    Loggers obtained before configuration pick up the new settings because
    logger caching stays disabled.

    Args:
        log_level: Minimum level name to emit.
        json_output: Render one JSON object per event instead of console text.

    Returns:
        None: Global structlog configuration is replaced as side effect.

    Raises:
        ValueError: Raised when log_level is not a known level name.
    """

    normalized_level = log_level.strip().upper()
    level_value = _OBSERVABILITY_LOG_LEVELS.get(normalized_level)
    if level_value is None:
        raise ValueError(f"Unsupported log level: {log_level}")

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        _observability_add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=_observability_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def observability_configure_default_logging() -> bool:
    """Install the quiet default configuration unless structlog is already configured.

    Returns:
        bool: True when the default configuration was installed.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if structlog.is_configured():
        return False
    observability_configure_logging(log_level=_OBSERVABILITY_DEFAULT_LOG_LEVEL)
    return True


def _observability_stderr_logger_factory(*args: Any) -> _ObservabilityNamedPrintLogger:
    # Resolve sys.stderr per logger so replaced streams are honored.
    logger_name = str(args[0]) if args else None
    return _ObservabilityNamedPrintLogger(file=sys.stderr, name=logger_name)


def _observability_add_logger_name(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    logger_name = getattr(logger, "name", None)
    if logger_name is not None:
        event_dict.setdefault("logger", logger_name)
    return event_dict


def observability_get_logger(name: str) -> Any:
    """Return a structured logger for one module name.

    The name is handed to the logger factory instead of being bound as a
    context value, so the proxy stays lazy and follows later reconfiguration.

    Args:
        name: Logger name, usually the calling module `__name__`.

    Returns:
        Any: Lazy structlog proxy resolved against the configuration active at first use.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return structlog.get_logger(name)


observability_configure_default_logging()


__all__ = [
	"observability_configure_default_logging",
	"observability_configure_logging",
	"observability_get_logger",
]
