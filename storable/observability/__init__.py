"""Observability package for structured logging setup."""

from .structured_logging import (
    observability_configure_default_logging,
    observability_configure_logging,
    observability_get_logger,
)

__all__ = [
	"observability_configure_default_logging",
	"observability_configure_logging",
	"observability_get_logger",
]
