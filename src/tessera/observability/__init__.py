"""Tessera Observability -- structlog logging configuration."""

from __future__ import annotations

from tessera.observability.logging import (
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
]
