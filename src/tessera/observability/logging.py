"""Structured logging configuration using structlog.

This module provides environment-aware structured logging with:
- JSON output for production environments
- Console output with colors for development
- Rendering of stdlib ``logging`` records emitted by tessera modules
- Sensitive data redaction (access tokens, passwords)

Library modules log through ``logging.getLogger(__name__)``; applications call
``configure_logging()`` once to route those records through structlog.

Usage:
    # During application startup
    from tessera.observability.logging import configure_logging
    configure_logging()

    # In application code
    from tessera.observability import get_logger
    logger = get_logger(__name__)
    logger.info("profile_fetched", user_id="@carl:example.com")
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import MutableMapping

# Structlog processor signature
Processor = structlog.types.Processor

# Log context keys whose values never reach the output. Matrix credentials
# travel as access/refresh/login/registration tokens.
SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "access_token",
        "refresh_token",
        "authorization",
        "secret",
        "registration_token",
        "login_token",
    }
)

REDACTED_VALUE: str = "***REDACTED***"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseSettings):
    """How tessera log records are filtered and rendered.

    Environment variables:
    - TESSERA_LOG_LEVEL, falling back to LOG_LEVEL: threshold for the
      root logger, case-insensitive.
    - ENVIRONMENT: ``production`` selects JSON output; anything else the
      console renderer.

    Attributes:
        log_level: One of ``LOG_LEVELS``. Default: INFO
        environment: Deployment name. Default: development
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("TESSERA_LOG_LEVEL", "LOG_LEVEL"),
        description="Root log level",
    )
    environment: str = Field(
        default="development",
        validation_alias="ENVIRONMENT",
        description="Deployment name; 'production' selects JSON output",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}, got {v!r}"
            raise ValueError(msg)
        return level

    @property
    def use_json_logs(self) -> bool:
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        """``log_level`` as a ``logging`` module constant."""
        return logging.getLevelName(self.log_level)


class SensitiveDataProcessor:
    """Structlog processor to redact sensitive fields from log context.

    Redacts values for fields matching:
    1. Exact field names in SENSITIVE_FIELDS (case-insensitive)
    2. Field names containing "password" or "token" as substrings

    Example:
        >>> processor = SensitiveDataProcessor()
        >>> event_dict = {"event": "login", "access_token": "syt_abc"}
        >>> processor(None, "info", event_dict)["access_token"]
        '***REDACTED***'
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        for key in list(event_dict.keys()):
            if self._is_sensitive(key):
                event_dict[key] = REDACTED_VALUE
        return event_dict

    def _is_sensitive(self, key: str) -> bool:
        key_lower = key.lower()
        if key_lower in SENSITIVE_FIELDS:
            return True
        # Compound names (e.g., user_password, device_token)
        return "password" in key_lower or "token" in key_lower


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached LoggingSettings instance.

    Clear cache with ``get_logging_settings.cache_clear()`` for testing.
    """
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Configures:
    - Context variable merging
    - Root log level from ``LoggingSettings.log_level``
    - ISO 8601 timestamps (UTC)
    - Sensitive data redaction
    - Environment-aware rendering (JSON for production, console otherwise)

    Stdlib records (from ``logging.getLogger(__name__)`` in tessera modules)
    are rendered by the same processor chain as structlog events.

    Args:
        settings: Optional LoggingSettings instance. If not provided,
            settings are loaded from environment variables.
    """
    if settings is None:
        settings = get_logging_settings()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        SensitiveDataProcessor(),
    ]

    if settings.use_json_logs:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level_int)



def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to the given name.

    Args:
        name: Logger name (typically __name__ from calling module).
            If None, returns the root logger.

    Returns:
        Bound structlog logger.

    Example:
        >>> from tessera.observability import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("acl_decoded", room_id="!n8f893n9:example.com")
    """
    return structlog.stdlib.get_logger(name)
