"""Serialization settings.

Environment variables use the ``TESSERA_`` prefix, e.g.
``TESSERA_COMPAT_EMPTY_STRING_AS_NONE=true``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SerdeSettings(BaseSettings):
    """Process-wide decoding behaviour.

    Attributes:
        compat_empty_string_as_none: Decode ``""`` as absent for optional
            fields marked with ``EmptyStringAsNone``. Some servers send an
            empty string instead of omitting the field. Default: False.
    """

    model_config = SettingsConfigDict(
        env_prefix="TESSERA_",
        extra="ignore",
    )

    compat_empty_string_as_none: bool = Field(
        default=False,
        description="Treat empty strings as absent for compat-marked optional fields",
    )


@lru_cache(maxsize=1)
def get_serde_settings() -> SerdeSettings:
    """Get cached SerdeSettings instance.

    Clear cache with ``get_serde_settings.cache_clear()`` for testing.
    """
    return SerdeSettings()
