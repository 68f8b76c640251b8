"""Shared fixtures for tessera tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tessera.observability.logging import get_logging_settings
from tessera.serde.settings import get_serde_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clear_settings_caches() -> Iterator[None]:
    """Settings are cached per process; every test starts from the environment."""
    get_serde_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_serde_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture()
def acl_event_json() -> dict[str, object]:
    """A server ACL state event whose content is empty."""
    return {
        "content": {},
        "event_id": "$h29iv0s8:example.com",
        "origin_server_ts": 1,
        "room_id": "!n8f893n9:example.com",
        "sender": "@carl:example.com",
        "state_key": "",
        "type": "m.room.server_acl",
    }
