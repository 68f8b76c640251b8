"""Compatibility decoding for optional fields.

Some servers send ``""`` instead of omitting an optional field. When
compatibility mode is on, fields annotated with ``EmptyStringAsNone`` decode
such a value as absent. This is unrelated to identifier validation: with the
mode off, the empty string reaches the field's own validator and is rejected
there like any other invalid input.

Example::

    class Response(WireModel):
        avatar_url: Annotated[MxcUri | None, EmptyStringAsNone] = None

    decode(Response, {"avatar_url": ""}, compat=True).avatar_url  # None
"""

from __future__ import annotations

from typing import Any

from pydantic import BeforeValidator, ValidationInfo

from tessera.serde.settings import get_serde_settings

COMPAT_CONTEXT_KEY = "compat"


def compat_enabled(context: Any) -> bool:
    """Resolve compatibility mode from a validation context, then settings.

    A ``{"compat": bool}`` entry in the pydantic validation context wins;
    otherwise ``SerdeSettings.compat_empty_string_as_none`` decides.
    """
    if isinstance(context, dict) and COMPAT_CONTEXT_KEY in context:
        return bool(context[COMPAT_CONTEXT_KEY])
    return get_serde_settings().compat_empty_string_as_none


def empty_string_as_none(value: Any, info: ValidationInfo) -> Any:
    """Map ``""`` to None when compatibility mode is on."""
    if value == "" and compat_enabled(info.context):
        return None
    return value


EmptyStringAsNone = BeforeValidator(empty_string_as_none)
