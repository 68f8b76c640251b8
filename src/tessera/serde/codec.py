"""Wire encoding and decoding for protocol models.

Identifiers encode as plain strings and are validated again on every decode;
nothing that arrives from the wire is trusted. Optional fields that are
absent, and fields still at their declared default, are omitted on output.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from tessera.serde.compat import COMPAT_CONTEXT_KEY
from tessera.serde.errors import DecodeError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class WireModel(BaseModel):
    """Base class for request, response and event payload models.

    Fields are populated by their wire name (alias) when decoding and may be
    set by attribute name in Python code.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


def decode(
    model: type[M],
    payload: Mapping[str, Any] | str | bytes | bytearray,
    *,
    compat: bool | None = None,
) -> M:
    """Decode a JSON payload into *model*.

    Args:
        model: The pydantic model class to decode into.
        payload: A decoded JSON object, or raw JSON text or bytes.
        compat: Force compatibility mode on or off for this call. None defers
            to ``SerdeSettings``.

    Returns:
        The validated model instance.

    Raises:
        DecodeError: If the payload is not valid for *model*, including when
            any identifier in it fails grammar validation.
    """
    context = None if compat is None else {COMPAT_CONTEXT_KEY: compat}
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload, context=context)
        return model.model_validate(payload, context=context)
    except ValidationError as exc:
        error = DecodeError.from_validation_error(model.__name__, exc)
        logger.debug(
            "Rejected %s payload: %d error(s), identifier kinds %s",
            model.__name__,
            len(error.errors),
            [str(kind) for kind in error.kinds],
        )
        raise error from exc


def encode(model: BaseModel) -> dict[str, Any]:
    """Render *model* as a JSON-compatible dict using wire field names."""
    return model.model_dump(mode="json", by_alias=True, exclude_defaults=True)


def encode_json(model: BaseModel) -> str:
    """Render *model* as compact JSON text using wire field names."""
    return model.model_dump_json(by_alias=True, exclude_defaults=True)
