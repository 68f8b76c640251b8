"""Media content references (``mxc://`` URIs)."""

from __future__ import annotations

from typing import ClassVar

from tessera.identifiers.base import Identifier
from tessera.identifiers.server_name import ServerName
from tessera.identifiers.validation import MXC_SCHEME, validate_mxc_uri


class MxcUri(Identifier):
    """Validated media reference, e.g. ``mxc://example.com/AbCdEf123``.

    Attributes:
        value: The full URI text.

    Raises:
        InvalidMxcUriError: If the scheme, server name or media ID is invalid.
    """

    __slots__ = ()

    identifier_type: ClassVar[str] = "MXC URI"
    json_schema_description: ClassVar[str] = "A media URI: mxc://server_name/media_id"

    @classmethod
    def _validate(cls, value: str) -> None:
        validate_mxc_uri(value)

    def _slash_idx(self) -> int:
        return self.value.index("/", len(MXC_SCHEME))

    @property
    def server_name(self) -> ServerName:
        """The server hosting the media."""
        return ServerName._from_validated(self.value[len(MXC_SCHEME) : self._slash_idx()])

    @property
    def media_id(self) -> str:
        """The opaque media identifier on that server."""
        return self.value[self._slash_idx() + 1 :]
