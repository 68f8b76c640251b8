"""Identifiers distinguished by a leading sigil character.

``@`` user IDs, ``!`` room IDs and ``$`` event IDs. Each is
``<sigil><localpart>:<server_name>``, except event IDs from room version 3
onwards, which are an opaque hash with no server name.

The server name part is exposed as a ``ServerName`` without validating it a
second time: it was checked as part of the full identifier.
"""

from __future__ import annotations

from typing import ClassVar, Self

from tessera.identifiers.base import Identifier
from tessera.identifiers.server_name import ServerName
from tessera.identifiers.validation import (
    localpart_is_fully_conforming,
    validate_event_id,
    validate_room_id,
    validate_user_id,
)


class UserId(Identifier):
    """Validated user ID, e.g. ``@carl:example.com``.

    The localpart may use the historical grammar (any printable ASCII except
    ``:``); ``is_historical`` reports whether it does.
    """

    __slots__ = ()

    identifier_type: ClassVar[str] = "User ID"
    json_schema_description: ClassVar[str] = "A user ID: @localpart:server_name"

    @classmethod
    def _validate(cls, value: str) -> None:
        validate_user_id(value)

    @classmethod
    def parse_with_server_name(
        cls,
        id_or_localpart: str,
        server_name: ServerName | str,
    ) -> Self:
        """Parse a full user ID, or build one from a bare localpart.

        Clients commonly accept either ``carl`` or ``@carl:example.com`` at a
        login prompt. Input starting with ``@`` is parsed as a full ID;
        anything else is treated as a localpart on *server_name*.
        """
        if id_or_localpart.startswith("@"):
            return cls.parse(id_or_localpart)
        server = ServerName.parse(server_name)
        return cls.parse(f"@{id_or_localpart}:{server}")

    def _colon_idx(self) -> int:
        return self.value.index(":")

    @property
    def localpart(self) -> str:
        """The part between ``@`` and the first ``:``."""
        return self.value[1 : self._colon_idx()]

    @property
    def server_name(self) -> ServerName:
        """The server the user is registered on."""
        return ServerName._from_validated(self.value[self._colon_idx() + 1 :])

    @property
    def is_historical(self) -> bool:
        """True if the localpart only satisfies the historical grammar."""
        return not localpart_is_fully_conforming(self.localpart)


class RoomId(Identifier):
    """Validated room ID, e.g. ``!n8f893n9:example.com``."""

    __slots__ = ()

    identifier_type: ClassVar[str] = "Room ID"
    json_schema_description: ClassVar[str] = "A room ID: !opaque_id:server_name"

    @classmethod
    def _validate(cls, value: str) -> None:
        validate_room_id(value)

    @property
    def localpart(self) -> str:
        return self.value[1 : self.value.index(":")]

    @property
    def server_name(self) -> ServerName:
        return ServerName._from_validated(self.value[self.value.index(":") + 1 :])


class EventId(Identifier):
    """Validated event ID.

    Either ``$opaque:server_name`` (room versions 1 and 2) or ``$opaque``
    (room version 3 and later).
    """

    __slots__ = ()

    identifier_type: ClassVar[str] = "Event ID"
    json_schema_description: ClassVar[str] = "An event ID: $opaque_id[:server_name]"

    @classmethod
    def _validate(cls, value: str) -> None:
        validate_event_id(value)

    @property
    def localpart(self) -> str:
        colon_idx = self.value.find(":")
        return self.value[1:] if colon_idx == -1 else self.value[1:colon_idx]

    @property
    def server_name(self) -> ServerName | None:
        """The originating server, or None for room version 3+ event IDs."""
        colon_idx = self.value.find(":")
        if colon_idx == -1:
            return None
        return ServerName._from_validated(self.value[colon_idx + 1 :])
