"""Types for the ``m.room.server_acl`` event.

The ``allow`` and ``deny`` lists hold host *patterns*, not server names:
``*`` matches zero or more characters and ``?`` exactly one. They are kept as
plain strings and never passed through the server name validator, since a
pattern such as ``*.example.com`` is not itself a valid server name.
"""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Field

from tessera.events.content import EventContent, EventKind
from tessera.events.state import StateEvent

HostPattern = Annotated[
    str,
    Field(description="Server name glob: '*' matches zero or more characters, '?' one"),
]
"""Unvalidated wildcard pattern matched against server names, excluding port."""


class ServerAclEventContent(EventContent):
    """Which servers are permitted to participate in a room.

    Attributes:
        allow_ip_literals: True to allow server names that are IP address
            literals. Setting this to False is strongly recommended, so that
            participating servers must be backed by a registered domain name.
        allow: Host patterns to allow. Defaults to an empty list when absent,
            which effectively disallows every server.
        deny: Host patterns to deny. Defaults to an empty list when absent.
    """

    event_type: ClassVar[str] = "m.room.server_acl"
    kind: ClassVar[EventKind] = EventKind.STATE

    allow_ip_literals: bool = True
    allow: list[HostPattern] = Field(default_factory=list)
    deny: list[HostPattern] = Field(default_factory=list)


ServerAclEvent = StateEvent[ServerAclEventContent]
"""A state event carrying ``ServerAclEventContent``."""
