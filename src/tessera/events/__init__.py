"""Tessera Events -- room event content and envelopes."""

from tessera.events.content import EventContent, EventKind
from tessera.events.server_acl import HostPattern, ServerAclEvent, ServerAclEventContent
from tessera.events.state import StateEvent

__all__ = [
    "EventContent",
    "EventKind",
    "HostPattern",
    "ServerAclEvent",
    "ServerAclEventContent",
    "StateEvent",
]
