"""Base types for room event content.

Every event content model declares the event ``type`` string it is sent
under and the kind of event that carries it. The envelope models in
``tessera.events.state`` use these to check that a payload's ``type`` matches
its content.

Example:
    Declaring new event content::

        class TopicEventContent(EventContent):
            event_type: ClassVar[str] = "m.room.topic"
            kind: ClassVar[EventKind] = EventKind.STATE

            topic: str
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from tessera.serde.codec import WireModel


class EventKind(StrEnum):
    """Which envelope an event content is carried in."""

    MESSAGE = "message"
    STATE = "state"
    EPHEMERAL = "ephemeral"


class EventContent(WireModel):
    """Base class for event content payloads."""

    event_type: ClassVar[str]
    kind: ClassVar[EventKind]
