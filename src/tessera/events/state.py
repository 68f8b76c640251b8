"""State event envelope."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import Field, model_validator

from tessera.events.content import EventContent
from tessera.identifiers import EventId, RoomId, UserId
from tessera.serde.codec import WireModel

C = TypeVar("C", bound=EventContent)


class StateEvent(WireModel, Generic[C]):
    """A room state event as received from a homeserver.

    Attributes:
        content: The event payload.
        event_id: Globally unique event identifier.
        origin_server_ts: Milliseconds since the Unix epoch on the originating
            server when the event was sent.
        room_id: The room the event belongs to.
        sender: The user who sent the event.
        state_key: Key under which the state is stored; often ``""``.
        type: The event type; must match the content model's ``event_type``.
        prev_content: The content this state event replaced, if any.
        unsigned: Additional information added by the homeserver.
    """

    content: C
    event_id: EventId
    origin_server_ts: int = Field(ge=0)
    room_id: RoomId
    sender: UserId
    state_key: str
    type: str
    prev_content: C | None = None
    unsigned: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_event_type(self) -> StateEvent[C]:
        expected = getattr(type(self.content), "event_type", None)
        if expected is None:
            # Unparametrized StateEvent: content decoded as the bare base class.
            msg = "State event content type is unknown; decode with StateEvent[Content]"
            raise ValueError(msg)
        if self.type != expected:
            msg = f"Event type {self.type!r} does not match content type {expected!r}"
            raise ValueError(msg)
        return self

    @property
    def origin_server_ts_datetime(self) -> datetime:
        """``origin_server_ts`` as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.origin_server_ts / 1000, tz=UTC)
