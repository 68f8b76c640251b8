"""Unit tests for the m.room.server_acl event."""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest

from tessera.events import EventKind, ServerAclEvent, ServerAclEventContent, StateEvent
from tessera.identifiers import ErrorKind, RoomId, ServerName, UserId
from tessera.serde import DecodeError, decode, encode, encode_json


class TestServerAclEventContent:
    @pytest.mark.unit
    def test_event_type(self) -> None:
        assert ServerAclEventContent.event_type == "m.room.server_acl"
        assert ServerAclEventContent.kind is EventKind.STATE

    @pytest.mark.unit
    def test_defaults(self) -> None:
        content = ServerAclEventContent()
        assert content.allow_ip_literals is True
        assert content.allow == []
        assert content.deny == []

    @pytest.mark.unit
    def test_default_values_encode_to_empty_object(self) -> None:
        assert encode(ServerAclEventContent()) == {}

    @pytest.mark.unit
    def test_non_default_values_encoded(self) -> None:
        content = ServerAclEventContent(allow_ip_literals=False, allow=["*"])
        assert encode(content) == {"allow_ip_literals": False, "allow": ["*"]}

    @pytest.mark.unit
    def test_patterns_are_not_server_names(self) -> None:
        payload = {"allow": ["*.example.com", "matrix.?rg"], "deny": ["1.1.1.*", "*"]}
        content = decode(ServerAclEventContent, payload)
        assert content.allow == ["*.example.com", "matrix.?rg"]
        assert content.deny == ["1.1.1.*", "*"]
        assert not ServerName.is_valid(content.allow[0])

    @pytest.mark.unit
    def test_patterns_must_be_strings(self) -> None:
        with pytest.raises(DecodeError):
            decode(ServerAclEventContent, {"allow": [1]})


class TestServerAclEvent:
    @pytest.mark.unit
    def test_decode_empty_content(self, acl_event_json: dict[str, object]) -> None:
        event = decode(ServerAclEvent, acl_event_json)
        assert event.content.allow_ip_literals is True
        assert event.content.allow == []
        assert event.content.deny == []

    @pytest.mark.unit
    def test_envelope_identifiers_validated(self, acl_event_json: dict[str, object]) -> None:
        event = decode(ServerAclEvent, acl_event_json)
        assert isinstance(event.sender, UserId)
        assert isinstance(event.room_id, RoomId)
        assert event.room_id.server_name == ServerName("example.com")
        assert event.event_id.localpart == "h29iv0s8"

    @pytest.mark.unit
    def test_encode_omits_defaults(self, acl_event_json: dict[str, object]) -> None:
        event = decode(ServerAclEvent, acl_event_json)
        encoded = encode(event)
        assert encoded["content"] == {}
        assert encoded == acl_event_json

    @pytest.mark.unit
    def test_decode_json_text(self, acl_event_json: dict[str, object]) -> None:
        event = decode(ServerAclEvent, json.dumps(acl_event_json))
        assert json.loads(encode_json(event)) == acl_event_json

    @pytest.mark.unit
    def test_origin_server_ts_datetime(self, acl_event_json: dict[str, object]) -> None:
        event = decode(ServerAclEvent, acl_event_json)
        assert event.origin_server_ts_datetime == datetime(1970, 1, 1, 0, 0, 0, 1000, tzinfo=UTC)

    @pytest.mark.unit
    def test_prev_content(self, acl_event_json: dict[str, object]) -> None:
        acl_event_json["prev_content"] = {"deny": ["evil.example"]}
        event = decode(ServerAclEvent, acl_event_json)
        assert event.prev_content is not None
        assert event.prev_content.deny == ["evil.example"]

    @pytest.mark.unit
    def test_type_mismatch_rejected(self, acl_event_json: dict[str, object]) -> None:
        acl_event_json["type"] = "m.room.topic"
        with pytest.raises(DecodeError) as exc_info:
            decode(ServerAclEvent, acl_event_json)
        assert "does not match content type" in exc_info.value.errors[0]["msg"]
        assert exc_info.value.kinds == []

    @pytest.mark.unit
    def test_invalid_sender_rejected(self, acl_event_json: dict[str, object]) -> None:
        acl_event_json["sender"] = "carl:example.com"
        with pytest.raises(DecodeError) as exc_info:
            decode(ServerAclEvent, acl_event_json)
        assert exc_info.value.kinds == [ErrorKind.MISSING_LEADING_SIGIL]
        assert exc_info.value.errors[0]["loc"] == ("sender",)

    @pytest.mark.unit
    def test_invalid_room_server_rejected(self, acl_event_json: dict[str, object]) -> None:
        acl_event_json["room_id"] = "!n8f893n9:example.com:99999"
        with pytest.raises(DecodeError) as exc_info:
            decode(ServerAclEvent, acl_event_json)
        assert exc_info.value.kinds == [ErrorKind.INVALID_PORT]

    @pytest.mark.unit
    def test_negative_timestamp_rejected(self, acl_event_json: dict[str, object]) -> None:
        acl_event_json["origin_server_ts"] = -1
        with pytest.raises(DecodeError):
            decode(ServerAclEvent, acl_event_json)

    @pytest.mark.unit
    def test_missing_content_rejected(self, acl_event_json: dict[str, object]) -> None:
        del acl_event_json["content"]
        with pytest.raises(DecodeError):
            decode(ServerAclEvent, acl_event_json)

    @pytest.mark.unit
    def test_unparametrized_envelope_rejected(self, acl_event_json: dict[str, object]) -> None:
        with pytest.raises(DecodeError) as exc_info:
            decode(StateEvent, acl_event_json)
        assert "content type is unknown" in exc_info.value.errors[0]["msg"]
