"""Tests for equality, ordering and hashing of identifiers."""

from __future__ import annotations

import copy

import pytest

from tessera.identifiers import RoomId, ServerName, UserId


@pytest.mark.unit
class TestEquality:
    def test_equal_text_is_equal(self) -> None:
        assert ServerName("example.com") == ServerName("example.com")

    def test_different_text_is_not_equal(self) -> None:
        assert ServerName("example.com") != ServerName("example.org")

    def test_equal_to_plain_string(self) -> None:
        assert ServerName("example.com") == "example.com"
        assert "example.com" == ServerName("example.com")

    def test_case_sensitive(self) -> None:
        assert ServerName("Example.com") != ServerName("example.com")

    def test_all_forms_equal_and_hash_equal(self) -> None:
        text = "ruma.io:8080"
        forms = [
            ServerName(text),
            ServerName.parse(text.encode()),
            ServerName(text).to_owned(),
            ServerName(text).share(),
            copy.copy(ServerName(text)),
        ]
        assert all(form == forms[0] for form in forms)
        assert len({hash(form) for form in forms}) == 1

    def test_hash_matches_plain_string(self) -> None:
        assert hash(ServerName("example.com")) == hash("example.com")

    def test_dict_lookup_by_string(self) -> None:
        servers = {ServerName("example.com"): 1}
        assert servers["example.com"] == 1

    def test_set_deduplicates(self) -> None:
        names = {ServerName("a.example"), ServerName("a.example"), ServerName("b.example")}
        assert len(names) == 2

    def test_different_identifier_types_never_equal(self) -> None:
        user = UserId("@carl:example.com")
        room = RoomId("!carl:example.com")
        assert user != room
        assert user != ServerName("example.com")

    def test_not_equal_to_non_strings(self) -> None:
        assert ServerName("example.com") != 42


@pytest.mark.unit
class TestOrdering:
    def test_lexicographic(self) -> None:
        assert ServerName("a.example") < ServerName("b.example")
        assert ServerName("b.example") > ServerName("a.example")
        assert ServerName("a.example") <= ServerName("a.example")
        assert ServerName("a.example") >= ServerName("a.example")

    def test_byte_order_for_mixed_case(self) -> None:
        # 'Z' (0x5a) sorts before 'a' (0x61)
        assert ServerName("Zeta.example") < ServerName("alpha.example")

    def test_sorted(self) -> None:
        names = [ServerName(v) for v in ["ruma.io", "example.com", "[::1]", "127.0.0.1"]]
        assert [str(n) for n in sorted(names)] == [
            "127.0.0.1",
            "[::1]",
            "example.com",
            "ruma.io",
        ]

    def test_compares_with_plain_string(self) -> None:
        assert ServerName("a.example") < "b.example"

    def test_ordering_against_other_identifier_type_fails(self) -> None:
        with pytest.raises(TypeError):
            _ = UserId("@a:example.com") < RoomId("!a:example.com")
