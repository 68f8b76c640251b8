"""Tests for the identifier error hierarchy."""

from __future__ import annotations

import pytest

from tessera.identifiers.exceptions import (
    EmptyInputError,
    ErrorKind,
    IdentifierError,
    InvalidCharactersError,
    InvalidMxcUriError,
    InvalidPortError,
    InvalidServerNameError,
    MalformedHostError,
    MalformedIpv6Error,
    MaximumLengthExceededError,
    MissingDelimiterError,
    MissingLeadingSigilError,
)


@pytest.mark.unit
class TestIdentifierError:
    def test_message_and_code(self) -> None:
        err = IdentifierError("Something failed")
        assert err.message == "Something failed"
        assert err.error_code == "INVALID_IDENTIFIER"
        assert err.context == {}

    def test_str_with_context(self) -> None:
        err = IdentifierError("Failed", context={"a": "1"})
        assert str(err) == "Failed (a=1)"

    def test_repr(self) -> None:
        err = IdentifierError("Failed", context={"a": "1"})
        assert repr(err) == "IdentifierError('Failed', context={'a': '1'})"

    def test_is_value_error(self) -> None:
        assert issubclass(IdentifierError, ValueError)


@pytest.mark.unit
class TestServerNameErrors:
    def test_empty_input(self) -> None:
        err = EmptyInputError("Server name")
        assert str(err) == "Server name cannot be empty"
        assert err.kind is ErrorKind.EMPTY_INPUT
        assert err.error_code == "EMPTY_INPUT"

    def test_invalid_port(self) -> None:
        err = InvalidPortError("matrix.org:hello", "hello")
        assert str(err) == "Invalid port in server name 'matrix.org:hello' (port=hello)"
        assert err.server_name == "matrix.org:hello"
        assert err.kind is ErrorKind.INVALID_PORT

    def test_malformed_ipv6(self) -> None:
        err = MalformedIpv6Error("[fe80::1]!", "unexpected trailing text '!'")
        assert err.context == {"detail": "unexpected trailing text '!'"}
        assert err.kind is ErrorKind.MALFORMED_IPV6

    def test_malformed_host(self) -> None:
        err = MalformedHostError("bad host", "bad host")
        assert err.host == "bad host"
        assert err.kind is ErrorKind.MALFORMED_HOST

    @pytest.mark.parametrize("cls", [InvalidPortError, MalformedIpv6Error, MalformedHostError])
    def test_grammar_errors_are_server_name_errors(self, cls: type[IdentifierError]) -> None:
        assert issubclass(cls, InvalidServerNameError)


@pytest.mark.unit
class TestFamilyErrors:
    def test_maximum_length(self) -> None:
        err = MaximumLengthExceededError("User ID", 300, 255)
        assert str(err) == "User ID too long: 300 bytes (max 255) (length=300, limit=255)"

    def test_missing_sigil(self) -> None:
        err = MissingLeadingSigilError("Room ID", "room", "!")
        assert err.sigil == "!"
        assert err.kind is ErrorKind.MISSING_LEADING_SIGIL

    def test_missing_delimiter(self) -> None:
        assert MissingDelimiterError("User ID", "@carl").kind is ErrorKind.MISSING_DELIMITER

    def test_invalid_characters(self) -> None:
        err = InvalidCharactersError("User ID localpart", "car l")
        assert err.error_code == "INVALID_CHARACTERS"

    def test_invalid_mxc_uri(self) -> None:
        err = InvalidMxcUriError("mxc://x", "missing media ID")
        assert err.reason == "missing media ID"
        assert err.kind is ErrorKind.INVALID_MXC_URI
