"""Pure grammar validation for protocol identifiers.

All functions in this module are side-effect free: they take a string, and
either return normally or raise an ``IdentifierError`` subclass describing
why the string does not match the grammar. Nothing here logs, caches, or
allocates beyond slicing.

Server name grammar::

    server_name = host [ ":" port ]
    host        = IPv4address / "[" IPv6address "]" / dns-name
    port        = 1*5DIGIT              ; 0..65535

A dotted-decimal host that parses as an IPv4 address is classified as
``HostKind.IPV4``; the DNS branch is only consulted when the IPv4 branch
fails, so ``"256.1.1.1"`` is accepted as a DNS name made of numeric labels.
"""

from __future__ import annotations

import ipaddress
import re
from enum import StrEnum

from tessera.identifiers.exceptions import (
    EmptyInputError,
    IdentifierError,
    InvalidCharactersError,
    InvalidMxcUriError,
    InvalidPortError,
    MalformedHostError,
    MalformedIpv6Error,
    MaximumLengthExceededError,
    MissingDelimiterError,
    MissingLeadingSigilError,
)

__all__ = [
    "MAX_BYTES",
    "MAX_PORT",
    "MXC_SCHEME",
    "HostKind",
    "classify_host",
    "classify_server_name",
    "is_valid_server_name",
    "localpart_is_fully_conforming",
    "parse_id",
    "split_server_name",
    "validate_event_id",
    "validate_id",
    "validate_mxc_uri",
    "validate_room_id",
    "validate_server_name",
    "validate_user_id",
]

# Maximum length of any identifier, in bytes of its UTF-8 encoding.
MAX_BYTES = 255

MAX_PORT = 65535

MXC_SCHEME = "mxc://"

_DNS_LABEL = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")
_PORT = re.compile(r"[0-9]+")
_MEDIA_ID = re.compile(r"[A-Za-z0-9_-]+")
_CONFORMING_LOCALPART = re.compile(r"[a-z0-9._=/-]*")


class HostKind(StrEnum):
    """Which grammar branch accepted a server name's host."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    DNS = "dns"


def _check_length(value: str, identifier_type: str) -> None:
    try:
        length = len(value.encode("utf-8"))
    except UnicodeEncodeError as exc:
        # Lone surrogates have no UTF-8 encoding.
        raise InvalidCharactersError(identifier_type, value) from exc
    if length > MAX_BYTES:
        raise MaximumLengthExceededError(identifier_type, length, MAX_BYTES)


def _is_ipv4(host: str) -> bool:
    try:
        ipaddress.IPv4Address(host)
    except ValueError:
        return False
    return True


def _is_ipv6(literal: str) -> bool:
    # Zone identifiers are not part of the server name grammar.
    if "%" in literal or not literal.isascii():
        return False
    try:
        ipaddress.IPv6Address(literal)
    except ValueError:
        return False
    return True


def _is_dns_name(host: str) -> bool:
    if not host or not host.isascii():
        return False
    return all(_DNS_LABEL.fullmatch(label) for label in host.split("."))


def _check_port(server_name: str, port: str) -> None:
    if not _PORT.fullmatch(port) or int(port) > MAX_PORT:
        raise InvalidPortError(server_name, port)


def classify_server_name(server_name: str) -> HostKind:
    """Validate *server_name* and report which host branch accepted it.

    Args:
        server_name: Candidate server name, optionally with a ``:port`` suffix.

    Returns:
        The ``HostKind`` of the host component.

    Raises:
        EmptyInputError: If *server_name* is empty.
        MaximumLengthExceededError: If longer than ``MAX_BYTES``.
        InvalidCharactersError: If the text has no UTF-8 encoding.
        MalformedIpv6Error: If a bracketed literal is not IPv6, is unterminated,
            or is followed by anything other than ``:port``.
        MalformedHostError: If the host is neither IPv4 nor a DNS name.
        InvalidPortError: If the port is empty, non-numeric or above 65535.
    """
    if not server_name:
        raise EmptyInputError("Server name")
    _check_length(server_name, "Server name")

    if server_name.startswith("["):
        end_of_literal = server_name.find("]")
        if end_of_literal == -1:
            raise MalformedIpv6Error(server_name, "missing closing bracket")
        literal = server_name[1:end_of_literal]
        if not _is_ipv6(literal):
            raise MalformedIpv6Error(server_name, f"{literal!r} is not an IPv6 address")
        rest = server_name[end_of_literal + 1 :]
        if rest and not rest.startswith(":"):
            raise MalformedIpv6Error(server_name, f"unexpected trailing text {rest!r}")
        kind = HostKind.IPV6
    else:
        host, _, _ = server_name.partition(":")
        rest = server_name[len(host) :]
        if _is_ipv4(host):
            kind = HostKind.IPV4
        elif _is_dns_name(host):
            kind = HostKind.DNS
        else:
            raise MalformedHostError(server_name, host)

    if rest:
        _check_port(server_name, rest[1:])
    return kind


def classify_host(host: str) -> HostKind:
    """Report the ``HostKind`` of a host split from a validated server name.

    Does not validate; the result is meaningless for arbitrary text.
    """
    if host.startswith("["):
        return HostKind.IPV6
    if _is_ipv4(host):
        return HostKind.IPV4
    return HostKind.DNS


def validate_server_name(server_name: str) -> None:
    """Validate *server_name*, raising an ``InvalidServerNameError`` subclass on failure."""
    classify_server_name(server_name)


def is_valid_server_name(server_name: str) -> bool:
    """Return True if *server_name* matches the server name grammar."""
    try:
        classify_server_name(server_name)
    except IdentifierError:
        return False
    return True


def split_server_name(server_name: str) -> tuple[str, int | None]:
    """Split an already validated server name into host and port.

    The host of an IPv6 literal keeps its brackets, so the result can be
    joined back together without further knowledge of the host kind.
    """
    if server_name.startswith("["):
        end_of_host = server_name.find("]") + 1
    else:
        end_of_host = server_name.find(":")
        if end_of_host == -1:
            end_of_host = len(server_name)
    host = server_name[:end_of_host]
    port = server_name[end_of_host + 1 :]
    return host, int(port) if port else None


def validate_id(value: str, sigil: str, identifier_type: str) -> None:
    """Check the length cap and leading sigil shared by all sigil identifiers."""
    if not value:
        raise EmptyInputError(identifier_type)
    _check_length(value, identifier_type)
    if not value.startswith(sigil):
        raise MissingLeadingSigilError(identifier_type, value, sigil)


def parse_id(value: str, sigil: str, identifier_type: str) -> int:
    """Validate a ``<sigil><localpart>:<server_name>`` identifier.

    Returns:
        Index of the ``:`` separating the localpart from the server name.
    """
    validate_id(value, sigil, identifier_type)
    colon_idx = value.find(":")
    if colon_idx == -1:
        raise MissingDelimiterError(identifier_type, value)
    validate_server_name(value[colon_idx + 1 :])
    return colon_idx


def localpart_is_fully_conforming(localpart: str) -> bool:
    """Check a user ID localpart against the current and historical grammars.

    Returns:
        True if the localpart only uses ``a-z 0-9 . _ = - /``; False if it
        only satisfies the historical grammar (printable ASCII except ``:``).

    Raises:
        InvalidCharactersError: If the localpart fails both grammars.
    """
    if _CONFORMING_LOCALPART.fullmatch(localpart):
        return True
    if any(not ("\x21" <= char <= "\x7e") or char == ":" for char in localpart):
        raise InvalidCharactersError("User ID localpart", localpart)
    return False


def validate_user_id(value: str) -> int:
    """Validate a user ID, returning the index of its delimiter."""
    colon_idx = parse_id(value, "@", "User ID")
    localpart_is_fully_conforming(value[1:colon_idx])
    return colon_idx


def validate_room_id(value: str) -> int:
    """Validate a room ID, returning the index of its delimiter."""
    return parse_id(value, "!", "Room ID")


def validate_event_id(value: str) -> int | None:
    """Validate an event ID.

    Event IDs from room versions 1 and 2 carry a server name; later versions
    are an opaque hash with no delimiter.

    Returns:
        Index of the delimiter, or None for delimiter-less event IDs.
    """
    if ":" in value:
        return parse_id(value, "$", "Event ID")
    validate_id(value, "$", "Event ID")
    return None


def validate_mxc_uri(value: str) -> int:
    """Validate a ``mxc://<server_name>/<media_id>`` content URI.

    Returns:
        Index of the ``/`` separating the server name from the media ID.
    """
    if not value:
        raise EmptyInputError("MXC URI")
    _check_length(value, "MXC URI")
    if not value.startswith(MXC_SCHEME):
        raise InvalidMxcUriError(value, f"must start with {MXC_SCHEME!r}")
    slash_idx = value.find("/", len(MXC_SCHEME))
    if slash_idx == -1:
        raise InvalidMxcUriError(value, "missing media ID")
    try:
        validate_server_name(value[len(MXC_SCHEME) : slash_idx])
    except IdentifierError as exc:
        raise InvalidMxcUriError(value, f"invalid server name ({exc.message})") from exc
    if not _MEDIA_ID.fullmatch(value[slash_idx + 1 :]):
        raise InvalidMxcUriError(value, "media ID must be non-empty [A-Za-z0-9_-]")
    return slash_idx
