"""Tessera Identifiers -- validated protocol identifier types.

Server names, user IDs, room IDs, event IDs and media URIs. Every type is an
immutable value object that can only be obtained through grammar validation,
compares and hashes by its text, and serializes as a plain string.
"""

from tessera.identifiers.base import Identifier
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
from tessera.identifiers.mxc_uri import MxcUri
from tessera.identifiers.server_name import ServerName
from tessera.identifiers.sigil_ids import EventId, RoomId, UserId
from tessera.identifiers.validation import (
    MAX_BYTES,
    HostKind,
    classify_host,
    classify_server_name,
    is_valid_server_name,
    validate_server_name,
)

__all__ = [
    "MAX_BYTES",
    "EmptyInputError",
    "ErrorKind",
    "EventId",
    "HostKind",
    "Identifier",
    "IdentifierError",
    "InvalidCharactersError",
    "InvalidMxcUriError",
    "InvalidPortError",
    "InvalidServerNameError",
    "MalformedHostError",
    "MalformedIpv6Error",
    "MaximumLengthExceededError",
    "MissingDelimiterError",
    "MissingLeadingSigilError",
    "MxcUri",
    "RoomId",
    "ServerName",
    "UserId",
    "classify_host",
    "classify_server_name",
    "is_valid_server_name",
    "validate_server_name",
]
