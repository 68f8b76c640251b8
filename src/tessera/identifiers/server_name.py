"""Server name identifier.

A server name is the host (and optional port) that identifies a homeserver:
an IPv4 literal, a bracketed IPv6 literal, or a DNS name.

Example:
    >>> from tessera.identifiers.server_name import ServerName
    >>> name = ServerName("ruma.io:8080")
    >>> name.host, name.port
    ('ruma.io', 8080)
    >>> str(name)
    'ruma.io:8080'
"""

from __future__ import annotations

from typing import ClassVar

from tessera.identifiers.base import Identifier
from tessera.identifiers.validation import (
    HostKind,
    classify_host,
    split_server_name,
    validate_server_name,
)


class ServerName(Identifier):
    """Validated server name.

    Rendering returns exactly the text that was validated: no case folding,
    no port normalization, brackets kept on IPv6 literals.

    Raises:
        EmptyInputError: If value is empty.
        InvalidPortError: If the port is empty, non-numeric or out of range.
        MalformedIpv6Error: If a bracketed literal is invalid or has trailing text.
        MalformedHostError: If the host is neither IPv4 nor a DNS name.
    """

    __slots__ = ()

    identifier_type: ClassVar[str] = "Server name"
    json_schema_description: ClassVar[str] = "An IP address or hostname, with optional port"

    @classmethod
    def _validate(cls, value: str) -> None:
        validate_server_name(value)

    @property
    def host_kind(self) -> HostKind:
        """Which grammar branch the host belongs to; no re-validation."""
        return classify_host(self.host)

    @property
    def host(self) -> str:
        """The host component; IPv6 literals keep their brackets."""
        return split_server_name(self.value)[0]

    @property
    def port(self) -> int | None:
        """The explicit port, or None when the server name has no port."""
        return split_server_name(self.value)[1]

    def is_ip_literal(self) -> bool:
        """Return True if the host is an IPv4 or IPv6 address literal."""
        return self.host_kind is not HostKind.DNS
