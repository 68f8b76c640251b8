"""Identifier error hierarchy for type-safe validation failures.

Every failure produced while validating an identifier is an instance of
``IdentifierError``. Errors carry a coarse ``ErrorKind`` for callers that only
branch on the category, a machine-readable ``error_code``, and structured
context for logging.

``IdentifierError`` subclasses ``ValueError`` so that pydantic wraps it into a
regular validation error when an identifier is decoded from a payload.

Example:
    >>> from tessera.identifiers.exceptions import InvalidPortError
    >>> raise InvalidPortError("matrix.org:hello", port="hello")
    InvalidPortError: Invalid port in server name 'matrix.org:hello' (port=hello)
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

__all__ = [
    "EmptyInputError",
    "ErrorKind",
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
]


class ErrorKind(StrEnum):
    """Coarse category of an identifier validation failure."""

    EMPTY_INPUT = "empty_input"
    INVALID_PORT = "invalid_port"
    MALFORMED_IPV6 = "malformed_ipv6"
    MALFORMED_HOST = "malformed_host"
    MAXIMUM_LENGTH_EXCEEDED = "maximum_length_exceeded"
    MISSING_LEADING_SIGIL = "missing_leading_sigil"
    MISSING_DELIMITER = "missing_delimiter"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_MXC_URI = "invalid_mxc_uri"


class IdentifierError(ValueError):
    """Base class for all identifier validation errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        kind: Coarse failure category.
        message: Human-readable error description.
        context: Structured debugging information (offending input, parts).
    """

    error_code: str = "INVALID_IDENTIFIER"
    kind: ErrorKind = ErrorKind.INVALID_CHARACTERS

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize identifier error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class EmptyInputError(IdentifierError):
    """Raised when a zero-length string is presented for validation.

    Example:
        >>> raise EmptyInputError("server name")
        EmptyInputError: server name cannot be empty
    """

    error_code: str = "EMPTY_INPUT"
    kind: ErrorKind = ErrorKind.EMPTY_INPUT

    def __init__(self, identifier_type: str) -> None:
        self.identifier_type = identifier_type
        super().__init__(f"{identifier_type} cannot be empty")


class InvalidServerNameError(IdentifierError):
    """Base class for server name grammar failures.

    Attributes:
        server_name: The rejected input.
    """

    error_code: str = "INVALID_SERVER_NAME"

    def __init__(self, reason: str, server_name: str, **extra_context: Any) -> None:
        self.server_name = server_name
        message = f"{reason} in server name {server_name!r}"
        super().__init__(message, extra_context)


class InvalidPortError(InvalidServerNameError):
    """Raised when the text after ``:`` is empty, non-numeric or out of range."""

    error_code: str = "INVALID_PORT"
    kind: ErrorKind = ErrorKind.INVALID_PORT

    def __init__(self, server_name: str, port: str) -> None:
        self.port = port
        super().__init__("Invalid port", server_name, port=port)


class MalformedIpv6Error(InvalidServerNameError):
    """Raised when a bracketed literal is not IPv6 or is followed by garbage."""

    error_code: str = "MALFORMED_IPV6"
    kind: ErrorKind = ErrorKind.MALFORMED_IPV6

    def __init__(self, server_name: str, detail: str) -> None:
        self.detail = detail
        super().__init__("Malformed IPv6 literal", server_name, detail=detail)


class MalformedHostError(InvalidServerNameError):
    """Raised when the host is neither an IPv4 literal nor a valid DNS name."""

    error_code: str = "MALFORMED_HOST"
    kind: ErrorKind = ErrorKind.MALFORMED_HOST

    def __init__(self, server_name: str, host: str) -> None:
        self.host = host
        super().__init__("Malformed host", server_name, host=host)


class MaximumLengthExceededError(IdentifierError):
    """Raised when an identifier is longer than the protocol allows."""

    error_code: str = "MAXIMUM_LENGTH_EXCEEDED"
    kind: ErrorKind = ErrorKind.MAXIMUM_LENGTH_EXCEEDED

    def __init__(self, identifier_type: str, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        message = f"{identifier_type} too long: {length} bytes (max {limit})"
        super().__init__(message, {"length": length, "limit": limit})


class MissingLeadingSigilError(IdentifierError):
    """Raised when an identifier does not start with its type's sigil."""

    error_code: str = "MISSING_LEADING_SIGIL"
    kind: ErrorKind = ErrorKind.MISSING_LEADING_SIGIL

    def __init__(self, identifier_type: str, value: str, sigil: str) -> None:
        self.sigil = sigil
        message = f"{identifier_type} {value!r} must start with {sigil!r}"
        super().__init__(message, {"sigil": sigil})


class MissingDelimiterError(IdentifierError):
    """Raised when the ``:`` between localpart and server name is absent."""

    error_code: str = "MISSING_DELIMITER"
    kind: ErrorKind = ErrorKind.MISSING_DELIMITER

    def __init__(self, identifier_type: str, value: str) -> None:
        message = f"{identifier_type} {value!r} is missing the ':' delimiter"
        super().__init__(message)


class InvalidCharactersError(IdentifierError):
    """Raised when text contains characters outside its allowed set."""

    error_code: str = "INVALID_CHARACTERS"
    kind: ErrorKind = ErrorKind.INVALID_CHARACTERS

    def __init__(self, identifier_type: str, value: str) -> None:
        message = f"{identifier_type} {value!r} contains invalid characters"
        super().__init__(message)


class InvalidMxcUriError(IdentifierError):
    """Raised when a media reference is not ``mxc://<server>/<media id>``."""

    error_code: str = "INVALID_MXC_URI"
    kind: ErrorKind = ErrorKind.INVALID_MXC_URI

    def __init__(self, value: str, reason: str) -> None:
        self.reason = reason
        message = f"Invalid MXC URI {value!r}: {reason}"
        super().__init__(message, {"reason": reason})
