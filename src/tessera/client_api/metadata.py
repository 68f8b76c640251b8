"""Endpoint descriptions for the client-server API.

An endpoint is described once by ``EndpointMetadata``; request types use it
to render their path, and server code uses it to match an incoming path and
recover the raw path arguments. Path arguments are percent-encoded as a
single segment, so identifiers containing ``/``, ``:`` or ``@`` round-trip
unchanged.

Example:
    >>> meta = EndpointMetadata(
    ...     description="Get all profile information of a user.",
    ...     method=Method.GET,
    ...     name="get_profile",
    ...     path="/_matrix/client/r0/profile/:user_id",
    ... )
    >>> meta.render_path(user_id="@carl:example.com")
    '/_matrix/client/r0/profile/%40carl%3Aexample.com'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, unquote

if TYPE_CHECKING:
    from collections.abc import Mapping


class Method(StrEnum):
    """HTTP method of an endpoint."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class AuthScheme(StrEnum):
    """How a request to an endpoint is authenticated."""

    NONE = "none"
    ACCESS_TOKEN = "access_token"
    SERVER_SIGNATURES = "server_signatures"


class PathArgumentError(ValueError):
    """Raised when a path argument is missing or fails validation.

    Attributes:
        error_code: "INVALID_PATH_ARGUMENT" (class constant).
        field: Name of the path argument.
        reason: Human-readable failure reason.
        context: Structured debugging information.
    """

    error_code: str = "INVALID_PATH_ARGUMENT"

    def __init__(self, field: str, reason: str, **extra_context: Any) -> None:
        self.field = field
        self.reason = reason
        self.message = f"Invalid path argument '{field}': {reason}"
        self.context = {"field": field, "reason": reason, **extra_context}
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class EndpointMetadata:
    """Static description of one API endpoint.

    Attributes:
        description: Short human-readable summary.
        method: HTTP method.
        name: Stable endpoint name, used in logs.
        path: Path template; segments starting with ``:`` are arguments.
        rate_limited: Whether the server rate limits this endpoint.
        authentication: How requests are authenticated.
    """

    description: str
    method: Method
    name: str
    path: str
    rate_limited: bool = False
    authentication: AuthScheme = AuthScheme.NONE

    @property
    def path_arguments(self) -> tuple[str, ...]:
        """Names of the path arguments, in template order."""
        return tuple(seg[1:] for seg in self.path.split("/") if seg.startswith(":"))

    def render_path(self, **arguments: object) -> str:
        """Substitute *arguments* into the path template.

        Each value is rendered with ``str()`` and percent-encoded as one
        segment.

        Raises:
            PathArgumentError: If an argument named by the template is missing.
        """
        segments = []
        for segment in self.path.split("/"):
            if segment.startswith(":"):
                name = segment[1:]
                if name not in arguments:
                    raise PathArgumentError(name, "missing", endpoint=self.name)
                segment = quote(str(arguments[name]), safe="")
            segments.append(segment)
        return "/".join(segments)

    def match_path(self, path: str) -> Mapping[str, str] | None:
        """Match a concrete request path against the template.

        Returns:
            The percent-decoded path arguments, or None if *path* does not
            belong to this endpoint. Values are not validated.
        """
        template_segments = self.path.split("/")
        path_segments = path.split("/")
        if len(template_segments) != len(path_segments):
            return None
        arguments: dict[str, str] = {}
        for expected, actual in zip(template_segments, path_segments, strict=True):
            if expected.startswith(":"):
                arguments[expected[1:]] = unquote(actual)
            elif expected != actual:
                return None
        return arguments
