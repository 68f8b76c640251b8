"""``GET /_matrix/client/r0/profile/{userId}``

Get all profile information of a user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated

from pydantic import Field

from tessera.client_api.metadata import AuthScheme, EndpointMetadata, Method, PathArgumentError
from tessera.identifiers import IdentifierError, MxcUri, UserId
from tessera.serde import EmptyStringAsNone, WireModel

logger = logging.getLogger(__name__)

METADATA = EndpointMetadata(
    description="Get all profile information of a user.",
    method=Method.GET,
    name="get_profile",
    path="/_matrix/client/r0/profile/:user_id",
    rate_limited=False,
    authentication=AuthScheme.NONE,
)


@dataclass(frozen=True, slots=True)
class Request:
    """Request for a user's profile.

    Attributes:
        user_id: The user whose profile will be retrieved.
    """

    user_id: UserId

    def __post_init__(self) -> None:
        if not isinstance(self.user_id, UserId):
            msg = f"user_id must be a UserId, got {type(self.user_id).__name__}"
            raise TypeError(msg)

    def path(self) -> str:
        """The request path with the user ID as a single encoded segment."""
        return METADATA.render_path(user_id=self.user_id)

    @classmethod
    def from_path(cls, path: str) -> Request:
        """Rebuild a request from an incoming request path.

        Raises:
            PathArgumentError: If *path* does not match the endpoint or the
                user ID is not valid.
        """
        arguments = METADATA.match_path(path)
        if arguments is None:
            raise PathArgumentError("user_id", "path does not match endpoint", path=path)
        try:
            user_id = UserId.parse(arguments["user_id"])
        except IdentifierError as exc:
            logger.debug("Rejected %s path argument: %s", METADATA.name, exc.kind)
            raise PathArgumentError("user_id", exc.message, kind=str(exc.kind)) from exc
        return cls(user_id)


class Response(WireModel):
    """A user's profile.

    Every field is independently optional; a response with none of them is
    valid.

    Attributes:
        avatar_url: The user's avatar URL, if set. In compatibility mode an
            empty string on the wire decodes as absent.
        displayname: The user's display name, if set. Free text, not validated.
        blurhash: BlurHash of the avatar, sent under the unstable wire name
            ``xyz.amorgan.blurhash``.
    """

    avatar_url: Annotated[MxcUri | None, EmptyStringAsNone] = None
    displayname: str | None = None
    blurhash: str | None = Field(default=None, alias="xyz.amorgan.blurhash")
