"""Tessera Client API -- client-server endpoint descriptions."""

from tessera.client_api.metadata import AuthScheme, EndpointMetadata, Method, PathArgumentError

__all__ = [
    "AuthScheme",
    "EndpointMetadata",
    "Method",
    "PathArgumentError",
]
