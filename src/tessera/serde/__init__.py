"""Tessera Serde -- wire encoding and decoding for protocol models."""

from tessera.serde.codec import WireModel, decode, encode, encode_json
from tessera.serde.compat import EmptyStringAsNone, compat_enabled
from tessera.serde.errors import DecodeError
from tessera.serde.settings import SerdeSettings, get_serde_settings

__all__ = [
    "DecodeError",
    "EmptyStringAsNone",
    "SerdeSettings",
    "WireModel",
    "compat_enabled",
    "decode",
    "encode",
    "encode_json",
    "get_serde_settings",
]
