"""Typed WireGuard keys with hex, base64 and base32 encodings."""

from wgkeys.errors import CodecError, LengthError, ParseError
from wgkeys.keys import Key, PrivateKey, PublicKey, SecretKey, SharedSecret

__all__ = [
    "Key",
    "SecretKey",
    "PublicKey",
    "PrivateKey",
    "SharedSecret",
    "ParseError",
    "LengthError",
    "CodecError",
]
