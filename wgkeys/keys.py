"""WireGuard key types: public key, private key and preshared secret.

All three wrap exactly 32 bytes. They share one implementation in
:class:`Key` and differ only in their derivation rules and in how secret
material is handled: :class:`PrivateKey` and :class:`SharedSecret` zero their
buffer when they are wiped, consumed with :meth:`raw`, leave a ``with``
block, or are garbage collected.

Example:
    >>> private = PrivateKey.generate()
    >>> public = private.pubkey()
    >>> PublicKey.parse(public.to_hex()) == public
    True
"""

import hmac
import logging
from functools import total_ordering
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from wgkeys import curve, encoding
from wgkeys.errors import LengthError

logger = logging.getLogger(__name__)


def _zero(buf: bytearray) -> None:
    """Overwrite a buffer with zeros in place."""
    for i in range(len(buf)):
        buf[i] = 0


@total_ordering
class Key:
    """Fixed-length key value.

    Subclasses set ``LENGTH`` and ``DESCRIPTION``. Instances of different
    subclasses never compare equal, even when their bytes match.
    """

    LENGTH: ClassVar[int] = encoding.KEY_LEN
    DESCRIPTION: ClassVar[str] = "WireGuard key"

    __slots__ = ("_data",)

    def __init__(self, data: bytes):
        """
        Wrap raw bytes without validating them beyond their length.

        Raises:
            LengthError: If ``data`` is not exactly ``LENGTH`` bytes
        """
        if len(data) != self.LENGTH:
            raise LengthError(self.LENGTH, len(data))
        self._data = bytearray(data)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "Key":
        """
        Copy a key out of any bytes-like object.

        Raises:
            LengthError: If ``data`` is not exactly ``LENGTH`` bytes; the
                input is never padded or truncated
        """
        return cls(memoryview(data).tobytes())

    def raw(self) -> bytes:
        """Return the key bytes."""
        return bytes(self._data)

    def as_bytes(self) -> memoryview:
        """Read-only view of the key bytes, without copying."""
        return memoryview(self._data).toreadonly()

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # Text encodings

    def to_hex(self) -> str:
        return encoding.HEX.encode(self._data)

    @classmethod
    def from_hex(cls, text: str):
        return cls(encoding.HEX.decode(text))

    def to_base64(self) -> str:
        return encoding.BASE64.encode(self._data)

    @classmethod
    def from_base64(cls, text: str):
        return cls(encoding.BASE64.decode(text))

    def to_base64_urlsafe(self) -> str:
        return encoding.BASE64_URLSAFE.encode(self._data)

    @classmethod
    def from_base64_urlsafe(cls, text: str):
        return cls(encoding.BASE64_URLSAFE.decode(text))

    def to_base32(self) -> str:
        return encoding.BASE32.encode(self._data)

    @classmethod
    def from_base32(cls, text: str):
        return cls(encoding.BASE32.decode(text))

    @classmethod
    def parse(cls, text: str):
        """
        Parse a key from hex, base64, URL-safe base64 or base32.

        The encoding is chosen from the length of ``text``; see
        :func:`wgkeys.encoding.parse`.

        Raises:
            LengthError: If the length matches no enabled encoding
            CodecError: If the selected encoding rejects the input
        """
        return cls(encoding.parse(text))

    @classmethod
    def from_str(cls, text: str) -> "Key":
        """Inverse of ``str(key)``; accepts every encoding :meth:`parse` does."""
        return cls.parse(text)

    def __str__(self) -> str:
        return encoding.display(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"

    # Comparison

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return hmac.compare_digest(self._data, other._data)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bytes(self._data) < bytes(other._data)

    def __hash__(self) -> int:
        return hash((type(self), bytes(self._data)))

    # Copies must own their buffer, otherwise wiping one wipes both

    def __copy__(self):
        return type(self)(self._data)

    def __deepcopy__(self, memo: dict):
        return type(self)(self._data)

    def __reduce__(self):
        return (type(self), (bytes(self._data),))

    # pydantic integration

    @classmethod
    def _from_python(cls, value: Any):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.from_bytes(value)
        raise ValueError(f"{cls.DESCRIPTION} must be a string or 32 bytes")

    def _serialize(self, info: core_schema.SerializationInfo) -> str | bytes:
        # Text formats get the display string, everything else the raw bytes
        if info.mode_is_json():
            return str(self)
        return bytes(self._data)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(cls.parse),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(
                cls._from_python
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        codec = encoding.display_codec()
        return {
            "type": "string",
            "format": codec.name,
            "description": f"{cls.DESCRIPTION} ({codec.name} encoded)",
        }


class SecretKey(Key):
    """Key holding secret material that is zeroed at the end of its life.

    Use as a context manager to bound the lifetime explicitly::

        with PrivateKey.generate() as key:
            config.write(str(key))
    """

    __slots__ = ()

    def wipe(self) -> None:
        """Overwrite the key bytes with zeros."""
        data = getattr(self, "_data", None)
        if data is not None:
            _zero(data)

    def raw(self) -> bytes:
        """Return the key bytes and wipe this instance."""
        data = bytes(self._data)
        self.wipe()
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __del__(self):
        self.wipe()


class PublicKey(Key):
    """WireGuard public key."""

    DESCRIPTION = "WireGuard public key"

    __slots__ = ()


class PrivateKey(SecretKey):
    """WireGuard private key (X25519 scalar)."""

    DESCRIPTION = "WireGuard private key"

    __slots__ = ()

    @classmethod
    def generate(cls) -> "PrivateKey":
        """Generate a new clamped private key from the system CSPRNG."""
        buf = bytearray(cls.LENGTH)
        try:
            curve.fill_random(buf)
            key = cls(curve.clamp(buf))
        finally:
            _zero(buf)
        logger.debug("Generated new private key")
        return key

    def valid(self) -> bool:
        """
        Check whether this key is a usable X25519 scalar.

        A valid key is non-zero and already clamped, so clamping it again
        leaves it unchanged. Decoding never checks this; callers that must
        reject unusable scalars call it after parsing.
        """
        return curve.is_clamped(self._data)

    def pubkey(self) -> PublicKey:
        """Derive the public key for this private key."""
        return PublicKey(curve.derive_public(self._data))


class SharedSecret(SecretKey):
    """WireGuard preshared key."""

    DESCRIPTION = "WireGuard preshared key"

    __slots__ = ()

    @classmethod
    def generate(cls) -> "SharedSecret":
        """Generate a new preshared key from the system CSPRNG."""
        buf = bytearray(cls.LENGTH)
        try:
            curve.fill_random(buf)
            key = cls(buf)
        finally:
            _zero(buf)
        logger.debug("Generated new preshared key")
        return key
