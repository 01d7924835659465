"""Text codecs for fixed-length key material.

Each codec turns a byte string into one textual representation and back.
Decoding is strict: the alphabet, padding and decoded length are all checked,
and base64 and base32 text must be the canonical encoding of its bytes. Failures
raise :class:`~wgkeys.errors.CodecError` or
:class:`~wgkeys.errors.LengthError`.

:func:`parse` picks a codec from the length of its input alone:

* 64 characters: hex
* 44 characters: standard base64, falling back to URL-safe base64
* 56 characters: base32

Only codecs enabled in :class:`~wgkeys.config.Settings` take part in
:func:`parse` and :func:`display`.
"""

import base64
import binascii
from abc import ABC, abstractmethod

from wgkeys.config import get_settings
from wgkeys.errors import CodecError, LengthError, ParseError

KEY_LEN = 32


class Codec(ABC):
    """A reversible text encoding for byte strings."""

    name: str

    def __init__(self, length: int = KEY_LEN):
        self.length = length

    @property
    @abstractmethod
    def text_length(self) -> int:
        """Number of characters produced for ``self.length`` bytes."""

    @abstractmethod
    def encode(self, data: bytes) -> str:
        """Encode bytes as text."""

    @abstractmethod
    def _decode(self, text: bytes) -> bytes:
        """Decode ASCII text, raising ``binascii.Error`` or ``ValueError``."""

    def decode(self, text: str) -> bytes:
        """
        Decode text into exactly ``self.length`` bytes.

        Raises:
            CodecError: If the codec rejects the input
            LengthError: If the decoded payload has the wrong length
        """
        try:
            ascii_text = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise CodecError(self.name, "non-ASCII character in input") from e

        try:
            data = self._decode(ascii_text)
        except (binascii.Error, ValueError) as e:
            raise CodecError(self.name, str(e)) from e

        if len(data) != self.length:
            raise LengthError(self.length, len(data))
        return data


class HexCodec(Codec):
    """Lowercase hex without separators."""

    name = "hex"

    @property
    def text_length(self) -> int:
        return self.length * 2

    def encode(self, data: bytes) -> str:
        return data.hex()

    def _decode(self, text: bytes) -> bytes:
        # unhexlify rejects whitespace, which bytes.fromhex would skip
        return binascii.unhexlify(text)


class Base64Codec(Codec):
    """RFC 4648 base64 with padding."""

    name = "base64"
    altchars: bytes | None = None

    @property
    def text_length(self) -> int:
        return (self.length + 2) // 3 * 4

    def encode(self, data: bytes) -> str:
        return base64.b64encode(data, altchars=self.altchars).decode("ascii")

    def _decode(self, text: bytes) -> bytes:
        return self._canonical(text, base64.b64decode(text, validate=True))

    def _canonical(self, text: bytes, data: bytes) -> bytes:
        # Unused trailing bits must be zero, so every key has one spelling
        if base64.b64encode(data, altchars=self.altchars) != text:
            raise ValueError("non-canonical encoding")
        return data


class Base64UrlsafeCodec(Base64Codec):
    """RFC 4648 URL-safe base64 with padding."""

    name = "base64_urlsafe"
    altchars = b"-_"

    def _decode(self, text: bytes) -> bytes:
        # b64decode maps altchars onto "+/" before validating, so the
        # standard characters have to be rejected up front
        for char in b"+/":
            if char in text:
                raise ValueError(f"invalid character {chr(char)!r} for URL-safe alphabet")
        data = base64.b64decode(text, altchars=self.altchars, validate=True)
        return self._canonical(text, data)


class Base32Codec(Codec):
    """RFC 4648 base32 with padding."""

    name = "base32"

    @property
    def text_length(self) -> int:
        return (self.length + 4) // 5 * 8

    def encode(self, data: bytes) -> str:
        return base64.b32encode(data).decode("ascii")

    def _decode(self, text: bytes) -> bytes:
        data = base64.b32decode(text)
        if base64.b32encode(data) != text:
            raise ValueError("non-canonical encoding")
        return data


HEX = HexCodec()
BASE64 = Base64Codec()
BASE64_URLSAFE = Base64UrlsafeCodec()
BASE32 = Base32Codec()

CODECS: dict[str, Codec] = {
    codec.name: codec for codec in (HEX, BASE64, BASE64_URLSAFE, BASE32)
}


def _parsers() -> dict[int, tuple[Codec, ...]]:
    """Map accepted input lengths to the codecs tried for that length."""
    enabled = get_settings().codecs
    parsers: dict[int, tuple[Codec, ...]] = {}
    if "hex" in enabled:
        parsers[HEX.text_length] = (HEX,)
    if "base64" in enabled:
        parsers[BASE64.text_length] = (BASE64, BASE64_URLSAFE)
    if "base32" in enabled:
        parsers[BASE32.text_length] = (BASE32,)
    return parsers


def parse(text: str) -> bytes:
    """
    Decode a key from any enabled text encoding, chosen by input length.

    Args:
        text: Encoded key

    Returns:
        The decoded 32 bytes

    Raises:
        LengthError: If the input length matches no enabled codec, or the
            decoded payload is not 32 bytes
        CodecError: If the codec selected by length rejects the input
    """
    parsers = _parsers()
    codecs = parsers.get(len(text))
    if codecs is None:
        raise LengthError(tuple(sorted(parsers)), len(text))

    *fallible, last = codecs
    for codec in fallible:
        try:
            return codec.decode(text)
        except ParseError:
            continue
    return last.decode(text)


def display_codec() -> Codec:
    """Codec used for the canonical textual form of keys."""
    return CODECS[get_settings().display_codec]


def display(data: bytes) -> str:
    """Render bytes in the canonical display encoding."""
    return display_codec().encode(data)
