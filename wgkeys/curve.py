"""X25519 primitives used for WireGuard keys."""

import os

from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

SCALAR_LEN = 32


def fill_random(buf: bytearray) -> None:
    """Fill a buffer in place from the operating system's CSPRNG."""
    buf[:] = os.urandom(len(buf))


def clamp(scalar: bytes) -> bytes:
    """
    Apply the X25519 scalar clamping rule (RFC 7748, section 5).

    Clears the three low bits of the first byte, clears the top bit of the
    last byte and sets the second-highest bit of the last byte.
    """
    if len(scalar) != SCALAR_LEN:
        raise ValueError(f"X25519 scalar must be exactly {SCALAR_LEN} bytes")

    clamped = bytearray(scalar)
    clamped[0] &= 248
    clamped[31] &= 127
    clamped[31] |= 64
    return bytes(clamped)


def is_clamped(scalar: bytes) -> bool:
    """Check whether a scalar is non-zero and already in clamped form."""
    if len(scalar) != SCALAR_LEN or not any(scalar):
        return False
    return bytes(scalar) == clamp(scalar)


def derive_public(scalar: bytes) -> bytes:
    """
    Compute the X25519 public key for a private scalar.

    Args:
        scalar: 32-byte private scalar, clamped or not

    Returns:
        32-byte public key (the scalar multiplied with the base point)
    """
    private_key = X25519PrivateKey.from_private_bytes(clamp(scalar))
    return private_key.public_key().public_bytes_raw()
