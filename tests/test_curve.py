"""Tests for the X25519 primitives."""

import pytest

from wgkeys import curve

# RFC 7748, section 6.1
ALICE_PRIVATE = bytes.fromhex(
    "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
)
ALICE_PUBLIC = bytes.fromhex(
    "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
)
BOB_PRIVATE = bytes.fromhex(
    "5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb"
)
BOB_PUBLIC = bytes.fromhex(
    "de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f"
)


def test_clamp_bits():
    """Test the RFC 7748 bit masking on the first and last byte."""
    clamped = curve.clamp(b"\xff" * 32)

    assert clamped[0] == 0xF8
    assert clamped[31] == 0x7F
    assert clamped[1:31] == b"\xff" * 30

    clamped = curve.clamp(bytes(32))

    assert clamped[0] == 0x00
    assert clamped[31] == 0x40


def test_clamp_is_idempotent():
    """Test that clamping a clamped scalar changes nothing."""
    once = curve.clamp(ALICE_PRIVATE)

    assert curve.clamp(once) == once


def test_clamp_rejects_wrong_length():
    """Test that clamp refuses anything but 32 bytes."""
    with pytest.raises(ValueError):
        curve.clamp(bytes(31))


def test_is_clamped():
    """Test scalar validation for clamped, unclamped and degenerate inputs."""
    assert curve.is_clamped(curve.clamp(ALICE_PRIVATE))
    assert not curve.is_clamped(ALICE_PRIVATE)
    assert not curve.is_clamped(bytes(32))
    assert not curve.is_clamped(b"\xff" * 32)
    assert not curve.is_clamped(bytes(31))


@pytest.mark.parametrize(
    "private, public",
    [(ALICE_PRIVATE, ALICE_PUBLIC), (BOB_PRIVATE, BOB_PUBLIC)],
    ids=["alice", "bob"],
)
def test_derive_public_known_answers(private, public):
    """Test public key derivation against the RFC 7748 vectors."""
    assert curve.derive_public(private) == public
    # Derivation clamps first, so the clamped scalar gives the same point
    assert curve.derive_public(curve.clamp(private)) == public


def test_fill_random():
    """Test that fill_random overwrites the whole buffer in place."""
    buf = bytearray(32)

    curve.fill_random(buf)

    assert len(buf) == 32
    assert any(buf)

    other = bytearray(32)
    curve.fill_random(other)
    assert buf != other
