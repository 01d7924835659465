"""Pydantic request and response models for the key API."""

from pydantic import BaseModel

from wgkeys.keys import Key, PrivateKey, PublicKey, SharedSecret


class KeyPair(BaseModel):
    """A private key together with its derived public key."""

    private_key: PrivateKey
    public_key: PublicKey


class PresharedKey(BaseModel):
    preshared_key: SharedSecret


class DeriveRequest(BaseModel):
    private_key: PrivateKey


class PublicKeyResponse(BaseModel):
    public_key: PublicKey


class KeyEncodings(BaseModel):
    """Every supported text form of one key."""

    hex: str
    base64: str
    base64_urlsafe: str
    base32: str

    @classmethod
    def from_key(cls, key: Key) -> "KeyEncodings":
        return cls(
            hex=key.to_hex(),
            base64=key.to_base64(),
            base64_urlsafe=key.to_base64_urlsafe(),
            base32=key.to_base32(),
        )
