"""Key generation and conversion endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from wgkeys.api.schemas import (
    DeriveRequest,
    KeyEncodings,
    KeyPair,
    PresharedKey,
    PublicKeyResponse,
)
from wgkeys.config import get_settings
from wgkeys.keys import PrivateKey, PublicKey, SharedSecret

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/keys", tags=["keys"])
limiter = Limiter(key_func=get_remote_address)


def _rate_limit() -> str:
    return get_settings().rate_limit


@router.post("/private", response_model=KeyPair)
@limiter.limit(_rate_limit)
async def generate_private_key(request: Request):
    """
    Generate a new private key and its public key (``wg genkey | wg pubkey``).

    Rate limit: configurable, 60 requests per minute per IP by default.
    """
    private_key = PrivateKey.generate()
    return KeyPair(private_key=private_key, public_key=private_key.pubkey())


@router.post("/preshared", response_model=PresharedKey)
@limiter.limit(_rate_limit)
async def generate_preshared_key(request: Request):
    """
    Generate a new preshared key (``wg genpsk``).

    Rate limit: configurable, 60 requests per minute per IP by default.
    """
    return PresharedKey(preshared_key=SharedSecret.generate())


@router.post("/public", response_model=PublicKeyResponse)
async def derive_public_key(body: DeriveRequest):
    """
    Derive the public key for a private key (``wg pubkey``).

    The private key may use any supported encoding. Well-formed keys that are
    not usable X25519 scalars are rejected with 422.
    """
    if not body.private_key.valid():
        logger.info("Rejected private key that is not a clamped X25519 scalar")
        raise HTTPException(
            status_code=422, detail="Private key is not a valid X25519 scalar"
        )
    return PublicKeyResponse(public_key=body.private_key.pubkey())


@router.get("/public/{public_key:path}", response_model=KeyEncodings)
async def convert_public_key(public_key: PublicKey):
    """
    Show a public key in every supported encoding.

    The path segment is parsed with the same length-based detection as
    ``PublicKey.parse``; malformed keys yield 422 with the parse error.
    """
    return KeyEncodings.from_key(public_key)
