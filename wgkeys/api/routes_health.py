"""Health check endpoints for the wgkeys API."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from wgkeys import curve

router = APIRouter(tags=["health"])

# RFC 7748, section 6.1 (Alice)
_KAT_PRIVATE = bytes.fromhex(
    "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
)
_KAT_PUBLIC = bytes.fromhex(
    "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
)


@router.get("/healthz")
async def health_check():
    """
    Health check endpoint.

    Returns:
        A simple status object indicating the service is healthy
    """
    return {"ok": True}


@router.get("/readyz")
async def readiness_check():
    """
    Readiness check endpoint.

    Runs a known-answer X25519 derivation so a broken crypto backend
    reports the service as not ready.

    Returns:
        ``{"ok": true}``, or 503 with ``{"ok": false}``
    """
    if curve.derive_public(_KAT_PRIVATE) != _KAT_PUBLIC:
        return JSONResponse(status_code=503, content={"ok": False})
    return {"ok": True}
