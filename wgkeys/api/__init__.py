"""API routers for the wgkeys service."""

from wgkeys.api.routes_health import router as health_router
from wgkeys.api.routes_keys import router as keys_router

__all__ = [
    "health_router",
    "keys_router",
]
