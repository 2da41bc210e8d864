from bundlecheck.api.health import router as health_router
from bundlecheck.api.ownership import router as ownership_router

__all__ = [
    "health_router",
    "ownership_router",
]
