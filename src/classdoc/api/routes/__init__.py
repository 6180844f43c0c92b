"""API route modules."""

from classdoc.api.routes.extract import router as extract_router
from classdoc.api.routes.health import router as health_router

__all__ = [
    "extract_router",
    "health_router",
]
