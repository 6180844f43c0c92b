"""Health check endpoints."""

from fastapi import APIRouter

from classdoc import __version__
from classdoc.api.dependencies import AppSettings
from classdoc.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: AppSettings) -> HealthResponse:
    """
    Health check endpoint.

    Returns the service version and whether class recovery is enabled.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        recovery_enabled=settings.enable_recovery,
    )


@router.get("/live")
async def liveness_check() -> dict:
    """
    Liveness probe for Kubernetes.

    Returns 200 if the service is alive.
    """
    return {"alive": True}
