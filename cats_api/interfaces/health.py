"""
Health check and root routers.

Provides a liveness endpoint and the API root greeting.
No business logic. Returns application status and version.
"""

from fastapi import APIRouter

from cats_api.core.config import settings
from cats_api.interfaces.schemas import HealthResponse
from cats_api.shared.routing import EnvelopeRoute

router = APIRouter(tags=["health"], route_class=EnvelopeRoute)
root_router = APIRouter(tags=["root"], route_class=EnvelopeRoute)


@router.get(
    "/health",
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check() -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=settings.version)


@root_router.get("/", summary="API root")
def root() -> str:
    return "Hello World!"
