"""
Liveness endpoint.

Answers without touching the record store, so it stays green while the
database is down. Reports the running version.
"""

from fastapi import APIRouter, Request

from composers_api.interfaces.catalog.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Reports that the service is up, with its version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return the service status and version."""
    return HealthResponse(status="ok", version=request.app.state.settings.version)
