"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status, version and the repository count.
"""

from fastapi import APIRouter, Request

from repobadge.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and repository count.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    state = request.app.state
    return HealthResponse(
        status="ok",
        version=state.version_info,
        repo_count=state.repo_counter.load(),
    )
