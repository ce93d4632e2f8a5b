"""Meta API endpoints (e.g. health)."""

from __future__ import annotations

from fastapi import APIRouter

from app.api.schemas.meta import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    summary="Health check",
    response_model=HealthResponse,
)
@router.head("/health", include_in_schema=False)
def health() -> HealthResponse:
    """Check the health of the application."""
    return HealthResponse(status="ok")
