"""API response schemas."""

from __future__ import annotations

from app.api.schemas.meta import HealthResponse

__all__ = ["HealthResponse"]
