"""
Pydantic schemas for JSON endpoints.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="Version string shown on pages")
    repo_count: int = Field(..., ge=0, description="Known repositories")
