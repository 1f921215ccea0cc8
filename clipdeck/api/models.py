"""Pydantic models for API requests and responses.

The search route answers with the SearchPage shape on success and with a
bare ``{"error": "..."}`` body on failure. Those two shapes are the whole
contract the search controller relies on.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Error Messages
# =============================================================================

MISSING_KEYWORDS_MESSAGE = "keywords query parameter is required"
INVALID_COUNT_MESSAGE = "count query parameter must be a positive integer"
UPSTREAM_UNREACHABLE_MESSAGE = "Failed to reach upstream search API"
UPSTREAM_REJECTED_FALLBACK_MESSAGE = "Search API returned an error"
UNEXPECTED_ERROR_MESSAGE = "Unexpected error while fetching TikTok data"
INTERNAL_ERROR_MESSAGE = "Internal server error"


# =============================================================================
# Error Models
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Human-readable error message")


# =============================================================================
# Health Models
# =============================================================================


class HealthCheckResponse(BaseModel):
    """Response model for health check endpoint."""

    status: Literal["healthy", "unhealthy", "degraded"] = Field(
        ..., description="Overall system status"
    )
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Application environment")
    timestamp: datetime = Field(..., description="Check timestamp")
    uptime_seconds: Optional[float] = Field(None, description="Server uptime in seconds")
