"""API response models (no secret values exposed)."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded"]
    version: str
    timestamp: datetime
    client_secret_configured: bool = Field(description="Whether a client secret is available for sign-in")
    client_secret_created: bool = Field(description="Whether the secret was created at startup")
    bootstrap_error: str | None = Field(default=None, description="Why the secret could not be obtained")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
