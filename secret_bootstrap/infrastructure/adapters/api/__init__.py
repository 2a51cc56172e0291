"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import ErrorResponse, HealthResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "create_app",
]
