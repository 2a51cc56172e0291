"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse

from ..identity import AuthenticationOptions, create_confidential_client
from .models import ErrorResponse, HealthResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable, Coroutine

    from ....application.ports import ConfigurationSource
    from ....application.use_cases import BootstrapResult

logger = logging.getLogger(__name__)


class ApiState:
    """Shared state for API endpoints."""

    def __init__(self, version: str = "1.0.0") -> None:
        """Initialize API state."""
        self.version = version
        self.bootstrap: BootstrapResult | None = None
        self.authentication: AuthenticationOptions | None = None
        self.confidential_client: Any = None


def create_app(
    bootstrap_func: Callable[[], Coroutine[None, None, BootstrapResult]],
    configuration: ConfigurationSource,
    version: str = "1.0.0",
    client_factory: Callable[[AuthenticationOptions], Any] = create_confidential_client,
) -> FastAPI:
    """
    Create FastAPI application.

    The client secret bootstrap is awaited in the lifespan, before the server
    accepts requests, and its result is handed to the authentication setup.

    Args:
        bootstrap_func: Async function that obtains the client secret.
        configuration: Application configuration with the AzureAd section.
        version: Application version string.
        client_factory: Builds the sign-in client from authentication options.

    Returns:
        Configured FastAPI application.
    """
    state = ApiState(version=version)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("Bootstrapping client secret before serving...")
        state.bootstrap = await bootstrap_func()
        state.authentication = AuthenticationOptions.from_configuration(
            configuration,
            state.bootstrap.client_secret,
        )
        state.confidential_client = client_factory(state.authentication)
        app.state.authentication = state.authentication
        app.state.confidential_client = state.confidential_client

        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Runtime Secret Bootstrap",
        description="Web application that provisions its own Entra ID client secret at startup. "
        "**Secret values are never exposed through this API.**",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Report whether the service started with a usable client secret.",
    )
    async def health_check() -> HealthResponse:
        result = state.bootstrap
        configured = bool(state.authentication and state.authentication.is_configured)
        return HealthResponse(
            status="healthy" if configured else "degraded",
            version=state.version,
            timestamp=datetime.now(UTC),
            client_secret_configured=configured,
            client_secret_created=bool(result and result.created),
            bootstrap_error=result.error if result else None,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": exc.__class__.__name__},
        )

    return app
