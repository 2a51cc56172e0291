#!/usr/bin/env python3
"""
Runtime Secret Bootstrap

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from .application.exceptions import ConfigurationError
from .application.ports import ConfigurationSource
from .application.use_cases import (
    BootstrapClientSecret,
    BootstrapResult,
    DirectoryLookupClient,
    SecretEnsurer,
    SecretProvisioner,
)
from .infrastructure.adapters import (
    EntraIdDirectoryService,
    GraphClient,
    build_configuration,
    create_token_provider,
)
from .infrastructure.config import Settings, load_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Application version
__version__ = "1.0.0"


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._configuration: ConfigurationSource | None = None
        self._graph_client: GraphClient | None = None

    @property
    def configuration(self) -> ConfigurationSource:
        """Application configuration (JSON files overlaid by environment variables)."""
        if self._configuration is None:
            self._configuration = build_configuration(
                self._settings.appsettings_path,
                self._settings.app_environment,
                settings_required=self._settings.appsettings_required,
            )
        return self._configuration

    def create_graph_client(self) -> GraphClient:
        """Create the Graph API client, authenticated as the provisioning identity."""
        if self._graph_client is None:
            token_provider = create_token_provider(
                self._settings.provisioner_credentials,
                managed_identity_client_id=self._settings.managed_identity_client_id or None,
            )
            self._graph_client = GraphClient(self._settings.graph_config, token_provider)
        return self._graph_client

    def create_secret_provisioner(self) -> SecretProvisioner:
        """Create the provisioner with its directory lookup."""
        directory = EntraIdDirectoryService(self.create_graph_client())
        return SecretProvisioner(directory, DirectoryLookupClient(directory))

    def create_secret_ensurer(self, configuration: ConfigurationSource) -> SecretEnsurer:
        """Create the ensurer; raises ConfigurationError without a client ID."""
        return SecretEnsurer(
            self.create_secret_provisioner(),
            configuration,
            lifetime_months=self._settings.secret_lifetime_months,
        )

    def create_bootstrap(self) -> BootstrapClientSecret:
        """Create the startup bootstrap use case."""
        return BootstrapClientSecret(
            configuration=self.configuration,
            ensurer_factory=self.create_secret_ensurer,
        )

    async def close(self) -> None:
        """Release the Graph client, if one was created."""
        if self._graph_client is not None:
            await self._graph_client.close()
            self._graph_client = None


class Application:
    """
    Main application orchestrator.

    Handles run modes (bootstrap once, or API server) and lifecycle.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def bootstrap(self) -> BootstrapResult:
        """Obtain the client secret, creating one if none is configured."""
        try:
            return await self._container.create_bootstrap().execute()
        finally:
            await self._container.close()

    async def run_api(self) -> None:
        """Run in API server mode; the bootstrap runs before serving starts."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            bootstrap_func=self.bootstrap,
            configuration=self._container.configuration,
            version=__version__,
        )

        config = uvicorn.Config(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.log_level.lower(),
            access_log=self._settings.api_access_log,
        )
        await uvicorn.Server(config).serve()

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        match self._settings.run_mode.lower():
            case "once":
                logger.info("Running client secret bootstrap only")
                result = await self.bootstrap()
                return 0 if result.success else 1

            case "api":
                await self.run_api()
                return 0

            case _:
                logger.error("Invalid RUN_MODE: %s (use 'api' or 'once')", self._settings.run_mode)
                return 1


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Runtime Secret Bootstrap starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except (ValueError, ConfigurationError) as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
