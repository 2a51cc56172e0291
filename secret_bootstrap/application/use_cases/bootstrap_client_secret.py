"""Use case run once at startup to obtain the client secret for authentication."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ...domain.value_objects import ProvisioningFailureReason
from ..exceptions import ApplicationError, ConfigurationError, ProvisioningError
from ..ports import ConfigurationSource
from .ensure_secret import CLIENT_SECRET_KEY, SecretEnsurer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BootstrapResult:
    """Outcome of the startup secret bootstrap."""

    client_secret: str | None = field(default=None, repr=False)
    created: bool = False
    error: str | None = None
    reason: ProvisioningFailureReason | None = None

    @property
    def success(self) -> bool:
        """Check if a client secret is available."""
        return bool(self.client_secret)


class BootstrapClientSecret:
    """
    Startup step that supplies the client secret for authentication.

    Failures are logged and reported in the result rather than raised, so
    the web application can still start in a degraded state.
    """

    def __init__(
        self,
        configuration: ConfigurationSource,
        ensurer_factory: Callable[[ConfigurationSource], SecretEnsurer],
    ) -> None:
        """
        Initialize the bootstrap.

        Args:
            configuration: Application configuration to read AzureAd settings from.
            ensurer_factory: Builds the SecretEnsurer once a secret is known to be missing.
        """
        self._configuration = configuration
        self._ensurer_factory = ensurer_factory

    async def execute(self) -> BootstrapResult:
        """Execute the bootstrap."""
        existing = self._configuration.get(CLIENT_SECRET_KEY)
        if existing:
            logger.info("Client secret found in configuration")
            return BootstrapResult(client_secret=existing)

        logger.warning("No client secret found. Attempting to create one using runtime secret creation...")

        try:
            ensurer = self._ensurer_factory(self._configuration)
        except ConfigurationError as e:
            logger.warning("%s. Cannot create client secret.", e)
            return BootstrapResult(error=str(e))

        try:
            secret = await ensurer.ensure_secret()
        except ApplicationError as e:
            logger.error("Failed to create client secret: %s", e)
            logger.warning("Application will continue but may fail during authentication.")
            reason = e.reason if isinstance(e, ProvisioningError) else None
            return BootstrapResult(error=str(e), reason=reason)
        except Exception as e:
            logger.exception("Unexpected error while creating client secret")
            logger.warning("Application will continue but may fail during authentication.")
            return BootstrapResult(error=f"Unexpected error: {e.__class__.__name__}")

        logger.info("Successfully created and configured client secret.")
        return BootstrapResult(client_secret=secret, created=True)
