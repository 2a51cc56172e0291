"""Use case for making sure a client secret is available."""

import logging

from ...domain.services import runtime_secret_label
from ..exceptions import ApplicationError, ConfigurationError
from ..ports import ConfigurationSource
from .provision_secret import SecretProvisioner

logger = logging.getLogger(__name__)

CLIENT_ID_KEY = "AzureAd:ClientId"
CLIENT_SECRET_KEY = "AzureAd:ClientSecret"
RUNTIME_SECRET_LIFETIME_MONTHS = 24


class SecretEnsurer:
    """
    Returns the configured client secret, creating one when none is set.

    The configured secret is read fresh on every call; nothing is cached here
    and the created secret is not written back to configuration.
    """

    def __init__(
        self,
        provisioner: SecretProvisioner,
        configuration: ConfigurationSource,
        *,
        lifetime_months: int = RUNTIME_SECRET_LIFETIME_MONTHS,
    ) -> None:
        """
        Initialize the ensurer.

        Raises:
            ConfigurationError: If ``AzureAd:ClientId`` is not configured.
        """
        self._provisioner = provisioner
        self._configuration = configuration
        self._lifetime_months = lifetime_months

        client_id = configuration.get(CLIENT_ID_KEY)
        if not client_id:
            msg = f"{CLIENT_ID_KEY} not configured"
            raise ConfigurationError(msg)
        self._client_id = client_id

    @property
    def client_id(self) -> str:
        """Client ID the ensurer provisions secrets for."""
        return self._client_id

    async def ensure_secret(self) -> str:
        """
        Return a usable client secret.

        Raises:
            ProvisioningError: If a new secret could not be created.
            DirectoryServiceError: If a directory call fails.
        """
        existing = self._configuration.get(CLIENT_SECRET_KEY)
        if existing:
            logger.info("Using existing client secret from configuration")
            return existing

        try:
            logger.info("Creating new client secret for app registration %s", self._client_id)
            secret = await self._provisioner.create_secret(
                self._client_id,
                runtime_secret_label(),
                self._lifetime_months,
            )
        except ApplicationError:
            logger.error("Failed to ensure client secret for app registration %s", self._client_id)
            raise

        logger.info("Successfully created new client secret with %d-month expiration", self._lifetime_months)
        return secret
