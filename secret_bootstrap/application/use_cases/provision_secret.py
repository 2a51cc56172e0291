"""Use case for minting a new client secret on an app registration."""

import logging
from datetime import UTC, datetime

from ...domain.value_objects import ProvisioningFailureReason, SecretLifetime
from ..exceptions import ApplicationError, ProvisioningError
from ..ports import DirectoryService
from .directory_lookup import DirectoryLookupClient

logger = logging.getLogger(__name__)

DEFAULT_SECRET_LABEL = "Auto-generated"


class SecretProvisioner:
    """
    Creates time-limited password credentials via the directory service.

    One-shot: every call performs at most one lookup and one creation, with
    no retries.
    """

    def __init__(
        self,
        directory: DirectoryService,
        lookup: DirectoryLookupClient | None = None,
    ) -> None:
        """
        Initialize the provisioner.

        Args:
            directory: Adapter used to add the password credential.
            lookup: Client used to resolve object IDs. Defaults to one backed
                by the same directory adapter.
        """
        self._directory = directory
        self._lookup = lookup or DirectoryLookupClient(directory)

    async def create_secret(
        self,
        client_id: str,
        label: str = DEFAULT_SECRET_LABEL,
        lifetime_months: int = 24,
    ) -> str:
        """
        Create a new client secret for the app registration with ``client_id``.

        Args:
            client_id: Public application (client) ID.
            label: Display name recorded on the credential.
            lifetime_months: Months until the credential expires.

        Returns:
            The secret value. It cannot be read back from the directory later.

        Raises:
            ProvisioningError: If the application cannot be resolved or the
                directory returns no secret.
            DirectoryServiceError: If a directory call fails.
        """
        lifetime = SecretLifetime(months=lifetime_months)

        try:
            logger.info("Creating client secret for app registration with Client ID %s", client_id)

            object_id = await self._lookup.resolve_object_id(client_id)
            if not object_id:
                msg = (
                    f"Application with Client ID {client_id} not found. This could mean the "
                    "application doesn't exist or you don't have permission to access it."
                )
                raise ProvisioningError(msg, ProvisioningFailureReason.APPLICATION_NOT_FOUND)

            credential = await self._directory.add_password(
                object_id,
                display_name=label,
                expires_at=lifetime.expires_at(datetime.now(UTC)),
            )

            if not credential.has_secret:
                msg = "Failed to create client secret - no secret returned"
                raise ProvisioningError(msg, ProvisioningFailureReason.EMPTY_RESULT)

            logger.info(
                "Successfully created client secret for app with Client ID %s "
                "(Object ID: %s) with key ID %s",
                client_id,
                object_id,
                credential.key_id,
            )
            return credential.secret_value

        except ApplicationError:
            logger.exception("Failed to create client secret for app registration with Client ID %s", client_id)
            raise
