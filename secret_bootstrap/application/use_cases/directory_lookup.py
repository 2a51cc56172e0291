"""Use case for resolving an app registration's object ID."""

import logging

from ..exceptions import DirectoryServiceError
from ..ports import DirectoryService

logger = logging.getLogger(__name__)


class DirectoryLookupClient:
    """Resolves a public client ID to the directory object ID of its app registration."""

    def __init__(self, directory: DirectoryService) -> None:
        """Initialize the lookup client."""
        self._directory = directory

    async def resolve_object_id(self, client_id: str) -> str | None:
        """
        Find the object ID of the app registration with ``client_id``.

        The first match wins. A client ID that matches nothing yields None,
        which covers both a missing application and one the caller is not
        allowed to see.

        Raises:
            DirectoryServiceError: If the directory query fails.
        """
        try:
            applications = await self._directory.find_applications(client_id)
        except DirectoryServiceError:
            logger.exception("Failed to find application with Client ID %s", client_id)
            raise

        if not applications:
            logger.warning("Application with Client ID %s not found", client_id)
            return None

        application = applications[0]
        logger.info(
            "Found application '%s' with Object ID: %s",
            application.display_name,
            application.object_id,
        )
        return application.object_id
