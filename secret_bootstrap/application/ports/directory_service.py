"""Port for the directory service - driven/secondary port."""

from datetime import datetime
from typing import Protocol

from ...domain.entities import ApplicationIdentity, SecretCredential


class DirectoryService(Protocol):
    """
    Port for querying app registrations and adding credentials to them.

    This is a driven (secondary) port that defines how the application
    talks to the identity provider's directory.
    """

    async def find_applications(self, client_id: str) -> list[ApplicationIdentity]:
        """
        Find app registrations by their public client ID.

        Returns:
            Matching applications, possibly empty.

        Raises:
            DirectoryServiceError: If the query fails.
        """
        ...

    async def add_password(
        self,
        object_id: str,
        display_name: str,
        expires_at: datetime,
    ) -> SecretCredential:
        """
        Add a password credential to the app registration with ``object_id``.

        Returns:
            The created credential, including its one-time-readable value.

        Raises:
            DirectoryServiceError: If the call fails.
        """
        ...
