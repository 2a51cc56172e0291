"""Microsoft Graph API client for Entra ID app registrations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx

from .token_provider import TokenProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphClientConfig:
    """Configuration for Microsoft Graph API client."""

    base_url: str = "https://graph.microsoft.com/v1.0"
    timeout: float = 30.0


class GraphClient:
    """
    Async client for Microsoft Graph API.

    Attaches bearer tokens to requests and raises httpx errors for non-2xx
    responses.
    """

    APPLICATION_FIELDS: ClassVar[list[str]] = ["id", "appId", "displayName"]

    def __init__(
        self,
        config: GraphClientConfig,
        token_provider: TokenProvider,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Graph client.

        Args:
            config: Base URL and timeout.
            token_provider: Source of access tokens.
            transport: Optional httpx transport, used by tests.
        """
        self._config = config
        self._token_provider = token_provider
        self._transport = transport

    async def get_applications_by_app_id(self, app_id: str) -> list[dict[str, Any]]:
        """
        Query application registrations by client ID.

        Returns:
            List of application dictionaries with id, appId and displayName.
        """
        params = {
            "$filter": f"appId eq '{app_id}'",
            "$select": ",".join(self.APPLICATION_FIELDS),
        }
        data = await self._request("GET", "/applications", params=params)
        applications = data.get("value", [])
        if not isinstance(applications, list):
            msg = "Unexpected response from GET /applications: \"value\" is not a list"
            raise ValueError(msg)
        return [app for app in applications if isinstance(app, dict)]

    async def add_password(self, object_id: str, password_credential: dict[str, Any]) -> dict[str, Any]:
        """
        Add a password credential to an application.

        Args:
            object_id: Directory object ID of the application.
            password_credential: passwordCredential body (displayName, endDateTime).

        Returns:
            The created passwordCredential, including secretText.
        """
        return await self._request(
            "POST",
            f"/applications/{object_id}/addPassword",
            json={"passwordCredential": password_credential},
        )

    async def close(self) -> None:
        """Release the token provider."""
        await self._token_provider.close()

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> dict[str, Any]:
        """Send an authenticated request and return the decoded JSON body."""
        token = await self._token_provider.get_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport) as client:
            response = await client.request(method, f"{self._config.base_url}{endpoint}", headers=headers, **kwargs)
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict):
            msg = f"Unexpected response from {method} {endpoint}: expected a JSON object"
            raise ValueError(msg)
        return data
