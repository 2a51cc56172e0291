"""Access token providers for Microsoft Graph."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import ClassVar, Protocol

import msal
from azure.identity.aio import DefaultAzureCredential

logger = logging.getLogger(__name__)

GRAPH_SCOPE = "https://graph.microsoft.com/.default"


class TokenProvider(Protocol):
    """Supplies bearer tokens for Graph API requests."""

    async def get_token(self) -> str:
        """Return a valid access token."""
        ...

    async def close(self) -> None:
        """Release any resources held by the provider."""
        ...


@dataclass(frozen=True, slots=True)
class ClientCredentialConfig:
    """Service principal used to call Graph with the client credentials flow."""

    tenant_id: str
    client_id: str
    client_secret: str = ""

    def __repr__(self) -> str:
        return f"ClientCredentialConfig(tenant_id={self.tenant_id!r}, client_id={self.client_id!r})"

    @property
    def is_complete(self) -> bool:
        """Check if all client credential settings are present."""
        return bool(self.tenant_id and self.client_id and self.client_secret)


class MsalTokenProvider:
    """Acquires tokens with MSAL using an explicit service principal secret."""

    AUTHORITY_BASE: ClassVar[str] = "https://login.microsoftonline.com"
    SCOPE: ClassVar[list[str]] = [GRAPH_SCOPE]

    def __init__(self, config: ClientCredentialConfig) -> None:
        """Initialize the provider."""
        self._config = config
        self._access_token: str | None = None
        self._token_expiry: datetime | None = None
        self._msal_app: msal.ConfidentialClientApplication | None = None

    def _get_msal_app(self) -> msal.ConfidentialClientApplication:
        """Get or create MSAL application instance."""
        if self._msal_app is None:
            authority = f"{self.AUTHORITY_BASE}/{self._config.tenant_id}"
            self._msal_app = msal.ConfidentialClientApplication(
                client_id=self._config.client_id,
                client_credential=self._config.client_secret,
                authority=authority,
            )
        return self._msal_app

    async def get_token(self) -> str:
        """Acquire access token using client credentials flow."""
        if self._access_token and self._token_expiry and datetime.now(UTC) < self._token_expiry:
            return self._access_token

        # MSAL is synchronous (authority discovery and token request); run it off the event loop
        result = await asyncio.to_thread(self._acquire_token_for_client)

        if "access_token" not in result:
            error = result.get("error_description", result.get("error", "Unknown error"))
            msg = f"Failed to acquire access token: {error}"
            raise RuntimeError(msg)

        self._access_token = result["access_token"]
        expires_in = result.get("expires_in", 3600)
        # Refresh 5 minutes before expiry
        self._token_expiry = datetime.now(UTC) + timedelta(seconds=expires_in - 300)

        return self._access_token

    def _acquire_token_for_client(self) -> dict:
        """Run the MSAL client credentials flow."""
        return self._get_msal_app().acquire_token_for_client(scopes=self.SCOPE)

    async def close(self) -> None:
        """Nothing to release; MSAL keeps an in-memory cache only."""


class AmbientTokenProvider:
    """
    Acquires tokens from the process's ambient identity.

    Uses the Azure credential chain (environment, workload identity, managed
    identity, developer tool logins), which needs no client secret.
    """

    def __init__(self, managed_identity_client_id: str | None = None) -> None:
        """Initialize the provider."""
        if managed_identity_client_id:
            self._credential = DefaultAzureCredential(managed_identity_client_id=managed_identity_client_id)
        else:
            self._credential = DefaultAzureCredential()

    async def get_token(self) -> str:
        """Acquire access token from the credential chain."""
        token = await self._credential.get_token(GRAPH_SCOPE)
        return token.token

    async def close(self) -> None:
        """Close the underlying credential."""
        await self._credential.close()


def create_token_provider(
    client_credentials: ClientCredentialConfig | None = None,
    *,
    managed_identity_client_id: str | None = None,
) -> TokenProvider:
    """Pick MSAL when a provisioning service principal is configured, else the ambient identity."""
    if client_credentials is not None and client_credentials.is_complete:
        logger.info("Using client credentials for %s to call Microsoft Graph", client_credentials.client_id)
        return MsalTokenProvider(client_credentials)

    logger.info("Using ambient Azure identity to call Microsoft Graph")
    return AmbientTokenProvider(managed_identity_client_id)
