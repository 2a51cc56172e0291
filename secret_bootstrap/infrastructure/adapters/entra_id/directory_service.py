"""Entra ID directory service implementation."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import httpx
import requests
from azure.core.exceptions import ClientAuthenticationError

from ....application.exceptions import DirectoryServiceError
from ....domain.entities import ApplicationIdentity, SecretCredential
from .graph_client import GraphClient

logger = logging.getLogger(__name__)


class EntraIdDirectoryService:
    """
    Directory service implementation using Microsoft Graph API.

    Implements the DirectoryService port for Entra ID. Transport and
    authentication failures are raised as DirectoryServiceError.
    """

    # MSAL raises ValueError for a bad authority and requests errors for network failures;
    # malformed Graph bodies raise ValueError from the client.
    TRANSPORT_ERRORS = (
        httpx.HTTPError,
        requests.RequestException,
        ClientAuthenticationError,
        RuntimeError,
        ValueError,
    )

    def __init__(self, client: GraphClient) -> None:
        """Initialize the directory service."""
        self._client = client

    async def find_applications(self, client_id: str) -> list[ApplicationIdentity]:
        """Find app registrations whose appId equals ``client_id``."""
        try:
            raw_applications = await self._client.get_applications_by_app_id(client_id)
        except self.TRANSPORT_ERRORS as e:
            msg = f"Failed to query applications from Entra ID: {_describe(e)}"
            raise DirectoryServiceError(msg) from e

        return [ApplicationIdentity.from_graph(raw) for raw in raw_applications]

    async def add_password(
        self,
        object_id: str,
        display_name: str,
        expires_at: datetime,
    ) -> SecretCredential:
        """Add a password credential to the application with ``object_id``."""
        body = {
            "displayName": display_name,
            "endDateTime": _format_datetime(expires_at),
        }
        try:
            raw = await self._client.add_password(object_id, body)
        except self.TRANSPORT_ERRORS as e:
            msg = f"Failed to add password credential in Entra ID: {_describe(e)}"
            raise DirectoryServiceError(msg) from e

        return SecretCredential.from_graph(raw or {})


def _format_datetime(value: datetime) -> str:
    """Format a datetime the way Graph expects (UTC, ISO 8601, Z suffix)."""
    aware = value if value.tzinfo else value.replace(tzinfo=UTC)
    return aware.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def _describe(error: Exception) -> str:
    """Summarize an error without echoing request or response bodies."""
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code} from {error.request.method} {error.request.url.path}"
    return str(error) or error.__class__.__name__
