"""Entra ID adapter backed by Microsoft Graph."""

from .directory_service import EntraIdDirectoryService
from .graph_client import GraphClient, GraphClientConfig
from .token_provider import (
    AmbientTokenProvider,
    ClientCredentialConfig,
    MsalTokenProvider,
    TokenProvider,
    create_token_provider,
)

__all__ = [
    "AmbientTokenProvider",
    "ClientCredentialConfig",
    "EntraIdDirectoryService",
    "GraphClient",
    "GraphClientConfig",
    "MsalTokenProvider",
    "TokenProvider",
    "create_token_provider",
]
