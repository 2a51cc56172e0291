"""Infrastructure adapters - Implementations of application ports."""

from .configuration import (
    EnvironmentConfigurationSource,
    JsonFileConfigurationSource,
    LayeredConfigurationSource,
    build_configuration,
)
from .entra_id import EntraIdDirectoryService, GraphClient, create_token_provider
from .identity import AuthenticationOptions, create_confidential_client

__all__ = [
    "AuthenticationOptions",
    "EntraIdDirectoryService",
    "EnvironmentConfigurationSource",
    "GraphClient",
    "JsonFileConfigurationSource",
    "LayeredConfigurationSource",
    "build_configuration",
    "create_confidential_client",
    "create_token_provider",
]
