"""Configuration source adapters."""

from .sources import (
    EnvironmentConfigurationSource,
    JsonFileConfigurationSource,
    LayeredConfigurationSource,
    build_configuration,
)

__all__ = [
    "EnvironmentConfigurationSource",
    "JsonFileConfigurationSource",
    "LayeredConfigurationSource",
    "build_configuration",
]
