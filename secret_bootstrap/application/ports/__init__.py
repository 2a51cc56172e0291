"""Application ports - Interfaces for external adapters."""

from .configuration_source import ConfigurationSource
from .directory_service import DirectoryService

__all__ = [
    "ConfigurationSource",
    "DirectoryService",
]
