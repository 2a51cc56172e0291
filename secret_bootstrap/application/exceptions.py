"""Application layer exceptions."""

from __future__ import annotations

from ..domain.value_objects import ProvisioningFailureReason


class ApplicationError(Exception):
    """Base exception for application errors."""


class DirectoryServiceError(ApplicationError):
    """Raised when the directory service cannot be reached or rejects the caller."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""


class ProvisioningError(ApplicationError):
    """Raised when a client secret could not be provisioned."""

    def __init__(self, message: str, reason: ProvisioningFailureReason) -> None:
        super().__init__(message)
        self.reason = reason
