"""Domain value objects - Immutable objects defined by their attributes."""

from .provisioning_failure import ProvisioningFailureReason
from .secret_lifetime import SecretLifetime

__all__ = [
    "ProvisioningFailureReason",
    "SecretLifetime",
]
