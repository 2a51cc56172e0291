"""Domain entities - Objects with identity and lifecycle."""

from .application_identity import ApplicationIdentity
from .secret_credential import SecretCredential

__all__ = [
    "ApplicationIdentity",
    "SecretCredential",
]
