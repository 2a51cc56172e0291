"""Application use cases."""

from .bootstrap_client_secret import BootstrapClientSecret, BootstrapResult
from .directory_lookup import DirectoryLookupClient
from .ensure_secret import CLIENT_ID_KEY, CLIENT_SECRET_KEY, SecretEnsurer
from .provision_secret import SecretProvisioner

__all__ = [
    "CLIENT_ID_KEY",
    "CLIENT_SECRET_KEY",
    "BootstrapClientSecret",
    "BootstrapResult",
    "DirectoryLookupClient",
    "SecretEnsurer",
    "SecretProvisioner",
]
