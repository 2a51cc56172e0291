"""Web sign-in options built from configuration and the bootstrapped client secret."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Self

import msal

from ....application.ports import ConfigurationSource

logger = logging.getLogger(__name__)

SECTION = "AzureAd"
DEFAULT_INSTANCE = "https://login.microsoftonline.com/"
DEFAULT_CALLBACK_PATH = "/signin-oidc"
DOWNSTREAM_SCOPES: tuple[str, ...] = (
    "https://graph.microsoft.com/Files.Read.All",
    "https://graph.microsoft.com/Sites.Read.All",
    "https://graph.microsoft.com/Mail.Send",
    "https://graph.microsoft.com/User.Read.All",
)


@dataclass(frozen=True, slots=True)
class AuthenticationOptions:
    """Options for signing users in with Entra ID and calling downstream APIs."""

    instance: str
    tenant_id: str
    client_id: str
    client_secret: str | None = field(default=None, repr=False)
    callback_path: str = DEFAULT_CALLBACK_PATH
    scopes: tuple[str, ...] = DOWNSTREAM_SCOPES

    @property
    def authority(self) -> str:
        """Authority URL for the tenant."""
        return f"{self.instance.rstrip('/')}/{self.tenant_id or 'common'}"

    @property
    def is_configured(self) -> bool:
        """Check if sign-in can work (client ID and secret present)."""
        return bool(self.client_id and self.client_secret)

    @classmethod
    def from_configuration(cls, configuration: ConfigurationSource, client_secret: str | None) -> Self:
        """
        Build options from the AzureAd configuration section.

        ``client_secret`` is the value returned by the startup bootstrap; the
        configured value is never re-read here.
        """
        return cls(
            instance=configuration.get(f"{SECTION}:Instance") or DEFAULT_INSTANCE,
            tenant_id=configuration.get(f"{SECTION}:TenantId") or "",
            client_id=configuration.get(f"{SECTION}:ClientId") or "",
            client_secret=client_secret,
            callback_path=configuration.get(f"{SECTION}:CallbackPath") or DEFAULT_CALLBACK_PATH,
        )


def create_confidential_client(options: AuthenticationOptions) -> msal.ConfidentialClientApplication | None:
    """
    Create the MSAL confidential client used for user sign-in.

    Returns None when no client secret is available, in which case sign-in
    will fail until the application is restarted with a valid secret.
    """
    if not options.is_configured:
        logger.warning("Client secret unavailable; authentication is not configured")
        return None

    logger.info("Configuring authentication for client %s at %s", options.client_id, options.authority)
    return msal.ConfidentialClientApplication(
        client_id=options.client_id,
        client_credential=options.client_secret,
        authority=options.authority,
        token_cache=msal.SerializableTokenCache(),
    )
