"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ..adapters.entra_id import ClientCredentialConfig, GraphClientConfig

RUN_MODES = ("api", "once")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Hierarchical app configuration (AzureAd section)
    appsettings_path: str = field(default_factory=lambda: _env_str("APPSETTINGS_PATH", "appsettings.json"))
    appsettings_required: bool = field(default_factory=lambda: _env_bool("APPSETTINGS_REQUIRED", default=True))
    app_environment: str = field(default_factory=lambda: _env_str("APP_ENVIRONMENT", "Production"))

    # Secret provisioning
    secret_lifetime_months: int = field(default_factory=lambda: _env_int("SECRET_LIFETIME_MONTHS", 24))
    graph_timeout: float = field(default_factory=lambda: _env_float("GRAPH_TIMEOUT", 30.0))
    managed_identity_client_id: str = field(default_factory=lambda: _env_str("AZURE_MANAGED_IDENTITY_CLIENT_ID"))

    # Optional service principal used instead of the ambient identity
    provisioner_tenant_id: str = field(default_factory=lambda: _env_str("PROVISIONER_TENANT_ID"))
    provisioner_client_id: str = field(default_factory=lambda: _env_str("PROVISIONER_CLIENT_ID"))
    provisioner_client_secret: str = field(default_factory=lambda: _env_str("PROVISIONER_CLIENT_SECRET"), repr=False)

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "api"))
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))
    api_access_log: bool = field(default_factory=lambda: _env_bool("API_ACCESS_LOG", default=True))

    def validate(self) -> None:
        """Validate settings."""
        if self.run_mode.lower() not in RUN_MODES:
            msg = f"Invalid RUN_MODE: {self.run_mode} (use {' or '.join(RUN_MODES)})"
            raise ValueError(msg)

        if self.secret_lifetime_months <= 0:
            msg = f"SECRET_LIFETIME_MONTHS must be positive, got {self.secret_lifetime_months}"
            raise ValueError(msg)

        provisioner = (self.provisioner_tenant_id, self.provisioner_client_id, self.provisioner_client_secret)
        if any(provisioner) and not all(provisioner):
            msg = (
                "PROVISIONER_TENANT_ID, PROVISIONER_CLIENT_ID and PROVISIONER_CLIENT_SECRET "
                "must be set together"
            )
            raise ValueError(msg)

    @cached_property
    def graph_config(self) -> GraphClientConfig:
        """Get Graph API client configuration."""
        return GraphClientConfig(timeout=self.graph_timeout)

    @cached_property
    def provisioner_credentials(self) -> ClientCredentialConfig | None:
        """Get the provisioning service principal, if one is configured."""
        config = ClientCredentialConfig(
            tenant_id=self.provisioner_tenant_id,
            client_id=self.provisioner_client_id,
            client_secret=self.provisioner_client_secret,
        )
        return config if config.is_complete else None


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
