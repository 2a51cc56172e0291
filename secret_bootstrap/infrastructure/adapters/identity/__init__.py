"""Identity adapter - web sign-in configuration."""

from .authentication import AuthenticationOptions, create_confidential_client

__all__ = ["AuthenticationOptions", "create_confidential_client"]
