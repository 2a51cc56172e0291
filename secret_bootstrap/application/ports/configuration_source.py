"""Port for configuration lookup - driven/secondary port."""

from typing import Protocol


class ConfigurationSource(Protocol):
    """
    Port for reading hierarchical configuration values.

    Keys use ``:`` as the section separator, e.g. ``AzureAd:ClientId``.
    """

    def get(self, key: str) -> str | None:
        """
        Look up a configuration value.

        Returns:
            The current value, or None if the key is not set.
        """
        ...
