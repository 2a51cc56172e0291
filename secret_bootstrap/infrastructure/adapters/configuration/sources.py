"""Hierarchical configuration sources (JSON files and environment variables)."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ....application.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

KEY_DELIMITER = ":"
ENV_KEY_DELIMITER = "__"


def normalize_key(key: str) -> str:
    """Normalize a configuration key for case-insensitive lookup."""
    return key.replace(ENV_KEY_DELIMITER, KEY_DELIMITER).lower()


def flatten(data: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """
    Flatten nested JSON objects into ``Section:Key`` entries.

    Lists are flattened by index (``Section:Items:0``); null values are skipped.
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}{KEY_DELIMITER}{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten(value, full_key))
        elif isinstance(value, list):
            flat.update(flatten({str(i): item for i, item in enumerate(value)}, full_key))
        elif value is None:
            continue
        elif isinstance(value, bool):
            flat[normalize_key(full_key)] = str(value).lower()
        else:
            flat[normalize_key(full_key)] = str(value)
    return flat


class JsonFileConfigurationSource:
    """Configuration loaded once from a JSON settings file."""

    def __init__(self, path: str | Path, *, optional: bool = True) -> None:
        """
        Load the settings file.

        Raises:
            ConfigurationError: If a required file is missing or the file is not valid JSON.
        """
        self._path = Path(path)
        self._values: dict[str, str] = {}

        if not self._path.is_file():
            if not optional:
                msg = f"Configuration file not found: {self._path}"
                raise ConfigurationError(msg)
            logger.debug("Optional configuration file %s not found", self._path)
            return

        try:
            data = json.loads(self._path.read_text(encoding="utf-8-sig"))
        except json.JSONDecodeError as e:
            msg = f"Invalid JSON in configuration file {self._path}: {e}"
            raise ConfigurationError(msg) from e

        if not isinstance(data, dict):
            msg = f"Configuration file {self._path} must contain a JSON object"
            raise ConfigurationError(msg)

        self._values = flatten(data)
        logger.info("Loaded %d configuration values from %s", len(self._values), self._path)

    def get(self, key: str) -> str | None:
        """Look up a value from the file."""
        return self._values.get(normalize_key(key))


class EnvironmentConfigurationSource:
    """
    Configuration read from environment variables on every lookup.

    ``__`` separates sections, so ``AzureAd__ClientSecret`` maps to
    ``AzureAd:ClientSecret``.
    """

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        """Initialize the source."""
        self._prefix = prefix.lower()
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str) -> str | None:
        """Look up a value from the environment."""
        wanted = normalize_key(key)
        for name, value in self._environ.items():
            normalized = normalize_key(name)
            if not normalized.startswith(self._prefix):
                continue
            if normalized[len(self._prefix):] == wanted:
                return value
        return None


class LayeredConfigurationSource:
    """Stack of configuration sources where later sources override earlier ones."""

    def __init__(self, *sources: Any) -> None:
        """Initialize with sources in increasing priority."""
        self._sources = list(sources)

    def get(self, key: str) -> str | None:
        """Return the value from the highest-priority source that sets ``key``."""
        for source in reversed(self._sources):
            value = source.get(key)
            if value is not None:
                return value
        return None


def build_configuration(
    settings_path: str | Path,
    environment_name: str = "",
    environ: Mapping[str, str] | None = None,
    *,
    settings_required: bool = True,
) -> LayeredConfigurationSource:
    """
    Build the application configuration stack.

    Order: ``appsettings.json``, ``appsettings.<Environment>.json``,
    then environment variables. The environment-specific file is always
    optional.

    Raises:
        ConfigurationError: If the base file is required but missing, or any file is invalid.
    """
    base = Path(settings_path)
    sources: list[Any] = [JsonFileConfigurationSource(base, optional=not settings_required)]

    if environment_name:
        overlay = base.with_name(f"{base.stem}.{environment_name}{base.suffix}")
        sources.append(JsonFileConfigurationSource(overlay))

    sources.append(EnvironmentConfigurationSource(environ=environ))
    return LayeredConfigurationSource(*sources)
