"""Configuration loading and dot-path access."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from avrocache.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "DEFAULTS"]

DEFAULTS: dict[str, Any] = {
    "registry": {"url": None, "timeout": 30, "auth": {"username": None, "password": None}},
    "schemas": {"root": "./priv/schemas"},
    "cache": {"ttl": None},
}

_NUMERIC_KEYS = ("registry.timeout", "cache.ttl")

_MISSING: Any = object()


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        for key in _NUMERIC_KEYS:
            value = _lookup(self._data, key)
            if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
                raise ConfigError(message=f"Config key '{key}' must be a number, got {value!r}")

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file is not valid YAML or not a mapping.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigNotFoundError(config_path=str(file_path))

        try:
            data = yaml.safe_load(file_path.read_text())
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file '{file_path}': {e}", cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config file '{file_path}' must contain a mapping")
        return cls(data)

    def get(self, key: str, default: Any = _MISSING) -> Any:
        """Get a configuration value by dot-path key.

        Unset or null keys return ``default`` when one is passed (None
        included), else the built-in default for the key.
        """
        value = _lookup(self._data, key)
        if value is not None:
            return value
        if default is not _MISSING:
            return default
        return _lookup(DEFAULTS, key)


def _lookup(data: dict[str, Any], key: str) -> Any:
    current: Any = data
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current
