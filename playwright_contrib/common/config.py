"""
================================================================================
Library Configuration
================================================================================

Settings for playwright_contrib, read from an optional YAML file and
overridden per key by environment variables.

Lookup order for `get("timeouts.sync_bridge", 30.0)`:
    1. PW_CONTRIB_TIMEOUTS_SYNC_BRIDGE
    2. timeouts.sync_bridge in the YAML file
    3. the supplied default

The file is PW_CONTRIB_CONFIG when set, else config/contrib.yaml relative to
the working directory. A missing file is not an error.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from loguru import logger

from ..errors import ConfigurationError


ENV_PREFIX = "PW_CONTRIB_"
CONFIG_PATH_ENV = "PW_CONTRIB_CONFIG"
DEFAULT_CONFIG_PATH = Path("config") / "contrib.yaml"

_MISSING = object()


def env_name(key: str) -> str:
    """`logging.level` -> `PW_CONTRIB_LOGGING_LEVEL`."""
    return ENV_PREFIX + key.upper().replace(".", "_")


def _from_env(raw: str, default: Any) -> Any:
    # String settings stay verbatim; others are read as a YAML scalar.
    if isinstance(default, str):
        return raw
    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return parsed if isinstance(parsed, (bool, int, float)) else raw


def _dig(values: Mapping[str, Any], key: str) -> Any:
    node: Any = values
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return _MISSING if node is None else node


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        logger.debug(f"No configuration file at {path}; using defaults")
        return {}
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file {path}: {e}") from e
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    logger.debug(f"Loaded configuration from {path}")
    return loaded


class ContribConfig:
    """
    Process-wide settings, loaded once.

    Usage:
        >>> ContribConfig().get("timeouts.elements_removed", 30000)
        30000
    """

    _instance: Optional["ContribConfig"] = None

    def __new__(cls, config_path: Union[str, Path, None] = None) -> "ContribConfig":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.path = Path(config_path or os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH)
            instance.values = _read_yaml(instance.path)
            cls._instance = instance
        return cls._instance

    def get(self, key: str, default: Any = None) -> Any:
        """Value of a dot-notation key; see the module docstring for the lookup order."""
        raw = os.environ.get(env_name(key))
        if raw is not None:
            return _from_env(raw, default)
        value = _dig(self.values, key)
        return default if value is _MISSING else value

    def reload(self) -> None:
        """Re-read the YAML file. Environment variables are always read live."""
        self.values = _read_yaml(self.path)
        logger.info(f"Configuration reloaded from {self.path}")

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded settings; the next ContribConfig() loads again."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    return ContribConfig().get(key, default)


__all__ = [
    "ContribConfig",
    "ConfigurationError",
    "get_config",
    "env_name",
]
