"""YAML Configuration Loader

This module loads defaults.yaml and provides access functions.
It has no dependencies on other config modules to avoid circular imports.

Usage:
    from mtx_layout.config.yaml_loader import get_default, get_defaults
    modulo = get_default('layout.padding_modulo')
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

DEFAULTS_ENV_VAR = "MTX_LAYOUT_DEFAULTS_PATH"


def _get_yaml_path() -> Path:
    """Get the path to defaults.yaml.

    The YAML file is searched for in the following order:
    1. Environment variable MTX_LAYOUT_DEFAULTS_PATH
    2. defaults.yaml next to this module

    Raises:
        FileNotFoundError: If defaults.yaml cannot be found.
    """
    env_path = os.getenv(DEFAULTS_ENV_VAR)
    if env_path and Path(env_path).exists():
        return Path(env_path)

    yaml_path = Path(__file__).parent / "defaults.yaml"
    if not yaml_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {yaml_path}\n"
            f"Set {DEFAULTS_ENV_VAR} if the file is relocated."
        )
    return yaml_path


def _load_yaml_config() -> dict[str, Any]:
    with open(_get_yaml_path(), encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


_CONFIG_CACHE: dict[str, Any] | None = None


def _get_config() -> dict[str, Any]:
    global _CONFIG_CACHE
    if _CONFIG_CACHE is None:
        _CONFIG_CACHE = _load_yaml_config()
    return _CONFIG_CACHE


def get_defaults() -> dict[str, Any]:
    """Get the full configuration dictionary from defaults.yaml.

    Example:
        >>> get_defaults()['layout']['padding_modulo']
        16
    """
    return _get_config().copy()


def get_default(key_path: str, default: Any = None) -> Any:
    """Get a configuration value by dotted key path from defaults.yaml.

    Args:
        key_path: Dotted path to the value (e.g., 'layout.element_type')
        default: Value returned if the key is missing or null

    Example:
        >>> get_default('layout.element_type')
        'float64'
        >>> get_default('nonexistent.key', 'fallback')
        'fallback'
    """
    value = _get_config()
    for key in key_path.split("."):
        if not isinstance(value, dict):
            return default
        value = value.get(key)
        if value is None:
            return default
    return value


def reload_defaults() -> None:
    """Re-read defaults.yaml (or the file named by the env var) from disk."""
    global _CONFIG_CACHE
    _CONFIG_CACHE = _load_yaml_config()
