"""Configuration Module

Defaults live in defaults.yaml (overridable through MTX_LAYOUT_DEFAULTS_PATH)
with Python fallbacks in defaults.py.

Usage:
    from mtx_layout.config import get_default, create_validated_config

    modulo = get_default('layout.padding_modulo')
    config = create_validated_config(element_type="float32", padding_modulo=8)

Submodules:
    enums: ElementType
    yaml_loader: YAML defaults access (get_default, get_defaults)
    layout_config: LayoutConfig, SyntheticConfig dataclasses
    validation: validate_config, warn_if_unsafe, create_validated_config
"""

from mtx_layout.config.enums import ElementType
from mtx_layout.config.yaml_loader import get_default, get_defaults, reload_defaults
from mtx_layout.config.layout_config import (
    LayoutConfig,
    SyntheticConfig,
    create_default_config,
)
from mtx_layout.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    create_validated_config,
    validate_config,
    warn_if_unsafe,
)

__all__ = [
    "ElementType",
    "LayoutConfig",
    "SyntheticConfig",
    "create_default_config",
    "create_validated_config",
    "validate_config",
    "warn_if_unsafe",
    "ConfigurationError",
    "ConfigurationWarning",
    "get_default",
    "get_defaults",
    "reload_defaults",
]
