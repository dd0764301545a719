"""
Configuration Validation Utilities

Import Policy:
    from mtx_layout.config.validation import validate_config, warn_if_unsafe

DO NOT use: from mtx_layout.config.validation import *
"""

import warnings
from dataclasses import fields
from typing import List, Tuple

from mtx_layout.config.layout_config import LayoutConfig
from mtx_layout.core.errors import MtxLayoutError


class ConfigurationError(MtxLayoutError):
    """Raised when configuration validation fails."""

    pass


class ConfigurationWarning(Warning):
    """Warning for potentially unsafe configuration choices."""

    pass


def validate_config(config: LayoutConfig, raise_on_error: bool = True) -> Tuple[bool, List[str]]:
    """Validate a layout configuration.

    Args:
        config: LayoutConfig to validate
        raise_on_error: If True, raise ConfigurationError on validation failure

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        ConfigurationError: If validation fails and raise_on_error=True
    """
    errors = config.validate()

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"Configuration validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []


def warn_if_unsafe(config: LayoutConfig) -> List[str]:
    """Check for legal but questionable configuration choices.

    Warnings are issued via Python's warnings module.

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings_list = []

    modulo = config.padding_modulo
    if modulo > 0 and modulo & (modulo - 1):
        warnings_list.append(
            f"padding_modulo ({modulo}) is not a power of two. "
            "Padded rows will not line up with vector register widths."
        )

    if config.element_type.is_integral and float(config.zero_value) != int(config.zero_value):
        warnings_list.append(
            f"zero_value ({config.zero_value}) is fractional but element_type is {config.element_type.value}; "
            f"padded cells will hold {int(config.zero_value)}."
        )

    for warning_msg in warnings_list:
        warnings.warn(warning_msg, ConfigurationWarning, stacklevel=2)

    return warnings_list


def create_validated_config(**kwargs) -> LayoutConfig:
    """Create a layout configuration with validation.

    Args:
        **kwargs: LayoutConfig fields to override

    Returns:
        Validated LayoutConfig

    Raises:
        ConfigurationError: If the resulting configuration is invalid
        ValueError: If an unknown parameter is given

    Example:
        >>> config = create_validated_config(element_type="float32", padding_modulo=8)
    """
    known = {f.name for f in fields(LayoutConfig)}
    for key in kwargs:
        if key not in known:
            raise ValueError(f"Unknown configuration parameter: {key}")

    config = LayoutConfig(**kwargs)

    validate_config(config)
    warn_if_unsafe(config)
    return config
