"""Layout Configuration

Dataclasses carrying every tunable used by the layout converters and the
synthetic vector generator. Values not given explicitly come from
defaults.yaml, falling back to config.defaults.

Import Policy:
    from mtx_layout.config.layout_config import LayoutConfig, SyntheticConfig
"""

import numbers
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from mtx_layout.config.defaults import (
    DEFAULT_ELEMENT_TYPE,
    DEFAULT_PADDING_MODULO,
    DEFAULT_SYNTHETIC_HIGH,
    DEFAULT_SYNTHETIC_LOW,
    DEFAULT_ZERO_VALUE,
)
from mtx_layout.config.enums import ElementType
from mtx_layout.config.yaml_loader import get_default


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _default_element_type():
    # Coerced in __post_init__; a bad name is reported by validate()
    return get_default("layout.element_type", DEFAULT_ELEMENT_TYPE)


@dataclass
class LayoutConfig:
    """Parameters for ELLPACK family conversions.

    Attributes:
        element_type: Target type the float64 values are narrowed to
        padding_modulo: Alignment of padded row width, must be > 0
        zero_value: Value placed in padded value cells

    """

    element_type: ElementType = field(default_factory=_default_element_type)
    padding_modulo: int = field(
        default_factory=lambda: get_default("layout.padding_modulo", DEFAULT_PADDING_MODULO)
    )
    zero_value: float = field(
        default_factory=lambda: get_default("layout.zero_value", DEFAULT_ZERO_VALUE)
    )

    def __post_init__(self):
        if isinstance(self.element_type, str):
            names = {et.value for et in ElementType}
            if self.element_type.lower() in names:
                self.element_type = ElementType(self.element_type.lower())

    @property
    def typed_zero(self):
        """zero_value narrowed to the element type."""
        return self.element_type.dtype.type(self.zero_value)

    def validate(self) -> list[str]:
        """Validate layout configuration.

        Returns:
            List of error messages (empty if valid)

        """
        errors = []

        if not isinstance(self.padding_modulo, int) or isinstance(self.padding_modulo, bool):
            errors.append(f"padding_modulo must be an integer, got {self.padding_modulo!r}")
        elif self.padding_modulo <= 0:
            errors.append(f"padding_modulo must be > 0, got {self.padding_modulo}")

        if not _is_number(self.zero_value):
            errors.append(f"zero_value must be a number, got {self.zero_value!r}")

        if not isinstance(self.element_type, ElementType):
            names = ", ".join(et.value for et in ElementType)
            errors.append(f"element_type must be one of {names}, got {self.element_type!r}")
        elif self.element_type.is_integral and _is_number(self.zero_value):
            info = np.iinfo(self.element_type.dtype)
            if not info.min <= self.zero_value <= info.max:
                errors.append(
                    f"zero_value ({self.zero_value}) does not fit in {self.element_type.value}"
                )

        return errors


@dataclass
class SyntheticConfig:
    """Parameters for synthetic sparse vector generation."""

    low: float = field(
        default_factory=lambda: get_default("synthetic.low", DEFAULT_SYNTHETIC_LOW)
    )
    high: float = field(
        default_factory=lambda: get_default("synthetic.high", DEFAULT_SYNTHETIC_HIGH)
    )
    seed: Optional[int] = field(default_factory=lambda: get_default("synthetic.seed"))

    def validate(self) -> list[str]:
        errors = []
        if not (_is_number(self.low) and _is_number(self.high)):
            errors.append(f"low and high must be numbers, got {self.low!r}, {self.high!r}")
        elif self.high <= self.low:
            errors.append(f"high ({self.high}) must be > low ({self.low})")
        if self.seed is not None:
            if not isinstance(self.seed, numbers.Integral) or isinstance(self.seed, bool):
                errors.append(f"seed must be an integer, got {self.seed!r}")
            elif self.seed < 0:
                errors.append(f"seed must be non-negative, got {self.seed}")
        return errors


def create_default_config() -> LayoutConfig:
    """Create a LayoutConfig populated from defaults.yaml."""
    return LayoutConfig()
