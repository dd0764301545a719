"""
Configuration Enums for mtx_layout

Import Policy:
    from mtx_layout.config.enums import ElementType

DO NOT use: from mtx_layout.config.enums import *
"""

from enum import Enum

import numpy as np


class ElementType(Enum):
    """Target element types for layout values.

    Options:
        FLOAT64: Stored precision, no narrowing
        FLOAT32: Single precision, rounds to nearest representable value
        INT32: Signed 32-bit integer, truncates toward zero

    Note:
        Narrowing to INT32 is lossy for fractional inputs. This is accepted
        behavior, not an error.
    """
    FLOAT64 = "float64"
    FLOAT32 = "float32"
    INT32 = "int32"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def is_integral(self) -> bool:
        return np.issubdtype(self.dtype, np.integer)
