"""Element and index types for layout arrays.

Values are stored as float64 and narrowed on conversion with an explicit
``ndarray.astype``. Narrowing to int32 truncates toward zero
(2.7 -> 2, -2.7 -> -2); values outside the int32 range are undefined.
"""

from typing import Union

import numpy as np

from mtx_layout.config.defaults import INDEX_DTYPE as _INDEX_DTYPE_NAME
from mtx_layout.config.defaults import PAD_COLUMN
from mtx_layout.config.enums import ElementType
from mtx_layout.core.errors import InvalidArgumentError

INDEX_DTYPE = np.dtype(_INDEX_DTYPE_NAME)

ElementTypeLike = Union[ElementType, str, np.dtype, type]

__all__ = ["INDEX_DTYPE", "PAD_COLUMN", "ElementTypeLike", "resolve_element_dtype", "narrow"]


def resolve_element_dtype(element_type: ElementTypeLike) -> np.dtype:
    """Map an ElementType or numpy dtype-like to a supported numpy dtype.

    Raises:
        InvalidArgumentError: If the type is not float64, float32 or int32
    """
    if isinstance(element_type, ElementType):
        return element_type.dtype
    try:
        dtype = np.dtype(element_type)
    except TypeError as e:
        raise InvalidArgumentError(f"not a numpy dtype: {element_type!r}") from e

    supported = [et.dtype for et in ElementType]
    if dtype not in supported:
        raise InvalidArgumentError(
            f"unsupported element type {dtype}; expected one of "
            + ", ".join(str(d) for d in supported)
        )
    return dtype


def narrow(values: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Cast float64 values to dtype, truncating toward zero for integers."""
    return np.asarray(values, dtype=np.float64).astype(dtype)
