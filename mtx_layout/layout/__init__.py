"""Row-oriented storage layouts for vectorized and accelerator consumers."""

from mtx_layout.layout.dtypes import INDEX_DTYPE, PAD_COLUMN, narrow, resolve_element_dtype
from mtx_layout.layout.ellpack import (
    EllpackEntry,
    PaddedSOAEllpack,
    SOAEllpack,
    build_padded_layout,
    compute_padded_length,
    to_ellpack,
    to_padded_soa_ellpack,
    to_soa_ellpack,
)

__all__ = [
    "INDEX_DTYPE",
    "PAD_COLUMN",
    "resolve_element_dtype",
    "narrow",
    "EllpackEntry",
    "SOAEllpack",
    "PaddedSOAEllpack",
    "to_ellpack",
    "to_soa_ellpack",
    "to_padded_soa_ellpack",
    "compute_padded_length",
    "build_padded_layout",
]
