"""MatrixMarket ingestion and ELLPACK layout conversion.

Parses coordinate MatrixMarket files into an immutable triple store and
derives row-oriented layouts for vectorized or accelerator consumers.

Key Principles:
- 1-based file indices become 0-based entries
- Symmetric inputs are expanded, pattern inputs get value 1.0
- Row statistics are computed once per store and reused
- Layouts: ELLPACK, SOA-ELLPACK and padded SOA-ELLPACK over float64/float32/int32

Version: 0.3
"""

__version__ = "0.3"

# Core data structures
from mtx_layout.core.errors import InvalidArgumentError, MatrixFormatError, MtxLayoutError
from mtx_layout.core.triples import Triple, TripleStore
from mtx_layout.core.parser import parse_matrix_market, parse_matrix_market_string
from mtx_layout.core.statistics import (
    RowStatistics,
    max_row_length,
    mean_row_length,
    min_row_length,
    row_lengths,
)
from mtx_layout.core.synthetic import random_sparse_vector

# Layouts
from mtx_layout.layout import (
    EllpackEntry,
    PaddedSOAEllpack,
    SOAEllpack,
    build_padded_layout,
    compute_padded_length,
    to_ellpack,
    to_padded_soa_ellpack,
    to_soa_ellpack,
)

# Configuration
from mtx_layout.config import ElementType, LayoutConfig

__all__ = [
    # Version
    "__version__",
    # Core
    "Triple",
    "TripleStore",
    "parse_matrix_market",
    "parse_matrix_market_string",
    "RowStatistics",
    "row_lengths",
    "max_row_length",
    "min_row_length",
    "mean_row_length",
    "random_sparse_vector",
    # Errors
    "MtxLayoutError",
    "MatrixFormatError",
    "InvalidArgumentError",
    # Layouts
    "EllpackEntry",
    "SOAEllpack",
    "PaddedSOAEllpack",
    "to_ellpack",
    "to_soa_ellpack",
    "to_padded_soa_ellpack",
    "compute_padded_length",
    "build_padded_layout",
    # Config
    "ElementType",
    "LayoutConfig",
]
