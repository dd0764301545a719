"""Core data structures: triple storage, MatrixMarket parsing, row statistics."""

from mtx_layout.core.banner import MatrixMarketBanner, parse_banner, require_supported
from mtx_layout.core.errors import InvalidArgumentError, MatrixFormatError, MtxLayoutError
from mtx_layout.core.parser import parse_matrix_market, parse_matrix_market_string
from mtx_layout.core.statistics import (
    RowStatistics,
    max_row_length,
    mean_row_length,
    min_row_length,
    row_lengths,
)
from mtx_layout.core.synthetic import random_sparse_vector
from mtx_layout.core.triples import Triple, TripleStore

__all__ = [
    "Triple",
    "TripleStore",
    "MatrixMarketBanner",
    "parse_banner",
    "require_supported",
    "parse_matrix_market",
    "parse_matrix_market_string",
    "RowStatistics",
    "row_lengths",
    "max_row_length",
    "min_row_length",
    "mean_row_length",
    "random_sparse_vector",
    "MtxLayoutError",
    "MatrixFormatError",
    "InvalidArgumentError",
]
