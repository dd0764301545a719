"""ELLPACK family layouts built from a TripleStore.

Three views, each derived from the previous one:

- ELLPACK: per row, a list of (col, value) pairs sorted by column
- SOA-ELLPACK: per row, a column index array and an aligned value array
- Padded SOA-ELLPACK: SOA-ELLPACK with every row resized to one common
  width, new cells holding column -1 and a caller-chosen zero

All three always have exactly row_count rows; empty rows are kept as
empty sequences. Duplicate (row, col) entries are not merged, and their
order relative to each other after sorting is unspecified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional, Tuple

import numpy as np

from mtx_layout.config.enums import ElementType
from mtx_layout.config.layout_config import LayoutConfig
from mtx_layout.config.validation import validate_config
from mtx_layout.core.errors import InvalidArgumentError
from mtx_layout.core.statistics import max_row_length, row_lengths
from mtx_layout.core.triples import TripleStore
from mtx_layout.layout.dtypes import (
    INDEX_DTYPE,
    PAD_COLUMN,
    ElementTypeLike,
    narrow,
    resolve_element_dtype,
)

logger = logging.getLogger(__name__)


class EllpackEntry(NamedTuple):
    col: int
    value: Any  # numpy scalar of the requested element type


EllpackRow = List[EllpackEntry]
EllpackMatrix = List[EllpackRow]


@dataclass
class SOAEllpack:
    """Structure-of-arrays ELLPACK.

    ``columns[r][k]`` is the column of ``values[r][k]``.
    """

    columns: List[np.ndarray]
    values: List[np.ndarray]

    @property
    def row_count(self) -> int:
        return len(self.columns)

    @property
    def row_widths(self) -> np.ndarray:
        return np.array([len(c) for c in self.columns], dtype=np.int64)


@dataclass
class PaddedSOAEllpack(SOAEllpack):
    """SOA-ELLPACK with every row exactly padded_length wide.

    Cells past a row's original length hold column PAD_COLUMN and value zero.
    """

    padded_length: int
    zero: Any

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Stack rows into dense (row_count, padded_length) column and value arrays."""
        if not self.columns:
            dtype = np.asarray(self.zero).dtype
            return (
                np.empty((0, self.padded_length), dtype=INDEX_DTYPE),
                np.empty((0, self.padded_length), dtype=dtype),
            )
        return np.stack(self.columns), np.stack(self.values)


def compute_padded_length(max_length: int, modulo: int) -> int:
    """Common row width for padding.

    Always adds between 1 and modulo cells: a max_length that is already a
    multiple of modulo still gets a full extra block (4, 4 -> 8).

    Raises:
        InvalidArgumentError: If modulo is not a positive integer
    """
    if isinstance(modulo, bool) or not isinstance(modulo, (int, np.integer)):
        raise InvalidArgumentError(f"padding modulo must be an integer, got {modulo!r}")
    if modulo <= 0:
        raise InvalidArgumentError(f"padding modulo must be > 0, got {modulo}")
    return int(max_length + (modulo - (max_length % modulo)))


def to_ellpack(store: TripleStore, element_type: ElementTypeLike = ElementType.FLOAT64) -> EllpackMatrix:
    """Group entries by row and sort each row by column.

    Args:
        store: Source triples
        element_type: Target value type (float64, float32 or int32);
            int32 truncates fractional values toward zero

    Returns:
        List of row_count rows, each a list of EllpackEntry
    """
    dtype = resolve_element_dtype(element_type)

    # Row-major, then column order within each row
    order = np.lexsort((store.cols, store.rows))
    cols = store.cols[order].tolist()
    values = narrow(store.values[order], dtype)

    offsets = np.zeros(store.row_count + 1, dtype=np.int64)
    np.cumsum(row_lengths(store), out=offsets[1:])

    matrix: EllpackMatrix = []
    for r in range(store.row_count):
        start, end = int(offsets[r]), int(offsets[r + 1])
        matrix.append([EllpackEntry(cols[k], values[k]) for k in range(start, end)])
    return matrix


def to_soa_ellpack(store: TripleStore, element_type: ElementTypeLike = ElementType.FLOAT64) -> SOAEllpack:
    """Unzip ELLPACK rows into aligned column and value arrays."""
    dtype = resolve_element_dtype(element_type)
    ellpack = to_ellpack(store, dtype)

    columns = [np.array([e.col for e in row], dtype=INDEX_DTYPE) for row in ellpack]
    values = [np.array([e.value for e in row], dtype=dtype) for row in ellpack]
    return SOAEllpack(columns=columns, values=values)


def to_padded_soa_ellpack(
    store: TripleStore,
    zero: Any,
    modulo: int,
    element_type: ElementTypeLike = ElementType.FLOAT64,
) -> PaddedSOAEllpack:
    """SOA-ELLPACK with all rows padded to a common width.

    The width is max_row_length + (modulo - max_row_length % modulo).

    Args:
        store: Source triples
        zero: Value for padded cells, narrowed to element_type
        modulo: Width alignment, must be > 0
        element_type: Target value type

    Raises:
        InvalidArgumentError: If modulo <= 0 or element_type is unsupported
    """
    dtype = resolve_element_dtype(element_type)
    max_length = max_row_length(store)
    padded_length = compute_padded_length(max_length, modulo)
    logger.debug("Max length: %d, padded (by %d): %d", max_length, modulo, padded_length)

    soa = to_soa_ellpack(store, dtype)
    typed_zero = dtype.type(zero)

    columns = []
    values = []
    for row_cols, row_vals in zip(soa.columns, soa.values):
        padded_cols = np.full(padded_length, PAD_COLUMN, dtype=INDEX_DTYPE)
        padded_cols[: len(row_cols)] = row_cols
        padded_vals = np.full(padded_length, typed_zero, dtype=dtype)
        padded_vals[: len(row_vals)] = row_vals
        columns.append(padded_cols)
        values.append(padded_vals)

    return PaddedSOAEllpack(
        columns=columns,
        values=values,
        padded_length=padded_length,
        zero=typed_zero,
    )


def build_padded_layout(store: TripleStore, config: Optional[LayoutConfig] = None) -> PaddedSOAEllpack:
    """Padded SOA-ELLPACK using a validated LayoutConfig (defaults.yaml when None)."""
    if config is None:
        config = LayoutConfig()
    validate_config(config)
    return to_padded_soa_ellpack(
        store,
        zero=config.typed_zero,
        modulo=config.padding_modulo,
        element_type=config.element_type,
    )
