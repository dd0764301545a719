"""Coordinate triple storage.

A TripleStore is the parse target for MatrixMarket input and the single
source every layout is derived from. It is immutable once built: the entry
tuple is frozen and the numpy views over it are read-only.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable, NamedTuple, Optional, Tuple

import numpy as np
import scipy.sparse

from mtx_layout.core.errors import MatrixFormatError
from mtx_layout.core.statistics import RowStatistics


class Triple(NamedTuple):
    """One stored entry, 0-based."""

    row: int
    col: int
    value: float


def _readonly(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclasses.dataclass(frozen=True, eq=False)
class TripleStore:
    """Sparse matrix held as an ordered list of (row, col, value) triples.

    Entry order is file order, except that symmetric inputs carry each
    mirrored off-diagonal entry directly after its original. Duplicate
    (row, col) pairs are kept as separate entries.

    Attributes:
        row_count, col_count: Matrix extents
        nonzero_count: Declared nonzero count (before symmetric expansion).
            Use entry_count for the number of stored triples.
        entries: Stored triples
        min_value, max_value: Extrema over the stored values, None if empty
        field: MatrixMarket value field ('real', 'integer' or 'pattern')
        symmetry: MatrixMarket symmetry ('general' or 'symmetric')
        rows, cols, values: Read-only int64/int64/float64 views of entries
        statistics: Lazily computed per-row counts for this store
    """

    row_count: int
    col_count: int
    nonzero_count: int
    entries: Tuple[Triple, ...] = ()
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    field: str = "real"
    symmetry: str = "general"

    rows: np.ndarray = dataclasses.field(init=False, repr=False)
    cols: np.ndarray = dataclasses.field(init=False, repr=False)
    values: np.ndarray = dataclasses.field(init=False, repr=False)
    statistics: RowStatistics = dataclasses.field(init=False, repr=False)

    def __post_init__(self):
        for name in ("row_count", "col_count", "nonzero_count"):
            if getattr(self, name) < 0:
                raise MatrixFormatError(f"{name} must be >= 0, got {getattr(self, name)}")

        entries = tuple(Triple(int(r), int(c), float(v)) for r, c, v in self.entries)
        object.__setattr__(self, "entries", entries)

        rows = _readonly(np.fromiter((e.row for e in entries), dtype=np.int64, count=len(entries)))
        cols = _readonly(np.fromiter((e.col for e in entries), dtype=np.int64, count=len(entries)))
        values = _readonly(np.fromiter((e.value for e in entries), dtype=np.float64, count=len(entries)))

        bad = np.flatnonzero(
            (rows < 0) | (rows >= self.row_count) | (cols < 0) | (cols >= self.col_count)
        )
        if bad.size:
            entry = entries[bad[0]]
            raise MatrixFormatError(
                f"entry {entry} lies outside a {self.row_count}x{self.col_count} matrix"
            )

        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "statistics", RowStatistics(rows, self.row_count))

        if self.min_value is None and values.size:
            object.__setattr__(self, "min_value", float(values.min()))
        if self.max_value is None and values.size:
            object.__setattr__(self, "max_value", float(values.max()))

    @classmethod
    def from_triples(
        cls,
        row_count: int,
        col_count: int,
        triples: Iterable[Tuple[int, int, float]],
        **kwargs,
    ) -> "TripleStore":
        """Build a store whose declared nonzero count is the number of triples."""
        entries = tuple(triples)
        return cls(
            row_count=row_count,
            col_count=col_count,
            nonzero_count=kwargs.pop("nonzero_count", len(entries)),
            entries=entries,
            **kwargs,
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.row_count, self.col_count)

    @property
    def entry_count(self) -> int:
        """Number of stored triples, including symmetric mirrors."""
        return len(self.entries)

    @property
    def is_symmetric(self) -> bool:
        return self.symmetry == "symmetric"

    @property
    def is_pattern(self) -> bool:
        return self.field == "pattern"

    def to_scipy(self) -> scipy.sparse.coo_matrix:
        """Return the entries as a scipy COO matrix.

        Duplicates are kept as separate COO entries; scipy sums them only
        when the matrix is converted to CSR/CSC or densified.
        """
        return scipy.sparse.coo_matrix(
            (self.values, (self.rows, self.cols)),
            shape=self.shape,
        )

    def __len__(self) -> int:
        return len(self.entries)
