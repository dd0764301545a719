"""Per-row nonzero statistics.

Each TripleStore owns one RowStatistics. Every statistic is computed on
first access and then reused; a store is immutable so the cached values
never go stale.
"""

import logging
import threading
from typing import Callable, Optional

import numpy as np

logger = logging.getLogger(__name__)


class RowStatistics:
    """Memoized row-length statistics for one store.

    Row lengths are a plain tally of entries per row. Repeated (row, col)
    pairs each count. For a store with no rows every scalar statistic is 0
    and row_lengths is empty.

    First computation of each value happens under a re-entrant lock, so a
    statistic is written at most once even with concurrent readers.
    """

    def __init__(self, rows: np.ndarray, row_count: int):
        self._rows = rows
        self._row_count = row_count
        self._lock = threading.RLock()
        self._row_lengths: Optional[np.ndarray] = None
        self._max: Optional[int] = None
        self._min: Optional[int] = None
        self._mean: Optional[int] = None

    def _cached(self, attr: str, compute: Callable):
        value = getattr(self, attr)
        if value is None:
            with self._lock:
                value = getattr(self, attr)
                if value is None:
                    value = compute()
                    setattr(self, attr, value)
        return value

    def _compute_row_lengths(self) -> np.ndarray:
        logger.debug("Building row lengths for %d rows", self._row_count)
        lengths = np.bincount(self._rows, minlength=self._row_count).astype(np.int64)
        lengths.flags.writeable = False
        return lengths

    @property
    def row_lengths(self) -> np.ndarray:
        """Entry count per row, length row_count, read-only."""
        return self._cached("_row_lengths", self._compute_row_lengths)

    @property
    def max_row_length(self) -> int:
        return self._cached("_max", lambda: self._reduce(np.max))

    @property
    def min_row_length(self) -> int:
        return self._cached("_min", lambda: self._reduce(np.min))

    @property
    def mean_row_length(self) -> int:
        """Mean entries per row, truncated to an integer."""
        return self._cached("_mean", self._compute_mean)

    @property
    def is_computed(self) -> bool:
        return self._row_lengths is not None

    def _reduce(self, func) -> int:
        lengths = self.row_lengths
        return int(func(lengths)) if lengths.size else 0

    def _compute_mean(self) -> int:
        lengths = self.row_lengths
        return int(lengths.sum()) // lengths.size if lengths.size else 0


def row_lengths(store) -> np.ndarray:
    """Entry count for each row of store."""
    return store.statistics.row_lengths


def max_row_length(store) -> int:
    return store.statistics.max_row_length


def min_row_length(store) -> int:
    return store.statistics.min_row_length


def mean_row_length(store) -> int:
    """Integer-truncated mean row length."""
    return store.statistics.mean_row_length
