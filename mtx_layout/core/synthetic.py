"""Synthetic sparse vectors for test inputs.

Randomness always comes from an explicit numpy Generator, so a fixed seed
gives the same vector on every run.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from mtx_layout.config.layout_config import SyntheticConfig
from mtx_layout.core.errors import InvalidArgumentError
from mtx_layout.core.triples import Triple, TripleStore

logger = logging.getLogger(__name__)


def random_sparse_vector(
    length: int,
    elements: int,
    low: Optional[float] = None,
    high: Optional[float] = None,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> TripleStore:
    """Create a 1 x length sparse row vector with `elements` nonzeros.

    Positions are distinct and ascending. Values are uniform in [low, high).
    When elements == length every position is filled.

    Args:
        length: Vector length (number of columns)
        elements: Number of nonzero entries
        low, high: Value range; defaults come from the `synthetic` config section
        seed: Seed for a fresh generator, ignored when rng is given
        rng: Generator to draw from

    Raises:
        InvalidArgumentError: If elements > length, a size is negative,
            or the value range or seed is invalid
    """
    if length < 0 or elements < 0:
        raise InvalidArgumentError(f"length and elements must be >= 0, got {length}, {elements}")
    if elements > length:
        raise InvalidArgumentError(
            f"cannot initialise vector with more elements ({elements}) than length ({length})"
        )
    overrides = {k: v for k, v in (("low", low), ("high", high), ("seed", seed)) if v is not None}
    config = SyntheticConfig(**overrides)
    errors = config.validate()
    if errors:
        raise InvalidArgumentError("; ".join(errors))

    if rng is None:
        rng = np.random.default_rng(config.seed)

    if elements == length:
        logger.debug("Size/elements match - initialising dense vector of %d", length)
        positions = np.arange(length)
    else:
        logger.debug("Choosing %d of %d positions", elements, length)
        positions = np.sort(rng.choice(length, size=elements, replace=False))
    values = rng.uniform(config.low, config.high, size=elements)

    return TripleStore(
        row_count=1,
        col_count=length,
        nonzero_count=elements,
        entries=tuple(Triple(0, int(c), float(v)) for c, v in zip(positions, values)),
    )
