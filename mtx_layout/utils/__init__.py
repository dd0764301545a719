"""Utilities package."""

from mtx_layout.utils.visualization import (
    plot_row_length_histogram,
    plot_sparsity_pattern,
)

__all__ = [
    'plot_sparsity_pattern',
    'plot_row_length_histogram',
]
