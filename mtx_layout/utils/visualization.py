"""Simple visualization utilities for sparsity structure."""

import logging

import numpy as np
import matplotlib.pyplot as plt

from mtx_layout.core.statistics import row_lengths

logger = logging.getLogger(__name__)


def plot_sparsity_pattern(
    store,
    title: str = 'Sparsity Pattern',
    save_path: str = None,
    markersize: float = 1.0,
):
    """Plot the position of every stored entry.

    Args:
        store: TripleStore to plot
        title: Plot title
        save_path: If provided, save to file instead of showing
        markersize: Marker size for each entry
    """
    fig, ax = plt.subplots(figsize=(8, 8))

    ax.spy(store.to_scipy(), markersize=markersize, aspect='auto')
    ax.set_xlabel('column')
    ax.set_ylabel('row')
    ax.set_title(f"{title} ({store.entry_count} entries)")

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        logger.info("Saved: %s", save_path)
    else:
        plt.show()

    plt.close(fig)


def plot_row_length_histogram(
    store,
    title: str = 'Row Length Distribution',
    save_path: str = None,
    padded_length: int = None,
):
    """Histogram of entries per row.

    Args:
        store: TripleStore to plot
        title: Plot title
        save_path: If provided, save to file instead of showing
        padded_length: If provided, draw the padded row width as a marker line
    """
    lengths = row_lengths(store)

    fig, ax = plt.subplots(figsize=(10, 6))

    bins = np.arange(lengths.max() + 2) - 0.5 if lengths.size else 1
    ax.hist(lengths, bins=bins, color='steelblue')
    if padded_length is not None:
        ax.axvline(padded_length, color='red', linestyle='--', label=f'padded width {padded_length}')
        ax.legend()
    ax.set_xlabel('entries per row')
    ax.set_ylabel('rows')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        logger.info("Saved: %s", save_path)
    else:
        plt.show()

    plt.close(fig)
