"""Pytest configuration and shared fixtures for mtx_layout tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from mtx_layout.core.parser import parse_matrix_market_string


# MatrixMarket sources


GENERAL_REAL = """%%MatrixMarket matrix coordinate real general
% 2x2 example with an unsorted row
2 2 3
1 1 1.0
2 1 2.0
1 2 3.0
"""

SYMMETRIC_REAL = """%%MatrixMarket matrix coordinate real symmetric
2 2 2
1 1 1.0
2 1 2.0
"""

PATTERN_GENERAL = """%%MatrixMarket matrix coordinate pattern general
3 4 4
1 4
3 1
1 2
3 3
"""

INTEGER_GENERAL = """%%MatrixMarket matrix coordinate integer general
3 3 4
1 1 7
3 3 -2
1 3 5
3 1 4
"""

# Rows 0 and 2 hold entries, row 1 is empty; row 0 repeats column 1
RAGGED_REAL = """%%MatrixMarket matrix coordinate real general
%
% values chosen to exercise integer truncation
%
3 5 6

1 5 2.7
1 2 -2.7
3 1 0.5
1 2 9.0
1 1 -1.25
3 4 100.0
"""


@pytest.fixture
def write_mtx(tmp_path):
    """Factory writing MatrixMarket text to a file and returning its path."""

    def _write(text, name="matrix.mtx"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def general_store():
    """2x2 real general store from the reference example."""
    return parse_matrix_market_string(GENERAL_REAL)


@pytest.fixture
def symmetric_store():
    return parse_matrix_market_string(SYMMETRIC_REAL)


@pytest.fixture
def pattern_store():
    return parse_matrix_market_string(PATTERN_GENERAL)


@pytest.fixture
def ragged_store():
    """3x5 store with an empty row, a duplicate position and fractional values."""
    return parse_matrix_market_string(RAGGED_REAL)
