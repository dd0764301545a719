"""Coordinate MatrixMarket reader.

Reads a ``.mtx`` file into a TripleStore:

- indices are shifted from 1-based to 0-based
- pattern matrices get value 1.0 for every entry
- symmetric matrices get a mirrored (col, row, value) entry directly after
  every off-diagonal entry; diagonal entries are not mirrored

The whole input is read before a store is returned. Any failure raises and
no partial store is produced.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Iterator, List, TextIO, Tuple, Union

from mtx_layout.core.banner import MatrixMarketBanner, parse_banner, require_supported
from mtx_layout.core.errors import MatrixFormatError
from mtx_layout.core.triples import Triple, TripleStore

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", TextIO]


def parse_matrix_market(source: Source) -> TripleStore:
    """Parse a coordinate MatrixMarket matrix.

    Args:
        source: Path to a .mtx file, or an open text stream positioned at
            the banner line

    Returns:
        TripleStore with 0-based entries

    Raises:
        OSError: If the file cannot be opened or read
        MatrixFormatError: If the content is malformed or unsupported
    """
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        logger.info("Reading matrix file: %s", path)
        # Comment lines may carry non-UTF-8 bytes; undecodable bytes in a
        # data line still fail token parsing as a MatrixFormatError
        with path.open("r", encoding="utf-8", errors="replace") as f:
            return _parse_stream(f)
    return _parse_stream(source)


def parse_matrix_market_string(text: str) -> TripleStore:
    """Parse MatrixMarket content held in a string."""
    return _parse_stream(io.StringIO(text))


def _content_lines(lines: Iterator[Tuple[int, str]]) -> Iterator[Tuple[int, List[str]]]:
    # Skip blank and '%' comment lines
    for lineno, line in lines:
        tokens = line.split()
        if tokens and not tokens[0].startswith("%"):
            yield lineno, tokens


def _parse_size_line(tokens: List[str], lineno: int) -> Tuple[int, int, int]:
    if len(tokens) != 3:
        raise MatrixFormatError(
            f"size line must be 'rows cols nonzeros', got {' '.join(tokens)!r}", lineno
        )
    try:
        rows, cols, nonz = (int(t) for t in tokens)
    except ValueError:
        raise MatrixFormatError(f"size line is not three integers: {' '.join(tokens)!r}", lineno) from None
    if rows < 0 or cols < 0 or nonz < 0:
        raise MatrixFormatError(f"size line values must be non-negative: {' '.join(tokens)!r}", lineno)
    return rows, cols, nonz


def _parse_data_line(
    tokens: List[str],
    lineno: int,
    banner: MatrixMarketBanner,
    rows: int,
    cols: int,
) -> Triple:
    expected = 2 if banner.is_pattern else 3
    if len(tokens) != expected:
        shape = "row col" if banner.is_pattern else "row col value"
        raise MatrixFormatError(
            f"expected '{shape}' for a {banner.field} matrix, got {' '.join(tokens)!r}", lineno
        )
    try:
        row = int(tokens[0])
        col = int(tokens[1])
        value = 1.0 if banner.is_pattern else float(tokens[2])
    except ValueError:
        raise MatrixFormatError(f"malformed data line {' '.join(tokens)!r}", lineno) from None

    if not (1 <= row <= rows and 1 <= col <= cols):
        raise MatrixFormatError(
            f"entry ({row}, {col}) outside a {rows}x{cols} matrix (indices are 1-based)", lineno
        )
    return Triple(row - 1, col - 1, value)


def _parse_stream(stream: TextIO) -> TripleStore:
    lines = enumerate(stream, start=1)

    first = next(lines, None)
    if first is None:
        raise MatrixFormatError("empty input, missing MatrixMarket banner", line_number=1)
    banner = require_supported(parse_banner(first[1]))
    logger.info("Matcode: %s", banner.typecode)

    content = _content_lines(lines)
    size = next(content, None)
    if size is None:
        raise MatrixFormatError("missing size line after banner")
    rows, cols, nonz = _parse_size_line(size[1], size[0])
    logger.info("Rows %d cols %d non-zeros %d", rows, cols, nonz)

    entries: List[Triple] = []
    min_value = max_value = None
    consumed = 0
    for lineno, tokens in content:
        if consumed == nonz:
            raise MatrixFormatError(
                f"found data after the {nonz} declared entries: {' '.join(tokens)!r}", lineno
            )
        entry = _parse_data_line(tokens, lineno, banner, rows, cols)
        entries.append(entry)
        if banner.is_symmetric and entry.row != entry.col:
            entries.append(Triple(entry.col, entry.row, entry.value))

        if consumed == 0:
            min_value = max_value = entry.value
        else:
            min_value = min(min_value, entry.value)
            max_value = max(max_value, entry.value)
        consumed += 1

    if consumed < nonz:
        raise MatrixFormatError(f"expected {nonz} data lines, found {consumed}")

    if banner.is_symmetric:
        logger.debug("Symmetric expansion: %d declared, %d stored", nonz, len(entries))

    return TripleStore(
        row_count=rows,
        col_count=cols,
        nonzero_count=nonz,
        entries=tuple(entries),
        min_value=min_value,
        max_value=max_value,
        field=banner.field,
        symmetry=banner.symmetry,
    )
