"""Exception types raised by the ingestion and layout code.

I/O failures are not wrapped: opening or reading a missing/unreadable
source raises the builtin OSError.
"""


class MtxLayoutError(Exception):
    """Base class for errors raised by mtx_layout."""

    pass


class MatrixFormatError(MtxLayoutError, ValueError):
    """Input is not a supported coordinate MatrixMarket matrix.

    Raised for an unreadable or unsupported banner, a malformed size line,
    a malformed data line, or a data line count that disagrees with the
    declared number of nonzeros.
    """

    def __init__(self, message: str, line_number: int = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class InvalidArgumentError(MtxLayoutError, ValueError):
    """A caller-supplied argument violates a precondition."""

    pass
