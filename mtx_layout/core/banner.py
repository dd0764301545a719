"""MatrixMarket banner decoding.

A banner has the form::

    %%MatrixMarket matrix <format> <field> <symmetry>

and is classified into the four-letter typecode used by the NIST mmio
reference library, e.g. ``MCRG`` for a real general coordinate matrix.
"""

from dataclasses import dataclass

from mtx_layout.core.errors import MatrixFormatError

BANNER_PREFIX = "%%matrixmarket"

_OBJECTS = {"matrix": "M"}
_FORMATS = {"coordinate": "C", "array": "A"}
_FIELDS = {"real": "R", "integer": "I", "pattern": "P", "complex": "C"}
_SYMMETRIES = {"general": "G", "symmetric": "S", "skew-symmetric": "K", "hermitian": "H"}

SUPPORTED_FIELDS = ("real", "integer", "pattern")
SUPPORTED_SYMMETRIES = ("general", "symmetric")


@dataclass(frozen=True)
class MatrixMarketBanner:
    """Classification decoded from a MatrixMarket banner line."""

    object: str
    format: str
    field: str
    symmetry: str

    @property
    def typecode(self) -> str:
        return (
            _OBJECTS[self.object]
            + _FORMATS[self.format]
            + _FIELDS[self.field]
            + _SYMMETRIES[self.symmetry]
        )

    @property
    def is_coordinate(self) -> bool:
        return self.format == "coordinate"

    @property
    def is_pattern(self) -> bool:
        return self.field == "pattern"

    @property
    def is_symmetric(self) -> bool:
        return self.symmetry == "symmetric"

    @property
    def is_supported(self) -> bool:
        """True for coordinate matrices of real/integer/pattern values, general or symmetric."""
        return (
            self.is_coordinate
            and self.field in SUPPORTED_FIELDS
            and self.symmetry in SUPPORTED_SYMMETRIES
        )

    def __str__(self) -> str:
        return self.typecode


def parse_banner(line: str) -> MatrixMarketBanner:
    """Decode a banner line.

    Raises:
        MatrixFormatError: If the line is not a well-formed MatrixMarket banner
    """
    parts = line.strip().split()
    if not parts or parts[0].lower() != BANNER_PREFIX:
        raise MatrixFormatError("could not read MatrixMarket banner", line_number=1)
    if len(parts) != 5:
        raise MatrixFormatError(
            f"banner must have 5 words, got {len(parts)}: {line.strip()!r}", line_number=1
        )

    obj, fmt, field, symmetry = (p.lower() for p in parts[1:])
    for value, table, what in (
        (obj, _OBJECTS, "object"),
        (fmt, _FORMATS, "format"),
        (field, _FIELDS, "field"),
        (symmetry, _SYMMETRIES, "symmetry"),
    ):
        if value not in table:
            raise MatrixFormatError(f"unknown banner {what} {value!r}", line_number=1)

    return MatrixMarketBanner(object=obj, format=fmt, field=field, symmetry=symmetry)


def require_supported(banner: MatrixMarketBanner) -> MatrixMarketBanner:
    """Reject banners describing matrices this package cannot ingest.

    Raises:
        MatrixFormatError: For array (dense) format, complex values,
            skew-symmetric or hermitian matrices
    """
    if not banner.is_supported:
        raise MatrixFormatError(
            f"cannot process this matrix type. Typecode: {banner.typecode} "
            f"({banner.format} {banner.field} {banner.symmetry})",
            line_number=1,
        )
    return banner
