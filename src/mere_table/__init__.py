"""
mere-table: box-drawn plain-text tables with one level of subcolumns.

Column widths are negotiated from titles and values, then the table is
rendered as ASCII with ``+``, ``-``, ``|`` and ``=`` borders, every cell
right-justified.

Example:
    from mere_table import MereTable

    table = MereTable("a", "b")
    table.add_subcolumn("b", "x")
    table.add_values("1", "22")
    print(table, end="")

    # +-+--+
    # | | b|
    # |a|--|
    # | | x|
    # +=+==+
    # |1|22|
    # +-+--+
"""

from .exceptions import (
    DuplicateColumnError,
    ManifestError,
    MereTableError,
    NestingDepthError,
    RowArityError,
    RowError,
    StructureError,
    StructureLockedError,
    ValidationError,
)
from .layout import negotiate_width, negotiate_widths
from .models import Column, ColumnLookup
from .table import MereTable
from .visualization import TableRenderer

try:
    from ._version import __version__  # type: ignore[import-not-found]
except ImportError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Main classes
    "MereTable",
    "TableRenderer",
    # Models
    "Column",
    "ColumnLookup",
    # Width negotiation
    "negotiate_width",
    "negotiate_widths",
    # Exceptions - Base
    "MereTableError",
    # Exceptions - Categories
    "StructureError",
    "RowError",
    # Exceptions - Structure
    "DuplicateColumnError",
    "NestingDepthError",
    "StructureLockedError",
    # Exceptions - Row
    "RowArityError",
    # Exceptions - Validation
    "ValidationError",
    "ManifestError",
]
