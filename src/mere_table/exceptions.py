"""Exceptions for mere-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class MereTableError(Exception):
    """
    Base exception for all mere-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Category Exceptions
# ---------------------------------------------------------------------------


class StructureError(MereTableError):
    """
    Base exception for column-structure errors.

    This includes duplicate titles, nesting deeper than the renderer
    supports, and structural changes made while rows are present.
    """

    pass


class RowError(MereTableError):
    """
    Base exception for row-related errors.

    Raised when a row of values does not line up with the leaf columns
    of the table.
    """

    pass


# ---------------------------------------------------------------------------
# Structure Exceptions
# ---------------------------------------------------------------------------


class DuplicateColumnError(StructureError):
    """Raised when a column title would shadow an existing sibling."""

    def __init__(self, title: str, parent: str | None = None) -> None:
        self.title = title
        self.parent = parent
        if parent is None:
            msg = f"Column already exists: {title!r}"
        else:
            msg = f"Subcolumn {title!r} already exists under column {parent!r}"
        super().__init__(msg)


class NestingDepthError(StructureError):
    """
    Raised when a column is nested deeper than the renderer supports.

    The renderer understands top-level columns and one level of leaf
    subcolumns. Anything deeper is rejected instead of being truncated.

    Attributes:
        title: Title of the offending top-level column
        depth: Depth of that column (a leaf has depth 1)
        max_depth: Deepest structure the renderer accepts
    """

    def __init__(self, title: str, depth: int, max_depth: int) -> None:
        self.title = title
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Column {title!r} is nested {depth} levels deep; "
            f"at most {max_depth} levels can be rendered"
        )


class StructureLockedError(StructureError):
    """
    Raised when a column is added to a table that already holds rows.

    A new leaf would have no values for the rows inserted before it.
    Call ``clear()`` first, then declare the column and re-insert rows.
    """

    def __init__(self, title: str, num_rows: int) -> None:
        self.title = title
        self.num_rows = num_rows
        super().__init__(
            f"Cannot add column {title!r}: table already holds {num_rows} row(s). "
            "Clear the table before changing its structure."
        )


# ---------------------------------------------------------------------------
# Row Exceptions
# ---------------------------------------------------------------------------


class RowArityError(RowError):
    """
    Raised when a row does not supply exactly one value per leaf column.

    Attributes:
        expected: Number of leaf columns in the table
        actual: Number of values supplied
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Row has {actual} value(s) but the table has {expected} leaf column(s)")

    def as_dict(self) -> dict[str, Any]:
        """Serialize for structured error output."""
        return {
            "error": "row_arity",
            "message": str(self),
            "expected": self.expected,
            "actual": self.actual,
        }


# ---------------------------------------------------------------------------
# Validation Exceptions
# ---------------------------------------------------------------------------


class ValidationError(MereTableError):
    """
    Raised when a user-supplied value fails validation.

    Attributes:
        field: Name of the field that failed validation
        value: The rejected value
        reason: Human readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field} {value!r}: {reason}")


class ManifestError(MereTableError):
    """Raised when a table manifest file cannot be parsed."""

    def __init__(self, path: str | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        if path:
            msg = f"Invalid manifest {path}: {reason}"
        else:
            msg = f"Invalid manifest: {reason}"
        super().__init__(msg)
