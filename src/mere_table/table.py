"""MereTable: declare columns, append rows, render a box-drawn text table."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TextIO

from .exceptions import DuplicateColumnError, RowArityError, StructureLockedError
from .layout import negotiate_widths
from .models import Column, ColumnLookup
from .naming import normalize_value, validate_title
from .visualization import TableRenderer

logger = logging.getLogger(__name__)


class MereTable:
    """
    A table of string values with one optional level of subcolumns.

    Columns are declared left to right. A top-level column becomes a group
    as soon as a subcolumn is declared under it. Each row supplies one value
    per leaf column, in leaf traversal order.

    Example:
        table = MereTable("host", "latency")
        table.add_subcolumn("latency", "p50")
        table.add_subcolumn("latency", "p99")
        table.add_values("web-1", "12", "48")
        print(table, end="")
    """

    def __init__(self, *titles: str, renderer: TableRenderer | None = None) -> None:
        self._columns: list[Column] = []
        self._num_rows = 0
        self._renderer = renderer or TableRenderer()
        if titles:
            self.add_columns(*titles)

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    @property
    def columns(self) -> tuple[Column, ...]:
        """Top-level columns in declaration order."""
        return tuple(self._columns)

    @property
    def num_rows(self) -> int:
        """Number of rows inserted since creation or the last clear."""
        return self._num_rows

    def find(self, title: str) -> Column | None:
        """Return the first top-level column titled ``title``, or None."""
        return next((c for c in self._columns if c.title == title), None)

    def leaves(self) -> Iterator[Column]:
        """Yield leaf columns in leaf traversal order (the order of row values)."""
        for column in self._columns:
            yield from column.leaves()

    def depth(self) -> int:
        """Deepest column nesting in the table (0 without columns)."""
        return max((column.depth() for column in self._columns), default=0)

    def add_columns(self, *titles: str) -> MereTable:
        """
        Append top-level columns to the right of the table.

        Args:
            *titles: Column titles, in display order

        Returns:
            The table, for chaining

        Raises:
            ValidationError: If a title is empty or spans several lines
            DuplicateColumnError: If a title already exists or is repeated;
                no column is added in that case
            StructureLockedError: If the table already holds rows
        """
        seen: set[str] = set()
        for title in titles:
            validate_title(title)
            if title in seen or self.find(title) is not None:
                raise DuplicateColumnError(title)
            seen.add(title)
        if titles:
            self._check_unlocked(titles[0])
        for title in titles:
            self._create_column(title)
        return self

    def add_column(self, title: str) -> ColumnLookup:
        """
        Find or create a top-level column.

        Returns:
            Lookup result; ``created`` is False if the column already existed

        Raises:
            ValidationError: If the title is invalid
            StructureLockedError: If the column is new and the table holds rows
        """
        validate_title(title)
        existing = self.find(title)
        if existing is not None:
            return ColumnLookup(existing, created=False)
        self._check_unlocked(title)
        return ColumnLookup(self._create_column(title), created=True)

    def add_subcolumn(self, column: str, subcolumn: str) -> ColumnLookup:
        """
        Split a top-level column into subcolumns, one subcolumn per call.

        An unknown ``column`` is created first at the right of the table.

        Args:
            column: Title of the top-level column
            subcolumn: Title of the new subcolumn

        Returns:
            Lookup result for the top-level column

        Raises:
            ValidationError: If either title is invalid
            DuplicateColumnError: If ``column`` already has that subcolumn
            StructureLockedError: If the table already holds rows
        """
        validate_title(column, "column")
        validate_title(subcolumn, "subcolumn")
        self._check_unlocked(subcolumn)

        parent = self.find(column)
        created = parent is None
        if parent is None:
            parent = self._create_column(column)
        elif parent.find_child(subcolumn) is not None:
            raise DuplicateColumnError(subcolumn, parent=column)

        parent.add_child(subcolumn)
        logger.debug("Added subcolumn %r under %r", subcolumn, column)
        return ColumnLookup(parent, created=created)

    # -------------------------------------------------------------------------
    # Rows
    # -------------------------------------------------------------------------

    def add_values(self, *values: object) -> MereTable:
        """
        Append one row.

        Args:
            *values: One value per leaf column, in leaf traversal order.
                Non-string values are converted with ``str()``.

        Returns:
            The table, for chaining

        Raises:
            RowArityError: If the number of values differs from the leaf count
            ValidationError: If a value contains a line break
        """
        expected = sum(1 for _ in self.leaves())
        if len(values) != expected:
            raise RowArityError(expected, len(values))

        cursor = iter([normalize_value(v) for v in values])
        for column in self._columns:
            column.consume_values(cursor)
        self._num_rows += 1
        logger.debug("Appended row %d", self._num_rows - 1)
        return self

    def clear(self) -> MereTable:
        """Drop all rows; columns and subcolumns are kept."""
        for column in self._columns:
            column.clear()
        self._num_rows = 0
        self.update_width()
        return self

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def update_width(self) -> list[int]:
        """Negotiate the width of every column; returns top-level widths."""
        return negotiate_widths(self._columns)

    def to_string(self) -> str:
        """
        Render the table.

        Raises:
            NestingDepthError: If a column is nested deeper than one level
                of subcolumns
        """
        self.update_width()
        return self._renderer.render(self._columns, self._num_rows)

    def write(self, stream: TextIO) -> None:
        """Write the rendered table to a text stream."""
        stream.write(self.to_string())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        args = [repr(c.title) for c in self._columns]
        args.append(f"num_rows={self._num_rows}")
        return f"MereTable({', '.join(args)})"

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _create_column(self, title: str) -> Column:
        column = Column(title)
        self._columns.append(column)
        logger.debug("Added column %r", title)
        return column

    def _check_unlocked(self, title: str) -> None:
        if self._num_rows:
            raise StructureLockedError(title, self._num_rows)
