"""
Box-drawing renderer for a negotiated column tree.

This module provides a TableRenderer class that turns top-level columns
(each optionally split into one level of leaf subcolumns) into an ASCII
table, one fixed pass per line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..exceptions import NestingDepthError
from ..models import Column

logger = logging.getLogger(__name__)


def format_cell(text: str, width: int, fill: str = " ", border: str = "|") -> str:
    """Right-justify ``text`` in ``width`` characters of ``fill`` and close with ``border``."""
    return text.rjust(width, fill) + border


def _blank(column: Column) -> str:
    return ""


def _title(column: Column) -> str:
    return column.title


class TableRenderer:
    """Render a column tree as a box-drawing table.

    Example output (``b`` split into ``x`` and ``y``):
        +-+-----+
        | |    b|
        |a|--+--|
        | | x| y|
        +=+==+==+
        |1|22| 3|
        +-+--+--+

    Widths must be negotiated (see :mod:`mere_table.layout`) before
    calling :meth:`render`.
    """

    MAX_DEPTH = 2

    def check_depth(self, columns: Sequence[Column]) -> None:
        """
        Reject columns nested deeper than one level of subcolumns.

        Raises:
            NestingDepthError: If any top-level column is too deep
        """
        for column in columns:
            depth = column.depth()
            if depth > self.MAX_DEPTH:
                raise NestingDepthError(column.title, depth, self.MAX_DEPTH)

    def render(self, columns: Sequence[Column], num_rows: int) -> str:
        """Render top-level columns and ``num_rows`` rows of values.

        Args:
            columns: Top-level columns with negotiated widths
            num_rows: Number of rows held by every leaf

        Returns:
            Table text, every line terminated by a newline

        Raises:
            NestingDepthError: If a column has subcolumns of its own subcolumns
        """
        self.check_depth(columns)

        lines: list[str] = []

        # Top border spans groups as a single cell
        lines.append(self._line("+", columns, lambda c: format_cell("", c.width, "-", "+")))

        # Group titles
        lines.append(
            self._line(
                "|",
                columns,
                lambda c: format_cell(c.title if c.is_group else "", c.width, " ", "|"),
            )
        )

        # Leaf titles, or the border between a group title and its subcolumns
        lines.append(
            self._line(
                "|",
                columns,
                lambda c: (
                    self._span(c, _blank, "-", "+", "|")
                    if c.is_group
                    else format_cell(c.title, c.width, " ", "|")
                ),
            )
        )

        # Subcolumn titles
        lines.append(
            self._line(
                "|",
                columns,
                lambda c: (
                    self._span(c, _title, " ", "|", "|")
                    if c.is_group
                    else format_cell("", c.width, " ", "|")
                ),
            )
        )

        # Header/body separator
        lines.append(self._line("+", columns, lambda c: self._span(c, _blank, "=", "+", "+")))

        for i in range(num_rows):
            lines.append(self._row(columns, i))

        lines.append(self._line("+", columns, lambda c: self._span(c, _blank, "-", "+", "+")))

        logger.debug("Rendered %d column(s), %d row(s)", len(columns), num_rows)
        return "".join(lines)

    def _row(self, columns: Sequence[Column], index: int) -> str:
        """Render the values of row ``index``."""
        cells = []
        for column in columns:
            cells.append(self._span(column, lambda leaf: leaf.values[index]))
        return "|" + "".join(cells) + "\n"

    def _line(
        self,
        left_border: str,
        columns: Sequence[Column],
        cell: Callable[[Column], str],
    ) -> str:
        return left_border + "".join(cell(column) for column in columns) + "\n"

    def _span(
        self,
        column: Column,
        text: Callable[[Column], str],
        fill: str = " ",
        separator: str = "|",
        border: str = "|",
    ) -> str:
        """Render a column as one cell per leaf: itself if a leaf, else each subcolumn."""
        cells = column.columns or [column]
        last = len(cells) - 1
        return "".join(
            format_cell(text(cell), cell.width, fill, border if n == last else separator)
            for n, cell in enumerate(cells)
        )
