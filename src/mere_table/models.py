"""Core models for mere-table."""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class Column:
    """
    A node of the column tree.

    A column with subcolumns is a *group*: it only spans its children and
    never holds values. A column without subcolumns is a *leaf*: it holds one
    value per inserted row.

    Attributes:
        title: Display label, also the minimum width of the column
        width: Display width in characters, assigned by the width negotiator
        columns: Ordered subcolumns (non-empty for groups)
        values: One string per row (leaves only)
    """

    title: str
    width: int = 0
    columns: list["Column"] = field(default_factory=list)
    values: list[str] = field(default_factory=list)

    @property
    def is_group(self) -> bool:
        """True if the column is split into subcolumns."""
        return bool(self.columns)

    def add_child(self, title: str) -> "Column":
        """Append a leaf subcolumn with the given title and return it."""
        child = Column(title)
        self.columns.append(child)
        return child

    def find_child(self, title: str) -> "Column | None":
        """Return the first immediate subcolumn titled ``title``."""
        return next((c for c in self.columns if c.title == title), None)

    def consume_values(self, cursor: Iterator[str]) -> None:
        """
        Take this column's share of a row from ``cursor``.

        A leaf takes exactly one value. A group hands the cursor to each of
        its subcolumns in order, so values are consumed in leaf traversal
        order (pre-order, left to right).
        """
        if self.columns:
            for column in self.columns:
                column.consume_values(cursor)
        else:
            self.values.append(next(cursor))

    def clear(self) -> None:
        """Drop the values of this column and all its subcolumns."""
        for column in self.columns:
            column.clear()
        self.values.clear()

    def leaves(self) -> Iterator["Column"]:
        """Yield leaf columns in leaf traversal order."""
        if not self.columns:
            yield self
            return
        for column in self.columns:
            yield from column.leaves()

    def depth(self) -> int:
        """Number of levels in this column's subtree (a leaf has depth 1)."""
        if not self.columns:
            return 1
        return 1 + max(column.depth() for column in self.columns)


@dataclass(frozen=True)
class ColumnLookup:
    """
    Outcome of a find-or-create operation on a column title.

    Attributes:
        column: The column that was found or created
        created: True if the column did not exist before the call
    """

    column: Column
    created: bool
