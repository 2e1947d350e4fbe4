"""
Visualization module for column trees.

Provides the box-drawing renderer used by :class:`mere_table.MereTable`:

Example:
    from mere_table.layout import negotiate_widths
    from mere_table.visualization import TableRenderer

    negotiate_widths(columns)
    print(TableRenderer().render(columns, num_rows), end="")
"""

from .table import TableRenderer, format_cell

__all__ = ["TableRenderer", "format_cell"]
