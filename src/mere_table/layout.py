"""
Width negotiation for the column tree.

Widths are computed bottom-up. A leaf is as wide as its widest string
(title or value). A group gives every subcolumn the width of the widest one,
plus one separator character between neighbours. When the group title does
not fit in that span, the title width is spread evenly over the subcolumns,
rounding up, so the children stay uniform even if the group ends up slightly
wider than its title.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from .models import Column

logger = logging.getLogger(__name__)


def span_width(child_width: int, num_children: int) -> int:
    """Width covered by ``num_children`` cells of ``child_width`` and their separators."""
    return child_width * num_children + (num_children - 1)


def negotiate_width(column: Column) -> int:
    """
    Assign ``column.width`` and the widths of its whole subtree.

    Only the immediate subcolumns of a group are resized when the group
    title forces a redistribution; deeper descendants keep the widths they
    negotiated for themselves.

    Args:
        column: Root of the subtree to negotiate

    Returns:
        The negotiated width of ``column``
    """
    title_width = len(column.title)

    if not column.columns:
        column.width = max([title_width, *(len(v) for v in column.values)])
        return column.width

    num_children = len(column.columns)
    child_width = max(negotiate_width(child) for child in column.columns)
    natural = span_width(child_width, num_children)

    if title_width > natural:
        child_width = math.ceil(title_width / num_children)
        natural = span_width(child_width, num_children)
        logger.debug(
            "Redistributing column %r: %d subcolumn(s) widened to %d",
            column.title,
            num_children,
            child_width,
        )

    for child in column.columns:
        child.width = child_width

    column.width = max(title_width, natural)
    return column.width


def negotiate_widths(columns: Iterable[Column]) -> list[int]:
    """Negotiate every top-level column and return their widths in order."""
    return [negotiate_width(column) for column in columns]
