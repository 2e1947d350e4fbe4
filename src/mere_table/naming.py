"""Column title and cell value validation.

Every rendered line must have the same length, so nothing that ends up in a
cell may contain a line break. Titles must also be non-empty strings: a title
both labels a column and reserves its minimum width.
"""

import re

from .exceptions import ValidationError

LINE_BREAK_PATTERN = re.compile(r"[\r\n\v\f\x1c-\x1e\x85\u2028\u2029]")


def validate_title(title: str, field: str = "title") -> None:
    """
    Validate a column or subcolumn title.

    Args:
        title: The user-provided title
        field: Field name reported in the error

    Raises:
        ValidationError: If the title is not a non-empty single-line string
    """
    if not isinstance(title, str):
        raise ValidationError(field, title, f"Must be a string, not {type(title).__name__}")
    if not title:
        raise ValidationError(field, title, "Title cannot be empty")
    if LINE_BREAK_PATTERN.search(title):
        raise ValidationError(field, title, "Contains a line break. Titles must fit on one line.")


def normalize_value(value: object) -> str:
    """
    Convert a cell value to its display string.

    Args:
        value: Any value; non-strings are converted with ``str()``

    Returns:
        The display string

    Raises:
        ValidationError: If the display string contains a line break
    """
    text = value if isinstance(value, str) else str(value)
    if LINE_BREAK_PATTERN.search(text):
        raise ValidationError("value", text, "Contains a line break. Cells must fit on one line.")
    return text
