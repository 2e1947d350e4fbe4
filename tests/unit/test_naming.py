"""Tests for naming module."""

import pytest

from mere_table.exceptions import ValidationError
from mere_table.naming import normalize_value, validate_title


class TestValidateTitle:
    """Test validate_title function."""

    def test_valid_simple_title(self) -> None:
        """Valid simple title passes."""
        validate_title("latency")  # No exception

    def test_valid_title_with_spaces(self) -> None:
        """Spaces are allowed inside a title."""
        validate_title("p99 latency")  # No exception

    def test_empty_title_raises(self) -> None:
        """Empty title raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            validate_title("")
        assert exc_info.value.field == "title"
        assert exc_info.value.value == ""
        assert "cannot be empty" in exc_info.value.reason

    @pytest.mark.parametrize("title", ["a\nb", "a\r", "\x0b", "a\u2028b"])
    def test_line_break_raises(self, title: str) -> None:
        """Any line break is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_title(title)
        assert "line break" in exc_info.value.reason

    def test_non_string_raises(self) -> None:
        """Non-string titles are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            validate_title(42)  # type: ignore[arg-type]
        assert "int" in exc_info.value.reason

    def test_field_name_is_reported(self) -> None:
        """The caller chooses the reported field name."""
        with pytest.raises(ValidationError) as exc_info:
            validate_title("", "subcolumn")
        assert exc_info.value.field == "subcolumn"


class TestNormalizeValue:
    """Test normalize_value function."""

    def test_string_unchanged(self) -> None:
        """Strings pass through."""
        assert normalize_value("abc") == "abc"

    def test_empty_string_allowed(self) -> None:
        """Empty cells are allowed."""
        assert normalize_value("") == ""

    def test_non_string_converted(self) -> None:
        """Other values use str()."""
        assert normalize_value(12) == "12"
        assert normalize_value(None) == "None"

    def test_line_break_raises(self) -> None:
        """Multi-line values are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            normalize_value("1\n2")
        assert exc_info.value.field == "value"
