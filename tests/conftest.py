"""Pytest fixtures for mere-table tests."""

import pytest

from mere_table import MereTable


@pytest.fixture
def flat_table() -> MereTable:
    """Table with two leaf columns and two rows."""
    table = MereTable("name", "count")
    table.add_values("alpha", "1")
    table.add_values("b", "12345678")
    return table


@pytest.fixture
def grouped_table() -> MereTable:
    """Table with a leaf column and a group of two subcolumns."""
    table = MereTable("a", "b")
    table.add_subcolumn("b", "x")
    table.add_subcolumn("b", "y")
    table.add_values("1", "22", "3")
    return table


@pytest.fixture
def manifest_file(tmp_path):
    """Write a YAML manifest to a temporary file and return its path."""
    path = tmp_path / "table.yaml"
    path.write_text(
        "columns:\n"
        "  - host\n"
        "  - title: latency\n"
        "    subcolumns: [p50, p99]\n"
        "rows:\n"
        "  - [web-1, 12, 48]\n"
        "  - [web-2, 9, 151]\n"
    )
    return path
