"""YAML manifest parsing for declarative tables.

A manifest declares the columns of a table and, optionally, its rows::

    columns:
      - host
      - title: latency
        subcolumns: [p50, p99]
    rows:
      - [web-1, 12, 48]
      - [web-2, 9, 51]

A bare string is a leaf column. JSON documents are accepted as well, since
JSON is a subset of YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .exceptions import DuplicateColumnError, ManifestError
from .table import MereTable


def _title(value: Any, what: str) -> str:
    """Convert a scalar YAML title to a string; anything else is rejected."""
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ManifestError(None, f"{what} must be a string or a number, not {value!r}")


@dataclass(frozen=True)
class ColumnDecl:
    """A top-level column declaration, optionally split into subcolumns."""

    title: str
    subcolumns: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, d: str | dict[str, Any]) -> ColumnDecl:
        if not isinstance(d, dict):
            return cls(title=_title(d, "column"))
        if "title" not in d:
            raise ManifestError(None, f"column mapping is missing 'title': {d!r}")
        subcolumns = d.get("subcolumns") or []
        if not isinstance(subcolumns, list):
            raise ManifestError(None, f"'subcolumns' of {d['title']!r} must be a list")
        title = _title(d["title"], "column title")
        return cls(
            title=title,
            subcolumns=tuple(_title(s, f"subcolumn of {title!r}") for s in subcolumns),
        )

    def to_dict(self) -> str | dict[str, Any]:
        if not self.subcolumns:
            return self.title
        return {"title": self.title, "subcolumns": list(self.subcolumns)}


@dataclass(frozen=True)
class TableManifest:
    """Parsed manifest for a table."""

    columns: tuple[ColumnDecl, ...]
    rows: tuple[tuple[str, ...], ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> TableManifest:
        if not isinstance(d, dict):
            raise ManifestError(None, "document must contain a mapping")
        columns = d.get("columns")
        if not columns or not isinstance(columns, list):
            raise ManifestError(None, "'columns' is required and must be a non-empty list")

        rows = d.get("rows") or []
        if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
            raise ManifestError(None, "'rows' must be a list of lists")

        return cls(
            columns=tuple(ColumnDecl.from_dict(c) for c in columns),
            rows=tuple(tuple("" if v is None else str(v) for v in row) for row in rows),
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> TableManifest:
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ManifestError(None, str(e)) from e
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"columns": [c.to_dict() for c in self.columns]}
        if self.rows:
            result["rows"] = [list(row) for row in self.rows]
        return result

    def build(self) -> MereTable:
        """Create a table with the declared columns and rows."""
        table = MereTable()
        seen: set[str] = set()
        for decl in self.columns:
            if decl.title in seen:
                raise DuplicateColumnError(decl.title)
            seen.add(decl.title)
            if decl.subcolumns:
                for subcolumn in decl.subcolumns:
                    table.add_subcolumn(decl.title, subcolumn)
            else:
                table.add_columns(decl.title)
        for row in self.rows:
            table.add_values(*row)
        return table


def load_manifest(path: str | Path) -> TableManifest:
    """
    Load and parse a manifest file.

    Raises:
        ManifestError: If the file is not valid YAML or not a valid manifest
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(str(path), f"cannot read file: {e}") from e
    try:
        return TableManifest.from_yaml(text)
    except ManifestError as e:
        raise ManifestError(str(path), e.reason) from e
