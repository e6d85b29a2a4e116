# -------------------------------------
# coltable config - limits, sentinels and schema files
# -------------------------------------
"""
Fixed limits and missing-value sentinels, plus YAML schema loading.

A schema file describes how to ingest a delimited text file:

    delimiter: ","
    skip_rows: 1
    columns:
      - {name: id, dtype: I}
      - {name: temp, dtype: D}
      - {name: flag, dtype: C}
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConstructionError

MAX_COL_NUM = 16
MAX_COL_LEN = 32
MAX_LINE_LEN = 1024

MISS_INT = -999
MISS_REAL = -999.999
MISS_CHAR = "/"

DTYPE_TAGS = "IDC"


@dataclass
class Schema:
    """Column names and tags of a delimited file, with its text layout."""

    names: list[str]
    dtypes: str
    delimiter: str = ","
    skip_rows: int = 0

    @property
    def n_col(self) -> int:
        return len(self.names)


# Module-level cache for loaded schema files
_SCHEMA_CACHE: dict[str, Schema] = {}


def load_schema(path: str | Path) -> Schema:
    """
    Load a YAML schema file.

    Args:
        path: Path to the schema YAML file

    Returns:
        Schema with names, tag string, delimiter and skip count

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file is not valid YAML
        ConstructionError: If the columns section is missing or malformed
    """
    path = Path(path)
    path_str = str(path.resolve())

    if path_str in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[path_str]

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    schema = _schema_from_dict(data, path_str)
    _SCHEMA_CACHE[path_str] = schema
    return schema


def _schema_from_dict(data: dict[str, Any], source: str) -> Schema:
    if not isinstance(data, dict):
        raise ConstructionError(f"schema {source} must be a mapping, got {type(data).__name__}")
    columns = data.get("columns")
    if not isinstance(columns, list) or not columns:
        raise ConstructionError(f"schema {source} has no 'columns' list")

    names = []
    tags = []
    for i, entry in enumerate(columns):
        if not isinstance(entry, dict) or "name" not in entry or "dtype" not in entry:
            raise ConstructionError(f"schema {source} column {i} needs 'name' and 'dtype'")
        tag = str(entry["dtype"])
        if tag not in DTYPE_TAGS or len(tag) != 1:
            raise ConstructionError(
                f"schema {source} column {entry['name']!r} has dtype {tag!r}, "
                f"expected one of {list(DTYPE_TAGS)}"
            )
        names.append(str(entry["name"]))
        tags.append(tag)

    skip_rows = data.get("skip_rows", 0)
    if not isinstance(skip_rows, int) or skip_rows < 0:
        raise ConstructionError(f"schema {source} skip_rows must be a non-negative integer")

    return Schema(
        names=names,
        dtypes="".join(tags),
        delimiter=str(data.get("delimiter", ",")),
        skip_rows=skip_rows,
    )


def clear_cache() -> None:
    """Clear the schema file cache."""
    _SCHEMA_CACHE.clear()
