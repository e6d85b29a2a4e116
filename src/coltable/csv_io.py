# -------------------------------------
# Delimited text reading and writing
# -------------------------------------
"""
Read delimited text into a table and write a table back out.

Fields are split the way C strtok splits them: every character of the
delimiter string separates fields and runs of separators never produce an
empty field. A field that is absent at the end of a line is filled with
the missing-value sentinel of its column type.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Sequence

from .config import MAX_LINE_LEN, load_schema
from .dtypes import DType, parse_dtypes
from .table import Table, check_alive, table_alloc

logger = logging.getLogger(__name__)


def split_fields(line: str, delim: str) -> list[str]:
    """Split a line on any character of delim, dropping empty fields."""
    if not delim:
        raise ValueError("delimiter must not be empty")
    pattern = "[" + re.escape(delim) + "]+"
    return [f for f in re.split(pattern, line) if f]


def read_csv(
    path: str | Path,
    n_col: int,
    names: Sequence[str],
    dtypes: str | Sequence[str | DType],
    delim: str = ",",
    skip_rows: int = 0,
) -> Table:
    """
    Read a delimited text file into a table.

    Args:
        path: File to read
        n_col: Number of columns
        names: Column names
        dtypes: Column tags, e.g. "IDC"
        delim: Delimiter characters (each one separates fields)
        skip_rows: Number of leading lines to skip

    Returns:
        Table with one row per non-empty line after the skipped lines

    Raises:
        OSError: If the file cannot be read
        ConstructionError: If the column description is invalid
        DTypeMismatchError: If an integer field does not fit a 32-bit column
    """
    col_types = parse_dtypes(dtypes, n_col)
    columns: list[list] = [[] for _ in range(n_col)]

    with open(path, "r") as f:
        for lineno, raw in enumerate(f, start=1):
            if lineno <= skip_rows:
                continue
            line = raw.rstrip("\r\n")
            if len(line) > MAX_LINE_LEN:
                logger.warning(
                    "read_csv line %d of %s is longer than MAX_LINE_LEN = %d", lineno, path, MAX_LINE_LEN
                )
            fields = split_fields(line, delim)
            if not fields:
                logger.warning("read_csv detect empty line at line %d of %s", lineno, path)
                continue
            if len(fields) != n_col:
                logger.warning(
                    "read_csv encounter strange line at line %d of %s: %d fields, expected %d",
                    lineno, path, len(fields), n_col,
                )
            for j, dt in enumerate(col_types):
                if j < len(fields):
                    columns[j].append(dt.parse_field(fields[j]))
                else:
                    columns[j].append(dt.missing)

    n_row = len(columns[0]) if columns else 0
    logger.debug("read_csv read %d rows from %s", n_row, path)
    return table_alloc(n_row, n_col, names, col_types, columns)


def read_csv_schema(path: str | Path, schema_path: str | Path) -> Table:
    """Read a delimited file using the names, types and layout of a YAML schema."""
    schema = load_schema(schema_path)
    return read_csv(
        path,
        schema.n_col,
        schema.names,
        schema.dtypes,
        delim=schema.delimiter,
        skip_rows=schema.skip_rows,
    )


def write_csv(path: str | Path, table: Table, delim: str = ",") -> None:
    """
    Write a header line of column names, then one line per row.

    Integers are written in decimal, doubles with full precision and
    characters as themselves, so read_csv(..., skip_rows=1) reads the file
    back to the same values.
    """
    check_alive(table)
    with open(path, "w") as f:
        f.write(delim.join(table.names) + "\n")
        columns = [col.tolist() for col in table.values]
        for i in range(table.n_row):
            f.write(
                delim.join(dt.format_field(col[i]) for dt, col in zip(table.dtypes, columns)) + "\n"
            )
