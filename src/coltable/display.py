# -------------------------------------
# Console formatting
# -------------------------------------
"""
Plain-text rendering of a table: a title line with the shape and type
tags, a tab-separated header, then one tab-separated line per row.
"""
from __future__ import annotations

import logging
from typing import Any

from .dtypes import DType
from .table import Table, check_alive

logger = logging.getLogger(__name__)


def _format_value(dtype: DType, v: Any) -> str:
    if dtype is DType.INT:
        return "% d" % v
    if dtype is DType.REAL:
        return "% e" % v
    return str(v)


def format_table(table: Table, n_row: int | None = None) -> str:
    """Format the first n_row rows of a table (all rows if n_row is None)."""
    check_alive(table)
    if n_row is None:
        n_row = table.n_row
    elif n_row > table.n_row:
        logger.warning("format_table n_row=%d > table n_row=%d, will be cut", n_row, table.n_row)
        n_row = table.n_row
    n_row = max(n_row, 0)

    lines = [f"Table ({table.n_row}, {table.n_col}) dtypes: {table.dtype_string}"]
    lines.append("\t".join(table.names))
    columns = [col[:n_row].tolist() for col in table.values]
    for i in range(n_row):
        lines.append("\t".join(_format_value(dt, col[i]) for dt, col in zip(table.dtypes, columns)))
    return "\n".join(lines)


def print_table(table: Table, n_row: int | None = None) -> None:
    """Print a table with title, header and rows to stdout."""
    print(format_table(table, n_row))
