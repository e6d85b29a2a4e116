# -------------------------------------
# Projection - select columns and rows
# -------------------------------------
"""
Column and row selection. Every result is an independent deep copy.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .errors import RowIndexError
from .table import Table, check_alive, table_alloc, table_column_index


def table_select_column(table: Table, col: str) -> Table:
    """
    Select a single column as a new 1-column table.

    Raises:
        ColumnNotFoundError: If the column name is not found
    """
    return table_select_columns(table, [col])


def table_select_columns(table: Table, cols: Sequence[str]) -> Table:
    """
    Select and reorder columns.

    Args:
        table: Source table
        cols: Column names in the desired output order

    Returns:
        New table with only the given columns, in the given order

    Raises:
        ColumnNotFoundError: If a column name is not found
    """
    check_alive(table)
    indices = [table_column_index(table, c) for c in cols]
    return table_alloc(
        table.n_row,
        len(indices),
        [table.names[j] for j in indices],
        [table.dtypes[j] for j in indices],
        [table.values[j] for j in indices],
    )


def table_select_row(table: Table, row: int) -> Table:
    """
    Select a single row as a new 1-row table.

    Raises:
        RowIndexError: If row is out of range
    """
    return table_select_rows(table, [row])


def table_select_rows(table: Table, rows: Sequence[int]) -> Table:
    """
    Select rows by index, in exactly the given order.

    Duplicate indices produce duplicate output rows. Negative indices are
    out of range.

    Raises:
        RowIndexError: If any index is outside [0, n_row)
    """
    check_alive(table)
    idx = _row_indices(table, rows, "table_select_rows")
    return table_alloc(
        len(idx),
        table.n_col,
        table.names,
        table.dtypes,
        [col[idx] for col in table.values],
    )


def _row_indices(table: Table, rows: Sequence[int], caller: str) -> np.ndarray:
    idx = np.asarray(rows)
    if idx.size == 0:
        return np.zeros(0, dtype=np.intp)
    if idx.ndim != 1 or idx.dtype.kind not in "iu":
        raise RowIndexError(f"{caller} rows must be a list of integers")
    bad = (idx < 0) | (idx >= table.n_row)
    if bad.any():
        row = int(idx[np.argmax(bad)])
        raise RowIndexError(f"{caller} row={row} outside [0, {table.n_row})")
    return idx.astype(np.intp)
