# -------------------------------------
# Sort - single key, ascending
# -------------------------------------
"""
Sort a table by one key column.

The key column is copied and sorted, then each sorted position claims the
first original row with an equal key that is still unclaimed. Rows tied on
the key therefore come out in their original scan order, and every row
appears exactly once. Characters compare by code point; double keys sort
NaN last.
"""
from __future__ import annotations

import numpy as np

from .dtypes import DType
from .errors import TableError
from .sort_numba import claim_permutation
from .table import Table, check_alive, table_alloc, table_column_index


def _kernel_keys(values: np.ndarray, dtype: DType) -> np.ndarray:
    """Numeric form of a key column that numba can compare."""
    values = np.ascontiguousarray(values)
    if dtype is DType.CHAR:
        # '<U1' is one UCS-4 code point per element
        return values.view(np.uint32)
    return values


def table_sort_permutation(table: Table, col: str) -> np.ndarray:
    """
    Row order that sorts the table ascending by col.

    Raises:
        ColumnNotFoundError: If the column name is not found
    """
    check_alive(table)
    j = table_column_index(table, col)
    keys = _kernel_keys(table.values[j], table.dtypes[j])
    sorted_keys = np.sort(keys.copy())
    perm = claim_permutation(keys, sorted_keys)
    if table.n_row and perm.min() < 0:
        raise TableError(f"table_sort could not place every row of column {col!r}")
    return perm


def table_sort(table: Table, col: str) -> Table:
    """
    Sort rows ascending by one key column.

    Args:
        table: Source table
        col: Key column name

    Returns:
        New table with the same rows, reordered so the key is non-decreasing

    Raises:
        ColumnNotFoundError: If the column name is not found
    """
    perm = table_sort_permutation(table, col)
    return table_alloc(
        table.n_row,
        table.n_col,
        table.names,
        table.dtypes,
        [values[perm] for values in table.values],
    )
