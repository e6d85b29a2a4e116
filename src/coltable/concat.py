# -------------------------------------
# Concatenation - row-wise and column-wise
# -------------------------------------
"""
Concatenate two tables by rows (same schema) or by columns (same height).
"""
from __future__ import annotations

import numpy as np

from .config import MAX_COL_NUM
from .errors import CapacityError, SchemaMismatchError
from .table import Table, check_alive, table_alloc


def table_concat_rows(a: Table, b: Table) -> Table:
    """
    Stack the rows of b under the rows of a.

    Args:
        a: Top table
        b: Bottom table, with the same column names and types in the same order

    Returns:
        New table with a.n_row + b.n_row rows

    Raises:
        SchemaMismatchError: If column counts, names or types differ
    """
    check_alive(a)
    check_alive(b)
    if a.n_col != b.n_col:
        raise SchemaMismatchError(f"table_concat_rows column count {a.n_col} != {b.n_col}")
    for j in range(a.n_col):
        if a.names[j] != b.names[j]:
            raise SchemaMismatchError(
                f"table_concat_rows column {j} name {a.names[j]!r} != {b.names[j]!r}"
            )
        if a.dtypes[j] is not b.dtypes[j]:
            raise SchemaMismatchError(
                f"table_concat_rows column {a.names[j]!r} dtype {a.dtype_string[j]!r} != {b.dtype_string[j]!r}"
            )

    return table_alloc(
        a.n_row + b.n_row,
        a.n_col,
        a.names,
        a.dtypes,
        [np.concatenate([ca, cb]) for ca, cb in zip(a.values, b.values)],
    )


def table_concat_cols(a: Table, b: Table) -> Table:
    """
    Place the columns of b to the right of the columns of a.

    Column names are not checked for collisions; a duplicated name resolves
    to a's column in later lookups.

    Raises:
        SchemaMismatchError: If row counts differ
        CapacityError: If the result would exceed MAX_COL_NUM columns
    """
    check_alive(a)
    check_alive(b)
    if a.n_row != b.n_row:
        raise SchemaMismatchError(f"table_concat_cols row count {a.n_row} != {b.n_row}")
    n_col = a.n_col + b.n_col
    if n_col > MAX_COL_NUM:
        raise CapacityError(f"table_concat_cols {a.n_col} + {b.n_col} columns exceed MAX_COL_NUM = {MAX_COL_NUM}")

    return table_alloc(
        a.n_row,
        n_col,
        a.names + b.names,
        a.dtypes + b.dtypes,
        a.values + b.values,
    )
