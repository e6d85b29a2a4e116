# -------------------------------------
# Key-based joins
# -------------------------------------
"""
Single-key equality joins.

The output has the left table's columns followed by the right table's
non-key columns. When several right rows share a key, each one overwrites
the same output cells in right-row order, so the last match wins; there is
no fan-out. Keys compare with exact equality, including for double keys,
and a NaN key never matches.
"""
from __future__ import annotations

import logging

import numpy as np

from .config import MAX_COL_NUM
from .errors import CapacityError, DTypeMismatchError
from .table import Table, check_alive, table_alloc, table_column_index

logger = logging.getLogger(__name__)


def _match_rows(left: Table, right: Table, key: str, caller: str) -> tuple[int, int, np.ndarray]:
    """
    Validate join inputs and match each left row to its last right match.

    Returns:
        (left key index, right key index, match) where match[i] is the right
        row whose values land in output row i, or -1 when nothing matched
    """
    check_alive(left)
    check_alive(right)
    lk = table_column_index(left, key)
    rk = table_column_index(right, key)
    if left.dtypes[lk] is not right.dtypes[rk]:
        raise DTypeMismatchError(
            f"{caller} key {key!r} is {left.dtypes[lk].label} on the left "
            f"but {right.dtypes[rk].label} on the right"
        )
    n_col = left.n_col + right.n_col - 1
    if n_col > MAX_COL_NUM:
        raise CapacityError(f"{caller} result has {n_col} columns, exceeds MAX_COL_NUM = {MAX_COL_NUM}")

    # later right rows overwrite earlier ones: last match wins
    last_match: dict = {}
    for r, value in enumerate(right.values[rk].tolist()):
        last_match[value] = r

    match = np.full(left.n_row, -1, dtype=np.intp)
    for i, value in enumerate(left.values[lk].tolist()):
        r = last_match.get(value)
        if r is not None:
            match[i] = r

    logger.debug("%s on %s matched %d of %d left rows", caller, key, int((match >= 0).sum()), left.n_row)
    return lk, rk, match


def _joined_schema(left: Table, right: Table, rk: int) -> tuple[list, list, list[int]]:
    right_cols = [j for j in range(right.n_col) if j != rk]
    names = left.names + [right.names[j] for j in right_cols]
    dtypes = left.dtypes + [right.dtypes[j] for j in right_cols]
    return names, dtypes, right_cols


def table_left_join(left: Table, right: Table, key: str) -> Table:
    """
    Left join on a single key column present in both tables.

    Every left row appears once, in order. Right-hand columns of rows with no
    match keep the zero value of their type.

    Args:
        left: Left table
        right: Right table
        key: Name of the key column in both tables

    Returns:
        New table with left columns followed by right non-key columns

    Raises:
        ColumnNotFoundError: If either table lacks the key column
        DTypeMismatchError: If the key column types differ
        CapacityError: If the result would exceed MAX_COL_NUM columns
    """
    _, rk, match = _match_rows(left, right, key, "table_left_join")
    names, dtypes, right_cols = _joined_schema(left, right, rk)

    out = table_alloc(left.n_row, len(names), names, dtypes)
    for j in range(left.n_col):
        out.values[j][:] = left.values[j]

    hit = match >= 0
    src = match[hit]
    for k, j in enumerate(right_cols, start=left.n_col):
        out.values[k][hit] = right.values[j][src]
    return out


def table_inner_join(left: Table, right: Table, key: str) -> Table:
    """
    Inner join on a single key column: like table_left_join, but only left
    rows with at least one match are kept (in left order).
    """
    _, rk, match = _match_rows(left, right, key, "table_inner_join")
    names, dtypes, right_cols = _joined_schema(left, right, rk)

    hit = np.flatnonzero(match >= 0)
    src = match[hit]
    values = [col[hit] for col in left.values]
    values += [right.values[j][src] for j in right_cols]
    return table_alloc(len(hit), len(names), names, dtypes, values)
