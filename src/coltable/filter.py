# -------------------------------------
# Filtering - inclusive range predicates
# -------------------------------------
"""
Range filters, one per column type.

A filter keeps the rows whose value v in the named column satisfies
lo <= v <= hi, in their original order. The result is sized by a first
counting pass and filled by a second copying pass.
"""
from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .dtypes import DType
from .table import Table, table_alloc, typed_column_index

logger = logging.getLogger(__name__)

_INT32 = np.iinfo(np.int32)


def _check_bound(dtype: DType, value: Any) -> Any:
    """Validate a filter bound; integral bounds past the int32 range are clamped."""
    if dtype is DType.INT and not isinstance(value, (bool, np.bool_)):
        if isinstance(value, (float, np.floating)) and float(value).is_integer():
            value = int(value)
        if isinstance(value, (int, np.integer)):
            value = min(max(int(value), int(_INT32.min)), int(_INT32.max))
    return dtype.check_value(value)


def _filter_range(table: Table, col: str, dtype: DType, lo: Any, hi: Any, caller: str) -> Table:
    j = typed_column_index(table, col, dtype, caller)
    lo = _check_bound(dtype, lo)
    hi = _check_bound(dtype, hi)
    key = table.values[j]

    mask = (key >= lo) & (key <= hi)
    n_row = int(np.count_nonzero(mask))
    logger.debug("%s kept %d of %d rows on %s in [%r, %r]", caller, n_row, table.n_row, col, lo, hi)

    out = table_alloc(n_row, table.n_col, table.names, table.dtypes)
    for k, values in enumerate(table.values):
        out.values[k][:] = values[mask]
    return out


def table_filter_int(table: Table, col: str, lo: int, hi: int) -> Table:
    """
    Keep rows where lo <= table[col] <= hi for an integer column.

    Raises:
        ColumnNotFoundError: If the column name is not found
        DTypeMismatchError: If the column is not an integer column
    """
    return _filter_range(table, col, DType.INT, lo, hi, "table_filter_int")


def table_filter_real(table: Table, col: str, lo: float, hi: float) -> Table:
    """Keep rows where lo <= table[col] <= hi for a double column."""
    return _filter_range(table, col, DType.REAL, lo, hi, "table_filter_real")


def table_filter_char(table: Table, col: str, lo: str, hi: str) -> Table:
    """Keep rows whose character lies between lo and hi by code point."""
    return _filter_range(table, col, DType.CHAR, lo, hi, "table_filter_char")


def table_filter_char_eq(table: Table, col: str, c: str) -> Table:
    """Keep rows whose character equals c."""
    return _filter_range(table, col, DType.CHAR, c, c, "table_filter_char_eq")
