# -------------------------------------
# Accessors - typed get/set by row and column name
# -------------------------------------
"""
Name-indexed scalar access to a table.

Every accessor checks the row range, finds the column by linear scan and
requires the column type to match the accessor. All three failures raise.
The set accessors are the only way to mutate a table in place.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from .dtypes import DType
from .errors import RowIndexError
from .table import Table, check_alive, table_column_index, typed_column_index


def _check_row(table: Table, row: int, caller: str) -> int:
    check_alive(table)
    if isinstance(row, bool) or not isinstance(row, (int, np.integer)):
        raise RowIndexError(f"{caller} row={row!r} is not an integer")
    if row >= table.n_row:
        raise RowIndexError(f"{caller} row={row} >= n_row={table.n_row}")
    if row < 0:
        raise RowIndexError(f"{caller} invalid row={row} < 0")
    return int(row)


def _get(table: Table, row: int, col: str, dtype: DType, caller: str) -> Any:
    i = _check_row(table, row, caller)
    j = typed_column_index(table, col, dtype, caller)
    return table.values[j][i].item()


def _set(table: Table, row: int, col: str, dtype: DType, value: Any, caller: str) -> None:
    i = _check_row(table, row, caller)
    j = typed_column_index(table, col, dtype, caller)
    table.values[j][i] = dtype.check_value(value)


def table_get_int(table: Table, row: int, col: str) -> int:
    return _get(table, row, col, DType.INT, "table_get_int")


def table_get_real(table: Table, row: int, col: str) -> float:
    return _get(table, row, col, DType.REAL, "table_get_real")


def table_get_char(table: Table, row: int, col: str) -> str:
    return _get(table, row, col, DType.CHAR, "table_get_char")


def table_set_int(table: Table, row: int, col: str, value: int) -> None:
    _set(table, row, col, DType.INT, value, "table_set_int")


def table_set_real(table: Table, row: int, col: str, value: float) -> None:
    _set(table, row, col, DType.REAL, value, "table_set_real")


def table_set_char(table: Table, row: int, col: str, value: str) -> None:
    _set(table, row, col, DType.CHAR, value, "table_set_char")


def table_get(table: Table, row: int, col: str) -> Any:
    """Get a value using the column's own type."""
    i = _check_row(table, row, "table_get")
    j = table_column_index(table, col)
    return table.values[j][i].item()


def table_set(table: Table, row: int, col: str, value: Any) -> None:
    """Set a value using the column's own type; the value must fit that type."""
    i = _check_row(table, row, "table_set")
    j = table_column_index(table, col)
    table.values[j][i] = table.dtypes[j].check_value(value)


def table_column_view(table: Table, col: str, dtype: DType | str) -> np.ndarray:
    """
    Borrow the live buffer of a column without copying.

    The returned array shares memory with the table: writes through it are
    visible in the table and later table_set_* calls are visible in it. It
    does not keep the table alive; after table_free it no longer belongs
    to any table.

    Raises:
        ColumnNotFoundError: If no column has this name
        DTypeMismatchError: If the column is not of type dtype
    """
    dtype = DType.from_tag(dtype)
    j = typed_column_index(table, col, dtype, "table_column_view")
    return table.values[j].view()
