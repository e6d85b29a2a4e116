# -------------------------------------
# Table - column store and lifecycle
# -------------------------------------
"""
Column store for typed tables.

A Table holds up to MAX_COL_NUM named columns, each an owned 1-D numpy
buffer of exactly n_row elements of its column type:

    row | id [I] | temp [D] | flag [C]
    ------------------------------------
     0  | 1      | 1.1      | 'A'
     1  | 8      | 2.4      | 'B'

Tables are created with table_alloc, which always copies the values it is
given, and released with table_free. Operators build their results by
handing references to input buffers to table_alloc, so the copy made there
is the only place ownership is established.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

import numpy as np

from .config import MAX_COL_LEN, MAX_COL_NUM
from .dtypes import DType, dtype_string, parse_dtypes
from .errors import ColumnNotFoundError, ConstructionError, DeadTableError, DTypeMismatchError

logger = logging.getLogger(__name__)

_INT32 = np.iinfo(np.int32)


@dataclass
class Table:
    """Typed column-oriented table. Build with table_alloc, not directly."""

    n_row: int
    names: list[str]
    dtypes: list[DType]
    values: list[np.ndarray] = field(repr=False)
    alive: bool = True

    @property
    def n_col(self) -> int:
        return len(self.names)

    @property
    def dtype_string(self) -> str:
        return dtype_string(self.dtypes)

    def __len__(self) -> int:
        return self.n_row


# -------------------------------------
# Construction
# -------------------------------------

def table_alloc(
    n_row: int,
    n_col: int,
    names: Sequence[str],
    dtypes: str | Sequence[str | DType],
    values: Sequence[Any] | None = None,
) -> Table:
    """
    Allocate a table and optionally copy initial column values into it.

    Args:
        n_row: Number of rows (>= 0)
        n_col: Number of columns (1..MAX_COL_NUM)
        names: Column names; names longer than MAX_COL_LEN are cut with a warning
        dtypes: Tag string such as "IDDC", or a sequence of tags / DType members
        values: Per-column initial values; the first n_row elements of each are
                copied. If None, every buffer is zero-filled.

    Returns:
        New table owning all of its buffers

    Raises:
        ConstructionError: On negative n_row, n_col out of range, unknown tag,
                           too few names, or an initial column shorter than n_row
        DTypeMismatchError: If initial values cannot be stored in their column type
    """
    if isinstance(n_row, bool) or not isinstance(n_row, (int, np.integer)) or n_row < 0:
        raise ConstructionError(f"table_alloc n_row={n_row!r} must be a non-negative integer")
    if isinstance(n_col, bool) or not isinstance(n_col, (int, np.integer)) or n_col <= 0:
        raise ConstructionError(f"table_alloc n_col={n_col!r} must be a positive integer")
    if n_col > MAX_COL_NUM:
        raise ConstructionError(f"table_alloc n_col={n_col} exceeds MAX_COL_NUM = {MAX_COL_NUM}")
    n_row = int(n_row)
    n_col = int(n_col)

    names = list(names)
    if len(names) < n_col:
        raise ConstructionError(f"table_alloc got {len(names)} column names for {n_col} columns")
    col_types = parse_dtypes(dtypes, n_col)

    if values is not None and len(values) < n_col:
        raise ConstructionError(f"table_alloc got {len(values)} value columns for {n_col} columns")

    out_names = []
    out_values = []
    for j in range(n_col):
        out_names.append(_fit_name(names[j]))
        dt = col_types[j]
        if values is None:
            out_values.append(np.zeros(n_row, dtype=dt.np_dtype))
        else:
            out_values.append(_copy_column(values[j], n_row, dt, out_names[j]))

    return Table(n_row=n_row, names=out_names, dtypes=col_types, values=out_values)


def _fit_name(name: Any) -> str:
    name = str(name)
    if len(name) > MAX_COL_LEN:
        logger.warning(
            "column name %s exceeds MAX_COL_LEN = %d, column name will be cut", name, MAX_COL_LEN
        )
        name = name[:MAX_COL_LEN]
    return name


def _copy_column(src: Any, n_row: int, dt: DType, name: str) -> np.ndarray:
    """Copy exactly n_row elements of src into a fresh buffer of type dt."""
    arr = np.asarray(src)
    if arr.ndim != 1:
        raise ConstructionError(f"values for column {name} must be one-dimensional")
    if len(arr) < n_row:
        raise ConstructionError(f"values for column {name} have {len(arr)} elements, expected {n_row}")
    arr = arr[:n_row]

    if n_row > 0:
        kind = arr.dtype.kind
        if dt is DType.INT:
            if kind not in "iu":
                raise DTypeMismatchError(f"values for column {name} are not integers ({arr.dtype})")
            if arr.min() < _INT32.min or arr.max() > _INT32.max:
                raise DTypeMismatchError(f"values for column {name} do not fit a 32-bit integer")
        elif dt is DType.REAL:
            if kind not in "iuf":
                raise DTypeMismatchError(f"values for column {name} are not real numbers ({arr.dtype})")
        elif dt is DType.CHAR:
            if kind == "S":
                arr = np.char.decode(arr, "latin-1")
            elif kind != "U":
                raise DTypeMismatchError(f"values for column {name} are not characters ({arr.dtype})")
            if (np.char.str_len(arr) > 1).any():
                raise DTypeMismatchError(f"values for column {name} must be single characters")

    return np.array(arr, dtype=dt.np_dtype, copy=True)


def table_free(table: Table) -> None:
    """
    Release all column buffers and set n_row to 0.

    The table is dead afterwards; any further use raises DeadTableError.
    """
    check_alive(table)
    table.values = []
    table.n_row = 0
    table.alive = False


def table_copy(table: Table) -> Table:
    """Deep copy of a table."""
    check_alive(table)
    return table_alloc(table.n_row, table.n_col, table.names, table.dtypes, table.values)


# -------------------------------------
# Lookup helpers
# -------------------------------------

def check_alive(table: Table) -> None:
    if not table.alive:
        raise DeadTableError("table was already freed")


def table_shape(table: Table) -> tuple[int, int]:
    """Return (n_row, n_col)."""
    check_alive(table)
    return table.n_row, table.n_col


def table_column_index(table: Table, name: str) -> int:
    """
    Find a column by name with a linear scan; the first match wins.

    Raises:
        ColumnNotFoundError: If no column has this name
    """
    check_alive(table)
    for j, col in enumerate(table.names):
        if col == name:
            return j
    raise ColumnNotFoundError(f"cannot find column {name!r} in table columns: {table.names}")


def typed_column_index(table: Table, name: str, dtype: DType, caller: str) -> int:
    """Column index for name, requiring the column to be of type dtype."""
    j = table_column_index(table, name)
    if table.dtypes[j] is not dtype:
        raise DTypeMismatchError(
            f"{caller} found column {name!r} but it is {table.dtypes[j].label}, "
            f"not {dtype.label} type"
        )
    return j
