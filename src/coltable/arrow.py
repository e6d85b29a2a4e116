# -------------------------------------
# PyArrow interop
# -------------------------------------
"""
Conversion between tables and pyarrow.Table.

Integer columns map to int32, double columns to float64 and character
columns to string. Conversions copy; neither side shares buffers with the
other.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .dtypes import DType
from .errors import DTypeMismatchError
from .table import Table, check_alive, table_alloc

# Use guarded import so the rest of the package works without pyarrow installed
pa = None

def _import_pyarrow():
    """Import pyarrow lazily, raising a clear error if not installed."""
    global pa
    if pa is None:
        try:
            import pyarrow as _pa
            pa = _pa
        except ImportError:
            raise ImportError(
                "PyArrow is required for arrow conversion. "
                "Install with: pip install pyarrow"
            )
    return pa

if TYPE_CHECKING:
    import pyarrow as pa


def table_to_arrow(table: Table) -> "pa.Table":
    """Convert a table to a pyarrow.Table with the same column names and order."""
    _pa = _import_pyarrow()
    check_alive(table)
    arrow_types = {DType.INT: _pa.int32(), DType.REAL: _pa.float64(), DType.CHAR: _pa.string()}
    arrays = [
        _pa.array(values.tolist(), type=arrow_types[dt])
        for dt, values in zip(table.dtypes, table.values)
    ]
    return _pa.Table.from_arrays(arrays, names=list(table.names))


def table_from_arrow(pa_table: "pa.Table") -> Table:
    """
    Convert a pyarrow.Table into a table.

    Integer columns become 'I', floating columns 'D' and string columns whose
    values are all single characters 'C'. Null values become the column
    type's missing-value sentinel.

    Raises:
        DTypeMismatchError: If a column has any other arrow type
        ConstructionError: If there are no columns or too many
    """
    _pa = _import_pyarrow()
    names = []
    tags = []
    values = []
    for name, column in zip(pa_table.column_names, pa_table.columns):
        typ = column.type
        if _pa.types.is_integer(typ):
            dt = DType.INT
        elif _pa.types.is_floating(typ):
            dt = DType.REAL
        elif _pa.types.is_string(typ) or _pa.types.is_large_string(typ):
            dt = DType.CHAR
        else:
            raise DTypeMismatchError(f"table_from_arrow column {name!r} has unsupported type {typ}")
        data = [dt.missing if v is None else v for v in column.to_pylist()]
        names.append(name)
        tags.append(dt)
        values.append(np.asarray(data) if data else np.zeros(0, dtype=dt.np_dtype))
    return table_alloc(pa_table.num_rows, len(names), names, tags, values)
