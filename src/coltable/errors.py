# -------------------------------------
# Table errors
# -------------------------------------
"""
Error types raised by table construction, accessors and operators.

Every fatal condition is a TableError (a ValueError), with a subclass per
kind so callers can recover selectively. Warnings never raise; they go to
the module loggers instead.
"""


class TableError(ValueError):
    pass


class ConstructionError(TableError):
    """Invalid row count, column count, names or type tags."""


class RowIndexError(TableError, IndexError):
    """Row index outside [0, n_row)."""


class ColumnNotFoundError(TableError, KeyError):
    """No column with the requested name."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class DTypeMismatchError(TableError, TypeError):
    """Accessor, operator or value type differs from the column type."""


class SchemaMismatchError(TableError):
    """Binary operator inputs have incompatible shapes or schemas."""


class CapacityError(TableError):
    """Result would exceed MAX_COL_NUM columns."""


class DeadTableError(TableError):
    """Table was already released with table_free."""
