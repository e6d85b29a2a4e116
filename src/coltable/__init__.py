# -------------------------------------
# coltable - typed column-oriented tables
# -------------------------------------
"""
Small in-memory tables with Integer ('I'), Double ('D') and Character ('C')
columns, for numeric and telemetry pipelines that do not need a database.

This package provides:
- Construction and lifecycle (table)
- Typed scalar access and borrowed column views (access)
- Projection, range filters, concatenation, joins and sorting
- Delimited text I/O, console formatting and pyarrow conversion

Imports are lazy so `python -m coltable` does not import every submodule.
Use: from coltable import table_alloc, table_sort, etc.
"""

__all__ = [
    # table
    "Table",
    "table_alloc",
    "table_free",
    "table_copy",
    "table_shape",
    "table_column_index",
    # dtypes
    "DType",
    # access
    "table_get_int",
    "table_get_real",
    "table_get_char",
    "table_set_int",
    "table_set_real",
    "table_set_char",
    "table_get",
    "table_set",
    "table_column_view",
    # select
    "table_select_column",
    "table_select_columns",
    "table_select_row",
    "table_select_rows",
    # filter
    "table_filter_int",
    "table_filter_real",
    "table_filter_char",
    "table_filter_char_eq",
    # concat
    "table_concat_rows",
    "table_concat_cols",
    # join
    "table_left_join",
    "table_inner_join",
    # sort
    "table_sort",
    "table_sort_permutation",
    # text I/O
    "read_csv",
    "read_csv_schema",
    "write_csv",
    "format_table",
    "print_table",
    # arrow
    "table_to_arrow",
    "table_from_arrow",
    # config
    "Schema",
    "load_schema",
    "clear_cache",
    "MAX_COL_NUM",
    "MAX_COL_LEN",
    "MISS_INT",
    "MISS_REAL",
    "MISS_CHAR",
    # errors
    "TableError",
    "ConstructionError",
    "RowIndexError",
    "ColumnNotFoundError",
    "DTypeMismatchError",
    "SchemaMismatchError",
    "CapacityError",
    "DeadTableError",
]

# Lazy import mapping: attribute -> (module, name)
_LAZY_IMPORTS = {
    # table
    "Table": (".table", "Table"),
    "table_alloc": (".table", "table_alloc"),
    "table_free": (".table", "table_free"),
    "table_copy": (".table", "table_copy"),
    "table_shape": (".table", "table_shape"),
    "table_column_index": (".table", "table_column_index"),
    # dtypes
    "DType": (".dtypes", "DType"),
    # access
    "table_get_int": (".access", "table_get_int"),
    "table_get_real": (".access", "table_get_real"),
    "table_get_char": (".access", "table_get_char"),
    "table_set_int": (".access", "table_set_int"),
    "table_set_real": (".access", "table_set_real"),
    "table_set_char": (".access", "table_set_char"),
    "table_get": (".access", "table_get"),
    "table_set": (".access", "table_set"),
    "table_column_view": (".access", "table_column_view"),
    # select
    "table_select_column": (".select", "table_select_column"),
    "table_select_columns": (".select", "table_select_columns"),
    "table_select_row": (".select", "table_select_row"),
    "table_select_rows": (".select", "table_select_rows"),
    # filter
    "table_filter_int": (".filter", "table_filter_int"),
    "table_filter_real": (".filter", "table_filter_real"),
    "table_filter_char": (".filter", "table_filter_char"),
    "table_filter_char_eq": (".filter", "table_filter_char_eq"),
    # concat
    "table_concat_rows": (".concat", "table_concat_rows"),
    "table_concat_cols": (".concat", "table_concat_cols"),
    # join
    "table_left_join": (".join", "table_left_join"),
    "table_inner_join": (".join", "table_inner_join"),
    # sort
    "table_sort": (".sort", "table_sort"),
    "table_sort_permutation": (".sort", "table_sort_permutation"),
    # text I/O
    "read_csv": (".csv_io", "read_csv"),
    "read_csv_schema": (".csv_io", "read_csv_schema"),
    "write_csv": (".csv_io", "write_csv"),
    "format_table": (".display", "format_table"),
    "print_table": (".display", "print_table"),
    # arrow
    "table_to_arrow": (".arrow", "table_to_arrow"),
    "table_from_arrow": (".arrow", "table_from_arrow"),
    # config
    "Schema": (".config", "Schema"),
    "load_schema": (".config", "load_schema"),
    "clear_cache": (".config", "clear_cache"),
    "MAX_COL_NUM": (".config", "MAX_COL_NUM"),
    "MAX_COL_LEN": (".config", "MAX_COL_LEN"),
    "MISS_INT": (".config", "MISS_INT"),
    "MISS_REAL": (".config", "MISS_REAL"),
    "MISS_CHAR": (".config", "MISS_CHAR"),
    # errors
    "TableError": (".errors", "TableError"),
    "ConstructionError": (".errors", "ConstructionError"),
    "RowIndexError": (".errors", "RowIndexError"),
    "ColumnNotFoundError": (".errors", "ColumnNotFoundError"),
    "DTypeMismatchError": (".errors", "DTypeMismatchError"),
    "SchemaMismatchError": (".errors", "SchemaMismatchError"),
    "CapacityError": (".errors", "CapacityError"),
    "DeadTableError": (".errors", "DeadTableError"),
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module_name, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_name, __package__)
        return getattr(module, attr_name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
