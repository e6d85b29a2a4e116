# -------------------------------------
# coltable CLI entry point
# -------------------------------------
"""
CLI entry point for coltable.

Usage:
    python -m coltable data/telemetry.csv --schema data/telemetry.yml --sort temp --head 10
"""
import argparse
import logging
import sys

import yaml

from .config import load_schema
from .csv_io import read_csv, write_csv
from .display import print_table
from .dtypes import DType
from .errors import TableError
from .filter import table_filter_char, table_filter_int, table_filter_real
from .select import table_select_columns
from .sort import table_sort
from .table import table_column_index

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _apply_filter(table, col: str, lo: str, hi: str):
    dtype = table.dtypes[table_column_index(table, col)]
    if dtype is DType.INT:
        return table_filter_int(table, col, dtype.parse_field(lo), dtype.parse_field(hi))
    if dtype is DType.REAL:
        return table_filter_real(table, col, dtype.parse_field(lo), dtype.parse_field(hi))
    return table_filter_char(table, col, dtype.parse_field(lo), dtype.parse_field(hi))


def _main() -> int:
    p = argparse.ArgumentParser(
        description="Read, filter, sort and print typed delimited tables.",
    )
    p.add_argument("path", help="Path to the delimited data file")
    p.add_argument("--schema", "-s", required=True, metavar="SCHEMA_YML", help="YAML schema with columns, delimiter and skip_rows")
    p.add_argument("--select", metavar="COLS", help="Comma-separated columns to keep, in output order")
    p.add_argument("--filter", "-f", nargs=3, metavar=("COL", "MIN", "MAX"), help="Keep rows with MIN <= COL <= MAX")
    p.add_argument("--sort", metavar="COL", help="Sort ascending by column")
    p.add_argument("--head", "-n", type=int, metavar="N", help="Print only the first N rows")
    p.add_argument("--output", "-o", metavar="CSV_PATH", help="Write the result instead of printing it")
    p.add_argument("--log-level", default="warning", choices=sorted(_LEVELS), help="Logging level (default: warning)")
    args = p.parse_args()

    logging.basicConfig(level=_LEVELS[args.log_level], format="%(levelname)s: %(name)s: %(message)s")

    try:
        schema = load_schema(args.schema)
        table = read_csv(
            args.path,
            schema.n_col,
            schema.names,
            schema.dtypes,
            delim=schema.delimiter,
            skip_rows=schema.skip_rows,
        )
        if args.select:
            table = table_select_columns(table, [c.strip() for c in args.select.split(",") if c.strip()])
        if args.filter:
            table = _apply_filter(table, *args.filter)
        if args.sort:
            table = table_sort(table, args.sort)
        if args.output:
            write_csv(args.output, table, schema.delimiter)
    except (TableError, yaml.YAMLError) as e:
        print(f"coltable error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"coltable error: {e}", file=sys.stderr)
        return 1

    if not args.output:
        print_table(table, args.head)
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
