# -------------------------------------
# Accessor tests
# -------------------------------------
"""
Tests for typed get/set accessors and borrowed column views.
"""
import numpy as np
import pytest

from coltable import (
    ColumnNotFoundError,
    DeadTableError,
    DType,
    DTypeMismatchError,
    RowIndexError,
    table_alloc,
    table_column_view,
    table_free,
    table_get,
    table_get_char,
    table_get_int,
    table_get_real,
    table_set,
    table_set_char,
    table_set_int,
    table_set_real,
)


@pytest.fixture
def sample():
    return table_alloc(
        2, 3, ["id", "temp", "flag"], "IDC",
        [[10, 20], [0.5, -1.25], ["x", "y"]],
    )


class TestGet:
    def test_get_each_type(self, sample):
        assert table_get_int(sample, 1, "id") == 20
        assert table_get_real(sample, 1, "temp") == -1.25
        assert table_get_char(sample, 0, "flag") == "x"

    def test_get_returns_python_scalars(self, sample):
        assert type(table_get_int(sample, 0, "id")) is int
        assert type(table_get_real(sample, 0, "temp")) is float
        assert type(table_get_char(sample, 0, "flag")) is str

    def test_row_too_large(self, sample):
        with pytest.raises(RowIndexError, match=">= n_row"):
            table_get_int(sample, 2, "id")

    def test_negative_row(self, sample):
        with pytest.raises(RowIndexError, match="< 0"):
            table_get_real(sample, -1, "temp")

    def test_unknown_column_is_fatal(self, sample):
        """Unknown names raise for get, the same as for set."""
        with pytest.raises(ColumnNotFoundError):
            table_get_int(sample, 0, "missing")

    def test_type_mismatch(self, sample):
        with pytest.raises(DTypeMismatchError, match="not integer"):
            table_get_int(sample, 0, "temp")
        with pytest.raises(DTypeMismatchError, match="not char"):
            table_get_char(sample, 0, "id")

    def test_generic_get(self, sample):
        assert table_get(sample, 0, "id") == 10
        assert table_get(sample, 1, "flag") == "y"


class TestSet:
    def test_set_each_type(self, sample):
        table_set_int(sample, 0, "id", -7)
        table_set_real(sample, 1, "temp", 3.75)
        table_set_char(sample, 1, "flag", "Z")
        assert table_get_int(sample, 0, "id") == -7
        assert table_get_real(sample, 1, "temp") == 3.75
        assert table_get_char(sample, 1, "flag") == "Z"

    def test_set_keeps_shape(self, sample):
        table_set_int(sample, 1, "id", 5)
        assert sample.n_row == 2
        assert sample.n_col == 3

    def test_set_out_of_range(self, sample):
        with pytest.raises(RowIndexError):
            table_set_int(sample, 5, "id", 1)

    def test_set_unknown_column(self, sample):
        with pytest.raises(ColumnNotFoundError):
            table_set_real(sample, 0, "nope", 1.0)

    def test_set_type_mismatch(self, sample):
        with pytest.raises(DTypeMismatchError):
            table_set_real(sample, 0, "id", 1.0)

    def test_set_rejects_bad_values(self, sample):
        with pytest.raises(DTypeMismatchError):
            table_set_char(sample, 0, "flag", "ab")
        with pytest.raises(DTypeMismatchError):
            table_set_int(sample, 0, "id", 1.5)
        with pytest.raises(DTypeMismatchError):
            table_set_real(sample, 0, "temp", "1.0")

    def test_set_int_accepts_integral_float(self, sample):
        table_set_int(sample, 0, "id", 4.0)
        assert table_get_int(sample, 0, "id") == 4

    def test_generic_set_uses_column_type(self, sample):
        table_set(sample, 0, "temp", 9)
        assert table_get_real(sample, 0, "temp") == 9.0
        with pytest.raises(DTypeMismatchError):
            table_set(sample, 0, "flag", 1)


class TestColumnView:
    def test_view_shares_memory(self, sample):
        view = table_column_view(sample, "temp", DType.REAL)
        assert np.shares_memory(view, sample.values[1])
        assert view.tolist() == [0.5, -1.25]

    def test_view_sees_later_sets(self, sample):
        view = table_column_view(sample, "id", "I")
        table_set_int(sample, 0, "id", 42)
        assert view[0] == 42

    def test_writes_through_view_visible(self, sample):
        view = table_column_view(sample, "flag", "C")
        view[1] = "q"
        assert table_get_char(sample, 1, "flag") == "q"

    def test_view_errors(self, sample):
        with pytest.raises(ColumnNotFoundError):
            table_column_view(sample, "nope", "I")
        with pytest.raises(DTypeMismatchError):
            table_column_view(sample, "id", "D")

    def test_view_of_dead_table(self, sample):
        table_free(sample)
        with pytest.raises(DeadTableError):
            table_column_view(sample, "id", "I")
