# -------------------------------------
# Table construction and lifecycle tests
# -------------------------------------
"""
Tests for table_alloc, table_free, table_copy and column lookup.
"""
import logging

import numpy as np
import pytest

from coltable import (
    DType,
    MAX_COL_LEN,
    MAX_COL_NUM,
    ColumnNotFoundError,
    ConstructionError,
    DeadTableError,
    DTypeMismatchError,
    table_alloc,
    table_column_index,
    table_copy,
    table_free,
    table_shape,
)


@pytest.fixture
def sample():
    return table_alloc(
        3, 3, ["id", "temp", "flag"], "IDC",
        [[1, 2, 3], [1.5, 2.5, 3.5], ["a", "b", "c"]],
    )


class TestAlloc:
    """Tests for table_alloc."""

    def test_shape_matches_inputs(self, sample):
        """Row and column counts equal the inputs and every buffer has n_row elements."""
        assert table_shape(sample) == (3, 3)
        assert sample.dtype_string == "IDC"
        for col in sample.values:
            assert len(col) == 3

    def test_buffer_dtypes(self, sample):
        assert sample.values[0].dtype == np.int32
        assert sample.values[1].dtype == np.float64
        assert sample.values[2].dtype == np.dtype("<U1")
        assert sample.dtypes == [DType.INT, DType.REAL, DType.CHAR]

    def test_values_are_copied(self):
        """Initial values are deep-copied into the table."""
        src = np.array([1, 2, 3], dtype=np.int32)
        t = table_alloc(3, 1, ["a"], "I", [src])
        src[0] = 99
        assert t.values[0][0] == 1
        assert not np.shares_memory(src, t.values[0])

    def test_copies_only_n_row_elements(self):
        t = table_alloc(2, 1, ["a"], "D", [[1.0, 2.0, 3.0, 4.0]])
        assert t.values[0].tolist() == [1.0, 2.0]

    def test_short_values_rejected(self):
        with pytest.raises(ConstructionError, match="expected 3"):
            table_alloc(3, 1, ["a"], "I", [[1, 2]])

    def test_without_values_zero_filled(self):
        t = table_alloc(4, 3, ["a", "b", "c"], "IDC")
        assert t.values[0].tolist() == [0, 0, 0, 0]
        assert t.values[1].tolist() == [0.0] * 4
        assert t.values[2].tolist() == [""] * 4

    def test_zero_rows(self):
        t = table_alloc(0, 2, ["a", "b"], "ID", [[], []])
        assert table_shape(t) == (0, 2)

    def test_negative_rows_rejected(self):
        with pytest.raises(ConstructionError, match="n_row"):
            table_alloc(-1, 1, ["a"], "I")

    def test_zero_columns_rejected(self):
        with pytest.raises(ConstructionError, match="n_col"):
            table_alloc(1, 0, [], "")

    def test_too_many_columns_rejected(self):
        n = MAX_COL_NUM + 1
        with pytest.raises(ConstructionError, match="MAX_COL_NUM"):
            table_alloc(1, n, [f"c{i}" for i in range(n)], "I" * n)

    def test_max_columns_accepted(self):
        n = MAX_COL_NUM
        t = table_alloc(1, n, [f"c{i}" for i in range(n)], "I" * n)
        assert t.n_col == MAX_COL_NUM

    def test_unknown_dtype_rejected(self):
        with pytest.raises(ConstructionError, match="dtype"):
            table_alloc(1, 2, ["a", "b"], "IX")

    def test_too_few_names_rejected(self):
        with pytest.raises(ConstructionError, match="names"):
            table_alloc(1, 2, ["a"], "II")

    def test_dtype_members_accepted(self):
        t = table_alloc(1, 2, ["a", "b"], [DType.REAL, "C"])
        assert t.dtype_string == "DC"

    def test_long_name_truncated_with_warning(self, caplog):
        """A name longer than MAX_COL_LEN is cut, and construction continues."""
        long_name = "x" * (MAX_COL_LEN + 8)
        with caplog.at_level(logging.WARNING, logger="coltable.table"):
            t = table_alloc(1, 1, [long_name], "I")
        assert t.names[0] == "x" * MAX_COL_LEN
        assert "MAX_COL_LEN" in caplog.text

    def test_float_values_rejected_for_int_column(self):
        with pytest.raises(DTypeMismatchError):
            table_alloc(2, 1, ["a"], "I", [[1.5, 2.0]])

    def test_multi_char_values_rejected_for_char_column(self):
        with pytest.raises(DTypeMismatchError, match="single characters"):
            table_alloc(2, 1, ["a"], "C", [["a", "bc"]])

    def test_int_overflow_rejected(self):
        with pytest.raises(DTypeMismatchError, match="32-bit"):
            table_alloc(1, 1, ["a"], "I", [[2**40]])


class TestLifecycle:
    """Tests for table_free and table_copy."""

    def test_free_releases_buffers(self, sample):
        table_free(sample)
        assert sample.n_row == 0
        assert sample.values == []
        assert not sample.alive

    def test_double_free_raises(self, sample):
        table_free(sample)
        with pytest.raises(DeadTableError):
            table_free(sample)

    def test_dead_table_unusable(self, sample):
        table_free(sample)
        with pytest.raises(DeadTableError):
            table_column_index(sample, "id")

    def test_copy_is_independent(self, sample):
        c = table_copy(sample)
        assert c.names == sample.names
        for a, b in zip(c.values, sample.values):
            assert a.tolist() == b.tolist()
            assert not np.shares_memory(a, b)


class TestColumnIndex:
    """Tests for linear name lookup."""

    def test_found(self, sample):
        assert table_column_index(sample, "temp") == 1

    def test_not_found(self, sample):
        with pytest.raises(ColumnNotFoundError, match="nope"):
            table_column_index(sample, "nope")

    def test_first_match_wins(self):
        t = table_alloc(1, 2, ["k", "k"], "II", [[1], [2]])
        assert table_column_index(t, "k") == 0
