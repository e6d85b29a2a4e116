# -------------------------------------
# Display tests
# -------------------------------------
"""
Tests for format_table and print_table.
"""
import logging

import pytest

from coltable import format_table, print_table, table_alloc


@pytest.fixture
def sample():
    return table_alloc(2, 3, ["id", "temp", "flag"], "IDC", [[1, -2], [1.5, 0.25], ["A", "B"]])


class TestFormatTable:
    def test_layout(self, sample):
        lines = format_table(sample).splitlines()
        assert lines[0] == "Table (2, 3) dtypes: IDC"
        assert lines[1] == "id\ttemp\tflag"
        assert lines[2] == " 1\t 1.500000e+00\tA"
        assert lines[3] == "-2\t 2.500000e-01\tB"

    def test_head(self, sample):
        assert len(format_table(sample, 1).splitlines()) == 3

    def test_too_many_rows_warns_and_cuts(self, sample, caplog):
        with caplog.at_level(logging.WARNING, logger="coltable.display"):
            out = format_table(sample, 10)
        assert len(out.splitlines()) == 4
        assert "will be cut" in caplog.text

    def test_print_table(self, sample, capsys):
        print_table(sample)
        assert capsys.readouterr().out.startswith("Table (2, 3)")
