# -------------------------------------
# CLI tests
# -------------------------------------
"""
Tests for the `python -m coltable` entry point.
"""
import sys

import pytest

from coltable import clear_cache
from coltable.__main__ import _main


@pytest.fixture
def data_files(tmp_path):
    schema = tmp_path / "schema.yml"
    schema.write_text(
        "delimiter: ','\n"
        "skip_rows: 1\n"
        "columns:\n"
        "  - {name: id, dtype: I}\n"
        "  - {name: temp, dtype: D}\n"
        "  - {name: flag, dtype: C}\n"
    )
    data = tmp_path / "data.csv"
    data.write_text("id,temp,flag\n3,2.5,c\n1,9.0,a\n2,-1.0,b\n")
    yield data, schema
    clear_cache()


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["coltable", *argv])
    return _main()


class TestMain:
    def test_sort_and_print(self, data_files, monkeypatch, capsys):
        data, schema = data_files
        assert _run(monkeypatch, str(data), "--schema", str(schema), "--sort", "id") == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Table (3, 3) dtypes: IDC"
        assert [line.split("\t")[2] for line in lines[2:]] == ["a", "b", "c"]

    def test_select_filter_and_write(self, data_files, monkeypatch, tmp_path):
        data, schema = data_files
        out = tmp_path / "out.csv"
        rc = _run(
            monkeypatch, str(data), "--schema", str(schema),
            "--select", "flag,temp", "--filter", "temp", "0", "5", "--output", str(out),
        )
        assert rc == 0
        assert out.read_text().splitlines() == ["flag,temp", "c,2.5"]

    def test_unknown_column_reports_error(self, data_files, monkeypatch, capsys):
        data, schema = data_files
        assert _run(monkeypatch, str(data), "--schema", str(schema), "--sort", "nope") == 2
        assert "coltable error" in capsys.readouterr().err

    def test_missing_data_file(self, data_files, monkeypatch, tmp_path, capsys):
        _, schema = data_files
        assert _run(monkeypatch, str(tmp_path / "none.csv"), "--schema", str(schema)) == 1

    def test_unwritable_output_reports_error(self, data_files, monkeypatch, tmp_path, capsys):
        data, schema = data_files
        out = tmp_path / "missing_dir" / "out.csv"
        assert _run(monkeypatch, str(data), "--schema", str(schema), "--output", str(out)) == 1
        assert "coltable error" in capsys.readouterr().err

    def test_invalid_yaml_reports_error(self, data_files, monkeypatch, tmp_path, capsys):
        data, _ = data_files
        bad = tmp_path / "bad.yml"
        bad.write_text("columns: [unclosed\n")
        assert _run(monkeypatch, str(data), "--schema", str(bad)) == 2
        assert "coltable error" in capsys.readouterr().err
