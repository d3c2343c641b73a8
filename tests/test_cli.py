"""Tests for the mysql-csv command-line entry point."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import csv
import io

import pytest

from mysql_csv.cli import build_parser, main

TABLE = "+----+-------+\n| id | name  |\n+----+-------+\n| 1  | Alice |\n| 2  | Bo\nb  |\n+----+-------+\n"


class TestBuildParser:

    def test_defaults(self):
        args = build_parser().parse_args(["in.txt"])
        assert args.input == "in.txt"
        assert args.output == "-"
        assert args.verbose is False

    def test_requires_input(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:

    def test_stdout(self, write_table, capsys):
        path = write_table(TABLE)
        assert main([str(path)]) == 0
        rows = list(csv.reader(io.StringIO(capsys.readouterr().out, newline="")))
        assert rows == [["id", "name"], ["1", "Alice"], ["2", "Bo\nb"]]

    def test_output_file_and_delimiter(self, write_table, tmp_path):
        path = write_table(TABLE)
        out = tmp_path / "table.csv"
        assert main([str(path), "-o", str(out), "-d", ";", "-v"]) == 0
        assert out.read_bytes().decode("utf-8").startswith("id;name\r\n1;Alice\r\n")

    def test_missing_input(self, tmp_path, caplog):
        assert main([str(tmp_path / "missing.txt")]) == 1
        assert "Invalid file path" in caplog.text

    def test_unrecoverable_row(self, write_table, caplog):
        path = write_table("+----+-------+\n| id | name  |\n+----+-------+\n| 2  | Bo\n")
        assert main([str(path)]) == 1
        assert "Unable to fix length of line 3" in caplog.text
