"""End-to-end conversion of a MySQL client table into records.

Order matters: the frame is measured before anything is touched, rows are
reassembled while the borders are still in place (they anchor the indices
reported in errors), and only then are the borders and the separator under
the column names thrown away.
"""

import logging
from pathlib import Path
from typing import TextIO

from mysql_csv.config import CSV_DELIMITER
from mysql_csv.errors import InvalidInputError
from mysql_csv.io import read_lines, write_csv
from mysql_csv.tables.delimiters import is_decorator_line
from mysql_csv.tables.extraction import extract_records
from mysql_csv.tables.reassembly import compact_rows, ensure_line_ending, fix_line_lengths
from mysql_csv.tables.schema import Table, TableGeometry

logger = logging.getLogger(__name__)

# Top border, column names, separator, bottom border
MIN_TABLE_ROWS = 4


def parse_lines(lines: list[str]) -> Table:
    """Parse the physical lines of one table into a Table.

    Raises InvalidInputError if the lines are not a framed table and
    UnrecoverableRowError if a row cannot be reassembled.
    """
    # ── 1. Measure the frame from the top border ─────────────────────────
    if not lines:
        raise InvalidInputError("Input contains no lines")
    if not is_decorator_line(lines[0]):
        raise InvalidInputError(f"First line is not a table border: {lines[0]!r}")
    geometry = TableGeometry.from_decorator(ensure_line_ending(lines[0]))
    logger.info("Table border: row length %d, %d columns", geometry.row_length, geometry.column_count)

    # ── 2. Reassemble rows split by line breaks in the data ──────────────
    rows = compact_rows(fix_line_lengths(lines, geometry))
    if len(rows) < MIN_TABLE_ROWS:
        raise InvalidInputError(f"Expected at least {MIN_TABLE_ROWS} table lines, found {len(rows)}")

    # ── 3. Strip the borders and the separator below the column names ────
    rows = rows[1:-1]
    del rows[1]

    # ── 4. Slice rows into fields ────────────────────────────────────────
    table = Table(records=extract_records(rows, geometry))
    logger.info("Parsed %d data rows with %d columns", len(table.data_rows), len(table.header))
    return table


def parse_file(path: str | Path) -> Table:
    """Read the file at *path* and parse it into a Table."""
    return parse_lines(read_lines(path))


def convert(
    input_path: str | Path,
    output: str | Path | TextIO | None = None,
    delimiter: str = CSV_DELIMITER,
) -> list[list[str]]:
    """Convert a saved MySQL client table to CSV records.

    Always returns the records (header first).  When *output* is given the
    records are also written as CSV: to a file path, to standard output for
    ``"-"``, or to an open text stream.
    """
    table = parse_file(input_path)
    if output is not None:
        write_csv(table.records, output, delimiter=delimiter)
    return table.records
