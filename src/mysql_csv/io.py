"""Reading MySQL client output from disk and writing CSV.

Source files are read without newline translation so carriage returns that
belong to field data keep their place, and with ``surrogateescape`` so bytes
that are not valid in the configured encoding still count as one character
each when row lengths are compared.
"""

import csv
import logging
import sys
from pathlib import Path
from typing import TextIO

from mysql_csv.config import CSV_DELIMITER, INPUT_ENCODING, OUTPUT_ENCODING
from mysql_csv.errors import InvalidInputError
from mysql_csv.tables.patterns import PHYSICAL_LINE_RE

logger = logging.getLogger(__name__)

# Destination value that selects standard output
STDOUT = "-"


# ─── Input ───────────────────────────────────────────────────────────────────


def split_physical_lines(text: str) -> list[str]:
    """Split *text* on line feeds only, keeping each line's terminator."""
    return PHYSICAL_LINE_RE.findall(text)


def read_lines(path: str | Path, encoding: str = INPUT_ENCODING) -> list[str]:
    """Return the physical lines of the file at *path*.

    Blank lines after the closing border are dropped.  Raises
    InvalidInputError if *path* is not a readable file.
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidInputError(f"Invalid file path {path} provided.")
    try:
        with open(path, "r", encoding=encoding, errors="surrogateescape", newline="") as fopen:
            text = fopen.read()
    except OSError as exc:
        raise InvalidInputError(f"Unable to read {path}: {exc}") from exc

    lines = split_physical_lines(text)
    while lines and not lines[-1].strip():
        lines.pop()
    logger.info("Read %d lines from %s", len(lines), path)
    return lines


# ─── Output ──────────────────────────────────────────────────────────────────


def _write_rows(stream: TextIO, records: list[list[str]], delimiter: str) -> None:
    writer = csv.writer(stream, delimiter=delimiter)
    writer.writerows(records)


def write_csv(records: list[list[str]], destination: str | Path | TextIO, delimiter: str = CSV_DELIMITER) -> None:
    """Write *records* as CSV, header record first.

    *destination* is a file path, ``"-"`` for standard output, or an open
    text stream (which should have been opened with ``newline=""``).
    """
    if not isinstance(destination, (str, Path)):
        _write_rows(destination, records, delimiter)
        return

    if str(destination) == STDOUT:
        _write_rows(sys.stdout, records, delimiter)
        return

    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=OUTPUT_ENCODING, errors="surrogateescape", newline="") as fopen:
        _write_rows(fopen, records, delimiter)
    logger.info("Wrote %d records to %s", len(records), path)
