"""Slicing of fixed-width table rows into field strings."""

import logging

from mysql_csv.tables.delimiters import find_delimiters
from mysql_csv.tables.patterns import PAD
from mysql_csv.tables.schema import TableGeometry

logger = logging.getLogger(__name__)


def extract_field(row: str, start: int, end: int) -> str:
    """Return the value between the delimiters at *start* and *end*.

    Drops the delimiter and the single pad space on each side, then the
    spaces used to pad the value out to the column width.  Trailing spaces
    that were part of the stored value are lost as well.
    """
    return row[start + 2 : end - 1].rstrip(PAD)


def extract_fields(row: str, delimiters: list[int]) -> list[str]:
    """Return one field per pair of adjacent delimiter offsets."""
    return [extract_field(row, start, end) for start, end in zip(delimiters, delimiters[1:])]


def extract_records(rows: list[str], geometry: TableGeometry) -> list[list[str]]:
    """Convert reassembled rows into records.

    Rows of the expected length share the border's delimiter offsets.  Rows
    that were accepted on delimiter count alone have shifted columns, so
    their own pipes are located instead.
    """
    records: list[list[str]] = []
    for i, row in enumerate(rows):
        if len(row) == geometry.row_length:
            delimiters = geometry.delimiters
        else:
            delimiters = find_delimiters(row)
            logger.debug("Row %d: length %d, using its own delimiters %s", i, len(row), delimiters)
        records.append(extract_fields(row, delimiters))
    return records
