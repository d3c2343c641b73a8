"""Re-merging of table rows that were split by line breaks inside field data.

The MySQL client pads every row to the width of the border, so a physical
line that is shorter than the border almost always means a field value
contained a literal line feed and the rest of the row sits on the following
line(s).  Nothing in the output marks where a row really ends, so two
signals are checked against the TableGeometry measured from the top border:

  - length: the merged row should be exactly ``geometry.row_length`` long;
  - structure: the merged row should hold ``geometry.delimiter_count`` pipes.

Neither is reliable on its own (binary data can restore one without the
other), so length is the target and a delimiter-count match is accepted as
a fallback when the length cannot be closed exactly.
"""

import logging

from mysql_csv.errors import UnrecoverableRowError
from mysql_csv.tables.delimiters import count_delimiters
from mysql_csv.tables.patterns import BARE_LF_RE, CRLF, LF
from mysql_csv.tables.schema import TableGeometry

logger = logging.getLogger(__name__)


def ensure_line_ending(row: str) -> str:
    """Append a line feed if *row* lacks one (the last line of a file often does)."""
    return row if row.endswith(LF) else row + LF


# ─── Single Row ───────────────────────────────────────────────────────────────


def fix_line_length(row: str, index: int, lines: list[str], consumed: set[int], geometry: TableGeometry) -> str:
    """Return the logical row starting at physical line *index*.

    Appends following lines to *row* while it is shorter than the border.
    Every line swallowed this way is added to *consumed* so the caller can
    skip it.  Raises UnrecoverableRowError if the row cannot be brought to
    the expected length or delimiter count.
    """
    expected_len = geometry.row_length
    expected_delimiters = geometry.delimiter_count
    this_len = len(row)
    working_index = index
    lines_added = 0
    line_fixed = False

    while this_len < expected_len and working_index + 1 < len(lines):
        working_index += 1
        next_line = lines[working_index]

        # Refuse a line that overshoots on both counts: it starts a later row
        total_length = this_len + len(next_line)
        total_delimiters = count_delimiters(row + next_line)
        if total_length > expected_len and total_delimiters > expected_delimiters:
            logger.debug(
                "Row %d: line %d would overshoot (length %d > %d, delimiters %d > %d)",
                index,
                working_index,
                total_length,
                expected_len,
                total_delimiters,
                expected_delimiters,
            )
            break

        row += next_line
        consumed.add(working_index)
        lines_added += 1
        this_len = len(row)
        logger.debug("Row %d: merged line %d, length now %d/%d", index, working_index, this_len, expected_len)

        # Short by exactly one byte per merged line: the CRs inside the data were lost
        if this_len + lines_added == expected_len:
            row = BARE_LF_RE.sub(CRLF, row, count=lines_added)
            this_len = len(row)
            logger.warning("Row %d: restored %d CRLF line ending(s) inside field data", index, lines_added)

        if this_len != expected_len and count_delimiters(row) == expected_delimiters:
            logger.warning(
                "Row %d: accepted with length %d (expected %d) because its delimiter count matches",
                index,
                this_len,
                expected_len,
            )
            line_fixed = True
            break

    if this_len != expected_len and not line_fixed:
        raise UnrecoverableRowError(index, expected_len, this_len)
    return row


# ─── Whole Table ──────────────────────────────────────────────────────────────


def fix_line_lengths(lines: list[str], geometry: TableGeometry) -> dict[int, str]:
    """Reassemble every row of *lines*, keyed by the row's original line index.

    Lines consumed by an earlier merge are tombstoned in a set rather than
    removed, so indices stay stable during the scan; they are simply absent
    from the returned dict.  Use compact_rows() to get a gap-free list.
    """
    consumed: set[int] = set()
    fixed: dict[int, str] = {}

    for index, row in enumerate(lines):
        if index in consumed:
            continue
        fixed[index] = fix_line_length(ensure_line_ending(row), index, lines, consumed, geometry)

    if consumed:
        logger.info("Reassembled %d physical lines into %d rows", len(lines), len(fixed))
    return fixed


def compact_rows(rows: dict[int, str]) -> list[str]:
    """Return the rows of a fix_line_lengths() result in original order, without gaps."""
    return [rows[i] for i in sorted(rows)]
