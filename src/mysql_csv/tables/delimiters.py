"""Column delimiter location for MySQL client table rows."""

from mysql_csv.tables.patterns import CORNER, DECORATOR_CHARS, DELIMITER


def find_delimiters(row: str, decorator: bool = False) -> list[int]:
    """Return the offsets of every column delimiter in *row*, left to right.

    Decorator lines draw column boundaries with ``+`` rather than ``|``;
    pass ``decorator=True`` to treat those corners as delimiters.
    """
    if decorator:
        row = row.replace(CORNER, DELIMITER)
    return [pos for pos, char in enumerate(row) if char == DELIMITER]


def count_delimiters(row: str) -> int:
    """Return the number of ``|`` characters in *row* (corners are not counted)."""
    return row.count(DELIMITER)


def is_decorator_line(line: str) -> bool:
    """Return True if *line*, ignoring its line ending, is a ``+---+`` border."""
    body = line.rstrip("\r\n")
    return bool(body) and set(body) <= DECORATOR_CHARS
