"""Pydantic models for the frame geometry and the parsed table.

TableGeometry holds the two thresholds the reassembler checks every row
against (expected row length and expected delimiter count), taken from the
opening decorator line.  Table is the validated output of the pipeline.
"""

from pydantic import BaseModel, model_validator

from mysql_csv.tables.delimiters import find_delimiters


class TableGeometry(BaseModel):
    """Expected shape of every row, measured from a decorator line.

    ``row_length`` includes the line ending, since rows are compared as
    physical lines.
    """

    row_length: int
    delimiters: list[int]

    @classmethod
    def from_decorator(cls, line: str) -> "TableGeometry":
        """Measure a ``+----+------+`` line."""
        return cls(row_length=len(line), delimiters=find_delimiters(line, decorator=True))

    @property
    def delimiter_count(self) -> int:
        return len(self.delimiters)

    @property
    def column_count(self) -> int:
        return max(self.delimiter_count - 1, 0)


class Table(BaseModel):
    """Ordered records of a parsed table; record 0 holds the column names."""

    records: list[list[str]]

    @model_validator(mode="after")
    def validate_row_widths(self) -> "Table":
        """Ensure every record has exactly as many fields as the header."""
        if not self.records:
            return self
        n_cols = len(self.records[0])
        for i, row in enumerate(self.records):
            if len(row) != n_cols:
                raise ValueError(f"Record {i} has {len(row)} fields, expected {n_cols} (matching the header)")
        return self

    @property
    def header(self) -> list[str]:
        return self.records[0] if self.records else []

    @property
    def data_rows(self) -> list[list[str]]:
        return self.records[1:]
