"""Convert MySQL client table output into CSV records.

Subpackages / modules:
  tables  -- delimiter location, line reassembly, field extraction, pipeline
  io      -- reading source files into physical lines, writing CSV
  config  -- environment-driven defaults (.env aware)
  errors  -- exception types raised by the conversion
  cli     -- ``mysql-csv`` command-line entry point
"""

from mysql_csv.errors import InvalidInputError, MySQLConverterError, UnrecoverableRowError
from mysql_csv.tables.pipeline import convert, parse_file, parse_lines

__all__ = [
    "InvalidInputError",
    "MySQLConverterError",
    "UnrecoverableRowError",
    "convert",
    "parse_file",
    "parse_lines",
]
