"""Command-line entry point: convert a saved MySQL client table to CSV.

Usage:
    mysql-csv query_output.txt -o query_output.csv
    mysql-csv query_output.txt > query_output.csv
"""

import argparse
import logging
import sys

from mysql_csv.config import CSV_DELIMITER, LOG_LEVEL
from mysql_csv.errors import MySQLConverterError
from mysql_csv.io import STDOUT
from mysql_csv.tables.pipeline import convert

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``mysql-csv``."""
    parser = argparse.ArgumentParser(prog="mysql-csv", description="Convert MySQL client table output into CSV")
    parser.add_argument("input", help="File holding the table printed by the mysql client")
    parser.add_argument("-o", "--output", default=STDOUT, help="CSV file to write (default: standard output)")
    parser.add_argument("-d", "--delimiter", default=CSV_DELIMITER, help="CSV field delimiter (default: %(default)r)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every row merge (DEBUG level)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        records = convert(args.input, args.output, delimiter=args.delimiter)
    except MySQLConverterError as exc:
        logger.error("Conversion of %s failed: %s", args.input, exc)
        return 1

    logger.info("Converted %s: %d records", args.input, len(records))
    return 0


if __name__ == "__main__":
    sys.exit(main())
