"""Shared configuration for the MySQL-to-CSV converter.

Values come from the environment (optionally a ``.env`` file at the project
root) and fall back to the defaults below.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Encoding of the saved client output; undecodable bytes are kept via surrogateescape
INPUT_ENCODING = os.getenv("MYSQL_CSV_ENCODING", "utf-8")

# Encoding of CSV files written to disk
OUTPUT_ENCODING = os.getenv("MYSQL_CSV_OUTPUT_ENCODING", INPUT_ENCODING)

# Field separator for CSV output
CSV_DELIMITER = os.getenv("MYSQL_CSV_DELIMITER", ",")

# Log level used by the CLI when -v is not given
LOG_LEVEL = os.getenv("MYSQL_CSV_LOG_LEVEL", "INFO").upper()
