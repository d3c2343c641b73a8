"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def simple_lines() -> list[str]:
    """The id/name table exactly as the mysql client prints it."""
    return [
        "+----+-------+\n",
        "| id | name  |\n",
        "+----+-------+\n",
        "| 1  | Alice |\n",
        "| 2  | Bob   |\n",
        "+----+-------+\n",
    ]


@pytest.fixture
def write_table(tmp_path):
    """Return a callable(text, name) that writes *text* byte-for-byte and returns its path."""

    def _write(text: str, name: str = "table.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
