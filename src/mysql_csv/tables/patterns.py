"""Characters and compiled patterns describing the MySQL client table frame.

The client draws tables like::

    +----+-------+
    | id | name  |
    +----+-------+
    | 1  | Alice |
    +----+-------+

Used by delimiters.py and reassembly.py.
"""

import re

# ─── Frame Characters ─────────────────────────────────────────────────────────

# Column boundary inside header and data rows
DELIMITER = "|"

# Column boundary inside decorator (border) lines
CORNER = "+"

# Horizontal rule character of decorator lines
RULE = "-"

DECORATOR_CHARS = frozenset(CORNER + RULE)

# Padding placed by the client between a delimiter and the cell text
PAD = " "


# ─── Line Endings ─────────────────────────────────────────────────────────────

LF = "\n"
CRLF = "\r\n"

# A line feed that is not already part of a CRLF pair
BARE_LF_RE = re.compile(r"(?<!\r)\n")

# One physical line: text up to and including a line feed, or a final unterminated tail.
# A bare carriage return never ends a physical line.
PHYSICAL_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")
