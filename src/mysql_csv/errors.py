"""Exceptions raised while converting MySQL client output."""


class MySQLConverterError(ValueError):
    """Base class for every conversion failure."""


class InvalidInputError(MySQLConverterError):
    """The source is not a readable file, or does not hold a framed table."""


class UnrecoverableRowError(MySQLConverterError):
    """A row could not be reconciled with the expected row length.

    Raised by the reassembler when neither merging following lines,
    line-ending correction, nor a delimiter-count match fixes the row.
    """

    def __init__(self, index: int, expected: int, actual: int):
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(f"Unable to fix length of line {index}. Expected {expected}, got {actual}")
