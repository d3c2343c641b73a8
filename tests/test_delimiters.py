"""Unit tests for delimiter location and decorator-line detection."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from mysql_csv.tables.delimiters import count_delimiters, find_delimiters, is_decorator_line

BORDER = "+----+-------+\n"
HEADER = "| id | name  |\n"


class TestFindDelimiters:

    def test_data_row(self):
        assert find_delimiters(HEADER) == [0, 5, 13]

    def test_decorator_row_maps_corners(self):
        assert find_delimiters(BORDER, decorator=True) == [0, 5, 13]

    def test_decorator_row_without_flag_has_no_delimiters(self):
        """Corners are only boundaries when the row is flagged as a decorator."""
        assert find_delimiters(BORDER) == []

    def test_no_delimiters(self):
        assert find_delimiters("plain text\n") == []

    def test_offsets_increase(self):
        result = find_delimiters("| a | b | c | d |\n")
        assert result == sorted(result)
        assert len(result) - 1 == 4

    def test_pipe_inside_data_is_found(self):
        assert find_delimiters("| a|b |\n") == [0, 3, 6]


class TestCountDelimiters:

    def test_counts_pipes(self):
        assert count_delimiters(HEADER) == 3

    def test_corners_not_counted(self):
        assert count_delimiters(BORDER) == 0

    def test_partial_row(self):
        assert count_delimiters("| 2  | Bo\n") == 2


class TestIsDecoratorLine:

    def test_border(self):
        assert is_decorator_line(BORDER) is True

    def test_border_with_crlf(self):
        assert is_decorator_line("+----+-------+\r\n") is True

    def test_border_without_line_ending(self):
        assert is_decorator_line("+----+") is True

    def test_data_row(self):
        assert is_decorator_line(HEADER) is False

    def test_empty_line(self):
        assert is_decorator_line("\n") is False

    def test_text(self):
        assert is_decorator_line("Empty set (0.00 sec)\n") is False
