"""
Tests for the line tokenizer.
"""

import pytest

from mapping_import.tokenizer import split


class TestSplit:
    """Tests for splitting lines on a delimiter."""

    def test_simple_line(self):
        assert split("1 2 3") == ['1', '2', '3']

    def test_runs_of_delimiter_collapse(self):
        assert split("1   2  3") == ['1', '2', '3']

    def test_leading_and_trailing_delimiters(self):
        assert split("  1 2 3   ") == ['1', '2', '3']

    def test_empty_line(self):
        assert split("") == []

    def test_only_delimiters(self):
        assert split("     ") == []

    def test_custom_delimiter(self):
        assert split(",a,,b,", ',') == ['a', 'b']

    def test_other_whitespace_is_not_a_delimiter(self):
        """Only the given delimiter splits; tabs stay inside tokens."""
        assert split("1\t2 3") == ['1\t2', '3']


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
