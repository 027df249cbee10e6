"""Unit tests for line whitespace handling."""

import pytest

from i18n_extractor.extraction.normalizer import split_lines, split_whitespace


class TestSplitWhitespace:
    """Test suite for split_whitespace."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("  %p Hello", ("  ", "%p Hello")),
            ("\t\t= link_to 'Home', root_path", ("\t\t", "= link_to 'Home', root_path")),
            ("%div", ("", "%div")),
            ("", ("", "")),
            ("    ", ("    ", "")),
        ],
    )
    def test_splits_indentation_from_content(self, line, expected):
        """Test that leading spaces and tabs are separated from the content."""
        assert split_whitespace(line) == expected

    def test_trailing_whitespace_is_kept(self):
        """Test that content keeps trailing spaces so lines round-trip exactly."""
        whitespace, content = split_whitespace("  %p Hi  ")
        assert content == "%p Hi  "
        assert whitespace + content == "  %p Hi  "


class TestSplitLines:
    """Test suite for split_lines."""

    def test_trailing_newline_adds_no_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_missing_trailing_newline(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_empty_document(self):
        assert split_lines("") == []

    def test_blank_lines_are_kept(self):
        assert split_lines("a\n\nb\n") == ["a", "", "b"]
