"""
Unit tests for the string operations explorer.
"""

import io

import pytest

from textops.string_ops import (
    StringOperations,
    compare_to,
    compare_to_ignore_case,
    substring,
)


class TestCompare:
    """Tests for lexicographic comparison helpers."""

    def test_equal_strings(self):
        """Test equal strings compare as zero."""
        assert compare_to("abc", "abc") == 0

    def test_first_difference_decides(self):
        """Test the code point difference at the first mismatch is returned."""
        assert compare_to("hello", "world") == ord("h") - ord("w")
        assert compare_to("b", "a") == 1

    def test_prefix_uses_length_difference(self):
        """Test a prefix compares by length."""
        assert compare_to("ab", "abcd") == -2
        assert compare_to("abcd", "") == 4

    def test_ignore_case(self):
        """Test case-insensitive comparison."""
        assert compare_to_ignore_case("HeLLo", "hello") == 0
        assert compare_to_ignore_case("Apple", "banana") == ord("a") - ord("b")

    def test_ignore_case_multichar_mapping(self):
        """Test characters with multi-character case mappings compare as themselves."""
        assert compare_to_ignore_case("ß", "ß") == 0


class TestSubstring:
    """Tests for bounds-checked substring."""

    def test_valid_ranges(self):
        """Test ordinary slices."""
        assert substring("hello", 1) == "ello"
        assert substring("hello", 1, 3) == "el"
        assert substring("hello", 5) == ""

    def test_begin_past_end(self):
        """Test that begin beyond the length is rejected."""
        with pytest.raises(IndexError):
            substring("", 1)


class TestStringOperations:
    """Tests for StringOperations.explore_string_methods."""

    def test_hello_world(self):
        """Test results for a typical pair."""
        report = StringOperations("hello", "world").explore_string_methods(out=io.StringIO())

        assert report.title == "String Methods"
        assert report.failed_count == 0
        assert report.get("length(str1)").value == 5
        assert report.get("concat(str1, str2)").value == "helloworld"
        assert report.get("equals(str1, str2)").value is False
        assert report.get("compare_to(str1, str2)").value == -15
        assert report.get("upper(str1)").value == "HELLO"
        assert report.get("char_at(str1, 0)").value == "h"
        assert report.get("index_of(str1, str2)").value == -1
        assert report.get("substring(str1, 1)").value == "ello"
        assert report.get("replace(str1, str1[0], str2[0])").value == "wello"
        assert report.get("repeat(str1, 2)").value == "hellohello"
        assert report.get("split(str1 + ' ' + str2)").value == ["hello", "world"]

    def test_operation_order(self):
        """Test operations run in the documented order."""
        report = StringOperations("a", "b").explore_string_methods(out=io.StringIO())
        labels = [r.operation for r in report.results]
        assert labels[:3] == ["length(str1)", "length(str2)", "concat(str1, str2)"]
        assert labels[-1] == "split(str1 + ' ' + str2)"
        assert report.operation_count == 23

    def test_case_insensitive_pair(self):
        """Test a pair that differs only by case."""
        report = StringOperations("Java", "JAVA").explore_string_methods(out=io.StringIO())
        assert report.get("equals(str1, str2)").value is False
        assert report.get("equals_ignore_case(str1, str2)").value is True
        assert report.get("compare_to_ignore_case(str1, str2)").value == 0

    def test_search_operations(self):
        """Test search results when str2 occurs in str1."""
        report = StringOperations("banana", "an").explore_string_methods(out=io.StringIO())
        assert report.get("index_of(str1, str2)").value == 1
        assert report.get("last_index_of(str1, str2)").value == 3
        assert report.get("contains(str1, str2)").value is True
        assert report.get("starts_with(str1, str2)").value is False

    def test_trim(self):
        """Test surrounding whitespace is trimmed."""
        report = StringOperations("  padded ", "x").explore_string_methods(out=io.StringIO())
        assert report.get("trim(str1)").value == "padded"

    def test_empty_inputs_record_errors(self):
        """Test operations that cannot apply to empty strings record errors."""
        report = StringOperations("", "").explore_string_methods(out=io.StringIO())

        assert report.get("is_empty(str1)").value is True
        assert report.get("char_at(str1, 0)").success is False
        assert report.get("substring(str1, 1)").success is False
        assert report.get("replace(str1, str1[0], str2[0])").success is False
        assert report.get("split(str1 + ' ' + str2)").value == ["", ""]
        assert report.failed_count == 3

    def test_prints_report(self):
        """Test the report is printed to the given stream."""
        out = io.StringIO()
        StringOperations("hello", "world").explore_string_methods(out=out)
        text = out.getvalue()
        assert "STRING METHODS" in text
        assert "  concat(str1, str2) -> 'helloworld'" in text
        assert "Operations: 23" in text

    def test_prints_failures_and_summary(self):
        """Test failed operations and the failed count appear in the output."""
        out = io.StringIO()
        StringOperations("", "").explore_string_methods(out=out)
        lines = out.getvalue().splitlines()

        assert "Operations: 23  Failed: 3" in lines
        assert any(line.startswith("  char_at(str1, 0) !! IndexError") for line in lines)

    def test_summary_omits_failed_when_none(self):
        """Test the summary has no failed count when everything succeeds."""
        out = io.StringIO()
        StringOperations("hello", "world").explore_string_methods(out=out)
        assert "Operations: 23" in out.getvalue().splitlines()
        assert "Failed:" not in out.getvalue()

    def test_trim_keeps_non_ascii_whitespace(self):
        """Test trim only strips characters up to the ASCII space."""
        report = StringOperations(" \ta\u3000\n", "x").explore_string_methods(out=io.StringIO())
        assert report.get("trim(str1)").value == "a\u3000"

    def test_split_on_single_space(self):
        """Test split keeps empty fields between consecutive spaces."""
        report = StringOperations("a  b", "c").explore_string_methods(out=io.StringIO())
        assert report.get("split(str1 + ' ' + str2)").value == ["a", "", "b", "c"]

    def test_prints_to_stdout_by_default(self, capsys):
        """Test the report goes to standard output when no stream is given."""
        StringOperations("a", "b").explore_string_methods()
        assert "  equals(str1, str2) -> false" in capsys.readouterr().out
