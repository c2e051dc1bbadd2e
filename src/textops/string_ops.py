"""
Explorer for standard (immutable) string operations.

Given two strings, demonstrates length, concatenation, comparison, case
conversion, searching, slicing and splitting, printing every result.
"""

from typing import TextIO

from .explorer import run_operation
from .models import ExplorationReport
from .output import print_report


def compare_to(a: str, b: str) -> int:
    """
    Compare two strings lexicographically.

    Returns the difference between the code points at the first index where
    the strings differ, or the difference in length when one is a prefix of
    the other. Zero means equal.
    """
    for ch_a, ch_b in zip(a, b):
        if ch_a != ch_b:
            return ord(ch_a) - ord(ch_b)
    return len(a) - len(b)


def _fold(ch: str) -> str:
    # Multi-character case mappings (e.g. German sharp s) are left unfolded
    folded = ch.upper().lower()
    return folded if len(folded) == 1 else ch


def compare_to_ignore_case(a: str, b: str) -> int:
    """Like compare_to, but compares characters after case folding."""
    return compare_to("".join(map(_fold, a)), "".join(map(_fold, b)))


def trim(text: str) -> str:
    """
    Strip leading and trailing characters at or below U+0020.

    Unlike str.strip(), non-ASCII whitespace such as U+3000 is kept.
    """
    start, end = 0, len(text)
    while start < end and text[start] <= " ":
        start += 1
    while end > start and text[end - 1] <= " ":
        end -= 1
    return text[start:end]


def substring(text: str, begin: int, end: int | None = None) -> str:
    """
    Slice ``text`` with strict bounds checking.

    Raises:
        IndexError: If the range falls outside ``text``
    """
    if end is None:
        end = len(text)
    if begin < 0 or end > len(text) or begin > end:
        raise IndexError(f"begin {begin}, end {end}, length {len(text)}")
    return text[begin:end]


class StringOperations:
    """
    Demonstrates string methods on a pair of strings.

    ``trim`` strips only characters at or below U+0020, and ``split`` breaks on
    every single space, so consecutive spaces yield empty fields.
    """

    TITLE = "String Methods"

    def __init__(self, str1: str, str2: str) -> None:
        self.str1 = str1
        self.str2 = str2

    def explore_string_methods(self, out: TextIO | None = None) -> ExplorationReport:
        """
        Run every demonstrated operation, print the report and return it.

        Args:
            out: Stream to print to (default: standard output)

        Returns:
            ExplorationReport with one result per operation, in order
        """
        s1, s2 = self.str1, self.str2

        operations = [
            ("length(str1)", lambda: len(s1)),
            ("length(str2)", lambda: len(s2)),
            ("concat(str1, str2)", lambda: s1 + s2),
            ("equals(str1, str2)", lambda: s1 == s2),
            ("equals_ignore_case(str1, str2)", lambda: compare_to_ignore_case(s1, s2) == 0),
            ("compare_to(str1, str2)", lambda: compare_to(s1, s2)),
            ("compare_to_ignore_case(str1, str2)", lambda: compare_to_ignore_case(s1, s2)),
            ("upper(str1)", lambda: s1.upper()),
            ("lower(str1)", lambda: s1.lower()),
            ("trim(str1)", lambda: trim(s1)),
            ("trim(str2)", lambda: trim(s2)),
            ("char_at(str1, 0)", lambda: s1[0]),
            ("index_of(str1, str2)", lambda: s1.find(s2)),
            ("last_index_of(str1, str2)", lambda: s1.rfind(s2)),
            ("contains(str1, str2)", lambda: s2 in s1),
            ("starts_with(str1, str2)", lambda: s1.startswith(s2)),
            ("ends_with(str1, str2)", lambda: s1.endswith(s2)),
            ("substring(str1, 1)", lambda: substring(s1, 1)),
            ("replace(str1, str1[0], str2[0])", lambda: s1.replace(s1[0], s2[0])),
            ("is_empty(str1)", lambda: len(s1) == 0),
            ("is_empty(str2)", lambda: len(s2) == 0),
            ("repeat(str1, 2)", lambda: s1 * 2),
            ("split(str1 + ' ' + str2)", lambda: (s1 + " " + s2).split(" ")),
        ]

        report = ExplorationReport(
            title=self.TITLE,
            subject={"str1": s1, "str2": s2},
            results=[run_operation(label, func) for label, func in operations],
        )
        print_report(report, out)
        return report
