"""
Console formatter for exploration reports.

Handles all display logic for the explorers - no string operations here.
"""

import sys
from typing import TextIO

from .models import ExplorationReport, OperationResult

RULE_WIDTH = 60


def print_report(report: ExplorationReport, out: TextIO | None = None) -> None:
    """
    Print a human-readable exploration report.

    Args:
        report: ExplorationReport to display
        out: Stream to write to (default: sys.stdout at call time)
    """
    out = out if out is not None else sys.stdout

    print("=" * RULE_WIDTH, file=out)
    print(report.title.upper(), file=out)
    print("=" * RULE_WIDTH, file=out)
    for name, value in report.subject.items():
        print(f"{name} = {value!r}", file=out)
    print("-" * RULE_WIDTH, file=out)

    for result in report.results:
        print(format_result(result), file=out)

    print("-" * RULE_WIDTH, file=out)
    summary = f"Operations: {report.operation_count}"
    if report.failed_count:
        summary += f"  Failed: {report.failed_count}"
    print(summary, file=out)
    print(file=out)


def format_result(result: OperationResult) -> str:
    """Format a single result line."""
    if result.success:
        return f"  {result.operation} -> {result.display_value}"
    return f"  {result.operation} !! {result.error}"
