"""
Core data models for the text operations explorers.

All models are plain data structures, so the CLI and tests can inspect what
an exploration produced without parsing console output.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a single demonstrated operation.

    Exactly one of ``value`` or ``error`` is meaningful: a failed operation
    carries its error message and no value.
    """

    operation: str  # Label, e.g. "concat(str1, str2)"
    value: Any = None
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the operation completed without error."""
        return self.error is None

    @property
    def display_value(self) -> str:
        """Render the value the way the console shows it."""
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, str):
            return repr(self.value)
        return str(self.value)


@dataclass
class ExplorationReport:
    """
    Ordered results from one explorer run.

    ``subject`` records the inputs the explorer was given, keyed by the
    parameter names shown in the operation labels.
    """

    title: str
    subject: dict[str, str]
    results: list[OperationResult] = field(default_factory=list)

    @property
    def operation_count(self) -> int:
        return len(self.results)

    @property
    def failed_count(self) -> int:
        return len(self.get_failed_results())

    def get_failed_results(self) -> list[OperationResult]:
        """Get all results that recorded an error."""
        return [r for r in self.results if not r.success]

    def get(self, operation: str) -> OperationResult | None:
        """Look up a result by its operation label."""
        for result in self.results:
            if result.operation == operation:
                return result
        return None

    def to_dict(self) -> dict:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary representation of the report
        """
        return {
            "title": self.title,
            "subject": dict(self.subject),
            "operation_count": self.operation_count,
            "failed_count": self.failed_count,
            "results": [
                {
                    "operation": r.operation,
                    "value": r.value,
                    "error": r.error,
                }
                for r in self.results
            ],
        }
