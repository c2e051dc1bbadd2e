"""
Shared plumbing for the explorers.
"""

from typing import Any, Callable

from .buffer import TextOpsError
from .models import OperationResult

# Errors an operation may raise that are recorded on its result instead of
# aborting the exploration. Anything else propagates.
RECORDED_ERRORS = (TextOpsError, IndexError, ValueError)


def run_operation(operation: str, func: Callable[[], Any]) -> OperationResult:
    """
    Run one demonstrated operation and capture its outcome.

    Args:
        operation: Label shown for the operation
        func: Zero-argument callable performing the operation

    Returns:
        OperationResult with either the value or the error message
    """
    try:
        return OperationResult(operation=operation, value=func())
    except RECORDED_ERRORS as e:
        return OperationResult(operation=operation, error=f"{type(e).__name__}: {e}")
