"""
Text operations explorers.

Demonstrates standard string operations and mutable string-buffer operations
on user-supplied strings. Usable from the CLI or directly as a library.
"""

from .buffer import BufferIndexError, StringBuffer, TextOpsError
from .buffer_ops import StringBufferOperations
from .models import ExplorationReport, OperationResult
from .string_ops import StringOperations

__all__ = [
    # Models
    "OperationResult",
    "ExplorationReport",
    # Buffer
    "StringBuffer",
    "TextOpsError",
    "BufferIndexError",
    # Explorers
    "StringOperations",
    "StringBufferOperations",
]
