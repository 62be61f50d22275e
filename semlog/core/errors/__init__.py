# semlog/core/errors/__init__.py
"""
Error types for semlog.

This package defines the components responsible for:
- Representing engine discipline violations (LIFO, unclosed, empty stack)
- Representing visualizer failures (missing file, malformed document, bad option)
- Giving every error a stable, machine-readable code

No side effects on import.
"""

from . import codes
from .exceptions import (
    SemlogError,
    InvalidContextError,
    NoOpenOperationsError,
    InvalidOperationOrderError,
    UnclosedLogicError,
    NoLogSessionError,
    LogFileNotFoundError,
    MalformedDocumentError,
    InvalidOptionError,
)

__all__ = [
    "codes",
    "SemlogError",
    "InvalidContextError",
    "NoOpenOperationsError",
    "InvalidOperationOrderError",
    "UnclosedLogicError",
    "NoLogSessionError",
    "LogFileNotFoundError",
    "MalformedDocumentError",
    "InvalidOptionError",
]
