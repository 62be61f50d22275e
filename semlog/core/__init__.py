# semlog/core/__init__.py
"""
Core logging engine for semlog.

This package defines the components responsible for:
- Context payloads (type tag + schema URL + opaque data)
- Identifier allocation and the LIFO operation stack
- Assembling the immutable log document

No side effects on import.
"""

from .context import Context
from .ids import IdAllocator
from .stack import OperationStack
from .logger import SemanticLogger
from .document import OpenEntry, EventEntry, LogDocument, SEMANTIC_LOG_SCHEMA_URL

__all__ = [
    "Context",
    "IdAllocator",
    "OperationStack",
    "SemanticLogger",
    "OpenEntry",
    "EventEntry",
    "LogDocument",
    "SEMANTIC_LOG_SCHEMA_URL",
]
