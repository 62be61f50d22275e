# semlog/core/document/__init__.py
"""
Log document types: entries, the top-level document and its wire contract.
"""

from .entries import SEMANTIC_LOG_SCHEMA_URL, OpenEntry, EventEntry, LogDocument
from .contracts import OpenEntryV1, EventEntryV1, CloseEntryV1, DocumentV1

__all__ = [
    "SEMANTIC_LOG_SCHEMA_URL",
    "OpenEntry",
    "EventEntry",
    "LogDocument",
    "OpenEntryV1",
    "EventEntryV1",
    "CloseEntryV1",
    "DocumentV1",
]
