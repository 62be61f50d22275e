# semlog/core/stack.py
"""
Operation stack

Tracks the currently open operations. Push-only, except for a single pop
from the top that must name the id it expects to remove (LIFO discipline).
"""

from __future__ import annotations

from typing import List

from .document.entries import OpenEntry
from .errors import NoOpenOperationsError, InvalidOperationOrderError


class OperationStack:

    def __init__(self) -> None:
        self._entries: List[OpenEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def push(self, entry: OpenEntry) -> None:
        self._entries.append(entry)

    def peek(self, action: str = "peek") -> OpenEntry:
        if not self._entries:
            raise NoOpenOperationsError(action)
        return self._entries[-1]

    def pop(self, expected_id: str) -> OpenEntry:
        """
        Remove the top entry, which must carry ``expected_id``.

        A mismatch is reported, never corrected: it means the caller closed
        operations out of order.
        """
        if not self._entries:
            raise NoOpenOperationsError("close")
        top = self._entries[-1]
        if top.id != expected_id:
            raise InvalidOperationOrderError(expected_id, top.id)
        return self._entries.pop()

    def depth(self) -> int:
        return len(self._entries)

    def top_type(self) -> str:
        return self.peek().type

    def top_schema_url(self) -> str:
        return self.peek().schema_url

    def ids(self) -> List[str]:
        """Open ids, outermost first"""
        return [entry.id for entry in self._entries]

    def clear(self) -> None:
        self._entries.clear()
