# semlog/core/ids.py
from __future__ import annotations

from collections import defaultdict
from typing import Dict


class IdAllocator:
    """
    Per-type monotonic identifiers: the k-th allocation for type T is "T_k".

    Counters start at 1 and are never reset, so an id is never handed out
    twice by the same allocator.
    """

    def __init__(self) -> None:
        self._counters: Dict[str, int] = defaultdict(int)

    def allocate(self, type: str) -> str:
        self._counters[type] += 1
        return f"{type}_{self._counters[type]}"

    def count(self, type: str) -> int:
        """Number of ids allocated so far for ``type``"""
        return self._counters.get(type, 0)
