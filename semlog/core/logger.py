# semlog/core/logger.py
"""
SemanticLogger - hierarchical correlation logging engine

Callers mark the start (open) and end (close) of nested operations and emit
point-in-time events attributed to the innermost open operation. flush()
assembles everything into one immutable LogDocument.

Usage:
    >>> log = SemanticLogger()
    >>> req = log.open(Context.of("http_request", method="GET", uri="/users"))
    >>> log.event(Context.of("cache_operation", operation="get", key="users", hit=False))
    'cache_operation_1'
    >>> log.close(Context.of("http_response", statusCode=200), req)
    'http_response_1'
    >>> doc = log.flush()

Rules:
- close() must name the innermost open operation (strict LIFO)
- event() requires an open operation to attribute to
- flush() requires every opened operation to be closed

One instance belongs to one logical session at a time; pass it down the call
chain instead of sharing it between threads.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional

from .context import Context
from .document.entries import (
    SEMANTIC_LOG_SCHEMA_URL,
    OpenEntry,
    EventEntry,
    LogDocument,
    link_open_chain,
    link_close_chain,
)
from .errors import InvalidContextError, NoLogSessionError, UnclosedLogicError
from .ids import IdAllocator
from .stack import OperationStack


logger = logging.getLogger(__name__)


class SemanticLogger:
    """
    Open/event/close state machine.

    Open-chain: every operation, in the order open() was called; each entry
    records ``parent_id``, the operation that was innermost when it opened.
    For purely nested (recursive) sessions the chain is exactly the nesting
    path, outermost first.

    Close-chain: every close entry, in the order close() was called; the first
    close is the root of the chain.
    """

    def __init__(self, *, schema_url: str = SEMANTIC_LOG_SCHEMA_URL):
        self.schema_url = schema_url
        self._ids = IdAllocator()
        self._stack = OperationStack()
        self._opened: List[OpenEntry] = []
        self._events: List[EventEntry] = []
        self._closed: List[EventEntry] = []
        self._max_depth = 0

    # ---- recording ----

    def open(self, context: Context) -> str:
        """Start an operation; returns the id close() must be called with"""
        _check_context(context)
        op_id = self._ids.allocate(context.type)
        parent_id = self._stack.peek().id if self._stack else None
        entry = OpenEntry(
            id=op_id,
            type=context.type,
            schema_url=context.schema_url,
            context=context.data,
            parent_id=parent_id,
        )
        self._stack.push(entry)
        self._opened.append(entry)
        self._max_depth = max(self._max_depth, self._stack.depth())
        logger.debug("open %s (parent=%s depth=%d)", op_id, parent_id, self._stack.depth())
        return op_id

    def event(self, context: Context) -> str:
        """Record an event under the innermost open operation"""
        _check_context(context)
        current = self._stack.peek("record event")
        event_id = self._ids.allocate(context.type)
        self._events.append(EventEntry(
            id=event_id,
            type=context.type,
            schema_url=context.schema_url,
            context=context.data,
            open_id=current.id,
        ))
        logger.debug("event %s -> %s", event_id, current.id)
        return event_id

    def close(self, context: Context, open_id: str) -> str:
        """
        End the operation ``open_id`` with a result context.

        Raises:
            NoOpenOperationsError: nothing is open
            InvalidOperationOrderError: ``open_id`` is not the innermost operation
        """
        _check_context(context)
        self._stack.pop(open_id)
        close_id = self._ids.allocate(context.type)
        self._closed.append(EventEntry(
            id=close_id,
            type=context.type,
            schema_url=context.schema_url,
            context=context.data,
            open_id=open_id,
        ))
        logger.debug("close %s by %s (depth=%d)", open_id, close_id, self._stack.depth())
        return close_id

    # ---- completion ----

    def flush(self, relations: Optional[Iterable[Mapping[str, Any]]] = None) -> LogDocument:
        """
        Assemble the session into a LogDocument and start a new session.

        Args:
            relations: optional RFC 8288 style links ({rel, href, title?, type?})

        Raises:
            UnclosedLogicError: operations are still open
            NoLogSessionError: nothing was opened since the last flush
        """
        if self._stack:
            top = self._stack.peek()
            raise UnclosedLogicError(self._stack.depth(), top.type, top.schema_url)
        if not self._opened:
            raise NoLogSessionError("no open entry")

        document = LogDocument(
            schema_url=self.schema_url,
            open=link_open_chain(self._opened),
            close=link_close_chain(self._closed),
            events=tuple(self._events),
            relations=tuple(relations or ()),
        )
        logger.debug(
            "flush: %d operations, %d events, max depth %d",
            len(self._opened), len(self._events), self._max_depth,
        )
        self._reset()
        return document

    def _reset(self) -> None:
        # id counters are kept: ids stay unique for the lifetime of the instance
        self._stack.clear()
        self._opened = []
        self._events = []
        self._closed = []
        self._max_depth = 0

    # ---- diagnostics ----

    @property
    def depth(self) -> int:
        """Number of currently open operations"""
        return self._stack.depth()

    @property
    def max_depth(self) -> int:
        """Deepest nesting reached in the current session"""
        return self._max_depth

    def open_ids(self) -> List[str]:
        """Currently open ids, outermost first"""
        return self._stack.ids()

    def is_empty(self) -> bool:
        """True when nothing has been recorded since the last flush"""
        return not self._opened and not self._events


def _check_context(context: Any) -> None:
    if not isinstance(context, Context):
        raise InvalidContextError(
            f"Expected a Context, got {type(context).__name__}",
            details={"got": type(context).__name__},
        )
