# semlog/core/document/entries.py
"""
Log document model

Immutable value types produced by SemanticLogger.flush():

- OpenEntry: one operation start, linked into the open-chain
- EventEntry: a point-in-time event, or (with ``close`` links) one operation end
- LogDocument: schemaUrl + open-chain + flat events + close-chain

Serialized form mirrors the JSON document: field order open -> events -> close,
``events`` and ``relations`` omitted when empty.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from ..context import freeze, thaw
from ..errors import MalformedDocumentError
from .contracts import OpenEntryV1, EventEntryV1, CloseEntryV1, DocumentV1


SEMANTIC_LOG_SCHEMA_URL = "https://koriym.github.io/semantic-logger/schemas/semantic-log.json"


def _validation_summary(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def _validate(model, data: Any, where: str):
    if not isinstance(data, Mapping):
        raise MalformedDocumentError(
            f"Invalid log data: {where} must be an object",
            details={"where": where},
        )
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        raise MalformedDocumentError(
            f"Invalid log data at {where}: {_validation_summary(e)}",
            details={"where": where},
            cause=e,
        ) from e


@dataclass(frozen=True)
class OpenEntry:
    """Operation start. ``open`` is the next link of the open-chain."""
    id: str
    type: str
    schema_url: str
    context: Mapping[str, Any] = field(default_factory=dict)
    parent_id: Optional[str] = None
    open: Optional["OpenEntry"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", freeze(self.context))

    def with_open(self, nested: Optional["OpenEntry"]) -> "OpenEntry":
        return OpenEntry(self.id, self.type, self.schema_url, self.context, self.parent_id, nested)

    def iter_chain(self) -> Iterator["OpenEntry"]:
        entry: Optional[OpenEntry] = self
        while entry is not None:
            yield entry
            entry = entry.open

    def _own_dict(self, previous_id: Optional[str]) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "schemaUrl": self.schema_url,
            "context": thaw(self.context),
        }
        # a nested link without parentId is a child of the link before it;
        # write parentId only where that does not hold (null = top-level)
        if previous_id is None:
            if self.parent_id is not None:
                result["parentId"] = self.parent_id
        elif self.parent_id != previous_id:
            result["parentId"] = self.parent_id
        return result

    def to_dict(self) -> Dict[str, Any]:
        head: Optional[Dict[str, Any]] = None
        tail: Dict[str, Any] = {}
        previous_id: Optional[str] = None
        for entry in self.iter_chain():
            current = entry._own_dict(previous_id)
            if head is None:
                head = current
            else:
                tail["open"] = current
            tail = current
            previous_id = entry.id
        return head  # type: ignore[return-value]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OpenEntry":
        entries: List[OpenEntry] = []
        raw: Any = data
        while raw is not None:
            link = _validate(OpenEntryV1, raw, "open" + ".open" * len(entries))
            parent_id = link.parent_id
            if entries and "parent_id" not in link.model_fields_set:
                parent_id = entries[-1].id
            entries.append(cls(link.id, link.type, link.schema_url, link.context, parent_id))
            raw = link.open
        return link_open_chain(entries)


@dataclass(frozen=True)
class EventEntry:
    """
    Event or close entry.

    ``open_id`` names the operation the entry is attributed to. ``close`` is
    only set on close-chain links and points at the next close, in call order.
    """
    id: str
    type: str
    schema_url: str
    context: Mapping[str, Any] = field(default_factory=dict)
    open_id: Optional[str] = None
    close: Optional["EventEntry"] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", freeze(self.context))

    def with_close(self, nested: Optional["EventEntry"]) -> "EventEntry":
        return EventEntry(self.id, self.type, self.schema_url, self.context, self.open_id, nested)

    def iter_chain(self) -> Iterator["EventEntry"]:
        entry: Optional[EventEntry] = self
        while entry is not None:
            yield entry
            entry = entry.close

    def _own_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "schemaUrl": self.schema_url,
            "context": thaw(self.context),
        }
        if self.open_id is not None:
            result["openId"] = self.open_id
        return result

    def to_dict(self) -> Dict[str, Any]:
        head: Optional[Dict[str, Any]] = None
        tail: Dict[str, Any] = {}
        for entry in self.iter_chain():
            current = entry._own_dict()
            if head is None:
                head = current
            else:
                tail["close"] = current
            tail = current
        return head  # type: ignore[return-value]

    @classmethod
    def event_from_dict(cls, data: Mapping[str, Any], where: str = "event") -> "EventEntry":
        e = _validate(EventEntryV1, data, where)
        return cls(e.id, e.type, e.schema_url, e.context, e.open_id)

    @classmethod
    def close_from_dict(cls, data: Mapping[str, Any]) -> "EventEntry":
        links: List[CloseEntryV1] = []
        raw: Any = data
        while raw is not None:
            link = _validate(CloseEntryV1, raw, "close" + ".close" * len(links))
            links.append(link)
            raw = link.close
        return link_close_chain(
            [cls(l.id, l.type, l.schema_url, l.context, l.open_id) for l in links]
        )


def link_open_chain(entries: List[OpenEntry]) -> OpenEntry:
    """Chain entries in list order: entries[0] is the root"""
    result: Optional[OpenEntry] = None
    for entry in reversed(entries):
        result = entry.with_open(result)
    assert result is not None
    return result


def link_close_chain(entries: List[EventEntry]) -> EventEntry:
    """Chain close entries in list order: entries[0] is the root"""
    result: Optional[EventEntry] = None
    for entry in reversed(entries):
        result = entry.with_close(result)
    assert result is not None
    return result


@dataclass(frozen=True)
class LogDocument:
    """
    The immutable result of one logging session.

    Wire form:
        {
          "schemaUrl": "...",
          "open":   {"id": "http_request_1", ..., "open": {...}},
          "events": [{"id": "cache_operation_1", ..., "openId": "http_request_1"}],
          "close":  {"id": "http_response_1", ..., "openId": "...", "close": {...}},
          "relations": [{"rel": "describedby", "href": "..."}]
        }
    """
    schema_url: str
    open: OpenEntry
    close: EventEntry
    events: Tuple[EventEntry, ...] = ()
    relations: Tuple[Mapping[str, Any], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "events", tuple(self.events))
        object.__setattr__(self, "relations", tuple(freeze(r) for r in self.relations))

    def iter_opens(self) -> Iterator[OpenEntry]:
        return self.open.iter_chain()

    def iter_closes(self) -> Iterator[EventEntry]:
        return self.close.iter_chain()

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "schemaUrl": self.schema_url,
            "open": self.open.to_dict(),
        }
        if self.events:
            result["events"] = [event.to_dict() for event in self.events]
        result["close"] = self.close.to_dict()
        if self.relations:
            result["relations"] = [thaw(r) for r in self.relations]
        return result

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Any) -> "LogDocument":
        doc = _validate(DocumentV1, data, "document")
        return cls(
            schema_url=doc.schema_url,
            open=OpenEntry.from_dict(doc.open),
            close=EventEntry.close_from_dict(doc.close),
            events=tuple(
                EventEntry.event_from_dict(event, f"events[{i}]")
                for i, event in enumerate(doc.events)
            ),
            relations=tuple(doc.relations),
        )

    @classmethod
    def from_json(cls, text: str) -> "LogDocument":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedDocumentError(f"Invalid JSON in log file: {e}", cause=e) from e
        return cls.from_dict(data)


__all__ = [
    "SEMANTIC_LOG_SCHEMA_URL",
    "OpenEntry",
    "EventEntry",
    "LogDocument",
    "link_open_chain",
    "link_close_chain",
]
