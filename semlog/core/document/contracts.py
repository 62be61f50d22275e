# semlog/core/document/contracts.py
"""
Wire contracts for the log document.

These models describe ONE entry at a time. The nested ``open`` / ``close``
chains are kept as raw mappings and walked iteratively by the entry model,
so arbitrarily long chains never hit a validation recursion limit.

Design principles:
- Field names on the wire are camelCase (``schemaUrl``, ``openId``, ``parentId``)
- Unknown keys are allowed (schema validators may add their own)
- Payload shape is NOT validated here: ``context`` is an opaque mapping
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _EntryBase(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(description="Operation or event id, e.g. 'http_request_1'")
    type: str = Field(description="Context type tag")
    schema_url: str = Field(default="", alias="schemaUrl", description="JSON schema of the context")
    context: Dict[str, Any] = Field(default_factory=dict, description="Opaque context payload")


class OpenEntryV1(_EntryBase):
    """One link of the open-chain"""
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    open: Optional[Dict[str, Any]] = Field(default=None, description="Next link of the open-chain")


class EventEntryV1(_EntryBase):
    """A flat event, attributed to the operation named by ``openId``"""
    open_id: str = Field(alias="openId")


class CloseEntryV1(EventEntryV1):
    """One link of the close-chain"""
    close: Optional[Dict[str, Any]] = Field(default=None, description="Next link of the close-chain")


class DocumentV1(BaseModel):
    """Top-level log document"""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    schema_url: str = Field(default="", alias="schemaUrl")
    open: Dict[str, Any]
    events: List[Dict[str, Any]] = Field(default_factory=list)
    close: Dict[str, Any]
    relations: List[Dict[str, Any]] = Field(default_factory=list)


__all__ = ["OpenEntryV1", "EventEntryV1", "CloseEntryV1", "DocumentV1"]
