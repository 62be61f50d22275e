# semlog/core/context.py
"""
Context payloads.

A context is a tagged variant: a ``type`` tag, the URL of the JSON schema
that describes its fields, and an opaque payload. The engine only ever reads
the tag and the schema URL; per-type display and timing behaviour lives in
``semlog.tree.registry``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .errors import InvalidContextError


def freeze(value: Any) -> Any:
    """Recursively freeze containers (dicts become read-only mappings, lists become tuples)"""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze(): plain dicts and lists, ready for json.dumps"""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class Context:
    """
    Caller-defined payload tagged with its context type.

    Example:
        >>> ctx = Context("http_request", "https://example.com/schemas/http_request.json",
        ...               {"method": "GET", "uri": "/api/users"})
        >>> ctx.type
        'http_request'
    """
    type: str
    schema_url: str = ""
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.type, str) or not self.type:
            raise InvalidContextError(
                "Context type must be a non-empty string",
                details={"type": repr(self.type)},
            )
        if not isinstance(self.data, Mapping):
            raise InvalidContextError(
                f"Context data for '{self.type}' must be a mapping",
                details={"type": self.type, "data_type": type(self.data).__name__},
            )
        # frozen dataclass: bypass __setattr__ to store the frozen payload
        object.__setattr__(self, "data", freeze(self.data))

    @classmethod
    def of(cls, type: str, schema_url: str = "", /, **data: Any) -> "Context":
        """
        Shorthand: Context.of("cache_operation", operation="get", key="user:1")

        ``type`` and ``schema_url`` are positional-only, so payload keys of the
        same name are accepted: Context.of("error", "", type="TimeoutError")
        """
        return cls(type=type, schema_url=schema_url, data=data)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Payload as plain JSON-compatible containers"""
        return thaw(self.data)
