# semlog/tree/registry.py
"""
Context type registry

Maps a context type tag to:
- a display formatter: (node, max_lines) -> one-line summary
- the ordered list of context keys that hold its duration (seconds)

Types without a formatter render as the bare type tag. Types without their
own timing keys use the registry-wide default list.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from ..utils.formatting import format_bytes, format_mapping, shorten_url, truncate_message
from .node import TreeNode


Formatter = Callable[[TreeNode, int], str]

# request / response / query / processing timing fields, most specific first
DEFAULT_TIMING_KEYS: Tuple[str, ...] = (
    "executionTime",
    "responseTime",
    "duration",
    "processingTime",
    "connectionTime",
)


class ContextTypeRegistry:

    def __init__(self, timing_keys: Iterable[str] = DEFAULT_TIMING_KEYS):
        self.timing_keys: Tuple[str, ...] = tuple(timing_keys)
        self._formatters: Dict[str, Formatter] = {}
        self._type_timing_keys: Dict[str, Tuple[str, ...]] = {}

    def register(self, *types: str) -> Callable[[Formatter], Formatter]:
        """Decorator: @registry.register("cache_operation")"""
        def decorator(func: Formatter) -> Formatter:
            for type_ in types:
                self._formatters[type_] = func
            return func
        return decorator

    def set_formatter(self, type_: str, formatter: Formatter) -> None:
        self._formatters[type_] = formatter

    def set_timing_keys(self, type_: str, keys: Sequence[str]) -> None:
        self._type_timing_keys[type_] = tuple(keys)

    def has_formatter(self, type_: str) -> bool:
        return type_ in self._formatters

    def timing_keys_for(self, type_: str) -> Tuple[str, ...]:
        return self._type_timing_keys.get(type_, self.timing_keys)

    def copy(self, *, timing_keys: Optional[Iterable[str]] = None) -> "ContextTypeRegistry":
        clone = ContextTypeRegistry(self.timing_keys if timing_keys is None else timing_keys)
        clone._formatters = dict(self._formatters)
        clone._type_timing_keys = dict(self._type_timing_keys)
        return clone

    def duration(self, node: TreeNode) -> Optional[float]:
        """
        First numeric timing field found in the node context, then in its
        close payload. None when absent (never filtered by a threshold).
        """
        keys = self.timing_keys_for(node.type)
        for payload in (node.context, node.close_info):
            if not payload:
                continue
            for key in keys:
                if key in payload:
                    value = _as_number(payload[key])
                    if value is not None:
                        return value
        return None

    def summary(self, node: TreeNode, max_lines: int = 5) -> str:
        formatter = self._formatters.get(node.type)
        if formatter is None:
            return ""
        return formatter(node, max_lines)


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _get(context: Mapping[str, Any], key: str, default: Any = "") -> Any:
    value = context.get(key, default)
    return default if value is None else value


# ---- built-in formatters ----

def _http_request(node: TreeNode, max_lines: int) -> str:
    ctx = node.context
    line = f"{_get(ctx, 'method')} {_get(ctx, 'uri')}"
    headers = ctx.get("headers")
    if headers and isinstance(headers, Mapping):
        line += f" (headers: {format_mapping(headers, max_lines)})"
    return line


def _http_response(node: TreeNode, max_lines: int) -> str:
    return f"Status {_get(node.context, 'statusCode')}"


def _database_connection(node: TreeNode, max_lines: int) -> str:
    return f"{_get(node.context, 'host')}/{_get(node.context, 'database')}"


def _database_query(node: TreeNode, max_lines: int) -> str:
    ctx = node.context
    line = f"{_get(ctx, 'queryType')} {_get(ctx, 'table')}"
    params = ctx.get("parameters")
    if params and isinstance(params, (Mapping, list, tuple)):
        line += f" (params: {format_mapping(params, max_lines)})"
    return line


def _external_api_request(node: TreeNode, max_lines: int) -> str:
    return f"{_get(node.context, 'service')} {shorten_url(str(_get(node.context, 'endpoint')))}"


def _cache_operation(node: TreeNode, max_lines: int) -> str:
    hit = "HIT" if node.context.get("hit") else "MISS"
    return f"{_get(node.context, 'operation')} {_get(node.context, 'key')} ({hit})"


def _file_processing(node: TreeNode, max_lines: int) -> str:
    return f"{_get(node.context, 'operation')} {_get(node.context, 'filename')}"


def _authentication(node: TreeNode, max_lines: int) -> str:
    status = "SUCCESS" if node.context.get("token") else "FAILED"
    return f"{_get(node.context, 'method')} ({status})"


def _business_logic(node: TreeNode, max_lines: int) -> str:
    status = "SUCCESS" if node.context.get("success") else "FAILED"
    return f"{_get(node.context, 'operation')} ({status})"


def _error(node: TreeNode, max_lines: int) -> str:
    message = truncate_message(str(_get(node.context, "message")))
    return f"{_get(node.context, 'errorType')}: {message}"


def _performance_metrics(node: TreeNode, max_lines: int) -> str:
    queries = _as_number(node.context.get("databaseQueries")) or 0
    return f"{int(queries)} queries, {format_bytes(node.context.get('memoryUsed', 0))} memory"


def default_registry(timing_keys: Iterable[str] = DEFAULT_TIMING_KEYS) -> ContextTypeRegistry:
    """Registry with formatters for the common web-request context types"""
    registry = ContextTypeRegistry(timing_keys)
    registry.set_formatter("http_request", _http_request)
    registry.set_formatter("http_response", _http_response)
    registry.set_formatter("database_connection", _database_connection)
    registry.set_formatter("database_query", _database_query)
    registry.set_formatter("complex_query", _database_query)
    registry.set_formatter("external_api_request", _external_api_request)
    registry.set_formatter("cache_operation", _cache_operation)
    registry.set_formatter("file_processing", _file_processing)
    registry.set_formatter("authentication", _authentication)
    registry.set_formatter("authentication_request", _authentication)
    registry.set_formatter("business_logic", _business_logic)
    registry.set_formatter("error", _error)
    registry.set_formatter("performance_metrics", _performance_metrics)
    return registry
