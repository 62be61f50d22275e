# semlog/utils/formatting.py
"""
Shared display helpers for the tree renderers.

All durations are in seconds.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional
from urllib.parse import urlparse


_DURATION_RE = re.compile(r"^\s*(?P<value>-?[0-9]*\.?[0-9]+)\s*(?P<unit>ms|s)?\s*$")


def format_duration(seconds: Optional[float]) -> str:
    """μs below 1ms, ms below 1s, s otherwise; one decimal place"""
    value = float(seconds or 0.0)
    if value < 0.001:
        return f"{value * 1_000_000:.1f}μs"
    if value < 1.0:
        return f"{value * 1000:.1f}ms"
    return f"{value:.1f}s"


def parse_duration(text: str) -> float:
    """
    Parse "10ms", "0.5s" or a bare number (seconds) into seconds.

    Raises:
        ValueError: not a non-negative duration
    """
    match = _DURATION_RE.match(str(text))
    if not match:
        raise ValueError(f"Invalid threshold format: {text} (expected: 10ms, 0.5s)")
    value = float(match.group("value"))
    if value < 0:
        raise ValueError("threshold must be 0 or greater")
    if match.group("unit") == "ms":
        value /= 1000
    return value


def format_bytes(size: Any) -> str:
    try:
        value = float(size)
    except (TypeError, ValueError):
        return "0B"
    if value < 1024:
        return f"{value:.0f}B"
    if value < 1024 * 1024:
        return f"{value / 1024:.1f}KB"
    return f"{value / (1024 * 1024):.1f}MB"


def shorten_url(url: str, limit: int = 40) -> str:
    """Long URLs are reduced to host + path"""
    if len(url) <= limit:
        return url
    parsed = urlparse(url)
    if parsed.netloc:
        return parsed.netloc + parsed.path
    return url[: limit - 3] + "..."


def truncate_message(message: str, limit: int = 60) -> str:
    if len(message) <= limit:
        return message
    return message[: limit - 3] + "..."


def format_mapping(data: Any, max_lines: int = 5) -> str:
    """
    One-line summary of a mapping or sequence: "key: value, key: value".

    Nested values show as [complex]. ``max_lines`` caps the number of items
    (0 = no limit); the remainder is reported as "... (N more)".
    """
    if isinstance(data, str):
        return data
    if isinstance(data, Mapping):
        items = [(str(k), v) for k, v in data.items()]
    elif isinstance(data, (list, tuple)):
        items = [(None, v) for v in data]
    else:
        return str(data)

    parts = []
    for count, (key, value) in enumerate(items):
        if max_lines > 0 and count >= max_lines:
            parts.append(f"... ({len(items) - max_lines} more)")
            break
        shown = _scalar(value)
        parts.append(f"{key}: {shown}" if key is not None else shown)
    return ", ".join(parts)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)) or value is None:
        return "" if value is None else str(value)
    return "[complex]"
