# semlog/utils/__init__.py
from .formatting import (
    format_duration,
    format_bytes,
    shorten_url,
    truncate_message,
    format_mapping,
    parse_duration,
)

__all__ = [
    "format_duration",
    "format_bytes",
    "shorten_url",
    "truncate_message",
    "format_mapping",
    "parse_duration",
]
