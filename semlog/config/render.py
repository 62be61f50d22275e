# semlog/config/render.py
"""
Render Configuration

Depth, expansion, threshold and output settings shared by the text and
HTML tree renderers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet


TEXT = "text"
HTML = "html"
OUTPUT_FORMATS = (TEXT, HTML)


@dataclass(frozen=True)
class RenderConfig:
    """
    Rendering policy.

    - max_depth: operations deeper than this render as "type [...]"
    - expand_types: context types exempt from max_depth
    - min_duration: seconds; nodes measured below it are omitted
    - full_depth: ignore max_depth entirely
    - max_lines: items shown for headers/params summaries (0 = no limit)
    """

    max_depth: int = 2
    expand_types: FrozenSet[str] = field(default_factory=frozenset)
    min_duration: float = 0.0
    full_depth: bool = False
    max_lines: int = 5
    output_format: str = TEXT

    def __post_init__(self) -> None:
        object.__setattr__(self, "expand_types", frozenset(self.expand_types))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_depth": self.max_depth,
            "expand_types": sorted(self.expand_types),
            "min_duration": self.min_duration,
            "full_depth": self.full_depth,
            "max_lines": self.max_lines,
            "output_format": self.output_format,
        }
