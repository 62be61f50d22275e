# semlog/tree/renderer.py
"""
ASCII tree renderer

    └── http_request::GET /api/users [680.0ms]
        ├── authentication::jwt (SUCCESS) [520.0ms]
        │   └── database_query [...]
        └── cache_operation::get users (MISS) [0.2ms]

Policy (RenderConfig):
- threshold: a node measured strictly below min_duration is omitted with its
  subtree; nodes without a timing field are always kept
- depth: past max_depth a node renders as "type [...]" and its children are
  not visited, unless its type is in expand_types or full_depth is set
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from ..config.render import RenderConfig
from ..core.document.entries import LogDocument
from ..utils.formatting import format_duration
from .builder import build_tree
from .node import TreeNode, OperationTree
from .registry import ContextTypeRegistry, default_registry


BRANCH = "├── "
LAST = "└── "
VERTICAL = "│   "
SPACE = "    "
TRUNCATED = "[...]"


class TreePolicy:
    """Threshold / depth decisions shared by the text and HTML renderers"""

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        registry: Optional[ContextTypeRegistry] = None,
    ):
        self.config = config or RenderConfig()
        self.registry = registry or default_registry()

    def duration(self, node: TreeNode) -> Optional[float]:
        return self.registry.duration(node)

    def is_filtered(self, node: TreeNode) -> bool:
        if self.config.min_duration <= 0:
            return False
        duration = self.duration(node)
        return duration is not None and duration < self.config.min_duration

    def is_truncated(self, node: TreeNode, depth: int) -> bool:
        if self.config.full_depth or depth < self.config.max_depth:
            return False
        return node.type not in self.config.expand_types

    def visible(self, nodes: List[TreeNode]) -> List[TreeNode]:
        return [node for node in nodes if not self.is_filtered(node)]

    def summary(self, node: TreeNode) -> str:
        return self.registry.summary(node, self.config.max_lines)

    def display_line(self, node: TreeNode) -> str:
        timing = format_duration(self.duration(node))
        summary = self.summary(node)
        if summary:
            return f"{node.type}::{summary} [{timing}]"
        return f"{node.type} [{timing}]"


def as_tree(source: Union[OperationTree, LogDocument, Mapping[str, Any]]) -> OperationTree:
    if isinstance(source, OperationTree):
        return source
    return build_tree(source)


class TreeRenderer(TreePolicy):

    def render(self, source: Union[OperationTree, LogDocument, Mapping[str, Any]]) -> str:
        tree = as_tree(source)
        lines: List[str] = []
        roots = self.visible(tree.roots)
        for i, root in enumerate(roots):
            self._render_node(root, lines, "", i == len(roots) - 1, 0)
        return "\n".join(lines)

    def _render_node(
        self,
        node: TreeNode,
        lines: List[str],
        prefix: str,
        is_last: bool,
        depth: int,
    ) -> None:
        connector = LAST if is_last else BRANCH

        if self.is_truncated(node, depth):
            lines.append(f"{prefix}{connector}{node.type} {TRUNCATED}")
            return

        lines.append(f"{prefix}{connector}{self.display_line(node)}")

        child_prefix = prefix + (SPACE if is_last else VERTICAL)
        children = self.visible(node.children)
        for i, child in enumerate(children):
            self._render_node(child, lines, child_prefix, i == len(children) - 1, depth + 1)
