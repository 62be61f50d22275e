# semlog/cli/renderers/html/__init__.py
"""
HTML renderer - standalone collapsible tree page

Generates clean, standalone HTML with embedded CSS.
Same depth / expand / threshold policy as the text renderer.
"""

from __future__ import annotations

import json
from html import escape
from typing import Any, List, Mapping, Union

from semlog.core.context import thaw
from semlog.core.document.entries import LogDocument
from semlog.tree.node import TreeNode, OperationTree
from semlog.tree.renderer import TreePolicy, as_tree, TRUNCATED
from semlog.utils.formatting import format_duration
from .styles import get_css


# nodes at or above this share of the root duration are highlighted
SLOW_RATIO = 0.5


class HtmlTreeRenderer(TreePolicy):

    def render(self, source: Union[OperationTree, LogDocument, Mapping[str, Any]]) -> str:
        tree = as_tree(source)
        total = self.duration(tree.root) if tree.roots else None
        parts: List[str] = []
        for root in self.visible(tree.roots):
            self._render_node(root, parts, 0, total)
        return self._render_page(tree, "".join(parts))

    def _render_node(self, node: TreeNode, parts: List[str], depth: int, total) -> None:
        if self.is_truncated(node, depth):
            parts.append(
                f'<div class="tree-leaf collapsed" data-type="{escape(node.type)}">'
                f'<span class="node-type">{escape(node.type)}</span>'
                f'<span class="timing">{TRUNCATED}</span></div>'
            )
            return

        header = self._render_header(node, depth, total)
        context = self._render_context(node)
        children = self.visible(node.children)

        if not children:
            parts.append(f'<div class="tree-leaf" data-type="{escape(node.type)}">{header}{context}</div>')
            return

        parts.append(f'<details open data-type="{escape(node.type)}"><summary>{header}</summary>{context}')
        for child in children:
            self._render_node(child, parts, depth + 1, total)
        parts.append("</details>")

    def _render_header(self, node: TreeNode, depth: int, total) -> str:
        duration = self.duration(node)
        slow = bool(depth > 0 and total and duration is not None and duration >= total * SLOW_RATIO)
        kind_class = "" if node.is_operation else " event"
        summary = self.summary(node)
        info = f' <span class="node-info">{escape(summary)}</span>' if summary else ""
        return (
            f'<span class="node-type{kind_class}">{escape(node.type)}</span>{info}'
            f'<span class="timing{" slow" if slow else ""}">[{escape(format_duration(duration))}]</span>'
        )

    def _render_context(self, node: TreeNode) -> str:
        payload = {"context": thaw(node.context)}
        if node.close is not None:
            payload["close"] = {"type": node.close.type, "context": thaw(node.close.context)}
        if not payload["context"] and "close" not in payload:
            return ""
        body = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
        return f'<pre class="node-context">{escape(body)}</pre>'

    def _render_page(self, tree: OperationTree, tree_html: str) -> str:
        root = tree.root if tree.roots else None
        title = f"{root.type} ({root.id})" if root else "empty log"
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Semantic Tree - {escape(title)}</title>
    <style>{get_css()}</style>
</head>
<body>
    <div class="container">
        <header class="doc-header">
            <div class="doc-title">Semantic Tree: {escape(title)}</div>
            <div class="doc-meta">schema: {escape(tree.schema_url)} &middot; nodes: {len(tree.by_id)}</div>
        </header>
        <div class="semantic-tree">
{tree_html}
        </div>
    </div>
</body>
</html>
"""


__all__ = ["HtmlTreeRenderer", "get_css"]
