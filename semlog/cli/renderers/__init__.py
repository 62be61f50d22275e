# semlog/cli/renderers/__init__.py
"""
Renderers for the tree command

- Text: ASCII tree (default, semlog.tree.TreeRenderer)
- Html: standalone collapsible page
"""

from semlog.tree.renderer import TreeRenderer as TextRenderer
from .html import HtmlTreeRenderer

__all__ = [
    "TextRenderer",
    "HtmlTreeRenderer",
]
