# semlog/tree/__init__.py
"""
Tree visualizer: rebuild the operation tree from a log document and render it.
"""

from .node import TreeNode, OperationTree, OPERATION, EVENT
from .registry import ContextTypeRegistry, DEFAULT_TIMING_KEYS, default_registry
from .builder import build_tree
from .renderer import TreeRenderer, TreePolicy

__all__ = [
    "TreeNode",
    "OperationTree",
    "OPERATION",
    "EVENT",
    "ContextTypeRegistry",
    "DEFAULT_TIMING_KEYS",
    "default_registry",
    "build_tree",
    "TreeRenderer",
    "TreePolicy",
]
