# semlog/tree/node.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..core.document.entries import EventEntry


OPERATION = "operation"
EVENT = "event"


@dataclass(eq=False)
class TreeNode:
    """
    One node of the reconstructed tree.

    Operation nodes come from the open-chain and may have children; event
    nodes are leaves. ``close`` is the close entry that ended the operation.
    """
    id: str
    type: str
    schema_url: str = ""
    context: Mapping[str, Any] = field(default_factory=dict)
    kind: str = OPERATION
    parent_id: Optional[str] = None
    children: List["TreeNode"] = field(default_factory=list)
    close: Optional[EventEntry] = None

    @property
    def is_operation(self) -> bool:
        return self.kind == OPERATION

    @property
    def close_info(self) -> Optional[Mapping[str, Any]]:
        """Payload of the close entry, if the operation was closed"""
        return self.close.context if self.close is not None else None

    def add_child(self, child: "TreeNode") -> None:
        self.children.append(child)

    def walk(self) -> Iterator["TreeNode"]:
        """Depth-first, parent before children"""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> Dict[str, Any]:
        """Structural form, used to compare trees"""
        result: Dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "kind": self.kind,
            "context": dict(self.context),
            "children": [child.to_dict() for child in self.children],
        }
        if self.close is not None:
            result["close"] = {"id": self.close.id, "type": self.close.type, "context": dict(self.close.context)}
        return result


@dataclass
class OperationTree:
    """Result of build_tree(): top-level operations plus an id index"""
    roots: List[TreeNode] = field(default_factory=list)
    by_id: Dict[str, TreeNode] = field(default_factory=dict)
    schema_url: str = ""

    @property
    def root(self) -> TreeNode:
        return self.roots[0]

    def find(self, node_id: str) -> Optional[TreeNode]:
        return self.by_id.get(node_id)

    def walk(self) -> Iterator[TreeNode]:
        for root in self.roots:
            yield from root.walk()

    def max_depth(self) -> int:
        """Deepest operation nesting (a lone root is depth 1)"""
        depths: Dict[str, int] = {}
        deepest = 0
        for node in self.walk():
            if not node.is_operation:
                continue
            depth = depths.get(node.parent_id, 0) + 1 if node.parent_id else 1
            depths[node.id] = depth
            deepest = max(deepest, depth)
        return deepest

    def to_dict(self) -> Dict[str, Any]:
        return {"roots": [root.to_dict() for root in self.roots]}
