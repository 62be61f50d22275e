# semlog/tree/builder.py
"""
Tree builder - rebuild the operation tree from a log document

1. Walk the open-chain: one operation node per entry, attached under its
   ``parentId``. A nested link without ``parentId`` is a child of the link
   before it; ``parentId: null`` marks a later top-level operation. This
   fixes the nesting skeleton.
2. Attach every flat event as a leaf of the node named by its ``openId``,
   in document order.
3. Walk the close-chain and hang each close entry on the node named by its
   ``openId``.

Any reference that does not resolve is a MalformedDocumentError: the
document was corrupted or edited by hand, and a silently different tree
would be worse than no tree.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from ..core.document.entries import LogDocument
from ..core.errors import MalformedDocumentError
from .node import TreeNode, OperationTree, OPERATION, EVENT


logger = logging.getLogger(__name__)


def build_tree(document: Union[LogDocument, Mapping[str, Any]]) -> OperationTree:
    if not isinstance(document, LogDocument):
        document = LogDocument.from_dict(document)

    tree = OperationTree(schema_url=document.schema_url)

    for entry in document.iter_opens():
        _check_unique(tree, entry.id)
        node = TreeNode(
            id=entry.id,
            type=entry.type,
            schema_url=entry.schema_url,
            context=entry.context,
            kind=OPERATION,
            parent_id=entry.parent_id,
        )
        if entry.parent_id is None:
            tree.roots.append(node)
        else:
            _operation(tree, entry.parent_id, entry.id, "parentId").add_child(node)
        tree.by_id[entry.id] = node

    for event in document.events:
        _check_unique(tree, event.id)
        parent = _operation(tree, event.open_id, event.id, "openId")
        node = TreeNode(
            id=event.id,
            type=event.type,
            schema_url=event.schema_url,
            context=event.context,
            kind=EVENT,
            parent_id=parent.id,
        )
        parent.add_child(node)
        tree.by_id[event.id] = node

    for close in document.iter_closes():
        node = _operation(tree, close.open_id, close.id, "openId")
        if node.close is not None:
            raise MalformedDocumentError(
                f"Operation '{node.id}' is closed twice ('{node.close.id}' and '{close.id}')",
                details={"operation": node.id, "close_ids": [node.close.id, close.id]},
            )
        node.close = close

    logger.debug("built tree: %d roots, %d nodes", len(tree.roots), len(tree.by_id))
    return tree


def _check_unique(tree: OperationTree, node_id: str) -> None:
    if node_id in tree.by_id:
        raise MalformedDocumentError(
            f"Duplicate id '{node_id}' in log document",
            details={"id": node_id},
        )


def _operation(tree: OperationTree, target: Any, source: str, field: str) -> TreeNode:
    node = tree.by_id.get(target) if target is not None else None
    if node is None or node.kind != OPERATION:
        raise MalformedDocumentError(
            f"Entry '{source}' references unknown operation '{target}' ({field})",
            details={"entry": source, field: target},
        )
    return node
