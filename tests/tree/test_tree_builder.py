# tests/tree/test_tree_builder.py
"""
Tree builder tests - document -> operation tree
"""

import pytest

from semlog.core import Context, SemanticLogger, LogDocument
from semlog.core.errors import MalformedDocumentError
from semlog.tree import build_tree, OPERATION, EVENT


def ctx(type_: str, **data) -> Context:
    return Context(type_, "", data)


def _web_request() -> LogDocument:
    log = SemanticLogger()
    req = log.open(ctx("http_request", method="GET", uri="/users"))
    log.event(ctx("cache_operation", operation="get", key="users", hit=False))
    auth = log.open(ctx("authentication", method="jwt", token="abc"))
    query = log.open(ctx("database_query", queryType="SELECT", table="users"))
    log.close(ctx("query_result", executionTime=0.012), query)
    log.close(ctx("auth_result", duration=0.05), auth)
    other = log.open(ctx("database_query", queryType="UPDATE", table="sessions"))
    log.close(ctx("query_result", executionTime=0.004), other)
    log.close(ctx("http_response", statusCode=200, executionTime=0.1), req)
    return log.flush()


def test_builds_nested_structure():
    tree = build_tree(_web_request())

    assert len(tree.roots) == 1
    root = tree.root
    assert root.id == "http_request_1"
    assert root.kind == OPERATION
    assert [c.id for c in root.children] == [
        "authentication_1",
        "database_query_2",
        "cache_operation_1",
    ]

    cache = tree.find("cache_operation_1")
    assert cache.kind == EVENT
    assert cache.children == []
    assert cache.parent_id == "http_request_1"

    assert [c.id for c in tree.find("authentication_1").children] == ["database_query_1"]


def test_close_entries_attached_to_their_operation():
    tree = build_tree(_web_request())

    assert tree.find("database_query_1").close.id == "query_result_1"
    assert tree.find("database_query_1").close_info["executionTime"] == 0.012
    assert tree.find("http_request_1").close.type == "http_response"


def test_max_depth_and_walk_order():
    tree = build_tree(_web_request())

    assert tree.max_depth() == 3
    assert [n.id for n in tree.walk()] == [
        "http_request_1",
        "authentication_1",
        "database_query_1",
        "database_query_2",
        "cache_operation_1",
    ]


def test_accepts_plain_mapping():
    doc = _web_request()
    from_doc = build_tree(doc)
    from_dict = build_tree(doc.to_dict())
    assert from_dict.to_dict() == from_doc.to_dict()


def test_roundtrip_isomorphism():
    doc = _web_request()
    restored = LogDocument.from_json(doc.to_json())
    assert build_tree(restored).to_dict() == build_tree(doc).to_dict()


def test_multiple_roots():
    log = SemanticLogger()
    first = log.open(ctx("job"))
    log.close(ctx("job_done"), first)
    second = log.open(ctx("job"))
    log.close(ctx("job_done"), second)

    tree = build_tree(log.flush())

    assert [r.id for r in tree.roots] == ["job_1", "job_2"]
    assert tree.max_depth() == 1


def test_deep_recursion_tree():
    log = SemanticLogger()
    ids = [log.open(ctx("recursive_call", level=i)) for i in range(1, 7)]
    for op_id in reversed(ids):
        log.close(ctx("recursive_done"), op_id)

    tree = build_tree(log.flush())

    assert tree.max_depth() == 6
    node = tree.root
    levels = []
    while node is not None:
        levels.append(node.context["level"])
        node = node.children[0] if node.children else None
    assert levels == [1, 2, 3, 4, 5, 6]


def _link(op_id: str, nested=None) -> dict:
    entry = {"id": op_id, "type": op_id.rsplit("_", 1)[0], "schemaUrl": "", "context": {}}
    if nested is not None:
        entry["open"] = nested
    return entry


def test_chain_without_parent_ids_nests():
    tree = build_tree({
        "schemaUrl": "",
        "open": _link("a_1", _link("b_1", _link("c_1"))),
        "close": {"id": "done_1", "type": "done", "schemaUrl": "", "context": {}, "openId": "c_1"},
    })

    assert [r.id for r in tree.roots] == ["a_1"]
    assert [c.id for c in tree.find("a_1").children] == ["b_1"]
    assert [c.id for c in tree.find("b_1").children] == ["c_1"]
    assert tree.max_depth() == 3


def test_multiple_roots_survive_wire_form():
    log = SemanticLogger()
    for _ in range(2):
        op = log.open(ctx("job"))
        inner = log.open(ctx("step"))
        log.close(ctx("step_done"), inner)
        log.close(ctx("job_done"), op)
    doc = log.flush()

    tree = build_tree(doc.to_dict())

    assert [r.id for r in tree.roots] == ["job_1", "job_2"]
    assert [c.id for c in tree.find("job_2").children] == ["step_2"]
    assert tree.to_dict() == build_tree(doc).to_dict()


class TestMalformed:

    def test_event_references_unknown_operation(self):
        data = _web_request().to_dict()
        data["events"][0]["openId"] = "ghost_1"

        with pytest.raises(MalformedDocumentError) as exc_info:
            build_tree(data)

        assert "ghost_1" in exc_info.value.message
        assert exc_info.value.details["entry"] == "cache_operation_1"

    def test_open_references_unknown_parent(self):
        data = _web_request().to_dict()
        data["open"]["open"]["parentId"] = "ghost_1"

        with pytest.raises(MalformedDocumentError) as exc_info:
            build_tree(data)
        assert "parentId" in exc_info.value.message

    def test_event_cannot_own_children(self):
        data = _web_request().to_dict()
        data["open"]["open"]["parentId"] = "cache_operation_1"

        with pytest.raises(MalformedDocumentError):
            build_tree(data)

    def test_close_references_unknown_operation(self):
        data = _web_request().to_dict()
        data["close"]["openId"] = "ghost_1"

        with pytest.raises(MalformedDocumentError):
            build_tree(data)

    def test_duplicate_id(self):
        data = _web_request().to_dict()
        data["events"][0]["id"] = "http_request_1"

        with pytest.raises(MalformedDocumentError) as exc_info:
            build_tree(data)
        assert "Duplicate" in exc_info.value.message

    def test_closed_twice(self):
        data = _web_request().to_dict()
        data["close"]["close"]["openId"] = data["close"]["openId"]

        with pytest.raises(MalformedDocumentError) as exc_info:
            build_tree(data)
        assert "closed twice" in exc_info.value.message
