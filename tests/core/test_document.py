# tests/core/test_document.py
"""
LogDocument serialization tests - wire shape and parse errors
"""

import json

import pytest

from semlog.core import Context, SemanticLogger, LogDocument, SEMANTIC_LOG_SCHEMA_URL
from semlog.core.errors import codes, MalformedDocumentError


def _session(with_event: bool = True) -> LogDocument:
    log = SemanticLogger()
    req = log.open(Context("http_request", "https://example.com/http_request.json",
                           {"method": "GET", "uri": "/users"}))
    if with_event:
        log.event(Context("cache_operation", "", {"operation": "get", "key": "users", "hit": False}))
    query = log.open(Context("database_query", "", {"queryType": "SELECT", "table": "users"}))
    log.close(Context("query_result", "", {"rowCount": 3, "executionTime": 0.012}), query)
    log.close(Context("http_response", "", {"statusCode": 200}), req)
    return log.flush()


def test_wire_shape():
    data = _session().to_dict()

    assert list(data.keys()) == ["schemaUrl", "open", "events", "close"]
    assert data["schemaUrl"] == SEMANTIC_LOG_SCHEMA_URL

    assert data["open"]["id"] == "http_request_1"
    assert data["open"]["schemaUrl"] == "https://example.com/http_request.json"
    assert "parentId" not in data["open"]
    assert data["open"]["open"]["id"] == "database_query_1"
    assert "parentId" not in data["open"]["open"]

    assert data["events"] == [{
        "id": "cache_operation_1",
        "type": "cache_operation",
        "schemaUrl": "",
        "context": {"operation": "get", "key": "users", "hit": False},
        "openId": "http_request_1",
    }]

    assert data["close"]["id"] == "query_result_1"
    assert data["close"]["openId"] == "database_query_1"
    assert data["close"]["close"]["id"] == "http_response_1"
    assert data["close"]["close"]["openId"] == "http_request_1"


def test_events_omitted_when_empty():
    data = _session(with_event=False).to_dict()
    assert "events" not in data
    assert "relations" not in data


def test_json_roundtrip_preserves_document():
    doc = _session()
    restored = LogDocument.from_json(doc.to_json())

    assert restored.to_dict() == doc.to_dict()
    assert [e.id for e in restored.iter_opens()] == ["http_request_1", "database_query_1"]
    assert restored.events[0].open_id == "http_request_1"


def test_from_dict_accepts_unknown_keys():
    data = _session().to_dict()
    data["open"]["extra"] = "ignored"
    data["generator"] = "test"

    doc = LogDocument.from_dict(data)
    assert doc.open.id == "http_request_1"


def test_sibling_and_top_level_links_carry_parent_id():
    log = SemanticLogger()
    req = log.open(Context("request", "", {}))
    first = log.open(Context("query", "", {}))
    log.close(Context("query_done", "", {}), first)
    second = log.open(Context("query", "", {}))
    log.close(Context("query_done", "", {}), second)
    log.close(Context("response", "", {}), req)
    job = log.open(Context("job", "", {}))
    log.close(Context("job_done", "", {}), job)

    data = log.flush().to_dict()

    chain = []
    link = data["open"]
    while link is not None:
        chain.append(link)
        link = link.get("open")
    assert "parentId" not in chain[1]
    assert chain[2]["parentId"] == "request_1"
    assert chain[3]["parentId"] is None

    restored = LogDocument.from_dict(data)
    assert [(e.id, e.parent_id) for e in restored.iter_opens()] == [
        ("request_1", None),
        ("query_1", "request_1"),
        ("query_2", "request_1"),
        ("job_1", None),
    ]


def test_nested_link_without_parent_id_is_child_of_previous_link():
    doc = LogDocument.from_dict({
        "schemaUrl": "",
        "open": {
            "id": "a_1", "type": "a", "schemaUrl": "", "context": {},
            "open": {
                "id": "b_1", "type": "b", "schemaUrl": "", "context": {},
                "open": {"id": "c_1", "type": "c", "schemaUrl": "", "context": {}},
            },
        },
        "close": {"id": "done_1", "type": "done", "schemaUrl": "", "context": {}, "openId": "c_1"},
    })

    assert [(e.id, e.parent_id) for e in doc.iter_opens()] == [
        ("a_1", None),
        ("b_1", "a_1"),
        ("c_1", "b_1"),
    ]


def test_long_chain_parses_without_recursion():
    log = SemanticLogger()
    ids = [log.open(Context("frame", "", {"n": i})) for i in range(400)]
    for op_id in reversed(ids):
        log.close(Context("frame_done", ""), op_id)
    text = log.flush().to_json(indent=None)

    restored = LogDocument.from_json(text)
    assert len(list(restored.iter_opens())) == 400
    assert len(list(restored.iter_closes())) == 400


class TestMalformed:

    def test_invalid_json(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            LogDocument.from_json("{not json")
        assert exc_info.value.error_code == codes.MALFORMED_DOCUMENT
        assert "Invalid JSON" in exc_info.value.message

    def test_not_an_object(self):
        with pytest.raises(MalformedDocumentError) as exc_info:
            LogDocument.from_json(json.dumps([1, 2, 3]))
        assert "must be an object" in exc_info.value.message

    def test_missing_open(self):
        data = _session().to_dict()
        del data["open"]
        with pytest.raises(MalformedDocumentError):
            LogDocument.from_dict(data)

    def test_event_without_open_id(self):
        data = _session().to_dict()
        del data["events"][0]["openId"]
        with pytest.raises(MalformedDocumentError) as exc_info:
            LogDocument.from_dict(data)
        assert "events[0]" in exc_info.value.message

    def test_nested_open_link_missing_id(self):
        data = _session().to_dict()
        del data["open"]["open"]["id"]
        with pytest.raises(MalformedDocumentError) as exc_info:
            LogDocument.from_dict(data)
        assert "open.open" in exc_info.value.message
