# tests/tree/test_html_renderer.py
"""
HTML tree renderer tests
"""

from semlog.cli.renderers import HtmlTreeRenderer
from semlog.config import RenderConfig
from semlog.core import Context, SemanticLogger, LogDocument


def _doc() -> LogDocument:
    log = SemanticLogger()
    req = log.open(Context("http_request", "", {"method": "GET", "uri": "/<script>"}))
    query = log.open(Context("database_query", "", {"queryType": "SELECT", "table": "users"}))
    deep = log.open(Context("index_scan", "", {}))
    log.close(Context("scan_done", "", {}), deep)
    log.close(Context("query_result", "", {"executionTime": 0.09}), query)
    log.event(Context("cache_operation", "", {"operation": "get", "key": "users", "hit": True}))
    log.close(Context("http_response", "", {"statusCode": 200, "executionTime": 0.1}), req)
    return log.flush()


def test_standalone_page():
    html = HtmlTreeRenderer().render(_doc())

    assert html.startswith("<!DOCTYPE html>")
    assert "<style>" in html
    assert "Semantic Tree: http_request (http_request_1)" in html
    assert html.rstrip().endswith("</html>")


def test_operations_collapsible_and_events_are_leaves():
    html = HtmlTreeRenderer(RenderConfig(full_depth=True)).render(_doc())

    assert '<details open data-type="http_request">' in html
    assert '<details open data-type="database_query">' in html
    assert '<div class="tree-leaf" data-type="cache_operation">' in html
    assert '<div class="tree-leaf" data-type="index_scan">' in html


def test_truncated_node_marker():
    html = HtmlTreeRenderer(RenderConfig(max_depth=2)).render(_doc())

    assert '<div class="tree-leaf collapsed" data-type="index_scan">' in html
    assert "[...]" in html


def test_escapes_context_values():
    html = HtmlTreeRenderer().render(_doc())

    assert "<script>" not in html
    assert "/&lt;script&gt;" in html


def test_slow_child_highlighted():
    html = HtmlTreeRenderer().render(_doc())

    # 90ms of a 100ms request
    assert 'class="timing slow">[90.0ms]' in html
    assert 'class="timing">[100.0ms]' in html


def test_threshold_omits_fast_nodes():
    html = HtmlTreeRenderer(RenderConfig(min_duration=0.095)).render(_doc())

    assert 'data-type="database_query"' not in html
    assert 'data-type="cache_operation"' in html
