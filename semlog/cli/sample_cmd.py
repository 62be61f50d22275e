# semlog/cli/sample_cmd.py
"""
Sample command - record a demonstration session and render it

Simulates one e-commerce request: authentication, a cache miss, a database
query, a recursive category walk and a payment API call. Timings are fixed
so the output is reproducible.
"""

from __future__ import annotations

import argparse
from typing import Dict, List

from semlog.config import RenderConfig
from semlog.core import Context, SemanticLogger
from semlog.infra.storage import LogFileWriter
from semlog.tree import TreeRenderer, build_tree


SCHEMA_BASE = "https://koriym.github.io/semantic-logger/schemas"

# category -> subcategories, walked recursively
CATEGORIES: Dict[str, List[str]] = {
    "electronics": ["computers", "phones"],
    "computers": ["laptops"],
    "phones": [],
    "laptops": [],
}


def register_command(subparsers) -> None:
    """Register the 'sample' command and its arguments."""
    sample_p = subparsers.add_parser(
        "sample",
        help="Record a demonstration session and render it as a tree",
    )
    sample_p.add_argument(
        "--output",
        help="Directory for the generated log file (default: system temp dir)",
    )
    sample_p.set_defaults(func=run_sample)


def _ctx(type_: str, **data) -> Context:
    return Context(type_, f"{SCHEMA_BASE}/{type_}.json", data)


def record_sample_session(log: SemanticLogger) -> None:
    """Drive ``log`` through one balanced request session"""
    request = log.open(_ctx(
        "http_request",
        method="GET",
        uri="/api/products?category=electronics",
        headers={"Accept": "application/json", "Authorization": "Bearer ***"},
    ))

    auth = log.open(_ctx("authentication", method="jwt", token="eyJ***"))
    conn = log.open(_ctx("database_connection", host="db.internal", database="users"))
    log.close(_ctx("database_connection_complete", connectionTime=0.012), conn)
    log.close(_ctx("authentication_complete", executionTime=0.52, userId=42), auth)

    log.event(_ctx("cache_operation", operation="get", key="products:electronics", hit=False,
                   executionTime=0.0002))

    query = log.open(_ctx("database_query", queryType="SELECT", table="products",
                          parameters={"category": "electronics", "limit": 20}))
    log.close(_ctx("database_query_complete", executionTime=0.045, rowCount=20), query)

    walk_categories(log, "electronics", depth=1)

    api = log.open(_ctx("external_api_request", service="pricing",
                        endpoint="https://pricing.example.com/v2/quotes/batch?currency=USD"))
    log.close(_ctx("external_api_complete", responseTime=0.085, statusCode=200), api)

    log.event(_ctx("performance_metrics", databaseQueries=5, memoryUsed=2_621_440))
    log.close(_ctx("http_response", statusCode=200, executionTime=0.68), request)


def walk_categories(log: SemanticLogger, category: str, depth: int) -> None:
    """Recursive workload: one nested operation per category level"""
    op = log.open(_ctx("business_logic", operation=f"load_category:{category}", success=True))
    for child in CATEGORIES.get(category, []):
        walk_categories(log, child, depth + 1)
    log.close(_ctx("business_logic_complete", executionTime=0.002 * depth), op)


def run_sample(args: argparse.Namespace) -> int:
    log = SemanticLogger()
    record_sample_session(log)

    writer = LogFileWriter(args.output)
    document = log.flush([{"rel": "describedby", "href": f"{SCHEMA_BASE}/semantic-log.json"}])
    path = writer.write(document)

    print(f"\n{'=' * 70}")
    print("  semlog sample session")
    print(f"  Log: {path}")
    print(f"{'=' * 70}\n")
    print(TreeRenderer(RenderConfig(full_depth=True)).render(build_tree(document)))
    print(f"\n  Render it again with: stree --depth=3 {path}\n")
    return 0
