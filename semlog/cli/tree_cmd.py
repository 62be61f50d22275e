# semlog/cli/tree_cmd.py
"""
Tree command - render a log document as an annotated tree

    stree [OPTIONS] <logfile.json>
    semlog tree [OPTIONS] <logfile.json>

Exit codes: 0 on success, 1 on missing file, invalid JSON, malformed
document or bad option.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from semlog.config import (
    HTML,
    OUTPUT_FORMATS,
    RenderConfig,
    has_errors,
    load_config,
    validate_render_config,
)
from semlog.core.errors import InvalidOptionError, SemlogError
from semlog.infra.storage import load_document
from semlog.tree import TreeRenderer, build_tree, default_registry
from semlog.utils.formatting import parse_duration
from .renderers.html import HtmlTreeRenderer


EXAMPLES = """
examples:
    stree debug.json                          # default 2-level tree
    stree --depth=5 detailed.json             # show 5 levels deep
    stree --expand=database_query log.json    # expand database_query contexts
    stree --threshold=10ms slow.json          # show only operations >= 10ms
    stree --lines=10 detailed.json            # show up to 10 headers/params
    stree --format=html --full trace.json > trace.html
"""


class ArgumentParser(argparse.ArgumentParser):
    """argparse that reports bad options as InvalidOptionError (exit 1, not 2)"""

    def error(self, message: str):
        raise InvalidOptionError(message)


def parse_threshold(value: str) -> float:
    """argparse type for --threshold: 10ms, 0.5s, or seconds"""
    try:
        return parse_duration(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a number, got: {value}")
    if number < 0:
        raise argparse.ArgumentTypeError("must be 0 or greater")
    return number


def add_tree_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", nargs="?", help="Path to a semantic log JSON file")
    parser.add_argument("-d", "--depth", type=_non_negative_int, default=None,
                        help="Maximum tree depth to display (default: 2)")
    parser.add_argument("-f", "--full", action="store_true", default=None,
                        help="Show complete tree without depth limits")
    parser.add_argument("-e", "--expand", action="append", default=None, metavar="TYPE",
                        help="Expand a context type beyond the depth limit (repeatable)")
    parser.add_argument("-t", "--threshold", type=parse_threshold, default=None,
                        help="Hide operations faster than this (e.g. 10ms, 0.5s)")
    parser.add_argument("-l", "--lines", type=_non_negative_int, default=None,
                        help="Maximum items shown for headers/params (default: 5, 0 = no limit)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None,
                        help="Output format: text (default) or html")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")


def register_command(subparsers) -> None:
    """Register the 'tree' command and its arguments."""
    tree_p = subparsers.add_parser(
        "tree",
        help="Render a semantic log as an annotated tree",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_tree_arguments(tree_p)
    tree_p.set_defaults(func=run_tree)


def build_render_config(base: RenderConfig, args: argparse.Namespace) -> RenderConfig:
    """CLI options override the configured defaults"""
    updates = {}
    if args.depth is not None:
        updates["max_depth"] = args.depth
    if args.full:
        updates["full_depth"] = True
    if args.expand:
        empty = [t for t in args.expand if not t.strip()]
        if empty:
            raise InvalidOptionError("--expand context type cannot be empty", option="--expand")
        updates["expand_types"] = base.expand_types | frozenset(args.expand)
    if args.threshold is not None:
        updates["min_duration"] = args.threshold
    if args.lines is not None:
        updates["max_lines"] = args.lines
    if args.format is not None:
        updates["output_format"] = args.format
    return replace(base, **updates)


def run_tree(args: argparse.Namespace) -> int:
    """Render the log file named in args; returns the exit code"""
    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        config = load_config(args.config)
        render = build_render_config(config.render, args)

        issues = validate_render_config(render)
        for issue in issues:
            print(issue, file=sys.stderr)
        if has_errors(issues):
            return 1

        if not args.file:
            raise InvalidOptionError("Log file required. Usage: stree [OPTIONS] <logfile.json>")

        tree = build_tree(load_document(args.file))
        registry = default_registry(config.timing_keys)
        if render.output_format == HTML:
            output = HtmlTreeRenderer(render, registry).render(tree)
        else:
            output = TreeRenderer(render, registry).render(tree)
    except SemlogError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    print(output)
    return 0


def tree_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the standalone ``stree`` command"""
    parser = ArgumentParser(
        "stree",
        description="stree - Semantic Tree Visualizer for semantic logs",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_tree_arguments(parser)
    try:
        args = parser.parse_args(argv)
    except InvalidOptionError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return run_tree(args)


if __name__ == "__main__":
    sys.exit(tree_main())
