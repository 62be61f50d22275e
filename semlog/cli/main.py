# semlog/cli/main.py
import argparse
import sys
from typing import List, Optional

from semlog.core.errors import InvalidOptionError
from semlog.cli import tree_cmd, sample_cmd
from semlog.cli.tree_cmd import ArgumentParser


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(
        "semlog",
        description="semlog - hierarchical semantic logging and tree visualization"
    )
    sub = parser.add_subparsers(dest="command")

    # tree - render a log file
    tree_cmd.register_command(sub)

    # sample - record and render a demonstration session
    sample_cmd.register_command(sub)

    try:
        args = parser.parse_args(argv)
    except InvalidOptionError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    # If no command provided, show help
    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
