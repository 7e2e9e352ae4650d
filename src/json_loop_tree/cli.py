"""
json_loop_tree.cli - Command-line interface.

Loads a JSON document, builds its tree and prints it.

Usage:
    json-loop-tree sample.json
    json-loop-tree sample.json --json
    json-loop-tree sample.json --root-key tree --max-depth 64 --strict-names
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from json_loop_tree import __version__
from json_loop_tree.api import load
from json_loop_tree.config import DEFAULT_MAX_DEPTH, BuilderConfig
from json_loop_tree.exceptions import ConfigurationError
from json_loop_tree.tree.nodes import Tree

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-loop-tree",
        description="Build a tree of named nodes from a JSON document and print it.",
    )
    parser.add_argument("file", metavar="FILE", help="JSON document to load")
    parser.add_argument(
        "--root-key",
        default="root",
        metavar="KEY",
        help="Document member holding the root node (default: root)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum nesting depth, 0 for unlimited (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--strict-names",
        action="store_true",
        help="Reject duplicate node names instead of keeping the last one",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the tree as JSON instead of the children listing",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _format_names(names: Sequence[str]) -> str:
    return "[" + ", ".join(names) + "]"


def print_tree(tree: Tree, out: TextIO) -> None:
    """Print root, loop parents and each node's children depth-first."""
    out.write(f"root == {tree.root}\n")
    out.write(f"loops == {_format_names(sorted(tree.loops))}\n")
    for _depth, name in tree.iter_depth_first():
        out.write(f"children({name}) == {_format_names(tree.get_children(name))}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.  Returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BuilderConfig(
            max_depth=args.max_depth or None,
            allow_duplicates=not args.strict_names,
            root_key=args.root_key,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("loading %s", args.file)
    try:
        tree = load(args.file, config=config)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"error: {args.file}: invalid JSON: {exc}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"error: {args.file}: invalid UTF-8: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        # Only reachable with the depth guard disabled.
        print(f"error: {args.file}: document nested too deeply", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(tree.to_dict(), indent=2))
    else:
        print_tree(tree, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
