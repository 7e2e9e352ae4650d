"""json-loop-tree - build trees of named nodes with loop markers from JSON."""

from __future__ import annotations

from json_loop_tree.api import build, load, loads, parse_document, try_build
from json_loop_tree.cache import TreeCache
from json_loop_tree.config import BuilderConfig
from json_loop_tree.exceptions import ConfigurationError
from json_loop_tree.result import BuildResult
from json_loop_tree.tree import Tree, TreeBuilder

__version__: str = "0.1.0"
__all__: list[str] = [
    "BuildResult",
    "BuilderConfig",
    "ConfigurationError",
    "Tree",
    "TreeBuilder",
    "TreeCache",
    "build",
    "load",
    "loads",
    "parse_document",
    "try_build",
]
