"""Public API functions for json-loop-tree.

This module provides the user-facing functions: build, try_build,
parse_document, loads and load.  Each call creates a fresh TreeBuilder so no
state is shared between calls.

JSON text decoding is delegated to the standard ``json`` module; its
``JSONDecodeError`` and any ``OSError`` from reading files propagate
unchanged.
"""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any

from json_loop_tree.config import BuilderConfig
from json_loop_tree.exceptions import ConfigurationError
from json_loop_tree.result import BuildResult
from json_loop_tree.tree.builder import TreeBuilder
from json_loop_tree.tree.nodes import Tree

__all__ = ["build", "load", "loads", "parse_document", "try_build"]


def _builder(config: BuilderConfig | None) -> TreeBuilder:
    return TreeBuilder(config=config if config is not None else BuilderConfig())


def build(node: Any, config: BuilderConfig | None = None) -> Tree:
    """Build a Tree from a decoded JSON root node.

    Args:
        node:   Decoded JSON object describing the root node.
        config: Builder settings.  Defaults to ``BuilderConfig()`` when None.

    Returns:
        The built Tree.

    Raises:
        ConfigurationError: If the node tree is malformed.
    """
    return _builder(config).build(node)


def try_build(node: Any, config: BuilderConfig | None = None) -> BuildResult:
    """Build a Tree, returning failures as a value instead of raising.

    Args:
        node:   Decoded JSON object describing the root node.
        config: Builder settings.  Defaults to ``BuilderConfig()`` when None.

    Returns:
        ``BuildResult`` holding either the tree or the ConfigurationError.
    """
    try:
        return BuildResult.success(build(node, config=config))
    except ConfigurationError as exc:
        return BuildResult.failure(exc)


def parse_document(document: Any, config: BuilderConfig | None = None) -> Tree:
    """Build a Tree from a whole document such as ``{"root": {...}}``.

    Args:
        document: Decoded JSON object holding the root node under
                  ``config.root_key``.
        config:   Builder settings.  Defaults to ``BuilderConfig()`` when None.

    Returns:
        The Tree built from the document's root node.

    Raises:
        ConfigurationError: If the document has no root object or the node
            tree is malformed.
    """
    builder = _builder(config)
    root = document.get(builder.config.root_key) if isinstance(document, dict) else None
    if not isinstance(root, dict):
        raise ConfigurationError("", "document without root object")
    return builder.build(root)


def loads(text: str | bytes, config: BuilderConfig | None = None) -> Tree:
    """Decode a JSON document and build its tree.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
        ConfigurationError: If the document is malformed.
    """
    return parse_document(json.loads(text), config=config)


def load(path: str | PathLike[str], config: BuilderConfig | None = None) -> Tree:
    """Read a UTF-8 JSON document from ``path`` and build its tree."""
    return loads(Path(path).read_text(encoding="utf-8"), config=config)
