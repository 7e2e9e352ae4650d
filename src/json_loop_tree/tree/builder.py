"""TreeBuilder: converts a decoded JSON node tree into a read-only Tree.

Each JSON node is an object with an optional ``name``, an optional ``loop``
flag and an optional ``children`` array of nodes of the same shape.  The walk
is a recursive descent:

- A node with ``"loop": true`` is a leaf marker.  It records the name of its
  parent in ``Tree.loops`` and contributes nothing to the parent's children.
- Every other node must carry a string ``name``; its named children are
  recorded in array order under that name.

The path of ancestor names is an immutable tuple handed down each call and is
used only to locate errors: ``[myroot.subnode] children must be array: OBJECT``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from json_loop_tree.config import BuilderConfig
from json_loop_tree.exceptions import ConfigurationError, format_path
from json_loop_tree.tree.nodes import LOOP_MARKER, JsonKind, Named, Tree, WalkOutcome

__all__ = ["TreeBuilder"]

logger = logging.getLogger(__name__)

Path = tuple[str, ...]


@dataclass(slots=True)
class _BuildState:
    """Accumulators owned by a single build() call."""

    children_of: dict[str, list[str]] = field(default_factory=dict)
    loops: set[str] = field(default_factory=set)


@dataclass
class TreeBuilder:
    """Builds a Tree from a decoded JSON root node.

    The builder holds only its configuration; every ``build()`` call creates
    fresh accumulators, so one instance can be reused and shared freely.

    Example::

        builder = TreeBuilder()
        tree = builder.build(
            {"name": "package", "children": [{"name": "class"}, {"loop": True}]}
        )
        tree.get_children("package")  # ("class",)
        tree.loops                     # frozenset({"package"})
    """

    config: BuilderConfig = field(default_factory=BuilderConfig)

    def build(self, root: Any) -> Tree:
        """Walk ``root`` and return the resulting Tree.

        Args:
            root: Decoded JSON object describing the root node.

        Returns:
            A Tree whose ``root`` is the root node's name.

        Raises:
            ConfigurationError: If any node violates the expected shape.  No
                partial tree is returned.
        """
        state = _BuildState()
        outcome = self._walk(root, (), state)
        # _walk refuses a loop marker on an empty path, so the root is named.
        assert isinstance(outcome, Named)
        logger.debug(
            "built tree rooted at %r: %d nodes, %d loop parents",
            outcome.name,
            len(state.children_of),
            len(state.loops),
        )
        return Tree(
            root=outcome.name,
            children_of=state.children_of,
            loops=frozenset(state.loops),
        )

    def _walk(self, node: Any, path: Path, state: _BuildState) -> WalkOutcome:
        """Walk one JSON node below ``path`` and report its outcome.

        Args:
            node:  Decoded JSON value expected to be a node object.
            path:  Names of the ancestors of ``node``, outermost first.
            state: Accumulators of the current build.

        Returns:
            ``Named(name)`` for an ordinary node, ``LOOP_MARKER`` for a loop.
        """
        if not isinstance(node, dict):
            raise ConfigurationError.at(
                path, f"node must be object: {JsonKind.of(node)}"
            )

        if node.get("loop") is True:
            if not path:
                raise ConfigurationError.at(path, "LOOP IN ROOT")
            state.loops.add(path[-1])
            # Loop markers are always leaves: never recurse.
            return LOOP_MARKER

        name = node.get("name")
        if not isinstance(name, str):
            raise ConfigurationError.at(path, "node without name")

        node_path = (*path, name)
        max_depth = self.config.max_depth
        if max_depth is not None and len(node_path) > max_depth:
            raise ConfigurationError.at(
                node_path, f"tree deeper than {max_depth} levels"
            )

        # Plain loop: one interpreter frame per tree level.
        child_names: list[str] = []
        for child in self._children(node, node_path):
            outcome = self._walk(child, node_path, state)
            if isinstance(outcome, Named):
                child_names.append(outcome.name)

        if name in state.children_of:
            if not self.config.allow_duplicates:
                raise ConfigurationError.at(
                    node_path, f"duplicate node name: {name}"
                )
            logger.debug("node %r redefined at %s", name, format_path(node_path))
        state.children_of[name] = child_names
        return Named(name)

    @staticmethod
    def _children(node: dict[str, Any], node_path: Path) -> list[Any]:
        """Return the ``children`` array of ``node``; absent or null is empty."""
        children = node.get("children")
        if children is None:
            return []
        if not isinstance(children, list):
            raise ConfigurationError.at(
                node_path, f"children must be array: {JsonKind.of(children)}"
            )
        return children
