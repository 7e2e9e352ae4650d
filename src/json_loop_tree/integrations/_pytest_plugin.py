"""pytest plugin for json-loop-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import pytest

from json_loop_tree.tree.nodes import Tree


@pytest.fixture(scope="session")
def assert_tree_shape() -> Any:
    """Fixture that returns a callable tree shape asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_package(assert_tree_shape):
            tree = build({"name": "package", "children": [{"loop": True}]})
            assert_tree_shape(tree, root="package", loops={"package"})

    Returns:
        A callable ``_assert(tree, root=None, children=None, loops=None) -> None``
        that raises ``AssertionError`` when any given expectation differs.
        Expectations left as None are not checked.
    """

    def _assert(
        tree: Tree,
        root: str | None = None,
        children: Mapping[str, Sequence[str]] | None = None,
        loops: Iterable[str] | None = None,
    ) -> None:
        """Assert that a tree has the expected root, child lists and loops.

        Args:
            tree:     The Tree produced by the code under test.
            root:     Expected root name.
            children: Expected ordered child names per node name.  Only the
                      listed names are checked.
            loops:    Expected set of loop parent names (compared as a set).

        Raises:
            AssertionError: With every mismatch listed, one per line.
        """
        problems: list[str] = []
        if root is not None and tree.root != root:
            problems.append(f"  root: {tree.root!r} != expected {root!r}")
        for name, expected in (children or {}).items():
            actual = tree.get_children(name)
            if actual != tuple(expected):
                problems.append(
                    f"  children({name}): {list(actual)} != expected {list(expected)}"
                )
        if loops is not None and tree.loops != frozenset(loops):
            problems.append(
                f"  loops: {sorted(tree.loops)} != expected {sorted(loops)}"
            )
        if problems:
            raise AssertionError("tree shape mismatch:\n" + "\n".join(problems))

    return _assert
