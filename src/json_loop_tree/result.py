"""BuildResult dataclass: the non-raising outcome of a build.

Returned by ``try_build()``.  Exactly one of ``tree`` and ``error`` is set.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_loop_tree.exceptions import ConfigurationError
from json_loop_tree.tree.nodes import Tree

__all__ = ["BuildResult"]


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Success-or-failure result of building a tree.

    Attributes:
        tree:  The built Tree on success; None on failure.
        error: The ConfigurationError that aborted the build; None on success.
    """

    tree: Tree | None = None
    error: ConfigurationError | None = None

    def __post_init__(self) -> None:
        if (self.tree is None) == (self.error is None):
            msg = "BuildResult needs exactly one of tree or error"
            raise ValueError(msg)

    @classmethod
    def success(cls, tree: Tree) -> BuildResult:
        return cls(tree=tree)

    @classmethod
    def failure(cls, error: ConfigurationError) -> BuildResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True when the build produced a tree."""
        return self.error is None

    def unwrap(self) -> Tree:
        """Return the tree, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        assert self.tree is not None
        return self.tree
