"""BuilderConfig: immutable settings for TreeBuilder.

The defaults reproduce the plain tree-building behaviour: duplicate node
names overwrite earlier entries (last write wins) and documents keep their
tree under the ``"root"`` member.  ``max_depth`` bounds the nesting depth so
that adversarial input fails with a ConfigurationError instead of exhausting
the interpreter's recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_MAX_DEPTH", "BuilderConfig"]

# Stays well below CPython's default recursion limit of 1000.
DEFAULT_MAX_DEPTH = 512


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable configuration for TreeBuilder.

    Attributes:
        max_depth: Maximum number of nested named nodes, root included.
            None disables the guard.  Defaults to 512.
        allow_duplicates: When True, a repeated node name silently replaces
            the earlier child list.  When False, it raises ConfigurationError.
        root_key: Member of a document object that holds the root node.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH
    allow_duplicates: bool = True
    root_key: str = "root"

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
        if not self.root_key:
            msg = "root_key must be a non-empty string"
            raise ValueError(msg)
