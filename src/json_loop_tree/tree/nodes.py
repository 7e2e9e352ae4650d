"""Tree value object and walk outcome types.

``Tree`` is the read-only result of a build.  ``Named`` and ``LoopMarker``
are the two outcomes of walking a single JSON node: ordinary nodes yield
their name, loop markers yield the ``LOOP_MARKER`` singleton and are dropped
from their parent's child list.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Final

__all__ = ["LOOP_MARKER", "JsonKind", "LoopMarker", "Named", "Tree", "WalkOutcome"]


class JsonKind(StrEnum):
    """Kind of a decoded JSON value, as named in error messages."""

    OBJECT = "OBJECT"
    ARRAY = "ARRAY"
    STRING = "STRING"
    NUMBER = "NUMBER"
    TRUE = "TRUE"
    FALSE = "FALSE"
    NULL = "NULL"

    @classmethod
    def of(cls, value: Any) -> JsonKind:
        """Classify a decoded JSON value.

        bool is checked before int because bool subclasses int in Python.

        Raises:
            TypeError: If value is not a type produced by JSON decoding.
        """
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        if value is None:
            return cls.NULL
        if isinstance(value, dict):
            return cls.OBJECT
        if isinstance(value, list):
            return cls.ARRAY
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (int, float)):
            return cls.NUMBER
        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(frozen=True, slots=True)
class Named:
    """Walk outcome of an ordinary node."""

    name: str


class LoopMarker:
    """Walk outcome of a ``"loop": true`` node.  Use ``LOOP_MARKER``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "LOOP_MARKER"


LOOP_MARKER: Final = LoopMarker()

WalkOutcome = Named | LoopMarker


def _freeze(
    children_of: Mapping[str, Sequence[str]],
) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({name: tuple(kids) for name, kids in children_of.items()})


@dataclass(frozen=True, slots=True)
class Tree:
    """Read-only tree of named nodes.

    Attributes:
        root:        Name of the top-level node.  Never a loop marker.
        children_of: Node name -> child names in JSON array order.  Every
                     walked node has an entry, possibly empty.  Loop markers
                     have no entry and never appear as children.
        loops:       Names of nodes with at least one direct loop child.

    Example::

        tree = TreeBuilder().build({"name": "a", "children": [{"loop": True}]})
        tree.root               # "a"
        tree.get_children("a")  # ()
        tree.loops              # frozenset({"a"})
    """

    root: str
    children_of: Mapping[str, tuple[str, ...]] = field(
        default_factory=dict, hash=False
    )
    loops: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        # The caller's mapping is copied, never retained.
        object.__setattr__(self, "children_of", _freeze(self.children_of))
        object.__setattr__(self, "loops", frozenset(self.loops))

    def get_children(self, name: str) -> tuple[str, ...]:
        """Return the child names of ``name``; empty for unknown names."""
        return self.children_of.get(name, ())

    def is_loop(self, name: str) -> bool:
        """True when ``name`` has a loop marker directly beneath it."""
        return name in self.loops

    @property
    def names(self) -> tuple[str, ...]:
        """Every node name with a child entry, in the order it was recorded."""
        return tuple(self.children_of)

    def __contains__(self, name: object) -> bool:
        return name in self.children_of

    def __len__(self) -> int:
        return len(self.children_of)

    def iter_depth_first(self) -> Iterator[tuple[int, str]]:
        """Yield ``(depth, name)`` pairs depth-first from the root.

        A name reached a second time along the current branch is yielded
        once more but not expanded again, so duplicate names that point
        back to an ancestor cannot loop forever.
        """
        stack: list[tuple[int, str, frozenset[str]]] = [(0, self.root, frozenset())]
        while stack:
            depth, name, ancestors = stack.pop()
            yield depth, name
            if name in ancestors:
                continue
            seen = ancestors | {name}
            for child in reversed(self.get_children(name)):
                stack.append((depth + 1, child, seen))

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-serializable form: root, sorted loops, children map."""
        return {
            "root": self.root,
            "loops": sorted(self.loops),
            "children": {name: list(kids) for name, kids in self.children_of.items()},
        }
