"""Tree subpackage for JSON-to-tree conversion primitives.

Re-exports the public API for the tree module:
- Tree: read-only tree of named nodes with loop parents
- Named / LoopMarker: outcomes of walking one JSON node
- JsonKind: StrEnum naming the kind of a decoded JSON value
- TreeBuilder: converts a decoded JSON node tree into a Tree
"""

from json_loop_tree.tree.builder import TreeBuilder
from json_loop_tree.tree.nodes import LOOP_MARKER, JsonKind, LoopMarker, Named, Tree

__all__ = ["LOOP_MARKER", "JsonKind", "LoopMarker", "Named", "Tree", "TreeBuilder"]
