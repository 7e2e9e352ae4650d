"""TreeCache: LRU-backed memo of built trees.

Wraps a TreeBuilder and caches the resulting Tree per distinct input.  Input
nodes are keyed by their canonical JSON text (``sort_keys=True``), so two
structurally equal node trees share one cache entry even when their object
members were inserted in a different order.  Trees are immutable, so the
cached instance is handed out directly.

Failed builds are never cached: the ConfigurationError propagates and the
next call with the same input walks it again.

Each ``TreeCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    from json_loop_tree.cache import TreeCache

    cache = TreeCache(max_size=64)
    first = cache.build({"name": "root"})
    again = cache.build({"name": "root"})
    assert first is again
"""

from __future__ import annotations

import json
import logging
from typing import Any

from cachetools import LRUCache

from json_loop_tree.tree.builder import TreeBuilder
from json_loop_tree.tree.nodes import Tree

__all__ = ["TreeCache"]

logger = logging.getLogger(__name__)


def _cache_key(node: Any) -> str:
    return json.dumps(node, sort_keys=True, separators=(",", ":"))


class TreeCache:
    """LRU-backed caching proxy around a TreeBuilder.

    Args:
        builder:  Builder used on cache misses.  Defaults to ``TreeBuilder()``.
        max_size: Maximum number of trees held in memory.  Defaults to 128.
            When exceeded, the least-recently-used tree is silently evicted.
    """

    def __init__(self, builder: TreeBuilder | None = None, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._builder = builder if builder is not None else TreeBuilder()
        self._cache: LRUCache[str, Tree] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def builder(self) -> TreeBuilder:
        """The builder invoked on cache misses."""
        return self._builder

    @property
    def max_size(self) -> int:
        """The maximum number of trees this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of trees stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def build(self, node: Any) -> Tree:
        """Return the Tree for ``node``, building it only on a cache miss.

        Raises:
            ConfigurationError: If ``node`` is malformed.  Nothing is cached.
            TypeError: If ``node`` holds values that are not JSON-serializable.
        """
        key = _cache_key(node)
        tree = self._cache.get(key)
        if tree is not None:
            logger.debug("tree cache hit for root %r", tree.root)
            return tree

        tree = self._builder.build(node)
        self._cache[key] = tree
        logger.debug("tree cache miss; cached tree rooted at %r", tree.root)
        return tree

    def clear(self) -> None:
        """Drop every cached tree."""
        self._cache.clear()
