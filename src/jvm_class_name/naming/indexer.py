"""AnonymousIndexer: ordinal suffixes for lambdas and local functions.

Every lambda and local function compiles to a synthetic class named
``<enclosing class>$<n>``.  The ordinal ``n`` comes from a preorder walk of
a *numbering scope*:

- Inside a top-level class the scope is that class's whole subtree, nested
  classes included.  Each top-level class therefore owns its own counter.
- Inside a top-level function the scope is the enclosing file, with every
  top-level class subtree skipped.  All top-level functions of one file
  share a single counter.

Countable nodes (lambdas and local functions) are numbered 1, 2, 3, ... in
visitation order; every other node is descended into but not counted.

A whole scope is numbered in a single walk and the result is memoized per
numbering root in an LRU cache, so naming every synthetic class of a file
costs one walk per scope.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from types import MappingProxyType

from cachetools import LRUCache

from jvm_class_name.naming.errors import InvalidNodeKind, MalformedTree
from jvm_class_name.naming.queries import (
    first_ancestor,
    is_countable,
    is_top_level_class,
    is_top_level_function,
    preorder,
)
from jvm_class_name.tree.nodes import Node, NodeType

__all__ = ["AnonymousIndexer"]


def _is_anchor(node: Node) -> bool:
    return is_top_level_class(node) or is_top_level_function(node)


class AnonymousIndexer:
    """Computes 1-based anonymous class indices with per-instance memoization.

    The cache is guarded by a lock, so one indexer may be shared between
    threads.  Trees are immutable, so a cached numbering never goes stale.

    Args:
        max_cache_size: Maximum number of numbering scopes held in memory.
            When exceeded, the least-recently-used scope is silently evicted.
    """

    def __init__(self, max_cache_size: int = 128) -> None:
        self._cache: LRUCache[Node, Mapping[Node, int]] = LRUCache(maxsize=max_cache_size)
        self._lock = threading.Lock()

    @property
    def curr_size(self) -> int:
        """The number of numbering scopes currently cached."""
        return int(self._cache.currsize)

    def anonymous_index(self, node: Node) -> int:
        """Return the anonymous class ordinal of a lambda or local function.

        Raises:
            InvalidNodeKind: If ``node`` is neither a LAMBDA nor a local FUNCTION.
            MalformedTree:   If no numbering scope can be found for ``node``.
        """
        if not is_countable(node):
            msg = f"{node} does not compile to an anonymous class"
            raise InvalidNodeKind(msg, node)
        index = self.numbering(self.numbering_root(node)).get(node)
        if index is None:
            msg = f"{node} is not reachable from its numbering scope"
            raise MalformedTree(msg, node)
        return index

    def numbering_root(self, node: Node) -> Node:
        """Return the node whose subtree defines the numbering scope of ``node``."""
        anchor = first_ancestor(node, _is_anchor)
        if anchor is None:
            msg = f"{node} has no enclosing top-level class or function"
            raise MalformedTree(msg, node)
        if anchor.node_type is NodeType.CLASS:
            return anchor
        file = first_ancestor(anchor, lambda a: a.node_type is NodeType.FILE)
        if file is None:
            msg = f"{anchor} has no enclosing FILE"
            raise MalformedTree(msg, node)
        return file

    def numbering(self, root: Node) -> Mapping[Node, int]:
        """Return the full, read-only numbering of the scope rooted at ``root``."""
        with self._lock:
            cached = self._cache.get(root)
        if cached is not None:
            return cached

        skip = is_top_level_class if root.node_type is NodeType.FILE else None
        result: dict[Node, int] = {}
        for current in preorder(root, skip=skip):
            if is_countable(current):
                result[current] = len(result) + 1

        frozen = MappingProxyType(result)
        with self._lock:
            self._cache[root] = frozen
        return frozen
