"""Tree walks and derived predicates shared by the Path Namer and the indexer.

Two generic walks cover every traversal the resolver needs:

- ``ancestors`` / ``first_ancestor``: upward search with a stop predicate,
  used to find the package, the file, the scope root and the numbering anchor.
- ``preorder``: downward depth-first walk in child order with a skip
  predicate.  Class-rooted and file-rooted numbering differ only in the
  predicate passed here.

All walks are iterative, and the resolver builds nested class names from a
single ``ancestors`` walk, so deeply nested trees do not hit the recursion
limit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from jvm_class_name.tree.nodes import Node, NodeType

__all__ = [
    "ancestors",
    "first_ancestor",
    "is_countable",
    "is_local_function",
    "is_member_function",
    "is_nonlocal_function",
    "is_top_level_class",
    "is_top_level_function",
    "preorder",
]

Predicate = Callable[[Node], bool]

_DECLARATION_CONTAINERS = frozenset({NodeType.FILE, NodeType.PACKAGE})


def ancestors(node: Node, include_self: bool = False) -> Iterator[Node]:
    """Yield ancestors of ``node`` from the nearest up to the root."""
    current = node if include_self else node.parent
    while current is not None:
        yield current
        current = current.parent


def first_ancestor(
    node: Node, predicate: Predicate, include_self: bool = False
) -> Node | None:
    """Return the nearest ancestor satisfying ``predicate``, or None."""
    return next((a for a in ancestors(node, include_self) if predicate(a)), None)


def preorder(root: Node, skip: Predicate | None = None) -> Iterator[Node]:
    """Yield ``root`` and its descendants depth-first in child order.

    A descendant for which ``skip`` returns True is neither yielded nor
    descended into.  ``root`` itself is never skipped.
    """
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        children = current.children
        if skip is not None:
            children = tuple(c for c in children if not skip(c))
        stack.extend(reversed(children))


def _parent_type(node: Node) -> NodeType | None:
    parent = node.parent
    return None if parent is None else parent.node_type


def is_top_level_class(node: Node) -> bool:
    return node.node_type is NodeType.CLASS and _parent_type(node) in _DECLARATION_CONTAINERS


def is_top_level_function(node: Node) -> bool:
    return (
        node.node_type is NodeType.FUNCTION
        and _parent_type(node) in _DECLARATION_CONTAINERS
    )


def is_member_function(node: Node) -> bool:
    return node.node_type is NodeType.FUNCTION and _parent_type(node) is NodeType.CLASS


def is_local_function(node: Node) -> bool:
    """A FUNCTION with another FUNCTION among its strict ancestors."""
    if node.node_type is not NodeType.FUNCTION:
        return False
    return first_ancestor(node, lambda a: a.node_type is NodeType.FUNCTION) is not None


def is_nonlocal_function(node: Node) -> bool:
    return is_top_level_function(node) or is_member_function(node)


def is_countable(node: Node) -> bool:
    """True for nodes that receive an anonymous (synthetic) class index."""
    return node.node_type is NodeType.LAMBDA or is_local_function(node)
