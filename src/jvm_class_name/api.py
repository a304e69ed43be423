"""Public API functions for jvm-class-name.

This module provides the three user-facing functions: jvm_class_name,
resolve, and class_names.  Each call creates a fresh NameResolver to
guarantee zero global state between calls; callers naming many nodes of the
same tree should hold on to a ``NameResolver`` instead to reuse its
numbering cache.
"""

from __future__ import annotations

from jvm_class_name.naming.resolver import NameResolver
from jvm_class_name.result import Resolution
from jvm_class_name.tree.nodes import Node, SyntaxTree

__all__ = ["class_names", "jvm_class_name", "resolve"]


def jvm_class_name(node: Node) -> str:
    """Return the binary JVM class name the compiler assigns to ``node``.

    Args:
        node: A CLASS, FUNCTION or LAMBDA node of a SyntaxTree.

    Returns:
        The ``/``- and ``$``-delimited name, e.g. ``org/example/Task1$A$1``.

    Raises:
        InvalidNodeKind: If ``node`` is a FILE or PACKAGE.
        MalformedTree:   If a required parent or ancestor is missing.
    """
    return NameResolver().jvm_class_name(node)


def resolve(node: Node) -> Resolution:
    """Return a ``Resolution`` with the name, the naming rule and the anonymous index.

    Raises:
        InvalidNodeKind: If ``node`` is a FILE or PACKAGE.
        MalformedTree:   If a required parent or ancestor is missing.
    """
    return NameResolver().resolve(node)


def class_names(tree: SyntaxTree) -> dict[Node, str]:
    """Return the JVM class name of every CLASS, FUNCTION and LAMBDA node in ``tree``.

    A single resolver is shared across the whole tree, so every numbering
    scope is walked once.
    """
    return NameResolver().class_names(tree)
