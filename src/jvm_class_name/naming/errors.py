"""Exception hierarchy for JVM class name resolution.

Every failure is a deterministic function of the tree shape, so there is no
retryable error kind.  All exceptions carry the node that could not be named.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jvm_class_name.tree.nodes import Node

__all__ = ["InvalidNodeKind", "MalformedTree", "NamingError"]


class NamingError(Exception):
    """Base class for all resolver failures."""

    def __init__(self, message: str, node: Node) -> None:
        super().__init__(message)
        self.node = node


class InvalidNodeKind(NamingError):
    """Raised when asked to name a node that never gets its own JVM class (FILE, PACKAGE)."""


class MalformedTree(NamingError):
    """Raised when a parent or required ancestor of the node is missing."""
