"""NameResolver: the Path Namer that composes binary JVM class names.

Walks from a node toward the root and applies the first matching rule:

1. Top-level class:     ``<package path/><name>``
2. Top-level function:  ``<package path/><file name, '.' and '$' -> '_'>``
3. Nested class:        ``<parent class>$<name>``
4. Local function or lambda:
                        ``<nearest class or non-local function>$<ordinal>``
5. Member function:     the enclosing class's name (no new class)

The package path is the package name with ``.`` replaced by ``/`` plus a
trailing ``/``, or the empty string when the file has no package.

Ordinals for rule 4 come from the ``AnonymousIndexer``.
"""

from __future__ import annotations

from itertools import takewhile

from jvm_class_name.naming.errors import InvalidNodeKind, MalformedTree
from jvm_class_name.naming.indexer import AnonymousIndexer
from jvm_class_name.naming.queries import (
    ancestors,
    first_ancestor,
    is_local_function,
    is_member_function,
    is_nonlocal_function,
    is_top_level_function,
)
from jvm_class_name.result import NamingCase, Resolution
from jvm_class_name.tree.nodes import Node, NodeType, SyntaxTree

__all__ = ["NameResolver"]

_FILE_NAME_TRANSLATION = str.maketrans({".": "_", "$": "_"})


def _is_scope_root(node: Node) -> bool:
    return node.node_type is NodeType.CLASS or is_nonlocal_function(node)


class NameResolver:
    """Computes binary JVM class names for CLASS, FUNCTION and LAMBDA nodes.

    The resolver is stateless apart from the indexer's numbering cache, which
    never affects results.  A single instance may be reused across many trees
    and shared between threads.

    Example::

        from jvm_class_name.naming.resolver import NameResolver

        resolver = NameResolver()
        resolver.jvm_class_name(built["lambda1"])   # "org/example/Task1$A$2"
        resolver.resolve(built["lambda1"]).naming_case  # NamingCase.ANONYMOUS

    Args:
        max_cache_size: Maximum number of numbering scopes memoized by the
            per-instance ``AnonymousIndexer``.  Defaults to 128.
    """

    def __init__(self, max_cache_size: int = 128) -> None:
        self._indexer = AnonymousIndexer(max_cache_size=max_cache_size)

    @property
    def indexer(self) -> AnonymousIndexer:
        return self._indexer

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def jvm_class_name(self, node: Node) -> str:
        """Return the binary JVM class name of ``node``.

        Raises:
            InvalidNodeKind: If ``node`` is a FILE or PACKAGE.
            MalformedTree:   If a required parent or ancestor is missing.
        """
        return self.resolve(node).name

    def resolve(self, node: Node) -> Resolution:
        """Return the JVM class name of ``node`` together with the rule that produced it.

        Raises:
            InvalidNodeKind: If ``node`` is a FILE or PACKAGE.
            MalformedTree:   If a required parent or ancestor is missing.
        """
        match node.node_type:
            case NodeType.CLASS:
                return self._resolve_class(node)
            case NodeType.FUNCTION:
                return self._resolve_function(node)
            case NodeType.LAMBDA:
                return self._resolve_anonymous(node)
            case NodeType.FILE | NodeType.PACKAGE:
                msg = f"{node} does not compile to a JVM class"
                raise InvalidNodeKind(msg, node)
            case _:
                msg = f"unknown node type {node.node_type!r}"
                raise InvalidNodeKind(msg, node)

    def class_names(self, tree: SyntaxTree) -> dict[Node, str]:
        """Name every CLASS, FUNCTION and LAMBDA node of ``tree`` in preorder.

        Raises:
            MalformedTree: If any nameable node cannot be named.
        """
        return {
            node: self.jvm_class_name(node)
            for node in tree
            if node.node_type not in (NodeType.FILE, NodeType.PACKAGE)
        }

    # ------------------------------------------------------------------
    # Naming rules
    # ------------------------------------------------------------------

    def _resolve_class(self, node: Node) -> Resolution:
        # Innermost first; the last entry is the outermost enclosing class.
        chain = list(
            takewhile(
                lambda a: a.node_type is NodeType.CLASS,
                ancestors(node, include_self=True),
            )
        )
        outermost = chain[-1]
        container = self._require_parent(outermost)
        if container.node_type not in (NodeType.FILE, NodeType.PACKAGE):
            msg = f"{outermost} is declared inside executable code ({container})"
            raise MalformedTree(msg, node)

        name = self._package_prefix(outermost) + "$".join(
            self._declared_name(c) for c in reversed(chain)
        )
        if len(chain) == 1:
            return Resolution(name=name, naming_case=NamingCase.TOP_LEVEL_CLASS)
        return Resolution(
            name=name, naming_case=NamingCase.NESTED_CLASS, scope_root=chain[1]
        )

    def _resolve_function(self, node: Node) -> Resolution:
        parent = self._require_parent(node)
        if is_top_level_function(node):
            return Resolution(
                name=self._package_prefix(node) + self._modified_file_name(node),
                naming_case=NamingCase.TOP_LEVEL_FUNCTION,
            )
        if is_local_function(node):
            return self._resolve_anonymous(node)
        if is_member_function(node):
            return Resolution(
                name=self.jvm_class_name(parent),
                naming_case=NamingCase.MEMBER_FUNCTION,
                scope_root=parent,
            )
        msg = f"{node} has no enclosing class, function or file ({parent})"
        raise MalformedTree(msg, node)

    def _resolve_anonymous(self, node: Node) -> Resolution:
        scope_root = first_ancestor(node, _is_scope_root)
        if scope_root is None:
            msg = f"{node} has no enclosing class or non-local function"
            raise MalformedTree(msg, node)
        index = self._indexer.anonymous_index(node)
        return Resolution(
            name=f"{self.jvm_class_name(scope_root)}${index}",
            naming_case=NamingCase.ANONYMOUS,
            anonymous_index=index,
            scope_root=scope_root,
        )

    # ------------------------------------------------------------------
    # Path segments
    # ------------------------------------------------------------------

    @staticmethod
    def _require_parent(node: Node) -> Node:
        parent = node.parent
        if parent is None:
            msg = f"{node} has no parent"
            raise MalformedTree(msg, node)
        return parent

    @staticmethod
    def _declared_name(node: Node) -> str:
        if node.name is None:
            msg = f"{node.node_type.name} node has no name"
            raise MalformedTree(msg, node)
        return node.name

    @classmethod
    def _package_prefix(cls, node: Node) -> str:
        package = first_ancestor(node, lambda a: a.node_type is NodeType.PACKAGE)
        if package is None:
            return ""
        return cls._declared_name(package).replace(".", "/") + "/"

    @classmethod
    def _modified_file_name(cls, node: Node) -> str:
        file = first_ancestor(node, lambda a: a.node_type is NodeType.FILE)
        if file is None:
            msg = f"{node} is not inside a FILE"
            raise MalformedTree(msg, node)
        return cls._declared_name(file).translate(_FILE_NAME_TRANSLATION)
