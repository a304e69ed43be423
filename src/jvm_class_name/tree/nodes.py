"""NodeType StrEnum, SyntaxTree arena and Node handles.

Provides the foundational data types used by TreeBuilder to assemble
lexical-scope syntax trees and by the naming package to walk them.

The tree is stored as an arena: a ``SyntaxTree`` owns a tuple of
``NodeRecord`` entries indexed by integer handle.  Each record stores the
handle of its parent and the handles of its children, so navigation in
either direction is O(1) and no object ever holds a strong reference cycle.
``Node`` is a lightweight (tree, handle) view over a record.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum, auto

__all__ = ["Node", "NodeRecord", "NodeType", "SyntaxTree"]


class NodeType(StrEnum):
    """Enumeration of the five node kinds in a lexical-scope tree.

    StrEnum values are the lowercased member names:
    - FILE     -> "file"     : Compilation unit, always the root
    - PACKAGE  -> "package"  : Package declaration holding all declarations
    - CLASS    -> "class"    : Class declaration
    - FUNCTION -> "function" : Named function (top-level, member or local)
    - LAMBDA   -> "lambda"   : Anonymous function literal
    """

    FILE = auto()
    PACKAGE = auto()
    CLASS = auto()
    FUNCTION = auto()
    LAMBDA = auto()


@dataclass(frozen=True, slots=True)
class NodeRecord:
    """Arena entry for a single node.

    Attributes:
        node_type: Which kind of node this is (see NodeType).
        name:      Declared name; None only for (unnamed) LAMBDA nodes.
        parent:    Handle of the parent record; None for the root.
        children:  Handles of the child records in declaration order.
    """

    node_type: NodeType
    name: str | None
    parent: int | None
    children: tuple[int, ...] = ()


class SyntaxTree:
    """Immutable arena of NodeRecords.  Handle 0 is the root.

    Example::

        tree = SyntaxTree([
            NodeRecord(NodeType.FILE, "test.kt", None, (1,)),
            NodeRecord(NodeType.CLASS, "Task1", 0),
        ])
        tree.root.children[0].name  # "Task1"
    """

    __slots__ = ("_records",)

    def __init__(self, records: Sequence[NodeRecord]) -> None:
        if not records:
            msg = "SyntaxTree requires at least one record"
            raise ValueError(msg)
        if records[0].parent is not None:
            msg = "record 0 must be the root (parent=None)"
            raise ValueError(msg)
        self._records: tuple[NodeRecord, ...] = tuple(records)

    @property
    def root(self) -> Node:
        return Node(self, 0)

    def node(self, handle: int) -> Node:
        """Return the Node view for ``handle``.

        Raises:
            IndexError: If ``handle`` is not a valid handle in this tree.
        """
        if not 0 <= handle < len(self._records):
            msg = f"handle {handle} out of range for tree of size {len(self._records)}"
            raise IndexError(msg)
        return Node(self, handle)

    def record(self, handle: int) -> NodeRecord:
        return self._records[handle]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Node]:
        """Iterate over every node in preorder (declaration order)."""
        stack = [0]
        while stack:
            handle = stack.pop()
            yield Node(self, handle)
            stack.extend(reversed(self._records[handle].children))


@dataclass(frozen=True, slots=True)
class Node:
    """A handle to one node of a SyntaxTree.

    Two Nodes are equal iff they point at the same handle of the same tree
    object, which makes them safe to use as dict keys across several trees.
    """

    tree: SyntaxTree = field(repr=False)
    handle: int

    @property
    def node_type(self) -> NodeType:
        return self.tree.record(self.handle).node_type

    @property
    def name(self) -> str | None:
        return self.tree.record(self.handle).name

    @property
    def parent(self) -> Node | None:
        parent = self.tree.record(self.handle).parent
        return None if parent is None else Node(self.tree, parent)

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(Node(self.tree, h) for h in self.tree.record(self.handle).children)

    def __str__(self) -> str:
        return f"{self.node_type.name} {self.name}"
