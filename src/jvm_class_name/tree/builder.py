"""TreeBuilder: turns a declarative NodeDecl description into a SyntaxTree.

Fixtures are written as nested constructor calls that mirror the shape of
the source they describe::

    decl = file_decl(
        "test.kt",
        package_decl(
            "org.example",
            class_decl(
                "Task1",
                function_decl("member", lambda_decl(label="l1", expected="org/example/Task1$1")),
                label="Task1",
                expected="org/example/Task1",
            ),
        ),
    )
    built = TreeBuilder().build(decl)
    built["l1"]            # the LAMBDA Node
    built.expected["l1"]   # "org/example/Task1$1"

Labels are caller-chosen strings attached to declarations so tests can reach
specific nodes without re-walking the tree.  The resulting SyntaxTree knows
nothing about labels.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from jvm_class_name.tree.nodes import Node, NodeRecord, NodeType, SyntaxTree

__all__ = [
    "BuiltTree",
    "NodeDecl",
    "TreeBuilder",
    "class_decl",
    "file_decl",
    "function_decl",
    "lambda_decl",
    "package_decl",
]


@dataclass(slots=True)
class NodeDecl:
    """Declaration of one node and its subtree.

    Attributes:
        node_type: Kind of node to create.
        name:      Declared name; may be None only for LAMBDA.
        children:  Child declarations in source order.
        label:     Optional key under which the built Node is published.
        expected:  Optional expected JVM class name stored alongside the label.
    """

    node_type: NodeType
    name: str | None
    children: list[NodeDecl] = field(default_factory=list)
    label: str | None = None
    expected: str | None = None


def file_decl(
    name: str, *children: NodeDecl, label: str | None = None, expected: str | None = None
) -> NodeDecl:
    return NodeDecl(NodeType.FILE, name, list(children), label, expected)


def package_decl(
    name: str, *children: NodeDecl, label: str | None = None, expected: str | None = None
) -> NodeDecl:
    return NodeDecl(NodeType.PACKAGE, name, list(children), label, expected)


def class_decl(
    name: str, *children: NodeDecl, label: str | None = None, expected: str | None = None
) -> NodeDecl:
    return NodeDecl(NodeType.CLASS, name, list(children), label, expected)


def function_decl(
    name: str, *children: NodeDecl, label: str | None = None, expected: str | None = None
) -> NodeDecl:
    return NodeDecl(NodeType.FUNCTION, name, list(children), label, expected)


def lambda_decl(
    *children: NodeDecl,
    name: str | None = None,
    label: str | None = None,
    expected: str | None = None,
) -> NodeDecl:
    return NodeDecl(NodeType.LAMBDA, name, list(children), label, expected)


@dataclass(frozen=True, slots=True)
class BuiltTree:
    """Result of TreeBuilder.build().

    Attributes:
        tree:     The immutable SyntaxTree.
        labels:   Mapping from declaration label to the built Node.
        expected: Mapping from declaration label to its expected name
                  (None when the declaration carried no expectation).
    """

    tree: SyntaxTree
    labels: dict[str, Node]
    expected: dict[str, str | None]

    @property
    def root(self) -> Node:
        return self.tree.root

    def __getitem__(self, label: str) -> Node:
        return self.labels[label]

    def expectations(self) -> Iterator[tuple[str, Node, str]]:
        """Yield (label, node, expected) for every label carrying an expected name."""
        for label, node in self.labels.items():
            expected = self.expected[label]
            if expected is not None:
                yield label, node, expected


@dataclass
class TreeBuilder:
    """Converts a NodeDecl description into a SyntaxTree.

    Handles are allocated in preorder, so handle order equals declaration
    order and the root always receives handle 0.  Grammar well-formedness is
    not checked: the builder happily produces a CLASS under a LAMBDA so that
    error paths of the resolver can be exercised.
    """

    def build(self, decl: NodeDecl) -> BuiltTree:
        """Build a SyntaxTree from ``decl``.

        Raises:
            TypeError:  If a child is not a NodeDecl.
            ValueError: If a non-LAMBDA declaration has no name, or a label
                        is used twice.
        """
        parents: list[int | None] = []
        children: list[list[int]] = []
        decls: list[NodeDecl] = []
        labels: dict[str, int] = {}

        stack: list[tuple[NodeDecl, int | None]] = [(decl, None)]
        while stack:
            current, parent = stack.pop()
            if not isinstance(current, NodeDecl):
                raise TypeError(f"Unsupported declaration type: {type(current)!r}")
            if current.name is None and current.node_type is not NodeType.LAMBDA:
                msg = f"{current.node_type.name} declaration requires a name"
                raise ValueError(msg)

            handle = len(decls)
            decls.append(current)
            parents.append(parent)
            children.append([])
            if parent is not None:
                children[parent].append(handle)

            if current.label is not None:
                if current.label in labels:
                    msg = f"duplicate label {current.label!r}"
                    raise ValueError(msg)
                labels[current.label] = handle

            stack.extend((child, handle) for child in reversed(current.children))

        tree = SyntaxTree(
            [
                NodeRecord(d.node_type, d.name, parents[h], tuple(children[h]))
                for h, d in enumerate(decls)
            ]
        )
        return BuiltTree(
            tree=tree,
            labels={label: tree.node(h) for label, h in labels.items()},
            expected={label: decls[h].expected for label, h in labels.items()},
        )
