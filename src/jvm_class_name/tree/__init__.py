"""Tree subpackage for lexical-scope syntax tree primitives.

Re-exports the public API for the tree module:
- NodeType: StrEnum of the five node kinds (FILE, PACKAGE, CLASS, FUNCTION, LAMBDA)
- SyntaxTree / NodeRecord: immutable arena of nodes indexed by handle
- Node: hashable handle into a SyntaxTree
- TreeBuilder and the *_decl helpers: declarative fixture construction
"""

from jvm_class_name.tree.builder import (
    BuiltTree,
    NodeDecl,
    TreeBuilder,
    class_decl,
    file_decl,
    function_decl,
    lambda_decl,
    package_decl,
)
from jvm_class_name.tree.nodes import Node, NodeRecord, NodeType, SyntaxTree

__all__ = [
    "BuiltTree",
    "Node",
    "NodeDecl",
    "NodeRecord",
    "NodeType",
    "SyntaxTree",
    "TreeBuilder",
    "class_decl",
    "file_decl",
    "function_decl",
    "lambda_decl",
    "package_decl",
]
