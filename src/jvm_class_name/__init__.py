"""JVM class name - binary class names for nodes of a lexical-scope syntax tree."""

from __future__ import annotations

from jvm_class_name.api import class_names, jvm_class_name, resolve
from jvm_class_name.naming.errors import InvalidNodeKind, MalformedTree, NamingError
from jvm_class_name.naming.resolver import NameResolver
from jvm_class_name.result import NamingCase, Resolution
from jvm_class_name.tree.builder import TreeBuilder
from jvm_class_name.tree.nodes import Node, NodeType, SyntaxTree

__version__: str = "0.1.0"
__all__: list[str] = [
    "InvalidNodeKind",
    "MalformedTree",
    "NameResolver",
    "NamingCase",
    "NamingError",
    "Node",
    "NodeType",
    "Resolution",
    "SyntaxTree",
    "TreeBuilder",
    "class_names",
    "jvm_class_name",
    "resolve",
]
