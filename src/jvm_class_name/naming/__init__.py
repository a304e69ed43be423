"""Naming subpackage: Path Namer, Anonymous Indexer and shared tree walks.

Re-exports the public API for the naming module:
- NameResolver: composes binary JVM class names
- AnonymousIndexer: ordinal suffixes for lambdas and local functions
- NamingError, InvalidNodeKind, MalformedTree: failure types
"""

from jvm_class_name.naming.errors import InvalidNodeKind, MalformedTree, NamingError
from jvm_class_name.naming.indexer import AnonymousIndexer
from jvm_class_name.naming.resolver import NameResolver

__all__ = [
    "AnonymousIndexer",
    "InvalidNodeKind",
    "MalformedTree",
    "NameResolver",
    "NamingError",
]
