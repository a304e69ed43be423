"""Resolution dataclass and NamingCase StrEnum for resolver output.

This module provides the rich result type returned by resolve() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jvm_class_name.tree.nodes import Node

__all__ = ["NamingCase", "Resolution"]


class NamingCase(StrEnum):
    """Which naming rule produced a JVM class name.

    - TOP_LEVEL_CLASS:    <package path/><class name>
    - TOP_LEVEL_FUNCTION: <package path/><file name with '.' and '$' as '_'>
    - NESTED_CLASS:       <parent class>$<class name>
    - MEMBER_FUNCTION:    same class as the enclosing class
    - ANONYMOUS:          <enclosing named class>$<ordinal>
    """

    TOP_LEVEL_CLASS = auto()
    TOP_LEVEL_FUNCTION = auto()
    NESTED_CLASS = auto()
    MEMBER_FUNCTION = auto()
    ANONYMOUS = auto()


@dataclass(frozen=True, slots=True)
class Resolution:
    """Rich result of a resolve() call.

    Attributes:
        name: Binary JVM class name, e.g. ``org/example/Task1$A$2``.
        naming_case: The rule that produced ``name``.
        anonymous_index: Ordinal suffix for ANONYMOUS results; None otherwise.
        scope_root: The node whose JVM class ``name`` extends (nested classes,
            anonymous classes) or equals (member functions).  None for
            top-level declarations.
    """

    name: str
    naming_case: NamingCase
    anonymous_index: int | None = None
    scope_root: Node | None = None
