"""pytest plugin for jvm-class-name.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from jvm_class_name import NameResolver
from jvm_class_name.tree.nodes import Node


@pytest.fixture
def assert_jvm_class_name() -> Any:
    """Fixture that returns a callable JVM class name asserter.

    The fixture is function-scoped: each test gets its own ``NameResolver``,
    so numbering caches never leak between tests.

    Usage in tests::

        def test_lambda(assert_jvm_class_name):
            built = TreeBuilder().build(decl)
            assert_jvm_class_name(built["lambda1"], "org/example/Task1$A$2")

    Returns:
        A callable ``_assert(node, expected) -> None`` that raises
        ``AssertionError`` when the resolved name differs from ``expected``.
    """
    resolver = NameResolver()

    def _assert(node: Node, expected: str) -> None:
        """Assert that ``node`` resolves to ``expected``.

        Raises:
            AssertionError: On mismatch, with a message including the node,
                the expected and actual names, and the naming case.
        """
        resolution = resolver.resolve(node)
        if resolution.name != expected:
            raise AssertionError(
                f"JVM class name mismatch for {node}:\n"
                f"  expected: {expected}\n"
                f"  actual:   {resolution.name}\n"
                f"  naming_case: {resolution.naming_case}\n"
                f"  anonymous_index: {resolution.anonymous_index}"
            )

    return _assert
