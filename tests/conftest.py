"""Shared fixture trees.

Each fixture returns a ``BuiltTree`` whose labelled declarations carry the
JVM class name the compiler is expected to produce.
"""

from __future__ import annotations

import pytest

from jvm_class_name.tree.builder import (
    BuiltTree,
    TreeBuilder,
    class_decl,
    file_decl,
    function_decl,
    lambda_decl,
    package_decl,
)


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder instance for each test."""
    return TreeBuilder()


@pytest.fixture
def task_tree(builder: TreeBuilder) -> BuiltTree:
    """``test.kt`` in package ``org.example``: nested classes, member, local and top-level code."""
    return builder.build(
        file_decl(
            "test.kt",
            package_decl(
                "org.example",
                class_decl(
                    "Task1",
                    class_decl(
                        "A",
                        function_decl(
                            "solution",
                            function_decl(
                                "local",
                                lambda_decl(
                                    function_decl(
                                        "more_local",
                                        label="more_local",
                                        expected="org/example/Task1$A$3",
                                    ),
                                    label="lambda1",
                                    expected="org/example/Task1$A$2",
                                ),
                                lambda_decl(
                                    label="lambda2", expected="org/example/Task1$A$4"
                                ),
                                label="local",
                                expected="org/example/Task1$A$1",
                            ),
                            label="solution",
                            expected="org/example/Task1$A",
                        ),
                        function_decl(
                            "util",
                            lambda_decl(label="lambda3", expected="org/example/Task1$A$5"),
                            label="util",
                            expected="org/example/Task1$A",
                        ),
                        label="A",
                        expected="org/example/Task1$A",
                    ),
                    function_decl(
                        "member",
                        function_decl(
                            "local_in_member",
                            label="local_in_member",
                            expected="org/example/Task1$6",
                        ),
                        label="member",
                        expected="org/example/Task1",
                    ),
                    label="Task1",
                    expected="org/example/Task1",
                ),
                function_decl(
                    "top_level",
                    lambda_decl(label="lambda4", expected="org/example/test_kt$1"),
                    label="top_level",
                    expected="org/example/test_kt",
                ),
                label="package",
            ),
            label="file",
        )
    )


@pytest.fixture
def no_package_tree(builder: TreeBuilder) -> BuiltTree:
    """``test.kt`` without a package: one top-level class before one top-level function."""
    return builder.build(
        file_decl(
            "test.kt",
            class_decl(
                "C1",
                function_decl(
                    "F2",
                    lambda_decl(label="C1.lambda", expected="C1$1"),
                    function_decl("F3", label="F3", expected="C1$2"),
                    label="F2",
                    expected="C1",
                ),
                label="C1",
                expected="C1",
            ),
            function_decl(
                "F1",
                lambda_decl(
                    lambda_decl(label="F1.lambda2", expected="test_kt$2"),
                    label="F1.lambda1",
                    expected="test_kt$1",
                ),
                function_decl(
                    "local",
                    lambda_decl(label="F1.lambda4", expected="test_kt$4"),
                    label="F1.local",
                    expected="test_kt$3",
                ),
                label="F1",
                expected="test_kt",
            ),
            label="file",
        )
    )
