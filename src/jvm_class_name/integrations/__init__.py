"""Integrations subpackage for jvm-class-name.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_jvm_class_name`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
