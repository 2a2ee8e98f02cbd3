"""Integrations subpackage for ast-node-ids.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_unique_node_ids`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
