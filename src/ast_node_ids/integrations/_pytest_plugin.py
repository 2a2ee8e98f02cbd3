"""pytest plugin for ast-node-ids.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from ast_node_ids import WalkConfig, collect_all, find_duplicates
from ast_node_ids.dump import describe


@pytest.fixture(scope="session")
def assert_unique_node_ids() -> Any:
    """Fixture that returns a callable identifier-uniqueness asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to collect_all() which creates a fresh Walker per call).

    Usage in tests::

        def test_my_tree(assert_unique_node_ids):
            tree = ast.parse(source)
            entries = assert_unique_node_ids(tree)
            assert entries[0].node_id == "Module"

    Returns:
        A callable ``_assert(root, config=None) -> list[NodeWithId]`` that
        raises ``AssertionError`` when two nodes share an identifier and
        otherwise returns the collected entries.
    """

    def _assert(root: Any, config: WalkConfig | None = None) -> Any:
        """Assert that every node under ``root`` has a distinct identifier.

        Args:
            root:   Root node to walk.
            config: Optional WalkConfig forwarded to collect_all().

        Raises:
            AssertionError: Listing every duplicate identifier together with
                the source rendering of both nodes.
        """
        entries = collect_all(root, config=config)
        duplicates = find_duplicates(entries)
        if duplicates:
            details = "\n".join(
                f"  duplicate node id {first.node_id!r}:\n"
                f"    {describe(first.node)}\n"
                f"    -- and --\n"
                f"    {describe(later.node)}"
                for first, later in duplicates
            )
            raise AssertionError(
                f"{len(duplicates)} duplicate node ids in {len(entries)} nodes\n{details}"
            )
        return entries

    return _assert
