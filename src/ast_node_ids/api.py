"""Public API functions for ast-node-ids.

This module provides the user-facing entry points: walk, inspect, collect_all,
build_map and resolve.  Each call creates a fresh ``Walker`` (and with it a
fresh ``NodePath``) to guarantee zero shared state between calls.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ast_node_ids.mapper import build_map, collect_all, resolve
from ast_node_ids.walker import Inspector, Walker

if TYPE_CHECKING:
    from ast_node_ids.config import WalkConfig
    from ast_node_ids.path import NodePath
    from ast_node_ids.protocols import Visitor
    from ast_node_ids.tree.nodes import Node

__all__ = ["build_map", "collect_all", "inspect", "resolve", "walk"]


def walk(visitor: Visitor, root: Node, config: WalkConfig | None = None) -> None:
    """Traverse ``root`` depth-first with ``visitor``.

    ``visitor.visit(node, path)`` is called for every node before its
    children; returning ``None`` skips the children.  ``visit(None, path)``
    follows once the node's subtree is finished.

    Args:
        visitor: Any object satisfying the ``Visitor`` protocol.
        root:    An ``ast`` node, ``SourceFile`` or ``Package``.
        config:  Walker settings.  Defaults to ``WalkConfig()`` when None.
    """
    Walker(config).walk(visitor, root)


def inspect(
    root: Node,
    fn: Callable[[Node | None, NodePath], bool],
    config: WalkConfig | None = None,
) -> None:
    """Traverse ``root`` depth-first, calling ``fn(node, path)`` for each node.

    If ``fn`` returns True the node's children are visited too; False skips
    them.  ``fn(None, path)`` marks the end of each node's subtree.

    Args:
        root:   An ``ast`` node, ``SourceFile`` or ``Package``.
        fn:     Callback deciding whether to descend.
        config: Walker settings.  Defaults to ``WalkConfig()`` when None.
    """
    Walker(config).walk(Inspector(fn), root)
