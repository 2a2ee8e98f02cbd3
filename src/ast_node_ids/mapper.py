"""Collector and mapper: turn a walk into (node, identifier) data.

- ``collect_all``:     ordered list of ``NodeWithId``, one per node, walk order.
- ``build_map``:       ``NodeMap`` keyed by node identity.
- ``resolve``:         the reverse lookup, identifier -> node, pruning every
                       subtree that cannot contain the target.
- ``find_duplicates``: identifier collisions in a collected sequence; an empty
                       result is the uniqueness guarantee holding.

Every function builds a fresh ``Walker``; nothing is shared between calls, so
repeated calls on an unmodified tree return identical identifiers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ast_node_ids.path import SEPARATOR, NodePath
from ast_node_ids.result import NodeWithId
from ast_node_ids.walker import Inspector, Walker

if TYPE_CHECKING:
    from ast_node_ids.config import WalkConfig
    from ast_node_ids.tree.nodes import Node

__all__ = ["NodeMap", "build_map", "collect_all", "find_duplicates", "resolve"]

logger = logging.getLogger(__name__)


class NodeMap:
    """Mapping from node *identity* to the node's path.

    Lookups use ``id(node)`` and confirm with ``is``; structural equality is
    never consulted, so two equal-looking subtrees keep separate entries.
    Each entry holds a reference to its node, which keeps ids stable for the
    map's lifetime.  Iteration follows walk order.
    """

    def __init__(self, entries: Iterable[NodeWithId] = ()) -> None:
        self._entries: dict[int, NodeWithId] = {}
        for entry in entries:
            self._entries[id(entry.node)] = entry

    def _entry(self, node: Node) -> NodeWithId | None:
        entry = self._entries.get(id(node))
        if entry is None or entry.node is not node:
            return None
        return entry

    def __getitem__(self, node: Node) -> NodePath:
        entry = self._entry(node)
        if entry is None:
            raise KeyError(node)
        return entry.path.dup()

    def get(self, node: Node, default: NodePath | None = None) -> NodePath | None:
        entry = self._entry(node)
        return default if entry is None else entry.path.dup()

    def identifier(self, node: Node) -> str:
        """Return the identifier string of ``node``.

        Raises:
            KeyError: If ``node`` was not part of the mapped tree.
        """
        entry = self._entry(node)
        if entry is None:
            raise KeyError(node)
        return entry.node_id

    def __contains__(self, node: object) -> bool:
        return self._entry(node) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Node]:
        return (entry.node for entry in self._entries.values())

    def items(self) -> Iterator[tuple[Node, NodePath]]:
        return ((entry.node, entry.path.dup()) for entry in self._entries.values())

    def node_ids(self) -> list[str]:
        """Identifier strings in walk order."""
        return [entry.node_id for entry in self._entries.values()]

    def __repr__(self) -> str:
        return f"NodeMap({len(self)} nodes)"


def collect_all(root: Node, config: WalkConfig | None = None) -> list[NodeWithId]:
    """Walk ``root`` and record every node with a frozen copy of its path.

    Args:
        root:   Root node; its identifier is its variant name (or its unit
                label for a ``SourceFile``).
        config: Walker settings.  Defaults to ``WalkConfig()``.

    Returns:
        One ``NodeWithId`` per node in depth-first pre-order.
    """
    nodes: list[NodeWithId] = []

    def _record(node: Node | None, path: NodePath) -> bool:
        if node is not None:
            nodes.append(NodeWithId(node, path.dup()))
        return True

    Walker(config).walk(Inspector(_record), root)
    return nodes


def build_map(root: Node, config: WalkConfig | None = None) -> NodeMap:
    """Walk ``root`` and fold the observations into a ``NodeMap``.

    The result is a pure function of the tree's structure: calling it twice
    on an unmodified tree yields the same identifier for every node.
    """
    node_map = NodeMap(collect_all(root, config))
    logger.debug("built node map for %s with %d nodes", type(root).__name__, len(node_map))
    return node_map


class _Resolver:
    """Visitor that stops at the node whose path equals ``target``."""

    def __init__(self, target: tuple[str, ...]) -> None:
        self.target = target
        self.found: Node | None = None

    def visit(self, node: Node | None, path: NodePath) -> _Resolver | None:
        if node is None or self.found is not None:
            return None
        if not path.is_prefix_of(self.target):
            return None
        if len(path) == len(self.target):
            self.found = node
            return None
        return self


def resolve(
    root: Node, node_id: str, config: WalkConfig | None = None
) -> Node | None:
    """Return the node of ``root`` whose identifier is ``node_id``, or None.

    Only subtrees whose path is a prefix of ``node_id`` are entered, and the
    walk turns into no-ops once the node is found.
    """
    resolver = _Resolver(tuple(node_id.split(SEPARATOR)))
    Walker(config).walk(resolver, root)
    return resolver.found


def find_duplicates(
    entries: Iterable[NodeWithId],
) -> list[tuple[NodeWithId, NodeWithId]]:
    """Return ``(first, later)`` pairs of entries that share an identifier.

    An empty list means every identifier in ``entries`` is unique.
    """
    first_seen: dict[str, NodeWithId] = {}
    duplicates: list[tuple[NodeWithId, NodeWithId]] = []
    for entry in entries:
        existing = first_seen.setdefault(entry.node_id, entry)
        if existing is not entry:
            duplicates.append((existing, entry))
    return duplicates
