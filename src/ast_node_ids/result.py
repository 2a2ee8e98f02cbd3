"""NodeWithId: one (node, identifier) observation produced by a walk."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ast_node_ids.path import NodePath
    from ast_node_ids.tree.nodes import Node

__all__ = ["NodeWithId"]


@dataclass(frozen=True, slots=True, eq=False)
class NodeWithId:
    """A visited node together with a frozen copy of its path.

    Attributes:
        node: The visited node (borrowed from the caller's tree).
        path: Copy of the walk's path at the moment ``node`` was visited.
              Owned by this record; the walk never touches it again.
    """

    node: Node
    path: NodePath

    @property
    def node_id(self) -> str:
        """The identifier string, ``str(self.path)``."""
        return str(self.path)
