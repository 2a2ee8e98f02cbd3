"""Visitor Protocol: the single callback surface a caller integrates against.

Any object with a conformant ``visit`` method passes ``isinstance`` checks;
no base class is required.

Example::

    from ast_node_ids.protocols import Visitor

    class DepthLimited:
        def __init__(self, depth: int) -> None:
            self.depth = depth

        def visit(self, node, path):
            if node is None or self.depth == 0:
                return None
            return DepthLimited(self.depth - 1)

    assert isinstance(DepthLimited(3), Visitor)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ast_node_ids.path import NodePath
    from ast_node_ids.tree.nodes import Node


@runtime_checkable
class Visitor(Protocol):
    """Structural protocol for walk visitors.

    ``visit(node, path)`` is called once per node, before its children.  The
    return value is the visitor used for the node's children, or ``None`` to
    skip them.  After a node's children are done (or skipped) ``visit`` is
    called once more with ``node=None`` and the node's path; that call's
    return value is ignored.

    ``path`` is the walk's live ``NodePath``.  It changes as soon as ``visit``
    returns, so take ``path.dup()`` (or ``str(path)``) to keep it.
    """

    def visit(self, node: Node | None, path: NodePath) -> Visitor | None: ...
