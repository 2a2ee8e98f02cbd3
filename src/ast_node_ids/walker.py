"""Walker: depth-first traversal that threads a NodePath through the tree.

For every node the walker:

1. resolves the node's slots (an unknown type fails before it is visited),
2. pushes the node's own label, if it has one,
3. calls ``visitor.visit(node, path)``,
4. if that returned ``None``, sends the finished signal
   ``visitor.visit(None, path)`` and goes back up,
5. otherwise walks every slot in declared order with the returned visitor,
   pushing the slot name and then the index (``MANY``) or key (``KEYED``)
   before each child and popping them right after,
6. sends ``returned.visit(None, path)`` and pops its own label.

Own labels: a ``SourceFile`` contributes ``name + unit_suffix`` wherever it
sits.  The root of a walk contributes its variant name so its identifier is
never empty.  Nothing else contributes one; the slot labels above a node are
enough to tell it apart from its siblings.

All pushes go through ``NodePath.scoped`` so the path is restored on every
exit, pruning and exceptions included.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING

from ast_node_ids.config import WalkConfig
from ast_node_ids.errors import MalformedNodeError, UnknownNodeTypeError
from ast_node_ids.path import SEPARATOR, NodePath
from ast_node_ids.tree.nodes import SourceFile
from ast_node_ids.tree.slots import Slot, SlotKind, slots_for

if TYPE_CHECKING:
    from ast_node_ids.protocols import Visitor
    from ast_node_ids.tree.nodes import Node

__all__ = ["Inspector", "Walker"]

logger = logging.getLogger(__name__)


class Walker:
    """Depth-first walker over the ``ast`` grammar plus named units.

    A walker holds configuration only; every ``walk`` call gets its own
    ``NodePath``, so one instance may be reused for any number of trees.

    Example::

        import ast
        from ast_node_ids.walker import Inspector, Walker

        tree = ast.parse("1 + 2 + 3", mode="eval").body
        seen = []
        Walker().walk(Inspector(lambda n, p: seen.append(str(p)) or True), tree)
        # seen == ["BinOp", "BinOp/left", "BinOp/left/left", ..., "BinOp"]
    """

    def __init__(self, config: WalkConfig | None = None) -> None:
        self._config = config if config is not None else WalkConfig()

    @property
    def config(self) -> WalkConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def walk(self, visitor: Visitor, root: Node) -> None:
        """Traverse ``root`` depth-first, calling ``visitor`` for every node.

        Args:
            visitor: Receives ``visit(node, path)`` before each node's children
                and ``visit(None, path)`` after them.
            root:    Any node of the grammar; must not be None.

        Raises:
            UnknownNodeTypeError: A node type outside the grammar was reached.
            MalformedNodeError: A node holds a wrongly shaped slot value.
        """
        if root is None:
            msg = "walk() requires a root node, got None"
            raise MalformedNodeError(msg)
        path = NodePath()
        label = self.own_label(root) or type(root).__name__
        self._walk(visitor, root, path, label)

    def own_label(self, node: Node) -> str | None:
        """Return the label ``node`` contributes itself, or None.

        Only named units carry one; everything else is identified by the slot
        it was reached through.

        Raises:
            MalformedNodeError: If the unit name contains the separator.
        """
        if isinstance(node, SourceFile):
            return _unit_label(node.name, "SourceFile name") + self._config.unit_suffix
        return None

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _walk(
        self, visitor: Visitor, node: Node, path: NodePath, label: str | None
    ) -> None:
        try:
            slots = slots_for(type(node))
        except UnknownNodeTypeError:
            logger.error("walker: unexpected node type %s at %r", type(node), str(path))
            raise

        with path.scoped(*(() if label is None else (label,))):
            inner = visitor.visit(node, path)
            if inner is None:
                visitor.visit(None, path)
                return

            for slot in slots:
                self._walk_slot(inner, node, slot, path)

            inner.visit(None, path)

    def _walk_slot(
        self, visitor: Visitor, node: Node, slot: Slot, path: NodePath
    ) -> None:
        value = getattr(node, slot.name, None)

        if slot.kind is SlotKind.ONE:
            if value is None:
                msg = f"{type(node).__name__}.{slot.name} is required but missing at {str(path)!r}"
                raise MalformedNodeError(msg)
            with path.scoped(slot.name):
                self._walk_child(visitor, value, path)
            return

        if slot.kind is SlotKind.OPTIONAL:
            if value is not None:
                with path.scoped(slot.name):
                    self._walk_child(visitor, value, path)
            return

        if value is None:
            return

        if slot.kind is SlotKind.MANY:
            if not isinstance(value, Sequence) or isinstance(value, str):
                msg = f"{type(node).__name__}.{slot.name} must be a list, got {type(value).__name__}"
                raise MalformedNodeError(msg)
            labelled: Iterable[tuple[str, Node | None]] = (
                (str(index), child) for index, child in enumerate(value)
            )
        else:
            if not isinstance(value, Mapping):
                msg = f"{type(node).__name__}.{slot.name} must be a mapping, got {type(value).__name__}"
                raise MalformedNodeError(msg)
            labelled = (
                (_unit_label(str(key), f"{type(node).__name__}.{slot.name} key"), value[key])
                for key in sorted(value)
            )

        with path.scoped(slot.name):
            self._walk_each(visitor, labelled, path)

    def _walk_each(
        self,
        visitor: Visitor,
        children: Iterable[tuple[str, Node | None]],
        path: NodePath,
    ) -> None:
        """Walk ``(label, child)`` pairs, pushing each label around its child."""
        for label, child in children:
            if child is None:
                continue
            with path.scoped(label):
                self._walk_child(visitor, child, path)

    def _walk_child(self, visitor: Visitor, child: Node, path: NodePath) -> None:
        self._walk(visitor, child, path, self.own_label(child))


def _unit_label(label: str, what: str) -> str:
    # Units stay mutable after construction, so names are rechecked here.
    if SEPARATOR in label:
        msg = f"{what} must not contain {SEPARATOR!r}, got {label!r}"
        raise MalformedNodeError(msg)
    return label


class Inspector:
    """Adapts ``fn(node, path) -> bool`` to the ``Visitor`` protocol.

    ``True`` keeps descending with the same function, ``False`` skips the
    node's children.  The finished signal reaches ``fn`` as ``node=None``;
    its return value is ignored.
    """

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[Node | None, NodePath], bool]) -> None:
        self._fn = fn

    def visit(self, node: Node | None, path: NodePath) -> Inspector | None:
        if self._fn(node, path):
            return self
        return None
