"""NodePath: the stack of labels that locates a node inside a tree.

A single ``NodePath`` is threaded through a whole walk and mutated in place:
each descent pushes one or more labels and the matching ascent pops them.
``scoped()`` pairs the two so that every push is undone on every exit path,
including pruned subtrees and exceptions raised by a visitor.

Whenever a path must outlive the frame that produced it (a visitor storing
it, a map entry), take a frozen copy with ``dup()`` or ``pushed()``.

Example::

    path = NodePath()
    with path.scoped("BinOp"):
        with path.scoped("left"):
            str(path)           # "BinOp/left"
        saved = path.dup()      # survives the with-block
    str(path)                   # ""
    str(saved)                  # "BinOp"
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager

from ast_node_ids.errors import PathUnderflowError

__all__ = ["SEPARATOR", "NodePath"]

SEPARATOR = "/"


class NodePath:
    """Ordered sequence of string labels, used as a stack.

    Args:
        labels: Initial labels, root first.  Defaults to an empty path.
    """

    __slots__ = ("_labels",)

    def __init__(self, labels: Iterable[str] = ()) -> None:
        self._labels: list[str] = list(labels)

    # ------------------------------------------------------------------
    # Stack operations
    # ------------------------------------------------------------------

    def push(self, label: str) -> None:
        """Append ``label`` to the end of the path."""
        self._labels.append(label)

    def pop(self) -> str:
        """Remove and return the last label.

        Raises:
            PathUnderflowError: If the path is empty.
        """
        if not self._labels:
            msg = "pop from an empty NodePath"
            raise PathUnderflowError(msg)
        return self._labels.pop()

    def pushed(self, *labels: str) -> NodePath:
        """Return a copy of this path with ``labels`` appended.

        The receiver is not modified.
        """
        return NodePath([*self._labels, *labels])

    def dup(self) -> NodePath:
        """Return an independent copy of this path."""
        return NodePath(self._labels)

    @contextmanager
    def scoped(self, *labels: str) -> Iterator[NodePath]:
        """Push ``labels`` for the duration of a with-block.

        Exactly ``len(labels)`` labels are popped when the block exits,
        whether it finishes normally, returns early or raises.  Calling it
        with no labels is a no-op scope.
        """
        for label in labels:
            self._labels.append(label)
        try:
            yield self
        finally:
            for _ in labels:
                self.pop()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def labels(self) -> tuple[str, ...]:
        """Snapshot of the labels, root first."""
        return tuple(self._labels)

    def is_prefix_of(self, labels: Sequence[str]) -> bool:
        """Return True if this path is a (non-strict) prefix of ``labels``."""
        n = len(self._labels)
        return n <= len(labels) and list(labels[:n]) == self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._labels))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodePath):
            return NotImplemented
        return self._labels == other._labels

    # Mutable: equal paths may stop being equal, so never hashable.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return SEPARATOR.join(self._labels)

    def __repr__(self) -> str:
        return f"NodePath({str(self)!r})"
