"""Exception hierarchy for ast-node-ids.

Every error raised by the walker is a programming or configuration error:
the tree has a shape the grammar does not know about, or a path was popped
more often than it was pushed.  None of them are recoverable and the library
never catches them itself.
"""

from __future__ import annotations

__all__ = [
    "MalformedNodeError",
    "NodeIdError",
    "PathUnderflowError",
    "UnknownNodeTypeError",
]


class NodeIdError(Exception):
    """Base class for all ast-node-ids errors."""


class UnknownNodeTypeError(NodeIdError, TypeError):
    """A node whose type is not part of the grammar reached the walker."""

    def __init__(self, node_type: type) -> None:
        self.node_type = node_type
        super().__init__(
            f"walker: unexpected node type {node_type.__module__}.{node_type.__qualname__}"
        )


class MalformedNodeError(NodeIdError, ValueError):
    """A known node variant holds a value of the wrong shape in one of its slots."""


class PathUnderflowError(NodeIdError, IndexError):
    """``NodePath.pop()`` was called on an empty path."""
