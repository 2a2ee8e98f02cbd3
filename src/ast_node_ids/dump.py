"""Textual listing of a walk, one line per node.

Line format (the golden-file contract)::

    " {variant:<15} | {source:<31.31} | {identifier}"

``source`` is the node rendered back to code by ``ast.unparse`` with newlines
written as the two characters ``\\n``, padded or cut to 31 columns.  Nodes
that render to nothing (an empty ``arguments``, a ``Package``) show
``(n/a)``.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from ast_node_ids.mapper import collect_all
from ast_node_ids.tree.nodes import SourceFile

if TYPE_CHECKING:
    from ast_node_ids.config import WalkConfig
    from ast_node_ids.result import NodeWithId
    from ast_node_ids.tree.nodes import Node

__all__ = ["describe", "dump", "format_entry"]

_NOT_APPLICABLE = "(n/a)"


def describe(node: Node) -> str:
    """Render ``node`` as source text, or ``"(n/a)"`` when it has none."""
    if isinstance(node, SourceFile):
        node = node.module
    if not isinstance(node, ast.AST):
        return _NOT_APPLICABLE
    return ast.unparse(node) or _NOT_APPLICABLE


def format_entry(entry: NodeWithId) -> str:
    """Format one collected node as a dump line (no trailing newline)."""
    source = describe(entry.node).replace("\n", "\\n")
    return f" {type(entry.node).__name__:<15} | {source:<31.31} | {entry.node_id}"


def dump(root: Node, config: WalkConfig | None = None) -> str:
    """Walk ``root`` and return the full listing, newline terminated."""
    return "".join(format_entry(entry) + "\n" for entry in collect_all(root, config))
