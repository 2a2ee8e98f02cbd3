"""Tree subpackage: the grammar the walker understands.

Re-exports the public API for the tree module:
- SourceFile, Package: named top-level units wrapping ``ast.Module``
- Slot, SlotKind, SLOT_TABLE, slots_for: per-variant ordered child slots
- parse_source, load_package: wrappers around the external parser
"""

from ast_node_ids.tree.builder import load_package, parse_source, source_files
from ast_node_ids.tree.nodes import Node, Package, SourceFile
from ast_node_ids.tree.slots import SLOT_TABLE, Slot, SlotKind, slots_for

__all__ = [
    "SLOT_TABLE",
    "Node",
    "Package",
    "Slot",
    "SlotKind",
    "SourceFile",
    "load_package",
    "parse_source",
    "slots_for",
    "source_files",
]
