"""ast-node-ids - stable structural identifiers for Python AST nodes."""

from __future__ import annotations

from ast_node_ids.api import build_map, collect_all, inspect, resolve, walk
from ast_node_ids.config import WalkConfig
from ast_node_ids.dump import dump
from ast_node_ids.errors import (
    MalformedNodeError,
    NodeIdError,
    PathUnderflowError,
    UnknownNodeTypeError,
)
from ast_node_ids.mapper import NodeMap, find_duplicates
from ast_node_ids.path import NodePath
from ast_node_ids.protocols import Visitor
from ast_node_ids.result import NodeWithId
from ast_node_ids.tree import Package, SourceFile, load_package, parse_source
from ast_node_ids.walker import Walker

__version__: str = "0.1.0"
__all__: list[str] = [
    "MalformedNodeError",
    "NodeIdError",
    "NodeMap",
    "NodePath",
    "NodeWithId",
    "Package",
    "PathUnderflowError",
    "SourceFile",
    "UnknownNodeTypeError",
    "Visitor",
    "WalkConfig",
    "Walker",
    "build_map",
    "collect_all",
    "dump",
    "find_duplicates",
    "inspect",
    "load_package",
    "parse_source",
    "resolve",
    "walk",
]
