"""Named top-level units layered on top of the standard ``ast`` grammar.

``ast.parse`` produces a nameless ``ast.Module``.  To give files a
human-meaningful identifier, and to address several of them side by side,
two container variants wrap the parser's output:

- ``SourceFile``: one parsed file.  Its own label is ``name + unit_suffix``
  (``"greet.py"``), so it stays addressable by name rather than by position.
- ``Package``:    a set of ``SourceFile`` objects keyed by module name.

Both are compared by identity (``eq=False``) like ``ast`` nodes, so they can
be used as keys in identity-based lookups.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from typing import TypeAlias

from ast_node_ids.errors import MalformedNodeError
from ast_node_ids.path import SEPARATOR

__all__ = ["Node", "Package", "SourceFile"]


@dataclass(eq=False, slots=True)
class SourceFile:
    """A parsed source file.

    Attributes:
        name:     Module name without suffix, e.g. ``"greet"``.
        module:   The ``ast.Module`` produced by the parser.
        filename: Where the source came from; informational only.
    """

    name: str
    module: ast.Module
    filename: str = "<unknown>"

    def __post_init__(self) -> None:
        if SEPARATOR in self.name:
            msg = f"SourceFile name must not contain {SEPARATOR!r}, got {self.name!r}"
            raise MalformedNodeError(msg)


@dataclass(eq=False, slots=True)
class Package:
    """A directory of source files.

    Attributes:
        name:  Package name, usually the directory name.
        files: Source files keyed by module name.  Walked in sorted key
               order, never in insertion order.
    """

    name: str
    files: dict[str, SourceFile] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key in self.files:
            if SEPARATOR in key:
                msg = f"Package file key must not contain {SEPARATOR!r}, got {key!r}"
                raise MalformedNodeError(msg)


Node: TypeAlias = ast.AST | SourceFile | Package
