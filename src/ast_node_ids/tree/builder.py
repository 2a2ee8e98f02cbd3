"""Loaders that wrap the external parser into named units.

Parsing itself is delegated to ``ast.parse``; this module only enumerates
files and packages the results into ``SourceFile`` / ``Package`` nodes so
that they carry the names identifiers are built from.

Directory enumeration is deliberately shallow and deterministic:
- only regular files whose suffix is ``.py`` are picked up,
- files are read in sorted name order,
- the module name is the file stem (``greet.py`` -> ``"greet"``).
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path

from ast_node_ids.tree.nodes import Package, SourceFile

__all__ = ["load_package", "parse_source", "source_files"]

logger = logging.getLogger(__name__)


def parse_source(source: str, name: str, filename: str = "<unknown>") -> SourceFile:
    """Parse ``source`` and wrap the resulting module as a ``SourceFile``.

    Args:
        source:   Python source text.
        name:     Module name used for the file's own label.
        filename: Reported in syntax errors and kept on the node.

    Returns:
        A ``SourceFile`` holding the parsed ``ast.Module``.

    Raises:
        SyntaxError: Propagated unchanged from ``ast.parse``.
    """
    module = ast.parse(source, filename=filename, type_comments=True)
    return SourceFile(name=name, module=module, filename=filename)


def source_files(directory: str | Path) -> list[Path]:
    """Return the ``.py`` regular files directly inside ``directory``, sorted."""
    root = Path(directory)
    return sorted(p for p in root.iterdir() if p.is_file() and p.suffix == ".py")


def load_package(directory: str | Path) -> Package:
    """Parse every source file in ``directory`` into a ``Package``.

    Args:
        directory: Directory to read.  Subdirectories are not entered.

    Returns:
        A ``Package`` named after the directory, with one ``SourceFile`` per
        ``.py`` file keyed by module name.

    Raises:
        SyntaxError: If any file fails to parse.
    """
    root = Path(directory)
    package = Package(name=root.name)
    for path in source_files(root):
        source = path.read_text(encoding="utf-8")
        package.files[path.stem] = parse_source(source, path.stem, filename=str(path))
        logger.debug("parsed %s as module %r", path, path.stem)
    logger.debug("loaded package %r with %d files", package.name, len(package.files))
    return package
