"""WalkConfig: immutable settings for identifier construction."""

from __future__ import annotations

from dataclasses import dataclass

from ast_node_ids.path import SEPARATOR

__all__ = ["WalkConfig"]


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Immutable configuration for the walker.

    Attributes:
        unit_suffix: Appended to a ``SourceFile`` name to form its own label,
            e.g. ``"greet"`` -> ``"greet.py"``.  Must start with ``"."`` and
            must not contain the path separator.  Use ``".pyi"`` for stubs.
    """

    unit_suffix: str = ".py"

    def __post_init__(self) -> None:
        if len(self.unit_suffix) < 2 or not self.unit_suffix.startswith("."):
            msg = f"unit_suffix must be '.' followed by at least one character, got {self.unit_suffix!r}"
            raise ValueError(msg)
        if SEPARATOR in self.unit_suffix:
            msg = f"unit_suffix must not contain {SEPARATOR!r}, got {self.unit_suffix!r}"
            raise ValueError(msg)
