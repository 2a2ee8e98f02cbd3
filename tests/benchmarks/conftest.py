"""Deterministic trees for performance benchmarks.

All generators produce fixed, reproducible sources. No random values.
Three tiers: a 14-term sum expression, a 100-function module, and a
20-file package of 25 classes each.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

from ast_node_ids import Package, load_package


def generate_sum_source(terms: int) -> str:
    """``1 + 2 + ... + terms`` as one left-associative expression."""
    return " + ".join(str(i) for i in range(1, terms + 1))


def generate_module_source(functions: int) -> str:
    """A module of small functions, each with a loop, a branch and a call."""
    blocks = [
        f"def func_{i}(items, limit={i}):\n"
        f"    total = 0\n"
        f"    for item in items:\n"
        f"        if item > limit:\n"
        f"            total += item * {i}\n"
        f"    return print(total, sep='')\n"
        for i in range(functions)
    ]
    return "\n\n".join(blocks)


def generate_class_source(classes: int) -> str:
    """A module of dataclass-like classes with annotated fields and a method."""
    blocks = [
        f"class Model{i}:\n"
        f"    name: str = 'model_{i}'\n"
        f"    size: int = {i}\n"
        f"\n"
        f"    def describe(self):\n"
        f"        return f'{{self.name}}:{{self.size}}'\n"
        for i in range(classes)
    ]
    return "\n\n".join(blocks)


@pytest.fixture
def sum_14() -> ast.expr:
    """``1 + 2 + ... + 14``."""
    return ast.parse(generate_sum_source(14), mode="eval").body


@pytest.fixture
def module_100() -> ast.Module:
    """Module with 100 functions."""
    return ast.parse(generate_module_source(100))


@pytest.fixture(scope="session")
def package_20(tmp_path_factory: pytest.TempPathFactory) -> Package:
    """Package of 20 files with 25 classes each."""
    root: Path = tmp_path_factory.mktemp("bench_pkg")
    for i in range(20):
        (root / f"models_{i:02d}.py").write_text(generate_class_source(25), encoding="utf-8")
    return load_package(root)
