"""Shared fixtures and options for the ast-node-ids test suite."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

TESTDATA_DIR = Path(__file__).parent / "testdata"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add --update-golden option for regenerating golden listings."""
    parser.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="Rewrite tests/testdata/*_expected.txt with current output",
    )


@pytest.fixture
def update_golden(request: pytest.FixtureRequest) -> bool:
    """True if --update-golden was passed."""
    return bool(request.config.getoption("--update-golden"))


@pytest.fixture
def testdata_dir() -> Path:
    """Directory holding the golden source files."""
    return TESTDATA_DIR


@pytest.fixture
def sum_expr() -> ast.BinOp:
    """``1 + 2 + 3`` parsed as a left-associative BinOp chain."""
    expr = ast.parse("1 + 2 + 3", mode="eval").body
    assert isinstance(expr, ast.BinOp)
    return expr
