"""Packaging correctness verification for ast-node-ids.

Tests validate:
- Base install imports cleanly with only cachetools as a dependency
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install exposes the documented entry points."""

    def test_import_ast_node_ids(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import ast_node_ids

        assert hasattr(ast_node_ids, "walk")
        assert hasattr(ast_node_ids, "inspect")
        assert hasattr(ast_node_ids, "build_map")
        assert hasattr(ast_node_ids, "resolve")

    def test_build_map_basic(self):  # type: ignore[no-untyped-def]
        """build_map() works on a freshly parsed expression."""
        import ast

        from ast_node_ids import build_map

        expr = ast.parse("1 + 2", mode="eval").body
        assert build_map(expr).identifier(expr) == "BinOp"


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert "ast_node_ids/py.typed" in names, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "ast_node_ids/__init__.py",
            "ast_node_ids/api.py",
            "ast_node_ids/config.py",
            "ast_node_ids/dump.py",
            "ast_node_ids/errors.py",
            "ast_node_ids/mapper.py",
            "ast_node_ids/path.py",
            "ast_node_ids/protocols.py",
            "ast_node_ids/result.py",
            "ast_node_ids/walker.py",
            "ast_node_ids/tree/__init__.py",
            "ast_node_ids/tree/builder.py",
            "ast_node_ids/tree/nodes.py",
            "ast_node_ids/tree/slots.py",
            "ast_node_ids/integrations/__init__.py",
            "ast_node_ids/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert module in names, f"Module {module} not found in wheel"

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if n.endswith("METADATA")]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "ast-node-ids" in metadata.lower() or "ast_node_ids" in metadata.lower()
            assert "0.1.0" in metadata
            assert "cachetools" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for ast-node-ids."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")
        ours = [ep for ep in pytest11_eps if ep.value.startswith("ast_node_ids.")]
        assert ours, (
            f"No pytest11 entry point found for ast-node-ids. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_unique_node_ids fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("ast_node_ids.integrations._pytest_plugin")
        assert hasattr(mod, "assert_unique_node_ids")
        assert callable(mod.assert_unique_node_ids)


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import ast_node_ids

        assert ast_node_ids.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import ast_node_ids

        expected = {
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
        }
        actual = set(ast_node_ids.__all__)
        assert expected == actual, f"Missing: {expected - actual}, Extra: {actual - expected}"
        for name in actual:
            assert hasattr(ast_node_ids, name)
