"""
Architectural tests — enforce layer boundaries.

These tests verify that the codebase maintains proper separation of concerns:
- content/ loads the catalog and knows nothing about the layers above it
- resolvers/ and generators/ must be pure functions with no MCP or logging
- tools/ wires everything together

This keeps resolvers and generators testable without a server.
"""

import ast
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Layers and their forbidden imports
LAYER_RULES = {
    "content": {"resolvers", "generators", "tools", "server", "resources"},
    "resolvers": {"generators", "tools", "server", "resources", "mcp", "logging_config"},
    "generators": {"resolvers", "tools", "server", "resources", "mcp", "logging_config"},
    "tools": {"server", "mcp"},
    # server.py can import anything (it's the wiring layer)
}

# Pure layers may only reach shared definitions beyond the stdlib
PURE_ALLOWED = {"models", "content", "validation"}


def get_imports_from_file(filepath: Path) -> set[str]:
    """Extract absolute import roots from a Python file (relative imports stay in-package)."""
    try:
        with open(filepath) as f:
            tree = ast.parse(f.read(), filename=str(filepath))
    except SyntaxError:
        return set()

    imports = set()

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name.split(".")[0])
        elif isinstance(node, ast.ImportFrom):
            if node.module and node.level == 0:
                imports.add(node.module.split(".")[0])

    return imports


def get_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory (non-recursive for top-level packages)."""
    if not directory.exists():
        return []
    return list(directory.glob("*.py"))


class TestLayerBoundaries:
    """Verify that layer boundaries are respected."""

    @pytest.mark.parametrize("layer,forbidden", list(LAYER_RULES.items()))
    def test_layer_does_not_import_forbidden(self, layer: str, forbidden: set[str]) -> None:
        """Each layer must not import from its forbidden layers."""
        layer_dir = PROJECT_ROOT / layer
        violations = []

        for filepath in get_python_files(layer_dir):
            imports = get_imports_from_file(filepath)
            bad_imports = imports & forbidden

            if bad_imports:
                violations.append(
                    f"{filepath.name} imports {bad_imports}"
                )

        assert not violations, (
            f"Layer '{layer}' has forbidden imports:\n" +
            "\n".join(f"  - {v}" for v in violations)
        )

    @pytest.mark.parametrize("layer", ["resolvers", "generators"])
    def test_layer_is_pure(self, layer: str) -> None:
        """
        Resolvers and generators only import the stdlib and shared definitions.

        No third-party packages, no side effects at call time.
        """
        stdlib_modules = getattr(sys, "stdlib_module_names", set())
        violations = []

        for filepath in get_python_files(PROJECT_ROOT / layer):
            non_stdlib = get_imports_from_file(filepath) - stdlib_modules - PURE_ALLOWED
            if non_stdlib:
                violations.append(f"{filepath.name} imports non-stdlib: {non_stdlib}")

        assert not violations, (
            f"{layer} must be pure (stdlib only):\n" +
            "\n".join(f"  - {v}" for v in violations)
        )


class TestPackageStructure:
    """Verify expected package structure exists."""

    @pytest.mark.parametrize("package", ["content", "resolvers", "generators", "tools"])
    def test_package_has_init(self, package: str) -> None:
        """Each package must have an __init__.py."""
        init_file = PROJECT_ROOT / package / "__init__.py"
        assert init_file.exists(), f"{package}/__init__.py missing"

    def test_data_is_not_package(self) -> None:
        """content/data/ is the markdown catalog, not a Python package."""
        data_dir = PROJECT_ROOT / "content" / "data"
        assert data_dir.is_dir()
        assert not list(data_dir.rglob("*.py")), "content/data/ should hold markdown only"
