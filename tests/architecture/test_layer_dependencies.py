"""
Architecture tests to enforce layer boundaries.

Rules enforced:
- domain/ imports nothing from application/, shared/ or logging frameworks
- application/ does not import the entry point module
"""

import ast
import os
from pathlib import Path

import pytest

PACKAGE_PATH = Path(__file__).parent.parent.parent / "abstract_factory"


def get_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory recursively."""
    python_files = []
    if not directory.exists():
        return python_files

    for root, dirs, files in os.walk(directory):
        # Skip __pycache__ directories
        dirs[:] = [d for d in dirs if d != "__pycache__"]

        for file in files:
            if file.endswith(".py"):
                python_files.append(Path(root) / file)

    return python_files


def extract_imports(file_path: Path) -> set[str]:
    """Extract all absolute import targets from a Python file."""
    imports = set()

    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except (SyntaxError, UnicodeDecodeError) as e:
        pytest.fail(f"Failed to parse {file_path}: {e}")

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            # Relative imports stay within the same package
            if node.level > 0:
                continue
            if node.module:
                imports.add(node.module)

    return imports


def find_violations(layer: str, forbidden_prefixes: list[str]) -> list[str]:
    violations = []
    for file_path in get_python_files(PACKAGE_PATH / layer):
        for import_name in extract_imports(file_path):
            if any(
                import_name == prefix or import_name.startswith(prefix + ".")
                for prefix in forbidden_prefixes
            ):
                relative_path = file_path.relative_to(PACKAGE_PATH)
                violations.append(f"{relative_path}: imports {import_name}")
    return violations


class TestDomainLayerPurity:
    """Domain layer has no framework or upper-layer dependencies."""

    def test_domain_has_no_framework_imports(self):
        violations = find_violations("domain", ["structlog", "logging", "pytest"])

        assert not violations, "Domain imports frameworks:\n" + "\n".join(violations)

    def test_domain_does_not_import_upper_layers(self):
        violations = find_violations(
            "domain",
            ["abstract_factory.application", "abstract_factory.shared", "abstract_factory.main"],
        )

        assert not violations, "Domain imports upper layers:\n" + "\n".join(violations)


class TestApplicationLayer:

    def test_application_does_not_import_entry_point(self):
        violations = find_violations(
            "application", ["abstract_factory.main", "abstract_factory.__main__"]
        )

        assert not violations, "Application imports entry point:\n" + "\n".join(violations)
