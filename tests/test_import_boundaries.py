"""
Import Boundary Tests.

Validates that architectural import rules are followed:
- web/services/* may ONLY import from core/*
- core/* may NOT import from web/, flask, werkzeug
"""

import ast
from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def get_imports_from_file(filepath: Path) -> list[tuple[str, int]]:
    """
    Extract all import statements from a Python file.

    Returns:
        List of (module_name, line_number) tuples
    """
    imports = []
    with open(filepath, encoding="utf-8") as f:
        tree = ast.parse(f.read(), filename=str(filepath))

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append((alias.name, node.lineno))
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.append((node.module, node.lineno))

    return imports


def find_violations(directory: Path, is_forbidden) -> list[str]:
    violations = []
    for py_file in sorted(directory.glob("*.py")):
        if py_file.name == "__init__.py":
            continue
        for module, line in get_imports_from_file(py_file):
            if is_forbidden(module):
                violations.append(f"{py_file.name}:{line} imports {module}")
    return violations


class TestLayerBoundaries:
    """Tests for core/web layer import boundaries."""

    def test_services_only_import_from_core(self):
        """web/services/* should only import from core/* (plus stdlib typing)."""
        services_dir = get_project_root() / "web" / "services"

        def _forbidden(module: str) -> bool:
            return module.split(".")[0] in ("web", "flask", "werkzeug", "config", "logging_config")

        violations = find_violations(services_dir, _forbidden)

        assert len(violations) == 0, (
            "Services should only import from core/*. Violations:\n"
            + "\n".join(violations)
        )

    def test_core_does_not_import_web(self):
        """core/* should never import from web/, flask, werkzeug."""
        core_dir = get_project_root() / "core"

        def _forbidden(module: str) -> bool:
            return module.split(".")[0] in ("web", "flask", "werkzeug")

        violations = find_violations(core_dir, _forbidden)

        assert len(violations) == 0, (
            "Core should never import web layer. Violations:\n"
            + "\n".join(violations)
        )


class TestModuleStructure:
    """Tests for module structure integrity."""

    def test_core_modules_exist(self):
        core_dir = get_project_root() / "core"

        for name in ["image_registry.py", "ingest_core.py", "viewer_core.py"]:
            assert (core_dir / name).exists(), f"Missing core module: {name}"

    def test_each_core_module_has_a_service_counterpart(self):
        """Every command in viewer_core is reachable through viewer_service."""
        from core import viewer_core
        from web.services import viewer_service

        for name in ["get_image_paths", "add_image", "quit_app"]:
            assert callable(getattr(viewer_core, name))
            assert callable(getattr(viewer_service, name))
