#!/usr/bin/env python3
"""
Fail if core imports the domain layer (services, models).
Checks all Python files under src/mizu_portal_api/core/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "mizu_portal_api" / "core"

FORBIDDEN_PREFIXES = (
    "mizu_portal_api.services",
    "mizu_portal_api.models",
)
# Same modules reached relatively from inside core/ (from ..services import x).
FORBIDDEN_RELATIVE = ("services", "models")


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def is_forbidden_relative(node: ast.ImportFrom) -> bool:
    if node.level < 2:
        return False
    if node.module:
        return node.module.split(".")[0] in FORBIDDEN_RELATIVE
    return any(alias.name in FORBIDDEN_RELATIVE for alias in node.names)


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if node.level == 0 and mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
            elif is_forbidden_relative(node):
                dots = "." * node.level
                errors.append(f"{path}: forbidden import '{dots}{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in CORE_DIR.rglob("*.py"):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
