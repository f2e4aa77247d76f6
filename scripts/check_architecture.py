#!/usr/bin/env python3
"""Layering checks: codecs stay pure, the application stays transport-free."""

from __future__ import annotations

import ast
from pathlib import Path

PACKAGE = Path(__file__).resolve().parents[1] / "src" / "bytes_converter"

# directory -> import prefixes it must never reach
BANNED: dict[str, tuple[str, ...]] = {
    "codecs": (
        "bytes_converter.application",
        "bytes_converter.cli",
        "bytes_converter.converter",
        "bytes_converter.views",
        "typer",
        "fastapi",
        "pydantic",
    ),
    "application": ("bytes_converter.cli", "bytes_converter.converter", "typer", "fastapi"),
}


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    found: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            found.add(node.module)
    return found


def main() -> None:
    """Run repository architecture boundary checks."""
    for layer, banned in BANNED.items():
        for path in sorted((PACKAGE / layer).glob("*.py")):
            for module in _imported_modules(path):
                if module.startswith(banned):
                    raise SystemExit(
                        f"Architecture violation in {path.relative_to(PACKAGE)}: imports '{module}'"
                    )
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
