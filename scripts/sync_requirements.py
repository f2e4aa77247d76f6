#!/usr/bin/env python3
"""Regenerate or verify requirements.txt from pyproject.toml.

Usage: ``sync_requirements.py`` checks, ``sync_requirements.py --write`` rewrites.
"""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
RUNTIME_EXTRAS = ("cli", "server")
HEADER = (
    f"# Generated from pyproject.toml (base + extras: {','.join(RUNTIME_EXTRAS)})\n"
    "# Do not edit manually; run: uv run python scripts/sync_requirements.py --write\n"
    "\n"
)


def _declared() -> list[str]:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    deps = set(project.get("dependencies", []))
    for extra in RUNTIME_EXTRAS:
        deps.update(project.get("optional-dependencies", {}).get(extra, []))
    return sorted(dep.strip() for dep in deps if dep.strip())


def render(declared: list[str]) -> str:
    return HEADER + "\n".join(declared) + "\n"


def _pinned(path: Path) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    return sorted(
        entry for entry in (line.split("#", 1)[0].strip() for line in lines) if entry
    )


def main() -> None:
    """Check (or rewrite) requirements.txt against pyproject.toml."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--write", action="store_true", help="Rewrite requirements.txt.")
    args = parser.parse_args()

    target = ROOT / "requirements.txt"
    declared = _declared()
    if args.write:
        target.write_text(render(declared), encoding="utf-8")
        print(f"Wrote {len(declared)} requirements to {target.name}")
        return

    pinned = _pinned(target)
    if pinned != declared:
        missing = sorted(set(declared) - set(pinned))
        extra = sorted(set(pinned) - set(declared))
        raise SystemExit(
            "requirements.txt is out of sync with pyproject.toml.\n"
            f"Missing: {missing or '-'}\nUnexpected: {extra or '-'}\n"
            "Run: uv run python scripts/sync_requirements.py --write"
        )
    if target.read_text(encoding="utf-8") != render(declared):
        raise SystemExit(
            "requirements.txt header or layout is stale.\n"
            "Run: uv run python scripts/sync_requirements.py --write"
        )
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
