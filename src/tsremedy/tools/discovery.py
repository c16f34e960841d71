"""Locate test files under a project directory."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator

__all__ = ["SKIPPED_DIRECTORIES", "TEST_FILE_RE", "find_test_files", "is_skipped_directory"]

TEST_FILE_RE = re.compile(r"\.(test|spec)\.(ts|tsx|js|jsx)$")
SKIPPED_DIRECTORIES = frozenset({"node_modules", "__snapshots__", "coverage", ".next"})


def is_skipped_directory(name: str) -> bool:
    """Return ``True`` for dependency caches and other generated directories."""
    return "node_modules" in name or name in SKIPPED_DIRECTORIES or name.startswith(".")


def _walk(directory: Path) -> Iterator[Path]:
    for entry in sorted(directory.iterdir(), key=lambda path: path.name):
        if entry.is_dir():
            if not is_skipped_directory(entry.name):
                yield from _walk(entry)
        elif TEST_FILE_RE.search(entry.name):
            yield entry


def find_test_files(start: Path, *, root: Path | None = None) -> list[Path]:
    """Return test files below ``start``, relative to ``root`` when given."""
    if not start.is_dir():
        return []
    found = list(_walk(start))
    if root is None:
        return found
    relative: list[Path] = []
    for path in found:
        try:
            relative.append(path.relative_to(root))
        except ValueError:
            relative.append(path)
    return relative
