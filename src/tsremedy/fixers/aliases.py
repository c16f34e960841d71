"""Rewrite path aliases in test files into real relative paths."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable, Mapping

from ..catalogue import ALIAS_MAP
from ..session import PatchOutcome
from ..tools.mutator import FileMutator

__all__ = ["alias_target", "apply_alias_fixes", "rewrite_aliases"]

_ALIAS_IMPORT_RE = re.compile(r"""\bfrom\s*['"]@/|^\s*import\s*['"]@/""")


def alias_target(test_file: Path, target: str, root: Path) -> str:
    """Return the path from ``test_file``'s directory to ``target``, in POSIX form."""
    start = (root / test_file).parent if not test_file.is_absolute() else test_file.parent
    relative = os.path.relpath(root / target, start).replace("\\", "/")
    if relative.startswith("."):
        return relative
    return f"./{relative}"


def rewrite_aliases(
    text: str,
    test_file: Path,
    root: Path,
    aliases: Mapping[str, str] = ALIAS_MAP,
) -> tuple[str, list[str]]:
    """Replace alias tokens on import lines with relative paths.

    The substitution is a plain substring replace on the matched line, so an
    alias appearing elsewhere on that line is rewritten too.
    """

    lines = text.split("\n")
    rewrites: list[str] = []
    for index, line in enumerate(lines):
        if not _ALIAS_IMPORT_RE.search(line):
            continue
        current = line
        for alias, target in aliases.items():
            if alias not in current:
                continue
            relative = alias_target(test_file, target, root)
            current = current.replace(alias, relative, 1)
            rewrites.append(f"Fixed import: {alias} -> {relative}")
        lines[index] = current
    if not rewrites:
        return text, []
    return "\n".join(lines), rewrites


def apply_alias_fixes(root: Path, test_files: Iterable[Path], mutator: FileMutator | None = None) -> PatchOutcome:
    mutator = mutator or FileMutator(root)
    outcomes: list[PatchOutcome] = []
    for test_file in test_files:
        relative = test_file
        if test_file.is_absolute():
            try:
                relative = test_file.relative_to(root)
            except ValueError:
                relative = test_file
        result = mutator.apply(
            relative, lambda text, path=relative: rewrite_aliases(text, path, root)
        )
        outcomes.append(result.to_outcome(label="fix imports"))
    return PatchOutcome.combine(outcomes)
