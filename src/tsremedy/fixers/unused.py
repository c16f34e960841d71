"""Prefix unused identifiers with an underscore on the reported line."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from ..session import LogEntry, PatchOutcome
from ..tools.classifier import Classification, FixKind
from ..tools.mutator import FileMutator

__all__ = ["UnusedVarFix", "apply_unused_fixes", "plan_unused_fixes", "rename_unused"]


@dataclass(frozen=True, slots=True)
class UnusedVarFix:
    file: str
    identifier: str
    line: int


def plan_unused_fixes(classifications: Iterable[Classification]) -> list[UnusedVarFix]:
    fixes: list[UnusedVarFix] = []
    for item in classifications:
        if item.kind is not FixKind.UNUSED_IDENTIFIER or not item.identifier:
            continue
        fix = UnusedVarFix(item.diagnostic.file, item.identifier, item.diagnostic.line)
        # A repeated diagnostic must not rename a second occurrence on the same line.
        if fix not in fixes:
            fixes.append(fix)
    return fixes


def rename_unused(
    text: str, fixes: Sequence[UnusedVarFix], missed: list[UnusedVarFix] | None = None
) -> tuple[str, list[str]]:
    """Rename the first whole-word match of each identifier on its line.

    The match is not checked against the declaration itself, so a name that
    appears twice on one line may have the wrong occurrence renamed. Fixes
    whose line is out of range or has no match are appended to ``missed``.
    """

    lines = text.split("\n")
    renamed: list[str] = []
    for fix in fixes:
        index = fix.line - 1
        pattern = re.compile(rf"(?<![\w$]){re.escape(fix.identifier)}(?![\w$])")
        if 0 <= index < len(lines):
            updated = pattern.sub(f"_{fix.identifier}", lines[index], count=1)
        else:
            updated = None
        if updated is None or updated == lines[index]:
            if missed is not None:
                missed.append(fix)
            continue
        lines[index] = updated
        renamed.append(f"Renamed unused '{fix.identifier}' on line {fix.line}")
    if not renamed:
        return text, []
    return "\n".join(lines), renamed


def apply_unused_fixes(root: Path, fixes: Iterable[UnusedVarFix], mutator: FileMutator | None = None) -> PatchOutcome:
    mutator = mutator or FileMutator(root)
    by_file: dict[str, list[UnusedVarFix]] = {}
    for fix in fixes:
        by_file.setdefault(fix.file, []).append(fix)

    outcomes: list[PatchOutcome] = []
    for file_path, file_fixes in by_file.items():
        if not mutator.resolve(file_path).exists():
            outcomes.append(PatchOutcome(entries=(LogEntry.warning(f"Skipping missing file {file_path}"),)))
            continue
        missed: list[UnusedVarFix] = []
        result = mutator.apply(
            file_path, lambda text, items=file_fixes, missed=missed: rename_unused(text, items, missed)
        )
        outcomes.append(result.to_outcome(label="fix unused variables"))
        outcomes.append(
            PatchOutcome(
                entries=tuple(
                    LogEntry.warning(f"No unused '{fix.identifier}' found on line {fix.line} of {file_path}")
                    for fix in missed
                )
            )
        )
    return PatchOutcome.combine(outcomes)
