"""Insert missing import statements after a file's leading import block."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Sequence

from ..session import LogEntry, PatchOutcome
from ..tools.classifier import Classification, FixKind
from ..tools.mutator import FileMutator

__all__ = [
    "ImportFix",
    "apply_import_fixes",
    "import_insertion_index",
    "insert_imports",
    "line_ending",
    "plan_import_fixes",
]

# file -> statements; the inner dict is an insertion-ordered set.
ImportFix = dict[str, dict[str, None]]


def plan_import_fixes(classifications: Iterable[Classification]) -> ImportFix:
    """Collect the import statements each file needs."""
    fixes: ImportFix = {}
    for item in classifications:
        if item.kind not in {FixKind.MISSING_IMPORT, FixKind.NAMESPACE_IMPORT} or not item.statement:
            continue
        fixes.setdefault(item.diagnostic.file, {})[item.statement] = None
    return fixes


def _is_import_line(line: str) -> bool:
    return line.startswith("import ")


def import_insertion_index(lines: Sequence[str]) -> int:
    """Return the index just past the first contiguous run of import lines.

    Blank lines inside the run belong to it. Anything before the first import
    (comments, directives) is skipped. Returns 0 when the file has no imports.
    """

    insert_index = 0
    index = 0
    while index < len(lines):
        line = lines[index]
        if _is_import_line(line):
            if "{" in line and "}" not in line:
                # Multi-line named import; the statement ends at the closing brace.
                while index + 1 < len(lines) and "}" not in lines[index]:
                    index += 1
            insert_index = index + 1
        elif not line.strip() or insert_index == 0:
            pass
        else:
            break
        index += 1
    return insert_index


def line_ending(text: str) -> str:
    """Return the newline sequence ``text`` uses, CRLF when any line has one."""
    return "\r\n" if "\r\n" in text else "\n"


def _already_present(text: str, statement: str) -> bool:
    needle = statement[:-1] if statement.endswith(";") else statement
    return needle in text


def insert_imports(text: str, statements: Iterable[str]) -> tuple[str, list[str]]:
    """Insert each statement not already present and return what was added."""
    newline = line_ending(text)
    lines = text.split(newline)
    insert_index = import_insertion_index(lines)
    inserted: list[str] = []
    for statement in statements:
        if _already_present(newline.join(lines), statement):
            continue
        lines.insert(insert_index, statement)
        insert_index += 1
        inserted.append(statement)
    if not inserted:
        return text, []
    return newline.join(lines), inserted


def apply_import_fixes(root: Path, fixes: Mapping[str, Iterable[str]], mutator: FileMutator | None = None) -> PatchOutcome:
    """Apply ``fixes`` file by file; failures are logged and skipped."""
    mutator = mutator or FileMutator(root)
    outcomes: list[PatchOutcome] = []
    for file_path, statements in fixes.items():
        if not mutator.resolve(file_path).exists():
            outcomes.append(PatchOutcome(entries=(LogEntry.warning(f"Skipping missing file {file_path}"),)))
            continue
        wanted = list(statements)

        def _transform(text: str, wanted: list[str] = wanted) -> tuple[str, list[str]]:
            updated, inserted = insert_imports(text, wanted)
            return updated, [f"Added import: {statement}" for statement in inserted]

        result = mutator.apply(file_path, _transform)
        outcomes.append(result.to_outcome(label="fix imports"))
    return PatchOutcome.combine(outcomes)
