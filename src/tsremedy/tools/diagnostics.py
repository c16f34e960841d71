"""Parsing of checker output into structured diagnostic records."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

__all__ = ["Diagnostic", "format_diagnostic", "parse_diagnostics"]


_DIAGNOSTIC_RE = re.compile(
    r"^(?P<file>.+?)\((?P<line>\d+),(?P<column>\d+)\): error (?P<code>[^\s:]+): (?P<message>.+)$"
)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One finding reported by the checker or the test runner."""

    file: str
    line: int
    column: int
    code: str
    message: str
    raw_line: str

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"


def _coerce_lines(output: str | Sequence[str] | Iterable[str]) -> list[str]:
    if isinstance(output, str):
        return output.splitlines()
    lines: list[str] = []
    for chunk in output:
        lines.extend(str(chunk).splitlines())
    return lines


def parse_diagnostics(output: str | Sequence[str] | Iterable[str] | None) -> list[Diagnostic]:
    """Return diagnostics found in ``output`` in input order.

    Lines that do not have the ``file(line,col): error CODE: message`` shape
    are skipped without complaint; tool banners and summaries end up there.
    """

    if not output:
        return []

    diagnostics: list[Diagnostic] = []
    for raw in _coerce_lines(output):
        if not raw.strip():
            continue
        line = raw.strip()
        match = _DIAGNOSTIC_RE.match(line)
        if match is None:
            continue
        diagnostics.append(
            Diagnostic(
                file=match.group("file"),
                line=int(match.group("line")),
                column=int(match.group("column")),
                code=match.group("code"),
                message=match.group("message"),
                raw_line=line,
            )
        )
    return diagnostics


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic the way the remaining-errors report lists it."""
    return f"{diagnostic.location} - {diagnostic.message}"
