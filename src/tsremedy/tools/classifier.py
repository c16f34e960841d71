"""Assign each diagnostic to the fixer that can resolve it."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..catalogue import namespace_import, suggest_import
from .diagnostics import Diagnostic

__all__ = [
    "Classification",
    "FixKind",
    "classify",
    "classify_all",
]


class FixKind(str, Enum):
    """Categories a diagnostic can be sorted into."""

    MISSING_IMPORT = "missing_import"
    NAMESPACE_IMPORT = "namespace_import"
    UNUSED_IDENTIFIER = "unused_identifier"
    MANUAL_REVIEW = "manual_review"
    UNRESOLVED = "unresolved"

    @property
    def fixable(self) -> bool:
        return self in {FixKind.MISSING_IMPORT, FixKind.NAMESPACE_IMPORT, FixKind.UNUSED_IDENTIFIER}


MISSING_NAME_CODE = "TS2304"
UMD_GLOBAL_CODE = "TS2686"
UNUSED_CODE = "TS6133"
IMPLICIT_ANY_CODE = "TS7006"

_MISSING_NAME_RE = re.compile(r"Cannot find name '(?P<name>\w+)'")
_UMD_GLOBAL_RE = re.compile(r"'(?P<name>\w+)' refers to a UMD global")
_UNUSED_RE = re.compile(r"'(?P<name>[\w$]+)' is declared but (?:its value is )?never (?:used|read)")


@dataclass(frozen=True, slots=True)
class Classification:
    """A diagnostic paired with the fix kind chosen for it."""

    diagnostic: Diagnostic
    kind: FixKind
    identifier: str | None = None
    statement: str | None = None
    reason: str = ""

    @property
    def needs_review(self) -> bool:
        return not self.kind.fixable


def classify(diagnostic: Diagnostic) -> Classification:
    """Classify a single diagnostic by its code and message text."""
    message = diagnostic.message

    if diagnostic.code == UMD_GLOBAL_CODE:
        match = _UMD_GLOBAL_RE.search(message)
        if match:
            name = match.group("name")
            statement = namespace_import(name)
            if statement:
                return Classification(diagnostic, FixKind.NAMESPACE_IMPORT, name, statement)
            return Classification(
                diagnostic, FixKind.UNRESOLVED, name, reason=f"no known import for namespace '{name}'"
            )

    if diagnostic.code == MISSING_NAME_CODE:
        match = _MISSING_NAME_RE.search(message)
        if match:
            name = match.group("name")
            statement = suggest_import(name)
            if statement:
                return Classification(diagnostic, FixKind.MISSING_IMPORT, name, statement)
            return Classification(diagnostic, FixKind.UNRESOLVED, name, reason=f"no known import for '{name}'")

    if diagnostic.code == UNUSED_CODE:
        match = _UNUSED_RE.search(message)
        if match:
            return Classification(diagnostic, FixKind.UNUSED_IDENTIFIER, match.group("name"))

    if diagnostic.code == IMPLICIT_ANY_CODE and "implicitly has an 'any' type" in message:
        return Classification(diagnostic, FixKind.MANUAL_REVIEW, reason="type annotation")

    return Classification(diagnostic, FixKind.UNRESOLVED, reason=f"no fixer for {diagnostic.code}")


def classify_all(diagnostics: Iterable[Diagnostic]) -> list[Classification]:
    return [classify(diagnostic) for diagnostic in diagnostics]
