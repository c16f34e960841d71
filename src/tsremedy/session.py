"""Per-run result values threaded through the fixing pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Iterable

__all__ = ["FixSession", "LogCategory", "LogEntry", "PatchOutcome"]


class LogCategory(str, Enum):
    """Prefix attached to each line of the run log."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    SNAPSHOT = "snapshot"


@dataclass(frozen=True, slots=True)
class LogEntry:
    category: LogCategory
    message: str

    def render(self) -> str:
        return f"[{self.category.value}] {self.message}"

    @classmethod
    def info(cls, message: str) -> "LogEntry":
        return cls(LogCategory.INFO, message)

    @classmethod
    def success(cls, message: str) -> "LogEntry":
        return cls(LogCategory.SUCCESS, message)

    @classmethod
    def warning(cls, message: str) -> "LogEntry":
        return cls(LogCategory.WARNING, message)

    @classmethod
    def error(cls, message: str) -> "LogEntry":
        return cls(LogCategory.ERROR, message)

    @classmethod
    def snapshot(cls, message: str) -> "LogEntry":
        return cls(LogCategory.SNAPSHOT, message)


@dataclass(frozen=True, slots=True)
class PatchOutcome:
    """What a single fixing stage did: files written plus its log lines."""

    touched: tuple[Path, ...] = ()
    entries: tuple[LogEntry, ...] = ()

    @property
    def warnings(self) -> tuple[str, ...]:
        return tuple(
            entry.message
            for entry in self.entries
            if entry.category in {LogCategory.WARNING, LogCategory.ERROR}
        )

    def __add__(self, other: "PatchOutcome") -> "PatchOutcome":
        return PatchOutcome(
            touched=self.touched + tuple(path for path in other.touched if path not in self.touched),
            entries=self.entries + other.entries,
        )

    @classmethod
    def combine(cls, outcomes: Iterable["PatchOutcome"]) -> "PatchOutcome":
        total = cls()
        for outcome in outcomes:
            total = total + outcome
        return total


@dataclass(frozen=True, slots=True)
class FixSession:
    """Accumulated state of one orchestrator run.

    Sessions are immutable; :meth:`merge` and :meth:`log` return a new
    session so every stage hands its result back explicitly.
    """

    touched_files: frozenset[Path] = field(default_factory=frozenset)
    warnings: tuple[str, ...] = ()
    entries: tuple[LogEntry, ...] = ()

    def merge(self, outcome: PatchOutcome) -> "FixSession":
        return replace(
            self,
            touched_files=self.touched_files | frozenset(outcome.touched),
            warnings=self.warnings + outcome.warnings,
            entries=self.entries + outcome.entries,
        )

    def log(self, entry: LogEntry) -> "FixSession":
        return self.merge(PatchOutcome(entries=(entry,)))
