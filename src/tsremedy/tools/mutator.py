"""File read/patch/write helper shared by every fixer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from ..session import LogEntry, PatchOutcome

__all__ = ["FileMutator", "MutationResult", "TextTransform"]

LOGGER = logging.getLogger(__name__)

# A transform returns the new text plus a description of each change it made.
TextTransform = Callable[[str], tuple[str, Sequence[str]]]


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of patching (or creating) one file."""

    path: Path
    changed: bool = False
    changes: tuple[str, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_outcome(self, *, label: str) -> PatchOutcome:
        """Translate the result into a :class:`PatchOutcome` for the session."""
        if self.error is not None:
            return PatchOutcome(entries=(LogEntry.error(f"Failed to {label} in {self.path}: {self.error}"),))
        if not self.changed:
            return PatchOutcome()
        entries = tuple(LogEntry.success(f"{change} ({self.path})") for change in self.changes)
        return PatchOutcome(touched=(self.path,), entries=entries)


@dataclass(slots=True)
class FileMutator:
    """Read a file, apply an in-memory edit, and write it back when it changed.

    Paths are resolved against ``root``. Each file is read, fully patched and
    written before the next one is considered.
    """

    root: Path
    encoding: str = "utf-8"

    def resolve(self, path: Path | str) -> Path:
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.root / candidate
        return candidate

    def apply(self, path: Path | str, transform: TextTransform) -> MutationResult:
        target = self.resolve(path)
        try:
            # Bytes keep CRLF endings intact; read_text would normalise them.
            original = target.read_bytes().decode(self.encoding)
        except (OSError, UnicodeDecodeError) as error:
            LOGGER.debug("Unable to read %s: %s", target, error)
            return MutationResult(path=Path(path), error=str(error))

        updated, changes = transform(original)
        if updated == original:
            return MutationResult(path=Path(path))

        try:
            target.write_text(updated, encoding=self.encoding, newline="")
        except OSError as error:
            LOGGER.debug("Unable to write %s: %s", target, error)
            return MutationResult(path=Path(path), error=str(error))

        LOGGER.debug("Patched %s (%d change(s))", target, len(changes))
        return MutationResult(path=Path(path), changed=True, changes=tuple(changes))

    def create(self, path: Path | str, content: str, *, description: str = "Created file") -> MutationResult:
        """Write ``content`` to ``path`` unless the file already exists."""
        target = self.resolve(path)
        if target.exists():
            return MutationResult(path=Path(path))
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding=self.encoding)
        except OSError as error:
            LOGGER.debug("Unable to create %s: %s", target, error)
            return MutationResult(path=Path(path), error=str(error))
        return MutationResult(path=Path(path), changed=True, changes=(description,))
