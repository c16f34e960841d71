"""Drive one fix-then-verify pass for the type checker or the test runner.

Each pass runs its tool, patches what it can, and runs the tool exactly once
more to measure what is left. Passes never loop until convergence; the
heuristic fixers could oscillate if reapplied without bound.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .config import TsRemedyConfig
from .fixers import (
    apply_alias_fixes,
    apply_import_fixes,
    apply_test_pattern_fixes,
    apply_unused_fixes,
    plan_import_fixes,
    plan_unused_fixes,
)
from .session import FixSession, LogEntry, PatchOutcome
from .tools.classifier import Classification, classify_all
from .tools.diagnostics import Diagnostic, format_diagnostic, parse_diagnostics
from .tools.discovery import find_test_files
from .tools.invoker import run_checker, run_tests
from .tools.mutator import FileMutator
from .tools.scaffold import scaffold_missing_tests

__all__ = ["PassReport", "run_test_pass", "run_typecheck_pass"]

LOGGER = logging.getLogger(__name__)

Emitter = Callable[[LogEntry], None]


@dataclass(slots=True)
class PassReport:
    """Result of a single orchestrated pass."""

    tool: str
    clean: bool
    session: FixSession
    diagnostics: tuple[Diagnostic, ...] = ()
    remaining: tuple[Diagnostic, ...] = ()
    remaining_output: str | None = None
    report_limit: int = 10

    @property
    def touched_count(self) -> int:
        return len(self.session.touched_files)

    @property
    def remaining_count(self) -> int:
        return len(self.remaining)

    def format_summary(self) -> str:
        """Return a human readable summary of the pass."""
        lines: list[str] = [f"{self.tool}: fixed files {self.touched_count}"]
        if self.clean:
            lines.append(f"{self.tool}: clean, nothing to fix.")
            return "\n".join(lines)
        if self.remaining_output is None:
            lines.append(f"{self.tool}: all issues resolved.")
            return "\n".join(lines)
        lines.append(f"{self.tool}: {self.remaining_count} diagnostic(s) remain (may require manual review)")
        for diagnostic in self.remaining[: self.report_limit]:
            lines.append(f"  {format_diagnostic(diagnostic)}")
        return "\n".join(lines)


@dataclass(slots=True)
class _Pass:
    """Session builder that forwards each new log entry to ``emit``."""

    emit: Emitter | None
    session: FixSession = field(default_factory=FixSession)

    def record(self, outcome: PatchOutcome) -> None:
        self.session = self.session.merge(outcome)
        if self.emit is not None:
            for entry in outcome.entries:
                self.emit(entry)

    def log(self, entry: LogEntry) -> None:
        self.record(PatchOutcome(entries=(entry,)))


def _review_outcome(classifications: Sequence[Classification]) -> PatchOutcome:
    entries = tuple(
        LogEntry.warning(f"Manual review needed in {item.diagnostic.location}: {item.reason or item.kind.value}")
        for item in classifications
        if item.needs_review
    )
    return PatchOutcome(entries=entries)


def _verify(
    tool: str, output: str | None, state: _Pass, *, show_output: bool = False
) -> tuple[tuple[Diagnostic, ...], str | None]:
    if output is None:
        state.log(LogEntry.success(f"All {tool} issues fixed!"))
        return (), None
    remaining = tuple(parse_diagnostics(output))
    state.log(LogEntry.warning(f"{len(remaining)} {tool} diagnostic(s) remain (may require manual review)"))
    if show_output or not remaining:
        state.log(LogEntry.info(f"{tool} output:\n{output.rstrip()}"))
    return remaining, output


def run_typecheck_pass(config: TsRemedyConfig, emit: Emitter | None = None) -> PassReport:
    """Fix missing imports and unused identifiers reported by the checker."""
    tool = "TypeScript"
    state = _Pass(emit)
    state.log(LogEntry.info("Running TypeScript auto-fixer..."))

    output = run_checker(config)
    if output is None:
        state.log(LogEntry.success("No TypeScript errors found!"))
        return PassReport(tool=tool, clean=True, session=state.session, report_limit=config.report_limit)

    diagnostics = tuple(parse_diagnostics(output))
    state.log(LogEntry.info(f"Found {len(diagnostics)} TypeScript errors"))
    if not diagnostics:
        state.log(LogEntry.info(f"Unparsed TypeScript output:\n{output.rstrip()}"))

    classifications = classify_all(diagnostics)
    mutator = FileMutator(config.root)

    # Renames keep line numbers intact; inserted imports shift them.
    state.log(LogEntry.info("Fixing unused variables..."))
    state.record(apply_unused_fixes(config.root, plan_unused_fixes(classifications), mutator))

    state.log(LogEntry.info("Fixing missing imports..."))
    state.record(apply_import_fixes(config.root, plan_import_fixes(classifications), mutator))

    state.log(LogEntry.info("Checking remaining diagnostics..."))
    state.record(_review_outcome(classifications))

    state.log(LogEntry.info("Verifying fixes..."))
    remaining, remaining_output = _verify(tool, run_checker(config), state)
    state.log(LogEntry.info(f"Fixed files: {len(state.session.touched_files)}"))
    LOGGER.debug("TypeScript pass touched %s", sorted(map(str, state.session.touched_files)))

    return PassReport(
        tool=tool,
        clean=False,
        session=state.session,
        diagnostics=diagnostics,
        remaining=remaining,
        remaining_output=remaining_output,
        report_limit=config.report_limit,
    )


def run_test_pass(config: TsRemedyConfig, emit: Emitter | None = None) -> PassReport:
    """Refresh snapshots, repair test files and scaffold missing tests."""
    tool = "test"
    state = _Pass(emit)
    state.log(LogEntry.info("Running test auto-fixer..."))

    test_files = find_test_files(config.test_dir, root=config.root)
    state.log(LogEntry.info(f"Found {len(test_files)} test files"))

    state.log(LogEntry.snapshot("Updating Jest snapshots..."))
    output = run_tests(config, update_snapshots=True)
    if output is None:
        state.log(LogEntry.success("All tests are passing!"))
        return PassReport(tool=tool, clean=True, session=state.session, report_limit=config.report_limit)
    state.log(LogEntry.error("Failed to update snapshots"))

    diagnostics = tuple(parse_diagnostics(output))
    mutator = FileMutator(config.root)

    state.log(LogEntry.info("Fixing import paths..."))
    state.record(apply_alias_fixes(config.root, test_files, mutator))

    state.log(LogEntry.info("Fixing common test patterns..."))
    state.record(apply_test_pattern_fixes(config.root, test_files, mutator))

    state.log(LogEntry.info("Generating missing tests..."))
    state.record(scaffold_missing_tests(config.components_dir, mutator))

    state.log(LogEntry.info("Running final test verification..."))
    final_output = run_tests(config)
    remaining, remaining_output = _verify(tool, final_output, state, show_output=True)
    state.log(LogEntry.info(f"Fixed/created files: {len(state.session.touched_files)}"))

    return PassReport(
        tool=tool,
        clean=False,
        session=state.session,
        diagnostics=diagnostics,
        remaining=remaining,
        remaining_output=remaining_output,
        report_limit=config.report_limit,
    )
