"""CLI entry points for the TypeScript and test auto-fixers."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import typer

from .config import ConfigError, TsRemedyConfig, load_config
from .orchestrator import PassReport, run_test_pass, run_typecheck_pass
from .session import LogEntry

APP_HELP = "Apply mechanical fixes for TypeScript checker and Jest failures."

app = typer.Typer(help=APP_HELP)


def _echo_entry(entry: LogEntry) -> None:
    typer.echo(entry.render())


def _render_report(report: PassReport) -> None:
    """Print the end-of-run summary."""
    typer.echo("")
    typer.echo(report.format_summary())


def _run(runner: Callable[..., PassReport]) -> None:
    try:
        config: TsRemedyConfig = load_config(Path.cwd())
    except ConfigError as error:
        # Failures are reported, never signalled through the exit status.
        _echo_entry(LogEntry.error(str(error)))
        return
    report = runner(config, emit=_echo_entry)
    _render_report(report)


@app.command()
def typecheck() -> None:
    """Run tsc, fix missing imports and unused variables, then re-check once."""
    _run(run_typecheck_pass)


@app.command()
def tests() -> None:
    """Update snapshots, repair test files, scaffold missing tests, then re-run once."""
    _run(run_test_pass)


if __name__ == "__main__":
    app()
