"""Run the external checker and test runner and capture their output."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Sequence

from ..config import TsRemedyConfig

__all__ = ["invoke", "run_checker", "run_tests", "runner_flags"]

LOGGER = logging.getLogger(__name__)


def invoke(command: Sequence[str], cwd: Path) -> str | None:
    """Run ``command`` in ``cwd`` and return ``None`` when it exits cleanly.

    Any non-zero exit yields the captured stdout and stderr. A tool that fails
    to start is reported the same way, so callers cannot tell a crashed tool
    from one that reported findings.
    """

    argv = list(command)
    LOGGER.debug("Running %s in %s", shlex.join(argv), cwd)
    try:
        process = subprocess.run(  # noqa: S603  # command is sourced from configuration
            argv,
            cwd=cwd,
            check=False,
            capture_output=True,
            text=True,
        )
    except OSError as error:
        return f"{shlex.join(argv)}: {error}"

    if process.returncode == 0:
        return None

    combined = "\n".join(part for part in (process.stdout, process.stderr) if part)
    if combined.strip():
        return combined
    return f"{shlex.join(argv)} exited with code {process.returncode}"


def run_checker(config: TsRemedyConfig) -> str | None:
    """Invoke the type checker in no-emit, plain-diagnostics mode."""
    return invoke(config.checker_command, config.root)


def runner_flags(
    *,
    update_snapshots: bool = False,
    pass_with_no_tests: bool = True,
    verbose: bool = False,
    ci: bool = True,
) -> list[str]:
    args: list[str] = []
    if update_snapshots:
        args.append("--updateSnapshot")
    if pass_with_no_tests:
        args.append("--passWithNoTests")
    if verbose:
        args.append("--verbose")
    if ci:
        args.append("--ci")
    return args


def run_tests(
    config: TsRemedyConfig,
    *,
    update_snapshots: bool = False,
    pass_with_no_tests: bool = True,
    verbose: bool = False,
    ci: bool = True,
) -> str | None:
    """Invoke the test runner with the requested flags appended."""
    command = [
        *config.test_command,
        *runner_flags(
            update_snapshots=update_snapshots,
            pass_with_no_tests=pass_with_no_tests,
            verbose=verbose,
            ci=ci,
        ),
    ]
    return invoke(command, config.root)
