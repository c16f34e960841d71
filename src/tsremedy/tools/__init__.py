"""Tool integrations: process invocation, parsing, classification and file I/O."""

from .classifier import Classification, FixKind, classify, classify_all
from .diagnostics import Diagnostic, format_diagnostic, parse_diagnostics
from .discovery import find_test_files
from .invoker import invoke, run_checker, run_tests
from .mutator import FileMutator, MutationResult
from .scaffold import scaffold_missing_tests

__all__ = [
    "Classification",
    "Diagnostic",
    "FileMutator",
    "FixKind",
    "MutationResult",
    "classify",
    "classify_all",
    "find_test_files",
    "format_diagnostic",
    "invoke",
    "parse_diagnostics",
    "run_checker",
    "run_tests",
    "scaffold_missing_tests",
]
