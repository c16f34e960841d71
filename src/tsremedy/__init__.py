"""Diagnostic-driven auto-remediation for TypeScript and Jest projects."""

from .config import ConfigError, TsRemedyConfig, load_config
from .orchestrator import PassReport, run_test_pass, run_typecheck_pass
from .session import FixSession, LogCategory, LogEntry, PatchOutcome

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "FixSession",
    "LogCategory",
    "LogEntry",
    "PassReport",
    "PatchOutcome",
    "TsRemedyConfig",
    "load_config",
    "run_test_pass",
    "run_typecheck_pass",
]
