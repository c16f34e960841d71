"""Runtime configuration for tsremedy.

Every setting has a default matching a standard Next.js/Jest layout, so the
tool runs without any configuration. A ``tsremedy.yaml`` file at the project
root may override the commands and directories; the lookup tables in
:mod:`tsremedy.catalogue` are not configurable.
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

__all__ = ["CONFIG_FILENAME", "ConfigError", "TsRemedyConfig", "load_config"]

CONFIG_FILENAME = "tsremedy.yaml"


class ConfigError(RuntimeError):
    """Raised when the optional configuration file cannot be used."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TsRemedyConfig(BaseModel):
    """Commands and locations used by a remediation run."""

    model_config = ConfigDict(extra="forbid")

    root: Path = Field(default_factory=Path.cwd)
    checker_command: List[str] = Field(
        default_factory=lambda: ["npx", "tsc", "--noEmit", "--pretty", "false"]
    )
    test_command: List[str] = Field(default_factory=lambda: ["npm", "run", "test", "--"])
    test_root: Path = Path("app")
    components_root: Path = Path("app/_components")
    report_limit: int = Field(default=10, ge=0)

    @field_validator("checker_command", "test_command", mode="before")
    @classmethod
    def _split_command(cls, value: Any) -> Any:
        if isinstance(value, str):
            return shlex.split(value)
        return value

    @field_validator("checker_command", "test_command")
    @classmethod
    def _require_command(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("command must not be empty")
        return value

    def resolve(self, path: Path) -> Path:
        """Return ``path`` anchored at the project root."""
        if path.is_absolute():
            return path
        return self.root / path

    @property
    def test_dir(self) -> Path:
        return self.resolve(self.test_root)

    @property
    def components_dir(self) -> Path:
        return self.resolve(self.components_root)


def load_config(root: Path | str | None = None) -> TsRemedyConfig:
    """Build the configuration for ``root``, honouring ``tsremedy.yaml`` if present."""

    root_path = Path(root).resolve() if root is not None else Path.cwd().resolve()
    config_path = root_path / CONFIG_FILENAME
    if not config_path.exists():
        return TsRemedyConfig(root=root_path)

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except (OSError, yaml.YAMLError) as error:
        raise ConfigError(f"Failed to parse config: {error}", path=config_path) from error

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping at the top level.", path=config_path)

    data = dict(data)
    raw_root = data.pop("root", None)
    resolved_root = root_path
    if raw_root:
        candidate = Path(str(raw_root))
        resolved_root = candidate if candidate.is_absolute() else (root_path / candidate).resolve()

    try:
        return TsRemedyConfig(root=resolved_root, **data)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {config_path}: {error}", path=config_path) from error
