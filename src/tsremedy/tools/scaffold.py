"""Generate placeholder tests for components that have none."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..session import LogEntry, PatchOutcome
from .discovery import TEST_FILE_RE, is_skipped_directory
from .mutator import FileMutator

__all__ = ["ComponentSpec", "component_name", "discover_untested_components", "render_test", "scaffold_missing_tests"]

_COMPONENT_TEST_TEMPLATE = """import React from 'react';
import {{ render, screen }} from '@testing-library/react';
import '@testing-library/jest-dom';
import {import_clause} from './{module}';

describe('{name}', () => {{
  it('renders without crashing', () => {{
    render(<{name} />);
  }});

  it('matches snapshot', () => {{
    const {{ container }} = render(<{name} />);
    expect(container.firstChild).toMatchSnapshot();
  }});
}});
"""

_DEFAULT_EXPORT_RE = re.compile(r"^\s*export\s+default\b", re.MULTILINE)
_WORD_SPLIT_RE = re.compile(r"[-_\s.]+")


@dataclass(frozen=True, slots=True)
class ComponentSpec:
    """A component directory that needs a generated test."""

    directory: Path
    source: Path
    name: str
    default_export: bool

    @property
    def test_path(self) -> Path:
        return self.directory / f"{self.directory.name}.test.tsx"


def component_name(directory_name: str) -> str:
    """Derive a PascalCase component name from a directory name."""
    parts = [part for part in _WORD_SPLIT_RE.split(directory_name) if part]
    if not parts:
        return "Component"
    return "".join(part[0].upper() + part[1:] for part in parts)


def _component_source(directory: Path, name: str) -> Path | None:
    candidates = sorted(
        entry
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix == ".tsx" and "test" not in entry.name
    )
    if not candidates:
        return None
    for candidate in candidates:
        if candidate.stem.lower() == name.lower():
            return candidate
    return candidates[0]


def _has_test_file(directory: Path) -> bool:
    return any(entry.is_file() and TEST_FILE_RE.search(entry.name) for entry in directory.iterdir())


def discover_untested_components(components_root: Path) -> list[ComponentSpec]:
    """List component directories one level below ``components_root`` without tests."""
    if not components_root.is_dir():
        return []
    specs: list[ComponentSpec] = []
    for directory in sorted(components_root.iterdir(), key=lambda path: path.name):
        if not directory.is_dir() or is_skipped_directory(directory.name):
            continue
        if _has_test_file(directory):
            continue
        name = component_name(directory.name)
        source = _component_source(directory, name)
        if source is None:
            continue
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            text = ""
        specs.append(
            ComponentSpec(
                directory=directory,
                source=source,
                name=name,
                default_export=bool(_DEFAULT_EXPORT_RE.search(text)) or not text,
            )
        )
    return specs


def render_test(spec: ComponentSpec) -> str:
    """Return the generated test module for ``spec``.

    The component is rendered without props; components with required props
    will fail the generated test until it is edited by hand.
    """

    import_clause = spec.name if spec.default_export else f"{{ {spec.name} }}"
    return _COMPONENT_TEST_TEMPLATE.format(
        import_clause=import_clause,
        module=spec.source.stem,
        name=spec.name,
    )


def scaffold_missing_tests(components_root: Path, mutator: FileMutator) -> PatchOutcome:
    """Write a generated test for every component directory lacking one."""
    outcomes: list[PatchOutcome] = []
    for spec in discover_untested_components(components_root):
        target = spec.test_path
        try:
            target = target.relative_to(mutator.root)
        except ValueError:
            pass
        result = mutator.create(target, render_test(spec), description=f"Generated test for {spec.name}")
        outcomes.append(result.to_outcome(label="generate test"))
    if not outcomes:
        return PatchOutcome(entries=(LogEntry.info("No components without tests"),))
    return PatchOutcome.combine(outcomes)
