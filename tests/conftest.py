from __future__ import annotations

import sys
import textwrap
from dataclasses import dataclass
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tsremedy.config import TsRemedyConfig  # noqa: E402


# Emits tsc-shaped diagnostics for a handful of recognisable source patterns.
FAKE_TSC = textwrap.dedent(
    """
    import pathlib
    import re
    import sys

    root = pathlib.Path.cwd()
    out = []
    for path in sorted((root / "src").glob("*.tsx")):
        rel = path.relative_to(root).as_posix()
        text = path.read_text(encoding="utf-8")
        for number, line in enumerate(text.split("\\n"), start=1):
            if "useState(" in line and "import { useState }" not in text:
                out.append(f"{rel}({number},17): error TS2304: Cannot find name 'useState'.")
            if re.search(r"\\bconst helper\\b", line):
                out.append(f"{rel}({number},7): error TS6133: 'helper' is declared but its value is never read.")
            if "React.createElement" in line and "import React" not in text:
                out.append(
                    f"{rel}({number},18): error TS2686: 'React' refers to a UMD global, "
                    "but the current file is a module. Consider adding an import instead."
                )
            if "Foo(" in line:
                out.append(f"{rel}({number},18): error TS2304: Cannot find name 'Foo'.")
            if "(value)" in line:
                out.append(f"{rel}({number},19): error TS7006: Parameter 'value' implicitly has an 'any' type.")
    if out:
        print("\\n".join(out))
        print(f"Found {len(out)} errors.")
        sys.exit(2)
    """
)

# Fails while any test file still uses an alias or lacks a React import.
FAKE_JEST = textwrap.dedent(
    """
    import pathlib
    import sys

    root = pathlib.Path.cwd()
    with (root / "runner-calls.log").open("a", encoding="utf-8") as handle:
        handle.write(" ".join(sys.argv[1:]) + "\\n")
    failures = []
    for path in sorted((root / "app").rglob("*.test.tsx")):
        text = path.read_text(encoding="utf-8")
        if "'@/" in text or "import React" not in text:
            failures.append(path.relative_to(root).as_posix())
    if failures:
        for failure in failures:
            print(f"FAIL {failure}")
        sys.exit(1)
    print("Tests: all passed")
    """
)


@dataclass(slots=True)
class FakeProject:
    """A throwaway project directory wired to scripted stand-ins for tsc and jest."""

    root: Path

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def read(self, relative: str) -> str:
        return (self.root / relative).read_text(encoding="utf-8")

    def config(self, **overrides: object) -> TsRemedyConfig:
        values: dict[str, object] = {
            "root": self.root,
            "checker_command": [sys.executable, str(self.root / "fake_tsc.py")],
            "test_command": [sys.executable, str(self.root / "fake_jest.py")],
        }
        values.update(overrides)
        return TsRemedyConfig(**values)

    def runner_calls(self) -> list[str]:
        log = self.root / "runner-calls.log"
        if not log.exists():
            return []
        return log.read_text(encoding="utf-8").splitlines()


@pytest.fixture()
def project(tmp_path: Path) -> FakeProject:
    root = tmp_path / "web"
    root.mkdir()
    (root / "fake_tsc.py").write_text(FAKE_TSC, encoding="utf-8")
    (root / "fake_jest.py").write_text(FAKE_JEST, encoding="utf-8")
    return FakeProject(root=root)
