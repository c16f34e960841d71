from __future__ import annotations

from pathlib import Path

from tsremedy.fixers.unused import UnusedVarFix, apply_unused_fixes, plan_unused_fixes, rename_unused
from tsremedy.tools.classifier import classify_all
from tsremedy.tools.diagnostics import parse_diagnostics


def _source(lines: int = 12) -> str:
    body = [f"const line{index} = helper;" for index in range(1, lines + 1)]
    body[9] = "const helper = makeHelper(helper);"
    return "\n".join(body) + "\n"


def test_renames_first_occurrence_on_reported_line_only() -> None:
    source = _source()

    updated, renamed = rename_unused(source, [UnusedVarFix("src/a.tsx", "helper", 10)])

    before = source.split("\n")
    after = updated.split("\n")
    assert after[9] == "const _helper = makeHelper(helper);"
    assert renamed == ["Renamed unused 'helper' on line 10"]
    assert [line for index, line in enumerate(after) if index != 9] == [
        line for index, line in enumerate(before) if index != 9
    ]


def test_whole_word_match_only() -> None:
    source = "const helperFn = 1, helper = 2;\n"

    updated, _ = rename_unused(source, [UnusedVarFix("a.tsx", "helper", 1)])

    assert updated == "const helperFn = 1, _helper = 2;\n"


def test_destructuring_renames_first_occurrence() -> None:
    # The binding is the second `b`, but the property key comes first and wins.
    source = "const { b: a, c: b } = props;\n"

    updated, _ = rename_unused(source, [UnusedVarFix("a.tsx", "b", 1)])

    assert updated == "const { _b: a, c: b } = props;\n"


def test_out_of_range_line_is_ignored() -> None:
    source = "const a = 1;\n"

    updated, renamed = rename_unused(source, [UnusedVarFix("a.tsx", "a", 40), UnusedVarFix("a.tsx", "a", 0)])

    assert updated == source
    assert renamed == []


def test_two_identifiers_on_same_line_are_both_renamed() -> None:
    source = "const [value, setValue] = useState(0);\n"

    updated, renamed = rename_unused(
        source,
        [UnusedVarFix("a.tsx", "value", 1), UnusedVarFix("a.tsx", "setValue", 1)],
    )

    assert updated == "const [_value, _setValue] = useState(0);\n"
    assert len(renamed) == 2


def test_plan_drops_exact_duplicates() -> None:
    line = "src/a.tsx(10,7): error TS6133: 'helper' is declared but never used."

    fixes = plan_unused_fixes(classify_all(parse_diagnostics(f"{line}\n{line}\n")))

    assert fixes == [UnusedVarFix("src/a.tsx", "helper", 10)]


def test_apply_unused_fixes_is_stable_on_rerun(tmp_path: Path) -> None:
    target = tmp_path / "a.tsx"
    target.write_text("const helper = 1;\nexport const x = 2;\n", encoding="utf-8")
    fixes = [UnusedVarFix("a.tsx", "helper", 1)]

    first = apply_unused_fixes(tmp_path, fixes)
    second = apply_unused_fixes(tmp_path, fixes)

    assert first.touched == (Path("a.tsx"),)
    assert second.touched == ()
    assert target.read_text(encoding="utf-8") == "const _helper = 1;\nexport const x = 2;\n"


def test_unmatched_fixes_are_collected_as_missed() -> None:
    source = "const a = 1;\n"
    missed: list[UnusedVarFix] = []
    fixes = [UnusedVarFix("a.tsx", "gone", 1), UnusedVarFix("a.tsx", "a", 40)]

    updated, renamed = rename_unused(source, fixes, missed)

    assert updated == source
    assert renamed == []
    assert missed == fixes


def test_apply_unused_fixes_warns_on_missing_file(tmp_path: Path) -> None:
    outcome = apply_unused_fixes(tmp_path, [UnusedVarFix("src/gone.tsx", "helper", 1)])

    assert outcome.touched == ()
    assert outcome.warnings == ("Skipping missing file src/gone.tsx",)


def test_apply_unused_fixes_warns_when_line_has_no_match(tmp_path: Path) -> None:
    target = tmp_path / "a.tsx"
    target.write_text("// nothing here\nconst helper = 1;\n", encoding="utf-8")

    outcome = apply_unused_fixes(
        tmp_path, [UnusedVarFix("a.tsx", "helper", 1), UnusedVarFix("a.tsx", "helper", 2)]
    )

    assert outcome.touched == (Path("a.tsx"),)
    assert outcome.warnings == ("No unused 'helper' found on line 1 of a.tsx",)
    assert target.read_text(encoding="utf-8") == "// nothing here\nconst _helper = 1;\n"
