"""Text patchers, one per fix kind."""

from .aliases import apply_alias_fixes, rewrite_aliases
from .imports import ImportFix, apply_import_fixes, import_insertion_index, insert_imports, plan_import_fixes
from .test_patterns import apply_test_pattern_fixes, fix_test_patterns
from .unused import UnusedVarFix, apply_unused_fixes, plan_unused_fixes, rename_unused

__all__ = [
    "ImportFix",
    "UnusedVarFix",
    "apply_alias_fixes",
    "apply_import_fixes",
    "apply_test_pattern_fixes",
    "apply_unused_fixes",
    "fix_test_patterns",
    "import_insertion_index",
    "insert_imports",
    "plan_import_fixes",
    "plan_unused_fixes",
    "rename_unused",
    "rewrite_aliases",
]
