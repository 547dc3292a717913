"""Table functionality: keymaps, syntax tables and abbrev tables."""

from derivemode.core.tables.abbrev import Abbrev, AbbrevHook, AbbrevTable
from derivemode.core.tables.keymap import Keymap, KeymapCycleError
from derivemode.core.tables.syntax import (
    SYNTAX_TABLE_SIZE,
    SyntaxClass,
    SyntaxEntry,
    SyntaxTable,
    standard_syntax_table,
)

__all__ = [
    # Keymap
    "Keymap",
    "KeymapCycleError",
    # Syntax
    "SYNTAX_TABLE_SIZE",
    "SyntaxClass",
    "SyntaxEntry",
    "SyntaxTable",
    "standard_syntax_table",
    # Abbrev
    "Abbrev",
    "AbbrevHook",
    "AbbrevTable",
]
