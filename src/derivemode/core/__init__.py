"""Core functionalities: stateless tables, merge strategies and naming.

Architecture Note:
    core/ contains the table types and pure merge functions. Nothing here
    knows about modes being active. For stateful services, see registry/,
    host/ and compose/.
"""

from derivemode.core.merge import (
    TableKind,
    TableState,
    merge_abbrev_tables,
    merge_keymaps,
    merge_syntax_tables,
)
from derivemode.core.naming import ModeNames, derived_mode_names, make_docstring
from derivemode.core.tables import (
    SYNTAX_TABLE_SIZE,
    Abbrev,
    AbbrevHook,
    AbbrevTable,
    Keymap,
    KeymapCycleError,
    SyntaxClass,
    SyntaxEntry,
    SyntaxTable,
    standard_syntax_table,
)

__all__ = [
    # Tables
    "Keymap",
    "KeymapCycleError",
    "SYNTAX_TABLE_SIZE",
    "SyntaxClass",
    "SyntaxEntry",
    "SyntaxTable",
    "standard_syntax_table",
    "Abbrev",
    "AbbrevHook",
    "AbbrevTable",
    # Merge
    "TableKind",
    "TableState",
    "merge_keymaps",
    "merge_syntax_tables",
    "merge_abbrev_tables",
    # Naming
    "ModeNames",
    "derived_mode_names",
    "make_docstring",
]
