"""derivemode: single-inheritance composition for editor modes.

Usage:
    from derivemode import LocalHost, ModeComposer, define_derived_mode

    composer = ModeComposer(host=LocalHost())

    @define_derived_mode("prog-mode", "fundamental-mode", "Prog", composer=composer)
    def prog_mode(ctx):
        ctx.keymap.define_key("M-;", "comment-dwim")

    @define_derived_mode("python-mode", "prog-mode", "Python", composer=composer)
    def python_mode(ctx):
        ctx.keymap.define_key("C-c C-c", "python-send-buffer")

    python_mode()
    composer.host.current_keymap().lookup("M-;")  # "comment-dwim"
    composer.root_of("python-mode")  # "fundamental-mode"
"""

__version__ = "0.1.0"

# Composition
from derivemode.compose import (
    ExtraInit,
    ModeComposer,
    ModeContext,
    compose,
    get_composer,
    root_of,
)

# Configuration
from derivemode.config import DeriveModeSettings

# Core primitives
from derivemode.core import (
    SYNTAX_TABLE_SIZE,
    Abbrev,
    AbbrevTable,
    Keymap,
    KeymapCycleError,
    ModeNames,
    SyntaxClass,
    SyntaxEntry,
    SyntaxTable,
    TableKind,
    TableState,
    derived_mode_names,
    make_docstring,
    merge_abbrev_tables,
    merge_keymaps,
    merge_syntax_tables,
    standard_syntax_table,
)

# Definition
from derivemode.define import DerivedMode, define_derived_mode

# Host
from derivemode.host import (
    FUNDAMENTAL_MODE,
    Host,
    HookRegistry,
    LocalHost,
    UndefinedParentError,
)

# Registry
from derivemode.registry import (
    AncestorCycleError,
    ModeRecord,
    ModeRegistry,
    get_registry,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Keymap",
    "KeymapCycleError",
    "SYNTAX_TABLE_SIZE",
    "SyntaxClass",
    "SyntaxEntry",
    "SyntaxTable",
    "standard_syntax_table",
    "Abbrev",
    "AbbrevTable",
    "TableKind",
    "TableState",
    "merge_keymaps",
    "merge_syntax_tables",
    "merge_abbrev_tables",
    "ModeNames",
    "derived_mode_names",
    "make_docstring",
    # Registry
    "ModeRecord",
    "ModeRegistry",
    "AncestorCycleError",
    "get_registry",
    # Host
    "Host",
    "LocalHost",
    "HookRegistry",
    "FUNDAMENTAL_MODE",
    "UndefinedParentError",
    # Composition
    "ModeComposer",
    "ModeContext",
    "ExtraInit",
    "compose",
    "get_composer",
    "root_of",
    # Definition
    "DerivedMode",
    "define_derived_mode",
    # Config
    "DeriveModeSettings",
]
