"""Naming conventions and generated documentation for derived modes.

Usage:
    names = derived_mode_names("python-mode")
    names.keymap  # "python-mode-map"

    doc = make_docstring("python-mode", "prog-mode", "Major mode for Python.")
"""

from __future__ import annotations

from dataclasses import dataclass

from derivemode.config import DeriveModeSettings


@dataclass(frozen=True, slots=True)
class ModeNames:
    """Identifiers derived from a mode name."""

    mode: str
    hook: str
    keymap: str
    syntax_table: str
    abbrev_table: str


def derived_mode_names(identity: str, settings: DeriveModeSettings | None = None) -> ModeNames:
    """Construct the related identifiers for a mode.

    Args:
        identity: Mode name, e.g. "python-mode".
        settings: Naming suffixes; defaults are loaded from the environment.

    Returns:
        ModeNames for identity.
    """
    settings = settings or DeriveModeSettings()
    return ModeNames(
        mode=identity,
        hook=identity + settings.hook_suffix,
        keymap=identity + settings.keymap_suffix,
        syntax_table=identity + settings.syntax_table_suffix,
        abbrev_table=identity + settings.abbrev_table_suffix,
    )


def make_docstring(
    child: str,
    parent: str,
    doc: str | None = None,
    settings: DeriveModeSettings | None = None,
) -> str:
    """Build the docstring of a derived mode.

    A caller-supplied doc is kept as the summary. The inheritance paragraph
    is appended unless doc already mentions the mode's hook.

    Args:
        child: Derived mode name.
        parent: Parent mode name.
        doc: Optional caller-supplied documentation.
        settings: Naming suffixes.

    Returns:
        The complete docstring.
    """
    names = derived_mode_names(child, settings)
    summary = doc.strip() if doc else f"Major mode derived from `{parent}'."
    if doc and names.hook in doc:
        return summary

    inheritance = (
        f"In addition to any hooks its parent mode `{parent}' might have run,\n"
        f"this mode runs the hook `{names.hook}', as the final or penultimate\n"
        f"step during initialization.\n\n"
        f"It inherits all of the parent's attributes, but has its own keymap,\n"
        f"abbrev table and syntax table:\n\n"
        f"  `{names.keymap}', `{names.abbrev_table}' and `{names.syntax_table}'\n\n"
        f"which more-or-less shadow {parent}'s corresponding tables."
    )
    return f"{summary}\n\n{inheritance}"
