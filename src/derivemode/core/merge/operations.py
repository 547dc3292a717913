"""Pure functions for table merge strategies.

Each strategy folds an old table (the one active when the child was
composed, normally the parent's) into the child's freshly created table.
The caller guarantees each runs at most once per table per mode.
"""

from __future__ import annotations

from derivemode.core.tables import AbbrevTable, Keymap, SyntaxTable


def merge_keymaps(new: Keymap, old: Keymap | None) -> Keymap:
    """Link new in front of old, forming an override chain.

    The child keeps only its own bindings; unmatched keys fall through to
    old, which may chain further. This is live inheritance: later bindings
    added to old are visible through new unless new shadows them.

    Args:
        new: The child's keymap.
        old: The active keymap before the child was installed.

    Returns:
        new, with its parent set.

    Raises:
        KeymapCycleError: If old already falls through to new.
    """
    if old is None or old is new:
        return new
    new.parent = old
    return new


def merge_syntax_tables(new: SyntaxTable, old: SyntaxTable | None) -> SyntaxTable:
    """Fill every unset slot of new from old.

    Slots the child set explicitly are left alone. This is a one-time
    snapshot copy: later changes to old are not reflected.

    Args:
        new: The child's syntax table.
        old: The active syntax table before the child was installed.

    Returns:
        new, with its unset slots filled.
    """
    if old is None or old is new:
        return new
    for index, entry in old.entries():
        if not new.is_set(index):
            new.set_entry(index, entry)
    return new


def merge_abbrev_tables(new: AbbrevTable, old: AbbrevTable | None) -> AbbrevTable:
    """Copy each of old's abbrevs whose trigger new does not define.

    Trigger, expansion and hook are copied; use counts start fresh.
    Existing child entries are never overwritten.

    Args:
        new: The child's abbrev table.
        old: The active abbrev table before the child was installed.

    Returns:
        new, with old's missing triggers added.
    """
    if old is None or old is new:
        return new
    for abbrev in old:
        if abbrev.trigger not in new:
            new.define_abbrev(abbrev.trigger, abbrev.expansion, abbrev.hook)
    return new
