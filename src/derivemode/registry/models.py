"""Mode record model.

Usage:
    record = ModeRecord(identity="python-mode")
    record.state(TableKind.KEYMAP)  # TableState.PENDING

    record.materialize(TableKind.KEYMAP, parent_keymap)  # True, merged
    record.materialize(TableKind.KEYMAP, parent_keymap)  # False, no-op
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from derivemode.core.merge import TableKind, TableState
from derivemode.core.tables import AbbrevTable, Keymap, SyntaxTable

logger = logging.getLogger(__name__)


def _pending_states() -> dict[TableKind, TableState]:
    return {kind: TableState.PENDING for kind in TableKind}


@dataclass(eq=False)
class ModeRecord:
    """Everything the engine knows about one mode identity.

    The three tables are owned by the record. parent is a name, not a
    reference, so records never own their ancestors.
    """

    identity: str
    display_label: str = ""
    parent: str | None = None
    keymap: Keymap = field(default_factory=Keymap)
    syntax_table: SyntaxTable = field(default_factory=SyntaxTable)
    abbrev_table: AbbrevTable = field(default_factory=AbbrevTable)
    _states: dict[TableKind, TableState] = field(default_factory=_pending_states, repr=False)

    def table(self, kind: TableKind) -> Any:
        """The record's own table of the given kind."""
        if kind is TableKind.KEYMAP:
            return self.keymap
        if kind is TableKind.SYNTAX_TABLE:
            return self.syntax_table
        return self.abbrev_table

    def state(self, kind: TableKind) -> TableState:
        return self._states[kind]

    def is_pending(self, kind: TableKind) -> bool:
        return self._states[kind] is TableState.PENDING

    @property
    def materialized(self) -> bool:
        """True once all three tables have been merged with their parent's."""
        return all(state is TableState.MATERIALIZED for state in self._states.values())

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def materialize(self, kind: TableKind, old: Any) -> bool:
        """Merge old into this record's table of kind, once.

        This is the only PENDING -> MATERIALIZED transition. Calls after the
        first are no-ops, which keeps the keymap chain from being linked twice.

        Args:
            kind: Which table to merge.
            old: The table that was active before this mode, or None.

        Returns:
            True if the merge ran, False if the table was already materialized.
        """
        if self._states[kind] is TableState.MATERIALIZED:
            logger.debug("Skipping merge of %s for %s: already materialized", kind.name, self.identity)
            return False
        kind.get_strategy()(self.table(kind), old)
        self._states[kind] = TableState.MATERIALIZED
        logger.debug("Materialized %s for %s", kind.name, self.identity)
        return True
