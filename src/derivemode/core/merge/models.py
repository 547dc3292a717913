"""Merge models: table kinds and per-table materialization state."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any


class TableKind(Enum):
    """The three table kinds a derived mode inherits."""

    KEYMAP = auto()  # chain-link, live
    SYNTAX_TABLE = auto()  # slot fill, snapshot
    ABBREV_TABLE = auto()  # name-guarded copy, snapshot

    def get_strategy(self) -> Callable[[Any, Any], Any]:
        """Get the merge strategy function for this table kind.

        Returns:
            Pure function taking (new, old) and returning new.
        """
        # Late import to avoid circular dependency
        from derivemode.core.merge import operations

        strategies = {
            TableKind.KEYMAP: operations.merge_keymaps,
            TableKind.SYNTAX_TABLE: operations.merge_syntax_tables,
            TableKind.ABBREV_TABLE: operations.merge_abbrev_tables,
        }
        return strategies[self]


class TableState(Enum):
    """Materialization state of one table of one mode.

    PENDING -> MATERIALIZED is the only transition, made by the merge.
    """

    PENDING = auto()
    MATERIALIZED = auto()
