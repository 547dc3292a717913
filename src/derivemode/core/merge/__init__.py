"""Merge functionality: one inheritance policy per table kind."""

from derivemode.core.merge.models import TableKind, TableState
from derivemode.core.merge.operations import (
    merge_abbrev_tables,
    merge_keymaps,
    merge_syntax_tables,
)

__all__ = [
    "TableKind",
    "TableState",
    "merge_keymaps",
    "merge_syntax_tables",
    "merge_abbrev_tables",
]
