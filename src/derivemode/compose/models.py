"""Composition models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from derivemode.core.tables import AbbrevTable, Keymap, SyntaxTable

if TYPE_CHECKING:
    from derivemode.host.protocol import Host
    from derivemode.registry.models import ModeRecord


@dataclass(frozen=True, slots=True)
class ModeContext:
    """What a mode body sees: its own record and the host it is active in."""

    record: ModeRecord
    host: Host

    @property
    def identity(self) -> str:
        return self.record.identity

    @property
    def keymap(self) -> Keymap:
        return self.record.keymap

    @property
    def syntax_table(self) -> SyntaxTable:
        return self.record.syntax_table

    @property
    def abbrev_table(self) -> AbbrevTable:
        return self.record.abbrev_table


ExtraInit = Callable[[ModeContext], None]
"""Signature of the caller-supplied body run after the tables are installed."""
