"""Host protocol for swappable command-dispatch runtimes.

The host owns the "currently active" tables and mode identity, and knows
how to invoke a mode's initializer by name. The engine only reaches the
host through this interface.

Usage:
    host = LocalHost()
    composer = ModeComposer(host=host)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from derivemode.core.tables import AbbrevTable, Keymap, SyntaxTable
from derivemode.host.hooks import HookRegistry

Initializer = Callable[[], None]


@runtime_checkable
class Host(Protocol):
    """Abstract host interface. Implementations hold the active state."""

    @property
    def hooks(self) -> HookRegistry:
        """Observer registry notified after composition."""
        ...

    @property
    def major_mode(self) -> str | None:
        """Identity of the active mode."""
        ...

    @property
    def mode_name(self) -> str:
        """Display label of the active mode."""
        ...

    def set_major_mode(self, identity: str, label: str) -> None:
        """Make identity the active mode."""
        ...

    def current_keymap(self) -> Keymap | None:
        """Active key-dispatch table."""
        ...

    def use_local_map(self, keymap: Keymap | None) -> None:
        """Install keymap as the active key-dispatch table."""
        ...

    def current_syntax_table(self) -> SyntaxTable | None:
        """Active classification table."""
        ...

    def set_syntax_table(self, table: SyntaxTable) -> None:
        """Install table as the active classification table."""
        ...

    def current_abbrev_table(self) -> AbbrevTable | None:
        """Active abbreviation table."""
        ...

    def set_abbrev_table(self, table: AbbrevTable | None) -> None:
        """Install table as the active abbreviation table."""
        ...

    def define_initializer(self, identity: str, initializer: Initializer) -> None:
        """Register the setup routine for identity."""
        ...

    def has_initializer(self, identity: str) -> bool:
        """Check if identity has a setup routine."""
        ...

    def call_initializer(self, identity: str) -> None:
        """Run identity's setup routine; raises UndefinedParentError if missing."""
        ...
