"""Local in-memory host implementation.

Simple single-buffer host suitable for single-process use and testing.

Usage:
    host = LocalHost()
    host.call_initializer("fundamental-mode")

    host.define_root_mode("text-mode", "Text", keymap=text_map)
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from derivemode.core.tables import AbbrevTable, Keymap, SyntaxTable, standard_syntax_table
from derivemode.host.hooks import HookRegistry
from derivemode.host.protocol import Initializer

logger = logging.getLogger(__name__)

FUNDAMENTAL_MODE = "fundamental-mode"


class UndefinedParentError(LookupError):
    """Raised when a mode's initializer is requested but was never defined."""

    def __init__(self, identity: str):
        super().__init__(f"Mode {identity} has no initializer; is it defined?")
        self.identity = identity


class LocalHost:
    """Holds the active tables and mode identity for one buffer.

    Ships with a root fundamental-mode that installs no keymap, the standard
    syntax table and an empty abbrev table of its own.

    Args:
        hooks: Observer registry; a fresh one is created if omitted.
    """

    def __init__(self, hooks: HookRegistry | None = None):
        """Initialize host with fundamental-mode active.

        Args:
            hooks: Observer registry; a fresh one is created if omitted.
        """
        self._hooks = hooks or HookRegistry()
        self._initializers: dict[str, Initializer] = {}
        self._keymap: Keymap | None = None
        self._syntax_table: SyntaxTable | None = None
        self._abbrev_table: AbbrevTable | None = None
        self._major_mode: str | None = None
        self._mode_name = ""

        self.standard_syntax_table = standard_syntax_table()
        self.fundamental_abbrev_table = AbbrevTable(name="fundamental-mode-abbrev-table")
        self.define_root_mode(
            FUNDAMENTAL_MODE,
            "Fundamental",
            syntax_table=self.standard_syntax_table,
            abbrev_table=self.fundamental_abbrev_table,
        )
        self.call_initializer(FUNDAMENTAL_MODE)

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def major_mode(self) -> str | None:
        return self._major_mode

    @property
    def mode_name(self) -> str:
        return self._mode_name

    def set_major_mode(self, identity: str, label: str) -> None:
        self._major_mode = identity
        self._mode_name = label

    def current_keymap(self) -> Keymap | None:
        return self._keymap

    def use_local_map(self, keymap: Keymap | None) -> None:
        self._keymap = keymap

    def current_syntax_table(self) -> SyntaxTable | None:
        return self._syntax_table

    def set_syntax_table(self, table: SyntaxTable) -> None:
        self._syntax_table = table

    def current_abbrev_table(self) -> AbbrevTable | None:
        return self._abbrev_table

    def set_abbrev_table(self, table: AbbrevTable | None) -> None:
        self._abbrev_table = table

    def define_initializer(self, identity: str, initializer: Initializer) -> None:
        """Register or replace the setup routine for identity.

        Replacing is allowed so a mode can be redefined; callers resolve the
        initializer at call time, never at definition time.
        """
        if identity in self._initializers:
            logger.debug("Redefining initializer for %s", identity)
        self._initializers[identity] = initializer

    def has_initializer(self, identity: str) -> bool:
        return identity in self._initializers

    def call_initializer(self, identity: str) -> None:
        """Run identity's setup routine.

        Raises:
            UndefinedParentError: If identity has no registered initializer.
        """
        initializer = self._initializers.get(identity)
        if initializer is None:
            raise UndefinedParentError(identity)
        initializer()

    def define_root_mode(
        self,
        identity: str,
        label: str,
        *,
        keymap: Keymap | None = None,
        syntax_table: SyntaxTable | None = None,
        abbrev_table: AbbrevTable | None = None,
        body: Callable[[], None] | None = None,
    ) -> None:
        """Define a non-derived mode that installs the given tables as-is.

        Missing syntax tables default to the standard table. The mode's hooks
        run after body.
        """

        def initialize() -> None:
            self.set_major_mode(identity, label)
            self.use_local_map(keymap)
            self.set_syntax_table(syntax_table or self.standard_syntax_table)
            self.set_abbrev_table(abbrev_table)
            if body is not None:
                body()
            self._hooks.run_mode_hooks(identity)

        self.define_initializer(identity, initialize)
