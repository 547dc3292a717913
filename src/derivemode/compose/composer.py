"""Composition driver: derive a mode from its parent.

Usage:
    composer = ModeComposer(host=LocalHost())

    def body(ctx: ModeContext) -> None:
        ctx.keymap.define_key("C-c C-c", "python-send-buffer")

    composer.compose("python-mode", "prog-mode", "Python", body)
"""

from __future__ import annotations

import logging
from typing import Any

from derivemode.compose.models import ExtraInit, ModeContext
from derivemode.config import DeriveModeSettings
from derivemode.core.merge import TableKind
from derivemode.host.local import LocalHost
from derivemode.host.protocol import Host
from derivemode.registry import ModeRecord, ModeRegistry, get_registry

logger = logging.getLogger(__name__)


def _active_table(host: Host, kind: TableKind) -> Any:
    if kind is TableKind.KEYMAP:
        return host.current_keymap()
    if kind is TableKind.SYNTAX_TABLE:
        return host.current_syntax_table()
    return host.current_abbrev_table()


def _install_table(host: Host, kind: TableKind, table: Any) -> None:
    if kind is TableKind.KEYMAP:
        host.use_local_map(table)
    elif kind is TableKind.SYNTAX_TABLE:
        host.set_syntax_table(table)
    else:
        host.set_abbrev_table(table)


class ModeComposer:
    """Orchestrates derivation of a child mode from a parent.

    Owns nothing but references: records live in the registry, active
    tables and initializers live in the host.

    Args:
        host: Runtime holding the active tables. Defaults to a new LocalHost.
        registry: Record arena. Defaults to the global registry.
        settings: Hook and naming behavior. Without an explicit registry,
            a private one using these settings is created.
    """

    def __init__(
        self,
        host: Host | None = None,
        registry: ModeRegistry | None = None,
        settings: DeriveModeSettings | None = None,
    ):
        self.host: Host = host or LocalHost()
        if registry is None:
            registry = get_registry() if settings is None else ModeRegistry(settings=settings)
        self.registry = registry
        self.settings = settings or registry.settings

    def compose(
        self,
        child: str,
        parent: str,
        label: str,
        extra_init: ExtraInit | None = None,
        after_hook: ExtraInit | None = None,
    ) -> ModeRecord:
        """Activate child as a mode derived from parent.

        Runs the parent's initializer, installs child's identity, merges each
        of child's tables with the parent's the first time only, installs
        them, runs extra_init and finally notifies child's observers.

        If any step before notification fails, hooks queued on child's behalf
        by the parent's initializer are discarded.

        Args:
            child: Derived mode name.
            parent: Mode to derive from; must have an initializer on the host.
            label: Display label for child.
            extra_init: Body run once child's tables are active.
            after_hook: Run after the mode hooks of the outermost activation,
                with the same context as extra_init.

        Returns:
            child's record.

        Raises:
            UndefinedParentError: If parent has no initializer.
            AncestorCycleError: If parent is child or derives from it.
        """
        self.registry.check_parent(child, parent)
        record = self.registry.get_or_create(child)
        ctx = ModeContext(record=record, host=self.host)

        hooks = self.host.hooks
        mark = hooks.mark()
        try:
            try:
                self._run_parent(parent)
            except Exception as e:
                e.add_note(f"while composing {child} from {parent}")
                raise

            self.registry.set_parent(child, parent)
            record.display_label = label
            self.host.set_major_mode(child, label)

            for kind in TableKind:
                if record.materialize(kind, _active_table(self.host, kind)):
                    logger.debug("Merged %s of %s into %s", kind.name, parent, child)
                _install_table(self.host, kind, record.table(kind))

            if extra_init is not None:
                extra_init(ctx)
        except BaseException:
            hooks.discard_delayed(mark)
            raise

        hooks.run_mode_hooks(
            child, after_hook=(lambda: after_hook(ctx)) if after_hook is not None else None
        )
        return record

    def _run_parent(self, parent: str) -> None:
        if self.settings.delay_parent_hooks:
            with self.host.hooks.delay_mode_hooks():
                self.host.call_initializer(parent)
        else:
            self.host.call_initializer(parent)

    def root_of(self, identity: str) -> str:
        """Resolve the root mode identity derives from."""
        return self.registry.root_of(identity)


_composer: ModeComposer | None = None


def get_composer() -> ModeComposer:
    """Access the process-wide composer, creating it on first use.

    Returns:
        A ModeComposer over the global registry and a LocalHost.
    """
    global _composer
    if _composer is None:
        _composer = ModeComposer()
    return _composer


def compose(
    child: str,
    parent: str,
    label: str,
    extra_init: ExtraInit | None = None,
    after_hook: ExtraInit | None = None,
) -> ModeRecord:
    """Compose child from parent using the process-wide composer."""
    return get_composer().compose(child, parent, label, extra_init, after_hook)


def root_of(identity: str) -> str:
    """Resolve identity's root mode in the global registry."""
    return get_registry().root_of(identity)
