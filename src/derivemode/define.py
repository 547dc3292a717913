"""Derived mode definition decorator.

Usage:
    @define_derived_mode("python-mode", "prog-mode", "Python")
    def python_mode(ctx: ModeContext) -> None:
        # Major mode for editing Python.
        ctx.keymap.define_key("C-c C-c", "python-send-buffer")
        ctx.syntax_table.modify_syntax_entry("#", "<")

    python_mode()  # activate in the composer's host
    python_mode.names.hook  # "python-mode-hook"

    # No body
    org_lite = define_derived_mode("org-lite-mode", "text-mode", "Org-lite")(None)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from derivemode.compose import ExtraInit, ModeComposer, get_composer
from derivemode.core.naming import ModeNames, derived_mode_names, make_docstring
from derivemode.registry import ModeRecord


@dataclass
class DerivedMode:
    """Descriptor returned by define_derived_mode.

    Calling it runs the mode's initializer on the composer's host, which
    composes the mode from its parent. after_hook runs once the mode hooks of
    the outermost activation have run, so a mode activated as another
    mode's parent runs it only after that mode's body and hooks.
    """

    name: str
    parent: str
    label: str
    names: ModeNames
    composer: ModeComposer = field(repr=False)
    body: ExtraInit | None = field(default=None, repr=False)
    after_hook: ExtraInit | None = field(default=None, repr=False)
    doc: str = field(default="", repr=False)

    def __post_init__(self) -> None:
        self.__doc__ = self.doc

    def __call__(self) -> ModeRecord:
        """Activate this mode. Returns its record."""
        self.composer.host.call_initializer(self.name)
        return self.record

    def initialize(self) -> None:
        """Initializer registered on the host under this mode's name."""
        self.composer.compose(self.name, self.parent, self.label, self.body, self.after_hook)

    @property
    def record(self) -> ModeRecord:
        """This mode's record; its tables can be customized before activation."""
        return self.composer.registry.get_or_create(self.name)

    def root(self) -> str:
        """The non-derived mode this one is ultimately modeled after."""
        return self.composer.registry.root_of(self.name)


def define_derived_mode(
    child: str,
    parent: str,
    label: str,
    *,
    doc: str | None = None,
    after_hook: ExtraInit | None = None,
    composer: ModeComposer | None = None,
) -> Callable[[ExtraInit | None], DerivedMode]:
    """Define child as a mode derived from parent.

    The decorated function becomes the mode body, run with a ModeContext
    once child's tables are active. Its docstring is used as the mode's
    summary unless doc is given.

    Args:
        child: Derived mode name.
        parent: Parent mode name; resolved when child is activated, so it
            may be defined later.
        label: Display label.
        doc: Documentation summary.
        after_hook: Run after the mode hooks, with the same context as body.
        composer: Composer to register with; defaults to the process-wide one.

    Returns:
        Decorator that registers the initializer and returns a DerivedMode.
    """

    def decorator(body: ExtraInit | None) -> DerivedMode:
        target = composer or get_composer()
        summary = doc if doc is not None else (body.__doc__ if body is not None else None)
        mode = DerivedMode(
            name=child,
            parent=parent,
            label=label,
            names=derived_mode_names(child, target.settings),
            composer=target,
            body=body,
            after_hook=after_hook,
            doc=make_docstring(child, parent, summary, target.settings),
        )
        target.registry.get_or_create(child)
        target.host.define_initializer(child, mode.initialize)
        return mode

    return decorator
