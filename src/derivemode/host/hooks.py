"""Mode hooks with delayed execution for nested composition.

Usage:
    hooks = HookRegistry()
    hooks.add_hook("python-mode", lambda: print("python ready"))

    with hooks.delay_mode_hooks():
        hooks.run_mode_hooks("prog-mode")  # queued
    hooks.run_mode_hooks("python-mode")  # runs prog-mode's, then python-mode's
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

Hook = Callable[[], None]


class HookRegistry:
    """Per-identity observer lists plus global after-change observers.

    While delay_mode_hooks() is active, run_mode_hooks() only queues the
    identity, together with its after hook if any. The next run outside any
    delay flushes the queue: every queued mode's hooks in order, then its
    own, then the queued after hooks and its own, then the after-change hooks.
    """

    def __init__(self) -> None:
        self._hooks: dict[str, list[Hook]] = {}
        self._after_change: list[Hook] = []
        self._delayed: list[tuple[str, Hook | None]] = []
        self._delay_depth = 0

    def add_hook(self, identity: str, hook: Hook, append: bool = False) -> None:
        """Register hook for identity; new hooks run first unless append."""
        hooks = self._hooks.setdefault(identity, [])
        if hook in hooks:
            return
        if append:
            hooks.append(hook)
        else:
            hooks.insert(0, hook)

    def remove_hook(self, identity: str, hook: Hook) -> bool:
        """Unregister hook. Returns True if it was registered."""
        hooks = self._hooks.get(identity, [])
        if hook in hooks:
            hooks.remove(hook)
            return True
        return False

    def hooks_for(self, identity: str) -> list[Hook]:
        return list(self._hooks.get(identity, []))

    def add_after_change_hook(self, hook: Hook) -> None:
        """Register a hook run once after every outermost mode activation."""
        if hook not in self._after_change:
            self._after_change.append(hook)

    @property
    def delaying(self) -> bool:
        return self._delay_depth > 0

    @property
    def delayed(self) -> list[str]:
        """Identities whose hooks are queued, oldest first."""
        return [identity for identity, _ in self._delayed]

    def mark(self) -> int:
        """Position in the delayed queue, for discard_delayed()."""
        return len(self._delayed)

    def discard_delayed(self, mark: int) -> None:
        """Drop everything queued since mark was taken."""
        if len(self._delayed) > mark:
            logger.debug("Discarding delayed hooks for %s", self.delayed[mark:])
            del self._delayed[mark:]

    @contextmanager
    def delay_mode_hooks(self) -> Iterator[None]:
        """Queue mode hooks instead of running them for the duration.

        If the block raises, whatever it queued is discarded so a later,
        unrelated activation does not run it.
        """
        mark = self.mark()
        self._delay_depth += 1
        try:
            yield
        except BaseException:
            self.discard_delayed(mark)
            raise
        finally:
            self._delay_depth -= 1

    def run_mode_hooks(self, identity: str, after_hook: Hook | None = None) -> None:
        """Notify observers that identity has been activated.

        Having no observers registered for identity is not an error. Hook
        exceptions propagate to the caller.

        Args:
            identity: Activated mode.
            after_hook: Run after the mode hooks of the outermost activation.
        """
        if self.delaying:
            logger.debug("Delaying hooks for %s", identity)
            self._delayed.append((identity, after_hook))
            return

        pending, self._delayed = self._delayed, []
        pending.append((identity, after_hook))
        for pending_identity, _ in pending:
            self._run(pending_identity)
        for _, pending_after in pending:
            if pending_after is not None:
                pending_after()
        for hook in list(self._after_change):
            hook()

    def _run(self, identity: str) -> None:
        hooks = self.hooks_for(identity)
        if hooks:
            logger.debug("Running %d hook(s) for %s", len(hooks), identity)
        for hook in hooks:
            hook()
