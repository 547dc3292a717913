"""Key-dispatch tables with chained fallthrough.

Usage:
    base = Keymap()
    base.define_key("C-c C-c", "compile")

    child = Keymap(parent=base)
    child.define_key("C-c C-k", "kill-compilation")

    child.lookup("C-c C-c")  # "compile", resolved through base
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class KeymapCycleError(ValueError):
    """Raised when a parent assignment would make a keymap chain loop."""

    pass


class Keymap:
    """One node in a singly linked override chain.

    Each node owns only its own bindings. The parent reference is non-owning:
    lookups that miss here walk up the chain explicitly, so later changes to
    a parent stay visible to children that have not shadowed the key.

    Args:
        parent: Keymap to fall through to, or None for a terminal node.
        name: Optional label used in reprs and error messages.
    """

    def __init__(self, parent: Keymap | None = None, name: str | None = None):
        self._bindings: dict[str, Any] = {}
        self._parent: Keymap | None = None
        self.name = name
        if parent is not None:
            self.parent = parent

    @property
    def parent(self) -> Keymap | None:
        """Keymap consulted when a key is not bound locally."""
        return self._parent

    @parent.setter
    def parent(self, parent: Keymap | None) -> None:
        node = parent
        while node is not None:
            if node is self:
                raise KeymapCycleError(f"Cyclic keymap inheritance through {self!r}")
            node = node._parent
        self._parent = parent

    def define_key(self, key: str, command: Any) -> None:
        """Bind key to command in this node only.

        Binding None removes the local binding, letting the key fall through.
        """
        if command is None:
            self._bindings.pop(key, None)
        else:
            self._bindings[key] = command

    def local_binding(self, key: str) -> Any | None:
        """Return the binding held by this node, ignoring parents."""
        return self._bindings.get(key)

    def lookup(self, key: str) -> Any | None:
        """Resolve key through the chain, nearest binding first.

        Returns:
            The bound command, or None if no node in the chain binds key.
        """
        node: Keymap | None = self
        while node is not None:
            if key in node._bindings:
                return node._bindings[key]
            node = node._parent
        return None

    def resolving_keymap(self, key: str) -> Keymap | None:
        """Return the node in the chain whose binding lookup() would use."""
        for node in self.chain():
            if key in node._bindings:
                return node
        return None

    def chain(self) -> Iterator[Keymap]:
        """Iterate this node and its ancestors, nearest first."""
        node: Keymap | None = self
        while node is not None:
            yield node
            node = node._parent

    def chain_depth(self) -> int:
        """Number of nodes in the override chain, this node included."""
        return sum(1 for _ in self.chain())

    def bindings(self) -> dict[str, Any]:
        """Copy of the local bindings."""
        return dict(self._bindings)

    def effective_bindings(self) -> dict[str, Any]:
        """Flattened view of every key resolvable through the chain."""
        merged: dict[str, Any] = {}
        for node in reversed(list(self.chain())):
            merged.update(node._bindings)
        return merged

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self._bindings)

    def __repr__(self) -> str:
        label = self.name or hex(id(self))
        return f"Keymap({label}, bindings={len(self._bindings)}, depth={self.chain_depth()})"
