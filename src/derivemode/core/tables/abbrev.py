"""Abbreviation tables: trigger strings mapped to expansion text.

Usage:
    table = AbbrevTable()
    table.define_abbrev("btw", "by the way")
    table.expand("btw")  # "by the way"
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

AbbrevHook = Callable[[str, str], None]
"""Signature: (trigger, expansion) -> None, run after each expansion."""


@dataclass(slots=True)
class Abbrev:
    """One abbreviation entry."""

    trigger: str
    expansion: str
    hook: AbbrevHook | None = None
    count: int = 0
    """Number of times this entry has been expanded."""


class AbbrevTable:
    """Open-ended mapping from trigger string to Abbrev."""

    def __init__(self, name: str | None = None):
        self._abbrevs: dict[str, Abbrev] = {}
        self.name = name

    def define_abbrev(
        self,
        trigger: str,
        expansion: str,
        hook: AbbrevHook | None = None,
    ) -> Abbrev:
        """Define or redefine trigger in this table.

        Raises:
            ValueError: If trigger is empty.
        """
        if not trigger:
            raise ValueError("Abbrev trigger must be a non-empty string")
        abbrev = Abbrev(trigger=trigger, expansion=expansion, hook=hook)
        self._abbrevs[trigger] = abbrev
        return abbrev

    def get(self, trigger: str) -> Abbrev | None:
        return self._abbrevs.get(trigger)

    def lookup(self, trigger: str) -> str | None:
        """Expansion text for trigger, without running its hook."""
        abbrev = self._abbrevs.get(trigger)
        return abbrev.expansion if abbrev is not None else None

    def expand(self, trigger: str) -> str | None:
        """Expand trigger, bumping its use count and running its hook.

        Returns:
            The expansion, or None if trigger is not defined here.
        """
        abbrev = self._abbrevs.get(trigger)
        if abbrev is None:
            return None
        abbrev.count += 1
        if abbrev.hook is not None:
            abbrev.hook(abbrev.trigger, abbrev.expansion)
        return abbrev.expansion

    def remove(self, trigger: str) -> bool:
        """Remove trigger. Returns True if it existed."""
        return self._abbrevs.pop(trigger, None) is not None

    def triggers(self) -> list[str]:
        return list(self._abbrevs)

    def __iter__(self) -> Iterator[Abbrev]:
        return iter(list(self._abbrevs.values()))

    def __contains__(self, trigger: object) -> bool:
        return trigger in self._abbrevs

    def __len__(self) -> int:
        return len(self._abbrevs)

    def __repr__(self) -> str:
        return f"AbbrevTable({self.name or hex(id(self))}, abbrevs={len(self._abbrevs)})"
