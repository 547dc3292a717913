"""Mode registry and ancestor resolution.

Usage:
    registry = ModeRegistry()
    record = registry.get_or_create("python-mode")
    registry.set_parent("python-mode", "prog-mode")

    registry.root_of("python-mode")  # "prog-mode" if prog-mode is a root
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterator

from derivemode.config import DeriveModeSettings
from derivemode.core.naming import derived_mode_names
from derivemode.core.tables import AbbrevTable, Keymap, SyntaxTable
from derivemode.registry.models import ModeRecord

logger = logging.getLogger(__name__)


class AncestorCycleError(ValueError):
    """Raised when recording a parent link would make the ancestor chain loop."""

    pass


class ModeRegistry:
    """Process-local arena of ModeRecords addressed by identity.

    Records are created on first request and never removed. Parent links
    and per-table merge state are fields of the records themselves.

    Args:
        settings: Naming conventions used to label new tables.
    """

    def __init__(self, settings: DeriveModeSettings | None = None) -> None:
        """Initialize empty mode registry."""
        self._settings = settings or DeriveModeSettings()
        self._records: dict[str, ModeRecord] = {}

    @property
    def settings(self) -> DeriveModeSettings:
        """Settings used to name tables and report parent mismatches."""
        return self._settings

    def get_or_create(self, identity: str) -> ModeRecord:
        """Return the record for identity, creating a blank pending one if needed.

        Args:
            identity: Mode name.

        Returns:
            The existing record unchanged, or a new record whose three
            tables are blank and pending merge.
        """
        record = self._records.get(identity)
        if record is not None:
            return record

        names = derived_mode_names(identity, self._settings)
        record = ModeRecord(
            identity=identity,
            keymap=Keymap(name=names.keymap),
            syntax_table=SyntaxTable(name=names.syntax_table),
            abbrev_table=AbbrevTable(name=names.abbrev_table),
        )
        self._records[identity] = record
        logger.debug("Created mode record %s", identity)
        return record

    def get(self, identity: str) -> ModeRecord | None:
        """Get the record for identity if one exists.

        Args:
            identity: Mode name.

        Returns:
            The record, or None if identity was never composed.
        """
        return self._records.get(identity)

    def identities(self) -> list[str]:
        """All registered identities in creation order."""
        return list(self._records)

    def set_parent(self, identity: str, parent: str) -> bool:
        """Record parent as identity's ancestor if no link is recorded yet.

        An existing link is never replaced. If it differs from parent a
        warning is emitted, since recomposing on another parent leaves the
        already materialized tables pointing at the original one.

        Args:
            identity: Derived mode name.
            parent: Mode it is derived from.

        Returns:
            True if the link was recorded now, False if one already existed.

        Raises:
            AncestorCycleError: If parent is identity or derives from it.
        """
        record = self.get_or_create(identity)
        if record.parent is not None:
            if record.parent != parent and self._settings.warn_on_parent_mismatch:
                warnings.warn(
                    f"Mode {identity} is already derived from {record.parent}; "
                    f"ignoring new parent {parent}.",
                    stacklevel=2,
                )
            return False

        self.check_parent(identity, parent)

        record.parent = parent
        logger.debug("Recorded %s as parent of %s", parent, identity)
        return True

    def check_parent(self, identity: str, parent: str) -> None:
        """Verify that deriving identity from parent keeps the chain acyclic.

        Raises:
            AncestorCycleError: If parent is identity or derives from it.
        """
        if identity in self.ancestors(parent):
            raise AncestorCycleError(
                f"Deriving {identity} from {parent} would make {identity} its own ancestor"
            )

    def ancestors(self, identity: str) -> Iterator[str]:
        """Iterate identity and its ancestors, nearest first.

        Iteration stops at a record with no parent, or at an identity that
        has no record (a root that was never composed).
        """
        current: str | None = identity
        while current is not None:
            yield current
            record = self._records.get(current)
            current = record.parent if record is not None else None

    def root_of(self, identity: str) -> str:
        """Resolve the non-derived mode identity is ultimately modeled after.

        Args:
            identity: Any mode name.

        Returns:
            The terminal identity of the ancestor chain; identity itself for
            root modes.
        """
        root = identity
        for root in self.ancestors(identity):
            pass
        return root

    def is_derived_from(self, identity: str, *candidates: str) -> str | None:
        """Find the nearest identity on the chain that is one of candidates.

        identity itself counts, so a mode is derived from itself.

        Returns:
            The matching identity, or None if no ancestor matches.
        """
        wanted = set(candidates)
        for ancestor in self.ancestors(identity):
            if ancestor in wanted:
                return ancestor
        return None

    def __contains__(self, identity: object) -> bool:
        return identity in self._records

    def __len__(self) -> int:
        return len(self._records)


# Module-level registry instance
_registry = ModeRegistry()


def get_registry() -> ModeRegistry:
    """Access the global mode registry.

    Returns:
        The process-local ModeRegistry instance.
    """
    return _registry
