"""Tests for the mode registry and ancestor resolution.

Critical Invariants:
- get_or_create never replaces an existing record
- Ancestor chains stay acyclic
- root_of terminates at the mode with no parent
"""

import warnings

import pytest
from hypothesis import given
from hypothesis import strategies as st

from derivemode.core.merge import TableKind, TableState
from derivemode.core.tables import Keymap
from derivemode.registry import AncestorCycleError, ModeRecord, ModeRegistry


def test_get_or_create_builds_blank_pending_record(registry):
    record = registry.get_or_create("python-mode")

    assert record.identity == "python-mode"
    assert record.parent is None
    assert len(record.keymap) == 0
    assert list(record.syntax_table.entries()) == []
    assert len(record.abbrev_table) == 0
    assert all(record.state(kind) is TableState.PENDING for kind in TableKind)
    assert not record.materialized


def test_get_or_create_returns_existing_unchanged(registry):
    """CRITICAL: A second request returns the same record and tables.

    Why: User customizations made on the tables must survive recomposition.
    """
    first = registry.get_or_create("python-mode")
    first.keymap.define_key("C-c C-c", "python-send-buffer")

    second = registry.get_or_create("python-mode")

    assert second is first
    assert second.keymap.lookup("C-c C-c") == "python-send-buffer"
    assert len(registry) == 1


def test_tables_are_named_after_mode(registry):
    record = registry.get_or_create("python-mode")

    assert record.keymap.name == "python-mode-map"
    assert record.syntax_table.name == "python-mode-syntax-table"
    assert record.abbrev_table.name == "python-mode-abbrev-table"


def test_get_and_contains(registry):
    assert registry.get("nope") is None
    assert "nope" not in registry

    registry.get_or_create("python-mode")
    assert "python-mode" in registry
    assert registry.identities() == ["python-mode"]


def test_set_parent_records_once(registry):
    assert registry.set_parent("python-mode", "prog-mode")
    assert not registry.set_parent("python-mode", "prog-mode")
    assert registry.get("python-mode").parent == "prog-mode"  # type: ignore[union-attr]


def test_set_parent_mismatch_warns_and_keeps_original(registry):
    registry.set_parent("python-mode", "prog-mode")

    with pytest.warns(UserWarning, match="already derived from prog-mode"):
        assert not registry.set_parent("python-mode", "text-mode")
    assert registry.get("python-mode").parent == "prog-mode"  # type: ignore[union-attr]


def test_set_parent_mismatch_warning_can_be_disabled(settings):
    registry = ModeRegistry(settings=settings.model_copy(update={"warn_on_parent_mismatch": False}))
    registry.set_parent("python-mode", "prog-mode")

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        registry.set_parent("python-mode", "text-mode")


def test_self_parent_rejected(registry):
    with pytest.raises(AncestorCycleError):
        registry.set_parent("python-mode", "python-mode")


def test_indirect_cycle_rejected(registry):
    """CRITICAL: A link that closes a loop is refused.

    Why: root_of and keymap resolution must terminate.
    """
    registry.set_parent("b-mode", "a-mode")
    registry.set_parent("c-mode", "b-mode")

    with pytest.raises(AncestorCycleError, match="own ancestor"):
        registry.set_parent("a-mode", "c-mode")
    assert registry.get("a-mode").parent is None  # type: ignore[union-attr]


def test_check_parent_validates_without_recording(registry):
    registry.set_parent("b-mode", "a-mode")

    registry.check_parent("c-mode", "b-mode")
    with pytest.raises(AncestorCycleError, match="a-mode its own ancestor"):
        registry.check_parent("a-mode", "b-mode")

    assert "c-mode" not in registry
    assert registry.get("a-mode") is None


def test_root_of_root_is_itself(registry):
    registry.get_or_create("fundamental-mode")

    assert registry.root_of("fundamental-mode") == "fundamental-mode"
    assert registry.root_of("never-composed-mode") == "never-composed-mode"


def test_root_of_multi_level(registry):
    registry.set_parent("prog-mode", "fundamental-mode")
    registry.set_parent("python-mode", "prog-mode")

    assert registry.root_of("python-mode") == "fundamental-mode"
    assert list(registry.ancestors("python-mode")) == [
        "python-mode",
        "prog-mode",
        "fundamental-mode",
    ]


@given(depth=st.integers(min_value=0, max_value=30))
def test_root_of_chain_property(depth):
    """PROPERTY: root_of of any mode in a linear chain is the chain's root."""
    registry = ModeRegistry()
    names = [f"mode-{i}" for i in range(depth + 1)]
    for child, parent in zip(names[1:], names[:-1], strict=True):
        registry.set_parent(child, parent)

    for name in names:
        assert registry.root_of(name) == "mode-0"


def test_is_derived_from(registry):
    registry.set_parent("prog-mode", "fundamental-mode")
    registry.set_parent("python-mode", "prog-mode")

    assert registry.is_derived_from("python-mode", "prog-mode") == "prog-mode"
    assert registry.is_derived_from("python-mode", "text-mode", "fundamental-mode") == (
        "fundamental-mode"
    )
    assert registry.is_derived_from("python-mode", "python-mode") == "python-mode"
    assert registry.is_derived_from("python-mode", "text-mode") is None


# Record state machine


def test_materialize_runs_once():
    """CRITICAL: A table is merged on the first materialize only.

    Why: Linking a keymap twice would corrupt the override chain.
    """
    record = ModeRecord(identity="child-mode")
    old = Keymap()

    assert record.materialize(TableKind.KEYMAP, old)
    assert record.state(TableKind.KEYMAP) is TableState.MATERIALIZED
    assert record.keymap.parent is old

    other = Keymap()
    assert not record.materialize(TableKind.KEYMAP, other)
    assert record.keymap.parent is old, "Second materialize must not relink"


def test_materialized_requires_all_tables():
    record = ModeRecord(identity="child-mode")
    record.materialize(TableKind.KEYMAP, None)
    record.materialize(TableKind.SYNTAX_TABLE, None)

    assert not record.materialized

    record.materialize(TableKind.ABBREV_TABLE, None)
    assert record.materialized


def test_table_accessor():
    record = ModeRecord(identity="child-mode")

    assert record.table(TableKind.KEYMAP) is record.keymap
    assert record.table(TableKind.SYNTAX_TABLE) is record.syntax_table
    assert record.table(TableKind.ABBREV_TABLE) is record.abbrev_table
