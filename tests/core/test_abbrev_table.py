"""Tests for abbrev tables."""

import pytest

from derivemode.core.tables import AbbrevTable


def test_define_and_lookup():
    table = AbbrevTable()
    table.define_abbrev("btw", "by the way")

    assert table.lookup("btw") == "by the way"
    assert table.lookup("afaik") is None
    assert "btw" in table


def test_expand_runs_hook_and_counts():
    calls = []
    table = AbbrevTable()
    table.define_abbrev("teh", "the", hook=lambda trigger, text: calls.append((trigger, text)))

    assert table.expand("teh") == "the"
    assert table.expand("teh") == "the"
    assert calls == [("teh", "the"), ("teh", "the")]
    assert table.get("teh").count == 2  # type: ignore[union-attr]


def test_expand_missing_returns_none():
    assert AbbrevTable().expand("nope") is None


def test_redefine_replaces_entry():
    table = AbbrevTable()
    table.define_abbrev("btw", "by the way")
    table.define_abbrev("btw", "between")

    assert table.lookup("btw") == "between"
    assert len(table) == 1


def test_empty_trigger_rejected():
    with pytest.raises(ValueError):
        AbbrevTable().define_abbrev("", "nothing")


def test_remove():
    table = AbbrevTable()
    table.define_abbrev("btw", "by the way")

    assert table.remove("btw")
    assert not table.remove("btw")
    assert table.triggers() == []
