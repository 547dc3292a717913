"""Tests for naming conventions and generated docstrings."""

from derivemode.config import DeriveModeSettings
from derivemode.core.naming import derived_mode_names, make_docstring


def test_default_names():
    names = derived_mode_names("python-mode")

    assert names.mode == "python-mode"
    assert names.hook == "python-mode-hook"
    assert names.keymap == "python-mode-map"
    assert names.syntax_table == "python-mode-syntax-table"
    assert names.abbrev_table == "python-mode-abbrev-table"


def test_names_follow_settings():
    settings = DeriveModeSettings(keymap_suffix="-keymap", hook_suffix="-functions")
    names = derived_mode_names("python-mode", settings)

    assert names.keymap == "python-mode-keymap"
    assert names.hook == "python-mode-functions"


def test_docstring_without_doc_mentions_parent_and_tables():
    doc = make_docstring("python-mode", "prog-mode")

    assert doc.startswith("Major mode derived from `prog-mode'.")
    assert "`python-mode-hook'" in doc
    assert "`python-mode-map'" in doc
    assert "`python-mode-syntax-table'" in doc
    assert "`python-mode-abbrev-table'" in doc


def test_docstring_keeps_caller_summary():
    doc = make_docstring("python-mode", "prog-mode", "  Major mode for Python.\n")

    assert doc.startswith("Major mode for Python.\n\n")
    assert "prog-mode" in doc


def test_docstring_mentioning_hook_is_left_alone():
    text = "Python mode. Runs python-mode-hook on entry."

    assert make_docstring("python-mode", "prog-mode", text) == text
