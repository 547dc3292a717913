"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from derivemode import (
    AbbrevTable,
    DeriveModeSettings,
    Keymap,
    LocalHost,
    ModeComposer,
    ModeRegistry,
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep DERIVEMODE_* variables from the outer shell out of tests."""
    for name in list(os.environ):
        if name.startswith("DERIVEMODE_"):
            monkeypatch.delenv(name)


@pytest.fixture
def settings():
    """Default settings."""
    return DeriveModeSettings()


@pytest.fixture
def registry(settings):
    """Fresh ModeRegistry, independent of the global one."""
    return ModeRegistry(settings=settings)


@pytest.fixture
def host():
    """Fresh LocalHost with fundamental-mode active."""
    return LocalHost()


@pytest.fixture
def composer(host, registry, settings):
    """ModeComposer over the fresh host and registry."""
    return ModeComposer(host=host, registry=registry, settings=settings)


@pytest.fixture
def text_keymap():
    keymap = Keymap(name="text-mode-map")
    keymap.define_key("M-s", "center-line")
    keymap.define_key("TAB", "indent-relative")
    return keymap


@pytest.fixture
def text_mode(host, text_keymap):
    """Root text-mode with its own keymap and abbrevs on the fresh host."""
    abbrevs = AbbrevTable(name="text-mode-abbrev-table")
    abbrevs.define_abbrev("btw", "by the way")
    host.define_root_mode("text-mode", "Text", keymap=text_keymap, abbrev_table=abbrevs)
    return "text-mode"
