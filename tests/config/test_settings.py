"""Tests for environment-driven settings."""

from derivemode.config import DeriveModeSettings


def test_defaults():
    settings = DeriveModeSettings()

    assert settings.hook_suffix == "-hook"
    assert settings.keymap_suffix == "-map"
    assert settings.delay_parent_hooks is True
    assert settings.warn_on_parent_mismatch is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DERIVEMODE_KEYMAP_SUFFIX", "-keymap")
    monkeypatch.setenv("DERIVEMODE_DELAY_PARENT_HOOKS", "false")

    settings = DeriveModeSettings()

    assert settings.keymap_suffix == "-keymap"
    assert settings.delay_parent_hooks is False


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("DERIVEMODE_HOOK_SUFFIX", "-functions")

    assert DeriveModeSettings(hook_suffix="-hook").hook_suffix == "-hook"
