"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from derivemode.config import DeriveModeSettings

    # Load from environment variables (DERIVEMODE_*)
    settings = DeriveModeSettings()

    # Or override with explicit values
    settings = DeriveModeSettings(keymap_suffix="-keymap")
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install derivemode"
    ) from e


class DeriveModeSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for mode composition.

    Attributes:
        hook_suffix: Appended to a mode name to name its hook.
        keymap_suffix: Appended to a mode name to name its keymap.
        syntax_table_suffix: Appended to a mode name to name its syntax table.
        abbrev_table_suffix: Appended to a mode name to name its abbrev table.
        delay_parent_hooks: Defer a parent's hooks until the child's hooks run.
        warn_on_parent_mismatch: Warn when a mode is recomposed on a different parent.

    Environment Variables:
        DERIVEMODE_HOOK_SUFFIX
        DERIVEMODE_KEYMAP_SUFFIX
        DERIVEMODE_SYNTAX_TABLE_SUFFIX
        DERIVEMODE_ABBREV_TABLE_SUFFIX
        DERIVEMODE_DELAY_PARENT_HOOKS
        DERIVEMODE_WARN_ON_PARENT_MISMATCH
    """

    model_config = SettingsConfigDict(
        env_prefix="DERIVEMODE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hook_suffix: str = "-hook"
    keymap_suffix: str = "-map"
    syntax_table_suffix: str = "-syntax-table"
    abbrev_table_suffix: str = "-abbrev-table"
    delay_parent_hooks: bool = True
    warn_on_parent_mismatch: bool = True
