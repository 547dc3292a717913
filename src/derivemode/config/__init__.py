"""Configuration module using Pydantic Settings.

Provides typed configuration for naming conventions and hook behavior.

Usage:
    from derivemode.config import DeriveModeSettings

    settings = DeriveModeSettings(delay_parent_hooks=False)
"""

from derivemode.config.settings import DeriveModeSettings

__all__ = [
    "DeriveModeSettings",
]
