"""Mode registry: per-identity records and ancestor resolution."""

from derivemode.registry.models import ModeRecord
from derivemode.registry.registry import AncestorCycleError, ModeRegistry, get_registry

__all__ = [
    "ModeRecord",
    "ModeRegistry",
    "AncestorCycleError",
    "get_registry",
]
