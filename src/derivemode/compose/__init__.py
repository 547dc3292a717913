"""Mode composition: the driver and the context handed to mode bodies."""

from derivemode.compose.composer import ModeComposer, compose, get_composer, root_of
from derivemode.compose.models import ExtraInit, ModeContext

__all__ = [
    "ModeComposer",
    "ModeContext",
    "ExtraInit",
    "compose",
    "get_composer",
    "root_of",
]
