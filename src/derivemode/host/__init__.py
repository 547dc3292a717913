"""Host runtime: active-table slots, initializers and hooks.

Architecture Note:
    host/ is the narrow boundary to whatever command loop owns the active
    tables. The engine talks only to the Host protocol; LocalHost is the
    in-memory implementation used by default and in tests.
"""

from derivemode.host.hooks import Hook, HookRegistry
from derivemode.host.local import FUNDAMENTAL_MODE, LocalHost, UndefinedParentError
from derivemode.host.protocol import Host, Initializer

__all__ = [
    "Host",
    "Initializer",
    "LocalHost",
    "FUNDAMENTAL_MODE",
    "UndefinedParentError",
    "Hook",
    "HookRegistry",
]
