"""Input-layer public API for key decoding and command bindings.

Exports are split between low-level terminal decoding (``KeyReader``) and the
key-to-command table used by the runtime loop.
"""

from .commands import Command
from .key_registry import DEFAULT_BINDINGS, KeyComboBinding, KeyComboRegistry, default_key_registry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, KeyReader

__all__ = [
    "Command",
    "KeyReader",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_BINDINGS",
    "default_key_registry",
]
