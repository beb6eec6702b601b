"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .commands import Command


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single logical command."""

    combos: tuple[str, ...]
    command: Command


class KeyComboRegistry:
    """Small key-to-command table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._commands: dict[str, Command] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match registries."""
        return key

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing commands for same combos."""
        for combo in binding.combos:
            self._commands[self._normalize(combo)] = binding.command
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def resolve(self, key: str) -> Command | None:
        """Return the command bound to ``key``, if any."""
        if not key:
            return None
        return self._commands.get(self._normalize(key))


DEFAULT_BINDINGS: tuple[KeyComboBinding, ...] = (
    KeyComboBinding(("UP", "k"), Command.MOVE_UP),
    KeyComboBinding(("DOWN", "j"), Command.MOVE_DOWN),
    KeyComboBinding(("ENTER",), Command.TOGGLE_OPEN),
    KeyComboBinding(("SPACE",), Command.TOGGLE_SELECT),
    KeyComboBinding(("r",), Command.DELETE_SELECTED),
    KeyComboBinding(("CTRL_R", "R"), Command.DELETE_ALL),
    KeyComboBinding(("q", "CTRL_C"), Command.QUIT),
)


def default_key_registry() -> KeyComboRegistry:
    """Build the registry used by the interactive runtime."""
    return KeyComboRegistry().register_bindings(*DEFAULT_BINDINGS)


__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "DEFAULT_BINDINGS",
    "default_key_registry",
]
