"""Logical commands consumed by the tree controller."""

from __future__ import annotations

from enum import Enum


class Command(str, Enum):
    """Decoded user intent, independent of the key that produced it."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    TOGGLE_OPEN = "toggle_open"
    TOGGLE_SELECT = "toggle_select"
    DELETE_SELECTED = "delete_selected"
    DELETE_ALL = "delete_all"
    QUIT = "quit"


__all__ = ["Command"]
