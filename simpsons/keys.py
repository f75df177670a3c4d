"""Key events delivered to interactive components."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class KeyType(enum.Enum):
    """Kind of key that was pressed."""

    RUNES = "runes"
    ESC = "esc"
    ENTER = "enter"
    BACKSPACE = "backspace"
    TAB = "tab"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class KeyMsg:
    """A single key press; ``runes`` holds typed text for ``KeyType.RUNES``."""

    type: KeyType
    runes: str = ""

    @classmethod
    def runes_key(cls, text: str) -> KeyMsg:
        """Return a key event for typed ``text``."""
        return cls(KeyType.RUNES, text)