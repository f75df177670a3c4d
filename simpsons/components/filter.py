"""Type-to-filter text input."""

from __future__ import annotations

from dataclasses import dataclass

from simpsons.keys import KeyMsg, KeyType


@dataclass
class Filter:
    """A filter prompt that is opened with ``/`` and narrows lists by substring."""

    active: bool = False
    query: str = ""

    def update(self, key: KeyMsg) -> bool:
        """Handle a key press; return True if the filter consumed it."""
        if not self.active:
            if key.type is KeyType.RUNES and key.runes == "/":
                self.active = True
                return True
            return False

        if key.type is KeyType.ESC:
            self.active = False
            self.query = ""
        elif key.type is KeyType.ENTER:
            self.active = False
        elif key.type is KeyType.BACKSPACE:
            self.query = self.query[:-1]
        elif key.type is KeyType.RUNES:
            self.query += key.runes
        return True

    def view(self) -> str:
        """Return the prompt line while active, otherwise an empty string."""
        if not self.active:
            return ""
        return f"/ {self.query}▎"

    def matches(self, text: str) -> bool:
        """Return True if ``text`` contains the query, ignoring case."""
        if not self.query:
            return True
        return self.query.lower() in text.lower()