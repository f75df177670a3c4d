"""Single-line text input."""

from __future__ import annotations

from dataclasses import dataclass

from simpsons.keys import KeyMsg, KeyType


@dataclass
class TextInput:
    """A prompt followed by typed text, shown only while active."""

    prompt: str = ""
    active: bool = False
    value: str = ""

    def update(self, key: KeyMsg) -> bool:
        """Handle a key press; return True if the input consumed it."""
        if not self.active:
            return False
        if key.type is KeyType.ESC:
            self.active = False
            self.value = ""
        elif key.type is KeyType.ENTER:
            # The value stays for the caller to read.
            self.active = False
        elif key.type is KeyType.BACKSPACE:
            self.value = self.value[:-1]
        elif key.type is KeyType.RUNES:
            self.value += key.runes
        return True

    def view(self) -> str:
        """Render the prompt and value, or an empty string when inactive."""
        if not self.active:
            return ""
        return self.prompt + self.value