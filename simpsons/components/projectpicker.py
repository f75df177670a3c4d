"""Selector for a target project, with an optional custom path."""

from __future__ import annotations

from dataclasses import dataclass, field

from simpsons.keys import KeyMsg, KeyType


@dataclass
class ProjectPicker:
    """Pick one of ``projects`` or type a custom path.

    The entry after the last project stands for the custom path.
    """

    projects: list[str] = field(default_factory=list)
    original_path: str = ""
    active: bool = False
    selected: int = 0
    custom_input: str = ""
    entering_custom: bool = False

    def update(self, key: KeyMsg) -> bool:
        """Handle a key press; return True if the picker consumed it."""
        if not self.active:
            return False
        if self.entering_custom:
            self._update_custom(key)
        else:
            self._update_list(key)
        return True

    def _update_custom(self, key: KeyMsg) -> None:
        if key.type in (KeyType.ESC, KeyType.TAB):
            self.entering_custom = False
        elif key.type is KeyType.ENTER:
            self.active = False
        elif key.type is KeyType.BACKSPACE:
            self.custom_input = self.custom_input[:-1]
        elif key.type is KeyType.RUNES:
            self.custom_input += key.runes

    def _move(self, step: int) -> None:
        self.selected = max(0, min(self.selected + step, len(self.projects)))

    def _update_list(self, key: KeyMsg) -> None:
        if key.type in (KeyType.ESC, KeyType.ENTER):
            self.active = False
        elif key.type is KeyType.TAB:
            self.entering_custom = True
        elif key.type is KeyType.UP:
            self._move(-1)
        elif key.type is KeyType.DOWN:
            self._move(1)
        elif key.type is KeyType.RUNES:
            if key.runes == "j":
                self._move(1)
            elif key.runes == "k":
                self._move(-1)

    def selected_project(self) -> str:
        """Return the chosen project path, or the custom input."""
        if self.entering_custom or self.selected >= len(self.projects):
            return self.custom_input
        return self.projects[self.selected]

    def view(self, width: int) -> str:
        """Render the picker, or an empty string when inactive."""
        if not self.active:
            return ""

        lines = ["Select target project:"]
        for index, path in enumerate(self.projects):
            marker = "> " if index == self.selected and not self.entering_custom else "  "
            suffix = " (original)" if path == self.original_path else ""
            lines.append(f"{marker}{path}{suffix}")

        custom_chosen = self.entering_custom or self.selected >= len(self.projects)
        custom_marker = "> " if custom_chosen else "  "
        lines.append(f"{custom_marker}[Custom] {self.custom_input}")
        lines.append("")
        lines.append("Tab: toggle custom  Enter: confirm  Esc: cancel")
        return "\n".join(lines)