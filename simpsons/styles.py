"""Colour theme and a small terminal text-styling primitive."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
_RESET = "\x1b[0m"


def visible_width(text: str) -> int:
    """Return the printable width of ``text``, ignoring ANSI escape codes."""
    return len(_ANSI_RE.sub("", text))


def _hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color[1:] if color.startswith("#") else color
    if len(value) != 6:
        raise ValueError(f"invalid hex colour: {color!r}")
    try:
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
    except ValueError as exc:
        raise ValueError(f"invalid hex colour: {color!r}") from exc


@dataclass(frozen=True)
class Theme:
    """Colour palette for the interface, as hex strings."""

    primary: str
    secondary: str
    accent: str
    muted: str
    error: str
    success: str
    warning: str
    bg_dark: str
    bg_light: str
    fg: str
    fg_dim: str


def default_theme() -> Theme:
    """Return the default colour theme."""
    return Theme(
        primary="#FF8C00",
        secondary="#FED90F",
        accent="#F59E0B",
        muted="#6B7280",
        error="#EF4444",
        success="#10B981",
        warning="#F59E0B",
        bg_dark="#1F2937",
        bg_light="#374151",
        fg="#F9FAFB",
        fg_dim="#9CA3AF",
    )


@dataclass(frozen=True)
class Style:
    """Text attributes rendered as ANSI escape sequences.

    ``padding`` is ``(vertical, horizontal)`` in cells.
    """

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    faint: bool = False
    underline: bool = False
    padding: tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        for color in (self.foreground, self.background):
            if color is not None:
                _hex_to_rgb(color)
        vertical, horizontal = self.padding
        if vertical < 0 or horizontal < 0:
            raise ValueError("padding must not be negative")

    def _sgr(self) -> str:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.faint:
            codes.append("2")
        if self.underline:
            codes.append("4")
        if self.foreground is not None:
            r, g, b = _hex_to_rgb(self.foreground)
            codes.append(f"38;2;{r};{g};{b}")
        if self.background is not None:
            r, g, b = _hex_to_rgb(self.background)
            codes.append(f"48;2;{r};{g};{b}")
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def render(self, text: str) -> str:
        """Render ``text`` with this style applied to every line."""
        lines = str(text).split("\n")
        content_width = max(visible_width(line) for line in lines)
        vertical, horizontal = self.padding
        side = " " * horizontal
        padded = [
            side + line + " " * (content_width - visible_width(line)) + side
            for line in lines
        ]
        blank = " " * (content_width + 2 * horizontal)
        rows = [blank] * vertical + padded + [blank] * vertical
        prefix = self._sgr()
        if not prefix:
            return "\n".join(rows)
        return "\n".join(f"{prefix}{row}{_RESET}" if row else row for row in rows)


@dataclass(frozen=True)
class Styles:
    """Pre-built styles derived from a theme."""

    tab_bar: Style = field(default_factory=Style)
    tab_active: Style = field(default_factory=Style)
    tab_inactive: Style = field(default_factory=Style)
    status_bar: Style = field(default_factory=Style)
    title: Style = field(default_factory=Style)
    subtitle: Style = field(default_factory=Style)
    stat_label: Style = field(default_factory=Style)
    stat_value: Style = field(default_factory=Style)
    selected: Style = field(default_factory=Style)
    viewport: Style = field(default_factory=Style)

    @classmethod
    def from_theme(cls, theme: Theme) -> Styles:
        """Build the style set for ``theme``."""
        return cls(
            tab_bar=Style(background=theme.bg_dark, padding=(0, 1)),
            tab_active=Style(
                background=theme.primary,
                foreground=theme.bg_dark,
                bold=True,
                padding=(0, 2),
            ),
            tab_inactive=Style(foreground=theme.fg_dim, padding=(0, 2)),
            status_bar=Style(
                background=theme.bg_dark, foreground=theme.fg_dim, padding=(0, 1)
            ),
            title=Style(foreground=theme.primary, bold=True),
            subtitle=Style(foreground=theme.secondary),
            stat_label=Style(foreground=theme.fg_dim),
            stat_value=Style(foreground=theme.fg, bold=True),
            selected=Style(background="#2D3748", foreground=theme.primary, bold=True),
            viewport=Style(padding=(1, 2)),
        )