import re

import pytest

from simpsons.styles import Style, Styles, default_theme, visible_width

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def test_theme_colors():
    theme = default_theme()
    assert theme.primary == "#FF8C00"
    assert theme.secondary == "#FED90F"
    assert theme.muted == "#6B7280"


def test_plain_style_returns_text_unchanged():
    assert Style().render("abc") == "abc"


def test_horizontal_padding():
    assert Style(padding=(0, 2)).render("x") == "  x  "


def test_vertical_padding_adds_blank_lines():
    lines = Style(padding=(1, 2)).render("ab").split("\n")
    assert lines == ["      ", "  ab  ", "      "]


def test_bold_wraps_in_escape_codes():
    out = Style(bold=True).render("x")
    assert out.startswith("\x1b[")
    assert out.endswith("\x1b[0m")
    assert plain(out) == "x"


def test_foreground_uses_truecolor():
    out = Style(foreground="#FF8C00").render("hi")
    assert "38;2;255;140;0" in out
    assert plain(out) == "hi"


def test_multiline_lines_are_aligned():
    out = Style().render("a\nabc")
    assert out.split("\n") == ["a  ", "abc"]


def test_invalid_colour_raises():
    with pytest.raises(ValueError):
        Style(foreground="orange")


def test_negative_padding_raises():
    with pytest.raises(ValueError):
        Style(padding=(-1, 0))


def test_visible_width_ignores_escape_codes():
    styled = Style(bold=True, foreground="#10B981").render("hello")
    assert visible_width(styled) == 5


def test_styles_from_theme():
    theme = default_theme()
    styles = Styles.from_theme(theme)
    assert styles.title.foreground == theme.primary
    assert styles.title.bold is True
    assert styles.tab_active.background == theme.primary
    assert styles.selected.background == "#2D3748"
    assert styles.viewport.padding == (1, 2)