"""Day-by-hour activity heatmap."""

from __future__ import annotations

from collections.abc import Sequence

from simpsons.styles import Style

_HEAT_SHADES = ("", "#7C3B00", "#B85C00", "#FF8C00", "#FED90F")
_DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _mono_block(value: int, max_value: int) -> str:
    if max_value == 0:
        return "  "
    idx = value * (len(_HEAT_SHADES) - 1) // max_value
    idx = max(1, min(idx, len(_HEAT_SHADES) - 1))
    return Style(foreground=_HEAT_SHADES[idx]).render("██")


def heatmap(data: Sequence[Sequence[int]]) -> str:
    """Render a 7x24 grid (Monday to Sunday by hour) as coloured blocks."""
    if len(data) != 7 or any(len(row) != 24 for row in data):
        raise ValueError("heatmap data must be 7 rows of 24 values")

    max_value = max(max(row) for row in data)

    dim_style = Style(foreground="#6B7280")
    label_style = Style(foreground="#9CA3AF")
    empty_style = Style(foreground="#3D2B00")

    header = "     " + "".join(
        dim_style.render(f"{hour:<6d}") for hour in range(0, 24, 3)
    )

    rows = []
    for label, values in zip(_DAY_LABELS, data):
        cells = "".join(
            empty_style.render("░░") if value == 0 else _mono_block(value, max_value)
            for value in values
        )
        rows.append(label_style.render(f" {label} ") + cells)

    return "\n".join([header, *rows])