"""Horizontal bar chart."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from simpsons.styles import Style


@dataclass(frozen=True)
class BarItem:
    """One labelled bar."""

    label: str
    value: int


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _bar_color(ratio: float) -> str:
    if ratio >= 0.75:
        return "#FED90F"
    if ratio >= 0.50:
        return "#FF8C00"
    if ratio >= 0.25:
        return "#F59E0B"
    return "#B85C00"


def bar_chart(items: Sequence[BarItem], max_width: int) -> str:
    """Render items as coloured horizontal bars, one line each."""
    if not items:
        return ""

    max_label = max(len(item.label) for item in items)
    max_val = max(0, max(item.value for item in items))

    bar_width = min(max(max_width - max_label - 10, 10), 40)

    label_style = Style(foreground="#9CA3AF")
    count_style = Style(foreground="#9CA3AF", faint=True)

    lines = []
    for item in items:
        # Half-block resolution: each character cell holds two units.
        units = _trunc_div(item.value * bar_width * 2, max_val) if max_val > 0 else 0
        if units < 1 and item.value > 0:
            units = 1
        full_blocks, half_block = divmod(max(units, 0), 2)

        ratio = item.value / max_val if max_val > 0 else 0.0
        bar_style = Style(foreground=_bar_color(ratio))

        bar = "█" * full_blocks + ("▌" if half_block else "")
        label = label_style.render(item.label.ljust(max_label))
        count = count_style.render(str(item.value))
        lines.append(f"{label} {bar_style.render(bar)} {count}")

    return "\n".join(lines)