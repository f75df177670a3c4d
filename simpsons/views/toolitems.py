"""Ranking of tool usage and the scroll window shared by scrollable views."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from simpsons.components.barchart import BarItem


def top_n_tool_items(tools_used: Mapping[str, int], n: int) -> list[BarItem]:
    """Return the ``n`` most used tools as bar items, most used first.

    Tools with equal counts are ordered by name so the result is stable.
    """
    ranked = sorted(tools_used.items(), key=lambda item: (-item[1], item[0]))
    return [BarItem(label=name, value=count) for name, count in ranked[: max(n, 0)]]


def scroll_window(
    lines: Sequence[str], scroll_y: int, visible_height: int
) -> tuple[list[str], int]:
    """Return the lines visible from ``scroll_y`` and the clamped offset.

    The offset is pulled back onto the last line when it runs past the
    end, and at least one line is shown however small the height.
    """
    if not lines:
        return [], 0
    offset = max(0, scroll_y)
    if offset >= len(lines):
        offset = len(lines) - 1
    height = max(1, visible_height)
    end = min(offset + height, len(lines))
    return list(lines[offset:end]), offset