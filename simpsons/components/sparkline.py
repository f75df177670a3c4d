"""Sparklines and vertical bar graphs."""

from __future__ import annotations

from collections.abc import Sequence

from simpsons.styles import Style

_SPARK_BLOCKS = " ▁▂▃▄▅▆▇█"
_DIM = "#6B7280"


def _sample(data: Sequence[int], width: int) -> list[int]:
    """Reduce ``data`` to at most ``width`` points by even sampling."""
    if len(data) <= width:
        return list(data)
    if width <= 0:
        raise ValueError("width must be positive")
    ratio = len(data) / width
    return [data[min(int(i * ratio), len(data) - 1)] for i in range(width)]


def sparkline(data: Sequence[int], max_width: int) -> str:
    """Render a one-row sparkline no wider than ``max_width``."""
    if not data:
        return ""
    values = _sample(data, max_width)
    low, high = min(values), max(values)
    span = high - low
    if span == 0:
        return _SPARK_BLOCKS[len(_SPARK_BLOCKS) // 2] * len(values)
    return "".join(
        _SPARK_BLOCKS[(v - low) * (len(_SPARK_BLOCKS) - 1) // span] for v in values
    )


def bar_graph_colored(data: Sequence[int], width: int, height: int, color: str) -> str:
    """Render a vertical bar graph ``height`` rows tall in ``color``."""
    if not data:
        return ""
    values = _sample(data, width)
    max_value = max(values) or 1

    bar_style = Style(foreground=color)
    dim_style = Style(foreground=_DIM)
    count = len(values)

    lines = []
    for row in range(height, 0, -1):
        threshold = max_value * row // height
        line = "".join(
            bar_style.render("█") if v >= threshold and v > 0 else " " for v in values
        )
        if row == height:
            line += dim_style.render(f" {max_value}")
        lines.append(line)

    # Day markers count back from the most recent point at the right edge.
    lines.append(
        "".join(
            dim_style.render("┼" if (count - i) % 7 == 0 else "─") for i in range(count)
        )
    )

    labels = [" "] * count
    for i in range(count):
        day = count - i
        if day % 7 == 0:
            for offset, char in enumerate(f"{day}d"):
                if i + offset < count:
                    labels[i + offset] = char
    lines.append(dim_style.render("".join(labels)))

    return "\n".join(lines)


def bar_graph(data: Sequence[int], width: int, height: int) -> str:
    """Render a vertical bar graph in the primary orange."""
    return bar_graph_colored(data, width, height, "#FF8C00")