"""Word wrapping for chat messages."""

from __future__ import annotations


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap ``text`` to lines of at most ``width`` characters where possible.

    Paragraph breaks are kept, blank paragraphs become empty lines, and a
    word longer than ``width`` stands on a line of its own. A width of zero
    or less leaves the text unwrapped.
    """
    if width <= 0:
        return [text]

    lines: list[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = words[0]
        for word in words[1:]:
            if len(current) + 1 + len(word) > width:
                lines.append(current)
                current = word
            else:
                current += " " + word
        lines.append(current)
    return lines