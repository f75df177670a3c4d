"""Formatting helpers shared by the views."""

from __future__ import annotations

from datetime import timedelta


def decode_path(encoded: str) -> str:
    """Turn an encoded project directory name back into a filesystem path.

    Single dashes stand for ``/`` and doubled dashes for a literal ``-``.
    """
    if not encoded:
        return ""
    text = encoded.removeprefix("-")
    parts = text.split("--")
    return "/" + "-".join(part.replace("-", "/") for part in parts)


def _trunc_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return remainder if value >= 0 else -remainder


def format_duration(duration: timedelta) -> str:
    """Format a duration compactly, e.g. ``1h05m``, ``3m20s`` or ``45s``."""
    if duration == timedelta(0):
        return "-"
    total = duration.total_seconds()
    hours = int(total / 3600)
    minutes = _trunc_mod(int(total / 60), 60)
    seconds = _trunc_mod(int(total), 60)
    if hours > 0:
        return f"{hours}h{minutes:02d}m"
    if minutes > 0:
        return f"{minutes}m{seconds:02d}s"
    return f"{seconds}s"


def format_tokens_short(n: int) -> str:
    """Format a token count with a ``K`` or ``M`` suffix."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)