"""Text rendering helpers shared by the server tools."""

from __future__ import annotations

__all__ = ["format_bytes", "truncate"]

_BYTE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_bytes(size: int | float | None) -> str:
    """Render *size* in bytes using 1024-based units with up to two decimals."""

    if not size or size <= 0:
        return "0 B"
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(_BYTE_UNITS) - 1:
        value /= 1024
        exponent += 1
    scaled = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {_BYTE_UNITS[exponent]}"


def truncate(text: str | None, limit: int = 200) -> str | None:
    """Return *text* cut to *limit* characters, marking the cut with ``...``."""

    if text is None:
        return None
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
