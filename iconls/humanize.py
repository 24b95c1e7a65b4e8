"""Human-readable byte counts and permission strings for long listings."""

from __future__ import annotations

import math

SIZE_UNITS = ("B", "K", "M", "G", "T", "P", "E")
SIZE_BASE = 1000
_RWX = "rwxrwxrwx"


def human_size(size: int, base: int = SIZE_BASE, units: tuple[str, ...] = SIZE_UNITS) -> str:
    """Format ``size`` bytes with a magnitude suffix.

    Values under 10 keep the raw unit (``9 B``). Larger values are rounded to
    one decimal; the decimal is shown only while the scaled value is below 10
    (``2.0K``, ``9.9M``, ``83M``).
    """
    if size < 10:
        return f"{size} B"
    exponent = 0
    while exponent < len(units) - 1 and size >= base ** (exponent + 1):
        exponent += 1
    value = math.floor(size / base**exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f}{units[exponent]}"
    return f"{value:.0f}{units[exponent]}"


def permissions(mode: int) -> str:
    """Render the nine user/group/other permission bits, e.g. ``rw-r--r--``."""
    return "".join(
        letter if mode & (1 << (len(_RWX) - 1 - index)) else "-"
        for index, letter in enumerate(_RWX)
    )


__all__ = ["SIZE_UNITS", "SIZE_BASE", "human_size", "permissions"]
