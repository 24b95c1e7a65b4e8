"""Bare (tab-wrapped) and long (tabular) renderers for one directory.

Both renderers return the text to print; the command decides where it goes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..humanize import human_size, permissions
from ..owners import group_name, link_count, user_name
from .types import DirectoryEntry, FlagSet

ICON_WIDTH = 4
TAB_SIZE = 8

IconRenderer = Callable[[DirectoryEntry], str]


def display_name(entry: DirectoryEntry, flags: FlagSet) -> str:
    if flags.reveal_nature and entry.is_dir:
        return f"{entry.name}/"
    return entry.name


def size_label(entry: DirectoryEntry, flags: FlagSet) -> str:
    if flags.human_size:
        return human_size(entry.size)
    return str(entry.size)


def render_bare(
    entries: Sequence[DirectoryEntry],
    flags: FlagSet,
    icon_for: IconRenderer,
    line_width: int,
) -> str:
    """Render ``icon name<TAB>`` cells, breaking lines near ``line_width``.

    The width budget counts name characters plus a fixed icon allowance, then
    a tab stop. When the budget overflows, a newline is written before the
    cell and the counter restarts at zero. ``line_width <= 0`` disables
    wrapping.
    """
    out: list[str] = []
    printed = 0
    for entry in entries:
        name = display_name(entry, flags)
        icon = icon_for(entry)
        if line_width > 0:
            printed += len(name) + ICON_WIDTH
            if printed > line_width:
                out.append("\n")
                printed = 0
            else:
                printed += TAB_SIZE
        out.append(f"{icon}{name}\t")
    out.append("\n")
    return "".join(out)


def render_long(
    entries: Sequence[DirectoryEntry],
    flags: FlagSet,
    icon_for: IconRenderer,
) -> str:
    """Render a ``total`` header and one tab-separated row per entry."""
    lines = [f"total {len(entries)}\n"]
    for entry in entries:
        columns = (
            permissions(entry.mode),
            f"{link_count(entry.stat):4d}",
            f"{user_name(entry.stat):>8}",
            f"{group_name(entry.stat):>8}",
            f"{size_label(entry, flags):>10}",
            f"{icon_for(entry)}{display_name(entry, flags)}",
        )
        lines.append("\t".join(columns) + "\n")
    return "".join(lines)


__all__ = [
    "ICON_WIDTH",
    "TAB_SIZE",
    "IconRenderer",
    "display_name",
    "size_label",
    "render_bare",
    "render_long",
]
