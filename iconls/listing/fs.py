"""Directory reading, ordering, and hidden-entry filtering."""

from __future__ import annotations

import logging
import os
import stat as stat_module
from pathlib import Path

from ..errors import DirectoryAccessError
from .types import DirectoryEntry, FlagSet

logger = logging.getLogger(__name__)


def entry_from_stat(name: str, stat: os.stat_result) -> DirectoryEntry:
    return DirectoryEntry(
        name=name,
        is_dir=stat_module.S_ISDIR(stat.st_mode),
        size=int(stat.st_size),
        mtime_ns=int(stat.st_mtime_ns),
        mode=stat_module.S_IMODE(stat.st_mode),
        stat=stat,
    )


def read_directory(directory: str | Path) -> list[DirectoryEntry]:
    """Return every child of ``directory`` in read order.

    Symlinks are described by their own ``lstat`` data. Any failure to open,
    scan, or stat raises ``DirectoryAccessError``.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                entries.append(entry_from_stat(child.name, child.stat(follow_symlinks=False)))
    except OSError as exc:
        raise DirectoryAccessError(directory, exc.strerror or exc) from exc
    logger.debug("read %d entries from %s", len(entries), directory)
    return entries


def sort_entries(entries: list[DirectoryEntry], by_time: bool = False) -> list[DirectoryEntry]:
    """Return entries ascending by name, or stably ascending by mtime."""
    if by_time:
        return sorted(entries, key=lambda entry: entry.mtime_ns)
    return sorted(entries, key=lambda entry: entry.name)


def drop_hidden(entries: list[DirectoryEntry]) -> list[DirectoryEntry]:
    return [entry for entry in entries if not entry.name.startswith(".")]


def prepare_entries(entries: list[DirectoryEntry], flags: FlagSet) -> list[DirectoryEntry]:
    """Order then filter raw entries according to ``flags``."""
    if not flags.no_sort:
        entries = sort_entries(entries, by_time=flags.sort_by_time)
    if not flags.show_hidden:
        entries = drop_hidden(entries)
    return entries


__all__ = [
    "entry_from_stat",
    "read_directory",
    "sort_entries",
    "drop_hidden",
    "prepare_entries",
]
