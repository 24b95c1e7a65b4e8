"""Domain datatypes for listing flags and directory entries."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FlagSet:
    """Switches controlling one listing run. Never mutated once parsed."""

    long_format: bool = False
    no_sort: bool = False
    reveal_nature: bool = False
    show_hidden: bool = False
    recurse: bool = False
    sort_by_time: bool = False
    human_size: bool = False


@dataclass(frozen=True)
class DirectoryEntry:
    """One directory child with the stat fields the renderers need.

    ``stat`` is the raw ``lstat`` result, used only for owner/group/link
    lookups; test doubles leave it as ``None``.
    """

    name: str
    is_dir: bool = False
    size: int = 0
    mtime_ns: int = 0
    mode: int = 0
    stat: os.stat_result | None = None


__all__ = [
    "FlagSet",
    "DirectoryEntry",
]
