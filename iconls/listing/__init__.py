"""Listing engine: flag grammar, directory reading, and rendering.

This package contains:
- flag and entry datatypes
- the ``-la``-style flag parser
- directory scanning, ordering, and hidden-entry filtering
- bare and long renderers
- the recursive ``ListingCommand``
"""

from __future__ import annotations

from .types import DirectoryEntry, FlagSet
from .flags import DEFAULT_LOCATION, FLAG_FIELDS, parse_arguments, parse_flag
from .fs import drop_hidden, entry_from_stat, prepare_entries, read_directory, sort_entries
from .render import display_name, render_bare, render_long, size_label
from .command import ListingCommand, join_path

__all__ = [
    "DirectoryEntry",
    "FlagSet",
    "DEFAULT_LOCATION",
    "FLAG_FIELDS",
    "parse_arguments",
    "parse_flag",
    "drop_hidden",
    "entry_from_stat",
    "prepare_entries",
    "read_directory",
    "sort_entries",
    "display_name",
    "render_bare",
    "render_long",
    "size_label",
    "ListingCommand",
    "join_path",
]
