"""Single-dash flag grammar: ``-la`` parses the same as ``-l -a``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from .types import FlagSet

DEFAULT_LOCATION = "."

# flag character -> FlagSet field
FLAG_FIELDS: dict[str, str] = {
    # long format: permissions, links, owner, group, size, icon, name
    "l": "long_format",
    # keep directory read order
    "f": "no_sort",
    # append "/" to directory names
    "F": "reveal_nature",
    # include names starting with "."
    "a": "show_hidden",
    "R": "recurse",
    "t": "sort_by_time",
    "h": "human_size",
}


def parse_flag(token: str, flags: FlagSet | None = None) -> tuple[FlagSet, int]:
    """Apply every recognized character after the leading dash of ``token``.

    Returns the updated flags and the number of recognized characters.
    Duplicates count each time; unknown characters are skipped.
    """
    flags = flags if flags is not None else FlagSet()
    enabled: dict[str, bool] = {}
    matched = 0
    for char in token[1:]:
        field_name = FLAG_FIELDS.get(char)
        if field_name is None:
            continue
        enabled[field_name] = True
        matched += 1
    return replace(flags, **enabled), matched


def parse_arguments(args: Iterable[str]) -> tuple[FlagSet, str]:
    """Split raw arguments into flags and a location (last positional wins)."""
    flags = FlagSet()
    location = ""
    for arg in args:
        if arg.startswith("-"):
            flags, _matched = parse_flag(arg, flags)
        else:
            location = arg
    return flags, location or DEFAULT_LOCATION


__all__ = [
    "DEFAULT_LOCATION",
    "FLAG_FIELDS",
    "parse_flag",
    "parse_arguments",
]
