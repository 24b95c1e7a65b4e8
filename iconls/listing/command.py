"""Listing command: flags + location + theme, executed recursively."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from ..terminal import inline_image, terminal_columns
from ..theme import Theme
from .flags import parse_arguments
from .fs import prepare_entries, read_directory
from .render import render_bare, render_long
from .types import DirectoryEntry

logger = logging.getLogger(__name__)


def join_path(directory: str, name: str) -> str:
    """Join and clean a child path so ``.`` roots print as ``name``."""
    return os.path.normpath(os.path.join(directory, name))


class ListingCommand:
    """List a location the way ``ls`` would, with an icon before every name.

    Arguments starting with ``-`` are flag tokens; any other argument is the
    target location (the last one wins, default ``.``). Output goes to
    ``stdout`` and bare listings wrap at the width returned by ``line_width``.
    """

    def __init__(
        self,
        theme: Theme,
        args: Iterable[str] = (),
        *,
        stdout: TextIO | None = None,
        line_width: Callable[[], int] = terminal_columns,
    ) -> None:
        self.theme = theme
        self.flags, self.location = parse_arguments(args)
        self._stdout = stdout
        self._line_width = line_width

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def icon_for(self, entry: DirectoryEntry) -> str:
        return inline_image(self.theme.icon_for(entry))

    def entries(self, directory: str) -> list[DirectoryEntry]:
        """Read, order, and filter the children of ``directory``."""
        return prepare_entries(read_directory(directory), self.flags)

    def display(self, entries: list[DirectoryEntry]) -> None:
        if self.flags.long_format:
            text = render_long(entries, self.flags, self.icon_for)
        else:
            text = render_bare(entries, self.flags, self.icon_for, self._line_width())
        self.stdout.write(text)

    def _execute(self, directory: str) -> None:
        entries = self.entries(directory)
        self.display(entries)
        if not self.flags.recurse:
            return
        for entry in entries:
            if not entry.is_dir:
                continue
            child = join_path(directory, entry.name)
            self.stdout.write(f"\n{child}\n")
            logger.debug("recursing into %s", child)
            self._execute(child)

    def execute(self) -> None:
        """List the target location; the first failure aborts the whole run."""
        self._execute(self.location)


__all__ = [
    "ListingCommand",
    "join_path",
]
