"""Icon theme loading and per-entry icon resolution.

A theme is a ``theme.json`` document plus the icon files it references. The
document declares three lists (``extensions``, ``folders``, ``files``); each
becomes an ``IconCatalog``. Every catalog must resolve the ``default`` key or
the theme refuses to load.
"""

from __future__ import annotations

import json
import logging
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Protocol

from .errors import IconNotFoundError, IconlsError, ThemeLoadError
from .icons import DEFAULT_ICON_KEY, IconCatalog, IconEntry, IconSource

logger = logging.getLogger(__name__)

THEME_FILENAME = "theme.json"
THEME_SECTIONS = ("extensions", "folders", "files")


class NamedEntry(Protocol):
    """Anything the resolver can look up: a name and a directory flag."""

    @property
    def name(self) -> str: ...

    @property
    def is_dir(self) -> bool: ...


def _parse_section(document: dict[str, object], section: str) -> list[IconEntry]:
    """Validate one theme list and convert it to ``IconEntry`` values."""
    raw_entries = document.get(section, [])
    if not isinstance(raw_entries, list):
        raise ThemeLoadError(f"theme section {section!r} must be a list")

    entries: list[IconEntry] = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict):
            raise ThemeLoadError(f"theme entry {section}[{index}] must be an object")
        names = raw.get("names")
        filename = raw.get("filename")
        if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
            raise ThemeLoadError(f"theme entry {section}[{index}] needs a list of string names")
        if not isinstance(filename, str) or not filename:
            raise ThemeLoadError(f"theme entry {section}[{index}] needs a filename")
        entries.append(IconEntry(names=tuple(names), filename=filename))
    return entries


class Theme:
    """Extension, folder, and file icon catalogs sharing one icon source."""

    def __init__(self, extensions: IconCatalog, folders: IconCatalog, files: IconCatalog) -> None:
        self.extensions = extensions
        self.folders = folders
        self.files = files

    @classmethod
    def load(cls, location: Path | Traversable | str) -> Theme:
        """Read ``theme.json`` under ``location`` and preload default icons.

        Raises ``ThemeLoadError`` when the document cannot be read or parsed,
        or when any catalog fails to resolve its default icon.
        """
        root = Path(location) if isinstance(location, str) else location
        source = IconSource(root)
        try:
            raw = source.read_bytes(THEME_FILENAME)
        except OSError as exc:
            raise ThemeLoadError(f"cannot read theme {str(root)!r}: {exc}") from exc
        try:
            document = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ThemeLoadError(f"malformed theme document in {str(root)!r}: {exc}") from exc
        if not isinstance(document, dict):
            raise ThemeLoadError(f"theme document in {str(root)!r} must be an object")

        extensions, folders, files = (_parse_section(document, section) for section in THEME_SECTIONS)
        theme = cls(
            extensions=IconCatalog.build(source, extensions, case_sensitive=False),
            folders=IconCatalog.build(source, folders),
            files=IconCatalog.build(source, files, case_sensitive=False),
        )

        for section, catalog in zip(THEME_SECTIONS, theme.catalogs()):
            try:
                catalog.load(DEFAULT_ICON_KEY)
            except IconlsError as exc:
                raise ThemeLoadError(f"theme {section} has no usable default icon: {exc}") from exc

        logger.debug(
            "loaded theme %s: %d extension keys, %d folder keys, %d file keys",
            root,
            len(theme.extensions.icons),
            len(theme.folders.icons),
            len(theme.files.icons),
        )
        return theme

    def catalogs(self) -> tuple[IconCatalog, IconCatalog, IconCatalog]:
        return self.extensions, self.folders, self.files

    def icon_for(self, entry: NamedEntry) -> str:
        """Return the base64 icon payload for a directory entry.

        Directories: exact folder name, then the folder default. Files:
        lowercased file name, then lowercased extension after the last dot,
        then the file default. Only catalog misses fall through; payload read
        failures propagate as ``IconLoadError``.
        """
        name = entry.name
        if entry.is_dir:
            try:
                return self.folders.load(name)
            except IconNotFoundError:
                return self.folders.load(DEFAULT_ICON_KEY)

        try:
            return self.files.load(name.lower())
        except IconNotFoundError:
            pass

        if "." in name:
            extension = name.rsplit(".", 1)[1].lower()
            try:
                return self.extensions.load(extension)
            except IconNotFoundError:
                pass

        return self.files.load(DEFAULT_ICON_KEY)


__all__ = [
    "THEME_FILENAME",
    "THEME_SECTIONS",
    "NamedEntry",
    "Theme",
]
