"""Icon declarations, payload sources, and per-catalog payload caches.

A catalog maps lookup keys (file names, extensions, folder names) to icon
declarations. Payload bytes are read lazily from the theme's icon source and
memoized as base64 text the first time a key resolves.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from importlib.resources.abc import Traversable
from pathlib import Path

from .errors import IconLoadError, IconNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ICON_KEY = "default"


@dataclass(frozen=True)
class IconEntry:
    """One theme declaration: several lookup aliases sharing one payload file."""

    names: tuple[str, ...]
    filename: str


class IconSource:
    """Read raw icon bytes relative to a theme root.

    ``root`` may be a filesystem ``Path`` or an ``importlib.resources``
    traversable, so bundled themes and user theme directories load the same way.
    """

    def __init__(self, root: Path | Traversable) -> None:
        self.root = root

    def read_bytes(self, filename: str) -> bytes:
        return (self.root / filename).read_bytes()

    def __repr__(self) -> str:
        return f"IconSource({str(self.root)!r})"


def hash_icons(icons: Iterable[IconEntry], *, case_sensitive: bool = True) -> dict[str, IconEntry]:
    """Expand every alias of every declaration into a flat key mapping.

    Later declarations silently override earlier ones sharing an alias.
    """
    result: dict[str, IconEntry] = {}
    for icon in icons:
        for name in icon.names:
            result[name if case_sensitive else name.lower()] = icon
    return result


@dataclass
class IconCatalog:
    """Key -> declaration mapping with an insert-only base64 payload cache."""

    source: IconSource
    icons: dict[str, IconEntry]
    cache: dict[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        source: IconSource,
        icons: Iterable[IconEntry],
        *,
        case_sensitive: bool = True,
    ) -> IconCatalog:
        return cls(source=source, icons=hash_icons(icons, case_sensitive=case_sensitive))

    def __contains__(self, key: str) -> bool:
        return key in self.icons

    def load(self, key: str) -> str:
        """Return the base64 payload for ``key``.

        Cache hits never touch the icon source. A failed read is not cached,
        so a later call for the same key retries the read.
        """
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        icon = self.icons.get(key)
        if icon is None:
            raise IconNotFoundError(key)

        try:
            data = self.source.read_bytes(icon.filename)
        except OSError as exc:
            raise IconLoadError(key, icon.filename, exc) from exc

        logger.debug("loaded icon %r from %s/%s", key, self.source.root, icon.filename)
        payload = base64.b64encode(data).decode("ascii")
        self.cache[key] = payload
        return payload


__all__ = [
    "DEFAULT_ICON_KEY",
    "IconEntry",
    "IconSource",
    "IconCatalog",
    "hash_icons",
]
