"""Exception types raised by theme loading, icon lookup, and listing."""

from __future__ import annotations

from pathlib import Path


class IconlsError(Exception):
    """Base class for every error the command reports on stderr."""


class ThemeLoadError(IconlsError):
    """Theme document is unreadable/malformed or a default icon is missing."""


class IconNotFoundError(IconlsError):
    """Lookup key has no declaration in an icon catalog."""

    def __init__(self, key: str) -> None:
        super().__init__(f"icon {key!r} not matched")
        self.key = key


class IconLoadError(IconlsError):
    """Icon declaration matched but its payload bytes could not be read."""

    def __init__(self, key: str, filename: str, reason: object) -> None:
        super().__init__(f"cannot load icon {key!r} from {filename!r}: {reason}")
        self.key = key
        self.filename = filename


class DirectoryAccessError(IconlsError):
    """Directory could not be opened or read."""

    def __init__(self, path: str | Path, reason: object) -> None:
        super().__init__(f"cannot access {str(path)!r}: {reason}")
        self.path = Path(path)


__all__ = [
    "IconlsError",
    "ThemeLoadError",
    "IconNotFoundError",
    "IconLoadError",
    "DirectoryAccessError",
]
