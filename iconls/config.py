"""User JSON config and theme-location resolution.

The theme directory is chosen from, in order: an explicit path, the
``ICONLS_THEME`` environment variable, the ``theme_path`` config key, and
finally the theme bundled with the package. Malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
import os
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "iconls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
THEME_ENV_VAR = "ICONLS_THEME"
DEBUG_ENV_VAR = "ICONLS_DEBUG"
BUNDLED_THEME = "default"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_path() -> Path | None:
    """Load the persisted theme directory, or ``None`` when unset/invalid."""
    value = load_config().get("theme_path")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return Path(stripped).expanduser() if stripped else None


def bundled_theme_location() -> Traversable:
    return files("iconls") / "themes" / BUNDLED_THEME


def resolve_theme_location(explicit: str | Path | None = None) -> Path | Traversable:
    """Return the theme directory to load, honoring the override order."""
    if explicit:
        return Path(explicit).expanduser()
    from_env = os.environ.get(THEME_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser()
    configured = load_theme_path()
    if configured is not None:
        return configured
    return bundled_theme_location()


def debug_enabled() -> bool:
    return bool(os.environ.get(DEBUG_ENV_VAR, "").strip())


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "THEME_ENV_VAR",
    "DEBUG_ENV_VAR",
    "load_config",
    "load_theme_path",
    "bundled_theme_location",
    "resolve_theme_location",
    "debug_enabled",
]
