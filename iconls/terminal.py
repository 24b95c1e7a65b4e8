"""Terminal helpers: width probing and the iTerm2 inline-image escape."""

from __future__ import annotations

import re
import subprocess
import sys

INLINE_IMAGE_TEMPLATE = " \033]1337;File=inline=1;height=1:{payload}\a"
_NUMBER_RE = re.compile(r"[0-9]+")


def inline_image(payload: str) -> str:
    """Wrap a base64 payload in the iTerm2 inline-image protocol."""
    return INLINE_IMAGE_TEMPLATE.format(payload=payload)


def terminal_columns() -> int:
    """Return the terminal width reported by ``stty size``, or ``-1``.

    Any failure (no tty, missing ``stty``, unexpected output) returns ``-1``,
    which callers treat as "do not wrap".
    """
    try:
        completed = subprocess.run(
            ["stty", "size"],
            stdin=sys.stdin,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, ValueError, subprocess.SubprocessError):
        return -1

    numbers = _NUMBER_RE.findall(completed.stdout)
    if len(numbers) < 2:
        return -1
    return int(numbers[1])


__all__ = ["INLINE_IMAGE_TEMPLATE", "inline_image", "terminal_columns"]
