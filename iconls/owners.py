"""Owner, group, and hard-link metadata pulled from raw stat results."""

from __future__ import annotations

import grp
import os
import pwd


def user_name(stat: os.stat_result | None) -> str:
    """Return the owner's login name, or ``""`` when unknown."""
    if stat is None:
        return ""
    try:
        return pwd.getpwuid(stat.st_uid).pw_name
    except KeyError:
        return ""


def group_name(stat: os.stat_result | None) -> str:
    """Return the owning group's name, or ``""`` when unknown."""
    if stat is None:
        return ""
    try:
        return grp.getgrgid(stat.st_gid).gr_name
    except KeyError:
        return ""


def link_count(stat: os.stat_result | None) -> int:
    if stat is None:
        return 0
    return int(stat.st_nlink)


__all__ = ["user_name", "group_name", "link_count"]
