"""Short name of the platform the game runs on."""

from __future__ import annotations

import sys

__all__ = ["platform_name"]


def platform_name(system: str | None = None) -> str:
    """Return the short platform name for *system*.

    *system* may be a ``sys.platform`` value or a ``platform.system()``
    value; it defaults to ``sys.platform``.
    """
    name = (sys.platform if system is None else system).lower()
    if name.startswith(("win", "cygwin", "msys")):
        return "win"
    if name.startswith(("darwin", "macos", "ios")):
        return "macosx"
    if name.startswith(("freebsd", "openbsd")):
        return "freebsd"
    if name.startswith("haiku"):
        return "haiku"
    if name.startswith("android"):
        return "android"
    return "linux"