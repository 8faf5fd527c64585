"""Locations of the game's user data and fixed resource files."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping

__all__ = [
    "APP_DIR_NAME",
    "SETTINGS_FILENAME",
    "RESOURCES_DIR",
    "SETTINGS_FILE_NAME",
    "SAVEGAME_VERSION",
    "TERRAINGEN_DATA_FILE_NAME",
    "DEFAULT_TERRAIN",
    "data_dir_base",
    "data_dir",
    "savegame_dir",
]

APP_DIR_NAME = "Citybuild"
SETTINGS_FILENAME = "settings.json"
RESOURCES_DIR = "resources/"
SETTINGS_FILE_NAME = "resources/settings.json"
SAVEGAME_VERSION = 4
TERRAINGEN_DATA_FILE_NAME = "resources/data/TerrainGen.json"
DEFAULT_TERRAIN = "terrain_grass"


def _resolve(
    system: str | None, environ: Mapping[str, str] | None
) -> tuple[str, Mapping[str, str]]:
    name = (sys.platform if system is None else system).lower()
    return name, (os.environ if environ is None else environ)


def data_dir_base(
    system: str | None = None, environ: Mapping[str, str] | None = None
) -> str:
    """Return the platform's base directory for per-user application data.

    Raises KeyError when a required environment variable is not set.
    """
    name, env = _resolve(system, environ)
    if name.startswith(("linux", "android")):
        xdg = env.get("XDG_DATA_HOME")
        if xdg is not None:
            return xdg
        return env["HOME"] + "/.local/share"
    if name.startswith("win"):
        return env["APPDATA"]
    if name.startswith("darwin"):
        return env["HOME"] + "/Library/Application Support"
    return ""


def data_dir(
    system: str | None = None, environ: Mapping[str, str] | None = None
) -> str:
    """Return the game's own data directory, ending with a slash."""
    return f"{data_dir_base(system, environ)}/{APP_DIR_NAME}/"


def savegame_dir(
    system: str | None = None, environ: Mapping[str, str] | None = None
) -> str:
    """Return the directory holding saved games, ending with a slash."""
    return data_dir(system, environ) + "saves/"