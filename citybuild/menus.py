"""Logic behind the game-time, load and settings menus."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = [
    "LoadResult",
    "SpeedButton",
    "SAVE_FILE_EXTENSION",
    "SPEED_PRESETS",
    "SCREEN_MODES",
    "BUILD_MENU_LAYOUTS",
    "speed_buttons",
    "list_save_files",
    "format_resolution",
    "screen_mode_name",
    "build_menu_layout_name",
]

SAVE_FILE_EXTENSION = ".cts"

SPEED_PRESETS: tuple[tuple[str, float], ...] = (
    ("||", 0.0),
    (">", 1.0),
    (">>", 2.0),
    (">>>", 8.0),
)
"""Labels and clock speeds of the game-time buttons, left to right."""

_SPEED_TOLERANCE = 0.1

SCREEN_MODES: tuple[str, ...] = ("WINDOWED", "BORDERLESS", "FULLSCREEN")
BUILD_MENU_LAYOUTS: tuple[str, ...] = ("LEFT", "RIGHT", "TOP", "BOTTOM")


class LoadResult(Enum):
    """What the user chose in the load dialog."""

    NONE = "none"
    CLOSE = "close"
    LOAD_FILE = "load_file"
    DELETE_FILE = "delete_file"


@dataclass(frozen=True)
class SpeedButton:
    """One game-time button: its label, the speed it sets and its state."""

    label: str
    speed: float
    pressed: bool


def speed_buttons(current_speed: float) -> tuple[SpeedButton, ...]:
    """Return the game-time buttons; those matching *current_speed* are pressed."""
    return tuple(
        SpeedButton(label, speed, abs(current_speed - speed) < _SPEED_TOLERANCE)
        for label, speed in SPEED_PRESETS
    )


def list_save_files(directory: str | os.PathLike[str]) -> list[str]:
    """Return the names of the saved games in *directory*, sorted.

    Only regular files ending in ``.cts`` count. Raises FileNotFoundError
    when *directory* does not exist.
    """
    with os.scandir(directory) as entries:
        names = [
            entry.name
            for entry in entries
            if entry.is_file() and Path(entry.name).suffix == SAVE_FILE_EXTENSION
        ]
    return sorted(names)


def format_resolution(width: int, height: int) -> str:
    """Return a screen resolution as shown in the settings menu."""
    return f"{width} x {height}"


def _name_at(names: tuple[str, ...], index: int, what: str) -> str:
    if isinstance(index, bool) or not 0 <= index < len(names):
        raise ValueError(f"invalid {what} index: {index!r}")
    return names[index]


def screen_mode_name(index: int) -> str:
    """Return the name of the full-screen mode with *index*."""
    return _name_at(SCREEN_MODES, index, "screen mode")


def build_menu_layout_name(index: int) -> str:
    """Return the name of the build menu position with *index*."""
    return _name_at(BUILD_MENU_LAYOUTS, index, "build menu layout")