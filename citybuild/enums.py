"""Map layers and the editing modes of the game."""

from __future__ import annotations

from enum import Enum, IntEnum

__all__ = [
    "Layer",
    "LayerEditMode",
    "PlacementMode",
    "DemolishMode",
    "ALL_LAYERS_ORDERED",
    "LAYERS_IN_ACTIVE_ORDER",
    "LAYERS_POWERLINES_CAN_CROSS",
    "powerlines_can_cross",
]


class Layer(IntEnum):
    """Every layer a map node can hold, in drawing order."""

    NONE = 0
    BLUEPRINT = 1
    UNDERGROUND = 2
    TERRAIN = 3
    ZONE = 4
    ROAD = 5
    WATER = 6
    MOVABLE_OBJECTS = 7
    BUILDINGS = 8
    POWERLINES = 9
    FLORA = 10
    ANIMATIONS = 11
    SYMBOLS = 12
    GROUND_DECORATION = 13
    LAYERS_COUNT = 14


ALL_LAYERS_ORDERED: tuple[Layer, ...] = (
    Layer.BLUEPRINT,
    Layer.UNDERGROUND,
    Layer.TERRAIN,
    Layer.WATER,
    Layer.GROUND_DECORATION,
    Layer.ZONE,
    Layer.ROAD,
    Layer.POWERLINES,
    Layer.FLORA,
    Layer.BUILDINGS,
)
"""All layers that are interacted with, in order."""

LAYERS_IN_ACTIVE_ORDER: tuple[Layer, ...] = (
    Layer.BUILDINGS,
    Layer.UNDERGROUND,
    Layer.BLUEPRINT,
    Layer.GROUND_DECORATION,
    Layer.ROAD,
    Layer.POWERLINES,
    Layer.FLORA,
    Layer.ZONE,
    Layer.WATER,
    Layer.TERRAIN,
)
"""The same layers, from the most active to the least active."""

LAYERS_POWERLINES_CAN_CROSS: frozenset[Layer] = frozenset(
    {Layer.ROAD, Layer.WATER, Layer.FLORA}
)


class LayerEditMode(Enum):
    """Which group of layers is being edited."""

    TERRAIN = "terrain"
    BLUEPRINT = "blueprint"


class PlacementMode(Enum):
    """How tiles are laid out between a start and an end point."""

    SINGLE = "single"
    STRAIGHT_LINE = "straight_line"
    LINE = "line"
    RECTANGLE = "rectangle"


class DemolishMode(Enum):
    """What a demolish action removes."""

    DEFAULT = "default"
    DE_ZONE = "de_zone"
    GROUND_DECORATION = "ground_decoration"


def powerlines_can_cross(layer: Layer) -> bool:
    """Return True if a power line may be placed across *layer*."""
    return Layer(layer) in LAYERS_POWERLINES_CAN_CROSS