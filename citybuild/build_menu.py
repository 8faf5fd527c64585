"""State and logic of the build menu: its button tree and what a click does."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

from citybuild.enums import DemolishMode, LayerEditMode, PlacementMode

__all__ = [
    "TileType",
    "TerrainEdit",
    "TileEntry",
    "GameState",
    "ImageRect",
    "BuildMenuButton",
    "BuildMenu",
    "scale_center_image",
    "MAIN_CATEGORIES",
    "CONSTRUCTION_ACTIONS",
]


class TileType(Enum):
    """Kind of a tile, which decides how it is placed."""

    DEFAULT = "default"
    TERRAIN = "terrain"
    WATER = "water"
    BLUEPRINT = "blueprint"
    AUTOTILE = "autotile"
    ZONE = "zone"
    ROAD = "road"
    POWERLINE = "powerline"
    GROUNDDECORATION = "grounddecoration"
    UNDERGROUND = "underground"
    FLORA = "flora"


class TerrainEdit(Enum):
    """Terrain editing tool that is active."""

    NONE = "none"
    RAISE = "raise"
    LOWER = "lower"
    LEVEL = "level"


@dataclass(frozen=True)
class TileEntry:
    """The part of a tile's data that the build menu needs."""

    category: str = ""
    sub_category: str = ""
    title: str = ""
    tile_type: TileType = TileType.DEFAULT
    clipping_width: int = 1
    clipping_height: int = 1
    offset: int = 0
    texture_width: int = 0
    texture_height: int = 0


@dataclass
class GameState:
    """Game-wide editing modes that the build menu switches."""

    placement_mode: PlacementMode = PlacementMode.SINGLE
    demolish_mode: DemolishMode = DemolishMode.DEFAULT
    layer_edit_mode: LayerEditMode = LayerEditMode.TERRAIN


@dataclass(frozen=True)
class ImageRect:
    """Where an image is drawn inside a button."""

    x: int
    y: int
    width: int
    height: int


def scale_center_image(
    button_width: int, button_height: int, image_width: int, image_height: int
) -> ImageRect:
    """Scale an image to fit a button, keeping its aspect ratio.

    Wide images sit at the bottom of the button; tall or square ones are
    centred horizontally.
    """
    if image_width <= 0 or image_height <= 0:
        raise ValueError(
            f"image size must be positive, got {image_width}x{image_height}"
        )
    if image_width > image_height:
        ratio = image_height / image_width
        height = math.ceil(button_height * ratio)
        return ImageRect(0, button_height - height, button_width, height)
    ratio = image_width / image_height
    width = math.ceil(button_width * ratio)
    return ImageRect(math.ceil((button_width - width) / 2), 0, width, button_height)


class BuildMenuButton:
    """A button of the build menu, possibly holding sub-buttons."""

    def __init__(
        self,
        texture: str,
        button_id: str,
        *,
        texture_size: tuple[int, int] = (0, 0),
        sub_button_size: tuple[int, int] = (32, 32),
    ) -> None:
        self.texture = texture
        self.button_id = button_id
        self.action = ""
        self.tile_type = ""
        self.open = False
        self.background = False
        self.parent: BuildMenuButton | None = None
        self.buttons: list[BuildMenuButton] = []
        self.texture_size = texture_size
        self.button_size = texture_size
        self.dest_rect = ImageRect(0, 0, texture_size[0], texture_size[1])
        self.uv0 = (0.0, 0.0)
        self.uv1 = (1.0, 1.0)
        self.sub_button_size = sub_button_size

    @classmethod
    def for_tile(
        cls,
        texture: str,
        button_id: str,
        tile: TileEntry,
        button_width: int,
        button_height: int,
    ) -> BuildMenuButton:
        """Create a button that places the tile named *texture*."""
        button = cls(
            texture,
            button_id,
            texture_size=(tile.texture_width, tile.texture_height),
            sub_button_size=(button_width, button_height),
        )
        button.background = True
        button.tile_type = texture
        button.button_size = (button_width, button_height)
        button.dest_rect = scale_center_image(
            button_width, button_height, tile.clipping_width, tile.clipping_height
        )
        if tile.texture_width > 0 and tile.texture_height > 0:
            u0 = tile.clipping_width * tile.offset / tile.texture_width
            button.uv0 = (u0, 0.0)
            button.uv1 = (
                u0 + tile.clipping_width / tile.texture_width,
                tile.clipping_height / tile.texture_height,
            )
        return button

    def __repr__(self) -> str:
        return f"BuildMenuButton({self.texture!r}, {self.button_id!r})"

    def __iter__(self) -> Iterator[BuildMenuButton]:
        return iter(self.buttons)

    def _add_button(
        self, texture: str, button_id: str, tile: TileEntry
    ) -> BuildMenuButton:
        width, height = self.sub_button_size
        button = BuildMenuButton.for_tile(texture, button_id, tile, width, height)
        button.parent = self
        self.buttons.append(button)
        return button

    def add_category_button(
        self, texture: str, button_id: str, tile: TileEntry
    ) -> BuildMenuButton:
        """Add a sub-category button and return it."""
        return self._add_button(texture, button_id, tile)

    def add_tile_button(
        self, texture: str, button_id: str, tile: TileEntry
    ) -> BuildMenuButton:
        """Add a button that changes the tile to place, and return it."""
        return self._add_button(texture, button_id, tile)

    def add_action_button(
        self, texture: str, action: str, tooltip: str
    ) -> BuildMenuButton:
        """Add a button with a special action such as demolish, and return it."""
        button = BuildMenuButton(
            texture, tooltip, sub_button_size=self.sub_button_size
        )
        button.background = True
        button.parent = self
        button.action = action
        self.buttons.append(button)
        return button

    def hide_items(self) -> None:
        """Close this button and every button below it."""
        self.open = False
        for button in self.buttons:
            button.hide_items()


MAIN_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("Button_ConstructionMenu", "Construction"),
    ("Button_NatureMenu", "Nature"),
    ("Button_RoadsMenu", "Roads"),
    ("Button_ZonesMenu", "Zones"),
    ("Button_RecreationMenu", "Recreation"),
    ("Button_PowerMenu", "Power"),
    ("Button_WaterMenu", "Waterworks"),
    ("Button_EmergencyMenu", "Emergency"),
    ("Button_DebugMenu", "Debug"),
)

CONSTRUCTION_ACTIONS: tuple[tuple[str, str, str], ...] = (
    ("Button_ConstructionMenu_Demolish", "Demolish", "Demolish"),
    ("Button_ConstructionMenu_RaiseTerrain", "RaiseTerrain", "Raise Terrain"),
    ("Button_ConstructionMenu_LowerTerrain", "LowerTerrain", "Lower Terrain"),
    ("Button_ConstructionMenu_LevelTerrain", "LevelTerrain", "Level Terrain"),
    ("Button_ConstructionMenu_DeZone", "DeZone", "De-zone"),
    ("Button_ConstructionMenu_Water", "Water", "Water"),
)

_SKIPPED_CATEGORIES = frozenset({"Water", "Terrain"})


@dataclass(eq=False)
class BuildMenu:
    """The build menu: main category buttons and the editing state they set."""

    tiles: Mapping[str, TileEntry] = field(default_factory=dict)
    game_state: GameState = field(default_factory=GameState)
    sub_button_size: tuple[int, int] = (32, 32)
    button_id: str = "Main"
    tooltip_delay: float = 3.0

    def __post_init__(self) -> None:
        self.tile_to_place = ""
        self.highlight_selection = False
        self.demolish_mode = False
        self.terrain_edit_mode = TerrainEdit.NONE
        self.buttons: list[BuildMenuButton] = [
            BuildMenuButton(texture, button_id, sub_button_size=self.sub_button_size)
            for texture, button_id in MAIN_CATEGORIES
        ]
        construction = self.buttons[0]
        for texture, action, tooltip in CONSTRUCTION_ACTIONS:
            construction.add_action_button(texture, action, tooltip)
        tiles, self.tiles = self.tiles, {}
        self.create_sub_menus(tiles)

    def button(self, button_id: str) -> BuildMenuButton:
        """Return the main button with *button_id*; raise KeyError if absent."""
        for button in self.buttons:
            if button.button_id == button_id:
                return button
        raise KeyError(button_id)

    def create_sub_menus(self, tiles: Mapping[str, TileEntry]) -> None:
        """Add a button for every tile, grouped by category and sub-category.

        Tiles are visited in the mapping's order. Categories without a main
        button end up under the Debug button.
        """
        self.tiles = {**self.tiles, **tiles}
        debug = next((b for b in self.buttons if b.button_id == "Debug"), None)
        if debug is None:
            return

        categories = {button.button_id: button for button in self.buttons}
        for texture, tile in tiles.items():
            category = tile.category
            if tile.sub_category == tile.category:
                sub_category = f"{tile.category}_{tile.sub_category}"
            else:
                sub_category = tile.sub_category
            if tile.title:
                tooltip = tile.title
            elif not sub_category:
                tooltip = category
            else:
                tooltip = sub_category

            if category in _SKIPPED_CATEGORIES:
                continue

            if sub_category:
                existing = categories.get(sub_category)
                if existing is None:
                    parent = categories.get(category)
                    if parent is None:
                        parent = debug.add_category_button(texture, tooltip, tile)
                        categories[category] = parent
                    sub_button = parent.add_category_button(texture, tooltip, tile)
                    categories[sub_category] = sub_button
                    sub_button.add_tile_button(texture, tooltip, tile)
                else:
                    existing.add_tile_button(texture, tooltip, tile)
            else:
                existing = categories.get(category)
                if existing is None:
                    categories[category] = debug.add_tile_button(
                        texture, tooltip, tile
                    )
                else:
                    existing.add_tile_button(texture, tooltip, tile)

    def set_item_visible(self, button: BuildMenuButton, visible: bool) -> None:
        """Show *button* with its ancestors and hide all others, or hide its items."""
        if not visible:
            for child in button.buttons:
                child.hide_items()
            return
        for main in self.buttons:
            main.hide_items()
        current: BuildMenuButton | None = button
        while current is not None:
            current.open = True
            current = current.parent

    def on_click(self, button: BuildMenuButton) -> None:
        """Apply the effect of *button* according to its open state."""
        self.clear_state()
        if button.action:
            self.on_action(button.action, button.open)
        if button.tile_type and not button.buttons:
            self.on_change_tile_type(button.tile_type, button.open)

    def on_action(self, action: str, checked: bool) -> None:
        """Apply a special action such as Demolish or RaiseTerrain."""
        state = self.game_state
        if action == "Demolish":
            self.demolish_mode = checked
            self.highlight_selection = checked
            if checked:
                state.placement_mode = PlacementMode.RECTANGLE
                state.demolish_mode = DemolishMode.DEFAULT
        elif action == "LowerTerrain":
            self.terrain_edit_mode = TerrainEdit.LOWER if checked else TerrainEdit.NONE
            self.highlight_selection = checked
        elif action == "RaiseTerrain":
            self.terrain_edit_mode = TerrainEdit.RAISE if checked else TerrainEdit.NONE
            self.highlight_selection = checked
        elif action == "LevelTerrain":
            self.terrain_edit_mode = TerrainEdit.LEVEL if checked else TerrainEdit.NONE
            self.highlight_selection = checked
        elif action == "DeZone":
            self.demolish_mode = checked
            self.highlight_selection = checked
            if checked:
                state.placement_mode = PlacementMode.RECTANGLE
                state.demolish_mode = DemolishMode.DE_ZONE
        elif action == "underground_pipes":
            state.layer_edit_mode = (
                LayerEditMode.BLUEPRINT if checked else LayerEditMode.TERRAIN
            )
        elif action == "Water":
            self.tile_to_place = "water" if checked else ""
            self.highlight_selection = checked
            state.placement_mode = PlacementMode.RECTANGLE
        else:
            self.terrain_edit_mode = TerrainEdit.NONE
            self.highlight_selection = False

    def on_change_tile_type(self, tile_id: str, checked: bool) -> None:
        """Select *tile_id* for placing and pick the matching placement mode."""
        state = self.game_state
        self.tile_to_place = tile_id if checked else ""
        self.highlight_selection = checked
        if state.layer_edit_mode is LayerEditMode.BLUEPRINT:
            state.layer_edit_mode = LayerEditMode.TERRAIN

        if not self.tile_to_place:
            return
        tile = self.tiles.get(self.tile_to_place)
        if tile is None:
            return
        tile_type = tile.tile_type
        if tile_type is TileType.DEFAULT:
            state.placement_mode = PlacementMode.SINGLE
        elif tile_type in (TileType.ROAD, TileType.AUTOTILE, TileType.POWERLINE):
            state.placement_mode = PlacementMode.LINE
        elif tile_type in (TileType.GROUNDDECORATION, TileType.WATER, TileType.ZONE):
            state.placement_mode = PlacementMode.RECTANGLE
        elif tile_type is TileType.UNDERGROUND:
            state.placement_mode = PlacementMode.LINE
            state.layer_edit_mode = LayerEditMode.BLUEPRINT

    def close_submenus(self) -> None:
        """Clear the editing state and close every button."""
        self.clear_state()
        for button in self.buttons:
            button.hide_items()

    def clear_state(self) -> None:
        """Forget the tile to place, the highlight and the terrain tool."""
        self.tile_to_place = ""
        self.highlight_selection = False
        self.terrain_edit_mode = TerrainEdit.NONE