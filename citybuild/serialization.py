"""JSON (de)serialization of map points, map node data, settings and biomes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Point",
    "MapNodeData",
    "SettingsData",
    "BiomeData",
    "map_node_to_json",
]


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    return int(value)


def _as_float(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r} must be a number, got {type(value).__name__}")
    return float(value)


def _as_bool(value: Any, key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{key!r} must be a boolean, got {type(value).__name__}")
    return value


def _as_str(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


def _as_str_list(value: Any, key: str) -> list[str]:
    if not isinstance(value, list):
        raise TypeError(f"{key!r} must be an array, got {type(value).__name__}")
    return [_as_str(item, key) for item in value]


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Return the object stored at *key*, or an empty one when absent."""
    value = data.get(key, {})
    if not isinstance(value, Mapping):
        raise TypeError(f"{key!r} must be an object, got {type(value).__name__}")
    return value


def _value(section: Mapping[str, Any], key: str, default: Any) -> Any:
    """Read *key* converted to the type of *default*, or *default* if absent."""
    if key not in section:
        return default
    raw = section[key]
    if isinstance(default, bool):
        return _as_bool(raw, key)
    if isinstance(default, int):
        return _as_int(raw, key)
    if isinstance(default, float):
        return _as_float(raw, key)
    return _as_str(raw, key)


def _require_object(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Point:
    """A map coordinate with its elevation height."""

    x: int = 0
    y: int = 0
    z: int = 0
    height: int = 0

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Point:
        """Build a point; every key is mandatory."""
        data = _require_object(data, "Point")
        return cls(
            x=_as_int(data["x"], "x"),
            y=_as_int(data["y"], "y"),
            z=_as_int(data["z"], "z"),
            height=_as_int(data["height"], "height"),
        )

    def to_json(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "z": self.z, "height": self.height}


@dataclass
class MapNodeData:
    """The tile placed on one layer of a map node."""

    tile_id: str = ""
    tile_index: int = 0
    orig_corner_point: Point = field(default_factory=Point)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> MapNodeData:
        """Build map node data; every key is mandatory."""
        data = _require_object(data, "MapNodeData")
        return cls(
            tile_id=_as_str(data["tileID"], "tileID"),
            tile_index=_as_int(data["tileIndex"], "tileIndex"),
            orig_corner_point=Point.from_json(data["origCornerPoint"]),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "tileID": self.tile_id,
            "tileIndex": self.tile_index,
            "origCornerPoint": self.orig_corner_point.to_json(),
        }


def map_node_to_json(coordinates: Point, map_node_data: Any) -> dict[str, Any]:
    """Serialize a map node given its coordinates and its node data.

    *map_node_data* is a single MapNodeData or an iterable of them.
    """
    if isinstance(map_node_data, MapNodeData):
        node_json: Any = map_node_data.to_json()
    else:
        node_json = [item.to_json() for item in map_node_data]
    return {"coordinates": coordinates.to_json(), "mapNodeData": node_json}


@dataclass
class SettingsData:
    """User settings as stored in the settings file."""

    settings_version: int = 0
    screen_width: int = 800
    screen_height: int = 600
    vsync: bool = False
    full_screen: bool = False
    full_screen_mode: int = 0
    map_size: int = 64
    game_language: str = "en"
    biome: str = "GrassLands"
    max_elevation_height: int = 32
    show_buildings_in_blueprint: bool = False
    zone_layer_transparency: float = 0.5
    ui_data_json_file: str = "resources/data/TileData.json"
    tile_data_json_file: str = "resources/data/UIData.json"
    ui_layout_json_file: str = "resources/data/UILayout.json"
    audio_config_json_file: str = "resources/data/AudioConfig.json"
    audio_3d_status: bool = True
    play_music: bool = True
    play_sound_effects: bool = False
    audio_channels: int = 2
    music_volume: float = 0.5
    sound_effects_volume: float = 0.5
    build_menu_position: str = "BOTTOM"
    font_file_name: str = "resources/fonts/arcadeclassics.ttf"
    sub_menu_button_width: int = 32
    sub_menu_button_height: int = 32
    default_font_size: int = 20
    write_error_log_file: bool = False

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> SettingsData:
        """Read settings; any missing entry takes its default value."""
        data = _require_object(data, "SettingsData")
        d = cls()
        graphics = _section(data, "Graphics")
        resolution = _section(graphics, "Resolution")
        game = _section(data, "Game")
        config = _section(data, "ConfigFiles")
        audio = _section(data, "Audio")
        ui = _section(data, "User Interface")
        debug = _section(data, "Debug")
        return cls(
            settings_version=_value(data, "SettingsVersion", d.settings_version),
            screen_width=_value(resolution, "Screen_Width", d.screen_width),
            screen_height=_value(resolution, "Screen_Height", d.screen_height),
            vsync=_value(graphics, "VSYNC", d.vsync),
            full_screen=_value(graphics, "FullScreen", d.full_screen),
            full_screen_mode=_value(graphics, "FullScreenMode", d.full_screen_mode),
            map_size=_value(game, "MapSize", d.map_size),
            game_language=_value(game, "Language", d.game_language),
            biome=_value(game, "Biome", d.biome),
            max_elevation_height=_value(
                game, "MaxElevationHeight", d.max_elevation_height
            ),
            show_buildings_in_blueprint=_value(
                game, "ShowBuildingsInBlueprint", d.show_buildings_in_blueprint
            ),
            zone_layer_transparency=_value(
                game, "ZoneLayerTransparency", d.zone_layer_transparency
            ),
            ui_data_json_file=_value(config, "UIDataJSONFile", d.ui_data_json_file),
            tile_data_json_file=_value(
                config, "TileDataJSONFile", d.tile_data_json_file
            ),
            ui_layout_json_file=_value(
                config, "UILayoutJSONFile", d.ui_layout_json_file
            ),
            audio_config_json_file=_value(
                config, "AudioConfigJSONFile", d.audio_config_json_file
            ),
            audio_3d_status=_value(audio, "Audio3DStatus", d.audio_3d_status),
            play_music=_value(audio, "PlayMusic", d.play_music),
            play_sound_effects=_value(audio, "PlaySoundEffects", d.play_sound_effects),
            audio_channels=_value(audio, "AudioChannels", d.audio_channels),
            music_volume=_value(audio, "MusicVolume", d.music_volume),
            sound_effects_volume=_value(
                audio, "SoundEffectsVolume", d.sound_effects_volume
            ),
            build_menu_position=_value(
                ui, "BuildMenuPosition", d.build_menu_position
            ),
            font_file_name=_value(ui, "FontFilename", d.font_file_name),
            sub_menu_button_width=_value(
                ui, "SubMenuButtonWidth", d.sub_menu_button_width
            ),
            sub_menu_button_height=_value(
                ui, "SubMenuButtonHeight", d.sub_menu_button_height
            ),
            default_font_size=_value(ui, "defaultFontSize", d.default_font_size),
            write_error_log_file=_value(
                debug, "WriteErrorLogToFile", d.write_error_log_file
            ),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "SettingsVersion": self.settings_version,
            "Graphics": {
                "VSYNC": self.vsync,
                "FullScreen": self.full_screen,
                "FullScreenMode": self.full_screen_mode,
                "Resolution": {
                    "Screen_Width": self.screen_width,
                    "Screen_Height": self.screen_height,
                },
            },
            "Game": {
                "MapSize": self.map_size,
                "Language": self.game_language,
                "Biome": self.biome,
                "MaxElevationHeight": self.max_elevation_height,
                "ZoneLayerTransparency": self.zone_layer_transparency,
                "ShowBuildingsInBlueprint": self.show_buildings_in_blueprint,
            },
            "User Interface": {
                "BuildMenuPosition": self.build_menu_position,
                "FontFilename": self.font_file_name,
                "SubMenuButtonWidth": self.sub_menu_button_width,
                "SubMenuButtonHeight": self.sub_menu_button_height,
                "DefaultFontSize": self.default_font_size,
            },
            "ConfigFiles": {
                "UIDataJSONFile": self.ui_data_json_file,
                "TileDataJSONFile": self.tile_data_json_file,
                "UILayoutJSONFile": self.ui_layout_json_file,
                "AudioConfigJSONFile": self.audio_config_json_file,
            },
            "Audio": {
                "Audio3DStatus": self.audio_3d_status,
                "PlayMusic": self.play_music,
                "PlaySoundEffects": self.play_sound_effects,
                "AudioChannels": self.audio_channels,
                "MusicVolume": self.music_volume,
                "SoundEffectsVolume": self.sound_effects_volume,
            },
            "Debug": {
                "WriteErrorLogToFile": self.write_error_log_file,
            },
        }


_DENSITY_GROUPS: dict[str, tuple[str, str, str]] = {
    "trees": ("trees_light", "trees_medium", "trees_dense"),
    "terrainFlora": (
        "terrain_flora_light",
        "terrain_flora_medium",
        "terrain_flora_dense",
    ),
    "bushes": ("bushes_light", "bushes_medium", "bushes_dense"),
    "waterFlora": ("water_flora_light", "water_flora_medium", "water_flora_dense"),
}

_PLAIN_LISTS: dict[str, str] = {
    "terrain": "terrain",
    "water": "water",
    "waterdecoration": "water_decoration",
    "terrainRocks": "terrain_rocks",
    "terrainDecoration": "terrain_decoration",
}


@dataclass
class BiomeData:
    """Tile IDs the terrain generator may use for one biome."""

    trees_light: list[str] = field(default_factory=list)
    trees_medium: list[str] = field(default_factory=list)
    trees_dense: list[str] = field(default_factory=list)
    terrain_flora_light: list[str] = field(default_factory=list)
    terrain_flora_medium: list[str] = field(default_factory=list)
    terrain_flora_dense: list[str] = field(default_factory=list)
    bushes_light: list[str] = field(default_factory=list)
    bushes_medium: list[str] = field(default_factory=list)
    bushes_dense: list[str] = field(default_factory=list)
    water_flora_light: list[str] = field(default_factory=list)
    water_flora_medium: list[str] = field(default_factory=list)
    water_flora_dense: list[str] = field(default_factory=list)
    terrain: list[str] = field(default_factory=list)
    water: list[str] = field(default_factory=list)
    water_decoration: list[str] = field(default_factory=list)
    terrain_rocks: list[str] = field(default_factory=list)
    terrain_decoration: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> BiomeData:
        """Read a biome; absent groups stay empty, unknown densities are ignored."""
        data = _require_object(data, "BiomeData")
        values: dict[str, list[str]] = {}
        for key, (light, medium, dense) in _DENSITY_GROUPS.items():
            if key not in data:
                continue
            group = _section(data, key)
            targets = {"light": light, "medium": medium, "dense": dense}
            for density, items in group.items():
                if density in targets:
                    values[targets[density]] = _as_str_list(items, f"{key}.{density}")
        for key, attribute in _PLAIN_LISTS.items():
            if key in data:
                values[attribute] = _as_str_list(data[key], key)
        return cls(**values)