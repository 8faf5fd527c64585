import json

import pytest

from citybuild.serialization import (
    BiomeData,
    MapNodeData,
    Point,
    SettingsData,
    map_node_to_json,
)


def test_point_to_json_keys():
    assert Point(1, 2, 3, 4).to_json() == {"x": 1, "y": 2, "z": 3, "height": 4}


def test_point_round_trip_through_text():
    point = Point(7, 9, 2, 5)
    assert Point.from_json(json.loads(json.dumps(point.to_json()))) == point


def test_point_missing_key_raises():
    with pytest.raises(KeyError):
        Point.from_json({"x": 1, "y": 2, "z": 3})


def test_point_wrong_type_raises():
    with pytest.raises(TypeError):
        Point.from_json({"x": "1", "y": 2, "z": 3, "height": 0})


def test_point_rejects_non_object():
    with pytest.raises(TypeError):
        Point.from_json([1, 2, 3, 4])


def test_map_node_data_round_trip():
    data = MapNodeData("terrain_grass", 3, Point(1, 2, 0, 1))
    assert MapNodeData.from_json(data.to_json()) == data


def test_map_node_data_keys():
    data = MapNodeData("terrain_grass", 0, Point())
    encoded = data.to_json()
    assert set(encoded) == {"tileID", "tileIndex", "origCornerPoint"}
    assert encoded["tileID"] == "terrain_grass"
    assert encoded["origCornerPoint"] == Point().to_json()


def test_map_node_data_missing_corner_raises():
    with pytest.raises(KeyError):
        MapNodeData.from_json({"tileID": "terrain_grass", "tileIndex": 0})


def test_map_node_to_json_single():
    coords = Point(4, 5, 0, 2)
    data = MapNodeData("terrain_grass", 1, coords)
    result = map_node_to_json(coords, data)
    assert result == {"coordinates": coords.to_json(), "mapNodeData": data.to_json()}


def test_map_node_to_json_many_layers():
    coords = Point(1, 1, 0, 0)
    layers = [MapNodeData("terrain_grass", 0, coords), MapNodeData("", 0, coords)]
    result = map_node_to_json(coords, layers)
    assert [MapNodeData.from_json(item) for item in result["mapNodeData"]] == layers


def test_settings_defaults_from_empty_document():
    settings = SettingsData.from_json({})
    assert settings == SettingsData()
    assert settings.screen_width == 800
    assert settings.screen_height == 600
    assert settings.map_size == 64
    assert settings.biome == "GrassLands"
    assert settings.font_file_name == "resources/fonts/arcadeclassics.ttf"
    assert settings.audio_config_json_file == "resources/data/AudioConfig.json"


def test_settings_reads_nested_values():
    document = {
        "SettingsVersion": 3,
        "Graphics": {"VSYNC": True, "Resolution": {"Screen_Width": 1024}},
        "Game": {"MapSize": 128, "Language": "de"},
        "Audio": {"MusicVolume": 1},
        "User Interface": {"defaultFontSize": 14},
    }
    settings = SettingsData.from_json(document)
    assert settings.settings_version == 3
    assert settings.vsync is True
    assert settings.screen_width == 1024
    assert settings.screen_height == 600
    assert settings.map_size == 128
    assert settings.game_language == "de"
    assert settings.music_volume == 1.0
    assert settings.default_font_size == 14


def test_settings_round_trip_except_font_size_key():
    settings = SettingsData(
        screen_width=1920,
        vsync=True,
        biome="Desert",
        music_volume=0.25,
        play_sound_effects=True,
        build_menu_position="LEFT",
        write_error_log_file=True,
    )
    restored = SettingsData.from_json(json.loads(json.dumps(settings.to_json())))
    assert restored == settings


def test_settings_written_font_size_key_is_not_read_back():
    settings = SettingsData(default_font_size=30)
    encoded = settings.to_json()
    assert encoded["User Interface"]["DefaultFontSize"] == 30
    assert SettingsData.from_json(encoded).default_font_size == SettingsData().default_font_size


def test_settings_to_json_sections():
    encoded = SettingsData().to_json()
    assert set(encoded) == {
        "SettingsVersion",
        "Graphics",
        "Game",
        "User Interface",
        "ConfigFiles",
        "Audio",
        "Debug",
    }
    assert encoded["Graphics"]["Resolution"] == {"Screen_Width": 800, "Screen_Height": 600}


def test_settings_wrong_type_raises():
    with pytest.raises(TypeError):
        SettingsData.from_json({"Graphics": {"VSYNC": "yes"}})


def test_settings_bool_not_accepted_as_number():
    with pytest.raises(TypeError):
        SettingsData.from_json({"Game": {"MapSize": True}})


def test_settings_section_must_be_object():
    with pytest.raises(TypeError):
        SettingsData.from_json({"Audio": [1, 2]})


def test_biome_reads_density_groups_and_lists():
    document = {
        "trees": {"light": ["a"], "medium": ["b"], "dense": ["c", "d"]},
        "bushes": {"dense": ["e"], "unknown": ["ignored"]},
        "terrain": ["terrain_grass"],
        "waterdecoration": ["w"],
        "terrainRocks": ["r"],
    }
    biome = BiomeData.from_json(document)
    assert biome.trees_light == ["a"]
    assert biome.trees_medium == ["b"]
    assert biome.trees_dense == ["c", "d"]
    assert biome.bushes_dense == ["e"]
    assert biome.bushes_light == []
    assert biome.terrain == ["terrain_grass"]
    assert biome.water_decoration == ["w"]
    assert biome.terrain_rocks == ["r"]
    assert biome.water == []


def test_biome_empty_document_is_empty():
    assert BiomeData.from_json({}) == BiomeData()


def test_biome_rejects_non_string_entries():
    with pytest.raises(TypeError):
        BiomeData.from_json({"water": ["ok", 3]})


def test_biome_rejects_non_list():
    with pytest.raises(TypeError):
        BiomeData.from_json({"terrainFlora": {"light": "single"}})