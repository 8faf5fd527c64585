# citybuild

Game logic for a pixel-art city-building simulation, with no rendering
layer. Everything is plain Python with no third-party dependencies.

## Modules

- `citybuild.enums`: `Layer` (an `IntEnum` of every map layer, in drawing
  order), `LayerEditMode`, `PlacementMode` and `DemolishMode`, the layer
  orderings `ALL_LAYERS_ORDERED` and `LAYERS_IN_ACTIVE_ORDER`, and
  `powerlines_can_cross(layer)`, which is true for roads, water and flora.
- `citybuild.platform_info`: `platform_name(system=None)` maps a
  `sys.platform` or `platform.system()` value to one of `win`, `macosx`,
  `freebsd`, `haiku`, `android` or `linux`.
- `citybuild.paths`: `data_dir_base`, `data_dir` and `savegame_dir`, each
  taking an optional `system` name and `environ` mapping. They use
  `XDG_DATA_HOME` or `HOME` on Linux, `APPDATA` on Windows and `HOME` on
  macOS, and raise `KeyError` when a needed variable is missing. The module
  also holds fixed names such as `SETTINGS_FILE_NAME`, `SAVEGAME_VERSION`
  and `DEFAULT_TERRAIN`.
- `citybuild.message_queue`: `MessageQueue`, a thread-safe queue.
  `push(event)` appends an event and wakes waiting threads. `peek()` reports
  without blocking whether an event is waiting. `get_enumerable()` blocks
  until at least one event is queued, then returns all of them as a `deque`
  in push order and empties the queue.
- `citybuild.serialization`: the dataclasses `Point`, `MapNodeData`,
  `SettingsData` and `BiomeData`, each with `from_json`, and `to_json` on
  all but `BiomeData`. `map_node_to_json(coordinates, map_node_data)`
  serializes a whole map node.
  - `Point` and `MapNodeData` require every key.
  - `SettingsData` falls back to its defaults for anything missing.
  - `BiomeData` leaves absent groups empty.
  - Values of the wrong type raise `TypeError`.
- `citybuild.build_menu`: the build menu as a tree of `BuildMenuButton`s.
  - `BuildMenu` sets up the main category buttons and the Construction
    actions, and files the tiles it is given under their category and
    sub-category. Categories without a main button go under Debug.
  - `on_click`, `on_action` and `on_change_tile_type` update the tile to
    place, the highlight flag, the terrain tool (`TerrainEdit`) and the
    shared `GameState`.
  - `scale_center_image` fits a tile image on a button while keeping its
    aspect ratio.
- `citybuild.menus`: helpers for the game-time, load and settings menus:
  - `speed_buttons(current_speed)` returns the four `SpeedButton`s and marks
    the ones matching the current speed as pressed.
  - `list_save_files(directory)` returns the sorted `.cts` files in a
    directory.
  - `format_resolution`, `screen_mode_name` and `build_menu_layout_name`
    give the names shown in the settings menu.
  - `LoadResult` is the choice made in the load dialog.

## Install

```
pip install .
```

## Example

```python
from citybuild.build_menu import BuildMenu, TileEntry, TileType
from citybuild.enums import PlacementMode
from citybuild.message_queue import MessageQueue
from citybuild.serialization import SettingsData

settings = SettingsData.from_json({"Game": {"MapSize": 128}})
print(settings.map_size)                    # 128
print(settings.to_json()["Game"]["MapSize"])

menu = BuildMenu(tiles={
    "residential_low": TileEntry(category="Zones", sub_category="Residential",
                                 tile_type=TileType.ZONE),
})
menu.on_change_tile_type("residential_low", True)
print(menu.tile_to_place)                                          # residential_low
print(menu.game_state.placement_mode is PlacementMode.RECTANGLE)   # True

queue = MessageQueue()
queue.push("tick")
if queue.peek():
    for event in queue.get_enumerable():
        print(event)
```

## What it does not do

This is a library of game state and rules only. It has no command to start
a game and no game loop. It draws no window, menu or map: the menu modules
hold only the state and choices behind those screens. It does not simulate
zones, power grids or building growth, and it neither writes nor reads saved
games. `list_save_files` only lists them, and `savegame_dir` only says where
they are kept.

## Tests

```
pip install .[test]
pytest
```