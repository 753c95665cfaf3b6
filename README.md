# blockworld

The data model of a block-based voxel world, with its save format and some per-frame game state. Block ids are plain integers from 0 to 255. Id 0 is air.

## Modules

- `blockworld.chunk.Chunk` is a 16×16×256 column of blocks.
  - Each block also stores a packed light byte, which holds sun light and block light at 0–15 each, and a fluid level.
  - The chunk keeps a heightmap per column (`heightmap_value`) and a `dirty` flag. `set_block` sets the flag only when a value actually changes.
  - Reads outside the chunk return 0. Writes outside the chunk are ignored.
- `blockworld.world.World` maps `(cx, cz)` to loaded chunks. You address blocks in it by world block coordinates.
  - `set_block` creates the chunk if it is missing. When the edited block lies on a chunk edge, it marks the loaded neighbour chunks dirty.
  - `world_to_chunk_coord` and `world_to_local_coord` convert world coordinates to chunk and local coordinates. Both round down, so they handle negative coordinates correctly.
- `blockworld.region.RegionFile` keeps up to 32×32 chunks in one file.
  - The file starts with an offset table. Each chunk is stored as a zlib-compressed record that is appended to the file.
  - `load_chunk` returns `None` for a chunk that was never stored. It raises `RegionError` when the data is truncated or corrupt.
  - `chunk_to_region_coord`, `chunk_to_region_offset`, `serialize_chunk` and `deserialize_chunk` are also available on their own.
- `blockworld.world_save.WorldSave` lays out a save directory.
  - Region files go under `regions/` and are named `region_<rx>_<rz>.dat`.
  - `WorldMetadata` is stored in `world.dat` and holds the player position, the world seed and the game time.
  - `save_world` writes the metadata and every loaded chunk.
  - `load_world` returns the metadata. Chunks are read on demand with `load_chunk`.
  - A bad magic number, an unsupported version or a truncated file raises `MetadataError`.
- `blockworld.settings.Settings` holds `render_distance` (2–32), `fov` (30–110) and `volume` (0.0–1.0). Each value is clamped to its range. `save` and `load` use `key=value` lines. `load` skips blank lines, `#` comments and unknown keys.
- `blockworld.screen.ScreenManager` is a stack of `Screen` objects.
  - `push` calls `on_enter`.
  - `pop` calls `on_exit` and returns the screen. It raises `IndexError` when the stack is empty.
- `blockworld.sky.Sky` is a 24000-tick day/night cycle. It provides `tick`, `sun_angle`, `ambient_light`, `sky_color`, `fog_color`, `is_day` and `is_night`.
- `blockworld.weather.WeatherSystem` switches between the `WeatherState` values clear, rain and snow.
  - `update(dt)` fades the intensity in or out over `transition_duration` seconds.
  - `weather_for_biome` keeps deserts clear and turns rain into snow in tundra. It accepts a biome enum member or the biome's name as a string.
- `blockworld.input.Input` collects key, mouse and scroll events.
  - Call `update()` once per frame. It takes a snapshot for `is_key_pressed`, `is_key_held`, `is_key_released`, `mouse_delta` and `scroll_delta`.
  - The mouse delta is scaled by `sensitivity`.
- `blockworld.texture_atlas.TextureAtlas` packs square image tiles into an RGBA atlas whose sides are powers of two.
  - `build()` returns a message for each tile that could not be loaded or has the wrong size. It leaves those tiles transparent.
  - `uvs(index)` returns the `TileUVs` of a tile.
  - `next_power_of_two` is available on its own.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from blockworld.chunk import Chunk
from blockworld.world_save import WorldSave, WorldMetadata

chunk = Chunk(3, 7)
chunk.set_block(5, 64, 5, 2)
chunk.set_block_light(8, 64, 8, 14)

save = WorldSave("saves/demo")
save.save_chunk(chunk)
loaded = save.load_chunk(3, 7)
assert loaded.get_block(5, 64, 5) == 2
assert loaded.block_light(8, 64, 8) == 14

save.save_metadata(WorldMetadata(world_seed=12345))
print(save.load_metadata().world_seed)
```

To build a texture atlas:

```python
from blockworld.texture_atlas import TextureAtlas

atlas = TextureAtlas(16, 16)
atlas.add_default_block_textures("assets/textures")
problems = atlas.build()
print(problems, atlas.atlas_width, atlas.atlas_height)
print(atlas.uvs(22))
```

## What it does not do

This package is a library with no command. It has no window and no rendering: atlas pixels are returned as bytes and are never uploaded anywhere. It has none of these either:

- block registry or block properties
- terrain or cave generation
- chunk meshing
- player physics
- game loop