import pytest

from blockworld.chunk import AIR, CHUNK_SIZE_X, CHUNK_SIZE_Y, CHUNK_SIZE_Z, MAX_LIGHT, Chunk


def test_new_chunk_is_air_and_dirty():
    chunk = Chunk(2, -3)
    assert chunk.chunk_x == 2
    assert chunk.chunk_z == -3
    assert chunk.dirty
    assert chunk.get_block(0, 0, 0) == AIR
    assert chunk.get_block(CHUNK_SIZE_X - 1, CHUNK_SIZE_Y - 1, CHUNK_SIZE_Z - 1) == AIR


def test_set_and_get_block():
    chunk = Chunk()
    chunk.set_block(5, 64, 9, 7)
    assert chunk.get_block(5, 64, 9) == 7
    assert chunk.get_block(9, 64, 5) == AIR


def test_out_of_bounds_reads_and_writes():
    chunk = Chunk()
    chunk.set_block(-1, 0, 0, 3)
    chunk.set_block(0, CHUNK_SIZE_Y, 0, 3)
    chunk.set_block(0, 0, CHUNK_SIZE_Z, 3)
    assert chunk.get_block(-1, 0, 0) == AIR
    assert chunk.get_block(0, CHUNK_SIZE_Y, 0) == AIR
    assert chunk.get_block(0, 0, CHUNK_SIZE_Z) == AIR
    assert all(chunk.heightmap_value(x, z) == -1 for x in range(CHUNK_SIZE_X) for z in range(CHUNK_SIZE_Z))


def test_invalid_block_id_rejected():
    chunk = Chunk()
    with pytest.raises(ValueError):
        chunk.set_block(0, 0, 0, 256)


def test_dirty_only_on_change():
    chunk = Chunk()
    chunk.set_block(1, 1, 1, 4)
    chunk.clear_dirty()
    assert not chunk.dirty
    chunk.set_block(1, 1, 1, 4)
    assert not chunk.dirty
    chunk.set_block(1, 1, 1, 5)
    assert chunk.dirty


def test_mark_dirty():
    chunk = Chunk()
    chunk.clear_dirty()
    chunk.mark_dirty()
    assert chunk.dirty


def test_heightmap_tracks_highest_block():
    chunk = Chunk()
    assert chunk.heightmap_value(3, 4) == -1
    chunk.set_block(3, 10, 4, 1)
    assert chunk.heightmap_value(3, 4) == 10
    chunk.set_block(3, 5, 4, 1)
    assert chunk.heightmap_value(3, 4) == 10
    chunk.set_block(3, 10, 4, AIR)
    assert chunk.heightmap_value(3, 4) == 5
    chunk.set_block(3, 5, 4, AIR)
    assert chunk.heightmap_value(3, 4) == -1


def test_heightmap_out_of_bounds():
    chunk = Chunk()
    chunk.set_block(0, 20, 0, 1)
    assert chunk.heightmap_value(-1, 0) == -1
    assert chunk.heightmap_value(0, CHUNK_SIZE_Z) == -1
    assert chunk.heightmap_value(0, 0) == 20


def test_light_channels_are_independent():
    chunk = Chunk()
    chunk.set_sun_light(2, 3, 4, 10)
    chunk.set_block_light(2, 3, 4, 14)
    assert chunk.sun_light(2, 3, 4) == 10
    assert chunk.block_light(2, 3, 4) == 14
    chunk.set_sun_light(2, 3, 4, 0)
    assert chunk.block_light(2, 3, 4) == 14
    assert chunk.sun_light(2, 3, 4) == 0


def test_raw_light_round_trip():
    chunk = Chunk()
    chunk.set_raw_light(1, 2, 3, 0xFF)
    assert chunk.raw_light(1, 2, 3) == 0xFF
    assert chunk.sun_light(1, 2, 3) == MAX_LIGHT
    assert chunk.block_light(1, 2, 3) == MAX_LIGHT


def test_light_out_of_bounds():
    chunk = Chunk()
    chunk.set_sun_light(-1, 0, 0, 9)
    chunk.set_block_light(0, -1, 0, 9)
    assert chunk.sun_light(-1, 0, 0) == 0
    assert chunk.block_light(0, -1, 0) == 0
    assert chunk.raw_light(0, 0, 16) == 0


def test_fluid_round_trip_and_bounds():
    chunk = Chunk()
    chunk.set_fluid_level(4, 10, 4, 5)
    assert chunk.fluid_level(4, 10, 4) == 5
    assert chunk.fluid_level(4, 11, 4) == 0
    chunk.set_fluid_level(16, 0, 0, 5)
    assert chunk.fluid_level(16, 0, 0) == 0
    with pytest.raises(ValueError):
        chunk.set_fluid_level(0, 0, 0, -1)