"""A 16x16x256 column of blocks with light, fluid and heightmap storage."""

from __future__ import annotations

CHUNK_SIZE_X = 16
CHUNK_SIZE_Y = 256
CHUNK_SIZE_Z = 16
CHUNK_VOLUME = CHUNK_SIZE_X * CHUNK_SIZE_Y * CHUNK_SIZE_Z
CHUNK_COLUMNS = CHUNK_SIZE_X * CHUNK_SIZE_Z

AIR = 0
MAX_LIGHT = 15


def _in_bounds(x: int, y: int, z: int) -> bool:
    return 0 <= x < CHUNK_SIZE_X and 0 <= y < CHUNK_SIZE_Y and 0 <= z < CHUNK_SIZE_Z


def _index(x: int, y: int, z: int) -> int:
    # y-major layout keeps vertical neighbours close together.
    return (y * CHUNK_SIZE_Z + z) * CHUNK_SIZE_X + x


def _column(x: int, z: int) -> int:
    return z * CHUNK_SIZE_X + x


def _clamp_light(level: int) -> int:
    return max(0, min(MAX_LIGHT, level))


class Chunk:
    """Block, light and fluid storage for one chunk column.

    All blocks start as air and the chunk starts dirty. Out-of-bounds reads
    return 0 and out-of-bounds writes are ignored.
    """

    __slots__ = ("_chunk_x", "_chunk_z", "_blocks", "_light", "_fluid", "_heightmap", "_dirty")

    def __init__(self, chunk_x: int = 0, chunk_z: int = 0) -> None:
        self._chunk_x = chunk_x
        self._chunk_z = chunk_z
        self._blocks = bytearray(CHUNK_VOLUME)
        # Upper four bits hold sunlight, lower four bits hold block light.
        self._light = bytearray(CHUNK_VOLUME)
        self._fluid = bytearray(CHUNK_VOLUME)
        self._heightmap = [-1] * CHUNK_COLUMNS
        self._dirty = True

    def __repr__(self) -> str:
        return f"Chunk({self._chunk_x}, {self._chunk_z})"

    @property
    def chunk_x(self) -> int:
        """Chunk X coordinate in chunk space."""
        return self._chunk_x

    @property
    def chunk_z(self) -> int:
        """Chunk Z coordinate in chunk space."""
        return self._chunk_z

    @property
    def dirty(self) -> bool:
        """True if the chunk changed since the last clear_dirty()."""
        return self._dirty

    # --- Blocks ---

    def get_block(self, x: int, y: int, z: int) -> int:
        """Return the block id at local coordinates, or air when out of bounds."""
        if not _in_bounds(x, y, z):
            return AIR
        return self._blocks[_index(x, y, z)]

    def set_block(self, x: int, y: int, z: int, block_id: int) -> None:
        """Set a block; marks the chunk dirty only if the value changes."""
        if not 0 <= block_id <= 0xFF:
            raise ValueError(f"block id out of range: {block_id}")
        if not _in_bounds(x, y, z):
            return
        index = _index(x, y, z)
        if self._blocks[index] == block_id:
            return
        self._blocks[index] = block_id
        self._dirty = True

        column = _column(x, z)
        top = self._heightmap[column]
        if block_id != AIR:
            if y > top:
                self._heightmap[column] = y
        elif y == top:
            self._recalc_heightmap(x, z)

    def _recalc_heightmap(self, x: int, z: int) -> None:
        self._heightmap[_column(x, z)] = next(
            (y for y in range(CHUNK_SIZE_Y - 1, -1, -1) if self._blocks[_index(x, y, z)] != AIR),
            -1,
        )

    # --- Dirty flag ---

    def mark_dirty(self) -> None:
        """Flag the chunk as needing a mesh rebuild."""
        self._dirty = True

    def clear_dirty(self) -> None:
        """Clear the dirty flag."""
        self._dirty = False

    # --- Heightmap ---

    def heightmap_value(self, x: int, z: int) -> int:
        """Highest non-air y in the column, or -1 if empty or out of bounds."""
        if not (0 <= x < CHUNK_SIZE_X and 0 <= z < CHUNK_SIZE_Z):
            return -1
        return self._heightmap[_column(x, z)]

    # --- Light ---

    def sun_light(self, x: int, y: int, z: int) -> int:
        """Sunlight level (0-15)."""
        return self.raw_light(x, y, z) >> 4

    def set_sun_light(self, x: int, y: int, z: int, level: int) -> None:
        """Set the sunlight level, clamped to 0-15."""
        if not _in_bounds(x, y, z):
            return
        index = _index(x, y, z)
        self._light[index] = (_clamp_light(level) << 4) | (self._light[index] & 0x0F)

    def block_light(self, x: int, y: int, z: int) -> int:
        """Block light level (0-15)."""
        return self.raw_light(x, y, z) & 0x0F

    def set_block_light(self, x: int, y: int, z: int, level: int) -> None:
        """Set the block light level, clamped to 0-15."""
        if not _in_bounds(x, y, z):
            return
        index = _index(x, y, z)
        self._light[index] = (self._light[index] & 0xF0) | _clamp_light(level)

    def raw_light(self, x: int, y: int, z: int) -> int:
        """The packed light byte."""
        if not _in_bounds(x, y, z):
            return 0
        return self._light[_index(x, y, z)]

    def set_raw_light(self, x: int, y: int, z: int, value: int) -> None:
        """Set the packed light byte."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"light byte out of range: {value}")
        if _in_bounds(x, y, z):
            self._light[_index(x, y, z)] = value

    # --- Fluid ---

    def fluid_level(self, x: int, y: int, z: int) -> int:
        """Fluid level at local coordinates, 0 when out of bounds."""
        if not _in_bounds(x, y, z):
            return 0
        return self._fluid[_index(x, y, z)]

    def set_fluid_level(self, x: int, y: int, z: int, level: int) -> None:
        """Set the fluid level at local coordinates."""
        if not 0 <= level <= 0xFF:
            raise ValueError(f"fluid level out of range: {level}")
        if _in_bounds(x, y, z):
            self._fluid[_index(x, y, z)] = level