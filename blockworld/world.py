"""Sparse collection of chunks addressed by world block coordinates."""

from __future__ import annotations

from collections.abc import Iterator

from blockworld.chunk import AIR, CHUNK_SIZE_X, CHUNK_SIZE_Z, Chunk


def world_to_chunk_coord(block_coord: int) -> int:
    """Chunk coordinate containing a block coordinate (floor division)."""
    return block_coord // CHUNK_SIZE_X


def world_to_local_coord(block_coord: int) -> int:
    """Local coordinate of a block inside its chunk, always in [0, 15]."""
    return block_coord % CHUNK_SIZE_X


class World:
    """Chunks keyed by (cx, cz), with block access in world coordinates."""

    def __init__(self) -> None:
        self._chunks: dict[tuple[int, int], Chunk] = {}

    def __len__(self) -> int:
        return len(self._chunks)

    def chunks(self) -> Iterator[Chunk]:
        """Iterate over all loaded chunks."""
        return iter(list(self._chunks.values()))

    def get_block(self, bx: int, by: int, bz: int) -> int:
        """Block id at world coordinates; air where no chunk is loaded."""
        chunk = self.get_chunk(world_to_chunk_coord(bx), world_to_chunk_coord(bz))
        if chunk is None:
            return AIR
        return chunk.get_block(world_to_local_coord(bx), by, world_to_local_coord(bz))

    def set_block(self, bx: int, by: int, bz: int, block_id: int) -> None:
        """Set a block, creating its chunk if needed and dirtying neighbours on edges."""
        cx, cz = world_to_chunk_coord(bx), world_to_chunk_coord(bz)
        lx, lz = world_to_local_coord(bx), world_to_local_coord(bz)
        self.get_or_create_chunk(cx, cz).set_block(lx, by, lz, block_id)
        self._propagate_dirty(cx, cz, lx, lz)

    def fluid_level(self, bx: int, by: int, bz: int) -> int:
        """Fluid level at world coordinates; 0 where no chunk is loaded."""
        chunk = self.get_chunk(world_to_chunk_coord(bx), world_to_chunk_coord(bz))
        if chunk is None:
            return 0
        return chunk.fluid_level(world_to_local_coord(bx), by, world_to_local_coord(bz))

    def set_fluid_level(self, bx: int, by: int, bz: int, level: int) -> None:
        """Set a fluid level, creating the chunk if needed."""
        chunk = self.get_or_create_chunk(world_to_chunk_coord(bx), world_to_chunk_coord(bz))
        chunk.set_fluid_level(world_to_local_coord(bx), by, world_to_local_coord(bz), level)

    def load_chunk(self, cx: int, cz: int) -> None:
        """Create an empty chunk at (cx, cz) unless one is already loaded."""
        self.get_or_create_chunk(cx, cz)

    def unload_chunk(self, cx: int, cz: int) -> None:
        """Drop the chunk at (cx, cz) if loaded."""
        self._chunks.pop((cx, cz), None)

    def has_chunk(self, cx: int, cz: int) -> bool:
        return (cx, cz) in self._chunks

    def get_chunk(self, cx: int, cz: int) -> Chunk | None:
        """The chunk at (cx, cz), or None."""
        return self._chunks.get((cx, cz))

    def get_or_create_chunk(self, cx: int, cz: int) -> Chunk:
        """The chunk at (cx, cz), created empty if missing."""
        chunk = self._chunks.get((cx, cz))
        if chunk is None:
            chunk = self._chunks[(cx, cz)] = Chunk(cx, cz)
        return chunk

    def _propagate_dirty(self, cx: int, cz: int, lx: int, lz: int) -> None:
        neighbours = []
        if lx == 0:
            neighbours.append((cx - 1, cz))
        if lx == CHUNK_SIZE_X - 1:
            neighbours.append((cx + 1, cz))
        if lz == 0:
            neighbours.append((cx, cz - 1))
        if lz == CHUNK_SIZE_Z - 1:
            neighbours.append((cx, cz + 1))
        for coord in neighbours:
            chunk = self._chunks.get(coord)
            if chunk is not None:
                chunk.mark_dirty()