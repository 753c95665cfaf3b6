"""Save directory layout: a metadata file plus a folder of region files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path

from blockworld.chunk import Chunk
from blockworld.region import RegionFile, chunk_to_region_coord
from blockworld.world import World

METADATA_MAGIC = 0x56435744
METADATA_VERSION = 1

_HEADER = struct.Struct("<II")
_BODY = struct.Struct("<fffQf")
METADATA_SIZE = _HEADER.size + _BODY.size


class MetadataError(Exception):
    """Raised when world metadata is missing fields or has the wrong format."""


@dataclass
class WorldMetadata:
    """Per-world state stored alongside the chunk data."""

    player_position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    world_seed: int = 0
    game_time: float = 0.0


class WorldSave:
    """Reads and writes one world's save directory."""

    def __init__(self, save_dir: str | os.PathLike[str]) -> None:
        self.save_dir = Path(save_dir)

    def __repr__(self) -> str:
        return f"WorldSave({str(self.save_dir)!r})"

    def regions_dir(self) -> Path:
        """Directory holding the region files."""
        return self.save_dir / "regions"

    def region_file_path(self, rx: int, rz: int) -> Path:
        """Path of the region file for region (rx, rz)."""
        return self.regions_dir() / f"region_{rx}_{rz}.dat"

    def metadata_file_path(self) -> Path:
        """Path of the world metadata file."""
        return self.save_dir / "world.dat"

    def _ensure_directories(self) -> None:
        self.regions_dir().mkdir(parents=True, exist_ok=True)

    def _region_for(self, cx: int, cz: int) -> RegionFile:
        path = self.region_file_path(chunk_to_region_coord(cx), chunk_to_region_coord(cz))
        return RegionFile(path)

    def save_world(self, world: World, metadata: WorldMetadata) -> None:
        """Write the metadata and every loaded chunk of the world."""
        self.save_metadata(metadata)
        for chunk in world.chunks():
            self.save_chunk(chunk)

    def load_world(self, world: World) -> WorldMetadata:
        """Read the world's metadata; chunks are loaded on demand with load_chunk()."""
        return self.load_metadata()

    def save_chunk(self, chunk: Chunk) -> None:
        """Store a chunk in the region file that covers it."""
        self._ensure_directories()
        self._region_for(chunk.chunk_x, chunk.chunk_z).save_chunk(chunk)

    def load_chunk(self, cx: int, cz: int) -> Chunk | None:
        """The saved chunk at (cx, cz), or None if it was never saved."""
        return self._region_for(cx, cz).load_chunk(cx, cz)

    def save_metadata(self, metadata: WorldMetadata) -> None:
        """Write world.dat: magic, version, position, seed and game time."""
        self._ensure_directories()
        px, py, pz = metadata.player_position
        try:
            body = _BODY.pack(px, py, pz, metadata.world_seed, metadata.game_time)
        except struct.error as exc:
            raise ValueError(f"metadata cannot be stored: {exc}") from exc
        self.metadata_file_path().write_bytes(
            _HEADER.pack(METADATA_MAGIC, METADATA_VERSION) + body
        )

    def load_metadata(self) -> WorldMetadata:
        """Read world.dat back."""
        data = self.metadata_file_path().read_bytes()
        if len(data) < _HEADER.size:
            raise MetadataError("metadata file is truncated")
        magic, version = _HEADER.unpack_from(data)
        if magic != METADATA_MAGIC:
            raise MetadataError(f"bad metadata magic: {magic:#010x}")
        if version != METADATA_VERSION:
            raise MetadataError(f"unsupported metadata version: {version}")
        if len(data) < METADATA_SIZE:
            raise MetadataError("metadata file is truncated")
        px, py, pz, seed, game_time = _BODY.unpack_from(data, _HEADER.size)
        return WorldMetadata(player_position=(px, py, pz), world_seed=seed, game_time=game_time)