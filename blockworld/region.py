"""Region files: 32x32 chunks per file, zlib-compressed, with an offset table."""

from __future__ import annotations

import os
import struct
import zlib
from collections.abc import Iterator
from pathlib import Path

from blockworld.chunk import CHUNK_SIZE_X, CHUNK_SIZE_Y, CHUNK_SIZE_Z, CHUNK_VOLUME, Chunk

REGION_SIZE = 32
REGION_CHUNK_COUNT = REGION_SIZE * REGION_SIZE
_ENTRY = struct.Struct("<II")
REGION_HEADER_SIZE = REGION_CHUNK_COUNT * _ENTRY.size
RAW_CHUNK_SIZE = CHUNK_VOLUME * 3


class RegionError(Exception):
    """Raised when region or chunk data is malformed."""


def chunk_to_region_coord(chunk_coord: int) -> int:
    """Region coordinate containing a chunk coordinate (floor division)."""
    return chunk_coord // REGION_SIZE


def chunk_to_region_offset(chunk_coord: int) -> int:
    """Position of a chunk inside its region, always in [0, 31]."""
    return chunk_coord % REGION_SIZE


def _slot(cx: int, cz: int) -> int:
    return chunk_to_region_offset(cz) * REGION_SIZE + chunk_to_region_offset(cx)


def _positions() -> Iterator[tuple[int, int, int]]:
    for y in range(CHUNK_SIZE_Y):
        for z in range(CHUNK_SIZE_Z):
            for x in range(CHUNK_SIZE_X):
                yield x, y, z


def serialize_chunk(chunk: Chunk) -> bytes:
    """Block ids, light bytes and fluid levels, each in y, z, x order."""
    return b"".join(
        bytes(getter(x, y, z) for x, y, z in _positions())
        for getter in (chunk.get_block, chunk.raw_light, chunk.fluid_level)
    )


def deserialize_chunk(raw: bytes, cx: int, cz: int) -> Chunk:
    """Rebuild a clean chunk at (cx, cz) from serialized data."""
    if len(raw) != RAW_CHUNK_SIZE:
        raise RegionError(f"chunk data is {len(raw)} bytes, expected {RAW_CHUNK_SIZE}")
    chunk = Chunk(cx, cz)
    layers = (
        (chunk.set_block, raw[:CHUNK_VOLUME]),
        (chunk.set_raw_light, raw[CHUNK_VOLUME : 2 * CHUNK_VOLUME]),
        (chunk.set_fluid_level, raw[2 * CHUNK_VOLUME :]),
    )
    for setter, layer in layers:
        for (x, y, z), value in zip(_positions(), layer):
            if value:
                setter(x, y, z, value)
    chunk.clear_dirty()
    return chunk


def _empty_table() -> list[tuple[int, int]]:
    return [(0, 0)] * REGION_CHUNK_COUNT


class RegionFile:
    """One region file on disk; chunk data is appended and indexed by a header."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._table: list[tuple[int, int]] | None = None

    def __repr__(self) -> str:
        return f"RegionFile({str(self.path)!r})"

    def _offset_table(self) -> list[tuple[int, int]]:
        if self._table is not None:
            return self._table
        try:
            with open(self.path, "rb") as f:
                header = f.read(REGION_HEADER_SIZE)
        except FileNotFoundError:
            return _empty_table()
        if len(header) < REGION_HEADER_SIZE:
            return _empty_table()
        self._table = list(_ENTRY.iter_unpack(header))
        return self._table

    def save_chunk(self, chunk: Chunk) -> None:
        """Append the chunk's compressed data and point its slot at it."""
        slot = _slot(chunk.chunk_x, chunk.chunk_z)
        compressed = zlib.compress(serialize_chunk(chunk))
        table = list(self._offset_table())

        try:
            f = open(self.path, "r+b")
        except FileNotFoundError:
            self.path.write_bytes(bytes(REGION_HEADER_SIZE))
            f = open(self.path, "r+b")

        with f:
            data_offset = f.seek(0, os.SEEK_END)
            if data_offset < REGION_HEADER_SIZE:
                f.write(bytes(REGION_HEADER_SIZE - data_offset))
                data_offset = REGION_HEADER_SIZE
            f.seek(data_offset)
            f.write(compressed)
            table[slot] = (data_offset, len(compressed))
            f.seek(0)
            f.write(b"".join(_ENTRY.pack(offset, length) for offset, length in table))

        self._table = table

    def load_chunk(self, cx: int, cz: int) -> Chunk | None:
        """The stored chunk at (cx, cz), or None if the region holds none."""
        offset, length = self._offset_table()[_slot(cx, cz)]
        if offset == 0 or length == 0:
            return None
        try:
            with open(self.path, "rb") as f:
                f.seek(offset)
                compressed = f.read(length)
        except FileNotFoundError:
            return None
        if len(compressed) != length:
            raise RegionError(f"chunk ({cx}, {cz}) data is truncated")
        try:
            raw = zlib.decompress(compressed)
        except zlib.error as exc:
            raise RegionError(f"chunk ({cx}, {cz}) data is corrupt") from exc
        return deserialize_chunk(raw, cx, cz)

    def has_chunk(self, cx: int, cz: int) -> bool:
        """True if the region holds data for chunk (cx, cz)."""
        offset, length = self._offset_table()[_slot(cx, cz)]
        return offset != 0 and length != 0

    def file_size(self) -> int:
        """Size of the region file in bytes, 0 if it does not exist."""
        try:
            return os.path.getsize(self.path)
        except OSError:
            return 0