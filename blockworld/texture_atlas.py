"""Packs square block textures into one power-of-two RGBA atlas image."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from PIL import Image

log = logging.getLogger(__name__)

DEFAULT_TILE_SIZE = 16
DEFAULT_TILES_PER_ROW = 16

# Order matches the texture indices used by the block registry.
DEFAULT_TEXTURE_NAMES = (
    "stone",
    "grass_top",
    "grass_side",
    "dirt",
    "cobblestone",
    "oak_planks",
    "bedrock",
    "sand",
    "gravel",
    "gold_ore",
    "iron_ore",
    "coal_ore",
    "diamond_ore",
    "oak_log_top",
    "oak_log_side",
    "oak_leaves",
    "glass",
    "water",
    "lava",
    "torch",
    "snow",
    "cactus_top",
    "cactus_side",
)


def next_power_of_two(value: int) -> int:
    """Smallest power of two that is >= value; 1 for values <= 0."""
    if value <= 0:
        return 1
    return 1 << (value - 1).bit_length()


@dataclass(frozen=True)
class TileUVs:
    """Texture coordinates of one tile within the atlas."""

    u_min: float = 0.0
    v_min: float = 0.0
    u_max: float = 0.0
    v_max: float = 0.0


class TextureAtlas:
    """A grid of equally sized tiles with a fixed number of tiles per row.

    Register tiles with add_tile(), call build() to load and pack them, then
    use uvs() to get each tile's texture coordinates.
    """

    def __init__(
        self, tile_size: int = DEFAULT_TILE_SIZE, tiles_per_row: int = DEFAULT_TILES_PER_ROW
    ) -> None:
        if tile_size <= 0 or tiles_per_row <= 0:
            raise ValueError("tile size and tiles per row must be positive")
        self._tile_size = tile_size
        self._tiles_per_row = tiles_per_row
        self._tile_paths: list[str | None] = []
        self._atlas_width = 0
        self._atlas_height = 0
        self._pixel_data: bytes | None = None

    def __repr__(self) -> str:
        return (
            f"TextureAtlas(tile_size={self._tile_size}, "
            f"tiles_per_row={self._tiles_per_row}, tiles={self.tile_count})"
        )

    @property
    def tile_size(self) -> int:
        return self._tile_size

    @property
    def tiles_per_row(self) -> int:
        return self._tiles_per_row

    @property
    def atlas_width(self) -> int:
        """Atlas width in pixels; 0 until built."""
        return self._atlas_width

    @property
    def atlas_height(self) -> int:
        """Atlas height in pixels; 0 until built."""
        return self._atlas_height

    @property
    def tile_count(self) -> int:
        """Number of tile indices that have a registered file."""
        return sum(1 for path in self._tile_paths if path)

    @property
    def is_built(self) -> bool:
        return self._pixel_data is not None

    @property
    def pixel_data(self) -> bytes | None:
        """RGBA pixel data, 4 bytes per pixel, row by row; None until built."""
        return self._pixel_data

    def add_tile(self, index: int, file_path: str | os.PathLike[str]) -> None:
        """Register the image file for a tile index; negative indices are ignored."""
        if index < 0:
            return
        if index >= len(self._tile_paths):
            self._tile_paths.extend([None] * (index + 1 - len(self._tile_paths)))
        self._tile_paths[index] = os.fspath(file_path) or None

    def add_default_block_textures(self, texture_dir: str | os.PathLike[str]) -> None:
        """Register the standard block textures, <name>.png, from a directory."""
        base = os.fspath(texture_dir)
        for index, name in enumerate(DEFAULT_TEXTURE_NAMES):
            self.add_tile(index, f"{base}/{name}.png")

    def has_tile(self, index: int) -> bool:
        """True if a file is registered for the tile index."""
        return self.tile_path(index) is not None

    def tile_path(self, index: int) -> str | None:
        """The file registered for a tile index, or None."""
        if 0 <= index < len(self._tile_paths):
            return self._tile_paths[index]
        return None

    def build(self) -> list[str]:
        """Load every registered tile and pack it into the atlas.

        Tiles that cannot be loaded or have the wrong size are left
        transparent. Returns a message for each such tile; an empty list
        means every tile was packed.
        """
        if not self._tile_paths:
            raise ValueError("no tiles registered")

        rows = (len(self._tile_paths) - 1) // self._tiles_per_row + 1
        self._atlas_width = next_power_of_two(self._tiles_per_row * self._tile_size)
        self._atlas_height = next_power_of_two(rows * self._tile_size)

        atlas = Image.new("RGBA", (self._atlas_width, self._atlas_height), (0, 0, 0, 0))
        failures: list[str] = []
        for index, path in enumerate(self._tile_paths):
            if not path:
                continue
            try:
                with Image.open(path) as source:
                    tile = source.convert("RGBA")
            except OSError as exc:
                failures.append(f"failed to load {path!r}: {exc}")
                continue
            if tile.size != (self._tile_size, self._tile_size):
                width, height = tile.size
                failures.append(
                    f"texture {path!r} is {width}x{height} but expected "
                    f"{self._tile_size}x{self._tile_size}"
                )
                continue
            row, col = divmod(index, self._tiles_per_row)
            atlas.paste(tile, (col * self._tile_size, row * self._tile_size))

        for message in failures:
            log.warning("%s", message)
        self._pixel_data = atlas.tobytes()
        return failures

    def uvs(self, tile_index: int) -> TileUVs:
        """Texture coordinates of a tile; all zero before the atlas is built."""
        if self._atlas_width == 0 or self._atlas_height == 0:
            return TileUVs()
        row, col = divmod(tile_index, self._tiles_per_row)
        width = float(self._atlas_width)
        height = float(self._atlas_height)
        size = self._tile_size
        return TileUVs(
            u_min=col * size / width,
            v_min=row * size / height,
            u_max=(col + 1) * size / width,
            v_max=(row + 1) * size / height,
        )