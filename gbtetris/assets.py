"""Built-in graphics: the falling-block sprite and the game screen background."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain

from gbtetris.graphics import COLORS_PER_PALETTE, TILE_BYTES, TILE_SIZE, rgb8


@dataclass(frozen=True)
class Asset:
    """Tile data, palettes and an optional tile map with colour attributes."""

    name: str
    width: int
    height: int
    tiles: bytes
    palettes: tuple[int, ...]
    tile_map: bytes | None = None
    map_attributes: bytes | None = None
    tile_origin: int = 0
    tile_width: int = TILE_SIZE
    tile_height: int = TILE_SIZE
    colors_per_palette: int = COLORS_PER_PALETTE

    def __post_init__(self) -> None:
        if len(self.tiles) % TILE_BYTES:
            raise ValueError(
                f"{self.name}: tile data length {len(self.tiles)} "
                f"is not a multiple of {TILE_BYTES}"
            )
        if len(self.palettes) % self.colors_per_palette:
            raise ValueError(f"{self.name}: palette data must hold whole palettes")
        cells = self.map_width * self.map_height
        for label, data in (("map", self.tile_map), ("attribute map", self.map_attributes)):
            if data is not None and len(data) != cells:
                raise ValueError(
                    f"{self.name}: {label} holds {len(data)} cells, expected {cells}"
                )

    @property
    def map_width(self) -> int:
        """Width of the tile map in tiles."""
        return self.width // self.tile_width

    @property
    def map_height(self) -> int:
        """Height of the tile map in tiles."""
        return self.height // self.tile_height

    @property
    def total_colors(self) -> int:
        """Number of colours across all palettes."""
        return len(self.palettes)

    def tile_count(self) -> int:
        """Number of 8x8 tiles in the tile data."""
        return len(self.tiles) // TILE_BYTES

    def palette_count(self) -> int:
        """Number of four-colour palettes."""
        return len(self.palettes) // self.colors_per_palette


TETRAMINO_GRAPHIC = Asset(
    name="tetramino_graphic",
    width=8,
    height=8,
    tiles=bytes((
        0xFF, 0x00, 0x81, 0x00, 0xBD, 0x00, 0xA5, 0x00,
        0xA5, 0x00, 0xBD, 0x00, 0x81, 0x00, 0xFF, 0x00,
    )),
    palettes=(
        rgb8(255, 255, 255), rgb8(255, 79, 114), rgb8(0, 0, 0), rgb8(0, 0, 0),
    ),
)


_GAME_SCENE_PALETTES = (
    rgb8(255, 255, 255), rgb8(255, 218, 67), rgb8(255, 79, 114), rgb8(0, 0, 0),
    rgb8(255, 232, 197), rgb8(255, 218, 67), rgb8(255, 79, 114), rgb8(0, 0, 0),
    rgb8(255, 232, 197), rgb8(209, 205, 206), rgb8(255, 79, 114), rgb8(0, 0, 0),
    rgb8(255, 218, 67), rgb8(209, 205, 206), rgb8(255, 79, 114), rgb8(0, 0, 0),
    rgb8(255, 218, 67), rgb8(209, 205, 206), rgb8(97, 94, 92), rgb8(0, 0, 0),
    rgb8(255, 232, 197), rgb8(209, 205, 206), rgb8(97, 94, 92), rgb8(0, 0, 0),
    rgb8(209, 205, 206), rgb8(255, 79, 114), rgb8(97, 94, 92), rgb8(0, 0, 0),
    rgb8(255, 232, 197), rgb8(255, 218, 67), rgb8(97, 94, 92), rgb8(0, 0, 0),
)

# One tile per line: 16 bytes of 2bpp data.
_GAME_SCENE_TILES = bytes((
    0x00, 0x1E, 0x00, 0x33, 0x00, 0x33, 0x00, 0x63, 0x00, 0x66, 0x00, 0x66, 0x00, 0x3C, 0x00, 0x00,
    0x00, 0x0C, 0x00, 0x1C, 0x00, 0x0C, 0x00, 0x0C, 0x00, 0x18, 0x00, 0x18, 0x00, 0x3C, 0x00, 0x00,
    0x00, 0x1E, 0x00, 0x33, 0x00, 0x03, 0x00, 0x1E, 0x00, 0x30, 0x00, 0x60, 0x00, 0x7E, 0x00, 0x00,
    0x00, 0x1E, 0x00, 0x33, 0x00, 0x03, 0x00, 0x1E, 0x00, 0x03, 0x00, 0x63, 0x00, 0x3E, 0x00, 0x00,
    0x00, 0x0E, 0x00, 0x1E, 0x00, 0x36, 0x00, 0x66, 0x00, 0x7F, 0x00, 0x0C, 0x00, 0x0C, 0x00, 0x00,
    0x00, 0x1F, 0x00, 0x30, 0x00, 0x3C, 0x00, 0x06, 0x00, 0x06, 0x00, 0x66, 0x00, 0x3C, 0x00, 0x00,
    0x00, 0x1E, 0x00, 0x33, 0x00, 0x30, 0x00, 0x7C, 0x00, 0x66, 0x00, 0x66, 0x00, 0x3C, 0x00, 0x00,
    0x00, 0x3F, 0x00, 0x03, 0x00, 0x06, 0x00, 0x0C, 0x00, 0x1C, 0x00, 0x38, 0x00, 0x38, 0x00, 0x00,
    0x00, 0x1E, 0x00, 0x33, 0x00, 0x33, 0x00, 0x7F, 0x00, 0x66, 0x00, 0x66, 0x00, 0x3C, 0x00, 0x00,
    0x00, 0x1E, 0x00, 0x33, 0x00, 0x33, 0x00, 0x1F, 0x00, 0x06, 0x00, 0x66, 0x00, 0x3C, 0x00, 0x00,
    0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00,
    0x66, 0x00, 0x66, 0x00, 0x66, 0x00, 0x66, 0x00, 0x66, 0x00, 0x66, 0x00, 0x66, 0x00, 0x66, 0x00,
    0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0x00, 0x00, 0xFF, 0x00, 0x00, 0x00,
    0x00, 0x1E, 0x00, 0x33, 0x00, 0x30, 0x00, 0x1C, 0x00, 0x06, 0x00, 0x66, 0x00, 0x3C, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x33, 0x00, 0x45, 0x00, 0x85, 0x00, 0x66, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x63, 0x00, 0x57, 0x00, 0x64, 0x00, 0x53, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x0C, 0x00, 0x0C, 0x00, 0x1C, 0x00, 0x18, 0x00, 0x38, 0x00, 0x30, 0x00, 0x3E, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x65, 0x00, 0xE9, 0x00, 0x8B, 0x00, 0x66, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x01, 0x00, 0x01, 0x00, 0x32, 0x00, 0x72, 0x00, 0x44, 0x00, 0x34, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x49, 0x00, 0x4D, 0x00, 0x96, 0x00, 0x92, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x03, 0x00, 0x34, 0x00, 0x72, 0x00, 0x41, 0x00, 0x36, 0x00, 0x00,
    0x18, 0xC6, 0x08, 0xE6, 0x00, 0xF6, 0x00, 0xDE, 0x10, 0xCE, 0x18, 0xC6, 0x18, 0xC6, 0xFF, 0x00,
    0x01, 0xFC, 0x1F, 0xC0, 0x1F, 0xC0, 0x07, 0xF0, 0x1F, 0xC0, 0x1F, 0xC0, 0x01, 0xFC, 0xFF, 0x00,
    0x11, 0xCC, 0x11, 0xCC, 0x83, 0x78, 0xC7, 0x30, 0x83, 0x78, 0x11, 0xCC, 0x11, 0xCC, 0xFF, 0x00,
    0x01, 0xFC, 0xC7, 0x30, 0xC7, 0x30, 0xC7, 0x30, 0xC7, 0x30, 0xC7, 0x30, 0xC7, 0x30, 0xFF, 0x00,
    0x80, 0x00, 0x7F, 0x00, 0x60, 0x00, 0x5F, 0x00, 0x5F, 0x00, 0x5F, 0x00, 0x5F, 0x00, 0x5F, 0x00,
    0xFF, 0x00, 0xFF, 0x01, 0xFE, 0x07, 0xF8, 0x0F, 0xF0, 0x1F, 0xE0, 0x3F, 0xE0, 0x3F, 0xE1, 0x3F,
    0xFF, 0x00, 0xFF, 0xC0, 0x3F, 0xE0, 0x3F, 0xE0, 0x7F, 0xC0, 0xFF, 0x80, 0xFF, 0x80, 0xFF, 0x00,
    0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x18, 0xE7, 0x24, 0xC7, 0x44, 0x83, 0x83,
    0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x38, 0xC7, 0x44, 0x87, 0x84, 0x07, 0x04,
    0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x03, 0xFC, 0x0F, 0xF0, 0x3F, 0xC0, 0x7F, 0x84, 0xFF,
    0xE3, 0x3E, 0xF3, 0x1E, 0xFF, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF,
    0xFF, 0x00, 0xFF, 0x00, 0xFF, 0xF8, 0x07, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF,
    0xFF, 0x01, 0xFF, 0x01, 0xFE, 0x02, 0xFE, 0x02, 0xFC, 0xC4, 0x3C, 0xF4, 0x0C, 0xFC, 0x04, 0xFC,
    0x07, 0x04, 0x07, 0x04, 0x07, 0x04, 0x07, 0x04, 0x07, 0x04, 0x07, 0x04, 0x0F, 0x08, 0x0F, 0x08,
    0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x0F, 0xF0, 0x1F, 0xE0, 0x3F, 0xE0, 0x3F, 0xC0, 0x7F,
    0xFF, 0x01, 0xFE, 0x03, 0xFC, 0x07, 0xFC, 0xF7, 0x08, 0xFF, 0x08, 0xFF, 0x08, 0xFF, 0x10, 0xFF,
    0x04, 0xFF, 0x04, 0xFF, 0x08, 0xFF, 0x08, 0xFF, 0x08, 0xFF, 0x08, 0xFF, 0x08, 0xFF, 0x14, 0xF7,
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF,
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0xC0, 0xFF,
    0x02, 0xFE, 0x01, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x01, 0xFF, 0x01, 0xFF, 0x01, 0xFF,
    0x00, 0x00, 0x00, 0x00, 0x80, 0x80, 0x40, 0xC0, 0x43, 0xC3, 0x3C, 0xFF, 0x00, 0xFF, 0x00, 0xFF,
    0x1F, 0x10, 0x1F, 0x10, 0x3F, 0x20, 0xFF, 0xF8, 0x07, 0xFC, 0x07, 0xFC, 0x07, 0xFC, 0x07, 0xFC,
    0xC0, 0x7F, 0xC0, 0x7F, 0xC0, 0x7F, 0xC0, 0x7F, 0xC0, 0x7F, 0xE0, 0x3F, 0xF0, 0x1F, 0xE0, 0x3F,
    0x10, 0xFF, 0x10, 0xFF, 0x10, 0xFF, 0x20, 0xFF, 0x20, 0xFF, 0x20, 0xFF, 0x41, 0xFF, 0x87, 0xFF,
    0x14, 0xF7, 0x24, 0xE7, 0x22, 0xE3, 0x41, 0xC1, 0x40, 0xC0, 0x80, 0x80, 0x00, 0x00, 0x07, 0x07,
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x10, 0xFF, 0xA8, 0xEF, 0x67, 0x67, 0x00, 0x00, 0x80, 0x80,
    0xA0, 0xBF, 0x90, 0x9F, 0x88, 0x8F, 0x87, 0x87, 0x80, 0x80, 0x80, 0x80, 0x1E, 0x1E, 0x1F, 0x1F,
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0xF0, 0xFF, 0x0F, 0x0F, 0x04, 0x07, 0xC4, 0xC7,
    0x80, 0xFF, 0x80, 0xFF, 0x80, 0xFF, 0x40, 0xFE, 0x20, 0xFC, 0xF0, 0xF8, 0x00, 0xFF, 0x00, 0xFF,
    0x07, 0xFC, 0x07, 0xF4, 0x07, 0x84, 0x07, 0x04, 0x0F, 0x08, 0x1F, 0xF0, 0x3F, 0xE0, 0x1F, 0xF0,
    0xE0, 0x3F, 0xE0, 0x3F, 0xE7, 0x3F, 0xE8, 0x38, 0xF8, 0x18, 0xF8, 0x08, 0xF4, 0x1C, 0xF2, 0x1E,
    0x79, 0xFF, 0x01, 0xFF, 0xB1, 0xFF, 0x51, 0x5F, 0x51, 0x5F, 0x10, 0x1F, 0x38, 0x3F, 0x78, 0x4F,
    0x1F, 0x1F, 0x20, 0x20, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x80, 0x80, 0x80, 0x80, 0x80, 0x80,
    0x80, 0x80, 0x00, 0x00, 0x00, 0x00, 0x0F, 0x0F, 0x08, 0x0F, 0x08, 0x0F, 0x04, 0x07, 0x03, 0x03,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xC0, 0xC0, 0x40, 0xC0, 0x40, 0xC0, 0x80, 0x80, 0x00, 0x00,
    0x04, 0x07, 0x04, 0x07, 0x04, 0x07, 0x04, 0x07, 0x08, 0x0F, 0x08, 0x0F, 0x08, 0x0F, 0x10, 0x1F,
    0x20, 0xFF, 0x20, 0xFE, 0x20, 0xF8, 0x20, 0xFF, 0x20, 0xFF, 0x40, 0xFC, 0x41, 0xF9, 0x71, 0xFF,
    0x3F, 0xE0, 0x3F, 0x20, 0x7F, 0x40, 0x7F, 0xC0, 0xFF, 0x80, 0xFF, 0x80, 0xFF, 0x00, 0xFF, 0x00,
    0xF1, 0x1F, 0xF9, 0x0F, 0xFC, 0x07, 0xF8, 0x0F, 0xFC, 0x07, 0xFC, 0x07, 0xFE, 0x03, 0xFF, 0x01,
    0xFC, 0x87, 0xFC, 0x07, 0xFC, 0x8F, 0x7E, 0xD3, 0xBF, 0xA1, 0x9F, 0x90, 0x8F, 0x88, 0x07, 0x04,
    0x80, 0x80, 0x40, 0xC0, 0x40, 0xC0, 0x40, 0xC0, 0x20, 0xE0, 0x98, 0xF8, 0x7F, 0xF7, 0x1F, 0xE0,
    0x00, 0x00, 0x07, 0x07, 0x0F, 0x08, 0x1F, 0x10, 0x1F, 0x10, 0x1F, 0x10, 0x1F, 0x10, 0xFF, 0xF8,
    0x00, 0x00, 0xC0, 0xC0, 0xE0, 0x20, 0xF0, 0x10, 0xF0, 0x10, 0xF0, 0x10, 0xF1, 0x11, 0xFF, 0x3E,
    0x20, 0x3F, 0x40, 0x7F, 0x61, 0x7F, 0x13, 0x1E, 0x27, 0x3C, 0x4F, 0x78, 0xFF, 0xF0, 0xFF, 0x80,
    0xF3, 0x9E, 0xF3, 0x9E, 0xF7, 0x1C, 0xFF, 0x18, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00,
    0x03, 0x02, 0x01, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x8F, 0x70, 0xC7, 0x38, 0xE7, 0xD8, 0x3F, 0x30, 0x1F, 0x10, 0x1C, 0x13, 0x10, 0x1F, 0x09, 0x0E,
    0x3C, 0xCF, 0x3C, 0xC4, 0x98, 0x68, 0x88, 0x78, 0xC8, 0x38, 0x08, 0xF8, 0x3C, 0xC4, 0xE7, 0x1B,
    0x7F, 0xE0, 0x7C, 0x47, 0x38, 0x3F, 0x20, 0x3F, 0x20, 0x3F, 0x21, 0x3E, 0x43, 0x7C, 0xFF, 0xBE,
    0xC0, 0x40, 0xE0, 0x20, 0x70, 0x90, 0x30, 0xD0, 0x90, 0x70, 0xD0, 0x30, 0xE0, 0x20, 0xE0, 0x20,
    0x0F, 0x08, 0x0F, 0x0F, 0x0F, 0x08, 0x1C, 0x13, 0x10, 0x1F, 0x13, 0x1C, 0x1F, 0x10, 0x3F, 0x20,
    0x03, 0x18, 0x80, 0x80, 0x7F, 0x7F, 0x10, 0x10, 0x10, 0x10, 0x20, 0x20, 0x20, 0x20, 0x20, 0x20,
    0x4F, 0xB0, 0xCF, 0x37, 0xFF, 0xF9, 0xFF, 0x01, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xF0, 0x0F,
    0xF0, 0xF0, 0xF8, 0x08, 0x84, 0x7C, 0x8E, 0x72, 0xF9, 0x87, 0xF1, 0xCF, 0xE1, 0xFF, 0xF1, 0xFF,
    0xE0, 0x3F, 0xE0, 0x3F, 0xE0, 0x3F, 0xE0, 0x3F, 0xF8, 0x1F, 0xFF, 0x07, 0xFF, 0x00, 0xFF, 0x00,
    0x20, 0xFF, 0x70, 0xFF, 0x70, 0xFF, 0xF8, 0xFF, 0xF8, 0xFF, 0xFF, 0xFF, 0x80, 0x80, 0x80, 0x80,
    0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x1F, 0xFF, 0xFF, 0xE0, 0xFF, 0x80, 0xFF, 0x80,
    0xFF, 0xFE, 0xFD, 0xFD, 0xF0, 0xF1, 0xC0, 0xC3, 0x00, 0x07, 0xC0, 0xCF, 0xF0, 0x3F, 0xFE, 0x0F,
    0x00, 0x00, 0x00, 0x00, 0x80, 0x80, 0x40, 0xC0, 0x20, 0xE0, 0x10, 0xF0, 0x10, 0xF0, 0x20, 0xE0,
    0x40, 0x7F, 0x40, 0x7F, 0x20, 0x3F, 0x21, 0x3F, 0x11, 0x1F, 0x11, 0x1F, 0x0E, 0x0E, 0x00, 0x00,
    0xFF, 0x80, 0xFF, 0x80, 0xFF, 0x80, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00,
    0xFF, 0x01, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00,
    0xFF, 0xC0, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00,
))

# Every row of the screen starts with the playfield well: a wall, ten empty
# cells and another wall. The remaining eight columns hold the side panel.
_WELL_ROW = (0x0B,) + (0x0A,) * 10 + (0x0B,)
_WELL_ATTRIBUTES = (0x00,) * len(_WELL_ROW)

_PANEL_MAP = (
    (0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C),
    (0x0D, 0x0E, 0x0F, 0x10, 0x10, 0x10, 0x10, 0x10),
    (0x11, 0x12, 0x13, 0x10, 0x10, 0x10, 0x10, 0x10),
    (0x11, 0x14, 0x15, 0x10, 0x10, 0x10, 0x10, 0x10),
    (0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C),
    (0x16, 0x17, 0x18, 0x19, 0x1A, 0x0C, 0x1A, 0x0A),
    (0x0A, 0x0A, 0x0A, 0x0A, 0x1A, 0x0C, 0x1A, 0x0A),
    (0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C, 0x0C),
    (0x0A, 0x0A, 0x0A, 0x1B, 0x1C, 0x0A, 0x1D, 0x1E),
    (0x0A, 0x0A, 0x1F, 0x20, 0x21, 0x22, 0x10, 0x23),
    (0x24, 0x25, 0x26, 0x27, 0x28, 0x29, 0x2A, 0x2B),
    (0x2C, 0x2D, 0x2E, 0x2F, 0x30, 0x31, 0x32, 0x33),
    (0x34, 0x35, 0x36, 0x37, 0x38, 0x39, 0x3A, 0x3B),
    (0x3C, 0x3D, 0x3E, 0x3F, 0x40, 0x41, 0x42, 0x0A),
    (0x0A, 0x43, 0x44, 0x45, 0x46, 0x47, 0x0A, 0x0A),
    (0x0A, 0x0A, 0x48, 0x49, 0x4A, 0x4B, 0x0A, 0x0A),
    (0x0A, 0x0A, 0x4C, 0x4D, 0x4E, 0x4F, 0x50, 0x0A),
    (0x0A, 0x0A, 0x0A, 0x51, 0x52, 0x53, 0x54, 0x0A),
)

_PANEL_ATTRIBUTES = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60, 0x60),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x60, 0x20, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x40, 0x00, 0x60, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x00, 0x00),
    (0x00, 0x00, 0x01, 0x01, 0x01, 0x01, 0x00, 0x00),
    (0x01, 0x02, 0x01, 0x01, 0x01, 0x01, 0x00, 0x00),
    (0x00, 0x03, 0x02, 0x02, 0x02, 0x01, 0x00, 0x00),
    (0x00, 0x03, 0x04, 0x05, 0x05, 0x03, 0x00, 0x00),
    (0x00, 0x00, 0x04, 0x06, 0x02, 0x03, 0x00, 0x00),
    (0x00, 0x00, 0x00, 0x01, 0x00, 0x07, 0x04, 0x00),
    (0x00, 0x00, 0x00, 0x04, 0x00, 0x00, 0x00, 0x00),
)

GAME_SCENE = Asset(
    name="game_scene",
    width=160,
    height=144,
    tiles=_GAME_SCENE_TILES,
    palettes=_GAME_SCENE_PALETTES,
    tile_map=bytes(chain.from_iterable(_WELL_ROW + panel for panel in _PANEL_MAP)),
    map_attributes=bytes(
        chain.from_iterable(_WELL_ATTRIBUTES + panel for panel in _PANEL_ATTRIBUTES)
    ),
)