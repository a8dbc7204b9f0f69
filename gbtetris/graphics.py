"""Tile, palette and screen model for a 160x144 tile-based colour display."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pygame

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 144
MAP_SIZE = 32
TILE_SIZE = 8
TILE_BYTES = 16
TILE_SLOTS = 256
PALETTE_SLOTS = 8
COLORS_PER_PALETTE = 4
SPRITE_COUNT = 40
SPRITE_X_OFFSET = 8
SPRITE_Y_OFFSET = 16

ATTR_PALETTE = 0x07
ATTR_FLIP_X = 0x20
ATTR_FLIP_Y = 0x40

_MAX_COLOR = 0x7FFF

Tile = tuple[tuple[int, ...], ...]

_BLANK_TILE: Tile = tuple((0,) * TILE_SIZE for _ in range(TILE_SIZE))
_BLACK_PALETTE = (0,) * COLORS_PER_PALETTE


def rgb8(r: int, g: int, b: int) -> int:
    """Pack 8-bit RGB components into a 15-bit colour (5 bits each, red lowest)."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range: {component}")
    return (r >> 3) | ((g >> 3) << 5) | ((b >> 3) << 10)


def _to_rgb888(color: int) -> bytes:
    def expand(c5: int) -> int:
        return (c5 << 3) | (c5 >> 2)

    return bytes(
        (expand(color & 0x1F), expand((color >> 5) & 0x1F), expand((color >> 10) & 0x1F))
    )


def decode_tile(data: Iterable[int]) -> Tile:
    """Decode one 16-byte 2bpp tile into 8 rows of colour indices 0-3."""
    raw = bytes(data)
    if len(raw) != TILE_BYTES:
        raise ValueError(f"a tile is {TILE_BYTES} bytes, got {len(raw)}")
    return tuple(
        tuple(
            (((high >> bit) & 1) << 1) | ((low >> bit) & 1)
            for bit in range(TILE_SIZE - 1, -1, -1)
        )
        for low, high in zip(raw[0::2], raw[1::2])
    )


def decode_tiles(data: Iterable[int]) -> list[Tile]:
    """Decode consecutive 16-byte tiles."""
    raw = bytes(data)
    if len(raw) % TILE_BYTES:
        raise ValueError(f"tile data length {len(raw)} is not a multiple of {TILE_BYTES}")
    return [decode_tile(raw[start:start + TILE_BYTES]) for start in range(0, len(raw), TILE_BYTES)]


@dataclass
class Sprite:
    """One hardware sprite: tile number, raw position and attribute byte."""

    tile: int = 0
    x: int = 0
    y: int = 0
    attributes: int = 0


def _pixel(tile: Tile, px: int, py: int, attributes: int) -> int:
    if attributes & ATTR_FLIP_X:
        px = TILE_SIZE - 1 - px
    if attributes & ATTR_FLIP_Y:
        py = TILE_SIZE - 1 - py
    return tile[py][px]


class Display:
    """Video memory of the screen: tiles, palettes, background map and sprites."""

    def __init__(self) -> None:
        self.bkg_tiles: list[Tile] = [_BLANK_TILE] * TILE_SLOTS
        self.sprite_tiles: list[Tile] = [_BLANK_TILE] * TILE_SLOTS
        self.bkg_palettes: list[tuple[int, ...]] = [_BLACK_PALETTE] * PALETTE_SLOTS
        self.sprite_palettes: list[tuple[int, ...]] = [_BLACK_PALETTE] * PALETTE_SLOTS
        self.bkg_map = bytearray(MAP_SIZE * MAP_SIZE)
        self.bkg_attributes = bytearray(MAP_SIZE * MAP_SIZE)
        self.sprites = [Sprite() for _ in range(SPRITE_COUNT)]
        self.scx = 0
        self.scy = 0
        self.show_bkg = True
        self.show_sprites = True

    @staticmethod
    def _load_palettes(bank: list[tuple[int, ...]], first: int, colors: Iterable[int]) -> None:
        values = list(colors)
        if len(values) % COLORS_PER_PALETTE:
            raise ValueError("palette data must hold whole palettes of four colours")
        if any(not 0 <= color <= _MAX_COLOR for color in values):
            raise ValueError("palette colours must be 15-bit values")
        palettes = [
            tuple(values[start:start + COLORS_PER_PALETTE])
            for start in range(0, len(values), COLORS_PER_PALETTE)
        ]
        if first < 0 or first + len(palettes) > PALETTE_SLOTS:
            raise ValueError("palettes do not fit in the palette memory")
        bank[first:first + len(palettes)] = palettes

    @staticmethod
    def _load_tiles(bank: list[Tile], first: int, data: Iterable[int]) -> None:
        tiles = decode_tiles(data)
        if first < 0 or first + len(tiles) > TILE_SLOTS:
            raise ValueError("tiles do not fit in the tile memory")
        bank[first:first + len(tiles)] = tiles

    @staticmethod
    def _map_index(x: int, y: int) -> int:
        return (y % MAP_SIZE) * MAP_SIZE + (x % MAP_SIZE)

    def _write_region(self, target: bytearray, x: int, y: int, w: int, h: int,
                      values: Iterable[int]) -> None:
        raw = bytes(values)
        if w < 0 or h < 0 or len(raw) != w * h:
            raise ValueError(f"expected {w}x{h} values, got {len(raw)}")
        if not raw:
            return
        for row, start in enumerate(range(0, len(raw), w)):
            for column, value in enumerate(raw[start:start + w]):
                target[self._map_index(x + column, y + row)] = value

    def _sprite(self, nb: int) -> Sprite:
        if not 0 <= nb < SPRITE_COUNT:
            raise IndexError(f"sprite number out of range: {nb}")
        return self.sprites[nb]

    def set_bkg_palette(self, first: int, palettes: Iterable[int]) -> None:
        """Load background palettes from a flat list of colours."""
        self._load_palettes(self.bkg_palettes, first, palettes)

    def set_bkg_data(self, first: int, tiles: Iterable[int]) -> None:
        """Load background tile data starting at tile slot ``first``."""
        self._load_tiles(self.bkg_tiles, first, tiles)

    def set_bkg_tiles(self, x: int, y: int, w: int, h: int, tiles: Iterable[int]) -> None:
        """Write a ``w`` by ``h`` block of tile numbers into the background map."""
        self._write_region(self.bkg_map, x, y, w, h, tiles)

    def set_bkg_attributes(self, x: int, y: int, w: int, h: int,
                           attributes: Iterable[int]) -> None:
        """Write a ``w`` by ``h`` block of attribute bytes into the background map."""
        self._write_region(self.bkg_attributes, x, y, w, h, attributes)

    def set_bkg_tile_xy(self, x: int, y: int, tile: int) -> None:
        """Set one background map cell."""
        self.bkg_map[self._map_index(x, y)] = tile

    def get_bkg_tile_xy(self, x: int, y: int) -> int:
        """Read one background map cell."""
        return self.bkg_map[self._map_index(x, y)]

    def set_sprite_data(self, first: int, tiles: Iterable[int]) -> None:
        """Load sprite tile data starting at tile slot ``first``."""
        self._load_tiles(self.sprite_tiles, first, tiles)

    def set_sprite_palette(self, first: int, palettes: Iterable[int]) -> None:
        """Load sprite palettes from a flat list of colours."""
        self._load_palettes(self.sprite_palettes, first, palettes)

    def set_sprite_tile(self, nb: int, tile: int) -> None:
        """Choose the tile shown by sprite ``nb``."""
        if not 0 <= tile < TILE_SLOTS:
            raise ValueError(f"tile number out of range: {tile}")
        self._sprite(nb).tile = tile

    def move_sprite(self, nb: int, x: int, y: int) -> None:
        """Place sprite ``nb``; coordinates are offset by 8 and 16 from the screen."""
        sprite = self._sprite(nb)
        sprite.x = x & 0xFF
        sprite.y = y & 0xFF

    def render(self) -> pygame.Surface:
        """Compose the background and sprites into a 160x144 surface."""
        frame = bytearray(b"\xff" * (SCREEN_WIDTH * SCREEN_HEIGHT * 3))
        if self.show_bkg:
            self._render_background(frame)
        if self.show_sprites:
            self._render_sprites(frame)
        return pygame.image.frombuffer(bytes(frame), (SCREEN_WIDTH, SCREEN_HEIGHT), "RGB")

    def _render_background(self, frame: bytearray) -> None:
        colors = [[_to_rgb888(color) for color in palette] for palette in self.bkg_palettes]
        wrap = MAP_SIZE * TILE_SIZE - 1
        for sy in range(SCREEN_HEIGHT):
            my = (sy + self.scy) & wrap
            for sx in range(SCREEN_WIDTH):
                mx = (sx + self.scx) & wrap
                cell = (my // TILE_SIZE) * MAP_SIZE + mx // TILE_SIZE
                attributes = self.bkg_attributes[cell]
                tile = self.bkg_tiles[self.bkg_map[cell]]
                index = _pixel(tile, mx % TILE_SIZE, my % TILE_SIZE, attributes)
                offset = (sy * SCREEN_WIDTH + sx) * 3
                frame[offset:offset + 3] = colors[attributes & ATTR_PALETTE][index]

    def _render_sprites(self, frame: bytearray) -> None:
        colors = [[_to_rgb888(color) for color in palette] for palette in self.sprite_palettes]
        # Lower-numbered sprites win, so draw them last.
        for sprite in reversed(self.sprites):
            left = sprite.x - SPRITE_X_OFFSET
            top = sprite.y - SPRITE_Y_OFFSET
            tile = self.sprite_tiles[sprite.tile]
            for ty in range(TILE_SIZE):
                sy = top + ty
                if not 0 <= sy < SCREEN_HEIGHT:
                    continue
                for tx in range(TILE_SIZE):
                    sx = left + tx
                    if not 0 <= sx < SCREEN_WIDTH:
                        continue
                    index = _pixel(tile, tx, ty, sprite.attributes)
                    if index == 0:
                        continue
                    offset = (sy * SCREEN_WIDTH + sx) * 3
                    frame[offset:offset + 3] = colors[sprite.attributes & ATTR_PALETTE][index]