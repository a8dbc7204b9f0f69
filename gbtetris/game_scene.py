"""The playing field: a falling piece, its timer and the score panel."""

from __future__ import annotations

import random

from gbtetris.assets import GAME_SCENE, TETRAMINO_GRAPHIC
from gbtetris.gbmath import calculate_index
from gbtetris.graphics import SCREEN_HEIGHT, SPRITE_X_OFFSET, SPRITE_Y_OFFSET, Display
from gbtetris.joypad import Button, Joypad

LEFT_BORDER = 8
RIGHT_BORDER = 88

FALL_TIMER = 16
FALL_TIMER_FRAC = 4

GAME_FIELD_WIDTH = 10
GAME_FIELD_LENGTH = 180

PIECE_STEP = 8
START_X = 32
START_Y = 0
DEFAULT_SEED = 8

_BYTE = 0xFF

# Cell offsets, in pixels, of the J piece:
#   0
#   000
_J_PIECE = ((0, 0), (0, 8), (8, 8), (16, 8))


class GameScene:
    """State of one game: score counters, the active piece and the fall timer."""

    def __init__(self, display: Display, seed: int = DEFAULT_SEED) -> None:
        self._rng = random.Random(seed)

        display.scx = 0
        display.scy = 0

        self.score = 0
        self.level = 0
        self.lines = 0

        self.current_piece = 0
        self.next_piece = self._rng.randrange(256)

        self.timer = FALL_TIMER
        self.timer_frac = FALL_TIMER_FRAC

        self.piece_x = START_X
        self.piece_y = START_Y

        self.collision_map = bytearray(GAME_FIELD_LENGTH)

        display.set_bkg_palette(0, GAME_SCENE.palettes)
        display.set_bkg_data(0, GAME_SCENE.tiles)
        display.set_bkg_tiles(0, 0, GAME_SCENE.map_width, GAME_SCENE.map_height,
                              GAME_SCENE.tile_map)
        display.set_bkg_attributes(0, 0, GAME_SCENE.map_width, GAME_SCENE.map_height,
                                   GAME_SCENE.map_attributes)

        display.set_sprite_data(0, TETRAMINO_GRAPHIC.tiles)
        display.set_sprite_palette(0, TETRAMINO_GRAPHIC.palettes)

    def update(self, joypad: Joypad) -> None:
        """Apply this frame's input and advance the fall timer."""
        if joypad.just_pressed(Button.RIGHT) and self.piece_x < RIGHT_BORDER - 24:
            self.piece_x += PIECE_STEP
        if joypad.just_pressed(Button.LEFT) and self.piece_x > LEFT_BORDER:
            self.piece_x -= PIECE_STEP

        if joypad.just_pressed(Button.UP):
            self.piece_y = 0
            self.collision_map[calculate_index(0, 0, GAME_FIELD_LENGTH)] = 1

        self.timer_frac = (self.timer_frac - 1) & _BYTE
        if self.timer_frac == 0:
            self.timer = (self.timer - 1) & _BYTE
            self.timer_frac = FALL_TIMER_FRAC

        if self.timer == 0:
            if self.piece_y < SCREEN_HEIGHT - 16 and not joypad.pressed(Button.DOWN):
                self.piece_y += PIECE_STEP
            self.timer = FALL_TIMER

    def draw_ui(self, display: Display) -> None:
        """Show single-digit counters in the side panel and the collision marker."""
        for row, value in ((1, self.score), (2, self.level), (3, self.lines)):
            if value < 10:
                display.set_bkg_tile_xy(19, row, value)

        if self.collision_map[0] != 0:
            display.set_bkg_tile_xy(1, 0, 5)

    def draw_piece(self, display: Display) -> None:
        """Place the sprites that make up the active piece."""
        if self.current_piece != 0:
            return
        base_x = self.piece_x + SPRITE_X_OFFSET
        base_y = self.piece_y + SPRITE_Y_OFFSET
        for nb, (dx, dy) in enumerate(_J_PIECE):
            display.set_sprite_tile(nb, 0)
            display.move_sprite(nb, base_x + dx, base_y + dy)