"""Top-level game loop and the windowed front end."""

from __future__ import annotations

import argparse
import enum

import pygame

from gbtetris.game_scene import GameScene
from gbtetris.graphics import SCREEN_HEIGHT, SCREEN_WIDTH, Display
from gbtetris.joypad import Button, Joypad

FRAME_RATE = 60


class GameState(enum.IntEnum):
    """Screens the game can be in."""

    SPLASH = 0
    TITLE = 1
    SETTINGS = 2
    GAME = 3
    GAME_OVER = 4


# The scene is driven while the state holds this value.
_RUNNING = GameState.TITLE


class Game:
    """Runs one frame of the main loop at a time."""

    def __init__(self, display: Display | None = None) -> None:
        self.display = display if display is not None else Display()
        self.state = GameState.SPLASH
        self.joypad = Joypad()
        self.scene = GameScene(self.display)
        self.display.show_bkg = True
        self.display.show_sprites = True

    def frame(self, buttons: int) -> GameState:
        """Run one frame; ``buttons`` is read at its end and acted on next frame."""
        if self.state != _RUNNING and self.joypad.just_pressed(Button.START):
            self.state = _RUNNING

        if self.state == _RUNNING:
            self.scene.update(self.joypad)
            self.scene.draw_ui(self.display)
            self.scene.draw_piece(self.display)

        self.joypad.read(buttons)
        return self.state


_KEYMAP = {
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_LEFT: Button.LEFT,
    pygame.K_UP: Button.UP,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_z: Button.A,
    pygame.K_x: Button.B,
    pygame.K_BACKSPACE: Button.SELECT,
    pygame.K_RETURN: Button.START,
}


def _read_buttons() -> int:
    keys = pygame.key.get_pressed()
    state = 0
    for key, button in _KEYMAP.items():
        if keys[key]:
            state |= button
    return state


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="gbtetris", description="Falling-block puzzle game.")
    parser.add_argument("--scale", type=int, default=3, help="window scale factor")
    parser.add_argument("--frames", type=int, default=None,
                        help="stop after this many frames")
    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error("scale must be at least 1")

    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH * args.scale, SCREEN_HEIGHT * args.scale))
        pygame.display.set_caption("gbtetris")
        clock = pygame.time.Clock()
        game = Game()
        frames = 0
        while args.frames is None or frames < args.frames:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                break
            game.frame(_read_buttons())
            picture = game.display.render()
            window.blit(pygame.transform.scale(picture, window.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
            frames += 1
    finally:
        pygame.quit()
    return 0