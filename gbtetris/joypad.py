"""Joypad state tracking with edge detection between frames."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Button(enum.IntFlag):
    """Bit masks of the joypad buttons."""

    RIGHT = 0x01
    LEFT = 0x02
    UP = 0x04
    DOWN = 0x08
    A = 0x10
    B = 0x20
    SELECT = 0x40
    START = 0x80


@dataclass
class Joypad:
    """Holds this frame's and last frame's button state."""

    previous: int = 0
    current: int = 0

    def pressed(self, button: int) -> bool:
        """True while any of ``button`` is held this frame."""
        return (self.current & button) != 0

    def just_pressed(self, button: int) -> bool:
        """True only on the frame ``button`` goes from released to held."""
        return (self.current & button) != 0 and (self.previous & button) == 0

    def read(self, state: int) -> None:
        """Shift the current state to previous and store ``state`` as current."""
        self.previous = self.current
        self.current = int(state) & 0xFF