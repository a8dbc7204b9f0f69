"""A frame-driven countdown timer with an 8-bit fractional counter."""

from __future__ import annotations

from dataclasses import dataclass

_BYTE = 0xFF


@dataclass
class Timer:
    """Countdown whose whole part drops each time the fraction wraps to zero."""

    active: bool = False
    time: int = 0
    time_frac: int = 0

    def start(self, wait_time: int) -> None:
        """Load ``wait_time`` and clear the fraction; activity is left as is."""
        if not 0 <= wait_time <= _BYTE:
            raise ValueError(f"wait time must fit in a byte, got {wait_time}")
        self.time = wait_time
        self.time_frac = 0

    def update(self) -> None:
        """Advance one frame if the timer is running."""
        if not self.active:
            return
        self.time_frac = (self.time_frac - 1) & _BYTE
        if self.time_frac == 0:
            self.time = (self.time - 1) & _BYTE

    def pause(self) -> None:
        """Stop the timer from counting."""
        self.active = False

    def resume(self) -> None:
        """Let the timer count again."""
        self.active = True

    def status(self) -> bool:
        """Whether the timer is running."""
        return self.active

    def remaining(self) -> int:
        """The whole part of the remaining time."""
        return self.time