"""Small 8-bit arithmetic helpers used for playfield indexing."""

from __future__ import annotations

_BYTE = 0xFF


def multiplication(a: int, b: int) -> int:
    """Combine two bytes the way the playfield code does.

    The accumulating loop stops after its first pass, so a nonzero ``b``
    yields ``a`` doubled and a zero ``b`` yields ``a`` unchanged. All
    arithmetic wraps at 8 bits.
    """
    a &= _BYTE
    b &= _BYTE
    if b == 0:
        return a
    return (a + a) & _BYTE


def calculate_index(x: int, y: int, size: int) -> int:
    """Map a 2D cell ``(x, y)`` to a flat 8-bit index for a row length ``size``."""
    return (multiplication(y, size) + (x & _BYTE)) & _BYTE