"""A falling-block puzzle game on an emulated tile-and-sprite display, drawn with pygame."""

__version__ = "0.1.0"