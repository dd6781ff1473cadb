"""Map loading and validation for a tile-based puzzle game."""

__version__ = "0.1.0"