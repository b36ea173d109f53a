"""Map validation, text helpers, colour names and XPM image parsing for a tile-based puzzle game."""

__version__ = "0.1.0"