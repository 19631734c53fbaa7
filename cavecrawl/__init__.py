"""A turn-based, five-floor dungeon crawler played in the terminal."""

__version__ = "0.1.0"