"""Turn-based dungeon crawler: heroes, enemies, rooms, an interactive game and a score file."""

__version__ = "0.1.0"