"""Grid-map role-playing core: tiles, characters, pathfinding and automated traversal."""

__version__ = "0.1.0"
__all__ = ["tile", "character", "pathfinding", "player", "traversal"]