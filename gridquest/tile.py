"""Tile types, grid positions and the map tiles built from them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
PROJECT_NAME = "2D Map Generator"
DEFAULT_MAP_WIDTH = 15
DEFAULT_MAP_HEIGHT = 15
DEFAULT_TILE_SIZE = 30


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


LIGHTGRAY = Color(200, 200, 200)
GRAY = Color(130, 130, 130)
DARKGRAY = Color(80, 80, 80)
YELLOW = Color(253, 249, 0)
GOLD = Color(255, 203, 0)
ORANGE = Color(255, 161, 0)
RED = Color(230, 41, 55)
MAGENTA = Color(255, 0, 255)
GREEN = Color(0, 228, 48)
LIME = Color(0, 158, 47)
DARKGREEN = Color(0, 117, 44)
SKYBLUE = Color(102, 191, 255)
BLUE = Color(0, 121, 241)
BEIGE = Color(211, 176, 131)
BROWN = Color(127, 106, 79)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


class TileType(Enum):
    """Every kind of tile a map can hold, in a fixed order."""

    START = 0
    END = 1
    BLOCKED_STONE = 2
    BLOCKED_BUSHES = 3
    BLOCKED_TREE = 4
    BLOCKED_WATER = 5
    TRAVERSABLE_DIRT = 6
    TRAVERSABLE_STONE = 7
    TRAVERSABLE_GRASS = 8
    TREASURE_CHEST_CLOSED = 9
    TREASURE_CHEST_OPENED = 10


_BLOCKED_TYPES = (
    TileType.BLOCKED_STONE,
    TileType.BLOCKED_BUSHES,
    TileType.BLOCKED_TREE,
    TileType.BLOCKED_WATER,
)

_TRAVERSABLE_TYPES = (
    TileType.TRAVERSABLE_DIRT,
    TileType.TRAVERSABLE_STONE,
    TileType.TRAVERSABLE_GRASS,
)

_CHEST_TYPES = (TileType.TREASURE_CHEST_CLOSED, TileType.TREASURE_CHEST_OPENED)

_CHARS = {
    TileType.START: "s",
    TileType.END: "e",
    TileType.BLOCKED_STONE: "#",
    TileType.BLOCKED_BUSHES: "B",
    TileType.BLOCKED_TREE: "T",
    TileType.BLOCKED_WATER: "~",
    TileType.TRAVERSABLE_DIRT: ".",
    TileType.TRAVERSABLE_STONE: "o",
    TileType.TRAVERSABLE_GRASS: ",",
    TileType.TREASURE_CHEST_CLOSED: "t",
    TileType.TREASURE_CHEST_OPENED: "O",
}

_COLORS = {
    TileType.START: GREEN,
    TileType.END: RED,
    TileType.BLOCKED_STONE: GRAY,
    TileType.BLOCKED_BUSHES: DARKGREEN,
    TileType.BLOCKED_TREE: BROWN,
    TileType.BLOCKED_WATER: BLUE,
    TileType.TRAVERSABLE_DIRT: BEIGE,
    TileType.TRAVERSABLE_STONE: LIGHTGRAY,
    TileType.TRAVERSABLE_GRASS: LIME,
    TileType.TREASURE_CHEST_CLOSED: GOLD,
    TileType.TREASURE_CHEST_OPENED: ORANGE,
}

_NAMES = {
    TileType.START: "Start",
    TileType.END: "End",
    TileType.BLOCKED_STONE: "Blocked Stone",
    TileType.BLOCKED_BUSHES: "Blocked Bushes",
    TileType.BLOCKED_TREE: "Blocked Tree",
    TileType.BLOCKED_WATER: "Blocked Water",
    TileType.TRAVERSABLE_DIRT: "Dirt Path",
    TileType.TRAVERSABLE_STONE: "Stone Tile",
    TileType.TRAVERSABLE_GRASS: "Grass",
    TileType.TREASURE_CHEST_CLOSED: "Treasure Chest (Closed)",
    TileType.TREASURE_CHEST_OPENED: "Treasure Chest (Opened)",
}

# Texture keys used by a renderer to look up the tile's image.
TEXTURE_KEYS = {
    TileType.START: "start",
    TileType.END: "end",
    TileType.BLOCKED_STONE: "stone",
    TileType.BLOCKED_BUSHES: "bushes",
    TileType.BLOCKED_TREE: "tree",
    TileType.BLOCKED_WATER: "water",
    TileType.TRAVERSABLE_DIRT: "dirt_path",
    TileType.TRAVERSABLE_STONE: "stone_tile",
    TileType.TRAVERSABLE_GRASS: "grass",
    TileType.TREASURE_CHEST_CLOSED: "treasure_chest_closed",
    TileType.TREASURE_CHEST_OPENED: "treasure_chest_opened",
}


@dataclass(frozen=True)
class Position:
    """A grid coordinate."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class Tile:
    """One cell of the map: its kind and where it lies."""

    tile_type: TileType = TileType.TRAVERSABLE_DIRT
    position: Position = field(default_factory=Position)

    @staticmethod
    def is_blocked_type(tile_type: TileType) -> bool:
        return tile_type in _BLOCKED_TYPES

    @staticmethod
    def is_traversable_type(tile_type: TileType) -> bool:
        return tile_type in _TRAVERSABLE_TYPES or Tile.is_treasure_chest_type(tile_type)

    @staticmethod
    def is_treasure_chest_type(tile_type: TileType) -> bool:
        return tile_type in _CHEST_TYPES

    @staticmethod
    def random_blocked_type(rng: random.Random | None = None) -> TileType:
        """Pick one of the blocked kinds uniformly."""
        return (rng or random).choice(_BLOCKED_TYPES)

    @staticmethod
    def random_traversable_type(rng: random.Random | None = None) -> TileType:
        """Pick one of the plain walkable kinds uniformly."""
        return (rng or random).choice(_TRAVERSABLE_TYPES)

    def char(self) -> str:
        """The single character that shows this tile on a text map."""
        return _CHARS.get(self.tile_type, "?")

    def color(self) -> Color:
        """The fill colour used when no texture is available."""
        return _COLORS.get(self.tile_type, MAGENTA)

    def type_name(self) -> str:
        return _NAMES.get(self.tile_type, "Unknown")

    def is_traversable(self) -> bool:
        return self.is_traversable_type(self.tile_type) or self.tile_type in (
            TileType.START,
            TileType.END,
        )

    def is_treasure_chest(self) -> bool:
        return self.is_treasure_chest_type(self.tile_type)

    def is_closed_treasure_chest(self) -> bool:
        return self.tile_type is TileType.TREASURE_CHEST_CLOSED

    def is_open_treasure_chest(self) -> bool:
        return self.tile_type is TileType.TREASURE_CHEST_OPENED

    def open_treasure_chest(self) -> None:
        """Turn a closed chest into an opened one; other tiles are left alone."""
        if self.tile_type is TileType.TREASURE_CHEST_CLOSED:
            self.tile_type = TileType.TREASURE_CHEST_OPENED

    def close_treasure_chest(self) -> None:
        """Turn an opened chest back into a closed one; other tiles are left alone."""
        if self.tile_type is TileType.TREASURE_CHEST_OPENED:
            self.tile_type = TileType.TREASURE_CHEST_CLOSED

    def __str__(self) -> str:
        return self.char()