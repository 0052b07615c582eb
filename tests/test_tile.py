import random

import pytest

from gridquest.tile import (
    GOLD,
    MAGENTA,
    ORANGE,
    Position,
    Tile,
    TileType,
)

BLOCKED = [
    TileType.BLOCKED_STONE,
    TileType.BLOCKED_BUSHES,
    TileType.BLOCKED_TREE,
    TileType.BLOCKED_WATER,
]
WALKABLE = [
    TileType.TRAVERSABLE_DIRT,
    TileType.TRAVERSABLE_STONE,
    TileType.TRAVERSABLE_GRASS,
]
CHESTS = [TileType.TREASURE_CHEST_CLOSED, TileType.TREASURE_CHEST_OPENED]


@pytest.mark.parametrize(
    "tile_type, expected",
    [
        (TileType.START, "s"),
        (TileType.END, "e"),
        (TileType.BLOCKED_STONE, "#"),
        (TileType.BLOCKED_BUSHES, "B"),
        (TileType.BLOCKED_TREE, "T"),
        (TileType.BLOCKED_WATER, "~"),
        (TileType.TRAVERSABLE_DIRT, "."),
        (TileType.TRAVERSABLE_STONE, "o"),
        (TileType.TRAVERSABLE_GRASS, ","),
        (TileType.TREASURE_CHEST_CLOSED, "t"),
        (TileType.TREASURE_CHEST_OPENED, "O"),
    ],
)
def test_char_for_each_type(tile_type, expected):
    tile = Tile(tile_type)
    assert tile.char() == expected
    assert str(tile) == expected


@pytest.mark.parametrize(
    "tile_type, expected",
    [
        (TileType.START, "Start"),
        (TileType.BLOCKED_WATER, "Blocked Water"),
        (TileType.TRAVERSABLE_DIRT, "Dirt Path"),
        (TileType.TREASURE_CHEST_OPENED, "Treasure Chest (Opened)"),
    ],
)
def test_type_names(tile_type, expected):
    assert Tile(tile_type).type_name() == expected


def test_every_type_has_a_known_char_name_and_color():
    tiles = [Tile(tile_type) for tile_type in TileType]
    assert {tile.char() for tile in tiles} == set("se#BT~.o,tO")
    assert {tile.type_name() for tile in tiles} == {
        "Start",
        "End",
        "Blocked Stone",
        "Blocked Bushes",
        "Blocked Tree",
        "Blocked Water",
        "Dirt Path",
        "Stone Tile",
        "Grass",
        "Treasure Chest (Closed)",
        "Treasure Chest (Opened)",
    }
    colors = [tile.color() for tile in tiles]
    assert MAGENTA not in colors
    distinct = []
    for color in colors:
        if color not in distinct:
            distinct.append(color)
    assert len(distinct) == len(colors)


def test_chars_are_distinct():
    chars = [Tile(t).char() for t in TileType]
    assert len(set(chars)) == len(chars)


def test_chest_colors():
    assert Tile(TileType.TREASURE_CHEST_CLOSED).color() == GOLD
    assert Tile(TileType.TREASURE_CHEST_OPENED).color() == ORANGE


def test_default_tile_is_dirt_at_origin():
    tile = Tile()
    assert tile.tile_type is TileType.TRAVERSABLE_DIRT
    assert tile.position == Position(0, 0)


@pytest.mark.parametrize("tile_type", BLOCKED)
def test_blocked_types(tile_type):
    assert Tile.is_blocked_type(tile_type)
    assert not Tile.is_traversable_type(tile_type)
    assert not Tile(tile_type).is_traversable()


@pytest.mark.parametrize("tile_type", WALKABLE + CHESTS)
def test_traversable_types(tile_type):
    assert Tile.is_traversable_type(tile_type)
    assert not Tile.is_blocked_type(tile_type)
    assert Tile(tile_type).is_traversable()


def test_start_and_end_are_traversable_tiles_but_not_traversable_types():
    for tile_type in (TileType.START, TileType.END):
        assert Tile(tile_type).is_traversable()
        assert not Tile.is_traversable_type(tile_type)
        assert not Tile.is_blocked_type(tile_type)


def test_chest_predicates():
    closed = Tile(TileType.TREASURE_CHEST_CLOSED)
    opened = Tile(TileType.TREASURE_CHEST_OPENED)
    assert closed.is_treasure_chest() and opened.is_treasure_chest()
    assert closed.is_closed_treasure_chest() and not closed.is_open_treasure_chest()
    assert opened.is_open_treasure_chest() and not opened.is_closed_treasure_chest()
    assert not Tile(TileType.TRAVERSABLE_GRASS).is_treasure_chest()


def test_open_and_close_round_trip():
    tile = Tile(TileType.TREASURE_CHEST_CLOSED, Position(3, 4))
    tile.open_treasure_chest()
    assert tile.tile_type is TileType.TREASURE_CHEST_OPENED
    tile.close_treasure_chest()
    assert tile.tile_type is TileType.TREASURE_CHEST_CLOSED
    assert tile.position == Position(3, 4)


def test_open_and_close_leave_other_tiles_alone():
    tile = Tile(TileType.BLOCKED_TREE)
    tile.open_treasure_chest()
    tile.close_treasure_chest()
    assert tile.tile_type is TileType.BLOCKED_TREE


def test_opening_an_open_chest_keeps_it_open():
    tile = Tile(TileType.TREASURE_CHEST_OPENED)
    tile.open_treasure_chest()
    assert tile.is_open_treasure_chest()


def test_random_types_stay_in_their_sets():
    rng = random.Random(1234)
    blocked = {Tile.random_blocked_type(rng) for _ in range(200)}
    walkable = {Tile.random_traversable_type(rng) for _ in range(200)}
    assert blocked == set(BLOCKED)
    assert walkable == set(WALKABLE)


def test_random_types_are_reproducible_with_seed():
    first = [Tile.random_blocked_type(random.Random(7)) for _ in range(3)]
    second = [Tile.random_blocked_type(random.Random(7)) for _ in range(3)]
    assert first == second


def test_position_equality_and_hash():
    assert Position(2, 5) == Position(2, 5)
    assert Position(2, 5) != Position(5, 2)
    assert len({Position(1, 1), Position(1, 1), Position(0, 1)}) == 2
    assert str(Position(2, 5)) == "(2, 5)"