# gridquest

gridquest is the core of a small grid-map role-playing game. It covers:

- map tiles;
- characters with health and strength;
- A* and Dijkstra path search on a four-connected grid;
- a traversal that walks the player to the end of the map by itself.

It uses only the standard library. Progress messages go to the standard `logging` module.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `gridquest.tile`

This module defines `TileType`, `Position` (a frozen `x`/`y` dataclass) and `Tile`.

A `Tile` has the following methods:

- `is_traversable()` tells whether the tile can be walked on. Start, end, dirt, stone tile, grass and both kinds of chest can be walked on.
- `char()` gives the console character. The characters are:
  - `s` start
  - `e` end
  - `#` stone
  - `B` bushes
  - `T` tree
  - `~` water
  - `.` dirt
  - `o` stone tile
  - `,` grass
  - `t` closed chest
  - `O` opened chest
- `color()` gives an RGBA `Color`.
- `type_name()` gives the tile's name.
- `open_treasure_chest()` and `close_treasure_chest()` switch a chest between closed and opened.

Its static helpers are:

- `is_blocked_type`
- `is_traversable_type`
- `is_treasure_chest_type`
- `random_blocked_type(rng)`
- `random_traversable_type(rng)`

The module also holds named colour constants and the `TEXTURE_KEYS` mapping. A renderer can use that mapping to look up a tile's image.

### `gridquest.character`

This module defines `CharacterType` and the abstract `Character` base class. Subclasses implement `can_move_to` and `move_to`.

- Health is kept between 0 and the maximum, which is 100.
- `take_damage(n)` returns the health actually lost. `heal(n)` returns the health actually gained. A negative amount has the opposite effect.
- `status_report()` returns a multi-line text report.

### `gridquest.pathfinding`

`GridMap` is a rectangular grid of tiles. You can build one with `GridMap.from_text(lines)`, using the tile characters above.

A `GridMap` offers:

- `width` and `height`;
- `is_valid_position`;
- `tile(pos)`;
- `start_position` and `end_position`;
- `render_text()`.

`Pathfinding` finds a path on a `GridMap`:

- `find_path_astar` searches with the Manhattan heuristic.
- `find_path_dijkstra` searches with no heuristic.

Both searches move in four directions and return a `PathResult`. It holds:

- `path`, from start to goal inclusive;
- `total_cost`;
- `nodes_explored`;
- `path_found`.

If the start or the goal is off the map or cannot be walked on, the search returns an empty result.

The report methods return text:

- `format_path` and `format_path_details` describe one result.
- `demo(game_map)` searches from the map's start to its end and reports the result.
- `compare_algorithms(game_map)` runs both searches and sets them side by side in a table.

The module also provides `manhattan_distance(a, b)`.

### `gridquest.player`

`PlayerChar(start_position, base_strength=10)` is the player character. Give it a map with `set_map`. Before that, movement and item calls raise `RuntimeError`.

Movement:

- `try_move_up`, `try_move_down`, `try_move_left` and `try_move_right` return whether the step happened.
- A step succeeds only onto a valid, walkable tile, and only while the player is not overweight.

Strength and weight:

- `strength` is the base strength plus the bonuses of everything equipped.
- `max_carry_weight()` is twice the strength.
- `current_weight()` counts carried and equipped items.

Items and equipment:

- `pick_up_item_at(pos)` works only on the player's own tile. On a closed chest it loots the chest and opens it. Otherwise it picks up a hidden item there, if that item would not exceed the carry limit.
- `equip_selected_item(slot_type)` equips the first carried item that fits an `EquipmentSlotType` (weapon, armor or accessory).
- `unequip_item(slot_type)` puts the worn item back among the carried items.

Reports:

- `check_items_at_current_position()` returns description lines for the player's tile.
- `status_report()` adds strength, weight and inventory lines to the base report.

### `gridquest.traversal`

`AutomatedTraversal(movement_delay=0.8)` walks the player along the A* path to the map's end.

- `start(player, game_map, pathfinder)` computes the path and returns `False` if there is none.
- `update(dt)` advances the clock by `dt` seconds. It takes one step each time the delay has passed and returns `True` when it stepped.
- On each step it picks up one hidden item and loots a closed chest. It also equips every equippable carried item.
- `progress()`, `total_steps()` and `status_message` report progress.
- `path_color(i)` gives the marker colour for a step.
- `should_auto_equip(new, current)` compares the strength bonuses of two items.
- `summary()` returns the final report.

## Example

```python
from gridquest.pathfinding import GridMap, Pathfinding
from gridquest.player import PlayerChar
from gridquest.traversal import AutomatedTraversal

game_map = GridMap.from_text([
    "s..#",
    ".#..",
    "...e",
])

pathfinder = Pathfinding()
result = pathfinder.find_path_astar(game_map.start_position, game_map.end_position, game_map)
print(pathfinder.format_path(result))
print(pathfinder.compare_algorithms(game_map))

player = PlayerChar(game_map.start_position)
player.set_map(game_map)

traversal = AutomatedTraversal()
if traversal.start(player, game_map, pathfinder):
    while not traversal.is_complete:
        traversal.update(0.8)
    print(traversal.summary())
```

## Items

The package defines no item catalogue and no item storage. Items are duck-typed objects with these attributes:

- `name`
- `weight`
- optionally `slot` (an `EquipmentSlotType`)
- optionally `strength_bonus`, `rarity_name` and `type_description`

Picking up items needs a map that has an `items` attribute with three methods:

- `items_at(pos)`, which yields `(item, in_chest)` pairs;
- `take_item_at(pos, in_chest)`;
- `place_item(pos, item, in_chest)`.

`GridMap` has no such store. On a plain `GridMap`, pick-ups find nothing.

## What this package does not do

- It does not generate maps. You supply the tiles, for example through `GridMap.from_text`.
- It has no window, rendering, input handling or game loop. Colours and texture keys are given as data only.
- It does not save games.
- It installs no command-line program.