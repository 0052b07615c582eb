"""Grid path search (A* and Dijkstra) over a rectangular tile map."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from gridquest.tile import Position, Tile, TileType

logger = logging.getLogger(__name__)

# Up, right, down, left.
_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))

_TYPE_BY_CHAR = {Tile(tile_type).char(): tile_type for tile_type in TileType}


def manhattan_distance(a: Position, b: Position) -> int:
    """Grid distance between two positions when moving in four directions."""
    return abs(a.x - b.x) + abs(a.y - b.y)


@dataclass
class PathResult:
    """The outcome of one path search."""

    path: list[Position] = field(default_factory=list)
    total_cost: float = 0.0
    nodes_explored: int = 0
    path_found: bool = False


class GridMap:
    """A rectangular grid of tiles that paths are searched across."""

    def __init__(self, rows: Sequence[Sequence[Tile]]) -> None:
        grid = [list(row) for row in rows]
        if not grid or not grid[0]:
            raise ValueError("a map needs at least one tile")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("all map rows must have the same width")
        self._rows = grid

    @classmethod
    def from_text(cls, lines: Iterable[str]) -> GridMap:
        """Build a map from rows of tile characters such as ``"s.#e"``."""
        rows = []
        for y, line in enumerate(lines):
            row = []
            for x, ch in enumerate(line):
                try:
                    tile_type = _TYPE_BY_CHAR[ch]
                except KeyError:
                    raise ValueError(f"unknown tile character {ch!r} at ({x}, {y})") from None
                row.append(Tile(tile_type, Position(x, y)))
            rows.append(row)
        return cls(rows)

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    def is_valid_position(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def tile(self, pos: Position) -> Tile:
        if not self.is_valid_position(pos):
            raise IndexError(f"position {pos} lies outside the map")
        return self._rows[pos.y][pos.x]

    def _find(self, tile_type: TileType) -> Position:
        for y, row in enumerate(self._rows):
            for x, tile in enumerate(row):
                if tile.tile_type is tile_type:
                    return Position(x, y)
        raise LookupError(f"the map has no {tile_type.name} tile")

    @property
    def start_position(self) -> Position:
        return self._find(TileType.START)

    @property
    def end_position(self) -> Position:
        return self._find(TileType.END)

    def render_text(self) -> str:
        return "\n".join("".join(tile.char() for tile in row) for row in self._rows)

    def __str__(self) -> str:
        return self.render_text()


def _fmt(value: float) -> str:
    return f"{value:g}"


class Pathfinding:
    """Shortest-path search on a four-connected grid."""

    def find_path_astar(self, start: Position, goal: Position, game_map: GridMap) -> PathResult:
        """Search with A* guided by the Manhattan distance to the goal."""
        return self._search(start, goal, game_map, use_heuristic=True, label="A*")

    def find_path_dijkstra(self, start: Position, goal: Position, game_map: GridMap) -> PathResult:
        """Search with Dijkstra's algorithm (no heuristic)."""
        return self._search(start, goal, game_map, use_heuristic=False, label="Dijkstra")

    def _search(
        self,
        start: Position,
        goal: Position,
        game_map: GridMap,
        *,
        use_heuristic: bool,
        label: str,
    ) -> PathResult:
        started = time.perf_counter()
        result = PathResult()

        if not game_map.is_valid_position(start) or not game_map.is_valid_position(goal):
            logger.warning("Invalid start or goal position!")
            return result
        if not game_map.tile(start).is_traversable() or not game_map.tile(goal).is_traversable():
            logger.warning("Start or goal position is not traversable!")
            return result

        def heuristic(pos: Position) -> float:
            return float(manhattan_distance(pos, goal)) if use_heuristic else 0.0

        counter = itertools.count()
        g_costs: dict[Position, float] = {start: 0.0}
        parents: dict[Position, Position] = {}
        open_set = [(heuristic(start), next(counter), start)]

        logger.debug("%s search from %s to %s", label, start, goal)
        while open_set:
            f_cost, _, current = heapq.heappop(open_set)
            g_cost = g_costs[current]
            if f_cost > g_cost + heuristic(current):
                continue  # superseded by a cheaper entry
            result.nodes_explored += 1

            if current == goal:
                result.path = self._reconstruct(parents, current)
                result.total_cost = g_cost
                result.path_found = True
                logger.debug(
                    "%s completed in %d microseconds",
                    label,
                    int((time.perf_counter() - started) * 1e6),
                )
                return result

            for neighbor in self._neighbors(current, game_map):
                if not game_map.tile(neighbor).is_traversable():
                    continue
                tentative = g_cost + float(manhattan_distance(current, neighbor))
                known = g_costs.get(neighbor)
                if known is not None and tentative >= known:
                    continue
                g_costs[neighbor] = tentative
                parents[neighbor] = current
                heapq.heappush(open_set, (tentative + heuristic(neighbor), next(counter), neighbor))

        logger.info("No path found to goal with %s!", label)
        return result

    @staticmethod
    def _neighbors(pos: Position, game_map: GridMap) -> Iterator[Position]:
        for dx, dy in _DIRECTIONS:
            neighbor = Position(pos.x + dx, pos.y + dy)
            if game_map.is_valid_position(neighbor):
                yield neighbor

    @staticmethod
    def _reconstruct(parents: dict[Position, Position], goal: Position) -> list[Position]:
        path = [goal]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        path.reverse()
        return path

    def format_path(self, result: PathResult) -> str:
        """A short report of a search result."""
        if not result.path_found:
            return "No path to print!"
        steps = " -> ".join(f"({p.x},{p.y})" for p in result.path)
        return "\n".join(
            [
                "=== PATH FOUND ===",
                f"Path length: {len(result.path)} steps",
                f"Total cost: {_fmt(result.total_cost)}",
                f"Nodes explored: {result.nodes_explored}",
                f"Path: {steps}",
                "==================",
            ]
        )

    def format_path_details(self, result: PathResult) -> str:
        """The short report followed by one line per step."""
        text = self.format_path(result)
        if not result.path_found or len(result.path) <= 1:
            return text
        lines = [text, "", "=== DETAILED PATH ANALYSIS ==="]
        last = len(result.path) - 1
        for i, pos in enumerate(result.path):
            line = f"Step {i}: ({pos.x}, {pos.y})"
            if i == 0:
                line += " [START]"
            elif i == last:
                line += " [GOAL]"
            lines.append(line)
        lines.append("===============================")
        return "\n".join(lines)

    def demo(self, game_map: GridMap) -> str:
        """Search from the map's start to its end and describe the outcome."""
        rule = "=" * 50
        result = self.find_path_astar(game_map.start_position, game_map.end_position, game_map)
        lines = [
            rule,
            "           PATHFINDING DEMONSTRATION",
            rule,
            f"Map size: {game_map.width}x{game_map.height}",
            "Finding path from START to END...",
            self.format_path_details(result),
            "",
        ]
        if result.path_found:
            lines += [
                "SUCCESS: A* found the shortest path!",
                f"Algorithm efficiency: {result.nodes_explored} nodes explored",
                f"Path optimality: {_fmt(result.total_cost)} total movement cost",
            ]
        else:
            lines.append("FAILURE: No path exists between start and end!")
        lines.append(rule)
        return "\n".join(lines)

    def compare_algorithms(self, game_map: GridMap) -> str:
        """Run A* and Dijkstra from start to end and tabulate both."""
        start, goal = game_map.start_position, game_map.end_position
        astar = self.find_path_astar(start, goal, game_map)
        dijkstra = self.find_path_dijkstra(start, goal, game_map)

        def row(name: str, res: PathResult) -> str:
            found = "Yes" if res.path_found else "No"
            return f"{name:<13}| {res.nodes_explored:>14} | {_fmt(res.total_cost):>9} | {found}"

        lines = [
            "=" * 60,
            "           ALGORITHM COMPARISON: A* vs DIJKSTRA",
            "=" * 60,
            "-" * 40,
            "           COMPARISON RESULTS",
            "-" * 40,
            "Algorithm    | Nodes Explored | Path Cost | Path Found",
            "-------------|----------------|-----------|------------",
            row("A*", astar),
            row("Dijkstra", dijkstra),
        ]
        if astar.path_found and dijkstra.path_found:
            if astar.nodes_explored < dijkstra.nodes_explored:
                diff = dijkstra.nodes_explored - astar.nodes_explored
                lines.append(f"WINNER: A* (more efficient - explored {diff} fewer nodes)")
            elif astar.nodes_explored > dijkstra.nodes_explored:
                diff = astar.nodes_explored - dijkstra.nodes_explored
                lines.append(f"WINNER: Dijkstra (more efficient - explored {diff} fewer nodes)")
            else:
                lines.append("WINNER: TIE (both algorithms explored the same number of nodes)")
        lines.append("=" * 60)
        return "\n".join(lines)