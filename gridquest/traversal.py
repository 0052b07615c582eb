"""Walks the player along a computed path from its position to the map's end."""

from __future__ import annotations

import logging
from typing import Any, Optional

from gridquest.pathfinding import Pathfinding
from gridquest.player import EquipmentSlotType, PlayerChar
from gridquest.tile import GREEN, RED, SKYBLUE, Color, Position

logger = logging.getLogger(__name__)

DEFAULT_MOVEMENT_DELAY = 0.8

_READY = "Ready for automated traversal"


def _equipment_bonus(item: Any) -> int:
    """Strength bonus of an equippable item; anything else counts as zero."""
    if isinstance(getattr(item, "slot", None), EquipmentSlotType):
        return int(getattr(item, "strength_bonus", 0))
    return 0


class AutomatedTraversal:
    """Steps a player along the A* path to the end, looting and equipping on the way."""

    def __init__(self, movement_delay: float = DEFAULT_MOVEMENT_DELAY) -> None:
        if movement_delay < 0:
            raise ValueError("movement delay cannot be negative")
        self.movement_delay = movement_delay
        self.is_active = False
        self.is_complete = False
        self.is_moving = False
        self.show_path_visualization = True
        self.status_message = _READY
        self.current_step = 0
        self.items_picked_up = 0
        self.items_equipped = 0
        self.total_items_found = 0
        self._path: list[Position] = []
        self._timer = 0.0
        self._player: Optional[PlayerChar] = None
        self._map: Any = None
        self._pathfinder: Optional[Pathfinding] = None

    @property
    def path(self) -> tuple[Position, ...]:
        return tuple(self._path)

    # Control

    def start(self, player: PlayerChar, game_map: Any, pathfinder: Pathfinding) -> bool:
        """Plan a path from the player to the map's end; False if none exists."""
        if player is None or game_map is None or pathfinder is None:
            raise ValueError("automated traversal needs a player, a map and a pathfinder")

        self._player = player
        self._map = game_map
        self._pathfinder = pathfinder

        start = player.position
        goal = game_map.end_position
        logger.info("Calculating optimal path from %s to %s...", start, goal)
        result = pathfinder.find_path_astar(start, goal, game_map)
        if not result.path_found:
            logger.info("Cannot find path to destination! Automated traversal failed.")
            self.status_message = "No path to destination"
            return False

        self._path = list(result.path)
        self.current_step = 0
        self.is_active = True
        self.is_complete = False
        self.is_moving = True
        self._timer = 0.0
        self.items_picked_up = 0
        self.items_equipped = 0
        self.total_items_found = 0
        logger.info(
            "Path calculated: %d steps, cost %g, %d nodes explored",
            len(self._path),
            result.total_cost,
            result.nodes_explored,
        )
        self._update_status()
        return True

    def update(self, dt: float) -> bool:
        """Advance the clock by dt seconds; True when a step was taken."""
        if not self.is_active or self.is_complete or not self.is_moving:
            return False
        self._timer += dt
        if self._timer < self.movement_delay:
            return False
        self._timer = 0.0
        self._process_step()
        return True

    def stop(self) -> None:
        if self.is_active:
            logger.info("Automated traversal stopped by user.")
        self.is_active = False
        self.is_complete = False
        self.is_moving = False
        self._path.clear()
        self.current_step = 0
        self.status_message = "Traversal stopped"

    def toggle_path_visualization(self) -> bool:
        """Flip path display on or off and return the new setting."""
        self.show_path_visualization = not self.show_path_visualization
        return self.show_path_visualization

    # Progress

    def total_steps(self) -> int:
        return len(self._path)

    def progress(self) -> float:
        """Fraction of the path already walked, from 0.0 to 1.0."""
        if not self._path:
            return 0.0
        return self.current_step / len(self._path)

    def path_color(self, step_index: int) -> Color:
        """Marker colour for a step: green start, red end, sky blue otherwise."""
        if step_index == 0:
            return GREEN
        if step_index == len(self._path) - 1:
            return RED
        return SKYBLUE

    def should_auto_equip(self, new_item: Any, current_item: Any) -> bool:
        """Whether new_item beats what is worn now on strength bonus."""
        if new_item is None:
            return False
        if current_item is None:
            return True
        return _equipment_bonus(new_item) > _equipment_bonus(current_item)

    # Stepping

    def _process_step(self) -> None:
        if self.current_step >= len(self._path):
            self._complete()
            return
        next_position = self._path[self.current_step]
        logger.info(
            "Step %d/%d: Moving to %s", self.current_step + 1, len(self._path), next_position
        )
        self._player.position = next_position
        self._handle_item_pickup(next_position)
        self._handle_auto_equipment()
        self.current_step += 1
        self._update_status()
        if self.current_step >= len(self._path):
            self._complete()

    def _handle_item_pickup(self, pos: Position) -> None:
        player = self._player
        store = getattr(self._map, "items", None)
        if store is not None:
            for item, in_chest in list(store.items_at(pos)):
                if in_chest:
                    continue
                weight = float(item.weight)
                logger.info("Found hidden item: %s (weight: %gkg)", item.name, weight)
                if player.current_weight() + weight <= player.max_carry_weight():
                    if player.pick_up_item_at(pos):
                        self.items_picked_up += 1
                        self.total_items_found += 1
                        logger.info("Successfully picked up: %s", item.name)
                    else:
                        logger.info("Failed to pick up item (inventory full)")
                else:
                    logger.info("Too heavy to pick up (would exceed weight limit)")
                break  # one hidden item per step

        tile = self._map.tile(pos)
        if tile.is_closed_treasure_chest():
            logger.info("Found treasure chest! Opening...")
            if player.pick_up_item_at(pos):
                self.items_picked_up += 1
                self.total_items_found += 1
                logger.info("Successfully looted treasure chest!")
            else:
                logger.info("Treasure chest full or inventory full")

    def _handle_auto_equipment(self) -> None:
        inventory = self._player.inventory
        for index in range(inventory.max_slots):
            item = inventory.item_in_slot(index)
            if item is None:
                continue
            slot = getattr(item, "slot", None)
            if not isinstance(slot, EquipmentSlotType):
                continue
            if inventory.equip_item_in_slot(index, slot):
                self.items_equipped += 1
                logger.info(
                    "Auto-equipped %s: %s (+%d STR)",
                    slot.value.lower(),
                    item.name,
                    _equipment_bonus(item),
                )

    def _update_status(self) -> None:
        if self.is_complete:
            self.status_message = "Journey Complete!"
        elif self.is_active:
            self.status_message = f"Automated Travel: {int(self.progress() * 100)}% complete"
        else:
            self.status_message = _READY

    def _complete(self) -> None:
        self.is_complete = True
        self.is_moving = False
        logger.info("AUTOMATED TRAVERSAL COMPLETE! Successfully reached the destination!")
        self._update_status()
        logger.info("%s", self.summary())

    # Reporting

    def summary(self) -> str:
        """A multi-line report of the journey and the player's final state."""
        rule = "=" * 60
        lines = [
            rule,
            "                    JOURNEY COMPLETE!",
            rule,
            "TRAVERSAL STATISTICS:",
            f"  - Total steps taken: {len(self._path)}",
            f"  - Items found: {self.total_items_found}",
            f"  - Items picked up: {self.items_picked_up}",
            f"  - Items auto-equipped: {self.items_equipped}",
        ]
        player = self._player
        if player is not None:
            inventory = player.inventory
            lines += [
                "",
                "PLAYER FINAL STATUS:",
                f"  - Final position: ({player.position.x}, {player.position.y})",
                f"  - Total strength: {player.total_strength}",
                f"  - Current weight: {player.current_weight():.1f}"
                f"/{player.max_carry_weight():.1f} kg",
                "",
                "FINAL EQUIPMENT:",
                f"  - Total equipment strength bonus: +{inventory.total_strength_bonus}",
                "",
                "FINAL INVENTORY STATUS:",
                f"  - Slots used: {inventory.used_slots}/{inventory.max_slots}",
                "",
                "FINAL INVENTORY CONTENTS:",
            ]
            contents = [
                (index, inventory.item_in_slot(index))
                for index in range(inventory.max_slots)
                if inventory.item_in_slot(index) is not None
            ]
            for index, item in contents:
                description = getattr(item, "type_description", "Item")
                rarity = getattr(item, "rarity_name", "Common")
                lines.append(f"  - Slot {index}: {item.name} ({description}, {rarity})")
            if not contents:
                lines.append("  - No items in inventory")
        lines += [
            "",
            "MISSION STATUS: SUCCESS!",
            rule,
        ]
        return "\n".join(lines)