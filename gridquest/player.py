"""The player character: movement, carrying weight, items and equipment."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable, Optional, Protocol, Tuple

from gridquest.character import Character, CharacterType
from gridquest.tile import Position, Tile

logger = logging.getLogger(__name__)

CARRY_WEIGHT_PER_STRENGTH = 2.0
DEFAULT_INVENTORY_SLOTS = 20


class EquipmentSlotType(Enum):
    """Where an item can be worn."""

    WEAPON = "Weapon"
    ARMOR = "Armor"
    ACCESSORY = "Accessory"


class _ItemStore(Protocol):
    """Items lying on a map, either hidden on the ground or inside chests."""

    def items_at(self, pos: Position) -> Iterable[Tuple[Any, bool]]: ...

    def take_item_at(self, pos: Position, in_chest: bool) -> Any: ...

    def place_item(self, pos: Position, item: Any, in_chest: bool) -> None: ...


class _Map(Protocol):
    def is_valid_position(self, pos: Position) -> bool: ...

    def tile(self, pos: Position) -> Tile: ...


def _slot_of(item: Any) -> Optional[EquipmentSlotType]:
    return getattr(item, "slot", None)


def _strength_bonus(item: Any) -> int:
    return int(getattr(item, "strength_bonus", 0))


class _Inventory:
    """Carried items in numbered slots plus one equipped item per slot type."""

    def __init__(self, max_slots: int = DEFAULT_INVENTORY_SLOTS) -> None:
        if max_slots < 1:
            raise ValueError("an inventory needs at least one slot")
        self._slots: list[Any] = [None] * max_slots
        self._equipped: dict[EquipmentSlotType, Any] = {}

    @property
    def max_slots(self) -> int:
        return len(self._slots)

    @property
    def used_slots(self) -> int:
        return sum(item is not None for item in self._slots)

    def item_in_slot(self, index: int) -> Any:
        return self._slots[index]

    def items(self) -> list[Any]:
        """Carried (not equipped) items in slot order."""
        return [item for item in self._slots if item is not None]

    def equipped(self, slot_type: EquipmentSlotType) -> Any:
        return self._equipped.get(slot_type)

    def add_item(self, item: Any) -> bool:
        """Put the item into the first free slot; False when every slot is taken."""
        for index, held in enumerate(self._slots):
            if held is None:
                self._slots[index] = item
                return True
        return False

    def equip_item_in_slot(self, index: int, slot_type: EquipmentSlotType) -> bool:
        """Equip the item in the given slot, swapping out what was worn there."""
        item = self._slots[index]
        if item is None or _slot_of(item) is not slot_type:
            return False
        self._slots[index] = self._equipped.get(slot_type)
        self._equipped[slot_type] = item
        return True

    def unequip(self, slot_type: EquipmentSlotType) -> bool:
        """Move the worn item back into the bag; False if nothing is worn or no room."""
        item = self._equipped.get(slot_type)
        if item is None or not self.add_item(item):
            return False
        del self._equipped[slot_type]
        return True

    @property
    def total_strength_bonus(self) -> int:
        return sum(_strength_bonus(item) for item in self._equipped.values())

    @property
    def current_weight(self) -> float:
        carried = list(self._slots) + list(self._equipped.values())
        return float(sum(float(item.weight) for item in carried if item is not None))

    def open_treasure_chest(self, pos: Position, store: _ItemStore) -> bool:
        """Take the chest's item at pos into the bag; False if empty or no room."""
        item = store.take_item_at(pos, True)
        if item is None:
            return False
        if not self.add_item(item):
            store.place_item(pos, item, True)
            return False
        return True

    def update(self) -> None:
        """Per-frame hook; a plain inventory has nothing to advance."""


class PlayerChar(Character):
    """The character the player steers across the map."""

    def __init__(
        self,
        start_position: Position,
        base_strength: int = 10,
        *,
        inventory: Optional[_Inventory] = None,
    ) -> None:
        super().__init__(start_position, CharacterType.PLAYER)
        self.base_strength = base_strength
        self.name = "Player"
        self.inventory = inventory if inventory is not None else _Inventory()
        self._map: Optional[_Map] = None
        logger.debug(
            "PlayerChar created at position %s with %d base strength.",
            start_position,
            base_strength,
        )

    def set_map(self, game_map: _Map) -> None:
        self._map = game_map

    def _require_map(self) -> _Map:
        if self._map is None:
            raise RuntimeError("no map set for player character")
        return self._map

    def _item_store(self) -> Optional[_ItemStore]:
        return getattr(self._require_map(), "items", None)

    # Movement

    def can_move_to(self, new_position: Position) -> bool:
        game_map = self._require_map()
        if not game_map.is_valid_position(new_position):
            return False
        if not game_map.tile(new_position).is_traversable():
            return False
        if self.is_overweight():
            logger.info(
                "Cannot move - you are carrying too much weight! Current: %gkg, Max: %gkg",
                self.current_weight(),
                self.max_carry_weight(),
            )
            return False
        return True

    def move_to(self, new_position: Position) -> None:
        if self.can_move_to(new_position):
            self.position = new_position
            logger.info("Player moved to position %s", new_position)
        else:
            logger.info("Cannot move to position %s", new_position)

    def _try_step(self, dx: int, dy: int) -> bool:
        target = Position(self.position.x + dx, self.position.y + dy)
        if self.can_move_to(target):
            self.move_to(target)
            return True
        return False

    def try_move_up(self) -> bool:
        return self._try_step(0, -1)

    def try_move_down(self) -> bool:
        return self._try_step(0, 1)

    def try_move_left(self) -> bool:
        return self._try_step(-1, 0)

    def try_move_right(self) -> bool:
        return self._try_step(1, 0)

    # Strength and weight

    @property
    def strength(self) -> int:
        """Base strength plus the bonuses of everything equipped."""
        return self.base_strength + self.inventory.total_strength_bonus

    @strength.setter
    def strength(self, value: int) -> None:
        self.base_strength = value

    @property
    def total_strength(self) -> int:
        return self.strength

    def max_carry_weight(self) -> float:
        return self.strength * CARRY_WEIGHT_PER_STRENGTH

    def current_weight(self) -> float:
        return self.inventory.current_weight

    def is_overweight(self) -> bool:
        return self.current_weight() > self.max_carry_weight()

    # Items

    def pick_up_item_at(self, pos: Position) -> bool:
        """Loot a closed chest or pick up a hidden item at the player's own tile."""
        game_map = self._require_map()
        if self.position != pos:
            logger.info("Cannot pick up item - not at that position!")
            return False

        store = self._item_store()
        tile = game_map.tile(pos)
        if tile.is_closed_treasure_chest():
            if store is not None and self.inventory.open_treasure_chest(pos, store):
                tile.open_treasure_chest()
                logger.info("Opened treasure chest and picked up item!")
                return True
            logger.info("Could not pick up item from treasure chest.")
            return False

        item = store.take_item_at(pos, False) if store is not None else None
        if item is None:
            logger.info("No items to pick up at this location.")
            return False

        weight = float(item.weight)
        if self.current_weight() + weight > self.max_carry_weight():
            logger.info(
                "Cannot pick up %s - would exceed weight limit! (%gkg)", item.name, weight
            )
            store.place_item(pos, item, False)
            return False

        if self.inventory.add_item(item):
            logger.info("Picked up %s!", item.name)
            return True
        logger.info("Inventory full! Cannot pick up %s", item.name)
        store.place_item(pos, item, False)
        return False

    def drop_selected_item(self) -> bool:
        """Announce dropping the first carried item; False when carrying nothing."""
        items = self.inventory.items()
        if not items:
            logger.info("No items to drop!")
            return False
        logger.info("Dropped %s at position %s", items[0].name, self.position)
        return True

    def equip_selected_item(self, slot_type: EquipmentSlotType) -> bool:
        """Equip the first carried item that fits the given slot."""
        for index in range(self.inventory.max_slots):
            item = self.inventory.item_in_slot(index)
            if item is None or _slot_of(item) is not slot_type:
                continue
            if self.inventory.equip_item_in_slot(index, slot_type):
                logger.info("Equipped %s!", item.name)
                self._announce_strength()
                return True
        logger.info("No compatible items found to equip!")
        return False

    def unequip_item(self, slot_type: EquipmentSlotType) -> bool:
        if self.inventory.unequip(slot_type):
            logger.info("Unequipped item from %s slot!", slot_type.value)
            self._announce_strength()
            return True
        logger.info("No item equipped in %s slot!", slot_type.value)
        return False

    def _announce_strength(self) -> None:
        logger.info(
            "Strength updated! Total strength: %d (Base: %d + Equipment: %d)",
            self.strength,
            self.base_strength,
            self.strength - self.base_strength,
        )
        if self.is_overweight():
            logger.warning(
                "You are now overweight! Drop some items or increase strength."
            )

    # Reporting

    def status_report(self) -> str:
        weight_line = f"Weight: {self.current_weight():g}/{self.max_carry_weight():g} kg"
        if self.is_overweight():
            weight_line += " **OVERWEIGHT!**"
        lines = [
            super().status_report(),
            "",
            "=== PLAYER-SPECIFIC INFO ===",
            f"Total Strength: {self.strength} (Base: {self.base_strength}"
            f" + Equipment: {self.strength - self.base_strength})",
            weight_line,
            f"Inventory: {self.inventory.used_slots}/{self.inventory.max_slots} slots used",
        ]
        bonus = self.inventory.total_strength_bonus
        if bonus > 0:
            lines.append(f"Equipment Strength Bonus: +{bonus}")
        lines.append("===============================")
        return "\n".join(lines)

    def update(self) -> None:
        self.inventory.update()
        super().update()

    def check_items_at_current_position(self) -> list[str]:
        """Lines describing any chest or hidden items on the player's tile."""
        game_map = self._require_map()
        lines: list[str] = []
        tile = game_map.tile(self.position)
        if tile.is_closed_treasure_chest():
            lines.append("There is a closed treasure chest here! Press SPACE to open it.")
        elif tile.is_open_treasure_chest():
            lines.append("There is an empty opened treasure chest here.")

        store = self._item_store()
        entries = list(store.items_at(self.position)) if store is not None else []
        if entries:
            lines.append("Items found at this location:")
            for item, in_chest in entries:
                if not in_chest:
                    rarity = getattr(item, "rarity_name", "Common")
                    lines.append(f"- {item.name} ({rarity}) - Press F to pick up")
        return lines