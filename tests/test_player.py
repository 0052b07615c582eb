from dataclasses import dataclass
from typing import Optional

import pytest

from gridquest.pathfinding import GridMap
from gridquest.player import EquipmentSlotType, PlayerChar
from gridquest.tile import Position


@dataclass
class Item:
    name: str
    weight: float
    strength_bonus: int = 0
    slot: Optional[EquipmentSlotType] = None
    rarity_name: str = "Common"


class ItemStore:
    def __init__(self):
        self.entries = []

    def items_at(self, pos):
        return [(item, chest) for p, item, chest in self.entries if p == pos]

    def take_item_at(self, pos, in_chest):
        for entry in self.entries:
            if entry[0] == pos and entry[2] == in_chest:
                self.entries.remove(entry)
                return entry[1]
        return None

    def place_item(self, pos, item, in_chest):
        self.entries.append((pos, item, in_chest))


def make_player(lines, store=None, strength=10):
    game_map = GridMap.from_text(lines)
    if store is not None:
        game_map.items = store
    player = PlayerChar(game_map.start_position, strength)
    player.set_map(game_map)
    return player, game_map


def test_moves_onto_walkable_tile():
    player, _ = make_player(["s.e"])
    assert player.try_move_right() is True
    assert player.position == Position(1, 0)


def test_blocked_and_edge_moves_fail():
    player, _ = make_player(["s#e"])
    assert player.try_move_right() is False
    assert player.try_move_up() is False
    assert player.try_move_left() is False
    assert player.position == Position(0, 0)


def test_move_down_and_back_up():
    player, _ = make_player(["s", ".", "e"])
    assert player.try_move_down() is True
    assert player.try_move_up() is True
    assert player.position == Position(0, 0)


def test_no_map_raises():
    player = PlayerChar(Position(0, 0))
    with pytest.raises(RuntimeError):
        player.can_move_to(Position(1, 0))


def test_carry_weight_follows_strength():
    player, _ = make_player(["s.e"], strength=7)
    assert player.max_carry_weight() == player.strength * 2.0
    assert player.current_weight() == 0.0
    assert player.is_overweight() is False


def test_overweight_blocks_movement():
    player, _ = make_player(["s.e"])
    player.inventory.add_item(Item("Anvil", 1000.0))
    assert player.is_overweight() is True
    assert player.try_move_right() is False


def test_equip_adds_strength_and_unequip_removes_it():
    player, _ = make_player(["s.e"])
    player.inventory.add_item(Item("Iron Sword", 3.0, 5, EquipmentSlotType.WEAPON))
    assert player.equip_selected_item(EquipmentSlotType.WEAPON) is True
    assert player.strength == 15
    assert player.total_strength == player.strength
    assert player.unequip_item(EquipmentSlotType.WEAPON) is True
    assert player.strength == 10
    assert player.inventory.items()[0].name == "Iron Sword"


def test_equip_without_compatible_item_fails():
    player, _ = make_player(["s.e"])
    player.inventory.add_item(Item("Lucky Paw", 0.5, 2, EquipmentSlotType.ACCESSORY))
    assert player.equip_selected_item(EquipmentSlotType.ARMOR) is False
    assert player.unequip_item(EquipmentSlotType.ARMOR) is False


def test_pick_up_hidden_item():
    store = ItemStore()
    store.place_item(Position(1, 0), Item("Kitty Coin", 0.1), False)
    player, _ = make_player(["s.e"], store)
    player.try_move_right()
    assert player.pick_up_item_at(Position(1, 0)) is True
    assert [i.name for i in player.inventory.items()] == ["Kitty Coin"]
    assert store.entries == []


def test_pick_up_too_heavy_item_leaves_it():
    store = ItemStore()
    boulder = Item("Boulder", 500.0)
    store.place_item(Position(0, 0), boulder, False)
    player, _ = make_player(["s.e"], store)
    assert player.pick_up_item_at(Position(0, 0)) is False
    assert store.items_at(Position(0, 0)) == [(boulder, False)]
    assert player.inventory.items() == []


def test_pick_up_elsewhere_fails():
    store = ItemStore()
    store.place_item(Position(1, 0), Item("Kitty Coin", 0.1), False)
    player, _ = make_player(["s.e"], store)
    assert player.pick_up_item_at(Position(1, 0)) is False
    assert len(store.entries) == 1


def test_nothing_to_pick_up():
    player, _ = make_player(["s.e"], ItemStore())
    assert player.pick_up_item_at(Position(0, 0)) is False


def test_loot_treasure_chest_opens_it():
    store = ItemStore()
    store.place_item(Position(1, 0), Item("Blue Gemstone", 0.2), True)
    player, game_map = make_player(["ste"], store)
    assert player.try_move_right() is True
    assert game_map.tile(Position(1, 0)).is_closed_treasure_chest()
    assert player.pick_up_item_at(Position(1, 0)) is True
    assert game_map.tile(Position(1, 0)).is_open_treasure_chest()
    assert player.inventory.items()[0].name == "Blue Gemstone"


def test_check_items_reports_chest_and_hidden_items():
    store = ItemStore()
    store.place_item(Position(1, 0), Item("Health Potion", 0.3, rarity_name="Rare"), False)
    player, _ = make_player(["ste"], store)
    player.try_move_right()
    lines = player.check_items_at_current_position()
    assert lines[0] == "There is a closed treasure chest here! Press SPACE to open it."
    assert "- Health Potion (Rare) - Press F to pick up" in lines


def test_drop_selected_item():
    player, _ = make_player(["s.e"])
    assert player.drop_selected_item() is False
    player.inventory.add_item(Item("Explosive Bomb", 1.0))
    assert player.drop_selected_item() is True


def test_status_report_contains_player_info():
    player, _ = make_player(["s.e"])
    report = player.status_report()
    assert "=== Player STATUS ===" in report
    assert "=== PLAYER-SPECIFIC INFO ===" in report
    assert "Type: Player Character" in report
    assert player.is_player_character() is True


def test_update_keeps_state():
    player, _ = make_player(["s.e"])
    player.update()
    assert player.position == Position(0, 0)
    assert player.health == 100