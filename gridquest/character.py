"""The shared base for every character that walks the map."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum

from gridquest.tile import Position

logger = logging.getLogger(__name__)


class CharacterType(Enum):
    PLAYER = 0
    NPC_FRIENDLY = 1
    NPC_ENEMY = 2
    NPC_NEUTRAL = 3


_TYPE_LABELS = {
    CharacterType.PLAYER: "Player Character",
    CharacterType.NPC_FRIENDLY: "Friendly NPC",
    CharacterType.NPC_ENEMY: "Enemy NPC",
    CharacterType.NPC_NEUTRAL: "Neutral NPC",
}


class Character(ABC):
    """A map-dwelling character with a position, health and strength."""

    def __init__(
        self,
        start_position: Position,
        character_type: CharacterType = CharacterType.PLAYER,
    ) -> None:
        self.position = start_position
        self.character_type = character_type
        self.name = "Unnamed Character"
        self._health = 100
        self._max_health = 100
        self.base_strength = 10
        logger.debug(
            "Character created at position %s with type %d",
            start_position,
            character_type.value,
        )

    @abstractmethod
    def can_move_to(self, new_position: Position) -> bool:
        """Whether the character may step onto the given position."""

    @abstractmethod
    def move_to(self, new_position: Position) -> None:
        """Move the character to the given position if allowed."""

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self.set_health(value)

    @property
    def max_health(self) -> int:
        return self._max_health

    @property
    def strength(self) -> int:
        """Effective strength; subclasses add their bonuses."""
        return self.base_strength

    @strength.setter
    def strength(self, value: int) -> None:
        self.base_strength = value

    def _clamp_health(self) -> None:
        self._health = max(0, min(self._health, self._max_health))

    def set_health(self, health: int) -> None:
        self._health = health
        self._clamp_health()
        if self._health <= 0:
            logger.info("%s has been defeated!", self.name)

    def take_damage(self, damage: int) -> int:
        """Lose health; a negative amount heals instead. Returns the health lost."""
        if damage < 0:
            logger.warning("Negative damage value, treating as heal.")
            return -self.heal(-damage)
        old_health = self._health
        self._health -= damage
        self._clamp_health()
        actual = old_health - self._health
        logger.info(
            "%s takes %d damage! (%d/%d HP remaining)",
            self.name,
            actual,
            self._health,
            self._max_health,
        )
        if self._health <= 0:
            logger.info("%s has been defeated!", self.name)
        return actual

    def heal(self, amount: int) -> int:
        """Gain health; a negative amount damages instead. Returns the health gained."""
        if amount < 0:
            logger.warning("Negative heal value, treating as damage.")
            return -self.take_damage(-amount)
        old_health = self._health
        self._health += amount
        self._clamp_health()
        actual = self._health - old_health
        if actual > 0:
            logger.info(
                "%s heals for %d HP! (%d/%d HP)",
                self.name,
                actual,
                self._health,
                self._max_health,
            )
        else:
            logger.info("%s is already at full health!", self.name)
        return actual

    def is_alive(self) -> bool:
        return self._health > 0

    def is_player_character(self) -> bool:
        return self.character_type is CharacterType.PLAYER

    def is_npc(self) -> bool:
        return self.character_type is not CharacterType.PLAYER

    def status_report(self) -> str:
        """A multi-line description of the character's state."""
        health_line = f"Health: {self._health}/{self._max_health} HP"
        if not self.is_alive():
            health_line += " [DEFEATED]"
        lines = [
            f"=== {self.name} STATUS ===",
            f"Position: ({self.position.x}, {self.position.y})",
            f"Type: {_TYPE_LABELS[self.character_type]}",
            health_line,
            f"Base Strength: {self.base_strength}",
            f"Status: {'Alive' if self.is_alive() else 'Defeated'}",
            "=========================",
        ]
        return "\n".join(lines)

    def update(self) -> None:
        """Per-frame behaviour hook; the base character does nothing."""