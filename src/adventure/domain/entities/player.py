"""Player runtime model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .combatant import Combatant
from .items import Potion, Weapon

MAX_HEALTH = 150
STARTING_HEALTH = 120
BASE_ATTACK = 10


@dataclass(slots=True)
class Player:
    """The hero: position in the maze, health and collected weapons."""

    x: int
    y: int
    health: int = STARTING_HEALTH
    weapons: List[Weapon] = field(default_factory=list)

    @property
    def max_health(self) -> int:
        return MAX_HEALTH

    @property
    def attack_power(self) -> int:
        """Base attack plus the best modifier in the inventory."""
        best = self.best_weapon
        return BASE_ATTACK + (best.modifier if best else 0)

    @property
    def best_weapon(self) -> Weapon | None:
        if not self.weapons:
            return None
        return max(self.weapons, key=lambda weapon: weapon.modifier)

    @property
    def weapon_count(self) -> int:
        return len(self.weapons)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)

    def attack(self, target: Combatant) -> None:
        target.take_damage(self.attack_power)

    def add_weapon(self, weapon: Weapon) -> None:
        self.weapons.append(weapon)

    def use_potion(self, potion: Potion) -> None:
        self.health = min(MAX_HEALTH, self.health + potion.heal_amount)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
