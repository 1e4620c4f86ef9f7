"""Monster runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from .combatant import Combatant


@dataclass(slots=True)
class Monster:
    """Represents a spawned monster for a single encounter."""

    name: str
    health: int
    attack_power: int
    max_health: int = 0
    source_id: str | None = None  # originating template id

    def __post_init__(self) -> None:
        if self.max_health <= 0:
            self.max_health = self.health

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        self.health = max(0, self.health - amount)

    def attack(self, target: Combatant) -> None:
        target.take_damage(self.attack_power)
