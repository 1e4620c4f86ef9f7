"""Item value types found on maze tiles."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

POTION_HEAL_AMOUNT = 30


@dataclass(frozen=True, slots=True)
class Weapon:
    """A weapon kept in the player's inventory once picked up."""

    name: str
    modifier: int

    @property
    def pickup_message(self) -> str:
        return f"You found a {self.name}! +{self.modifier} Attack Power"


@dataclass(frozen=True, slots=True)
class Potion:
    """A healing potion, consumed on pickup."""

    name: str = "Healing Potion"
    heal_amount: int = POTION_HEAL_AMOUNT

    @property
    def pickup_message(self) -> str:
        return f"You found a Health Pot! +{self.heal_amount} HP"


Item = Union[Weapon, Potion]
