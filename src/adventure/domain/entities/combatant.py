"""Combat contract shared by the player and monsters."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Combatant(Protocol):
    """Anything that can trade blows in a battle."""

    health: int

    @property
    def attack_power(self) -> int: ...

    @property
    def is_alive(self) -> bool: ...

    def take_damage(self, amount: int) -> None: ...

    def attack(self, target: "Combatant") -> None: ...
