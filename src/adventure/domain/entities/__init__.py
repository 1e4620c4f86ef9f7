"""Runtime entity exports."""

from .combatant import Combatant
from .items import POTION_HEAL_AMOUNT, Item, Potion, Weapon
from .monster import Monster
from .player import BASE_ATTACK, MAX_HEALTH, STARTING_HEALTH, Player

__all__ = [
    "BASE_ATTACK",
    "Combatant",
    "Item",
    "MAX_HEALTH",
    "Monster",
    "POTION_HEAL_AMOUNT",
    "Player",
    "Potion",
    "STARTING_HEALTH",
    "Weapon",
]
