"""Factory helpers for runtime entities."""

from .monster_factory import create_monster, create_random_monster
from .player_factory import create_player
from .weapon_factory import create_random_weapon, create_weapon

__all__ = [
    "create_monster",
    "create_player",
    "create_random_monster",
    "create_random_weapon",
    "create_weapon",
]
