"""Domain definition exports."""

from .monster_def import MonsterDef
from .weapon_def import WeaponDef

__all__ = [
    "MonsterDef",
    "WeaponDef",
]
