"""Repository exports."""

from .monsters_repo import MonstersRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "MonstersRepository",
    "WeaponsRepository",
]
