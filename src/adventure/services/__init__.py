"""Service layer exports."""

from .errors import FactoryError
from .game_engine import GameEngine, GameStatus, GameView, MonsterView

__all__ = [
    "FactoryError",
    "GameEngine",
    "GameStatus",
    "GameView",
    "MonsterView",
]
