"""Factory for creating the player entity."""
from __future__ import annotations

from adventure.domain.entities import Player
from adventure.domain.maze_generator import START


def create_player(start: tuple[int, int] = START) -> Player:
    """Instantiate a player with starting health and an empty inventory."""
    x, y = start
    return Player(x=x, y=y)
