"""Game engine orchestrating the maze, the player and monster encounters."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from adventure.core.rng import RNG
from adventure.core.types import Outcome
from adventure.data.repositories import MonstersRepository, WeaponsRepository
from adventure.domain.defs import MonsterDef, WeaponDef
from adventure.domain.entities import Monster, Player, Potion
from adventure.domain.maze import Maze, TileType
from adventure.domain.maze_generator import generate_maze
from adventure.services.errors import FactoryError
from adventure.services.factories import create_player, create_random_monster, create_random_weapon

logger = logging.getLogger(__name__)

DEFAULT_MAZE_SIZE = 21

GAME_OVER_MESSAGE = "Game is over!"
WALL_MESSAGE = "Thats a wall dummy, i think. Assuming you just tried to walk into a wall."
IN_COMBAT_MESSAGE = "You must finish the battle first!"
VICTORY_MESSAGE = "The rift will call to you again, but for now you are free."
NO_BATTLE_MESSAGE = "No active battle!"
PLAYER_DEFEATED_MESSAGE = "Player has been defeated!"


class GameStatus(Enum):
    EXPLORING = "exploring"
    IN_COMBAT = "in_combat"
    GAME_OVER = "game_over"


@dataclass(slots=True)
class MonsterView:
    """Presentation view of the monster currently being fought."""

    name: str
    health: int
    max_health: int
    attack_power: int


@dataclass(slots=True)
class GameView:
    """Snapshot of everything the presentation layer renders besides the grid."""

    status: GameStatus
    outcome: Outcome | None
    player_position: Tuple[int, int]
    player_health: int
    player_max_health: int
    player_attack: int
    weapon_count: int
    monster: MonsterView | None


class GameEngine:
    """Owns one game session and drives its state machine.

    ``move_player`` and ``execute_combat_turn`` are the only mutating calls.
    Both always return human-readable text; blocked actions are reported in
    the returned message rather than raised.
    """

    def __init__(
        self,
        maze_size: int = DEFAULT_MAZE_SIZE,
        *,
        seed: int | None = None,
        maze: Maze | None = None,
        monster_templates: Sequence[MonsterDef] | None = None,
        weapon_templates: Sequence[WeaponDef] | None = None,
    ) -> None:
        self._rng = RNG(seed)
        self._maze_size = maze_size
        self._monster_templates = list(
            monster_templates if monster_templates is not None else MonstersRepository().all()
        )
        self._weapon_templates = list(
            weapon_templates if weapon_templates is not None else WeaponsRepository().all()
        )
        if not self._monster_templates:
            raise FactoryError("At least one monster template is required.")
        if not self._weapon_templates:
            raise FactoryError("At least one weapon template is required.")
        self._start(maze)

    def new_game(self) -> None:
        """Discard the current session and start over on a freshly generated maze."""
        self._start(None)

    def _start(self, maze: Maze | None) -> None:
        if maze is None:
            maze = generate_maze(self._maze_size, self._maze_size, rng=self._rng)
        self._maze = maze
        self._player: Player = create_player()
        self._current_monster: Monster | None = None
        self._encounter_position: Tuple[int, int] | None = None
        self._status = GameStatus.EXPLORING
        self._player_won = False
        logger.info("New game on a %dx%d maze (seed=%s)", maze.rows, maze.cols, self._rng.seed)

    # -----------------------
    # Read access
    # -----------------------
    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def player(self) -> Player:
        return self._player

    @property
    def current_monster(self) -> Monster | None:
        return self._current_monster

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_game_over(self) -> bool:
        return self._status is GameStatus.GAME_OVER

    @property
    def player_won(self) -> bool:
        return self._player_won

    @property
    def in_combat(self) -> bool:
        return self._status is GameStatus.IN_COMBAT

    @property
    def seed(self) -> int | None:
        return self._rng.seed

    def get_view(self) -> GameView:
        """Return structured information for rendering."""
        monster = self._current_monster
        outcome: Outcome | None = None
        if self.is_game_over:
            outcome = "won" if self._player_won else "lost"
        return GameView(
            status=self._status,
            outcome=outcome,
            player_position=self._player.position,
            player_health=self._player.health,
            player_max_health=self._player.max_health,
            player_attack=self._player.attack_power,
            weapon_count=self._player.weapon_count,
            monster=(
                MonsterView(
                    name=monster.name,
                    health=monster.health,
                    max_health=monster.max_health,
                    attack_power=monster.attack_power,
                )
                if monster is not None
                else None
            ),
        )

    # -----------------------
    # Exploration
    # -----------------------
    def move_player(self, dx: int, dy: int) -> str:
        """Step the player by (dx, dy) and resolve whatever is on the new tile."""
        if self.is_game_over:
            return GAME_OVER_MESSAGE
        if self.in_combat:
            return IN_COMBAT_MESSAGE

        new_x = self._player.x + dx
        new_y = self._player.y + dy
        if not self._maze.is_walkable(new_x, new_y):
            return WALL_MESSAGE

        self._player.move_to(new_x, new_y)
        tile = self._maze.get_tile(new_x, new_y)

        if tile is TileType.EXIT:
            self._finish(won=True)
            return VICTORY_MESSAGE

        if tile is TileType.MONSTER:
            self._current_monster = create_random_monster(self._monster_templates, self._rng)
            self._encounter_position = (new_x, new_y)
            self._status = GameStatus.IN_COMBAT
            logger.debug("Encounter with %s at (%d, %d)", self._current_monster.name, new_x, new_y)
            return f"A wild {self._current_monster.name} appears!"

        if tile is TileType.WEAPON:
            weapon = create_random_weapon(self._weapon_templates, self._rng)
            self._player.add_weapon(weapon)
            self._maze.set_tile(new_x, new_y, TileType.EMPTY)
            return weapon.pickup_message

        if tile is TileType.POTION:
            potion = Potion()
            self._player.use_potion(potion)
            self._maze.set_tile(new_x, new_y, TileType.EMPTY)
            return potion.pickup_message

        return ""

    # -----------------------
    # Combat
    # -----------------------
    def execute_combat_turn(self) -> List[str]:
        """Resolve one exchange: the player strikes first, the monster answers if it survives."""
        monster = self._current_monster
        if monster is None or not monster.is_alive:
            return [NO_BATTLE_MESSAGE]

        player = self._player
        messages: List[str] = []

        player.attack(monster)
        messages.append(f"Player attacks {monster.name} for {player.attack_power} damage!")
        messages.append(f"{monster.name} HP: {monster.health}")

        if not monster.is_alive:
            messages.append(f"{monster.name} is defeated!")
            if self._encounter_position is not None:
                self._maze.set_tile(*self._encounter_position, TileType.EMPTY)
            self._current_monster = None
            self._encounter_position = None
            self._status = GameStatus.EXPLORING
            logger.debug("%s defeated", monster.name)
            return messages

        monster.attack(player)
        messages.append(f"{monster.name} attacks Player for {monster.attack_power} damage!")
        messages.append(f"Player HP: {player.health}")

        if not player.is_alive:
            messages.append(PLAYER_DEFEATED_MESSAGE)
            self._current_monster = None
            self._encounter_position = None
            self._finish(won=False)

        return messages

    def _finish(self, *, won: bool) -> None:
        self._status = GameStatus.GAME_OVER
        self._player_won = won
        logger.info("Game over: player %s", "won" if won else "lost")
