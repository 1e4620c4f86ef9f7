import pytest

from adventure.domain.defs import MonsterDef, WeaponDef
from adventure.domain.entities import Weapon
from adventure.domain.maze import Maze, TileType
from adventure.services.errors import FactoryError
from adventure.services.game_engine import (
    GAME_OVER_MESSAGE,
    IN_COMBAT_MESSAGE,
    NO_BATTLE_MESSAGE,
    PLAYER_DEFEATED_MESSAGE,
    VICTORY_MESSAGE,
    WALL_MESSAGE,
    GameEngine,
    GameStatus,
)

_WEAK = MonsterDef(id="yuumi", name="Yuumi", health=10, attack=5)
_STURDY = MonsterDef(id="sett", name="Sett", health=25, attack=5)
_DEADLY = MonsterDef(id="mordekaiser", name="Mordekaiser", health=1000, attack=50)
_LONG_SWORD = WeaponDef(id="long_sword", name="Long Sword", modifier=3)


def _open_maze(rows: int = 7, cols: int = 7) -> Maze:
    """Maze with a solid border and an open interior."""
    maze = Maze(rows, cols)
    for y in range(1, rows - 1):
        for x in range(1, cols - 1):
            maze.set_tile(x, y, TileType.EMPTY)
    return maze


def _make_engine(
    maze: Maze | None = None,
    monster: MonsterDef = _WEAK,
    weapon: WeaponDef = _LONG_SWORD,
) -> GameEngine:
    return GameEngine(
        seed=123,
        maze=maze if maze is not None else _open_maze(),
        monster_templates=[monster],
        weapon_templates=[weapon],
    )


def test_fresh_engine_state() -> None:
    engine = GameEngine(seed=9)

    assert engine.status is GameStatus.EXPLORING
    assert not engine.is_game_over
    assert not engine.player_won
    assert engine.current_monster is None
    assert engine.player.position == (1, 1)
    assert engine.maze.rows == engine.maze.cols == 21


def test_seeded_engines_share_layout() -> None:
    assert GameEngine(15, seed=31).maze.snapshot() == GameEngine(15, seed=31).maze.snapshot()


def test_move_into_wall_is_rejected() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.WALL)
    engine = _make_engine(maze)

    assert engine.move_player(1, 0) == WALL_MESSAGE
    assert engine.move_player(0, -1) == WALL_MESSAGE
    assert engine.player.position == (1, 1)
    assert engine.status is GameStatus.EXPLORING


def test_move_out_of_bounds_is_rejected() -> None:
    engine = _make_engine()

    assert engine.move_player(-5, 0) == WALL_MESSAGE
    assert engine.player.position == (1, 1)


def test_move_onto_empty_tile_returns_no_message() -> None:
    engine = _make_engine()

    assert engine.move_player(0, 1) == ""
    assert engine.player.position == (1, 2)


def test_weapon_pickup_adds_weapon_and_clears_tile() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.WEAPON)
    engine = _make_engine(maze)

    message = engine.move_player(1, 0)

    assert message == "You found a Long Sword! +3 Attack Power"
    assert engine.player.weapon_count == 1
    assert engine.player.attack_power == 13
    assert maze.get_tile(2, 1) is TileType.EMPTY


def test_weaker_weapon_does_not_lower_attack_power() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.WEAPON)
    engine = _make_engine(maze)
    engine.player.add_weapon(Weapon("Infinity Edge", 8))

    engine.move_player(1, 0)

    assert engine.player.weapon_count == 2
    assert engine.player.attack_power == 18


def test_potion_heals_and_clears_tile() -> None:
    maze = _open_maze()
    maze.set_tile(1, 2, TileType.POTION)
    engine = _make_engine(maze)
    engine.player.health = 130

    message = engine.move_player(0, 1)

    assert message == "You found a Health Pot! +30 HP"
    assert engine.player.health == 150
    assert maze.get_tile(1, 2) is TileType.EMPTY


def test_monster_tile_starts_battle_without_clearing_tile() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.MONSTER)
    engine = _make_engine(maze, monster=_STURDY)

    message = engine.move_player(1, 0)

    assert message == "A wild Sett appears!"
    assert engine.status is GameStatus.IN_COMBAT
    monster = engine.current_monster
    assert monster is not None
    assert monster.name == "Sett"
    assert monster.health == _STURDY.health
    assert maze.get_tile(2, 1) is TileType.MONSTER


def test_each_encounter_spawns_a_fresh_monster() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.MONSTER)
    maze.set_tile(3, 1, TileType.MONSTER)
    engine = _make_engine(maze)

    engine.move_player(1, 0)
    first = engine.current_monster
    engine.execute_combat_turn()
    engine.move_player(1, 0)
    second = engine.current_monster

    assert first is not None and second is not None
    assert first is not second
    assert first.health == 0
    assert second.health == _WEAK.health


def test_cannot_walk_away_mid_battle() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.MONSTER)
    engine = _make_engine(maze, monster=_STURDY)
    engine.move_player(1, 0)

    assert engine.move_player(1, 0) == IN_COMBAT_MESSAGE
    assert engine.player.position == (2, 1)


def test_combat_turn_without_monster() -> None:
    engine = _make_engine()

    assert engine.execute_combat_turn() == [NO_BATTLE_MESSAGE]


def test_one_hit_kill_skips_retaliation() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.MONSTER)
    engine = _make_engine(maze, monster=_WEAK)
    engine.move_player(1, 0)

    messages = engine.execute_combat_turn()

    assert messages == [
        "Player attacks Yuumi for 10 damage!",
        "Yuumi HP: 0",
        "Yuumi is defeated!",
    ]
    assert not any("attacks Player" in line for line in messages)
    assert engine.player.health == 120
    assert engine.current_monster is None
    assert engine.status is GameStatus.EXPLORING
    assert maze.get_tile(2, 1) is TileType.EMPTY


def test_multi_turn_battle_trades_blows() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.MONSTER)
    engine = _make_engine(maze, monster=_STURDY)
    engine.move_player(1, 0)

    first = engine.execute_combat_turn()
    assert first == [
        "Player attacks Sett for 10 damage!",
        "Sett HP: 15",
        "Sett attacks Player for 5 damage!",
        "Player HP: 115",
    ]
    assert engine.in_combat

    engine.execute_combat_turn()
    last = engine.execute_combat_turn()

    assert last[-1] == "Sett is defeated!"
    assert engine.player.health == 110
    assert engine.status is GameStatus.EXPLORING
    assert maze.get_tile(2, 1) is TileType.EMPTY


def test_player_death_ends_game_as_loss() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.MONSTER)
    engine = _make_engine(maze, monster=_DEADLY)
    engine.move_player(1, 0)

    turns = 0
    messages: list[str] = []
    while not engine.is_game_over:
        messages = engine.execute_combat_turn()
        turns += 1

    assert turns == 3
    assert messages[-1] == PLAYER_DEFEATED_MESSAGE
    assert engine.player.health == 0
    assert engine.status is GameStatus.GAME_OVER
    assert engine.player_won is False
    assert engine.execute_combat_turn() == [NO_BATTLE_MESSAGE]
    assert engine.move_player(0, 1) == GAME_OVER_MESSAGE


def test_reaching_exit_wins_and_freezes_state() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.EXIT)
    engine = _make_engine(maze)

    assert engine.move_player(1, 0) == VICTORY_MESSAGE
    assert engine.is_game_over
    assert engine.player_won is True

    assert engine.move_player(0, 1) == GAME_OVER_MESSAGE
    assert engine.player.position == (2, 1)


def test_view_reports_player_and_monster() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.MONSTER)
    engine = _make_engine(maze, monster=_STURDY)

    assert engine.get_view().monster is None
    engine.move_player(1, 0)
    view = engine.get_view()

    assert view.status is GameStatus.IN_COMBAT
    assert view.outcome is None
    assert view.player_position == (2, 1)
    assert view.player_health == 120
    assert view.player_attack == 10
    assert view.monster is not None
    assert view.monster.name == "Sett"
    assert view.monster.max_health == 25


def test_view_reports_outcome() -> None:
    maze = _open_maze()
    maze.set_tile(2, 1, TileType.EXIT)
    engine = _make_engine(maze)
    engine.move_player(1, 0)

    assert engine.get_view().outcome == "won"


def test_new_game_resets_session() -> None:
    engine = GameEngine(11, seed=5)
    engine.player.health = 1
    engine.player.add_weapon(Weapon("Cull", 1))

    engine.new_game()

    assert engine.player.health == 120
    assert engine.player.weapon_count == 0
    assert engine.player.position == (1, 1)
    assert engine.maze.rows == 11
    assert engine.status is GameStatus.EXPLORING


def test_empty_template_lists_rejected() -> None:
    with pytest.raises(FactoryError):
        GameEngine(maze=_open_maze(), monster_templates=[], weapon_templates=[_LONG_SWORD])
    with pytest.raises(FactoryError):
        GameEngine(maze=_open_maze(), monster_templates=[_WEAK], weapon_templates=[])
