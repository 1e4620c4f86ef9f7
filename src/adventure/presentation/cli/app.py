"""Console-driven UI loops for Legends of the Rift."""
from __future__ import annotations

import logging
import secrets
from pathlib import Path
from typing import Dict, List, Literal

from adventure.core.types import Direction
from adventure.services.game_engine import GameEngine

from . import config as cli_config
from .render import (
    clear_screen,
    debug_enabled,
    format_maze,
    format_monster_panel,
    format_stats,
    render_heading,
    render_legend,
    render_lines,
)

MenuAction = Literal["new_game", "options", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1

DIRECTIONS: Dict[str, Direction] = {
    "w": (0, -1),
    "up": (0, -1),
    "s": (0, 1),
    "down": (0, 1),
    "a": (-1, 0),
    "left": (-1, 0),
    "d": (1, 0),
    "right": (1, 0),
}
QUIT_KEYS = frozenset({"q", "quit", "exit"})


def main(config_path: Path | None = None) -> None:
    """Start the interactive CLI session."""
    _configure_logging()
    settings = cli_config.load_config(config_path)
    print("=== Legends of the Rift ===")
    try:
        running = True
        while running:
            action = _main_menu_loop()
            if action == "quit":
                running = False
            elif action == "options":
                settings = _options_menu(settings, config_path)
            else:
                engine = _start_new_game(settings["maze_size"])
                if _run_game_loop(engine):
                    _display_end_screen(engine)
    except (KeyboardInterrupt, EOFError):
        print()
    print("Goodbye!")


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _main_menu_loop() -> MenuAction:
    while True:
        print()
        print("Main Menu")
        print("1. New Game")
        print("2. Options")
        print("3. Quit")
        choice = input("Select an option: ").strip()
        if choice == "1":
            return "new_game"
        if choice == "2":
            return "options"
        if choice == "3":
            return "quit"
        print("Invalid selection. Please enter 1, 2 or 3.")


def _options_menu(settings: Dict[str, int], config_path: Path | None) -> Dict[str, int]:
    render_heading("Options")
    print(f"Current maze size: {settings['maze_size']}")
    raw = input(
        f"New maze size ({cli_config.MIN_MAZE_SIZE}-{cli_config.MAX_MAZE_SIZE}, blank to keep): "
    ).strip()
    if not raw:
        return settings
    try:
        requested = int(raw)
    except ValueError:
        print("Invalid size. Keeping the current setting.")
        return settings
    updated = {"maze_size": cli_config.normalize_maze_size(requested)}
    cli_config.save_config(updated, config_path)
    print(f"Maze size set to {updated['maze_size']}.")
    return updated


def _start_new_game(maze_size: int) -> GameEngine:
    seed = _prompt_seed()
    _display_intro()
    engine = GameEngine(maze_size, seed=seed)
    print(f"Game started with seed: {seed}")
    return engine


def _prompt_seed() -> int:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return secrets.randbelow(_MAX_RANDOM_SEED)
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _display_intro() -> None:
    clear_screen()
    print("Welcome to Legends of the Rift")
    print()
    print("You have spawned in on the summoners rift")
    print("Your goal: Find the enemy nexus and make it out alive!")
    render_heading("Controls")
    print("  Type W, A, S or D (or up/down/left/right) and press Enter to move")
    print("  Type Q to abandon the run")
    render_legend()
    render_heading("Stats")
    print("  Starting HP: 120 (Max: 150)")
    print("  Base Damage: 10")
    print()
    input("Press Enter to begin...")


def parse_direction(raw: str) -> Direction | None:
    """Translate a typed command into a (dx, dy) step, or None if unrecognised."""
    return DIRECTIONS.get(raw.strip().lower())


def _run_game_loop(engine: GameEngine) -> bool:
    """Play until the game ends. Returns False if the player quit early."""
    message = ""
    while not engine.is_game_over:
        _draw_screen(engine, message)
        raw = input("Move: ").strip().lower()
        if raw in QUIT_KEYS:
            return False
        direction = parse_direction(raw)
        if direction is None:
            message = "Use W, A, S or D to move."
            continue
        message = engine.move_player(*direction)
        if engine.in_combat:
            _run_battle(engine, message)
            message = ""
    return True


def _draw_screen(engine: GameEngine, message: str = "") -> None:
    clear_screen()
    view = engine.get_view()
    render_lines(format_maze(engine.maze, view.player_position))
    print()
    print(format_stats(view, show_debug=debug_enabled()))
    if debug_enabled():
        print(f"Seed: {engine.seed}")
    if message:
        print()
        print(message)


def _run_battle(engine: GameEngine, encounter_message: str) -> None:
    """Loop combat turns until the monster or the player falls."""
    clear_screen()
    render_lines(format_maze(engine.maze, engine.player.position))
    print()
    print(encounter_message)
    render_lines(format_monster_panel(engine.get_view()))
    print()
    input("Press Enter to fight...")

    turn = 1
    while engine.in_combat:
        clear_screen()
        render_lines(format_maze(engine.maze, engine.player.position))
        render_heading(f"TURN {turn}")
        combat_log: List[str] = engine.execute_combat_turn()
        render_lines(combat_log)
        if engine.in_combat:
            print()
            input("Press Enter for next turn...")
            turn += 1

    print()
    if engine.player.is_alive:
        print("Victory! You defeated the monster!")
    else:
        print("You have been killed :(")
    input("Press Enter to continue...")


def _display_end_screen(engine: GameEngine) -> None:
    clear_screen()
    view = engine.get_view()
    if view.outcome == "won":
        print("OKAY LETS GOOO W WINNN")
        print()
        print("You escaped the rift!")
        print("Congratulations you poor soul!")
    else:
        print("WOMP WOMP SKILL ISSUE")
        print()
        print("You have been defeated, back to the fountain")
        print("Better luck next time!")
    render_heading("Final Stats")
    print(f"  HP Remaining: {view.player_health}")
    print(f"  Final Attack Power: {view.player_attack}")
    print(f"  Weapons Collected: {view.weapon_count}")
    print()
    input("Press Enter to return to the main menu...")
