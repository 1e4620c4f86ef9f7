"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Dict, Iterable, List, Sequence

from adventure.domain.maze import Maze, TileType
from adventure.services.game_engine import GameView

PLAYER_GLYPH = "@"
TILE_GLYPHS: Dict[TileType, str] = {
    TileType.WALL: "#",
    TileType.EMPTY: " ",
    TileType.MONSTER: "M",
    TileType.WEAPON: "W",
    TileType.POTION: "P",
    TileType.EXIT: "E",
}
LEGEND: Sequence[tuple[str, str]] = (
    (PLAYER_GLYPH, "You (Player)"),
    (TILE_GLYPHS[TileType.WALL], "Wall"),
    (TILE_GLYPHS[TileType.EMPTY], "Empty Space"),
    (TILE_GLYPHS[TileType.MONSTER], "Monster"),
    (TILE_GLYPHS[TileType.WEAPON], "Weapon"),
    (TILE_GLYPHS[TileType.POTION], "Potion (+30 HP)"),
    (TILE_GLYPHS[TileType.EXIT], "Exit"),
)


def debug_enabled() -> bool:
    """Return True only when ADVENTURE_DEBUG is explicitly set to '1'."""
    return os.getenv("ADVENTURE_DEBUG") == "1"


def clear_screen() -> None:
    if os.getenv("ADVENTURE_NO_CLEAR") == "1":
        return
    print("\033[2J\033[H", end="")


def format_maze(maze: Maze, player_position: tuple[int, int]) -> List[str]:
    """Return one string per maze row with the player drawn over its tile."""
    px, py = player_position
    lines: List[str] = []
    for y, row in enumerate(maze.iter_rows()):
        glyphs = [TILE_GLYPHS[tile] for tile in row]
        if y == py and 0 <= px < len(glyphs):
            glyphs[px] = PLAYER_GLYPH
        lines.append("".join(glyphs))
    return lines


def format_stats(view: GameView, *, show_debug: bool = False) -> str:
    line = (
        f"HP: {view.player_health}/{view.player_max_health} | "
        f"Attack: {view.player_attack} | Weapons: {view.weapon_count}"
    )
    if show_debug:
        x, y = view.player_position
        line += f" | Pos: ({x}, {y}) | State: {view.status.value}"
    return line


def format_monster_panel(view: GameView) -> List[str]:
    monster = view.monster
    if monster is None:
        return []
    return [
        f"=== BATTLE: {monster.name} ===",
        f"Monster HP: {monster.health}/{monster.max_health} | Attack: {monster.attack_power}",
    ]


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_legend() -> None:
    render_heading("Legend")
    for glyph, label in LEGEND:
        print(f"  {glyph} = {label}")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)
