"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict

DEFAULT_MAZE_SIZE = 21
MIN_MAZE_SIZE = 7
MAX_MAZE_SIZE = 61


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "LegendsOfTheRift"
        return Path.home() / "LegendsOfTheRift"
    return Path.home() / ".config" / "legends_of_the_rift"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def normalize_maze_size(value: object) -> int:
    """Coerce a stored value into a supported odd maze size.

    Even sizes leave a double wall on the far edges, so they are bumped to the
    next odd number.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        return DEFAULT_MAZE_SIZE
    size = max(MIN_MAZE_SIZE, min(MAX_MAZE_SIZE, value))
    if size % 2 == 0:
        size = size + 1 if size < MAX_MAZE_SIZE else size - 1
    return size


def load_config(path: Path | None = None) -> Dict[str, int]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {"maze_size": DEFAULT_MAZE_SIZE}
    if not isinstance(raw, dict):
        return {"maze_size": DEFAULT_MAZE_SIZE}
    return {"maze_size": normalize_maze_size(raw.get("maze_size"))}


def save_config(config: Dict[str, int], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"maze_size": normalize_maze_size(config.get("maze_size"))}
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
