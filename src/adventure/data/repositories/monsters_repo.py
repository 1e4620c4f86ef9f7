"""Monsters repository."""
from __future__ import annotations

from typing import Dict

from adventure.data.repositories.base import RepositoryBase
from adventure.domain.defs import MonsterDef


class MonstersRepository(RepositoryBase[MonsterDef]):
    """Loads and validates monster templates."""

    def __init__(self, base_path=None) -> None:
        super().__init__("monsters.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MonsterDef]:
        monsters: Dict[str, MonsterDef] = {}
        for raw_id, payload in raw.items():
            monster_data = self._require_mapping(payload, f"monster '{raw_id}'")
            self._assert_exact_fields(monster_data, {"name", "health", "attack"}, f"monster '{raw_id}'")
            monsters[raw_id] = MonsterDef(
                id=raw_id,
                name=self._require_str(monster_data["name"], f"monster '{raw_id}' name"),
                health=self._require_int(monster_data["health"], f"monster '{raw_id}' health", minimum=1),
                attack=self._require_int(monster_data["attack"], f"monster '{raw_id}' attack", minimum=0),
            )
        return monsters
