"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from adventure.data.repositories.base import RepositoryBase
from adventure.domain.defs import WeaponDef


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads and validates weapon templates."""

    def __init__(self, base_path=None) -> None:
        super().__init__("weapons.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for raw_id, payload in raw.items():
            weapon_data = self._require_mapping(payload, f"weapon '{raw_id}'")
            self._assert_exact_fields(weapon_data, {"name", "modifier"}, f"weapon '{raw_id}'")
            weapons[raw_id] = WeaponDef(
                id=raw_id,
                name=self._require_str(weapon_data["name"], f"weapon '{raw_id}' name"),
                modifier=self._require_int(weapon_data["modifier"], f"weapon '{raw_id}' modifier", minimum=0),
            )
        return weapons
