import json
from pathlib import Path

import pytest

from adventure.data import paths
from adventure.data.errors import DataLoadError, DataValidationError
from adventure.data.repositories import MonstersRepository, WeaponsRepository


def test_default_monster_catalogue_loads() -> None:
    repo = MonstersRepository()
    monsters = repo.all()

    assert len(monsters) == 12
    mordekaiser = repo.get("mordekaiser")
    assert mordekaiser.name == "Mordekaiser"
    assert mordekaiser.health == 50
    assert mordekaiser.attack == 15


def test_default_weapon_catalogue_loads() -> None:
    repo = WeaponsRepository()
    weapons = repo.all()

    assert len(weapons) == 15
    assert repo.get("trinity_force").modifier == 33
    assert [weapon.id for weapon in weapons] == sorted(weapon.id for weapon in weapons)


def test_default_definitions_path_exists() -> None:
    definitions_path = paths.get_definitions_path()

    assert definitions_path.name == "definitions"
    assert (definitions_path / "monsters.json").exists()


def test_base_path_override(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        MonstersRepository(base_path=tmp_path).all()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "weapons.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(DataLoadError):
        WeaponsRepository(base_path=tmp_path).all()


def test_top_level_list_rejected(tmp_path: Path) -> None:
    _write_json(tmp_path / "monsters.json", [{"name": "Elise"}])

    with pytest.raises(DataValidationError):
        MonstersRepository(base_path=tmp_path).all()


def test_missing_field_rejected(tmp_path: Path) -> None:
    _write_json(tmp_path / "monsters.json", {"elise": {"name": "Elise", "health": 35}})

    with pytest.raises(DataValidationError):
        MonstersRepository(base_path=tmp_path).all()


def test_unknown_field_rejected(tmp_path: Path) -> None:
    _write_json(tmp_path / "weapons.json", {"cull": {"name": "Cull", "modifier": 1, "value": 450}})

    with pytest.raises(DataValidationError):
        WeaponsRepository(base_path=tmp_path).all()


@pytest.mark.parametrize("health", ["35", True, 0, -3])
def test_bad_monster_health_rejected(tmp_path: Path, health: object) -> None:
    _write_json(tmp_path / "monsters.json", {"elise": {"name": "Elise", "health": health, "attack": 8}})

    with pytest.raises(DataValidationError):
        MonstersRepository(base_path=tmp_path).all()


def test_unknown_id_raises_key_error(tmp_path: Path) -> None:
    _write_json(tmp_path / "weapons.json", {"cull": {"name": "Cull", "modifier": 1}})
    repo = WeaponsRepository(base_path=tmp_path)

    with pytest.raises(KeyError):
        repo.get("excalibur")


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")
