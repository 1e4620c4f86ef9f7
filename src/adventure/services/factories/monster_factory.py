"""Factory for creating monster instances from templates."""
from __future__ import annotations

from typing import Sequence

from adventure.core.rng import RNG
from adventure.domain.defs import MonsterDef
from adventure.domain.entities import Monster
from adventure.services.errors import FactoryError


def create_monster(template: MonsterDef) -> Monster:
    """Copy a template into a fresh, independently damageable monster."""
    return Monster(
        name=template.name,
        health=template.health,
        attack_power=template.attack,
        max_health=template.health,
        source_id=template.id,
    )


def create_random_monster(templates: Sequence[MonsterDef], rng: RNG) -> Monster:
    """Pick a template uniformly at random and instantiate it."""
    if not templates:
        raise FactoryError("No monster templates available.")
    return create_monster(rng.choice(templates))
