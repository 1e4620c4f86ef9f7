"""Factory for creating weapon items from templates."""
from __future__ import annotations

from typing import Sequence

from adventure.core.rng import RNG
from adventure.domain.defs import WeaponDef
from adventure.domain.entities import Weapon
from adventure.services.errors import FactoryError


def create_weapon(template: WeaponDef) -> Weapon:
    return Weapon(name=template.name, modifier=template.modifier)


def create_random_weapon(templates: Sequence[WeaponDef], rng: RNG) -> Weapon:
    """Pick a template uniformly at random and instantiate it."""
    if not templates:
        raise FactoryError("No weapon templates available.")
    return create_weapon(rng.choice(templates))
