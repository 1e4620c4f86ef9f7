"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Immutable weapon template."""

    id: str
    name: str
    modifier: int
