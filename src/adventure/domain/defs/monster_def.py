"""Monster definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MonsterDef:
    """Immutable monster template copied into a live Monster per encounter."""

    id: str
    name: str
    health: int
    attack: int
