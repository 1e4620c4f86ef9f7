"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

Direction = Tuple[int, int]
Outcome = Literal["won", "lost"]

__all__ = ["Direction", "Outcome"]
