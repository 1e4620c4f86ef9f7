"""Data layer exports."""

from .errors import DataError, DataLoadError, DataValidationError
from .repositories import MonstersRepository, WeaponsRepository

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "MonstersRepository",
    "WeaponsRepository",
]
