"""Repository exports."""

from .advancements_repo import AdvancementsRepository
from .classes_repo import ClassesRepository
from .tiers_repo import TiersRepository

__all__ = [
    "AdvancementsRepository",
    "ClassesRepository",
    "TiersRepository",
]
