"""Domain definition exports."""

from .advancement_def import AdvancementDef
from .class_def import ClassDef
from .tier_def import TierDef

__all__ = [
    "AdvancementDef",
    "ClassDef",
    "TierDef",
]
