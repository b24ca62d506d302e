"""Immutable bundle of the rule tables used by the level-up engine."""
from __future__ import annotations

from dataclasses import dataclass

from dhsheet.domain.defs import AdvancementDef, ClassDef, TierDef


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Tier bands, advancement catalog and class table.

    Instances are built once by the data layer and passed to the rule
    functions; nothing in the engine mutates them.
    """

    tiers: tuple[TierDef, ...]
    advancements: tuple[AdvancementDef, ...]
    classes: tuple[ClassDef, ...]

    @property
    def min_level(self) -> int:
        return self.tiers[0].min_level

    @property
    def max_level(self) -> int:
        return self.tiers[-1].max_level

    def tier_for_level(self, level: int) -> TierDef | None:
        for tier in self.tiers:
            if tier.contains(level):
                return tier
        return None

    def achievement_tier(self, level: int) -> TierDef | None:
        """Return the tier whose achievements trigger at ``level``, if any."""
        for tier in self.tiers:
            if tier.achievement_level == level:
                return tier
        return None

    @property
    def achievement_levels(self) -> frozenset[int]:
        return frozenset(
            tier.achievement_level for tier in self.tiers if tier.achievement_level is not None
        )

    def advancement(self, advancement_id: str) -> AdvancementDef | None:
        for advancement in self.advancements:
            if advancement.id == advancement_id:
                return advancement
        return None

    def class_by_name(self, name: str) -> ClassDef | None:
        for class_def in self.classes:
            if class_def.name == name:
                return class_def
        return None
