"""Tier repository."""
from __future__ import annotations

from typing import Dict

from dhsheet.data.errors import DataValidationError
from dhsheet.data.repositories.base import RepositoryBase
from dhsheet.domain.defs import TierDef


class TiersRepository(RepositoryBase[TierDef]):
    """Loads tier bands and checks that they tile the level range without gaps."""

    def __init__(self, base_path=None) -> None:
        super().__init__("tiers.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, TierDef]:
        tiers: Dict[str, TierDef] = {}
        for raw_id, payload in raw.items():
            if not raw_id.isdigit():
                raise DataValidationError(f"Tier id '{raw_id}' must be a positive integer string.")
            tier_data = self._require_mapping(payload, f"tier '{raw_id}'")
            self._assert_exact_fields(
                tier_data,
                {"min_level", "max_level"},
                f"tier '{raw_id}'",
                optional_fields={"achievement_level", "clears_marked_traits"},
            )
            min_level = self._require_int(tier_data["min_level"], f"tier '{raw_id}' min_level")
            max_level = self._require_int(tier_data["max_level"], f"tier '{raw_id}' max_level")
            if min_level < 1 or max_level < min_level:
                raise DataValidationError(
                    f"tier '{raw_id}' level band {min_level}-{max_level} is invalid."
                )
            achievement_level = tier_data.get("achievement_level")
            if achievement_level is not None:
                achievement_level = self._require_int(
                    achievement_level, f"tier '{raw_id}' achievement_level"
                )
                if not min_level <= achievement_level <= max_level:
                    raise DataValidationError(
                        f"tier '{raw_id}' achievement_level must fall inside its level band."
                    )
            clears_marked_traits = self._require_bool(
                tier_data.get("clears_marked_traits", False),
                f"tier '{raw_id}' clears_marked_traits",
            )
            tiers[raw_id] = TierDef(
                tier=int(raw_id),
                min_level=min_level,
                max_level=max_level,
                achievement_level=achievement_level,
                clears_marked_traits=clears_marked_traits,
            )
        self._assert_contiguous(tiers)
        return tiers

    def all(self) -> list[TierDef]:
        """Return tiers ordered by tier number."""
        return sorted(super().all(), key=lambda tier: tier.tier)

    @staticmethod
    def _assert_contiguous(tiers: Dict[str, TierDef]) -> None:
        if not tiers:
            raise DataValidationError("At least one tier must be defined.")
        ordered = sorted(tiers.values(), key=lambda tier: tier.tier)
        if ordered[0].min_level != 1:
            raise DataValidationError("The first tier must start at level 1.")
        for previous, current in zip(ordered, ordered[1:]):
            if current.min_level != previous.max_level + 1:
                raise DataValidationError(
                    f"tier '{current.tier}' must start at level {previous.max_level + 1}."
                )
