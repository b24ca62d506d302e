"""Advancement catalog repository."""
from __future__ import annotations

from typing import Dict

from dhsheet.data.errors import DataValidationError
from dhsheet.data.repositories.base import RepositoryBase
from dhsheet.domain.defs import AdvancementDef


class AdvancementsRepository(RepositoryBase[AdvancementDef]):
    """Loads and validates advancement definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("advancements.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, AdvancementDef]:
        advancements: Dict[str, AdvancementDef] = {}
        for raw_id, payload in raw.items():
            advancement_data = self._require_mapping(payload, f"advancement '{raw_id}'")
            self._assert_exact_fields(
                advancement_data,
                {"name", "slot_cost", "min_tier", "order"},
                f"advancement '{raw_id}'",
            )
            name = self._require_str(advancement_data["name"], f"advancement '{raw_id}' name")
            slot_cost = self._require_int(
                advancement_data["slot_cost"], f"advancement '{raw_id}' slot_cost"
            )
            if slot_cost not in (1, 2):
                raise DataValidationError(f"advancement '{raw_id}' slot_cost must be 1 or 2.")
            min_tier = self._require_int(
                advancement_data["min_tier"], f"advancement '{raw_id}' min_tier"
            )
            order = self._require_int(advancement_data["order"], f"advancement '{raw_id}' order")
            advancements[raw_id] = AdvancementDef(
                id=raw_id,
                name=name,
                slot_cost=slot_cost,
                min_tier=min_tier,
                order=order,
            )
        return advancements

    def all(self) -> list[AdvancementDef]:
        """Return advancements in catalog order."""
        return sorted(super().all(), key=lambda advancement: (advancement.order, advancement.id))
