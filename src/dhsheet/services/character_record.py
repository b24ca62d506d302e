"""Conversion of persisted character records into Character snapshots.

Records come from the storage collaborator as JSON objects. Only a missing
object or an unusable level is fatal; every other malformed field falls
back to a default so the sheet can still be derived.
"""
from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Mapping

from dhsheet.domain.entities import (
    Character,
    ClassData,
    DamageThresholds,
    Experience,
    InventoryItem,
    ItemDefinition,
    ItemModifier,
    Modifier,
    Vitals,
)
from dhsheet.services.errors import CharacterRecordError

logger = logging.getLogger(__name__)

CharacterRecord = Mapping[str, Any]
_VITAL_FIELDS = tuple(vital_field.name for vital_field in fields(Vitals))


class CharacterRecordLoader:
    """Builds Character values from persistence-layer payloads."""

    def load(self, payload: CharacterRecord) -> Character:
        if not isinstance(payload, Mapping):
            raise CharacterRecordError("Character record must be a JSON object.")
        level = payload.get("level")
        if isinstance(level, bool) or not isinstance(level, int):
            raise CharacterRecordError(f"Character level must be an integer, got {level!r}.")

        return Character(
            id=self._coerce_str(payload.get("id")),
            name=self._coerce_str(payload.get("name")),
            level=level,
            class_data=self._coerce_class_data(payload.get("class_data")),
            vitals=self._coerce_vitals(payload.get("vitals"), payload.get("hope")),
            damage_thresholds=self._coerce_thresholds(payload.get("damage_thresholds")),
            inventory=self._coerce_inventory(payload.get("character_inventory")),
            modifiers=self._coerce_modifier_ledger(payload.get("modifiers")),
            proficiency=self._coerce_int(payload.get("proficiency"), default=1),
            evasion=self._coerce_optional_int(payload.get("evasion")),
            experiences=self._coerce_experiences(payload.get("experiences")),
            domains=tuple(
                domain for domain in self._coerce_list(payload.get("domains")) if isinstance(domain, str)
            ),
        )

    def _coerce_class_data(self, raw: object) -> ClassData | None:
        if not isinstance(raw, Mapping):
            return None
        data = raw.get("data")
        source = data if isinstance(data, Mapping) else raw
        return ClassData(
            name=self._coerce_optional_str(raw.get("name")),
            starting_hp=self._coerce_optional_int(source.get("starting_hp")),
            starting_evasion=self._coerce_optional_int(source.get("starting_evasion")),
        )

    def _coerce_vitals(self, raw: object, hope: object) -> Vitals:
        defaults = Vitals()
        if not isinstance(raw, Mapping):
            raw = {}
        values = {
            name: self._coerce_int(raw.get(name), default=getattr(defaults, name))
            for name in _VITAL_FIELDS
        }
        if "hope_current" not in raw and hope is not None:
            values["hope_current"] = self._coerce_int(hope, default=defaults.hope_current)
        return Vitals(**values)

    def _coerce_thresholds(self, raw: object) -> DamageThresholds | None:
        if not isinstance(raw, Mapping):
            return None
        minor = self._coerce_optional_int(raw.get("minor"))
        major = self._coerce_optional_int(raw.get("major"))
        severe = self._coerce_optional_int(raw.get("severe"))
        if minor is None or major is None or severe is None:
            logger.debug("Discarding incomplete damage thresholds %r", raw)
            return None
        return DamageThresholds(minor=minor, major=major, severe=severe)

    def _coerce_inventory(self, raw: object) -> tuple[InventoryItem, ...]:
        items: list[InventoryItem] = []
        for index, entry in enumerate(self._coerce_list(raw)):
            if not isinstance(entry, Mapping):
                logger.debug("Skipping inventory entry %d: not an object", index)
                continue
            library_item = entry.get("library_item")
            data = library_item.get("data") if isinstance(library_item, Mapping) else None
            items.append(
                InventoryItem(
                    id=self._coerce_str(entry.get("id"), default=f"item-{index}"),
                    name=self._coerce_str(entry.get("name")),
                    location=self._coerce_str(entry.get("location"), default="backpack"),
                    definition=self._coerce_item_definition(data),
                )
            )
        return tuple(items)

    def _coerce_item_definition(self, data: object) -> ItemDefinition | None:
        if not isinstance(data, Mapping):
            return None
        raw_modifiers = data.get("modifiers")
        modifiers: tuple[ItemModifier, ...] | None = None
        if isinstance(raw_modifiers, list):
            modifiers = tuple(
                ItemModifier(
                    id=self._coerce_modifier_id(entry.get("id")),
                    target=self._coerce_str(entry.get("target")),
                    value=self._coerce_int(entry.get("value"), default=0),
                )
                for entry in raw_modifiers
                if isinstance(entry, Mapping)
            )
        feature = data.get("feature")
        feature_text = feature.get("text") if isinstance(feature, Mapping) else None
        base_score = data.get("base_score")
        return ItemDefinition(
            base_score=str(base_score) if isinstance(base_score, (str, int)) else None,
            base_thresholds=self._coerce_optional_str(data.get("base_thresholds")),
            modifiers=modifiers,
            feat_text=self._coerce_optional_str(data.get("feat_text")),
            feature_text=self._coerce_optional_str(feature_text),
            damage=self._coerce_optional_str(data.get("damage")),
        )

    def _coerce_modifier_ledger(self, raw: object) -> dict[str, tuple[Modifier, ...]]:
        if not isinstance(raw, Mapping):
            return {}
        ledger: dict[str, tuple[Modifier, ...]] = {}
        for stat, entries in raw.items():
            modifiers = []
            for index, entry in enumerate(self._coerce_list(entries)):
                if not isinstance(entry, Mapping):
                    continue
                source = entry.get("source")
                modifiers.append(
                    Modifier(
                        id=self._coerce_str(entry.get("id"), default=f"{stat}-{index}"),
                        name=self._coerce_str(entry.get("name")),
                        value=self._coerce_int(entry.get("value"), default=0),
                        source=source if source in ("system", "user") else "user",
                        target=stat,
                    )
                )
            ledger[str(stat)] = tuple(modifiers)
        return ledger

    def _coerce_experiences(self, raw: object) -> tuple[Experience, ...]:
        experiences: list[Experience] = []
        for entry in self._coerce_list(raw):
            if isinstance(entry, str):
                experiences.append(Experience(name=entry, value=2))
            elif isinstance(entry, Mapping):
                experiences.append(
                    Experience(
                        name=self._coerce_str(entry.get("name")),
                        value=self._coerce_int(entry.get("value"), default=2),
                    )
                )
        return tuple(experiences)

    @staticmethod
    def _coerce_list(value: object) -> list[Any]:
        return list(value) if isinstance(value, (list, tuple)) else []

    @staticmethod
    def _coerce_str(value: object, default: str = "") -> str:
        return value if isinstance(value, str) else default

    @staticmethod
    def _coerce_optional_str(value: object) -> str | None:
        return value if isinstance(value, str) else None

    @staticmethod
    def _coerce_modifier_id(value: object) -> str | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return str(value)
        return value if isinstance(value, str) and value else None

    @staticmethod
    def _coerce_optional_int(value: object) -> int | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None

    @classmethod
    def _coerce_int(cls, value: object, *, default: int) -> int:
        parsed = cls._coerce_optional_int(value)
        return default if parsed is None else parsed


def character_from_record(payload: CharacterRecord) -> Character:
    """Convenience wrapper around ``CharacterRecordLoader().load``."""
    return CharacterRecordLoader().load(payload)
