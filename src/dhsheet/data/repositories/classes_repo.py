"""Classes repository."""
from __future__ import annotations

from typing import Dict

from dhsheet.data.errors import DataValidationError
from dhsheet.data.repositories.base import RepositoryBase
from dhsheet.domain.defs import ClassDef


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads classes and their domain pairs."""

    def __init__(self, base_path=None) -> None:
        super().__init__("classes.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        classes: Dict[str, ClassDef] = {}
        seen_names: set[str] = set()
        for raw_id, payload in raw.items():
            class_data = self._require_mapping(payload, f"class '{raw_id}'")
            self._assert_exact_fields(
                class_data,
                {"name", "domains", "starting_hp", "starting_evasion"},
                f"class '{raw_id}'",
            )
            name = self._require_str(class_data["name"], f"class '{raw_id}' name")
            if name in seen_names:
                raise DataValidationError(f"class name '{name}' is defined more than once.")
            seen_names.add(name)
            domains = self._require_str_list(class_data["domains"], f"class '{raw_id}' domains")
            if len(domains) != 2 or domains[0] == domains[1]:
                raise DataValidationError(
                    f"class '{raw_id}' must define exactly two distinct domains."
                )
            starting_hp = self._require_int(
                class_data["starting_hp"], f"class '{raw_id}' starting_hp"
            )
            starting_evasion = self._require_int(
                class_data["starting_evasion"], f"class '{raw_id}' starting_evasion"
            )
            classes[raw_id] = ClassDef(
                id=raw_id,
                name=name,
                domains=(domains[0], domains[1]),
                starting_hp=starting_hp,
                starting_evasion=starting_evasion,
            )
        return classes

    def find_by_name(self, name: str) -> ClassDef | None:
        """Return the class whose display name matches exactly, if any."""
        for class_def in self.all():
            if class_def.name == name:
                return class_def
        return None
