"""Builds RuleSet instances from JSON definitions."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dhsheet.data import paths
from dhsheet.data.errors import DataReferenceError
from dhsheet.data.repositories import (
    AdvancementsRepository,
    ClassesRepository,
    TiersRepository,
)
from dhsheet.domain.rule_set import RuleSet

logger = logging.getLogger(__name__)


def load_rule_set(base_path: Path | str | None = None) -> RuleSet:
    """Load tiers, advancements and classes from ``base_path``.

    Raises the data-layer errors when any definition file is missing or
    malformed, or when an advancement names a tier that is not defined.
    """
    rules = RuleSet(
        tiers=tuple(TiersRepository(base_path=base_path).all()),
        advancements=tuple(AdvancementsRepository(base_path=base_path).all()),
        classes=tuple(ClassesRepository(base_path=base_path).all()),
    )
    _assert_advancement_tiers(rules)
    logger.info(
        "Loaded rule set from %s (%d tiers, %d advancements, %d classes)",
        paths.get_definitions_path(base_path),
        len(rules.tiers),
        len(rules.advancements),
        len(rules.classes),
    )
    return rules


def _assert_advancement_tiers(rules: RuleSet) -> None:
    tier_ids = {tier.tier for tier in rules.tiers}
    for advancement in rules.advancements:
        if advancement.min_tier not in tier_ids:
            raise DataReferenceError(
                f"advancement '{advancement.id}' references unknown tier {advancement.min_tier}."
            )


@lru_cache(maxsize=1)
def default_rule_set() -> RuleSet:
    """Return the process-wide rule set, loading it on first use."""
    return load_rule_set()
