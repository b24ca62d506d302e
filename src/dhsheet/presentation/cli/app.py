"""Console commands for inspecting characters and level-up rules."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from dhsheet.data.errors import DataError
from dhsheet.data.rules_loader import default_rule_set, load_rule_set
from dhsheet.domain.derived_stats import derive_character_stats
from dhsheet.domain.errors import RulesError
from dhsheet.domain.level_up_rules import all_class_names, class_domains, level_up_config
from dhsheet.domain.rule_set import RuleSet
from dhsheet.presentation.cli.config import configure_logging, load_config
from dhsheet.services.character_record import character_from_record
from dhsheet.services.errors import CharacterRecordError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dhsheet", description="Character sheet rules engine")
    parser.add_argument("--config", type=Path, default=None, help="Path to a config.json file")
    subcommands = parser.add_subparsers(dest="command", required=True)

    derive = subcommands.add_parser("derive", help="Print derived vitals for a character record")
    derive.add_argument("record", type=Path)

    level_up = subcommands.add_parser("level-up", help="Print the level-up configuration")
    level_up.add_argument("level", type=int)

    subcommands.add_parser("classes", help="List classes and their domains")
    return parser


def _load_rules(config: dict[str, str]) -> RuleSet:
    if config.get("definitions_path"):
        return load_rule_set(config["definitions_path"])
    return default_rule_set()


def _render_derive(record_path: Path) -> list[str]:
    try:
        payload = json.loads(record_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise CharacterRecordError(f"Unable to read character record {record_path}: {exc}") from exc
    character = character_from_record(payload)
    derived = derive_character_stats(character)
    vitals = derived.vitals
    thresholds = derived.damage_thresholds
    return [
        f"{character.name or character.id or 'Character'} (level {character.level})",
        f"  Hit Points: {vitals.hit_points_current}/{vitals.hit_points_max}",
        f"  Stress:     {vitals.stress_current}/{vitals.stress_max}",
        f"  Armor:      {vitals.armor_slots}/{vitals.armor_score}",
        f"  Hope:       {vitals.hope_current}/{vitals.hope_max}",
        f"  Thresholds: {thresholds.minor} / {thresholds.major} / {thresholds.severe}",
    ]


def _render_level_up(level: int, rules: RuleSet) -> list[str]:
    config = level_up_config(level, rules)
    achievements = config.tier_achievements
    lines = [
        f"Level {level} (tier {config.tier})",
        f"  Max domain card level: {config.max_domain_card_level}",
    ]
    if achievements.new_experience_value is not None:
        lines.append(
            f"  Tier achievements: new Experience +{achievements.new_experience_value}, "
            f"Proficiency +{achievements.proficiency_increase}"
        )
        if achievements.should_clear_marked_traits:
            lines.append("  Clear all marked traits")
    lines.append("  Advancements:")
    lines.extend(f"    - {advancement_id}" for advancement_id in config.advancements_available)
    return lines


def _render_classes(rules: RuleSet) -> list[str]:
    return [
        f"{name}: {' & '.join(class_domains(name, rules))}" for name in all_class_names(rules)
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command and return the process exit code."""
    args = _build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(config)
    try:
        rules = _load_rules(config)
        if args.command == "derive":
            lines = _render_derive(args.record)
        elif args.command == "level-up":
            lines = _render_level_up(args.level, rules)
        else:
            lines = _render_classes(rules)
    except (CharacterRecordError, DataError, RulesError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0
