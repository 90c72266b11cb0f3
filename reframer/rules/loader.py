"""
Rule Loader — Load and parse rulesets from YAML files.

A ruleset file lists its rules in execution order. Each rule names the
phase it belongs to; the phases themselves always run in RulePhase order.

Invalid rules are an error, not a warning: dropping one rule silently
changes every rewrite that follows it.
"""

import re
from pathlib import Path
from typing import Union

import yaml

from reframer.core.logging import LogChannel, get_logger
from reframer.ir.enums import MatchMode, RulePhase
from reframer.rules.models import Ruleset, SubstitutionRule

log = get_logger(LogChannel.SYSTEM)

# Default ruleset directory
RULESETS_DIR = Path(__file__).parent / "rulesets"


class RulesetError(ValueError):
    """A ruleset file is malformed."""


def load_ruleset(name: str) -> Ruleset:
    """
    Load a ruleset by name from the bundled rulesets directory.

    Raises:
        FileNotFoundError: If the ruleset file doesn't exist
        RulesetError: If the ruleset is invalid
    """
    path = RULESETS_DIR / f"{name}.yaml"
    if Path(name).name != name or not path.exists():
        raise FileNotFoundError(f"Ruleset not found: {path}")
    return load_ruleset_from_path(path)


def load_ruleset_from_path(path: Union[str, Path]) -> Ruleset:
    """Load a ruleset from an arbitrary path."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise RulesetError(f"{path}: expected a mapping at top level")
    ruleset = parse_ruleset(data, default_name=path.stem)
    log.info(
        "ruleset_loaded",
        ruleset=ruleset.name,
        version=ruleset.version,
        rules=len(ruleset.rules),
    )
    return ruleset


def parse_ruleset(data: dict, default_name: str = "unnamed") -> Ruleset:
    """Parse a ruleset from a dictionary."""
    rules: list[SubstitutionRule] = []
    seen: set[str] = set()

    for index, rule_data in enumerate(data.get("rules") or []):
        rule = parse_rule(rule_data, index)
        if rule.id in seen:
            raise RulesetError(f"Duplicate rule id: {rule.id}")
        seen.add(rule.id)
        rules.append(rule)

    return Ruleset(
        version=str(data.get("version", "1.0")),
        name=data.get("name", default_name),
        description=data.get("description", ""),
        rules=rules,
    )


def parse_rule(data: dict, index: int = 0) -> SubstitutionRule:
    """Parse a single rule from a dictionary."""
    try:
        rule = SubstitutionRule(
            id=data["id"],
            phase=RulePhase(data["phase"]),
            mode=MatchMode(data["mode"]),
            pattern=data.get("pattern"),
            replacement=data.get("replacement", ""),
            case_sensitive=data.get("case_sensitive", False),
            description=data.get("description", ""),
            enabled=data.get("enabled", True),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise RulesetError(f"Invalid rule at position {index}: {e!r}") from e

    if rule.mode == MatchMode.CAPITALIZE_FIRST:
        return rule

    if not rule.pattern:
        raise RulesetError(f"Rule '{rule.id}' needs a pattern for mode {rule.mode.value}")

    if rule.mode == MatchMode.REGEX:
        try:
            re.compile(rule.pattern)
        except re.error as e:
            raise RulesetError(f"Rule '{rule.id}' has an invalid regex: {e}") from e

    return rule


def list_rulesets() -> list[str]:
    """List bundled ruleset names."""
    return sorted(p.stem for p in RULESETS_DIR.glob("*.yaml"))


# Cache for loaded rulesets
_cache: dict[str, Ruleset] = {}


def get_ruleset(name: str, use_cache: bool = True) -> Ruleset:
    """Get a ruleset, using cache by default."""
    if use_cache and name in _cache:
        return _cache[name]

    ruleset = load_ruleset(name)
    _cache[name] = ruleset
    return ruleset


def clear_cache() -> None:
    """Clear the ruleset cache."""
    _cache.clear()
