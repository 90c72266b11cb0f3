"""
Rule Models — Data structures for substitution rules.
"""

from dataclasses import dataclass, field
from typing import Optional

from reframer.ir.enums import MatchMode, RulePhase


@dataclass
class SubstitutionRule:
    """
    A single ordered substitution.

    `pattern` is a literal for CONTRACTION/PHRASE rules and a regular
    expression for REGEX rules. CAPITALIZE_FIRST rules have no pattern.
    """
    id: str
    phase: RulePhase
    mode: MatchMode
    pattern: Optional[str] = None
    replacement: str = ""
    case_sensitive: bool = False
    description: str = ""
    enabled: bool = True


@dataclass
class Ruleset:
    """A complete, ordered ruleset.

    Rule order is the order of `rules`; it is never re-sorted.
    """
    version: str
    name: str
    description: str
    rules: list[SubstitutionRule] = field(default_factory=list)

    def get_rules_for_phase(self, phase: RulePhase) -> list[SubstitutionRule]:
        """Enabled rules of one phase, in declaration order."""
        return [r for r in self.rules if r.phase == phase and r.enabled]

    def get_rule(self, rule_id: str) -> Optional[SubstitutionRule]:
        for rule in self.rules:
            if rule.id == rule_id:
                return rule
        return None
