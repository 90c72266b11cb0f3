"""
Rule Engine — Deterministic, ordered substitution.

Rules are compiled once per ruleset and applied strictly in
declaration order within a phase. Nothing is re-sorted.
"""

import re
from dataclasses import dataclass, field
from typing import Optional

from reframer.ir.enums import MatchMode, RulePhase
from reframer.rules.loader import clear_cache, get_ruleset
from reframer.rules.models import Ruleset, SubstitutionRule


@dataclass
class CompiledRule:
    """A rule with its compiled matcher."""
    rule: SubstitutionRule
    regex: Optional[re.Pattern] = None

    @classmethod
    def compile(cls, rule: SubstitutionRule) -> "CompiledRule":
        flags = 0 if rule.case_sensitive else re.IGNORECASE

        if rule.mode == MatchMode.CAPITALIZE_FIRST:
            return cls(rule=rule)
        if rule.mode == MatchMode.CONTRACTION:
            regex = re.compile(re.escape(rule.pattern), flags)
        elif rule.mode == MatchMode.PHRASE:
            regex = re.compile(rf"\b{re.escape(rule.pattern)}\b", flags)
        else:
            regex = re.compile(rule.pattern, flags)
        return cls(rule=rule, regex=regex)

    def apply(self, text: str) -> tuple[str, int]:
        """Apply the rule everywhere in `text`. Returns (text, match_count)."""
        if self.rule.mode == MatchMode.CAPITALIZE_FIRST:
            if not text:
                return text, 0
            first = text[0].upper()
            if first == text[0]:
                return text, 0
            return first + text[1:], 1

        if self.rule.mode == MatchMode.REGEX:
            return self.regex.subn(self.rule.replacement, text)

        # Literal modes: the replacement is plain text, not a template
        replacement = self.rule.replacement
        return self.regex.subn(lambda _m: replacement, text)


@dataclass
class PhaseOutcome:
    """Result of applying one phase."""
    text: str
    rule_ids: list[str] = field(default_factory=list)
    matches: int = 0


class RuleEngine:
    """
    Applies a ruleset phase by phase.

    Rules are loaded from YAML and compiled lazily on first use.
    """

    def __init__(self, ruleset_name: str) -> None:
        self._ruleset_name = ruleset_name
        self._ruleset: Optional[Ruleset] = None
        self._compiled: dict[RulePhase, list[CompiledRule]] = {}

    @classmethod
    def from_ruleset(cls, ruleset: Ruleset) -> "RuleEngine":
        """Build an engine around an already-parsed ruleset."""
        engine = cls(ruleset.name)
        engine._ruleset = ruleset
        return engine

    @property
    def ruleset(self) -> Ruleset:
        """Lazy-load the ruleset."""
        if self._ruleset is None:
            self._ruleset = get_ruleset(self._ruleset_name)
        return self._ruleset

    def compiled_rules(self, phase: RulePhase) -> list[CompiledRule]:
        if phase not in self._compiled:
            self._compiled[phase] = [
                CompiledRule.compile(rule)
                for rule in self.ruleset.get_rules_for_phase(phase)
            ]
        return self._compiled[phase]

    def apply_phase(self, text: str, phase: RulePhase) -> PhaseOutcome:
        """
        Apply every rule of `phase` in order, each to the output of the last.
        """
        outcome = PhaseOutcome(text=text)
        for compiled in self.compiled_rules(phase):
            outcome.text, count = compiled.apply(outcome.text)
            if count:
                outcome.rule_ids.append(compiled.rule.id)
                outcome.matches += count
        return outcome

    def rewrite(self, text: str) -> str:
        """Run all phases in order (no tracing)."""
        for phase in RulePhase.ordered():
            text = self.apply_phase(text, phase).text
        return text


_engines: dict[str, RuleEngine] = {}


def get_rule_engine(ruleset_name: str) -> RuleEngine:
    """Get the shared engine for a ruleset."""
    if ruleset_name not in _engines:
        _engines[ruleset_name] = RuleEngine(ruleset_name)
    return _engines[ruleset_name]


def reset_rule_engines() -> None:
    """Drop compiled engines and cached rulesets."""
    _engines.clear()
    clear_cache()
