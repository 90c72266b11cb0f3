"""
Tests for ruleset loading and validation.
"""

import pytest

from reframer.ir.enums import MatchMode, RulePhase
from reframer.rules.loader import (
    RulesetError,
    get_ruleset,
    list_rulesets,
    load_ruleset,
    load_ruleset_from_path,
    parse_rule,
    parse_ruleset,
)


class TestBundledRuleset:
    """Tests for the shipped first_person ruleset."""

    def test_first_person_loads(self):
        ruleset = load_ruleset("first_person")

        assert ruleset.name == "first_person"
        assert len(ruleset.rules) > 0

    def test_every_phase_has_rules(self):
        ruleset = load_ruleset("first_person")
        for phase in RulePhase.ordered():
            assert ruleset.get_rules_for_phase(phase), phase

    def test_declaration_order_is_kept(self):
        """Explicit phrases precede the verb rule, which precedes agreement rules."""
        ids = [r.id for r in load_ruleset("first_person").get_rules_for_phase(RulePhase.PHRASE)]

        assert ids[0] == "phrase_i_love_you"
        assert ids.index("phrase_you_are_strong") < ids.index("phrase_verb_you")
        assert ids.index("phrase_verb_you") < ids.index("phrase_you_are")

    def test_capitalize_rule_sits_between_normalizers(self):
        ids = [r.id for r in load_ruleset("first_person").get_rules_for_phase(RulePhase.NORMALIZE)]
        assert ids == ["normalize_standalone_i", "normalize_capitalize_first", "normalize_need_it"]

    def test_pronoun_rules_are_case_sensitive(self):
        rules = load_ruleset("first_person").get_rules_for_phase(RulePhase.PRONOUN)
        assert all(r.case_sensitive for r in rules)

    def test_listed(self):
        assert "first_person" in list_rulesets()

    def test_cached(self):
        assert get_ruleset("first_person") is get_ruleset("first_person")


class TestLoadErrors:

    def test_missing_ruleset(self):
        with pytest.raises(FileNotFoundError):
            load_ruleset("does_not_exist")

    def test_path_like_name_rejected(self):
        with pytest.raises(FileNotFoundError):
            load_ruleset("../data/catalog")

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(RulesetError):
            load_ruleset_from_path(path)

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "tiny.yaml"
        path.write_text(
            "rules:\n"
            "  - id: hi\n"
            "    phase: phrase\n"
            "    mode: phrase\n"
            "    pattern: hello\n"
            "    replacement: hi\n"
        )

        ruleset = load_ruleset_from_path(path)

        assert ruleset.name == "tiny"
        assert ruleset.get_rule("hi").mode == MatchMode.PHRASE


class TestRuleValidation:

    def test_missing_pattern(self):
        with pytest.raises(RulesetError):
            parse_rule({"id": "x", "phase": "phrase", "mode": "phrase"})

    def test_capitalize_needs_no_pattern(self):
        rule = parse_rule({"id": "cap", "phase": "normalize", "mode": "capitalize_first"})
        assert rule.pattern is None

    def test_invalid_regex(self):
        with pytest.raises(RulesetError):
            parse_rule({"id": "x", "phase": "pronoun", "mode": "regex", "pattern": "(unclosed"})

    def test_unknown_phase(self):
        with pytest.raises(RulesetError):
            parse_rule({"id": "x", "phase": "later", "mode": "phrase", "pattern": "a"})

    def test_missing_id(self):
        with pytest.raises(RulesetError):
            parse_rule({"phase": "phrase", "mode": "phrase", "pattern": "a"})

    def test_duplicate_ids(self):
        rule = {"id": "dup", "phase": "phrase", "mode": "phrase", "pattern": "a"}
        with pytest.raises(RulesetError):
            parse_ruleset({"rules": [rule, dict(rule)]})

    def test_disabled_rule_skipped_by_phase_lookup(self):
        ruleset = parse_ruleset({"rules": [
            {"id": "off", "phase": "phrase", "mode": "phrase", "pattern": "a", "enabled": False},
        ]})
        assert ruleset.get_rules_for_phase(RulePhase.PHRASE) == []
