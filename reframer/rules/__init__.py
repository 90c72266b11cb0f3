"""Rules — Ordered substitution rules loaded from YAML rulesets."""
