"""
IR Enums — Phases, match modes, statuses and codes.

No stringly-typed constants scattered across passes.
"""

from enum import Enum


# ============================================================================
# Rewrite Rules
# ============================================================================

class RulePhase(str, Enum):
    """
    Ordered stages of the rewrite pipeline.

    Declaration order is execution order:
    - CONTRACTION: "you're" -> "I'm" before anything sees a bare "you"
    - PHRASE: idioms and verb + "you" -> verb + "myself"
    - PRONOUN: standalone your/yours/yourself/you
    - NORMALIZE: capitalization repair and "need it" cleanup
    """

    CONTRACTION = "contraction"
    PHRASE = "phrase"
    PRONOUN = "pronoun"
    NORMALIZE = "normalize"

    @classmethod
    def ordered(cls) -> list["RulePhase"]:
        """Return phases in execution order."""
        return list(cls)


class MatchMode(str, Enum):
    """
    How a rule's pattern is matched.

    - CONTRACTION: literal, case-insensitive, no word boundaries
      (the apostrophe already delimits the token)
    - PHRASE: literal, case-insensitive, word-bounded on both ends
    - REGEX: raw regular expression, replacement may use back-references
    - CAPITALIZE_FIRST: uppercase the first character, no pattern
    """

    CONTRACTION = "contraction"
    PHRASE = "phrase"
    REGEX = "regex"
    CAPITALIZE_FIRST = "capitalize_first"


# ============================================================================
# Pipeline Status
# ============================================================================

class TransformStatus(str, Enum):
    """Overall status of a rewrite."""

    SUCCESS = "success"
    ERROR = "error"


class DiagnosticLevel(str, Enum):
    """Severity of a diagnostic."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# ============================================================================
# Reframe Session
# ============================================================================

class SessionState(str, Enum):
    """
    States of an interactive reframe session.

    IDLE -> COMPOSING -> SHOWING_RESULT <-> GROUNDING
    Any edit to the inputs returns the session to COMPOSING.
    """

    IDLE = "idle"
    COMPOSING = "composing"
    SHOWING_RESULT = "showing_result"
    GROUNDING = "grounding"
