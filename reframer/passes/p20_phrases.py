"""
Pass 20 — Phrases

Rewrites word-bounded idioms ("proud of you", "you are enough") and the
general verb rule ("I trust you" -> "I trust myself"). Explicit phrases
always run before the general rule.
"""

from reframer.core.context import RewriteContext
from reframer.core.logging import get_pass_logger
from reframer.ir.enums import RulePhase
from reframer.passes._phase import run_phase

PASS_NAME = "p20_phrases"
log = get_pass_logger(PASS_NAME)


def rewrite_phrases(ctx: RewriteContext) -> RewriteContext:
    """Apply the phrase phase."""
    return run_phase(ctx, RulePhase.PHRASE, PASS_NAME, log)
