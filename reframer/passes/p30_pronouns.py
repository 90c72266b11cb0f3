"""
Pass 30 — Pronouns

Rewrites standalone your/yours/yourself/you, keeping the capitalization
of each variant. "you" directly followed by an apostrophe is left alone.
"""

from reframer.core.context import RewriteContext
from reframer.core.logging import get_pass_logger
from reframer.ir.enums import RulePhase
from reframer.passes._phase import run_phase

PASS_NAME = "p30_pronouns"
log = get_pass_logger(PASS_NAME)


def rewrite_pronouns(ctx: RewriteContext) -> RewriteContext:
    """Apply the pronoun phase."""
    return run_phase(ctx, RulePhase.PRONOUN, PASS_NAME, log)
