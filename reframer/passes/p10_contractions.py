"""
Pass 10 — Contractions

Rewrites second-person contractions ("you're", "you’ll", ...) to their
first-person forms. Runs first so later passes never see a bare "you"
inside a contraction.
"""

from reframer.core.context import RewriteContext
from reframer.core.logging import get_pass_logger
from reframer.ir.enums import RulePhase
from reframer.passes._phase import run_phase

PASS_NAME = "p10_contractions"
log = get_pass_logger(PASS_NAME)


def rewrite_contractions(ctx: RewriteContext) -> RewriteContext:
    """Apply the contraction phase."""
    return run_phase(ctx, RulePhase.CONTRACTION, PASS_NAME, log)
