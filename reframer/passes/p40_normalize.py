"""
Pass 40 — Output Normalization

Repairs artifacts left by the earlier passes:
- standalone lowercase "i" becomes "I"
- the first character is uppercased
- a dangling "it" after "need" / "need to" is dropped
"""

from reframer.core.context import RewriteContext
from reframer.core.logging import get_pass_logger
from reframer.ir.enums import RulePhase
from reframer.passes._phase import run_phase

PASS_NAME = "p40_normalize"
log = get_pass_logger(PASS_NAME)


def normalize_output(ctx: RewriteContext) -> RewriteContext:
    """Apply the normalization phase."""
    ctx = run_phase(ctx, RulePhase.NORMALIZE, PASS_NAME, log)
    log.verbose("normalized", output_chars=len(ctx.text))
    return ctx
