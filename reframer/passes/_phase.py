"""
Shared phase runner for the rewrite passes.
"""

from reframer.core.context import RewriteContext
from reframer.core.logging import ChannelLogger
from reframer.ir.enums import RulePhase
from reframer.rules.engine import get_rule_engine


def run_phase(
    ctx: RewriteContext,
    phase: RulePhase,
    pass_name: str,
    log: ChannelLogger,
) -> RewriteContext:
    """Apply one rule phase to the context text and record what fired."""
    before = ctx.text
    outcome = get_rule_engine(ctx.ruleset_name).apply_phase(before, phase)

    ctx.text = outcome.text
    ctx.applied_rules.extend(outcome.rule_ids)

    if outcome.rule_ids:
        log.verbose(
            "phase_applied",
            phase=phase.value,
            rules=outcome.rule_ids,
            matches=outcome.matches,
        )
        ctx.add_trace(
            pass_name=pass_name,
            action=f"applied_{phase.value}_rules",
            before=before,
            after=outcome.text,
            rule_ids=outcome.rule_ids,
        )
    else:
        log.debug("no_changes", phase=phase.value)

    return ctx
