"""
Reframe composition.

A reframe pairs what the user feels with what they would tell a friend,
rewritten in the first person:

    I feel anxious and ashamed, but this feeling doesn’t define me. I am doing the best I can

An empty result means there is nothing to show; it is not an error.
"""

from collections.abc import Iterable
from typing import Optional

from reframer.core.engine import rewrite
from reframer.core.logging import LogChannel, get_logger
from reframer.formatting.emotions import format_list

log = get_logger(LogChannel.FORMAT)

REFRAME_TEMPLATE = "I feel {emotions}, but this feeling doesn’t define me. {statement}"


def compose(emotions: Iterable[str], rewritten_statement: str) -> str:
    """
    Join the emotion phrase and an already-rewritten statement.

    Returns "" when there are no emotions or the statement is empty.
    The statement is inserted verbatim.
    """
    emotion_phrase = format_list(emotions)
    if not emotion_phrase or not rewritten_statement:
        log.verbose(
            "reframe_not_producible",
            has_emotions=bool(emotion_phrase),
            has_statement=bool(rewritten_statement),
        )
        return ""

    return REFRAME_TEMPLATE.format(emotions=emotion_phrase, statement=rewritten_statement)


def reframe(
    emotions: Iterable[str],
    support_text: str,
    ruleset: Optional[str] = None,
) -> str:
    """
    Rewrite `support_text` in the first person and compose the reframe.

    Both inputs must be present; otherwise returns "" without rewriting.
    """
    emotions = list(emotions)
    if not format_list(emotions) or not support_text:
        return compose(emotions, "")

    statement = rewrite(support_text, ruleset=ruleset)
    result = compose(emotions, statement)
    log.info("reframe_composed", emotions=len(emotions), chars=len(result))
    return result
