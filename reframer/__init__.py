"""
Reframer — First-person thought reframing.

A deterministic rule pipeline that turns the supportive words you would
say to a friend into an affirmation about yourself, and composes it with
the emotions you are feeling.

Rules decide the rewrite. Nothing here tries to understand the sentence.
"""

__version__ = "0.1.0"

from reframer.core.engine import RewriteError, rewrite
from reframer.formatting.compose import compose, reframe
from reframer.formatting.emotions import EmotionSelection, format_list

__all__ = [
    "__version__",
    "EmotionSelection",
    "RewriteError",
    "compose",
    "format_list",
    "reframe",
    "rewrite",
]
