"""
Pipelines — Registration of the standard pass sequences.
"""

from reframer.core.engine import Engine, Pipeline
from reframer.passes import (
    normalize_output,
    rewrite_contractions,
    rewrite_phrases,
    rewrite_pronouns,
)


def setup_default_pipeline(engine: Engine) -> None:
    """Register the default first-person pipeline."""
    default_pipeline = Pipeline(
        id="default",
        name="First-Person Rewrite",
        passes=[
            rewrite_contractions,  # "you're" -> "I'm" before any bare "you"
            rewrite_phrases,       # idioms, then the general verb rule
            rewrite_pronouns,      # your/yours/yourself/you
            normalize_output,      # capitalization, "need it" cleanup
        ],
    )
    engine.register_pipeline(default_pipeline)
