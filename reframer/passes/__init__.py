"""Passes — Pipeline stages for the first-person rewrite."""

from reframer.passes.p10_contractions import rewrite_contractions
from reframer.passes.p20_phrases import rewrite_phrases
from reframer.passes.p30_pronouns import rewrite_pronouns
from reframer.passes.p40_normalize import normalize_output

__all__ = [
    "rewrite_contractions",
    "rewrite_phrases",
    "rewrite_pronouns",
    "normalize_output",
]
