"""Word-level classification and scoring of phrase alignments."""
from .char_diff import diff_positions, phrase_accuracy, similarity
from .classifier import classify, classify_pair
from .punctuation import apply_punctuation

__all__ = [
    "apply_punctuation",
    "classify",
    "classify_pair",
    "diff_positions",
    "phrase_accuracy",
    "similarity",
]
