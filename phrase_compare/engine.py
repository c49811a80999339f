"""Phrase comparison pipeline: tokenize, align, classify, render."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from .alignment.aligner import align
from .alignment.tokenizer import tokenize
from .config import ComparisonConfig
from .models.analysis import Analysis, DisplaySegment
from .renderer import render as render_analysis
from .renderer import to_markup
from .scorer.char_diff import phrase_accuracy
from .scorer.classifier import classify
from .scorer.punctuation import apply_punctuation

logger = logging.getLogger(__name__)


class PhraseComparer:
    """Compares submitted phrases against reference phrases.

    Holds nothing but its configuration, so one instance can serve any
    number of callers concurrently.
    """

    def __init__(self, config: Optional[ComparisonConfig] = None):
        self.config = config or ComparisonConfig()

    def analyze(self, submission: Optional[str], reference: Optional[str]) -> Analysis:
        """Compare a submission against a reference phrase.

        Never raises for text input: None and empty strings give an empty
        analysis with zero votes.
        """
        submitted = tokenize(submission)
        correct = tokenize(reference)
        if not submitted and not correct:
            return Analysis()

        alignment = align(submitted, correct)
        analysis = classify(alignment, submitted, correct, self.config)
        analysis = apply_punctuation(analysis, self.config)
        analysis = replace(analysis, display_segments=tuple(render_analysis(analysis)))

        logger.debug(
            "Compared %d submitted / %d reference words: %d error(s), %d vote(s)",
            len(submitted), len(correct), len(analysis.errors), analysis.total_votes,
        )
        return analysis

    def render_segments(self, submission: Optional[str], reference: Optional[str]) -> List[DisplaySegment]:
        """Structured diff of a submission against a reference phrase."""
        return list(self.analyze(submission, reference).display_segments)

    def render(self, submission: Optional[str], reference: Optional[str]) -> str:
        """Inline-styled HTML diff of a submission against a reference phrase."""
        return to_markup(self.analyze(submission, reference))

    def accuracy(self, submission: Optional[str], reference: Optional[str]) -> int:
        """Legacy character-position accuracy (see scorer.char_diff.phrase_accuracy)."""
        return phrase_accuracy(submission, reference)


_default_comparer = PhraseComparer()


def analyze(submission: Optional[str], reference: Optional[str]) -> Analysis:
    return _default_comparer.analyze(submission, reference)


def render(submission: Optional[str], reference: Optional[str]) -> str:
    return _default_comparer.render(submission, reference)


def render_segments(submission: Optional[str], reference: Optional[str]) -> List[DisplaySegment]:
    return _default_comparer.render_segments(submission, reference)


def accuracy(submission: Optional[str], reference: Optional[str]) -> int:
    return _default_comparer.accuracy(submission, reference)
