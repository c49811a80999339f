"""Punctuation comparison for matched words."""
from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from phrase_compare import rules
from phrase_compare.config import ComparisonConfig
from phrase_compare.models.analysis import Analysis, WordResult
from .classifier import build_analysis


def is_covered(results: List[WordResult], idx: int) -> bool:
    """True if the punctuation of results[idx] belongs to missing words at the end of the phrase.

    "rien!" vs "rien du tout!": the "!" was typed after the last word the
    player kept, and the missing "du tout!" are already penalized. Any
    other result after the word (extra, substituted, moved, matched)
    leaves the punctuation difference to be counted.
    """
    trailing = results[idx + 1:]
    if not trailing:
        return False
    if any(r.status != rules.MISSING or r.partner is not None for r in trailing):
        return False
    return trailing[-1].correct.punctuation == results[idx].submitted.punctuation


def apply_punctuation(analysis: Analysis, config: Optional[ComparisonConfig] = None) -> Analysis:
    """Add one punctuation error per matched word whose trailing punctuation differs.

    One side empty and the other not counts as a difference. Words that are
    already errors (substituted, moved, extra, missing) cover their own
    punctuation; a matched word never does, except before sentence-final
    missing words (see is_covered).

    Args:
        analysis: Output of classifier.classify
        config: Thresholds and vote weights (defaults if None)

    Returns:
        New Analysis including punctuation errors
    """
    config = config or ComparisonConfig()
    results = list(analysis.word_results)
    changed = False

    for idx, r in enumerate(results):
        if r.op != rules.OP_MATCH:
            continue
        if r.submitted.punctuation == r.correct.punctuation:
            continue
        if is_covered(results, idx):
            continue
        results[idx] = replace(r, punctuation_error=True, votes=config.votes_for(rules.PUNCTUATION))
        changed = True

    if not changed:
        return analysis
    return build_analysis(results, config)
