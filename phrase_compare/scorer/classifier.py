"""Word-level classification of an alignment into errors and votes."""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from phrase_compare import rules
from phrase_compare.config import ComparisonConfig
from phrase_compare.models.analysis import Analysis, WordError, WordResult
from phrase_compare.models.tokens import AlignmentOp, Token
from .char_diff import diff_positions, similarity

logger = logging.getLogger(__name__)


def classify_pair(
    submitted: str, correct: str, config: ComparisonConfig
) -> Tuple[str, int, Tuple[int, ...]]:
    """Classify a substituted word by its character differences.

    - no difference -> "correct", 0 votes
    - exactly one differing position, both words longer than the short-word
      limit -> "single_char"
    - anything else -> "multi_char" (short words are always penalized at
      this tier: "et" vs "es")

    Returns:
        (status, votes, differing positions)
    """
    positions = tuple(diff_positions(submitted, correct))
    if not positions:
        return rules.CORRECT, 0, positions

    limit = config.short_word_max_length
    is_short = len(submitted) <= limit or len(correct) <= limit
    if len(positions) == 1 and not is_short:
        return rules.SINGLE_CHAR, config.votes_for(rules.SINGLE_CHAR), positions
    return rules.MULTI_CHAR, config.votes_for(rules.MULTI_CHAR), positions


def iter_runs(alignment: Sequence[AlignmentOp]) -> Iterator[List[int]]:
    """Yield indices of each run of consecutive non-match operations."""
    run: List[int] = []
    for k, op in enumerate(alignment):
        if op.op == rules.OP_MATCH:
            if run:
                yield run
                run = []
        else:
            run.append(k)
    if run:
        yield run


def find_moved_words(
    alignment: Sequence[AlignmentOp], submitted: Sequence[Token], correct: Sequence[Token]
) -> Dict[int, int]:
    """Pair each missing reference word with an extra submitted word of identical text.

    A word typed at the wrong place shows up in the alignment as a missing
    reference word and an extra submitted word with the same text. A
    repeated word has no missing twin and is left alone.

    Returns:
        {extra op index: missing op index}
    """
    extras = [k for k, op in enumerate(alignment) if op.op == rules.OP_EXTRA]
    moved: Dict[int, int] = {}
    for k, op in enumerate(alignment):
        if op.op != rules.OP_MISSING:
            continue
        text = correct[op.corr_index].text
        for e in extras:
            if e not in moved and submitted[alignment[e].sub_index].text == text:
                moved[e] = k
                break
    return moved


def pair_runs(alignment: Sequence[AlignmentOp], taken: Set[int]) -> Dict[int, int]:
    """Zip the free extras and missings of every run in encounter order.

    Returns:
        {extra op index: missing op index}
    """
    pairs: Dict[int, int] = {}
    for run in iter_runs(alignment):
        extras = [k for k in run if alignment[k].op == rules.OP_EXTRA and k not in taken]
        missing = [k for k in run if alignment[k].op == rules.OP_MISSING and k not in taken]
        for e, m in zip(extras, missing):
            pairs[e] = m
    return pairs


def recover_pairs(
    alignment: Sequence[AlignmentOp],
    submitted: Sequence[Token],
    correct: Sequence[Token],
    taken: Set[int],
    threshold: float,
) -> Dict[int, int]:
    """Pair leftover extras and missings anywhere in the alignment by similarity.

    Handles a misspelling that the LCS split into different runs, e.g.
    "Je mnage le pain" vs "Je le mange pain". Each missing word (reference
    order) takes the free extra with the highest similarity strictly above
    ``threshold``, the earliest one on ties.

    Returns:
        {extra op index: missing op index}
    """
    extras = [k for k, op in enumerate(alignment) if op.op == rules.OP_EXTRA and k not in taken]
    pairs: Dict[int, int] = {}
    for k, op in enumerate(alignment):
        if op.op != rules.OP_MISSING or k in taken:
            continue
        target = correct[op.corr_index].text
        best: Optional[int] = None
        best_score = threshold
        for e in extras:
            if e in pairs:
                continue
            score = similarity(submitted[alignment[e].sub_index].text, target)
            if score > best_score:
                best, best_score = e, score
        if best is not None:
            pairs[best] = k
    return pairs


def build_analysis(results: Sequence[WordResult], config: ComparisonConfig) -> Analysis:
    """Collect word results into the Analysis buckets.

    Display segments are left empty; the renderer fills them in.
    """
    correct_words: List[str] = []
    errors: List[WordError] = []
    missing_words: List[str] = []
    extra_words: List[str] = []

    for r in results:
        if r.op == rules.OP_MATCH:
            correct_words.append(r.submitted.text)
            if r.punctuation_error:
                errors.append(
                    WordError(
                        kind=rules.PUNCTUATION,
                        submitted_text=r.submitted.punctuation,
                        correct_text=r.correct.punctuation,
                        votes=r.votes,
                        sub_index=r.submitted.index,
                        corr_index=r.correct.index,
                    )
                )
        elif r.op == rules.OP_EXTRA:
            if r.partner is None:
                extra_words.append(r.submitted.text)
            elif r.status == rules.CORRECT:
                correct_words.append(r.submitted.text)
            else:
                errors.append(
                    WordError(
                        kind=r.status,
                        submitted_text=r.submitted.text,
                        correct_text=r.correct.text,
                        votes=r.votes,
                        char_diff_positions=r.char_diff_positions,
                        sub_index=r.submitted.index,
                        corr_index=r.correct.index,
                    )
                )
        elif r.partner is None:
            missing_words.append(r.correct.text)

    total_votes = (
        sum(e.votes for e in errors)
        + config.votes_for(rules.EXTRA) * len(extra_words)
        + config.votes_for(rules.MISSING) * len(missing_words)
    )
    assert total_votes == sum(r.votes for r in results), "vote total out of sync with word results"

    return Analysis(
        correct_words=tuple(correct_words),
        errors=tuple(errors),
        missing_words=tuple(missing_words),
        extra_words=tuple(extra_words),
        total_votes=total_votes,
        word_results=tuple(results),
    )


def classify(
    alignment: Sequence[AlignmentOp],
    submitted: Sequence[Token],
    correct: Sequence[Token],
    config: Optional[ComparisonConfig] = None,
) -> Analysis:
    """Classify every alignment operation and score the submission.

    Order of resolution:
      1. matches are correct; missing/extra words with identical text are
         one moved word ("position")
      2. free extras and missings of the same run pair up as substitutions
      3. leftovers pair up across runs when similar enough
      4. substitutions are graded by their character differences
      5. whatever is left is an extra or a missing word

    Punctuation is not looked at here (see punctuation.apply_punctuation).

    Args:
        alignment: Output of the aligner for these token sequences
        submitted: Tokens of the submitted phrase
        correct: Tokens of the reference phrase
        config: Thresholds and vote weights (defaults if None)

    Returns:
        Analysis without punctuation errors or display segments
    """
    config = config or ComparisonConfig()
    alignment = list(alignment)
    _check_alignment(alignment, submitted, correct)

    moved = find_moved_words(alignment, submitted, correct)
    taken = set(moved) | set(moved.values())

    substitutions = pair_runs(alignment, taken)
    taken |= set(substitutions) | set(substitutions.values())

    recovered = recover_pairs(alignment, submitted, correct, taken, config.similarity_threshold)
    if recovered:
        logger.debug("Recovered %d non-adjacent substitution pair(s)", len(recovered))
    substitutions.update(recovered)

    # Grade every pair up front: the missing side may come before its extra side
    grades: Dict[int, Tuple[str, int, Tuple[int, ...]]] = {}
    partners: Dict[int, int] = {}
    for e, m in moved.items():
        grades[e] = (rules.POSITION, config.votes_for(rules.POSITION), ())
        partners[e], partners[m] = m, e
    for e, m in substitutions.items():
        sub_text = submitted[alignment[e].sub_index].text
        ref_text = correct[alignment[m].corr_index].text
        grades[e] = classify_pair(sub_text, ref_text, config)
        partners[e], partners[m] = m, e

    results: List[WordResult] = []
    for k, op in enumerate(alignment):
        if op.op == rules.OP_MATCH:
            results.append(
                WordResult(
                    op=op.op,
                    status=rules.CORRECT,
                    submitted=submitted[op.sub_index],
                    correct=correct[op.corr_index],
                )
            )
        elif op.op == rules.OP_EXTRA:
            sub_token = submitted[op.sub_index]
            if k in grades:
                status, votes, positions = grades[k]
                results.append(
                    WordResult(
                        op=op.op,
                        status=status,
                        submitted=sub_token,
                        correct=correct[alignment[partners[k]].corr_index],
                        votes=votes,
                        char_diff_positions=positions,
                        partner=partners[k],
                    )
                )
            else:
                results.append(
                    WordResult(op=op.op, status=rules.EXTRA, submitted=sub_token, votes=config.votes_for(rules.EXTRA))
                )
        else:
            ref_token = correct[op.corr_index]
            if k in partners:
                results.append(
                    WordResult(op=op.op, status=grades[partners[k]][0], correct=ref_token, partner=partners[k])
                )
            else:
                results.append(
                    WordResult(op=op.op, status=rules.MISSING, correct=ref_token, votes=config.votes_for(rules.MISSING))
                )

    return build_analysis(results, config)


def _check_alignment(
    alignment: Sequence[AlignmentOp], submitted: Sequence[Token], correct: Sequence[Token]
) -> None:
    # Every token must be consumed exactly once, in order
    sub_indices = [op.sub_index for op in alignment if op.sub_index is not None]
    corr_indices = [op.corr_index for op in alignment if op.corr_index is not None]
    assert sub_indices == list(range(len(submitted))), "alignment does not cover the submission"
    assert corr_indices == list(range(len(correct))), "alignment does not cover the reference"
