"""Display segments and inline-styled markup for an analysis."""
from __future__ import annotations

import html
from typing import List, Optional, Sequence

from . import rules
from .alignment.normalizer import split_punctuation
from .models.analysis import Analysis, DisplaySegment, WordResult


def segments_for(result: WordResult) -> List[DisplaySegment]:
    """Display segments for one word result, before merging."""
    status = result.status

    if result.op == rules.OP_MATCH:
        if result.punctuation_error:
            return [
                DisplaySegment(
                    type=rules.PUNCTUATION,
                    text=result.submitted.original_text,
                    correction_text=result.correct.original_text,
                )
            ]
        return [DisplaySegment(type=rules.CORRECT, text=result.submitted.original_text)]

    if result.op == rules.OP_EXTRA:
        if result.partner is None:
            return [DisplaySegment(type=rules.EXTRA, text=result.submitted.original_text)]
        if status == rules.CORRECT:
            return [DisplaySegment(type=rules.CORRECT, text=result.submitted.original_text)]
        if status == rules.POSITION:
            # Struck through where it was typed; the insert shows where it belongs
            return [
                DisplaySegment(
                    type=rules.POSITION,
                    text=result.submitted.original_text,
                    correction_text=result.correct.original_text,
                )
            ]
        # Substitution: wrong word immediately followed by the right one
        return [
            DisplaySegment(
                type=status,
                text=result.submitted.original_text,
                correction_text=result.correct.original_text,
                char_positions=result.char_diff_positions,
            ),
            DisplaySegment(type=rules.MISSING, text=result.correct.original_text),
        ]

    # Missing side
    if result.partner is None or status == rules.POSITION:
        return [DisplaySegment(type=rules.MISSING, text=result.correct.original_text)]
    # Substitution partner: already shown with its extra side
    return []


def merge_missing(segments: Sequence[DisplaySegment]) -> List[DisplaySegment]:
    """Merge consecutive missing-word segments into one space-joined segment."""
    merged: List[DisplaySegment] = []
    for seg in segments:
        if merged and seg.type == rules.MISSING and merged[-1].type == rules.MISSING:
            merged[-1] = DisplaySegment(type=rules.MISSING, text=f"{merged[-1].text} {seg.text}")
        else:
            merged.append(seg)
    return merged


def render(analysis: Analysis) -> List[DisplaySegment]:
    """Build the ordered display diff of an analysis.

    Segments follow the submitted word order; missing words sit next to
    the matched word the alignment placed them after.

    Args:
        analysis: Classified analysis (word_results must be populated)

    Returns:
        List of DisplaySegment
    """
    segments: List[DisplaySegment] = []
    for result in analysis.word_results:
        segments.extend(segments_for(result))
    return merge_missing(segments)


def _span(text: str, style: str) -> str:
    return f'<span style="{style}">{html.escape(text, quote=False)}</span>'


def highlight_characters(text: str, positions: Sequence[int]) -> str:
    """Wrap the characters of ``text`` at ``positions`` in error spans."""
    marked = set(positions)
    out = []
    for i, ch in enumerate(text):
        if i in marked:
            out.append(_span(ch, rules.SEGMENT_STYLES[rules.SINGLE_CHAR]))
        else:
            out.append(html.escape(ch, quote=False))
    return "".join(out)


def highlight_punctuation(text: str, correction_text: Optional[str]) -> str:
    """Highlight the wrong trailing punctuation and show the expected one."""
    word, punctuation = split_punctuation(text.replace(" ", ""))
    expected = split_punctuation((correction_text or "").replace(" ", ""))[1]
    out = [html.escape(word, quote=False)]
    if punctuation:
        out.append(_span(punctuation, rules.SEGMENT_STYLES[rules.PUNCTUATION]))
    if expected:
        out.append(_span(expected, rules.SEGMENT_STYLES[rules.MISSING]))
    return "".join(out)


def segment_markup(segment: DisplaySegment) -> str:
    """Inline-styled HTML for one segment."""
    if segment.type == rules.CORRECT:
        return html.escape(segment.text, quote=False)
    if segment.type == rules.SINGLE_CHAR:
        return highlight_characters(segment.text, segment.char_positions)
    if segment.type == rules.PUNCTUATION:
        return highlight_punctuation(segment.text, segment.correction_text)
    return _span(segment.text, rules.SEGMENT_STYLES[segment.type])


def to_markup(analysis: Analysis) -> str:
    """Render an analysis as a single string of inline-styled spans.

    Callers wanting their own styling should use ``render`` instead.
    """
    segments = analysis.display_segments or tuple(render(analysis))
    return " ".join(segment_markup(seg) for seg in segments)
