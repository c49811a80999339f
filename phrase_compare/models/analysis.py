"""Data models for classified comparison results."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from .tokens import Token


@dataclass(frozen=True)
class WordError:
    """A classified discrepancy between a submitted and a reference word.

    Attributes:
        kind: "single_char", "multi_char", "position" or "punctuation"
        submitted_text: Submitted word (or punctuation for "punctuation")
        correct_text: Reference word (or punctuation for "punctuation")
        votes: Penalty weight of this error
        char_diff_positions: Character offsets that differ (single/multi char only)
        sub_index: Word index in the submission
        corr_index: Word index in the reference
    """
    kind: str
    submitted_text: str
    correct_text: str
    votes: int
    char_diff_positions: Tuple[int, ...] = ()
    sub_index: Optional[int] = None
    corr_index: Optional[int] = None


@dataclass(frozen=True)
class WordResult:
    """How one alignment operation was resolved.

    Paired operations (a substitution or a moved word) produce two results
    that point at each other through ``partner``. The extra side carries the
    votes and both tokens; the missing side carries only its reference token.
    """
    op: str  # "match" | "missing" | "extra"
    status: str  # "correct" | "single_char" | "multi_char" | "position" | "extra" | "missing"
    submitted: Optional[Token] = None
    correct: Optional[Token] = None
    votes: int = 0
    char_diff_positions: Tuple[int, ...] = ()
    partner: Optional[int] = None
    punctuation_error: bool = False


@dataclass(frozen=True)
class DisplaySegment:
    """One renderable span of the diff."""
    type: str
    text: str
    correction_text: Optional[str] = None
    char_positions: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Analysis:
    """Result of comparing a submission against a reference phrase.

    Attributes:
        correct_words: Words matched exactly
        errors: Classified word and punctuation errors
        missing_words: Reference words absent from the submission
        extra_words: Submitted words absent from the reference
        total_votes: Sum of all penalties
        display_segments: Ordered diff for display
        word_results: Per-operation resolution, in alignment order
    """
    correct_words: Tuple[str, ...] = ()
    errors: Tuple[WordError, ...] = ()
    missing_words: Tuple[str, ...] = ()
    extra_words: Tuple[str, ...] = ()
    total_votes: int = 0
    display_segments: Tuple[DisplaySegment, ...] = ()
    word_results: Tuple[WordResult, ...] = ()

    def to_dict(self, include_word_results: bool = False) -> Dict[str, Any]:
        """JSON-ready representation (tuples become lists)."""
        out = {
            "correct_words": list(self.correct_words),
            "errors": [asdict(e) for e in self.errors],
            "missing_words": list(self.missing_words),
            "extra_words": list(self.extra_words),
            "total_votes": self.total_votes,
            "display_segments": [asdict(s) for s in self.display_segments],
        }
        for err in out["errors"]:
            err["char_diff_positions"] = list(err["char_diff_positions"])
        for seg in out["display_segments"]:
            seg["char_positions"] = list(seg["char_positions"])
        if include_word_results:
            out["word_results"] = [asdict(r) for r in self.word_results]
        return out
