"""Data models for tokens and alignment operations."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Token:
    """A word extracted from a phrase.

    Attributes:
        text: Word used for alignment (trailing sentence punctuation removed)
        original_text: Word as typed, punctuation included (for display)
        index: Position in the phrase's word sequence
        punctuation: Trailing sentence punctuation ("" if none)
    """
    text: str
    original_text: str
    index: int
    punctuation: str = ""


@dataclass(frozen=True)
class AlignmentOp:
    """One step of a word alignment between a submission and a reference.

    Attributes:
        op: Operation type - "match", "missing" or "extra"
        sub_index: Index in the submitted sequence (None for "missing")
        corr_index: Index in the reference sequence (None for "extra")
    """
    op: str  # "match" | "missing" | "extra"
    sub_index: Optional[int] = None
    corr_index: Optional[int] = None

    @classmethod
    def match(cls, sub_index: int, corr_index: int) -> "AlignmentOp":
        return cls("match", sub_index, corr_index)

    @classmethod
    def missing(cls, corr_index: int) -> "AlignmentOp":
        return cls("missing", None, corr_index)

    @classmethod
    def extra(cls, sub_index: int) -> "AlignmentOp":
        return cls("extra", sub_index, None)
