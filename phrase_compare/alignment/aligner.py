"""Alignment orchestration between a submitted phrase and its reference."""
from __future__ import annotations

from typing import List, Sequence

from phrase_compare.models.tokens import AlignmentOp, Token
from .edit_distance import align_sequences
from .tokenizer import tokenize


def align(submitted: Sequence[Token], correct: Sequence[Token]) -> List[AlignmentOp]:
    """Align submitted tokens to reference tokens by word text.

    Punctuation lives in Token.punctuation, so "monde." and "monde!" match.

    Args:
        submitted: Tokens of the submitted phrase
        correct: Tokens of the reference phrase

    Returns:
        List of AlignmentOp in forward order
    """
    ops = align_sequences([t.text for t in submitted], [t.text for t in correct])
    return [AlignmentOp(op=op, sub_index=si, corr_index=ci) for op, si, ci in ops]


def align_phrases(submission: str, reference: str) -> List[AlignmentOp]:
    """Tokenize both phrases and align them.

    Args:
        submission: The submitted phrase
        reference: The reference phrase

    Returns:
        List of AlignmentOp objects representing the alignment
    """
    return align(tokenize(submission), tokenize(reference))
