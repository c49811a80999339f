"""Phrase tokenization for alignment."""
from __future__ import annotations

import re
from typing import List, Optional

from phrase_compare.models.tokens import Token
from .normalizer import is_punctuation, normalize_phrase, split_punctuation


def tokenize(phrase: Optional[str]) -> List[Token]:
    """Tokenize a phrase into words, moving trailing punctuation to a side channel.

    Example: "Il fait beau !" -> [Il, fait, beau(punctuation="!")]

    Punctuation typed as its own chunk (French spacing before "!" and "?")
    belongs to the preceding word. Punctuation with no preceding word is
    dropped, so a punctuation-only phrase has no tokens.

    Args:
        phrase: The phrase to tokenize (None is treated as empty)

    Returns:
        List of tokens in phrase order, indexed from 0
    """
    tokens: List[Token] = []
    text = normalize_phrase(phrase).strip()
    if not text:
        return tokens

    for chunk in re.split(r"\s+", text):
        if not chunk:
            continue

        if is_punctuation(chunk):
            # Standalone punctuation: attach to the previous word
            if tokens:
                prev = tokens[-1]
                tokens[-1] = Token(
                    text=prev.text,
                    original_text=f"{prev.original_text} {chunk}",
                    index=prev.index,
                    punctuation=prev.punctuation + chunk,
                )
            continue

        word, punctuation = split_punctuation(chunk)
        tokens.append(Token(text=word, original_text=chunk, index=len(tokens), punctuation=punctuation))

    return tokens
