"""Token normalization utilities for alignment."""
from __future__ import annotations

import re
import unicodedata
from typing import List, Optional, Tuple


# Sentence-ending punctuation that is compared separately from words
SENTENCE_PUNCTUATION = {".", "!", "?"}

_TRAILING_PUNCTUATION_RE = re.compile(r"[.!?]+$")


def is_punctuation(token: str) -> bool:
    """Check if token consists only of sentence punctuation.

    Args:
        token: The token to check

    Returns:
        True for non-empty runs such as "!", "?!" or "..."
    """
    return bool(token) and all(ch in SENTENCE_PUNCTUATION for ch in token)


def normalize_phrase(phrase: Optional[str]) -> str:
    """Return the phrase in NFC form, treating None as an empty phrase.

    Decomposed accents ("e" + combining acute) compare equal to their
    precomposed form after this step. Case is preserved.
    """
    if not phrase:
        return ""
    return unicodedata.normalize("NFC", phrase)


def split_punctuation(word: str) -> Tuple[str, str]:
    """Split a word into its text and trailing sentence punctuation.

    Internal apostrophes and hyphens are kept: "qu'est-ce?" -> ("qu'est-ce", "?").

    Args:
        word: A whitespace-free chunk of a phrase

    Returns:
        (text, punctuation); punctuation is "" when the word has none
    """
    match = _TRAILING_PUNCTUATION_RE.search(word)
    if not match:
        return word, ""
    return word[: match.start()], match.group(0)


def extract_punctuation(phrase: Optional[str]) -> List[str]:
    """Trailing punctuation of each whitespace-separated chunk of a phrase.

    Example: "Hello! How are you?" -> ["!", "", "", "?"]
    """
    return [split_punctuation(chunk)[1] for chunk in normalize_phrase(phrase).split()]
