"""Position-by-position character comparison."""
from __future__ import annotations

from typing import List, Optional


def diff_positions(submitted: str, correct: str) -> List[int]:
    """Offsets where two words differ, compared position by position.

    Positions past the end of the shorter word always differ:
    "sui" vs "suis" -> [3].
    """
    longest = max(len(submitted), len(correct))
    return [
        i for i in range(longest)
        if i >= len(submitted) or i >= len(correct) or submitted[i] != correct[i]
    ]


def similarity(word1: str, word2: str) -> float:
    """Matching positions over the longer length, in [0, 1].

    "hello" vs "hallo" -> 0.8. Empty words have no similarity.
    """
    if not word1 or not word2:
        return 0.0
    matches = sum(1 for a, b in zip(word1, word2) if a == b)
    return matches / max(len(word1), len(word2))


def phrase_accuracy(submission: Optional[str], reference: Optional[str]) -> int:
    """Count of identical characters at identical positions, up to the shorter phrase.

    Legacy score kept for display; independent of the vote system.
    """
    if not submission or not reference:
        return 0
    return sum(1 for a, b in zip(submission, reference) if a == b)
