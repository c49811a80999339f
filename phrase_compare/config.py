"""Comparison configuration.

All tunable numbers of the engine live in one frozen dataclass so that a
comparer never carries anything but constant configuration. Defaults come
from ``rules.py``; deployments can override them through environment
variables:

    PHRASE_COMPARE_SHORT_WORD_MAX_LENGTH=3
    PHRASE_COMPARE_SIMILARITY_THRESHOLD=0.5
    PHRASE_COMPARE_VOTE_WEIGHTS="missing=2,extra=1"
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from . import rules

logger = logging.getLogger(__name__)

ENV_SHORT_WORD_MAX_LENGTH = "PHRASE_COMPARE_SHORT_WORD_MAX_LENGTH"
ENV_SIMILARITY_THRESHOLD = "PHRASE_COMPARE_SIMILARITY_THRESHOLD"
ENV_VOTE_WEIGHTS = "PHRASE_COMPARE_VOTE_WEIGHTS"


@dataclass(frozen=True)
class ComparisonConfig:
    """Thresholds and vote weights used by the classifier."""

    short_word_max_length: int = rules.SHORT_WORD_MAX_LENGTH  # Words this long or shorter never count as single-char typos
    similarity_threshold: float = rules.SIMILARITY_THRESHOLD  # Exclusive lower bound for recovering non-adjacent pairs
    vote_weights: Dict[str, int] = field(default_factory=lambda: dict(rules.VOTE_WEIGHTS))

    def __post_init__(self) -> None:
        if self.short_word_max_length < 0:
            raise ValueError(f"short_word_max_length must be >= 0, got {self.short_word_max_length}")
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError(f"similarity_threshold must be within [0, 1], got {self.similarity_threshold}")
        missing = set(rules.VOTE_WEIGHTS) - set(self.vote_weights)
        if missing:
            raise ValueError(f"vote_weights is missing kinds: {sorted(missing)}")
        for kind, votes in self.vote_weights.items():
            if votes < 0:
                raise ValueError(f"vote weight for {kind!r} must be >= 0, got {votes}")

    def votes_for(self, kind: str) -> int:
        """Vote weight of an error kind."""
        return self.vote_weights[kind]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ComparisonConfig":
        """Build a config from PHRASE_COMPARE_* environment variables.

        Unset variables keep their defaults. Unparsable values raise ValueError.
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        raw = env.get(ENV_SHORT_WORD_MAX_LENGTH)
        if raw:
            kwargs["short_word_max_length"] = _parse(raw, int, ENV_SHORT_WORD_MAX_LENGTH)

        raw = env.get(ENV_SIMILARITY_THRESHOLD)
        if raw:
            kwargs["similarity_threshold"] = _parse(raw, float, ENV_SIMILARITY_THRESHOLD)

        raw = env.get(ENV_VOTE_WEIGHTS)
        if raw:
            weights = dict(rules.VOTE_WEIGHTS)
            weights.update(parse_vote_weights(raw))
            kwargs["vote_weights"] = weights

        if kwargs:
            logger.info("Comparison config overridden from environment: %s", sorted(kwargs))
        return cls(**kwargs)


def parse_vote_weights(raw: str) -> Dict[str, int]:
    """Parse "kind=votes" pairs separated by commas.

    Example: "missing=2, extra=1" -> {"missing": 2, "extra": 1}
    """
    weights: Dict[str, int] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        kind, sep, votes = item.partition("=")
        kind = kind.strip()
        if not sep or kind not in rules.VOTE_WEIGHTS:
            raise ValueError(f"Invalid vote weight entry {item!r} in {ENV_VOTE_WEIGHTS}")
        weights[kind] = _parse(votes.strip(), int, ENV_VOTE_WEIGHTS)
    return weights


def _parse(raw: str, kind, name: str):
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f"{name} must be {kind.__name__}, got {raw!r}") from None
