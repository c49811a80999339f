"""Alignment utilities for matching a submitted phrase to its reference."""
from .aligner import align, align_phrases
from .tokenizer import tokenize

__all__ = ["align", "align_phrases", "tokenize"]
