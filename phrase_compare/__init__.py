"""Phrase comparison engine for the French grammar impostor game."""
from .config import ComparisonConfig
from .engine import PhraseComparer, accuracy, analyze, render, render_segments
from .models import AlignmentOp, Analysis, DisplaySegment, Token, WordError, WordResult

__version__ = "0.1.0"

__all__ = [
    "AlignmentOp",
    "Analysis",
    "ComparisonConfig",
    "DisplaySegment",
    "PhraseComparer",
    "Token",
    "WordError",
    "WordResult",
    "accuracy",
    "analyze",
    "render",
    "render_segments",
]
