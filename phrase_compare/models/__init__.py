"""Data models shared by the alignment, scoring and rendering stages."""
from .analysis import Analysis, DisplaySegment, WordError, WordResult
from .tokens import AlignmentOp, Token

__all__ = ["AlignmentOp", "Analysis", "DisplaySegment", "Token", "WordError", "WordResult"]
