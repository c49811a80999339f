"""Classification rules and vote weights for phrase comparison."""
from __future__ import annotations

# Re-export SENTENCE_PUNCTUATION from alignment.normalizer for convenience
from .alignment.normalizer import SENTENCE_PUNCTUATION

# Alignment operations
OP_MATCH = "match"
OP_MISSING = "missing"
OP_EXTRA = "extra"

# Word statuses / error kinds
CORRECT = "correct"
SINGLE_CHAR = "single_char"
MULTI_CHAR = "multi_char"
POSITION = "position"
EXTRA = "extra"
MISSING = "missing"
PUNCTUATION = "punctuation"

# Penalty per error instance. Missing words cost more than extra words:
# a wholly absent word is worse than a present-but-wrong one.
VOTE_WEIGHTS = {
    SINGLE_CHAR: 1,
    MULTI_CHAR: 2,
    POSITION: 1,
    EXTRA: 1,
    MISSING: 2,
    PUNCTUATION: 1,
}

# Words this short (or shorter) never qualify as a single-character typo ("et" -> "es")
SHORT_WORD_MAX_LENGTH = 3

# Minimum positional similarity (exclusive) for pairing non-adjacent extra/missing words
SIMILARITY_THRESHOLD = 0.5

# Inline styles used by the markup renderer
ERROR_COLOR = "#ff6b6b"
INSERT_COLOR = "#d3d3d3"
SEGMENT_STYLES = {
    SINGLE_CHAR: f"color: {ERROR_COLOR};",
    MULTI_CHAR: f"color: {ERROR_COLOR}; text-decoration: line-through;",
    POSITION: "text-decoration: line-through;",
    EXTRA: f"color: {ERROR_COLOR}; text-decoration: line-through;",
    MISSING: f"color: {INSERT_COLOR}; text-decoration: underline;",
    PUNCTUATION: f"color: {ERROR_COLOR};",
}
