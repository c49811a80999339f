"""Tokenization and punctuation normalization tests."""

from phrase_compare.alignment.normalizer import (
    extract_punctuation,
    is_punctuation,
    normalize_phrase,
    split_punctuation,
)
from phrase_compare.alignment.tokenizer import tokenize


# ============================================================================
# TestNormalizer
# ============================================================================

class TestNormalizer:

    def test_split_trailing_punctuation(self):
        assert split_punctuation("monde!") == ("monde", "!")
        assert split_punctuation("quoi?!") == ("quoi", "?!")
        assert split_punctuation("monde") == ("monde", "")

    def test_internal_apostrophe_and_hyphen_kept(self):
        assert split_punctuation("qu'est-ce?") == ("qu'est-ce", "?")
        assert split_punctuation("aujourd'hui!") == ("aujourd'hui", "!")

    def test_comma_is_part_of_the_word(self):
        assert split_punctuation("Oh,") == ("Oh,", "")

    def test_is_punctuation(self):
        assert is_punctuation("!")
        assert is_punctuation("...")
        assert not is_punctuation("")
        assert not is_punctuation("a!")

    def test_extract_punctuation(self):
        assert extract_punctuation("Hello! How are you?") == ["!", "", "", "?"]
        assert extract_punctuation(None) == []

    def test_normalize_composes_accents(self):
        assert normalize_phrase("cafe\u0301") == "caf\u00e9"
        assert normalize_phrase(None) == ""


# ============================================================================
# TestTokenize
# ============================================================================

class TestTokenize:

    def test_words_and_indices(self):
        tokens = tokenize("Il fait beau aujourd'hui!")
        assert [t.text for t in tokens] == ["Il", "fait", "beau", "aujourd'hui"]
        assert [t.index for t in tokens] == [0, 1, 2, 3]
        assert tokens[-1].punctuation == "!"
        assert tokens[-1].original_text == "aujourd'hui!"

    def test_extra_whitespace_ignored(self):
        tokens = tokenize("  Je   suis\theureux \n")
        assert [t.text for t in tokens] == ["Je", "suis", "heureux"]

    def test_standalone_punctuation_joins_previous_word(self):
        tokens = tokenize("Il fait beau !")
        assert len(tokens) == 3
        assert tokens[-1].text == "beau"
        assert tokens[-1].punctuation == "!"
        assert tokens[-1].original_text == "beau !"

    def test_standalone_punctuation_run(self):
        tokens = tokenize("Vraiment ?! Oui ...")
        assert [t.text for t in tokens] == ["Vraiment", "Oui"]
        assert [t.punctuation for t in tokens] == ["?!", "..."]

    def test_leading_punctuation_dropped(self):
        tokens = tokenize("! Bonjour")
        assert [t.text for t in tokens] == ["Bonjour"]
        assert tokens[0].index == 0

    def test_empty_and_none(self):
        assert tokenize("") == []
        assert tokenize(None) == []
        assert tokenize("   ") == []

    def test_punctuation_only(self):
        assert tokenize("!?") == []

    def test_case_preserved(self):
        assert [t.text for t in tokenize("Bonjour bonjour")] == ["Bonjour", "bonjour"]
