"""End-to-end properties of the comparison pipeline."""

import pytest

import phrase_compare
from phrase_compare import rules
from phrase_compare.alignment import tokenize
from phrase_compare.models import Analysis

PHRASES = [
    ("Il fait beau aujourd'hui!", "Il fait beau aujourd'hui!"),
    ("Il est beau aujourd'hui!", "Il fait beau aujourd'hui!"),
    ("Je suis", "Je suis très heureux"),
    ("très Je suis heureux", "Je suis très heureux"),
    ("Je mnage le pain", "Je le mange pain"),
    ("Je vais y maintenant.", "J'y vais maintenant."),
    ("Je suis peur des zombies.", "J'ai peur des zombies."),
    ("Qu'est-ce que tu fais? Oh, rien!", "Qu'est-ce que tu fais? Oh, rien du tout!"),
    ("", "On va au camp demain."),
    ("On va à camp demain.", ""),
]


def word_errors(analysis):
    return [e for e in analysis.errors if e.kind != rules.PUNCTUATION]


class TestEmptyInput:

    @pytest.mark.parametrize("submission,reference", [("", ""), (None, None), ("  ", None), ("!", "?")])
    def test_empty_analysis(self, comparer, submission, reference):
        assert comparer.analyze(submission, reference) == Analysis()

    def test_none_treated_as_empty(self, comparer):
        analysis = comparer.analyze(None, "Bonjour")
        assert analysis.missing_words == ("Bonjour",)
        assert analysis.total_votes == 2


class TestProperties:

    @pytest.mark.parametrize("phrase", [p for _, p in PHRASES if p])
    def test_identity_scores_zero(self, comparer, phrase):
        analysis = comparer.analyze(phrase, phrase)
        assert analysis.total_votes == 0
        assert analysis.errors == ()
        assert all(s.type == rules.CORRECT for s in analysis.display_segments)

    @pytest.mark.parametrize("submission,reference", PHRASES)
    def test_every_word_accounted_for_once(self, comparer, submission, reference):
        analysis = comparer.analyze(submission, reference)
        paired = len(word_errors(analysis))
        assert len(analysis.correct_words) + paired + len(analysis.extra_words) == len(tokenize(submission))
        assert len(analysis.correct_words) + paired + len(analysis.missing_words) == len(tokenize(reference))

    @pytest.mark.parametrize("submission,reference", PHRASES)
    def test_total_is_sum_of_penalties(self, comparer, submission, reference):
        analysis = comparer.analyze(submission, reference)
        expected = (
            sum(e.votes for e in analysis.errors)
            + rules.VOTE_WEIGHTS[rules.EXTRA] * len(analysis.extra_words)
            + rules.VOTE_WEIGHTS[rules.MISSING] * len(analysis.missing_words)
        )
        assert analysis.total_votes == expected

    @pytest.mark.parametrize("submission,reference", PHRASES)
    def test_deterministic(self, comparer, submission, reference):
        assert comparer.analyze(submission, reference) == comparer.analyze(submission, reference)

    @pytest.mark.parametrize("submission,reference", PHRASES)
    def test_error_votes_follow_kind(self, comparer, submission, reference):
        for err in comparer.analyze(submission, reference).errors:
            assert err.votes == rules.VOTE_WEIGHTS[err.kind]


class TestScenarios:

    def test_weather_round(self, comparer):
        analysis = comparer.analyze("Il est beau aujourd'hui!", "Il fait beau aujourd'hui!")
        assert [(e.kind, e.submitted_text, e.correct_text) for e in analysis.errors] == [
            (rules.MULTI_CHAR, "est", "fait")
        ]
        assert analysis.correct_words == ("Il", "beau", "aujourd'hui")
        assert analysis.total_votes == 2

    def test_decomposed_accents_match(self, comparer):
        analysis = comparer.analyze("Il a trop excite\u0301!", "Il a trop excit\u00e9!")
        assert analysis.total_votes == 0

    def test_to_dict_is_json_ready(self, comparer):
        data = comparer.analyze("Bonjour le morde", "Bonjour le monde").to_dict()
        assert data["total_votes"] == 1
        assert data["errors"][0]["kind"] == rules.SINGLE_CHAR
        assert data["errors"][0]["char_diff_positions"] == [2]
        assert "word_results" not in data

    def test_to_dict_with_word_results(self, comparer):
        data = comparer.analyze("Il est beau", "Il fait beau").to_dict(include_word_results=True)
        assert [r["op"] for r in data["word_results"]] == ["match", "extra", "missing", "match"]
        assert data["word_results"][1]["partner"] == 2


class TestModuleFunctions:

    def test_analyze(self):
        assert phrase_compare.analyze("Il est beau", "Il fait beau").total_votes == 2

    def test_render(self):
        assert phrase_compare.render("Il fait beau", "Il fait beau") == "Il fait beau"

    def test_render_segments(self):
        assert len(phrase_compare.render_segments("Je suis", "Je suis là")) == 3

    def test_accuracy(self):
        assert phrase_compare.accuracy("hello", "hallo") == 4
        assert phrase_compare.accuracy(None, "hallo") == 0

    def test_custom_config(self):
        weights = dict(rules.VOTE_WEIGHTS, extra=3)
        comparer = phrase_compare.PhraseComparer(phrase_compare.ComparisonConfig(vote_weights=weights))
        assert comparer.analyze("Je suis là", "Je suis").total_votes == 3
