import pytest

from moodrooms.core.text import is_match, levenshtein, normalize, similarity, tokenize


class TestTokenize:
    def test_lowercases_and_splits_whitespace_runs(self):
        assert tokenize("  Rainy\tAfternoon   with TEA ") == ["rainy", "afternoon", "with", "tea"]

    def test_strips_surrounding_punctuation(self):
        assert tokenize("Relaxed!! (very) tea...") == ["relaxed", "very", "tea"]

    def test_keeps_inner_apostrophes_and_hyphens(self):
        assert tokenize("Can't feel laid-back") == ["can't", "feel", "laid-back"]

    @pytest.mark.parametrize("text", ["", "   ", "!!! ... ?", "—"])
    def test_empty_or_punctuation_only(self, text):
        assert tokenize(text) == []

    def test_normalize_rejoins_with_single_spaces(self):
        assert normalize("Drinking   hot  cocoa!") == "drinking hot cocoa"


class TestSimilarity:
    @pytest.mark.parametrize("word", ["", "a", "relaxed", "laid-back"])
    def test_identity(self, word):
        assert similarity(word, word) == 1.0

    def test_empty_strings(self):
        assert similarity("", "") == 1.0
        assert similarity("", "x") == 0.0
        assert similarity("x", "") == 0.0

    @pytest.mark.parametrize(
        "a,b",
        [("rain", "rainy"), ("relaxd", "relaxed"), ("cozy", "cosy"), ("calm", "winter"), ("tea", "drinking tea")],
    )
    def test_symmetric(self, a, b):
        assert similarity(a, b) == similarity(b, a)

    def test_containment_scores_point_eight(self):
        assert similarity("rain", "rainy") == 0.8

    def test_containment_is_not_a_match(self):
        assert not is_match("rain", "rainy")

    def test_single_typo_in_long_word_matches(self):
        assert similarity("relaxd", "relaxed") == pytest.approx(1 - 1 / 7)
        assert is_match("relaxd", "relaxed")

    def test_unrelated_words_do_not_match(self):
        assert not is_match("workout", "working")


def test_levenshtein():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("same", "same") == 0
