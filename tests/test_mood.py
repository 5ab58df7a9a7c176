import pytest

from moodrooms.core.lexicon import MoodCategory, MoodLexicon, MoodProfile
from moodrooms.core.mood import MoodClassifier
from moodrooms.core.text import tokenize


def scores(classifier, text):
    return {r.category: r.score for r in classifier.score_categories(text)}


class TestIntensifiers:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("relaxed", 1.0),
            ("very relaxed", 1.3),
            ("very super happy", 1.6),
            ("pretty calm", 1.15),
            ("kind of tired", 1.15),
            ("a little sad", 1.05),
            ("not very happy", -1.3),
        ],
    )
    def test_multiplier(self, classifier, text, expected):
        assert classifier.find_intensifiers(tokenize(text)) == pytest.approx(expected)


def test_find_negations(classifier):
    assert classifier.find_negations(tokenize("I can't, never again")) == ["can't", "never"]
    assert classifier.find_negations(tokenize("all good")) == []


class TestClassify:
    @pytest.mark.parametrize("text", ["", "   ", "!!!", "... ?!"])
    def test_empty_input_is_no_match(self, classifier, text):
        assert classifier.classify(text) == []
        assert classifier.score_categories(text) == []
        assert classifier.best_match(text) is None

    def test_results_sorted_and_positive(self, classifier):
        results = classifier.classify("cozy rainy evening reading by the window")
        assert results
        assert all(r.score > 0 for r in results)
        assert [r.score for r in results] == sorted((r.score for r in results), reverse=True)

    def test_primary_term(self, classifier):
        best = classifier.best_match("relaxed")
        assert best.category is MoodCategory.CHILL
        assert best.score == pytest.approx(1.5 * 0.6)
        assert best.matched_terms == ["relaxed"]

    def test_negation_flips_sign(self, classifier):
        assert scores(classifier, "relaxed")[MoodCategory.CHILL] > 0
        assert scores(classifier, "not relaxed")[MoodCategory.CHILL] < 0
        assert MoodCategory.CHILL not in [r.category for r in classifier.classify("not relaxed")]

    def test_negation_window_edge(self, classifier):
        negated = {r.category: r for r in classifier.score_categories("i'm not feeling relaxed")}
        assert negated[MoodCategory.CHILL].negated
        assert negated[MoodCategory.CHILL].score < 0

        far = {r.category: r for r in classifier.score_categories("not today, i feel relaxed")}
        assert not far[MoodCategory.CHILL].negated
        assert far[MoodCategory.CHILL].score > 0

    def test_negated_primary_not_selected(self, classifier):
        assert scores(classifier, "not peaceful")[MoodCategory.PEACEFUL] < 0
        assert all(r.category is not MoodCategory.PEACEFUL for r in classifier.classify("not peaceful"))

    def test_intensifier_raises_score(self, classifier):
        assert scores(classifier, "very relaxed")[MoodCategory.CHILL] > scores(classifier, "relaxed")[MoodCategory.CHILL]

    def test_super_energetic_morning_workout(self, classifier):
        boosted = scores(classifier, "super energetic morning workout")[MoodCategory.ENERGETIC]
        plain = scores(classifier, "energetic")[MoodCategory.ENERGETIC]
        assert plain == pytest.approx(1.5)
        assert boosted > plain

    def test_rainy_afternoon(self, classifier):
        best = classifier.best_match("rainy afternoon with tea")
        assert best.category is MoodCategory.RAINY
        assert best.context_matches.weather == ["rainy"]
        assert best.context_matches.time_of_day == ["afternoon"]

    def test_sentence_pattern(self, classifier):
        best = classifier.best_match("Drinking hot cocoa")
        assert best.category is MoodCategory.WINTER
        assert best.score == pytest.approx(1.5 * 0.7)

    def test_sentence_pattern_must_match_whole_input(self, classifier):
        assert scores(classifier, "need to study")[MoodCategory.FOCUS] == pytest.approx(1.5 * 0.9)
        assert scores(classifier, "need to study tonight")[MoodCategory.FOCUS] == 0

    def test_mood_phrase(self, classifier):
        best = classifier.best_match("I want to relax")
        assert best.category is MoodCategory.CHILL
        assert best.score == pytest.approx(1.2 * 0.6)
        assert best.matched_terms == []

    def test_typo_tolerance(self, classifier):
        assert classifier.best_match("relaxd").category is MoodCategory.CHILL

    def test_repeatable(self, classifier):
        text = "super cozy winter evening by the fireplace"
        assert classifier.classify(text) == classifier.classify(text)

    def test_custom_lexicon(self):
        lexicon = MoodLexicon(profiles={MoodCategory.SAD: MoodProfile(("blue",), ("grey",), intensity=0.5)})
        classifier = MoodClassifier(lexicon)
        results = classifier.classify("feeling blue")
        assert [r.category for r in results] == [MoodCategory.SAD]
        assert results[0].score == pytest.approx(0.75)
        assert classifier.classify("happy") == []
