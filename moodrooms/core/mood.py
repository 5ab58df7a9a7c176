"""Mood classification: free text to ranked mood categories"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from moodrooms.core.lexicon import (
    CONTEXT_WEIGHTS,
    DEFAULT_LEXICON,
    INTENSIFIER_STEPS,
    PATTERN_WEIGHT,
    PHRASE_WEIGHT,
    PRIMARY_WEIGHT,
    RELATED_WEIGHT,
    MoodCategory,
    MoodLexicon,
    MoodProfile,
)
from moodrooms.core.text import MATCH_THRESHOLD, normalize, similarity, tokenize

logger = logging.getLogger(__name__)

# Max token distance between a negation word and a word it negates
NEGATION_WINDOW = 2


@dataclass
class ContextMatches:
    activities: List[str] = field(default_factory=list)
    locations: List[str] = field(default_factory=list)
    weather: List[str] = field(default_factory=list)
    time_of_day: List[str] = field(default_factory=list)
    seasons: List[str] = field(default_factory=list)


@dataclass
class MatchResult:
    category: MoodCategory
    score: float
    matched_terms: List[str] = field(default_factory=list)
    context_matches: ContextMatches = field(default_factory=ContextMatches)
    negated: bool = False


def _count_phrase(tokens: Sequence[str], phrase: str) -> int:
    words = phrase.split()
    n = len(words)
    if not n:
        return 0
    return sum(1 for i in range(len(tokens) - n + 1) if list(tokens[i:i + n]) == words)


class MoodClassifier:
    """Score user mood text against every configured mood category.

    The classifier holds nothing but its lexicon, so one instance can be
    shared by any number of callers.
    """

    def __init__(self, lexicon: MoodLexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def find_intensifiers(self, tokens: Sequence[str]) -> float:
        """Signed intensity multiplier; negative when the text carries a negation."""
        multiplier = 1.0
        for level, phrases in self.lexicon.intensifiers.items():
            step = INTENSIFIER_STEPS[level]
            for phrase in phrases:
                multiplier += step * _count_phrase(tokens, phrase)

        if any(t in self.lexicon.intensity_negations for t in tokens):
            return -multiplier
        return multiplier

    def find_negations(self, tokens: Sequence[str]) -> List[str]:
        return [t for t in tokens if t in self.lexicon.negation_words]

    def _negation_positions(self, tokens: Sequence[str]) -> List[int]:
        return [i for i, t in enumerate(tokens) if t in self.lexicon.negation_words]

    def _lexical_score(self, tokens: Sequence[str], profile: MoodProfile) -> Tuple[float, List[str], Set[int]]:
        score = 0.0
        matched: List[str] = []
        positions: Set[int] = set()
        for index, token in enumerate(tokens):
            if token in self.lexicon.negation_words:
                continue
            for terms, weight in ((profile.primary_terms, PRIMARY_WEIGHT), (profile.related_terms, RELATED_WEIGHT)):
                for term in terms:
                    sim = similarity(token, term)
                    if sim > MATCH_THRESHOLD:
                        score += sim * weight
                        matched.append(term)
                        positions.add(index)
        return score, matched, positions

    def _context_score(self, tokens: Sequence[str], profile: MoodProfile) -> Tuple[float, ContextMatches]:
        score = 0.0
        found: Dict[str, List[str]] = {}
        for dimension, terms in profile.context_terms().items():
            weight = CONTEXT_WEIGHTS[dimension]
            hits: List[str] = []
            for token in tokens:
                for term in terms:
                    sim = similarity(token, term)
                    if sim > MATCH_THRESHOLD:
                        score += sim * weight
                        hits.append(term)
            found[dimension] = hits
        return score, ContextMatches(**found)

    def _pattern_score(self, text: str, category: MoodCategory, profile: MoodProfile) -> float:
        score = 0.0
        for pattern in self.lexicon.compiled_patterns.get(category, ()):
            if pattern.match(text):
                score += PATTERN_WEIGHT
        for phrase in profile.mood_phrases:
            if phrase in text:
                score += PHRASE_WEIGHT
        return score

    def score_categories(self, text: str) -> List[MatchResult]:
        """Score every category, in lexicon order, including non-positive scores.

        Empty or punctuation-only text is not scored at all.
        """
        tokens = tokenize(text)
        if not tokens:
            return []

        normalized = normalize(text)
        multiplier = abs(self.find_intensifiers(tokens))
        negation_positions = self._negation_positions(tokens)

        results: List[MatchResult] = []
        for category, profile in self.lexicon.profiles.items():
            lexical, matched, positions = self._lexical_score(tokens, profile)
            contextual, context_matches = self._context_score(tokens, profile)
            patterns = self._pattern_score(normalized, category, profile)

            score = (lexical + contextual + patterns) * profile.intensity * multiplier

            # Coarse: any negated match flips the whole category
            negated = any(
                abs(pos - neg) <= NEGATION_WINDOW for pos in positions for neg in negation_positions
            )
            if negated:
                score = -score

            results.append(
                MatchResult(
                    category=category,
                    score=score,
                    matched_terms=matched,
                    context_matches=context_matches,
                    negated=negated,
                )
            )
        return results

    def classify(self, text: str) -> List[MatchResult]:
        """Positive-scoring categories, best first. Empty when nothing matches."""
        ranked = [r for r in self.score_categories(text) if r.score > 0]
        ranked.sort(key=lambda r: r.score, reverse=True)
        if ranked:
            logger.debug(
                "Classified %r as %s (%.3f), matched=%s",
                text,
                ranked[0].category.value,
                ranked[0].score,
                ranked[0].matched_terms,
            )
        else:
            logger.debug("No mood category matched %r", text)
        return ranked

    def best_match(self, text: str) -> Optional[MatchResult]:
        ranked = self.classify(text)
        return ranked[0] if ranked else None
