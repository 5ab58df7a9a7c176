"""Picking the best room for a classified mood"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from moodrooms.core.fetcher import Room
from moodrooms.core.mood import MatchResult, MoodClassifier
from moodrooms.core.lexicon import MoodProfile
from moodrooms.core.text import MATCH_THRESHOLD, similarity, tokenize
from moodrooms.services.youtube import MAX_RESULTS, TitleLookup

logger = logging.getLogger(__name__)

NAME_MATCH_BOOST = 1.5
IDENTIFIER_MATCH_BOOST = 1.3

CONTEXT_BOOSTS = {
    "weather": 1.2,
    "time_of_day": 1.2,
    "activities": 1.3,
    "seasons": 1.4,
}
IDENTIFIER_PRIMARY_BOOST = 1.3
IDENTIFIER_RELATED_BOOST = 1.2

WORK_HINTS = ("study", "work")
WORK_HINT_BOOST = 1.4
TIME_HINTS = ("morning", "afternoon", "evening", "night")
WEATHER_HINTS = ("rain", "snow", "storm", "sunny", "cloudy")
HINT_BOOST = 1.3

TITLE_PRIMARY_BOOST = 1.4
TITLE_RELATED_BOOST = 1.2
TITLE_SEASON_BOOST = 1.3
TITLE_WEATHER_BOOST = 1.25
TITLE_WORD_BOOST = 1.35


@dataclass
class RankedRoom:
    room: Room
    score: float
    reasons: List[str] = field(default_factory=list)


class RoomRanker:
    """Re-rank rooms inside the winning mood category.

    ``title_lookup`` is optional; when given, playlist titles are fetched
    concurrently and any room whose lookup fails or runs past
    ``enrichment_timeout`` just goes without the title boost.
    """

    def __init__(
        self,
        title_lookup: Optional[TitleLookup] = None,
        max_workers: int = 8,
        enrichment_timeout: float = 8.0,
    ):
        self.title_lookup = title_lookup
        self.max_workers = max_workers
        self.enrichment_timeout = enrichment_timeout
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    def __enter__(self) -> "RoomRanker":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        with self._executor_lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            # Do not block on lookups that outlived the budget
            executor.shutdown(wait=False)

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=max(1, self.max_workers), thread_name_prefix="title-lookup"
                )
            return self._executor

    def candidates(self, match: MatchResult, rooms: Sequence[Room]) -> List[Room]:
        return [room for room in rooms if room.mood is not None and room.mood == match.category]

    def rank_rooms(
        self, text: str, match: MatchResult, profile: MoodProfile, rooms: Sequence[Room]
    ) -> List[RankedRoom]:
        candidates = self.candidates(match, rooms)
        if not candidates:
            return []

        tokens = tokenize(text)
        titles = self._fetch_titles(candidates)

        ranked = []
        for room in candidates:
            ranked_room = RankedRoom(room=room, score=match.score)
            self._score_room(ranked_room, text.lower(), tokens, match, profile)
            room_titles = titles.get(room.id)
            if room_titles:
                self._score_titles(ranked_room, tokens, room_titles, profile)
            ranked.append(ranked_room)

        # sort is stable, so catalog order breaks ties
        ranked.sort(key=lambda r: r.score, reverse=True)
        return ranked

    def _score_room(
        self, ranked: RankedRoom, text: str, tokens: Sequence[str], match: MatchResult, profile: MoodProfile
    ) -> None:
        name = ranked.room.name.lower()
        identifier = (ranked.room.playlist_id or "").lower()

        context = match.context_matches
        for dimension, boost in CONTEXT_BOOSTS.items():
            terms = getattr(context, dimension)
            if any(t in name or t in identifier for t in terms):
                ranked.score *= boost
                ranked.reasons.append(dimension)

        if identifier:
            if any(term in identifier for term in profile.primary_terms):
                ranked.score *= IDENTIFIER_PRIMARY_BOOST
                ranked.reasons.append("primary term in playlist")
            if any(term in identifier for term in profile.related_terms):
                ranked.score *= IDENTIFIER_RELATED_BOOST
                ranked.reasons.append("related term in playlist")

        self._boost_word_matches(ranked, tokens, tokenize(name), NAME_MATCH_BOOST, "name")

        if identifier:
            self._boost_word_matches(ranked, tokens, tokenize(identifier), IDENTIFIER_MATCH_BOOST, "playlist")

            if any(h in text for h in WORK_HINTS) and any(h in identifier for h in WORK_HINTS):
                ranked.score *= WORK_HINT_BOOST
                ranked.reasons.append("study/work")
            for hint in TIME_HINTS + WEATHER_HINTS:
                if hint in text and hint in identifier:
                    ranked.score *= HINT_BOOST
                    ranked.reasons.append(hint)

    def _boost_word_matches(
        self, ranked: RankedRoom, tokens: Sequence[str], words: Sequence[str], boost: float, label: str
    ) -> None:
        for token in tokens:
            for word in words:
                if similarity(token, word) > MATCH_THRESHOLD:
                    ranked.score *= boost
                    ranked.reasons.append(f"{label}:{word}")

    def _score_titles(
        self, ranked: RankedRoom, tokens: Sequence[str], titles: Sequence[str], profile: MoodProfile
    ) -> None:
        for title in titles:
            title = title.lower()
            for terms, boost in (
                (profile.primary_terms, TITLE_PRIMARY_BOOST),
                (profile.related_terms, TITLE_RELATED_BOOST),
                (profile.season_terms, TITLE_SEASON_BOOST),
                (profile.weather_terms, TITLE_WEATHER_BOOST),
            ):
                for term in terms:
                    if term in title:
                        ranked.score *= boost
            self._boost_word_matches(ranked, tokens, tokenize(title), TITLE_WORD_BOOST, "title")

    def _fetch_titles(self, rooms: Sequence[Room]) -> Dict[str, List[str]]:
        if self.title_lookup is None:
            return {}

        lookup = self.title_lookup
        executor = self._get_executor()
        futures = {executor.submit(lookup.titles, room.playlist_id, MAX_RESULTS): room for room in rooms}
        done, not_done = wait(futures, timeout=self.enrichment_timeout)
        for future in not_done:
            future.cancel()
            logger.warning("Title lookup for %s timed out", futures[future].id)

        titles: Dict[str, List[str]] = {}
        for future in done:
            room = futures[future]
            response = future.result()
            if response.success and response.titles:
                titles[room.id] = response.titles
        return titles


def match_mood_to_room(
    text: str,
    rooms: Sequence[Room],
    classifier: Optional[MoodClassifier] = None,
    title_lookup: Optional[TitleLookup] = None,
    ranker: Optional[RoomRanker] = None,
) -> Optional[Room]:
    """Best room for the mood described in ``text``, or None.

    None means no category scored positive or no room carries the winning
    category; callers pick their own fallback. Pass ``ranker`` to reuse one
    across calls; otherwise a ranker over ``title_lookup`` is built and closed
    here.
    """
    classifier = classifier or MoodClassifier()

    match = classifier.best_match(text)
    if match is None:
        return None

    profile = classifier.lexicon.profile(match.category)
    if ranker is None:
        with RoomRanker(title_lookup) as owned:
            ranked = owned.rank_rooms(text, match, profile, rooms)
    else:
        ranked = ranker.rank_rooms(text, match, profile, rooms)
    if not ranked:
        logger.info("No rooms available for mood %s", match.category.value)
        return None

    best = ranked[0]
    logger.debug(
        "Mood match: input=%r mood=%s score=%.3f matched=%s context=%s rooms=%d selected=%s scores=%s",
        text,
        match.category.value,
        match.score,
        match.matched_terms,
        match.context_matches,
        len(ranked),
        best.room.name,
        [(r.room.name, round(r.score, 3)) for r in ranked],
    )
    return best.room
