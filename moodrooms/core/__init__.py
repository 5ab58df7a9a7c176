"""Core functionality for mood classification and room matching"""

from .lexicon import DEFAULT_LEXICON, LexiconError, MoodCategory, MoodLexicon, MoodProfile
from .mood import ContextMatches, MatchResult, MoodClassifier
from .fetcher import Room, RoomCatalog
from .rank import RankedRoom, RoomRanker, match_mood_to_room

__all__ = [
    "DEFAULT_LEXICON",
    "LexiconError",
    "MoodCategory",
    "MoodLexicon",
    "MoodProfile",
    "ContextMatches",
    "MatchResult",
    "MoodClassifier",
    "Room",
    "RoomCatalog",
    "RankedRoom",
    "RoomRanker",
    "match_mood_to_room",
]
