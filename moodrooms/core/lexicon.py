"""Mood categories, their word lists and the compiled lexicon"""

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple


class LexiconError(ValueError):
    """Raised when the lexicon tables are inconsistent"""


class MoodCategory(str, Enum):
    CHILL = "chill"
    UPBEAT = "upbeat"
    PEACEFUL = "peaceful"
    ENERGETIC = "energetic"
    WINTER = "winter"
    RAINY = "rainy"
    FOCUS = "focus"
    SAD = "sad"
    AUTUMN = "autumn"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["MoodCategory"]:
        if not value:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


# Per-match weights
PRIMARY_WEIGHT = 1.5
RELATED_WEIGHT = 0.8
PATTERN_WEIGHT = 1.5
PHRASE_WEIGHT = 1.2

CONTEXT_WEIGHTS = {
    "activities": 1.0,
    "locations": 0.8,
    "weather": 1.2,
    "time_of_day": 0.6,
    "seasons": 1.5,
}

INTENSIFIER_STEPS = {"high": 0.30, "medium": 0.15, "low": 0.05}


@dataclass(frozen=True)
class MoodProfile:
    primary_terms: Tuple[str, ...]
    related_terms: Tuple[str, ...]
    activity_terms: Tuple[str, ...] = ()
    location_terms: Tuple[str, ...] = ()
    weather_terms: Tuple[str, ...] = ()
    time_of_day_terms: Tuple[str, ...] = ()
    season_terms: Tuple[str, ...] = ()
    intensity: float = 1.0
    sentence_patterns: Tuple[str, ...] = ()
    mood_phrases: Tuple[str, ...] = ()

    def context_terms(self) -> Dict[str, Tuple[str, ...]]:
        """Contextual term lists keyed like CONTEXT_WEIGHTS"""
        return {
            "activities": self.activity_terms,
            "locations": self.location_terms,
            "weather": self.weather_terms,
            "time_of_day": self.time_of_day_terms,
            "seasons": self.season_terms,
        }


DEFAULT_PROFILES: Dict[MoodCategory, MoodProfile] = {
    MoodCategory.CHILL: MoodProfile(
        primary_terms=("relaxed", "calm", "peaceful", "mellow", "zen", "tranquil", "laid-back", "easy-going"),
        related_terms=("comfortable", "content", "cozy", "restful", "casual", "light", "steady", "balanced", "cool"),
        activity_terms=("reading", "napping", "lounging", "chilling", "resting", "breathing", "meditating"),
        location_terms=("couch", "bed", "hammock", "garden", "patio", "balcony"),
        time_of_day_terms=("evening", "sunset", "dusk", "night"),
        weather_terms=("mild", "warm", "sunny", "breezy"),
        season_terms=("spring", "summer"),
        intensity=0.6,
        mood_phrases=(
            "want to relax",
            "need to chill",
            "time to unwind",
            "taking it easy",
            "winding down",
            "relaxation time",
        ),
    ),
    MoodCategory.UPBEAT: MoodProfile(
        primary_terms=("happy", "energetic", "positive", "motivated", "excited", "cheerful", "lively", "upbeat"),
        related_terms=("optimistic", "bright", "uplifting", "fun", "joyful", "enthusiastic", "inspired", "pumped"),
        activity_terms=("dancing", "exercising", "running", "working out", "cleaning", "cooking", "creating"),
        location_terms=("gym", "park", "studio", "kitchen", "office"),
        time_of_day_terms=("morning", "sunrise", "noon", "afternoon"),
        weather_terms=("sunny", "clear", "bright"),
        season_terms=("spring", "summer"),
        intensity=0.8,
        mood_phrases=(
            "feeling good",
            "in a good mood",
            "ready to",
            "excited to",
            "lets go",
            "pumped up",
        ),
    ),
    MoodCategory.PEACEFUL: MoodProfile(
        primary_terms=("serene", "quiet", "gentle", "soothing", "harmonious", "meditative", "peaceful"),
        related_terms=("mindful", "still", "soft", "calming", "relaxing", "contemplative", "balanced", "grounded"),
        activity_terms=("meditating", "yoga", "reading", "journaling", "painting", "gardening", "stargazing"),
        location_terms=("garden", "forest", "beach", "mountain", "lake", "temple", "study"),
        time_of_day_terms=("dawn", "dusk", "night", "early morning"),
        weather_terms=("misty", "foggy", "light rain", "cloudy"),
        season_terms=("autumn", "spring"),
        intensity=0.4,
        mood_phrases=(
            "need peace",
            "want quiet",
            "some silence",
            "calm environment",
            "peaceful setting",
            "tranquil space",
        ),
    ),
    MoodCategory.ENERGETIC: MoodProfile(
        primary_terms=("dynamic", "active", "vibrant", "spirited", "enthusiastic", "powerful", "energetic"),
        related_terms=("strong", "determined", "focused", "driven", "passionate", "fierce", "unstoppable", "productive"),
        activity_terms=("working", "studying", "coding", "writing", "brainstorming", "creating", "designing"),
        location_terms=("office", "library", "cafe", "desk", "studio"),
        time_of_day_terms=("morning", "afternoon", "day"),
        weather_terms=("clear", "sunny", "energizing"),
        season_terms=("summer", "spring"),
        intensity=1.0,
        mood_phrases=(
            "ready to work",
            "lets do this",
            "time to hustle",
            "getting started",
            "full of energy",
            "feeling productive",
        ),
    ),
    MoodCategory.WINTER: MoodProfile(
        primary_terms=("cozy", "warm", "snug", "comfortable", "hygge", "intimate", "winter"),
        related_terms=("peaceful", "quiet", "gentle", "soft", "calm", "restful", "cold", "chilly"),
        activity_terms=("drinking cocoa", "drinking tea", "reading", "knitting", "cuddling", "watching snow"),
        location_terms=("indoors", "fireplace", "cabin", "home", "blanket fort"),
        time_of_day_terms=("evening", "night", "early morning"),
        weather_terms=("cold", "snowy", "frosty", "chilly", "icy", "winter", "freezing"),
        season_terms=("winter",),
        intensity=0.7,
        sentence_patterns=(
            "drinking hot {drink}",
            "cold {time}",
            "snowy {time}",
            "winter {activity}",
            "by the fireplace",
            "wrapped in {item}",
            "staying warm",
            "cozy {location}",
        ),
    ),
    MoodCategory.RAINY: MoodProfile(
        primary_terms=("peaceful", "calm", "relaxed", "contemplative", "cozy", "rainy"),
        related_terms=("quiet", "gentle", "soft", "soothing", "tranquil", "wet", "damp"),
        activity_terms=("reading", "writing", "watching rain", "napping", "drinking tea"),
        location_terms=("window", "indoors", "cafe", "library", "bed"),
        time_of_day_terms=("morning", "afternoon", "evening"),
        weather_terms=("rain", "rainy", "drizzle", "storm", "thunder", "cloudy", "overcast"),
        season_terms=("autumn", "spring"),
        intensity=0.5,
        sentence_patterns=(
            "watching the rain",
            "rainy {time}",
            "listening to {weather}",
            "thunder{action}",
            "under the rain",
            "{action} by the window",
        ),
    ),
    MoodCategory.FOCUS: MoodProfile(
        primary_terms=("focused", "concentrated", "productive", "determined", "efficient", "studious"),
        related_terms=("studying", "working", "learning", "creating", "developing", "attentive"),
        activity_terms=("studying", "working", "coding", "writing", "reading", "researching"),
        location_terms=("library", "office", "desk", "study room", "cafe"),
        time_of_day_terms=("morning", "afternoon", "late night"),
        weather_terms=("clear", "neutral", "calm"),
        season_terms=("any",),
        intensity=0.9,
        sentence_patterns=(
            "need to {work}",
            "have to {work}",
            "time to {work}",
            "getting some {work} done",
            "working on {project}",
            "{work} session",
            "deep {work}",
        ),
    ),
    MoodCategory.SAD: MoodProfile(
        primary_terms=("sad", "melancholic", "nostalgic", "emotional", "reflective", "sentimental"),
        related_terms=("down", "blue", "gloomy", "pensive", "thoughtful", "wistful", "yearning"),
        activity_terms=("reflecting", "thinking", "remembering", "writing", "listening"),
        location_terms=("bedroom", "quiet place", "window", "alone"),
        time_of_day_terms=("night", "evening", "late hours"),
        weather_terms=("rainy", "cloudy", "gloomy", "misty"),
        season_terms=("autumn", "winter"),
        intensity=0.6,
    ),
    MoodCategory.AUTUMN: MoodProfile(
        primary_terms=("autumn", "fall", "harvest", "pumpkin", "cozy", "crisp"),
        related_terms=("golden", "leaves", "amber", "rustic", "warm", "earthy", "mellow"),
        activity_terms=("reading", "walking", "drinking tea", "baking", "studying", "reflecting"),
        location_terms=("porch", "garden", "park", "cafe", "library", "home"),
        time_of_day_terms=("morning", "afternoon", "evening", "dusk"),
        weather_terms=("crisp", "cool", "breezy", "cloudy", "misty"),
        season_terms=("autumn", "fall"),
        intensity=0.7,
        sentence_patterns=(
            "fall {time}",
            "autumn {activity}",
            "pumpkin {drink}",
            "harvest {time}",
            "falling leaves",
            "cozy autumn",
        ),
    ),
}

DEFAULT_INTENSIFIERS: Dict[str, Tuple[str, ...]] = {
    "high": ("very", "super", "extremely", "really", "quite", "so", "totally", "absolutely", "incredibly"),
    "medium": ("pretty", "rather", "fairly", "somewhat", "kind of", "sort of"),
    "low": ("slightly", "a bit", "a little", "mildly"),
}

# Flips the intensity multiplier
INTENSITY_NEGATIONS = ("not", "dont", "cant", "cannot", "won't")

# Scopes negation over nearby matched words
NEGATION_WORDS = ("not", "dont", "can't", "cannot", "no", "never")

DEFAULT_WORD_REPLACEMENTS: Dict[str, Tuple[str, ...]] = {
    "drink": ("cocoa", "chocolate", "tea", "coffee", "cider", "latte", "spice"),
    "time": ("morning", "afternoon", "evening", "night", "day", "season", "vibes"),
    "activity": ("vibes", "mood", "feeling", "day", "study", "reading", "walk"),
    "item": ("blanket", "sweater", "scarf"),
    "location": ("inside", "indoors", "home", "room"),
    "weather": ("rain", "storm", "thunder"),
    "action": ("ing", "y", ""),
    "work": ("study", "work", "focus", "concentrate", "research", "code", "write"),
    "project": ("homework", "project", "assignment", "paper", "code", "thesis"),
    "season": ("spring", "summer", "autumn", "fall"),
}

_PLACEHOLDER_RE = re.compile(r"\{([a-z_]+)\}")


def compile_pattern(template: str, replacements: Mapping[str, Tuple[str, ...]]) -> re.Pattern:
    """Compile a sentence template into an anchored whole-string regex.

    Literal text is escaped and every ``{name}`` placeholder becomes an
    alternation of ``replacements[name]``, so ``"cold {time}"`` matches
    ``"cold morning"`` but not ``"a cold morning"``.
    """
    parts: List[str] = []
    pos = 0
    for placeholder in _PLACEHOLDER_RE.finditer(template):
        name = placeholder.group(1)
        if name not in replacements:
            raise LexiconError(f"Unknown placeholder {{{name}}} in pattern: {template!r}")
        parts.append(re.escape(template[pos:placeholder.start()]))
        parts.append("(" + "|".join(re.escape(word) for word in replacements[name]) + ")")
        pos = placeholder.end()
    parts.append(re.escape(template[pos:]))
    return re.compile("^" + "".join(parts) + "$")


@dataclass(frozen=True)
class MoodLexicon:
    """Immutable configuration the classifier is built from.

    Sentence patterns are compiled once here, so classifying never touches
    the regex compiler.
    """

    profiles: Mapping[MoodCategory, MoodProfile] = field(default_factory=lambda: dict(DEFAULT_PROFILES))
    intensifiers: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_INTENSIFIERS))
    intensity_negations: Tuple[str, ...] = INTENSITY_NEGATIONS
    negation_words: Tuple[str, ...] = NEGATION_WORDS
    word_replacements: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: dict(DEFAULT_WORD_REPLACEMENTS)
    )
    compiled_patterns: Mapping[MoodCategory, Tuple[re.Pattern, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        compiled: Dict[MoodCategory, Tuple[re.Pattern, ...]] = {}
        for category, profile in self.profiles.items():
            if not 0 < profile.intensity <= 1:
                raise LexiconError(f"Intensity for {category.value} must be in (0, 1], got {profile.intensity}")
            compiled[category] = tuple(
                compile_pattern(template, self.word_replacements) for template in profile.sentence_patterns
            )
        unknown = set(self.intensifiers) - set(INTENSIFIER_STEPS)
        if unknown:
            raise LexiconError(f"Unknown intensifier levels: {sorted(unknown)}")
        # Read-only views so a shared lexicon cannot drift from its compiled patterns
        object.__setattr__(self, "profiles", MappingProxyType(dict(self.profiles)))
        object.__setattr__(self, "intensifiers", MappingProxyType(dict(self.intensifiers)))
        object.__setattr__(self, "word_replacements", MappingProxyType(dict(self.word_replacements)))
        object.__setattr__(self, "compiled_patterns", MappingProxyType(compiled))

    def profile(self, category: MoodCategory) -> MoodProfile:
        return self.profiles[category]


DEFAULT_LEXICON = MoodLexicon()
