"""Room catalog built from a YouTube channel's playlists"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from moodrooms.core.lexicon import MoodCategory
from moodrooms.services.youtube import YouTubeApiError, YouTubeClient

logger = logging.getLogger(__name__)

DEFAULT_CHANNEL_ID = "UC2UhrbIufB22XF9l8OklzGw"
CACHE_SECONDS = 5 * 60

ROOM_CATEGORIES = ("study", "work", "relax", "focus")


@dataclass
class Room:
    id: str
    name: str
    playlist_id: str
    mood: Optional[MoodCategory] = None
    description: str = ""
    image: str = ""
    category: str = "relax"
    color: str = ""
    channel_number: int = 0


ROOM_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "study": {"image": "/images/cafe.jpg", "color": "bg-amber-500", "mood": MoodCategory.CHILL},
    "work": {"image": "/images/city.jpg", "color": "bg-purple-600", "mood": MoodCategory.PEACEFUL},
    "relax": {"image": "/images/garden.jpg", "color": "bg-green-500", "mood": MoodCategory.PEACEFUL},
    "focus": {"image": "/images/coding.jpg", "color": "bg-blue-600", "mood": MoodCategory.UPBEAT},
}

# First hit wins, checked against the lowercased playlist title
TITLE_MOODS = [
    (("rain", "storm", "thunder"), MoodCategory.RAINY),
    (("snow", "winter", "fireplace", "christmas"), MoodCategory.WINTER),
    (("autumn", "fall", "pumpkin", "harvest"), MoodCategory.AUTUMN),
    (("sad", "melancholy", "nostalgic"), MoodCategory.SAD),
    (("study", "focus", "coding", "productivity"), MoodCategory.FOCUS),
    (("workout", "gym", "energy", "power"), MoodCategory.ENERGETIC),
    (("happy", "upbeat", "morning", "sunny"), MoodCategory.UPBEAT),
    (("zen", "meditation", "nature", "garden", "forest"), MoodCategory.PEACEFUL),
    (("chill", "lofi", "lo-fi", "relax", "cafe", "coffee"), MoodCategory.CHILL),
]

OFFLINE_ROOMS = [
    Room("rainy-cafe", "Rainy Cafe", "rainy-cafe-ambience", MoodCategory.RAINY, "Rain on the windows of a quiet cafe", category="study"),
    Room("winter-cabin", "Winter Cabin", "winter-cabin-fireplace", MoodCategory.WINTER, "Snow outside, fire crackling inside", category="relax"),
    Room("autumn-library", "Autumn Library", "autumn-library-study", MoodCategory.AUTUMN, "Golden leaves and old books", category="study"),
    Room("deep-focus", "Deep Focus", "deep-focus-work", MoodCategory.FOCUS, "Steady beats for getting work done", category="work"),
    Room("sunny-gym", "Sunny Gym", "sunny-morning-workout", MoodCategory.UPBEAT, "Bright tracks to get moving", category="focus"),
    Room("power-hour", "Power Hour", "power-hour-energy", MoodCategory.ENERGETIC, "High energy for big pushes", category="focus"),
    Room("zen-garden", "Zen Garden", "zen-garden-nature", MoodCategory.PEACEFUL, "Birdsong and slow water", category="relax"),
    Room("lofi-lounge", "Lofi Lounge", "lofi-chill-lounge", MoodCategory.CHILL, "Laid-back beats for the couch", category="relax"),
    Room("late-night-blues", "Late Night Blues", "late-night-sad-songs", MoodCategory.SAD, "For the reflective hours", category="relax"),
]


def determine_category(title: str, index: int) -> str:
    title = title.lower()
    if "study" in title or "cafe" in title or "coffee" in title:
        return "study"
    if "work" in title or "focus" in title or "productivity" in title:
        return "work"
    if "relax" in title or "chill" in title or "ambient" in title:
        return "relax"
    return ROOM_CATEGORIES[index % len(ROOM_CATEGORIES)]


def determine_mood(title: str, category: str) -> MoodCategory:
    title = title.lower()
    for keywords, mood in TITLE_MOODS:
        if any(k in title for k in keywords):
            return mood
    return ROOM_DEFAULTS[category]["mood"]


class RoomCatalog:
    """Loads rooms from a channel's playlists, with an offline fallback"""

    def __init__(
        self,
        client: Optional[YouTubeClient] = None,
        channel_id: str = DEFAULT_CHANNEL_ID,
        cache_seconds: float = CACHE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.channel_id = channel_id
        self.cache_seconds = cache_seconds
        self._clock = clock
        self._rooms: List[Room] = []
        self._loaded_at: Optional[float] = None

    def load(self) -> List[Room]:
        now = self._clock()
        if self._rooms and self._loaded_at is not None and now - self._loaded_at < self.cache_seconds:
            return self._rooms

        rooms: List[Room] = []
        if self.client is None:
            logger.info("No YouTube client configured, using offline rooms")
        else:
            try:
                rooms = self._rooms_from_playlists(self.client.channel_playlists(self.channel_id))
            except YouTubeApiError as e:
                logger.warning("Error initializing rooms: %s", e)

        if not rooms:
            rooms = list(OFFLINE_ROOMS)
        self._rooms = rooms
        self._loaded_at = now
        return self._rooms

    def _rooms_from_playlists(self, playlists: List[Dict[str, Any]]) -> List[Room]:
        rooms = []
        for index, playlist in enumerate(playlists):
            title = (playlist.get("title") or "").strip()
            if not playlist.get("id") or not title:
                continue
            category = determine_category(title, index)
            defaults = ROOM_DEFAULTS[category]
            rooms.append(
                Room(
                    id=playlist["id"],
                    name=title,
                    playlist_id=playlist["id"],
                    mood=determine_mood(title, category),
                    description=playlist.get("description") or f"Enjoy the vibes of {title}",
                    image=playlist.get("thumbnail") or defaults["image"],
                    category=category,
                    color=defaults["color"],
                    channel_number=index + 1,
                )
            )
        return rooms

    def get_room(self, room_id: str) -> Optional[Room]:
        return next((r for r in self.load() if r.id == room_id), None)

    def rooms_by_category(self, category: str) -> List[Room]:
        return [r for r in self.load() if r.category == category]

    def rooms_by_mood(self, mood: MoodCategory) -> List[Room]:
        return [r for r in self.load() if r.mood == mood]
