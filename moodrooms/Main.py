# moodrooms/Main.py
"""Mood Rooms - Streamlit App"""

import logging
import os
import random
from typing import List, Optional

from dotenv import load_dotenv
import streamlit as st

# Run from repo root after `pip install -e .`: `streamlit run moodrooms/Main.py`
from moodrooms.core.fetcher import Room, RoomCatalog
from moodrooms.core.mood import MatchResult, MoodClassifier
from moodrooms.core.rank import RankedRoom, RoomRanker
from moodrooms.services.youtube import TitleClientFactory, TitleLookup, YouTubeApiError


# Load environment variables
load_dotenv()

# App configuration
APP_TITLE = os.getenv("APP_TITLE", "Mood Rooms")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY", "")
YOUTUBE_CHANNEL_ID = os.getenv("YOUTUBE_CHANNEL_ID", "UC2UhrbIufB22XF9l8OklzGw")
ENRICH_WITH_TITLES = os.getenv("ENRICH_WITH_TITLES", "true").lower() == "true"
TITLE_LOOKUP_TIMEOUT = float(os.getenv("TITLE_LOOKUP_TIMEOUT", "5"))

logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO)
logger = logging.getLogger(__name__)


@st.cache_resource
def get_components():
    """Initialize and cache app components"""
    youtube_client = None
    if YOUTUBE_API_KEY:
        try:
            youtube_client = TitleClientFactory.create_client(
                "youtube", api_key=YOUTUBE_API_KEY, timeout=TITLE_LOOKUP_TIMEOUT
            )
        except YouTubeApiError as e:
            st.warning(f"YouTube client failed: {e}")
            youtube_client = None

    title_lookup = None
    if youtube_client and ENRICH_WITH_TITLES:
        title_lookup = TitleLookup(youtube_client)

    classifier = MoodClassifier()
    catalog = RoomCatalog(youtube_client, channel_id=YOUTUBE_CHANNEL_ID)
    ranker = RoomRanker(title_lookup, enrichment_timeout=TITLE_LOOKUP_TIMEOUT + 1)
    return classifier, catalog, ranker


def _watch_url(room: Room) -> str:
    return f"https://www.youtube.com/playlist?list={room.playlist_id}"


def display_room(room: Room, ranked: Optional[RankedRoom] = None, fallback: bool = False):
    """Show the selected room as a channel card"""
    if fallback:
        st.info("Couldn't read a mood from that, so here's a random channel 📺")

    st.subheader(f"📺 Channel {room.channel_number or '?'}: {room.name}")
    if room.description:
        st.caption(room.description)

    c1, c2 = st.columns([0.7, 0.3])
    with c1:
        st.markdown(f"▶️ [Tune in on YouTube]({_watch_url(room)})")
        if room.mood:
            st.caption(f"Mood: {room.mood.value.title()} • Room: {room.category.title()}")
    with c2:
        if ranked is not None:
            st.metric("Match Score", f"{ranked.score:.2f}")
            if ranked.reasons:
                st.caption("🎯 " + " • ".join(ranked.reasons[:4]))


def display_analysis(results: List[MatchResult]):
    with st.expander("🔍 Mood Analysis", expanded=False):
        if not results:
            st.markdown("No mood detected.")
            return
        for result in results[:3]:
            st.markdown(f"**{result.category.value.title()}**: {result.score:.2f}")
            if result.matched_terms:
                st.caption("Words: " + ", ".join(dict.fromkeys(result.matched_terms)))
            context = result.context_matches
            hints = context.activities + context.locations + context.weather + context.time_of_day + context.seasons
            if hints:
                st.caption("Scene: " + ", ".join(dict.fromkeys(hints)))


def main():
    """Main Streamlit application"""
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="📺",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    st.title(APP_TITLE)
    st.markdown("**Tell the TV how you feel and it picks the channel** 🎛️")

    with st.sidebar:
        st.header("About")
        st.markdown(
            """
        Each channel is a curated YouTube playlist with its own mood.

        **How it works:**
        1. Describe how you feel
        2. Your words are matched to a mood
        3. The best channel for that mood starts playing
        """
        )
        if DEBUG:
            st.header("Debug Info")
            st.caption("Debug mode is enabled")

    classifier, catalog, ranker = get_components()
    rooms = catalog.load()
    if not rooms:
        st.error("No channels available right now. Please refresh the page.")
        st.stop()

    if "mood_text" not in st.session_state:
        st.session_state.mood_text = ""
    if "example_choice" not in st.session_state:
        st.session_state.example_choice = ""

    def _apply_example():
        choice = st.session_state.get("example_choice", "")
        if choice:
            st.session_state["mood_text"] = choice

    col1, col2 = st.columns([2, 1])
    with col1:
        st.text_input(
            "🎭 How are you feeling?",
            key="mood_text",
            placeholder="rainy afternoon with tea...",
        )
    with col2:
        st.selectbox(
            "Or choose an example:",
            [
                "",
                "rainy afternoon with tea",
                "need to study tonight",
                "super energetic morning workout",
                "drinking hot cocoa",
                "want to relax",
                "feeling nostalgic",
            ],
            key="example_choice",
        )
        st.button("Use This Mood", type="secondary", on_click=_apply_example)

    if st.button("📺 Find My Channel", type="primary", use_container_width=True):
        mood_input = st.session_state.get("mood_text", "").strip()
        if not mood_input:
            st.warning("Tell me how you feel first!")
            st.stop()

        results = classifier.classify(mood_input)
        if DEBUG:
            display_analysis(results)

        ranked: List[RankedRoom] = []
        if results:
            best = results[0]
            with st.spinner("Tuning in..."):
                ranked = ranker.rank_rooms(
                    mood_input, best, classifier.lexicon.profile(best.category), rooms
                )

        if ranked:
            display_room(ranked[0].room, ranked[0])
        else:
            # No match is ours to handle: pick any channel
            logger.info("No room matched %r, picking a random one", mood_input)
            display_room(random.choice(rooms), fallback=True)

    st.markdown("---")
    c1, c2 = st.columns(2)
    with c1:
        st.caption("Built with ❤️ using Streamlit")
    with c2:
        st.caption(f"v{os.getenv('APP_VERSION', '1.0.0')}")


if __name__ == "__main__":
    main()
