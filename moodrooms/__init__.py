"""Mood Rooms: match how you feel to a curated YouTube playlist room"""

__version__ = "1.0.0"
