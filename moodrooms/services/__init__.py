"""Service layer for YouTube access and playlist title lookups"""

from .youtube import (
    BaseTitleClient,
    StaticTitleClient,
    TitleClientFactory,
    TitleLookup,
    TitleLookupResponse,
    YouTubeApiError,
    YouTubeClient,
)

__all__ = [
    "BaseTitleClient",
    "StaticTitleClient",
    "TitleClientFactory",
    "TitleLookup",
    "TitleLookupResponse",
    "YouTubeApiError",
    "YouTubeClient",
]
