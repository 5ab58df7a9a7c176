"""YouTube Data API clients and the playlist-title lookup used for room ranking"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

YOUTUBE_API_URL = "https://youtube.googleapis.com/youtube/v3"
MAX_RESULTS = 50


class YouTubeApiError(Exception):
    """Raised when the YouTube Data API call fails or returns an error payload"""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class TitleLookupResponse:
    """Standardized response from a title source"""

    def __init__(self, success: bool, titles: Optional[List[str]] = None, error: Optional[str] = None):
        self.success = success
        self.titles = titles or []
        self.error = error


class BaseTitleClient:
    """Base class for playlist title sources"""

    def playlist_titles(self, playlist_id: str, max_results: int = MAX_RESULTS) -> List[str]:
        raise NotImplementedError


class YouTubeClient(BaseTitleClient):
    """Synchronous client for the handful of YouTube Data API calls we need.

    Args:
        api_key: YouTube Data API key
        timeout: per-request timeout in seconds
        transport: optional httpx transport (tests pass a MockTransport)
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = 5.0,
        base_url: str = YOUTUBE_API_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not api_key:
            raise YouTubeApiError("YouTube API key is not configured")
        self.api_key = api_key
        self._client = httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout, transport=transport)

    def __enter__(self) -> "YouTubeClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self._client.get(path, params={**params, "key": self.api_key})
        except httpx.HTTPError as e:
            raise YouTubeApiError(f"YouTube API request failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.status_code >= 400:
            detail = ""
            if isinstance(data, dict) and isinstance(data.get("error"), dict):
                detail = f" - {data['error'].get('message', '')}"
            raise YouTubeApiError(
                f"YouTube API Error: {response.status_code} {response.reason_phrase}{detail}",
                response.status_code,
            )
        if not isinstance(data, dict):
            raise YouTubeApiError("Invalid API response: expected a JSON object")
        if isinstance(data.get("error"), dict):
            raise YouTubeApiError(data["error"].get("message", "Unknown error"), data["error"].get("code"))
        return data

    def channel_playlists(self, channel_id: str, max_results: int = MAX_RESULTS) -> List[Dict[str, Any]]:
        """List a channel's playlists as plain dicts (id, title, description, thumbnail, video_count)."""
        data = self._get(
            "/playlists",
            {"part": "snippet,contentDetails", "channelId": channel_id, "maxResults": max_results},
        )
        items = data.get("items")
        if not isinstance(items, list):
            raise YouTubeApiError("Invalid API response: no playlists found")

        playlists = []
        for item in items:
            snippet = item.get("snippet") or {}
            thumbnails = snippet.get("thumbnails") or {}
            thumbnail = ""
            for size in ("high", "medium", "default"):
                if thumbnails.get(size, {}).get("url"):
                    thumbnail = thumbnails[size]["url"]
                    break
            playlists.append(
                {
                    "id": item.get("id", ""),
                    "title": snippet.get("title", ""),
                    "description": snippet.get("description", ""),
                    "thumbnail": thumbnail,
                    "video_count": (item.get("contentDetails") or {}).get("itemCount", 0),
                }
            )
        logger.info("Found %d playlists for channel %s", len(playlists), channel_id)
        return playlists

    def playlist_titles(self, playlist_id: str, max_results: int = MAX_RESULTS) -> List[str]:
        data = self._get(
            "/playlistItems",
            {"part": "snippet", "maxResults": min(max_results, MAX_RESULTS), "playlistId": playlist_id},
        )
        items = data.get("items") or []
        titles = []
        for item in items:
            title = (item.get("snippet") or {}).get("title")
            if title:
                titles.append(str(title).lower())
        return titles[:max_results]


class StaticTitleClient(BaseTitleClient):
    """Offline title source backed by a dict of playlist id -> titles"""

    def __init__(self, titles: Optional[Dict[str, List[str]]] = None):
        self.titles = titles or {}

    def playlist_titles(self, playlist_id: str, max_results: int = MAX_RESULTS) -> List[str]:
        return [t.lower() for t in self.titles.get(playlist_id, [])][:max_results]


class TitleLookup:
    """Best-effort title lookup with fallback.

    Never raises: any failure from the clients is logged and reported as an
    unsuccessful response, so callers simply skip the boost.
    """

    def __init__(self, primary: BaseTitleClient, fallback: Optional[BaseTitleClient] = None):
        self.primary = primary
        self.fallback = fallback

    def titles(self, playlist_id: str, max_results: int = MAX_RESULTS) -> TitleLookupResponse:
        if not playlist_id:
            return TitleLookupResponse(success=False, error="No playlist id")
        try:
            return TitleLookupResponse(success=True, titles=self.primary.playlist_titles(playlist_id, max_results))
        except Exception as e:
            logger.warning("Could not fetch playlist items for %s: %s", playlist_id, e)
            if self.fallback:
                try:
                    return TitleLookupResponse(
                        success=True, titles=self.fallback.playlist_titles(playlist_id, max_results)
                    )
                except Exception as fallback_error:
                    logger.warning("Fallback title source failed for %s: %s", playlist_id, fallback_error)
                    return TitleLookupResponse(success=False, error=str(fallback_error))
            return TitleLookupResponse(success=False, error=str(e))


class TitleClientFactory:
    """Factory to create title clients by type"""

    @staticmethod
    def create_client(client_type: str, **kwargs: Any) -> BaseTitleClient:
        if client_type == "youtube":
            return YouTubeClient(**kwargs)
        elif client_type == "static":
            return StaticTitleClient(**kwargs)
        else:
            raise ValueError(f"Unsupported client type: {client_type}")
