import httpx
import pytest

from moodrooms.services.youtube import (
    BaseTitleClient,
    StaticTitleClient,
    TitleClientFactory,
    TitleLookup,
    YouTubeApiError,
    YouTubeClient,
)

PLAYLIST_ITEMS = {
    "items": [
        {"snippet": {"title": "Soft Rain on a Window", "resourceId": {"videoId": "a1"}}},
        {"snippet": {"title": "Thunder and Jazz", "resourceId": {"videoId": "a2"}}},
        {"snippet": {}},
    ]
}

PLAYLISTS = {
    "items": [
        {
            "id": "PL1",
            "snippet": {
                "title": "Rainy Cafe",
                "description": "rain sounds",
                "thumbnails": {"default": {"url": "d.jpg"}, "high": {"url": "h.jpg"}},
            },
            "contentDetails": {"itemCount": 12},
        },
        {"id": "PL2", "snippet": {"title": "Deep Focus", "thumbnails": {}}},
    ]
}


class TestYouTubeClient:
    def test_requires_api_key(self):
        with pytest.raises(YouTubeApiError):
            YouTubeClient("")

    def test_playlist_titles(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=PLAYLIST_ITEMS)

        with YouTubeClient("secret", transport=httpx.MockTransport(handler)) as client:
            titles = client.playlist_titles("PL1")

        assert titles == ["soft rain on a window", "thunder and jazz"]
        assert seen["path"].endswith("/youtube/v3/playlistItems")
        assert seen["params"]["playlistId"] == "PL1"
        assert seen["params"]["maxResults"] == "50"
        assert seen["params"]["key"] == "secret"

    def test_channel_playlists(self, json_transport):
        transport = json_transport({"/playlists": (200, PLAYLISTS)})
        with YouTubeClient("secret", transport=transport) as client:
            playlists = client.channel_playlists("UC123")

        assert [p["id"] for p in playlists] == ["PL1", "PL2"]
        assert playlists[0]["thumbnail"] == "h.jpg"
        assert playlists[0]["video_count"] == 12
        assert playlists[1]["thumbnail"] == ""

    def test_http_error_status(self, json_transport):
        transport = json_transport({"/playlistItems": (403, {"error": {"code": 403, "message": "quotaExceeded"}})})
        with YouTubeClient("secret", transport=transport) as client:
            with pytest.raises(YouTubeApiError) as excinfo:
                client.playlist_titles("PL1")
        assert excinfo.value.code == 403
        assert "quotaExceeded" in str(excinfo.value)

    def test_error_payload(self, json_transport):
        transport = json_transport({"/playlists": (200, {"error": {"code": 400, "message": "bad channel"}})})
        with YouTubeClient("secret", transport=transport) as client:
            with pytest.raises(YouTubeApiError, match="bad channel"):
                client.channel_playlists("nope")

    def test_missing_playlist_items(self, json_transport):
        transport = json_transport({"/playlists": (200, {"kind": "youtube#playlistListResponse"})})
        with YouTubeClient("secret", transport=transport) as client:
            with pytest.raises(YouTubeApiError):
                client.channel_playlists("UC123")

    def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("offline", request=request)

        with YouTubeClient("secret", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(YouTubeApiError):
                client.playlist_titles("PL1")


class Broken(BaseTitleClient):
    def playlist_titles(self, playlist_id, max_results=50):
        raise YouTubeApiError("boom", 500)


class TestTitleLookup:
    def test_success(self):
        response = TitleLookup(StaticTitleClient({"PL1": ["Cozy Jazz"]})).titles("PL1")
        assert response.success
        assert response.titles == ["cozy jazz"]

    def test_failure_is_swallowed(self):
        response = TitleLookup(Broken()).titles("PL1")
        assert not response.success
        assert response.titles == []
        assert response.error == "boom"

    def test_fallback(self):
        response = TitleLookup(Broken(), StaticTitleClient({"PL1": ["Snow Day"]})).titles("PL1")
        assert response.success
        assert response.titles == ["snow day"]

    def test_fallback_failure(self):
        response = TitleLookup(Broken(), Broken()).titles("PL1")
        assert not response.success

    def test_missing_playlist_id(self):
        assert not TitleLookup(StaticTitleClient()).titles("").success

    def test_max_results(self):
        client = StaticTitleClient({"PL1": [f"track {i}" for i in range(80)]})
        assert len(TitleLookup(client).titles("PL1").titles) == 50


class TestTitleClientFactory:
    def test_create_static(self):
        assert isinstance(TitleClientFactory.create_client("static"), StaticTitleClient)

    def test_create_youtube(self):
        client = TitleClientFactory.create_client("youtube", api_key="secret")
        assert isinstance(client, YouTubeClient)
        client.close()

    def test_unsupported(self):
        with pytest.raises(ValueError):
            TitleClientFactory.create_client("spotify")
