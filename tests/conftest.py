"""Shared fixtures for the Mood Rooms test suite."""

import json
from typing import Callable, Dict

import httpx
import pytest

from moodrooms.core.fetcher import Room
from moodrooms.core.lexicon import MoodCategory
from moodrooms.core.mood import MoodClassifier


@pytest.fixture
def classifier() -> MoodClassifier:
    return MoodClassifier()


@pytest.fixture
def rainy_cafe() -> Room:
    return Room("rainy-cafe", "Rainy Cafe", "pl-rainy-cafe", MoodCategory.RAINY)


@pytest.fixture
def sunny_gym() -> Room:
    return Room("sunny-gym", "Sunny Gym", "pl-sunny-gym", MoodCategory.UPBEAT)


@pytest.fixture
def json_transport() -> Callable[[Dict[str, object]], httpx.MockTransport]:
    """Build a MockTransport that answers every path from a dict of path suffix -> (status, body)."""

    def _build(routes: Dict[str, object]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            for suffix, (status, body) in routes.items():
                if request.url.path.endswith(suffix):
                    return httpx.Response(status, content=json.dumps(body), headers={"content-type": "application/json"})
            return httpx.Response(404, json={"error": {"code": 404, "message": "not found"}})

        return httpx.MockTransport(handler)

    return _build
