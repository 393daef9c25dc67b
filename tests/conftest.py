"""Shared pytest fixtures for the Last.fm client test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from lastfm_api.config.settings import Settings

API_KEY = "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that replays canned responses and records every request.

    Each entry in *responses* is either an ``httpx.Response`` (copied on
    every use) or a callable ``(request) -> httpx.Response``.  The last entry
    is reused once the list is exhausted.
    """

    def __init__(self, *responses: httpx.Response | Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        response = self._responses[index]
        if isinstance(response, httpx.Response):
            return httpx.Response(
                response.status_code,
                headers=response.headers,
                content=response.content,
            )
        return response(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any LASTFM_* variables on the host."""
    return Settings(
        base_url="https://ws.audioscrobbler.com/2.0/",
        timeout=10.0,
        user_agent="lastfm-api-test/0.1.0",
        rate_limit_backoff=1.0,
    )


@pytest.fixture
def fast_settings(settings: Settings) -> Settings:
    """Settings with a negligible 429 backoff for tests that don't time it."""
    return settings.model_copy(update={"rate_limit_backoff": 0.01})


@pytest.fixture
def artist_info_payload() -> dict[str, Any]:
    return {
        "artist": {
            "name": "Radiohead",
            "mbid": "a74b1b7f-71a5-4011-9441-d0b5e4122711",
            "url": "https://www.last.fm/music/Radiohead",
            "image": [
                {"#text": "https://lastfm.freetls.fastly.net/i/u/34s/x.png", "size": "small"},
                {"#text": "https://lastfm.freetls.fastly.net/i/u/64s/x.png", "size": "medium"},
            ],
            "streamable": "0",
            "ontour": "0",
            "stats": {"listeners": "7000000", "playcount": "900000000"},
            "similar": {
                "artist": [
                    {"name": "Thom Yorke", "url": "https://www.last.fm/music/Thom+Yorke", "image": []},
                ]
            },
            "tags": {"tag": [{"name": "alternative", "url": "https://www.last.fm/tag/alternative"}]},
            "bio": {
                "published": "01 Jan 2006, 00:00",
                "summary": "Radiohead are an English rock band.",
                "content": "Radiohead are an English rock band formed in Abingdon.",
            },
        }
    }


@pytest.fixture
def album_search_payload() -> dict[str, Any]:
    return {
        "results": {
            "opensearch:Query": {
                "#text": "",
                "role": "request",
                "searchTerms": "OK Computer",
                "startPage": "1",
            },
            "opensearch:totalResults": "1234",
            "opensearch:startIndex": "0",
            "opensearch:itemsPerPage": "5",
            "albummatches": {
                "album": [
                    {
                        "name": "OK Computer",
                        "artist": "Radiohead",
                        "url": "https://www.last.fm/music/Radiohead/OK+Computer",
                        "image": [{"#text": "", "size": "small"}],
                        "streamable": "0",
                        "mbid": "0b6b4ba0-d36f-47bd-b4ea-6a5b91842d29",
                    },
                    {
                        "name": "OK Computer OKNOTOK 1997 2017",
                        "artist": "Radiohead",
                        "url": "https://www.last.fm/music/Radiohead/OK+Computer+OKNOTOK+1997+2017",
                        "image": [],
                        "streamable": "0",
                        "mbid": "",
                    },
                ]
            },
            "@attr": {"for": "OK Computer"},
        }
    }
