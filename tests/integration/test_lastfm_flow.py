"""End-to-end tests: LastFm facade -> endpoint group -> transport -> stubbed Last.fm."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from conftest import API_KEY, RecordingTransport
from lastfm_api import ApiError, AuthenticationError, LastFm, RateLimitError
from lastfm_api.config.settings import Settings
from lastfm_api.models import SearchResponse


@pytest.mark.asyncio
async def test_album_search_round_trip(settings: Settings, album_search_payload: dict[str, Any]) -> None:
    transport = RecordingTransport(httpx.Response(200, json=album_search_payload))

    async with LastFm(API_KEY, settings=settings, transport=transport) as lastfm:
        result = await lastfm.album.search("OK Computer", limit=5)

    assert transport.call_count == 1
    params = dict(transport.requests[0].url.params)
    assert params == {
        "album": "OK Computer",
        "limit": "5",
        "method": "album.search",
        "api_key": API_KEY,
        "format": "json",
    }

    assert isinstance(result, SearchResponse)
    matches = result.results.album_matches.album
    assert matches[0].name == "OK Computer"
    assert matches[0].artist == "Radiohead"
    assert result.results.total_results == "1234"


@pytest.mark.asyncio
async def test_artist_not_found(settings: Settings) -> None:
    transport = RecordingTransport(
        httpx.Response(200, json={"error": 6, "message": "The artist you supplied could not be found"})
    )

    async with LastFm(API_KEY, settings=settings, transport=transport) as lastfm:
        with pytest.raises(ApiError) as exc_info:
            await lastfm.artist.get_info("qwertyuiopasdf", autocorrect=1)

    assert exc_info.value.code == 6
    assert exc_info.value.status == 200
    assert transport.call_count == 1


@pytest.mark.asyncio
async def test_transient_failure_is_invisible_to_caller(settings: Settings) -> None:
    payload = {
        "tracks": {
            "track": [
                {"name": "Espresso", "playcount": "123", "artist": {"name": "Sabrina Carpenter"}},
            ],
            "@attr": {"page": "1", "perPage": "1", "totalPages": "10000", "total": "10000"},
        }
    }
    transport = RecordingTransport(httpx.Response(502), httpx.Response(200, json=payload))

    async with LastFm(API_KEY, settings=settings, transport=transport) as lastfm:
        result = await lastfm.chart.get_top_tracks(limit=1)

    assert transport.call_count == 2
    assert result.tracks.track[0].artist.name == "Sabrina Carpenter"
    assert result.tracks.attr.total_pages == "10000"


@pytest.mark.asyncio
async def test_rate_limited_twice_fails(fast_settings: Settings) -> None:
    transport = RecordingTransport(httpx.Response(429, json={"error": 29, "message": "Rate limit exceeded"}))

    async with LastFm(API_KEY, settings=fast_settings, transport=transport) as lastfm:
        with pytest.raises(RateLimitError):
            await lastfm.tag.get_top_artists("shoegaze")

    assert transport.call_count == 2


@pytest.mark.asyncio
async def test_destroyed_client_refuses_requests(settings: Settings) -> None:
    transport = RecordingTransport(httpx.Response(200, json={}))
    lastfm = LastFm(API_KEY, settings=settings, transport=transport)

    lastfm.destroy()

    with pytest.raises(AuthenticationError):
        await lastfm.track.get_info("Radiohead", "Creep")
    assert transport.call_count == 0
    await lastfm.aclose()
