"""Track endpoints (``track.*``)."""

from __future__ import annotations

from lastfm_api.endpoints.base import Autocorrect, BaseEndpoint
from lastfm_api.models.responses import (
    SearchResponse,
    SimilarTracksResponse,
    TopTagsResponse,
    TrackCorrectionResponse,
    TrackInfoResponse,
)
from lastfm_api.utils.params import ParamValue


class TrackEndpoints(BaseEndpoint):
    """Track lookups, similarity and search."""

    async def get_correction(self, artist: str, track: str) -> TrackCorrectionResponse:
        params = self._clean_params({"artist": artist, "track": track})
        return await self._request("track.getCorrection", params, TrackCorrectionResponse)

    async def get_info(
        self,
        artist: str,
        track: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        username: str | None = None,
        **extra: ParamValue,
    ) -> TrackInfoResponse:
        params = self._clean_params({
            "artist": artist,
            "track": track,
            "mbid": mbid,
            "autocorrect": autocorrect,
            "username": username,
            **extra,
        })
        return await self._request("track.getInfo", params, TrackInfoResponse)

    async def get_similar(
        self,
        artist: str,
        track: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> SimilarTracksResponse:
        params = self._clean_params({
            "artist": artist,
            "track": track,
            "mbid": mbid,
            "autocorrect": autocorrect,
            "limit": limit,
            **extra,
        })
        return await self._request("track.getSimilar", params, SimilarTracksResponse)

    async def get_top_tags(
        self,
        artist: str,
        track: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        **extra: ParamValue,
    ) -> TopTagsResponse:
        params = self._clean_params({
            "artist": artist,
            "track": track,
            "mbid": mbid,
            "autocorrect": autocorrect,
            **extra,
        })
        return await self._request("track.getTopTags", params, TopTagsResponse)

    async def search(
        self,
        track: str,
        *,
        artist: str | None = None,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> SearchResponse:
        """Search tracks by title, optionally narrowed to *artist*."""
        params = self._clean_params({
            "track": track,
            "artist": artist,
            "page": page,
            "limit": limit,
            **extra,
        })
        return await self._request("track.search", params, SearchResponse)
