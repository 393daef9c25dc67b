"""Chart endpoints (``chart.*``) -- site-wide weekly charts."""

from __future__ import annotations

from lastfm_api.endpoints.base import BaseEndpoint
from lastfm_api.models.responses import (
    ChartTopArtistsResponse,
    ChartTopTagsResponse,
    ChartTopTracksResponse,
)
from lastfm_api.utils.params import ParamValue


class ChartEndpoints(BaseEndpoint):
    async def get_top_artists(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> ChartTopArtistsResponse:
        params = self._clean_params({"page": page, "limit": limit, **extra})
        return await self._request("chart.getTopArtists", params, ChartTopArtistsResponse)

    async def get_top_tracks(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> ChartTopTracksResponse:
        params = self._clean_params({"page": page, "limit": limit, **extra})
        return await self._request("chart.getTopTracks", params, ChartTopTracksResponse)

    async def get_top_tags(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> ChartTopTagsResponse:
        params = self._clean_params({"page": page, "limit": limit, **extra})
        return await self._request("chart.getTopTags", params, ChartTopTagsResponse)
