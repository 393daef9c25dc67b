"""Tag endpoints (``tag.*``)."""

from __future__ import annotations

from lastfm_api.endpoints.base import BaseEndpoint
from lastfm_api.models.responses import (
    GlobalTopTagsResponse,
    SimilarTagsResponse,
    TagInfoResponse,
    TagTopAlbumsResponse,
    TagTopArtistsResponse,
    TagTopTracksResponse,
)
from lastfm_api.utils.params import ParamValue


class TagEndpoints(BaseEndpoint):
    async def get_info(
        self,
        tag: str,
        *,
        lang: str | None = None,
        **extra: ParamValue,
    ) -> TagInfoResponse:
        params = self._clean_params({"tag": tag, "lang": lang, **extra})
        return await self._request("tag.getInfo", params, TagInfoResponse)

    async def get_similar(self, tag: str) -> SimilarTagsResponse:
        params = self._clean_params({"tag": tag})
        return await self._request("tag.getSimilar", params, SimilarTagsResponse)

    async def get_top_albums(
        self,
        tag: str,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> TagTopAlbumsResponse:
        params = self._clean_params({"tag": tag, "page": page, "limit": limit, **extra})
        return await self._request("tag.getTopAlbums", params, TagTopAlbumsResponse)

    async def get_top_artists(
        self,
        tag: str,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> TagTopArtistsResponse:
        params = self._clean_params({"tag": tag, "page": page, "limit": limit, **extra})
        return await self._request("tag.getTopArtists", params, TagTopArtistsResponse)

    async def get_top_tracks(
        self,
        tag: str,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> TagTopTracksResponse:
        params = self._clean_params({"tag": tag, "page": page, "limit": limit, **extra})
        return await self._request("tag.getTopTracks", params, TagTopTracksResponse)

    async def get_top_tags(self) -> GlobalTopTagsResponse:
        """Get the most used tags across Last.fm."""
        return await self._request("tag.getTopTags", {}, GlobalTopTagsResponse)
