"""Album endpoints (``album.*``)."""

from __future__ import annotations

from lastfm_api.endpoints.base import Autocorrect, BaseEndpoint
from lastfm_api.models.responses import AlbumInfoResponse, SearchResponse, TopTagsResponse
from lastfm_api.utils.params import ParamValue


class AlbumEndpoints(BaseEndpoint):
    async def get_info(
        self,
        artist: str,
        album: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        username: str | None = None,
        lang: str | None = None,
        **extra: ParamValue,
    ) -> AlbumInfoResponse:
        """Get metadata, tracklist, tags and wiki for *album* by *artist*."""
        params = self._clean_params({
            "artist": artist,
            "album": album,
            "mbid": mbid,
            "autocorrect": autocorrect,
            "username": username,
            "lang": lang,
            **extra,
        })
        return await self._request("album.getInfo", params, AlbumInfoResponse)

    async def get_top_tags(
        self,
        artist: str,
        album: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        **extra: ParamValue,
    ) -> TopTagsResponse:
        params = self._clean_params({
            "artist": artist,
            "album": album,
            "mbid": mbid,
            "autocorrect": autocorrect,
            **extra,
        })
        return await self._request("album.getTopTags", params, TopTagsResponse)

    async def search(
        self,
        album: str,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> SearchResponse:
        """Search albums by title; matches are in ``results.album_matches``."""
        params = self._clean_params({
            "album": album,
            "page": page,
            "limit": limit,
            **extra,
        })
        return await self._request("album.search", params, SearchResponse)
