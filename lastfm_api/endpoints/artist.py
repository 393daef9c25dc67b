"""Artist endpoints (``artist.*``)."""

from __future__ import annotations

from lastfm_api.endpoints.base import Autocorrect, BaseEndpoint
from lastfm_api.models.responses import (
    ArtistCorrectionResponse,
    ArtistInfoResponse,
    ArtistTopAlbumsResponse,
    ArtistTopTracksResponse,
    SearchResponse,
    SimilarArtistsResponse,
    TopTagsResponse,
)
from lastfm_api.utils.params import ParamValue


class ArtistEndpoints(BaseEndpoint):
    """Artist lookups, similarity and top lists.

    Methods that take an ``mbid`` also accept an empty *artist* name; the
    empty value is dropped and Last.fm resolves the artist by MBID.
    """

    async def get_correction(self, artist: str) -> ArtistCorrectionResponse:
        """Return Last.fm's canonical spelling for *artist*, if it has one."""
        params = self._clean_params({"artist": artist})
        return await self._request("artist.getCorrection", params, ArtistCorrectionResponse)

    async def get_info(
        self,
        artist: str,
        *,
        mbid: str | None = None,
        lang: str | None = None,
        autocorrect: Autocorrect | None = None,
        username: str | None = None,
        **extra: ParamValue,
    ) -> ArtistInfoResponse:
        """Get metadata, stats, bio and tags for *artist*.

        *username* adds that user's play count to the stats; *lang* selects the
        biography language (ISO 639 alpha-2).
        """
        params = self._clean_params({
            "artist": artist,
            "mbid": mbid,
            "lang": lang,
            "autocorrect": autocorrect,
            "username": username,
            **extra,
        })
        return await self._request("artist.getInfo", params, ArtistInfoResponse)

    async def get_similar(
        self,
        artist: str,
        *,
        mbid: str | None = None,
        limit: int | None = None,
        autocorrect: Autocorrect | None = None,
        **extra: ParamValue,
    ) -> SimilarArtistsResponse:
        params = self._clean_params({
            "artist": artist,
            "mbid": mbid,
            "limit": limit,
            "autocorrect": autocorrect,
            **extra,
        })
        return await self._request("artist.getSimilar", params, SimilarArtistsResponse)

    async def get_top_albums(
        self,
        artist: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> ArtistTopAlbumsResponse:
        params = self._clean_params({
            "artist": artist,
            "mbid": mbid,
            "autocorrect": autocorrect,
            "page": page,
            "limit": limit,
            **extra,
        })
        return await self._request("artist.getTopAlbums", params, ArtistTopAlbumsResponse)

    async def get_top_tags(
        self,
        artist: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        user: str | None = None,
        **extra: ParamValue,
    ) -> TopTagsResponse:
        params = self._clean_params({
            "artist": artist,
            "mbid": mbid,
            "autocorrect": autocorrect,
            "user": user,
            **extra,
        })
        return await self._request("artist.getTopTags", params, TopTagsResponse)

    async def get_top_tracks(
        self,
        artist: str,
        *,
        mbid: str | None = None,
        autocorrect: Autocorrect | None = None,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> ArtistTopTracksResponse:
        params = self._clean_params({
            "artist": artist,
            "mbid": mbid,
            "autocorrect": autocorrect,
            "page": page,
            "limit": limit,
            **extra,
        })
        return await self._request("artist.getTopTracks", params, ArtistTopTracksResponse)

    async def search(
        self,
        artist: str,
        *,
        page: int | None = None,
        limit: int | None = None,
        **extra: ParamValue,
    ) -> SearchResponse:
        """Search artists by name; matches are in ``results.artist_matches``."""
        params = self._clean_params({
            "artist": artist,
            "page": page,
            "limit": limit,
            **extra,
        })
        return await self._request("artist.search", params, SearchResponse)
