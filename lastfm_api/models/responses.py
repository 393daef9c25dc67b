"""Result types, one per Last.fm method.

Each model mirrors the top-level object Last.fm returns for that method,
e.g. ``artist.getSimilar`` answers ``{"similarartists": {"artist": [...]}}``
and decodes into :class:`SimilarArtistsResponse`.  Methods with an identical
payload share a model (``*.getTopTags`` -> :class:`TopTagsResponse`,
``*.search`` -> :class:`SearchResponse`).
"""

from __future__ import annotations

from pydantic import Field

from lastfm_api.models.entities import (
    Album,
    AlbumList,
    Artist,
    ArtistList,
    LastFmModel,
    Lenient,
    Number,
    ResultAttr,
    Tag,
    TagList,
    Track,
    TrackList,
)


# ---------------------------------------------------------------------------
# Corrections
# ---------------------------------------------------------------------------

class ArtistCorrection(LastFmModel):
    artist: Lenient[Artist] = None
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class ArtistCorrections(LastFmModel):
    correction: Lenient[ArtistCorrection] = None


class ArtistCorrectionResponse(LastFmModel):
    """artist.getCorrection -- ``corrections`` is absent when nothing was corrected."""

    corrections: Lenient[ArtistCorrections] = None


class TrackCorrection(LastFmModel):
    track: Lenient[Track] = None
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class TrackCorrections(LastFmModel):
    correction: Lenient[TrackCorrection] = None


class TrackCorrectionResponse(LastFmModel):
    """track.getCorrection"""

    corrections: Lenient[TrackCorrections] = None


# ---------------------------------------------------------------------------
# Info
# ---------------------------------------------------------------------------

class ArtistInfoResponse(LastFmModel):
    """artist.getInfo"""

    artist: Lenient[Artist] = None


class AlbumInfoResponse(LastFmModel):
    """album.getInfo"""

    album: Lenient[Album] = None


class TrackInfoResponse(LastFmModel):
    """track.getInfo"""

    track: Lenient[Track] = None


class TagInfoResponse(LastFmModel):
    """tag.getInfo"""

    tag: Lenient[Tag] = None


# ---------------------------------------------------------------------------
# Similar
# ---------------------------------------------------------------------------

class SimilarArtistsResponse(LastFmModel):
    """artist.getSimilar"""

    similar_artists: Lenient[ArtistList] = Field(default=None, alias="similarartists")


class SimilarTracksResponse(LastFmModel):
    """track.getSimilar"""

    similar_tracks: Lenient[TrackList] = Field(default=None, alias="similartracks")


class SimilarTagsResponse(LastFmModel):
    """tag.getSimilar"""

    similar_tags: Lenient[TagList] = Field(default=None, alias="similartags")


# ---------------------------------------------------------------------------
# Top lists
# ---------------------------------------------------------------------------

class TopTagsResponse(LastFmModel):
    """artist.getTopTags, album.getTopTags and track.getTopTags"""

    top_tags: Lenient[TagList] = Field(default=None, alias="toptags")


class ArtistTopAlbumsResponse(LastFmModel):
    """artist.getTopAlbums"""

    top_albums: Lenient[AlbumList] = Field(default=None, alias="topalbums")


class ArtistTopTracksResponse(LastFmModel):
    """artist.getTopTracks"""

    top_tracks: Lenient[TrackList] = Field(default=None, alias="toptracks")


class TagTopAlbumsResponse(LastFmModel):
    """tag.getTopAlbums"""

    albums: Lenient[AlbumList] = None


class TagTopArtistsResponse(LastFmModel):
    """tag.getTopArtists"""

    top_artists: Lenient[ArtistList] = Field(default=None, alias="topartists")


class TagTopTracksResponse(LastFmModel):
    """tag.getTopTracks"""

    tracks: Lenient[TrackList] = None


class GlobalTopTagsResponse(LastFmModel):
    """tag.getTopTags -- the most used tags site-wide."""

    top_tags: Lenient[TagList] = Field(default=None, alias="toptags")


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

class ChartTopArtistsResponse(LastFmModel):
    """chart.getTopArtists"""

    artists: Lenient[ArtistList] = None


class ChartTopTracksResponse(LastFmModel):
    """chart.getTopTracks"""

    tracks: Lenient[TrackList] = None


class ChartTopTagsResponse(LastFmModel):
    """chart.getTopTags"""

    tags: Lenient[TagList] = None


# ---------------------------------------------------------------------------
# Search (OpenSearch envelope)
# ---------------------------------------------------------------------------

class SearchQuery(LastFmModel):
    text: str | None = Field(default=None, alias="#text")
    role: str | None = None
    search_terms: str | None = Field(default=None, alias="searchTerms")
    start_page: Number = Field(default=None, alias="startPage")


class SearchResults(LastFmModel):
    """The ``results`` object; only the ``*matches`` list for the searched type is set."""

    query: Lenient[SearchQuery] = Field(default=None, alias="opensearch:Query")
    total_results: Number = Field(default=None, alias="opensearch:totalResults")
    start_index: Number = Field(default=None, alias="opensearch:startIndex")
    items_per_page: Number = Field(default=None, alias="opensearch:itemsPerPage")
    artist_matches: Lenient[ArtistList] = Field(default=None, alias="artistmatches")
    album_matches: Lenient[AlbumList] = Field(default=None, alias="albummatches")
    track_matches: Lenient[TrackList] = Field(default=None, alias="trackmatches")
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class SearchResponse(LastFmModel):
    """artist.search, album.search and track.search"""

    results: Lenient[SearchResults] = None
