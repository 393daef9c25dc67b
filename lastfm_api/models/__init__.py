"""Last.fm result models -- re-exports all public model classes.

    - entities.py   -- Artist, Album, Track, Tag and their nested objects
    - responses.py  -- one top-level result type per Last.fm method
"""

from __future__ import annotations

from lastfm_api.models.entities import (
    Album,
    AlbumList,
    Artist,
    ArtistList,
    ArtistStats,
    Image,
    LastFmModel,
    ResultAttr,
    Streamable,
    Tag,
    TagList,
    Track,
    TrackList,
    Wiki,
)
from lastfm_api.models.responses import (
    AlbumInfoResponse,
    ArtistCorrection,
    ArtistCorrectionResponse,
    ArtistCorrections,
    ArtistInfoResponse,
    ArtistTopAlbumsResponse,
    ArtistTopTracksResponse,
    ChartTopArtistsResponse,
    ChartTopTagsResponse,
    ChartTopTracksResponse,
    GlobalTopTagsResponse,
    SearchQuery,
    SearchResponse,
    SearchResults,
    SimilarArtistsResponse,
    SimilarTagsResponse,
    SimilarTracksResponse,
    TagInfoResponse,
    TagTopAlbumsResponse,
    TagTopArtistsResponse,
    TagTopTracksResponse,
    TopTagsResponse,
    TrackCorrection,
    TrackCorrectionResponse,
    TrackCorrections,
    TrackInfoResponse,
)

__all__ = [
    "Album",
    "AlbumInfoResponse",
    "AlbumList",
    "Artist",
    "ArtistCorrection",
    "ArtistCorrectionResponse",
    "ArtistCorrections",
    "ArtistInfoResponse",
    "ArtistList",
    "ArtistStats",
    "ArtistTopAlbumsResponse",
    "ArtistTopTracksResponse",
    "ChartTopArtistsResponse",
    "ChartTopTagsResponse",
    "ChartTopTracksResponse",
    "GlobalTopTagsResponse",
    "Image",
    "LastFmModel",
    "ResultAttr",
    "SearchQuery",
    "SearchResponse",
    "SearchResults",
    "SimilarArtistsResponse",
    "SimilarTagsResponse",
    "SimilarTracksResponse",
    "Streamable",
    "Tag",
    "TagInfoResponse",
    "TagList",
    "TagTopAlbumsResponse",
    "TagTopArtistsResponse",
    "TagTopTracksResponse",
    "TopTagsResponse",
    "Track",
    "TrackCorrection",
    "TrackCorrectionResponse",
    "TrackCorrections",
    "TrackInfoResponse",
    "TrackList",
    "Wiki",
]
