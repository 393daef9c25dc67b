"""Core Last.fm entities shared by every result type.

Defines Pydantic v2 models for artists, albums, tracks, tags and the small
objects nested in them (images, wikis, pagination attributes).  All models
use frozen config and keep unknown keys (``extra="allow"``), so a field
Last.fm adds tomorrow is still reachable through ``model_extra``.

Last.fm's JSON is loosely shaped:

    - a list with a single element is often sent as a bare object
    - an empty list or object is often sent as ``""`` or ``"\\n "``
    - the same field can be a number or a numeric string across methods
    - punctuation keys such as ``#text`` and ``@attr`` are used freely

Every field is therefore optional, lists go through :func:`as_list`, nested
objects go through :func:`blank_to_none`, and punctuation keys are exposed
under Python names via aliases.  Nothing here asserts that a field exists.
"""

from __future__ import annotations

from typing import Annotated, Any, Optional, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

T = TypeVar("T")


def as_list(value: Any) -> Any:
    """Normalise Last.fm's list encodings to a real list."""
    if value is None or isinstance(value, str):
        return []
    if isinstance(value, dict):
        return [value]
    return value


def blank_to_none(value: Any) -> Any:
    """Treat the whitespace strings Last.fm sends for empty objects as absent."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


LenientList = Annotated[list[T], BeforeValidator(as_list)]
Lenient = Annotated[Optional[T], BeforeValidator(blank_to_none)]

# Counts and durations arrive as either int or numeric string.
Number = Union[int, float, str, None]


class LastFmModel(BaseModel):
    """Base for all decoded payloads: immutable, permissive, alias-aware."""

    # Names, sizes and ids occasionally arrive as bare numbers.
    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


# ---------------------------------------------------------------------------
# Small nested objects
# ---------------------------------------------------------------------------

class Image(LastFmModel):
    """One artwork URL at a given size ("small" ... "mega", or "")."""

    text: str | None = Field(default=None, alias="#text")
    size: str | None = None


class Wiki(LastFmModel):
    """Free-text description block (``bio`` on artists, ``wiki`` elsewhere)."""

    published: str | None = None
    summary: str | None = None
    content: str | None = None


class Streamable(LastFmModel):
    text: str | None = Field(default=None, alias="#text")
    fulltrack: str | None = None


class ArtistStats(LastFmModel):
    listeners: Number = None
    playcount: Number = None
    userplaycount: Number = None


class ResultAttr(LastFmModel):
    """The ``@attr`` object: pagination on lists, rank on list items, query echo on searches."""

    page: Number = None
    per_page: Number = Field(default=None, alias="perPage")
    total_pages: Number = Field(default=None, alias="totalPages")
    total: Number = None
    rank: Number = None
    for_: str | None = Field(default=None, alias="for")
    artist: str | None = None
    tag: str | None = None


class Tag(LastFmModel):
    name: str | None = None
    url: str | None = None
    count: Number = None
    reach: Number = None
    total: Number = None
    taggings: Number = None
    wiki: Lenient[Wiki] = None


# ---------------------------------------------------------------------------
# Main entities
# ---------------------------------------------------------------------------

class Artist(LastFmModel):
    """An artist as returned by artist.*, tag.* and chart.* methods."""

    name: str | None = None
    mbid: str | None = None
    url: str | None = None
    image: LenientList[Image] = Field(default_factory=list)
    listeners: Number = None
    playcount: Number = None
    match: Number = None
    streamable: Union[Streamable, str, None] = None
    ontour: str | None = None
    stats: Lenient[ArtistStats] = None
    similar: Lenient[ArtistList] = None
    tags: Lenient[TagList] = None
    bio: Lenient[Wiki] = None
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class Album(LastFmModel):
    """An album; ``artist`` is a plain name in some methods and an object in others."""

    name: str | None = None
    title: str | None = None
    artist: Union[Artist, str, None] = None
    mbid: str | None = None
    url: str | None = None
    image: LenientList[Image] = Field(default_factory=list)
    listeners: Number = None
    playcount: Number = None
    tracks: Lenient[TrackList] = None
    tags: Lenient[TagList] = None
    wiki: Lenient[Wiki] = None
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class Track(LastFmModel):
    name: str | None = None
    artist: Union[Artist, str, None] = None
    album: Union[Album, str, None] = None
    mbid: str | None = None
    url: str | None = None
    duration: Number = None
    listeners: Number = None
    playcount: Number = None
    match: Number = None
    image: LenientList[Image] = Field(default_factory=list)
    streamable: Union[Streamable, str, None] = None
    tags: Lenient[TagList] = None
    toptags: Lenient[TagList] = None
    wiki: Lenient[Wiki] = None
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


# ---------------------------------------------------------------------------
# List containers -- ``{"artist": [...], "@attr": {...}}`` and friends
# ---------------------------------------------------------------------------

class ArtistList(LastFmModel):
    artist: LenientList[Artist] = Field(default_factory=list)
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class AlbumList(LastFmModel):
    album: LenientList[Album] = Field(default_factory=list)
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class TrackList(LastFmModel):
    track: LenientList[Track] = Field(default_factory=list)
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


class TagList(LastFmModel):
    tag: LenientList[Tag] = Field(default_factory=list)
    attr: Lenient[ResultAttr] = Field(default=None, alias="@attr")


# Artist, Album and Track reference the list containers defined after them.
Artist.model_rebuild()
Album.model_rebuild()
Track.model_rebuild()
