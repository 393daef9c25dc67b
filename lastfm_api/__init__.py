"""Asynchronous, typed client for the Last.fm Web API.

    >>> from lastfm_api import LastFm
    >>> lastfm = LastFm("your-32-character-api-key")
    >>> info = await lastfm.artist.get_info("Radiohead")
"""

from lastfm_api.client import LastFm, is_valid_api_key_format
from lastfm_api.config import Settings, resolve_api_key_from_environment
from lastfm_api.endpoints import (
    AlbumEndpoints,
    ArtistEndpoints,
    ChartEndpoints,
    TagEndpoints,
    TrackEndpoints,
)
from lastfm_api.http_client import LastFmHttpClient, RequestOptions
from lastfm_api.utils.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ErrorCode,
    LastFmError,
    RateLimitError,
)
from lastfm_api.utils.logging import configure_logging
from lastfm_api.utils.params import clean_params

__version__ = "0.1.0"

__all__ = [
    "AlbumEndpoints",
    "ApiError",
    "ArtistEndpoints",
    "AuthenticationError",
    "ChartEndpoints",
    "ConfigurationError",
    "ErrorCode",
    "LastFm",
    "LastFmError",
    "LastFmHttpClient",
    "RateLimitError",
    "RequestOptions",
    "Settings",
    "TagEndpoints",
    "TrackEndpoints",
    "clean_params",
    "configure_logging",
    "is_valid_api_key_format",
    "resolve_api_key_from_environment",
]
