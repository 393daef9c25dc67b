"""Main Last.fm API entry point.

Usage::

    async with LastFm(api_key) as lastfm:
        info = await lastfm.artist.get_info("Radiohead")
        album = await lastfm.album.get_info("Radiohead", "OK Computer")
        results = await lastfm.track.search("Creep")

:class:`LastFm` wires one :class:`~lastfm_api.http_client.LastFmHttpClient`
to the five endpoint groups (``artist``, ``album``, ``track``, ``tag``,
``chart``) and offers a raw :meth:`LastFm.request` for methods the groups do
not cover.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import httpx

from lastfm_api.config.environment import resolve_api_key_from_environment
from lastfm_api.config.settings import Settings
from lastfm_api.endpoints import (
    AlbumEndpoints,
    ArtistEndpoints,
    ChartEndpoints,
    TagEndpoints,
    TrackEndpoints,
)
from lastfm_api.http_client import LastFmHttpClient, RequestOptions
from lastfm_api.utils.logging import get_logger

# Last.fm API keys are 32-character hexadecimal strings.
_API_KEY_PATTERN = re.compile(r"^[a-f0-9]{32}$", re.IGNORECASE)

logger = get_logger(__name__)


def is_valid_api_key_format(api_key: str) -> bool:
    return bool(_API_KEY_PATTERN.match(api_key))


class LastFm:
    """Asynchronous Last.fm Web API client.

    Parameters
    ----------
    api_key:
        Last.fm API key.  May be omitted and set later with
        :meth:`set_api_key`; requests fail with ``AuthenticationError``
        until a key is set.
    settings:
        Transport settings; defaults to :class:`Settings` read from the
        ``LASTFM_*`` environment.
    transport:
        Optional ``httpx`` transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if api_key:
            _warn_on_unexpected_key_format(api_key)

        self._http_client = LastFmHttpClient(api_key, settings=settings, transport=transport)

        self.artist = ArtistEndpoints(self._http_client)
        self.album = AlbumEndpoints(self._http_client)
        self.track = TrackEndpoints(self._http_client)
        self.tag = TagEndpoints(self._http_client)
        self.chart = ChartEndpoints(self._http_client)

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> LastFm:
        """Build a client whose API key comes from the environment.

        See :data:`lastfm_api.config.environment.API_KEY_ENV_NAMES` for the
        variables checked.  A missing key is not an error here.
        """
        return cls(resolve_api_key_from_environment(environ), **kwargs)

    # -- Key management --------------------------------------------------------

    def set_api_key(self, api_key: str) -> None:
        """Set the API key for subsequent requests."""
        if api_key:
            _warn_on_unexpected_key_format(api_key)
        self._http_client.set_api_key(api_key)

    def clear_api_key(self) -> None:
        self._http_client.clear_api_key()

    # -- Raw access ------------------------------------------------------------

    async def request(
        self,
        method: str,
        params: Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """Call any Last.fm *method* and return the undecoded JSON body."""
        return await self._http_client.request(method, params, options)

    def get_http_client(self) -> LastFmHttpClient:
        return self._http_client

    # -- Lifecycle -------------------------------------------------------------

    def destroy(self) -> None:
        """Clear the API key and run ``cleanup()`` on endpoint groups that define one."""
        self.clear_api_key()
        for endpoint in (self.artist, self.album, self.track, self.tag, self.chart):
            cleanup = getattr(endpoint, "cleanup", None)
            if callable(cleanup):
                cleanup()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http_client.aclose()

    async def __aenter__(self) -> LastFm:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _warn_on_unexpected_key_format(api_key: str) -> None:
    # Advisory only: never blocks construction or requests.
    if not is_valid_api_key_format(api_key):
        logger.warning("lastfm_api_key_format_invalid", length=len(api_key))
