"""Last.fm endpoint groups.

One class per Last.fm resource, each holding a reference to the shared
:class:`~lastfm_api.http_client.LastFmHttpClient`:

    1. ArtistEndpoints  -- artist.getCorrection/getInfo/getSimilar/getTopAlbums/
       getTopTags/getTopTracks/search
    2. AlbumEndpoints   -- album.getInfo/getTopTags/search
    3. TrackEndpoints   -- track.getCorrection/getInfo/getSimilar/getTopTags/search
    4. TagEndpoints     -- tag.getInfo/getSimilar/getTopAlbums/getTopArtists/
       getTopTracks/getTopTags
    5. ChartEndpoints   -- chart.getTopArtists/getTopTracks/getTopTags
"""

from lastfm_api.endpoints.album import AlbumEndpoints
from lastfm_api.endpoints.artist import ArtistEndpoints
from lastfm_api.endpoints.base import Autocorrect, BaseEndpoint
from lastfm_api.endpoints.chart import ChartEndpoints
from lastfm_api.endpoints.tag import TagEndpoints
from lastfm_api.endpoints.track import TrackEndpoints

__all__ = [
    "AlbumEndpoints",
    "ArtistEndpoints",
    "Autocorrect",
    "BaseEndpoint",
    "ChartEndpoints",
    "TagEndpoints",
    "TrackEndpoints",
]
