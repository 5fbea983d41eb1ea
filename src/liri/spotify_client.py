"""
SongClient - Searches the Spotify catalog for a track.
"""

import logging
from typing import Any, Optional

import requests
import spotipy
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from .errors import MalformedResponseError, NoMatchError, RemoteApiError
from .models import SongResult

logger = logging.getLogger(__name__)


class SongClient:
    """
    Handles Spotify API authentication and track search.

    The underlying spotipy client is built lazily on the first search so
    that a run which never searches for a song needs no credentials.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        search_limit: int = 1,
        request_timeout: float = 10.0,
        spotify: Optional[Any] = None
    ):
        """
        Initialize the song client.

        Args:
            client_id: Spotify API client ID
            client_secret: Spotify API client secret
            search_limit: Number of tracks requested per search
            request_timeout: Seconds to wait for the API
            spotify: Pre-built client exposing search(); skips authentication
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.search_limit = search_limit
        self.request_timeout = request_timeout
        self._spotify = spotify

    def _client(self):
        if self._spotify is not None:
            return self._spotify

        if not self.client_id or not self.client_secret:
            raise RemoteApiError(
                "SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET must be set."
            )

        auth_manager = SpotifyClientCredentials(
            client_id=self.client_id,
            client_secret=self.client_secret,
            requests_timeout=self.request_timeout
        )
        self._spotify = spotipy.Spotify(
            auth_manager=auth_manager,
            requests_timeout=self.request_timeout,
            retries=0,
            status_retries=0
        )
        return self._spotify

    def search_song(self, query: str) -> SongResult:
        """
        Search for a track and return the first match.

        Args:
            query: Free-text song query

        Returns:
            SongResult for the first track in the result list

        Raises:
            RemoteApiError: On transport or authentication failure
            NoMatchError: If the search returned no tracks
            MalformedResponseError: If the first track lacks required fields
        """
        spotify = self._client()
        logger.debug("Searching Spotify for track %r", query)

        try:
            response = spotify.search(q=query, type="track", limit=self.search_limit)
        except spotipy.exceptions.SpotifyException as e:
            raise RemoteApiError(f"Spotify search failed: {e.msg}", status_code=e.http_status) from e
        except (SpotifyOauthError, requests.RequestException) as e:
            raise RemoteApiError(f"Spotify search failed: {e}") from e

        try:
            items = response["tracks"]["items"]
        except (KeyError, TypeError) as e:
            raise MalformedResponseError(f"Spotify response has no track list: {e!r}") from e

        if not items:
            raise NoMatchError(f"No song found for: {query}")

        return self._parse_track(items[0])

    def _parse_track(self, track: dict) -> SongResult:
        """
        Parse a track dict into a SongResult.

        Args:
            track: Raw track data from Spotify API

        Returns:
            SongResult object
        """
        try:
            album = track["album"]
            artists = album.get("artists") or track["artists"]
            return SongResult(
                title=track["name"],
                album=album["name"],
                artist=artists[0]["name"],
                external_link=track["external_urls"]["spotify"]
            )
        except (AttributeError, KeyError, IndexError, TypeError) as e:
            raise MalformedResponseError(f"Spotify track is missing {e!r}") from e
