from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
import spotipy

from liri.errors import MalformedResponseError, NoMatchError, RemoteApiError
from liri.spotify_client import SongClient


THE_SIGN = {
    "name": "The Sign",
    "album": {"name": "The Sign (US Album) [Remastered]", "artists": [{"name": "Ace of Base"}]},
    "artists": [{"name": "Ace of Base"}],
    "external_urls": {"spotify": "https://open.spotify.com/track/0hrBpAOgrt8RXigk83LLNE"},
}


def _spotify(items) -> MagicMock:
    spotify = MagicMock()
    spotify.search.return_value = {"tracks": {"items": items}}
    return spotify


def test_search_song_returns_first_match() -> None:
    other = dict(THE_SIGN, name="All That She Wants")
    spotify = _spotify([THE_SIGN, other])
    client = SongClient(spotify=spotify)

    song = client.search_song("The Sign - Ace of Base")

    assert song.title == "The Sign"
    assert song.album == "The Sign (US Album) [Remastered]"
    assert song.artist == "Ace of Base"
    assert song.external_link == "https://open.spotify.com/track/0hrBpAOgrt8RXigk83LLNE"
    spotify.search.assert_called_once_with(q="The Sign - Ace of Base", type="track", limit=1)


def test_artist_falls_back_to_track_artists() -> None:
    track = dict(THE_SIGN, album={"name": "Single"}, artists=[{"name": "Someone Else"}])
    client = SongClient(spotify=_spotify([track]))

    assert client.search_song("x").artist == "Someone Else"


def test_empty_result_list_is_no_match() -> None:
    client = SongClient(spotify=_spotify([]))

    with pytest.raises(NoMatchError):
        client.search_song("asdfghjkl")


def test_track_missing_fields_is_malformed() -> None:
    client = SongClient(spotify=_spotify([{"name": "Half a track"}]))

    with pytest.raises(MalformedResponseError):
        client.search_song("x")


def test_spotify_exception_is_remote_api_error() -> None:
    spotify = MagicMock()
    spotify.search.side_effect = spotipy.exceptions.SpotifyException(401, -1, "invalid access token")
    client = SongClient(spotify=spotify)

    with pytest.raises(RemoteApiError) as excinfo:
        client.search_song("x")
    assert excinfo.value.status_code == 401
    assert spotify.search.call_count == 1


def test_transport_failure_is_remote_api_error() -> None:
    spotify = MagicMock()
    spotify.search.side_effect = requests.ConnectionError("offline")

    with pytest.raises(RemoteApiError):
        SongClient(spotify=spotify).search_song("x")


def test_missing_credentials_is_remote_api_error() -> None:
    with pytest.raises(RemoteApiError, match="SPOTIFY_CLIENT_ID"):
        SongClient().search_song("x")


def test_token_request_uses_the_request_timeout() -> None:
    client = SongClient(client_id="id", client_secret="secret", request_timeout=3.0)

    spotify = client._client()

    assert spotify.requests_timeout == 3.0
    assert spotify.auth_manager.requests_timeout == 3.0
