"""
MovieClient - Looks up a single title in the OMDb movie database.
"""

import logging
from typing import Any, Optional

import requests

from .config import DEFAULT_OMDB_API_KEY, DEFAULT_OMDB_URL
from .errors import MalformedResponseError, RemoteApiError
from .models import MovieResult

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"
ROTTEN_TOMATOES_INDEX = 1
USER_AGENT = "Mozilla/5.0 (compatible; Liri/1.0)"


def rotten_tomatoes_rating(body: dict[str, Any]) -> str:
    """
    Read the Rotten Tomatoes entry of an OMDb ratings array.

    OMDb lists Internet Movie Database first and Rotten Tomatoes second;
    a missing second entry or an empty value yields "N/A".
    """
    ratings = body.get("Ratings")
    if not isinstance(ratings, list) or len(ratings) <= ROTTEN_TOMATOES_INDEX:
        return NOT_AVAILABLE
    entry = ratings[ROTTEN_TOMATOES_INDEX]
    if not isinstance(entry, dict):
        return NOT_AVAILABLE
    return entry.get("Value") or NOT_AVAILABLE


def parse_movie(body: Any) -> MovieResult:
    """
    Parse a decoded OMDb body into a MovieResult.

    Raises:
        MalformedResponseError: If the body is not an object or has no Title
    """
    if not isinstance(body, dict):
        raise MalformedResponseError("OMDb response is not a JSON object.")

    title = body.get("Title")
    if not title:
        reason = body.get("Error") or "response has no Title"
        raise MalformedResponseError(f"OMDb lookup failed: {reason}")

    def field(name: str) -> str:
        return str(body.get(name) or NOT_AVAILABLE)

    return MovieResult(
        title=str(title),
        year=field("Year"),
        imdb_rating=field("imdbRating"),
        rotten_tomatoes_rating=rotten_tomatoes_rating(body),
        country=field("Country"),
        language=field("Language"),
        plot=field("Plot"),
        actors=field("Actors"),
    )


class MovieClient:
    """Issues exact-title lookups against OMDb."""

    def __init__(
        self,
        api_key: str = DEFAULT_OMDB_API_KEY,
        base_url: str = DEFAULT_OMDB_URL,
        request_timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.request_timeout = request_timeout
        if session is None:
            session = requests.Session()
            session.headers.update({
                "User-Agent": USER_AGENT
            })
        self._session = session

    def search_movie(self, title: str) -> MovieResult:
        """
        Look up a movie by exact title.

        Args:
            title: Movie title to look up

        Returns:
            MovieResult parsed from the response body

        Raises:
            RemoteApiError: On transport failure or a non-2xx status
            MalformedResponseError: If the body is not JSON or has no Title
        """
        params = {"apikey": self.api_key, "t": title}
        logger.debug("Looking up movie %r at %s", title, self.base_url)

        try:
            resp = self._session.get(self.base_url, params=params, timeout=self.request_timeout)
        except requests.RequestException as e:
            raise RemoteApiError(f"OMDb request failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise RemoteApiError(
                f"OMDb returned HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"OMDb response is not valid JSON: {e}") from e

        return parse_movie(body)
