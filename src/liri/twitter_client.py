"""
FavoritesClient - Fetches the caller's favorited tweets.
"""

import logging
from typing import Optional

import requests

from .config import DEFAULT_FAVORITES_COUNT, DEFAULT_FAVORITES_URL
from .errors import MalformedResponseError, RemoteApiError
from .models import FavoritePost

logger = logging.getLogger(__name__)


class FavoritesClient:
    """
    Reads a user's favorites timeline with an app bearer token.

    App-only auth has no calling user, so the screen name is required.
    The API caps a page at the requested count; only one page is read.
    """

    def __init__(
        self,
        bearer_token: Optional[str] = None,
        screen_name: Optional[str] = None,
        base_url: str = DEFAULT_FAVORITES_URL,
        count: int = DEFAULT_FAVORITES_COUNT,
        request_timeout: float = 10.0,
        session: Optional[requests.Session] = None
    ):
        self.bearer_token = bearer_token
        self.screen_name = screen_name
        self.base_url = base_url
        self.count = count
        self.request_timeout = request_timeout
        self._session = session or requests.Session()

    def fetch_favorites(self) -> list[FavoritePost]:
        """
        Fetch the most recent favorited posts.

        Returns:
            Posts in API response order, possibly empty

        Raises:
            RemoteApiError: On transport or authentication failure
            MalformedResponseError: If the body is not a list of posts
        """
        if not self.bearer_token:
            raise RemoteApiError("TWITTER_BEARER_TOKEN must be set.")
        if not self.screen_name:
            raise RemoteApiError("TWITTER_SCREEN_NAME must be set.")

        headers = {
            "Authorization": f"Bearer {self.bearer_token}",
            "Accept": "application/json",
        }
        params = {"count": self.count, "screen_name": self.screen_name}

        logger.debug("Fetching %d favorites from %s", self.count, self.base_url)
        try:
            resp = self._session.get(
                self.base_url, params=params, headers=headers, timeout=self.request_timeout
            )
        except requests.RequestException as e:
            raise RemoteApiError(f"Twitter request failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise RemoteApiError(
                f"Twitter returned HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"Twitter response is not valid JSON: {e}") from e

        if not isinstance(body, list):
            raise MalformedResponseError("Twitter response is not a list of posts.")

        return [self._parse_post(item) for item in body]

    def _parse_post(self, item) -> FavoritePost:
        if not isinstance(item, dict) or "text" not in item:
            raise MalformedResponseError("Twitter post is missing its text.")
        user = item.get("user") or {}
        return FavoritePost(
            text=item["text"],
            author_description=user.get("description") or ""
        )
