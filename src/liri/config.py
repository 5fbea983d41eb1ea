"""
Config - Settings and credentials read from the environment.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

DEFAULT_OMDB_URL = "http://www.omdbapi.com/"
DEFAULT_OMDB_API_KEY = "trilogy"
DEFAULT_FAVORITES_URL = "https://api.twitter.com/1.1/favorites/list.json"
DEFAULT_FAVORITES_COUNT = 20
DEFAULT_LOG_FILE = "app.log"
DEFAULT_RANDOM_FILE = "random.txt"
DEFAULT_REQUEST_TIMEOUT = 10.0


def load_env(*, override: bool = False) -> Optional[Path]:
    """Load the first .env file found in the repo root or the working directory."""
    repo_root = Path(__file__).resolve().parents[2]
    candidates = [
        repo_root / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None


def _get(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = (environ.get(name) or "").strip()
    return value or None


@dataclass
class Settings:
    """Holds all application configuration."""
    spotify_client_id: Optional[str] = None
    spotify_client_secret: Optional[str] = None
    twitter_bearer_token: Optional[str] = None
    twitter_screen_name: Optional[str] = None
    omdb_api_key: str = DEFAULT_OMDB_API_KEY
    omdb_url: str = DEFAULT_OMDB_URL
    favorites_url: str = DEFAULT_FAVORITES_URL
    favorites_count: int = DEFAULT_FAVORITES_COUNT
    log_file: str = DEFAULT_LOG_FILE
    random_file: str = DEFAULT_RANDOM_FILE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ after
                loading any .env file)

        Returns:
            A populated Settings instance

        Raises:
            ValueError: If LIRI_REQUEST_TIMEOUT is not a number
        """
        if environ is None:
            load_env()
            environ = os.environ

        timeout_raw = _get(environ, "LIRI_REQUEST_TIMEOUT")
        if timeout_raw is None:
            timeout = DEFAULT_REQUEST_TIMEOUT
        else:
            try:
                timeout = float(timeout_raw)
            except ValueError:
                raise ValueError(
                    f"LIRI_REQUEST_TIMEOUT must be a number, got {timeout_raw!r}"
                ) from None

        return cls(
            spotify_client_id=_get(environ, "SPOTIFY_CLIENT_ID"),
            spotify_client_secret=_get(environ, "SPOTIFY_CLIENT_SECRET"),
            twitter_bearer_token=_get(environ, "TWITTER_BEARER_TOKEN"),
            twitter_screen_name=_get(environ, "TWITTER_SCREEN_NAME"),
            omdb_api_key=_get(environ, "OMDB_API_KEY") or DEFAULT_OMDB_API_KEY,
            log_file=_get(environ, "LIRI_LOG_FILE") or DEFAULT_LOG_FILE,
            random_file=_get(environ, "LIRI_RANDOM_FILE") or DEFAULT_RANDOM_FILE,
            request_timeout=timeout,
        )
