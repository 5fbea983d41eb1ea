"""
Liri - Look up favorite tweets, songs and movies from the command line.
"""

__version__ = "1.0.0"

from .models import MenuSelection, SongResult, MovieResult, FavoritePost
from .spotify_client import SongClient
from .omdb_client import MovieClient
from .twitter_client import FavoritesClient
from .presenter import Presenter
from .menu import MenuController

__all__ = [
    "MenuSelection",
    "SongResult",
    "MovieResult",
    "FavoritePost",
    "SongClient",
    "MovieClient",
    "FavoritesClient",
    "Presenter",
    "MenuController",
]
