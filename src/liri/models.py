"""
Models - Menu selection and the normalized results shown to the user.
"""

from dataclasses import dataclass
from enum import Enum


class MenuSelection(str, Enum):
    """The closed set of menu options, in display order."""

    SHOW_FAVORITES = "my-tweets"
    SEARCH_SONG = "spotify-this-song"
    SEARCH_MOVIE = "movie-this"
    RUN_STORED_QUERY = "do-what-it-says"

    @classmethod
    def parse(cls, value: str) -> "MenuSelection":
        """
        Resolve a menu string into a selection.

        Raises:
            ValueError: If the value is not one of the menu strings
        """
        for selection in cls:
            if selection.value == value:
                return selection
        raise ValueError(f"No right option: {value!r}")


@dataclass(frozen=True)
class SongResult:
    """First track matching a song query."""
    title: str
    album: str
    artist: str
    external_link: str

    def fields(self) -> list[tuple[str, str]]:
        return [
            ("Song Name", self.title),
            ("Album Name", self.album),
            ("Artist Name", self.artist),
            ("Spotify Link", self.external_link),
        ]


@dataclass(frozen=True)
class MovieResult:
    """Metadata for a single exact-title movie lookup."""
    title: str
    year: str
    imdb_rating: str
    rotten_tomatoes_rating: str
    country: str
    language: str
    plot: str
    actors: str

    def fields(self) -> list[tuple[str, str]]:
        return [
            ("Title", self.title),
            ("Year", self.year),
            ("IMDB Rating", self.imdb_rating),
            ("Rotten Tomatoes Rating", self.rotten_tomatoes_rating),
            ("Country", self.country),
            ("Language", self.language),
            ("Plot", self.plot),
            ("Actors", self.actors),
        ]


@dataclass(frozen=True)
class FavoritePost:
    """One favorited post, in the order the API returned it."""
    text: str
    author_description: str

    def fields(self) -> list[tuple[str, str]]:
        return [
            ("Tweet", self.text),
            ("Author", self.author_description),
        ]
