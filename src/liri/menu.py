"""
MenuController - Prompts for one option and dispatches it to a client.
"""

import logging
from typing import Callable, Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

from .config import Settings
from .errors import LiriError
from .models import MenuSelection
from .omdb_client import MovieClient
from .presenter import Presenter
from .spotify_client import SongClient
from .stored_query import read_stored_query
from .twitter_client import FavoritesClient

logger = logging.getLogger(__name__)

DEFAULT_SONG = "The Sign - Ace of Base"
DEFAULT_MOVIE = "Mr. Nobody."

MENU_MESSAGE = "Select Your Search Option"
SONG_MESSAGE = "Which song should I search for ?"
MOVIE_MESSAGE = "Which movie should I search for ?"

AskFn = Callable[..., str]


def rich_ask(console: Console) -> AskFn:
    """Build a prompt function backed by rich.prompt.Prompt."""

    def ask(message: str, choices: Optional[Sequence[str]] = None) -> str:
        if choices:
            return Prompt.ask(
                message, console=console, choices=list(choices), show_choices=False
            )
        return Prompt.ask(message, console=console, default="", show_default=False)

    return ask


def with_default(answer: Optional[str], default: str) -> str:
    """Return the stripped answer, or the default when it is blank."""
    answer = (answer or "").strip()
    return answer or default


class MenuController:
    """
    Runs a single select, prompt, call, present pass.

    Clients and the presenter are passed in so that nothing here holds
    process-wide state.
    """

    def __init__(
        self,
        songs: SongClient,
        movies: MovieClient,
        favorites: FavoritesClient,
        presenter: Presenter,
        ask: AskFn,
        settings: Optional[Settings] = None
    ):
        self.songs = songs
        self.movies = movies
        self.favorites = favorites
        self.presenter = presenter
        self.ask = ask
        self.settings = settings or Settings()
        self._actions = {
            MenuSelection.SHOW_FAVORITES: self.show_favorites,
            MenuSelection.SEARCH_SONG: self.search_song,
            MenuSelection.SEARCH_MOVIE: self.search_movie,
            MenuSelection.RUN_STORED_QUERY: self.run_stored_query,
        }

    def choose(self) -> MenuSelection:
        """
        Show the numbered menu and read one selection.

        The option number or its exact name is accepted.
        """
        options = list(MenuSelection)
        self.presenter.console.print(f"[bold]{MENU_MESSAGE}[/bold]")
        for number, option in enumerate(options, start=1):
            self.presenter.console.print(f"  [cyan]{number}[/cyan]) {option.value}")

        numbers = [str(n) for n in range(1, len(options) + 1)]
        answer = self.ask(MENU_MESSAGE, choices=numbers + [o.value for o in options]).strip()
        if answer in numbers:
            return options[int(answer) - 1]
        try:
            return MenuSelection.parse(answer)
        except ValueError:
            logger.info("No right option")
            raise LiriError(f"No right option: {answer!r}") from None

    def run(self, selection: Optional[MenuSelection] = None) -> None:
        """Dispatch exactly one action; errors propagate to the caller."""
        if selection is None:
            selection = self.choose()
        logger.info("Selected %s", selection.value)
        self._actions[selection]()

    def show_favorites(self) -> None:
        self.presenter.show_favorites(self.favorites.fetch_favorites())

    def search_song(self) -> None:
        self._present_song(with_default(self.ask(SONG_MESSAGE), DEFAULT_SONG))

    def search_movie(self) -> None:
        title = with_default(self.ask(MOVIE_MESSAGE), DEFAULT_MOVIE)
        self.presenter.show_movie(self.movies.search_movie(title))

    def run_stored_query(self) -> None:
        self._present_song(read_stored_query(self.settings.random_file))

    def _present_song(self, query: str) -> None:
        self.presenter.show_song(self.songs.search_song(query))
