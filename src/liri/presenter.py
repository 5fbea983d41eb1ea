"""
Presenter - Writes results to the console and the log file.
"""

import logging
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape

from .models import FavoritePost, MovieResult, SongResult

SEPARATOR = "*" * 74
POST_SEPARATOR = "-----------"


class Presenter:
    """
    Emits fixed-field blocks for each result type.

    The console and the log receive the same labels and values in the
    same order; only the console output carries color.
    """

    def __init__(self, console: Optional[Console] = None, logger: Optional[logging.Logger] = None):
        self.console = console or Console()
        self.logger = logger or logging.getLogger("liri.presenter")

    def show_song(self, song: SongResult) -> None:
        self._block(song.fields())

    def show_movie(self, movie: MovieResult) -> None:
        self._block(movie.fields())

    def show_favorites(self, posts: Iterable[FavoritePost]) -> None:
        self._separator(SEPARATOR, "cyan")
        for post in posts:
            self._separator(POST_SEPARATOR, "blue")
            self._fields(post.fields())
            self._separator(POST_SEPARATOR, "blue")
        self._separator(SEPARATOR, "cyan")

    def _block(self, fields: list[tuple[str, str]]) -> None:
        self._separator(SEPARATOR, "cyan")
        self._fields(fields)
        self._separator(SEPARATOR, "cyan")

    def _separator(self, line: str, style: str) -> None:
        self.logger.info(line)
        self.console.print(f"[{style}]{line}[/{style}]")

    def _fields(self, fields: list[tuple[str, str]]) -> None:
        for label, value in fields:
            self.logger.info("%s: %s", label, value)
            self.console.print(
                f"[magenta]{escape(label)}:[/magenta] [green]{escape(value)}[/green]",
                soft_wrap=True
            )
