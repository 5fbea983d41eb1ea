"""
CLI - Interactive entry point for Liri.
"""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import Settings
from .errors import LiriError
from .logging_config import LOGGER_NAME, configure_logging
from .menu import MenuController, rich_ask
from .omdb_client import MovieClient
from .presenter import Presenter
from .spotify_client import SongClient
from .twitter_client import FavoritesClient

console = Console()
logger = logging.getLogger(LOGGER_NAME)


def build_controller(settings: Settings, console: Console) -> MenuController:
    """Construct every client and wire them into a controller."""
    songs = SongClient(
        client_id=settings.spotify_client_id,
        client_secret=settings.spotify_client_secret,
        request_timeout=settings.request_timeout
    )
    movies = MovieClient(
        api_key=settings.omdb_api_key,
        base_url=settings.omdb_url,
        request_timeout=settings.request_timeout
    )
    favorites = FavoritesClient(
        bearer_token=settings.twitter_bearer_token,
        screen_name=settings.twitter_screen_name,
        base_url=settings.favorites_url,
        count=settings.favorites_count,
        request_timeout=settings.request_timeout
    )
    return MenuController(
        songs=songs,
        movies=movies,
        favorites=favorites,
        presenter=Presenter(console=console),
        ask=rich_ask(console),
        settings=settings
    )


@click.command()
@click.version_option(version=__version__)
def cli():
    """
    Liri - Look up your favorite tweets, a song or a movie.

    Pick an option from the menu; song and movie searches ask for a
    title and fall back to a default when the answer is blank.
    """
    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    try:
        configure_logging(settings.log_file)
    except OSError as e:
        console.print(f"[red]Error: cannot open log file {escape(str(settings.log_file))}: {escape(str(e))}[/red]")
        sys.exit(1)

    controller = build_controller(settings, console)

    try:
        controller.run()
    except LiriError as e:
        logger.error("%s: %s", type(e).__name__, e)
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(e.exit_code)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Aborted.[/yellow]")
        sys.exit(130)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
