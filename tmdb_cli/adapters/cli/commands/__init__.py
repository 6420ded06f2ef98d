"""Sous-package CLI commands - re-exporte les sous-applications Typer."""

from tmdb_cli.adapters.cli.commands.movie_commands import movies_app
from tmdb_cli.adapters.cli.commands.tv_commands import tv_app

__all__ = [
    "movies_app",
    "tv_app",
]
