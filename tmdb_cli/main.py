"""
Point d'entree CLI de tmdb-cli.

Configure le logging selon la verbosite et monte les sous-commandes films et series.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import movies_app, tv_app
from .config import Settings
from .container import Container
from .logging_config import configure_logging, resolve_log_level

app = typer.Typer(
    name="tmdb",
    help="Client en ligne de commande pour The Movie Database",
)
container = Container()


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """tmdb - Recherche de films et series sur TMDB."""
    settings = get_config()
    configure_logging(
        log_level=resolve_log_level(verbose, quiet, default=settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        host=settings.host,
    )


# Monter les sous-commandes
app.add_typer(movies_app, name="movies")
app.add_typer(tv_app, name="tv")


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration tmdb-cli")
    typer.echo(f"Hote TMDB : {config.host}")
    typer.echo(f"Jeton TMDB : {'configure' if config.token_configured else 'absent (TMDB_TOKEN)'}")
    typer.echo(f"Timeout : {config.timeout:g} s")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"tmdb-cli v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
