"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_client : decorateur injectant un client TMDB construit par le container
- run_async : execute une commande async et traduit les erreurs TMDB en code de sortie
"""

import asyncio
from contextlib import contextmanager
from functools import wraps
from typing import Any, Coroutine

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from tmdb_cli.adapters.api.errors import APIStatusError, ConfigurationError, TMDBError
from tmdb_cli.container import Container

console = Console()

EXIT_API_ERROR = 1
EXIT_CONFIG_ERROR = 2


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("tmdb_cli")
    try:
        yield
    finally:
        loguru_logger.enable("tmdb_cli")


def with_client():
    """
    Decorateur qui injecte un client TMDB en premier argument.

    Le client est construit par le container a chaque appel et ferme
    a la fin de la commande, y compris en cas d'erreur.

    Usage:
        @with_client()
        async def my_command(client, ...):
            details = await client.movies.details(42)
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            client = container.client()
            try:
                return await func(client, *args, **kwargs)
            finally:
                await client.close()
        return wrapper
    return decorator


def run_async(coro: Coroutine[Any, Any, Any]) -> Any:
    """
    Execute une coroutine de commande via asyncio.run().

    Les erreurs TMDB sont affichees en rouge et converties en typer.Exit:
    code 1 pour une erreur d'appel API, code 2 pour une configuration invalide.
    """
    try:
        return asyncio.run(coro)
    except ConfigurationError as e:
        _report(f"[red]Configuration invalide:[/red] {e}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from e
    except APIStatusError as e:
        _report(f"[red]Erreur TMDB (HTTP {e.status_code}):[/red] {e}")
        raise typer.Exit(code=EXIT_API_ERROR) from e
    except TMDBError as e:
        _report(f"[red]Erreur TMDB:[/red] {e}")
        raise typer.Exit(code=EXIT_API_ERROR) from e


def _report(message: str) -> None:
    # Le message Rich ne doit pas etre entrecoupe par les logs console
    with suppress_loguru():
        console.print(message)


async def load_page(cursor, page: int):
    """Positionne un curseur neuf sur ``page`` et recupere cette page."""
    return await cursor.set_page(page).next_page()
