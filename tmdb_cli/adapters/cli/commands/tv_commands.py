"""
Commandes CLI des series (tv search/details/credits/reviews/...).
"""

from typing import Annotated, Optional

import typer

from tmdb_cli.adapters.cli.display import (
    render_credits,
    render_reviews,
    render_show_details,
    render_shows,
)
from tmdb_cli.adapters.cli.helpers import load_page, run_async, with_client

# Application Typer pour les commandes series
tv_app = typer.Typer(
    name="tv",
    help="Recherche et consultation des series TMDB",
    rich_markup_mode="rich",
)

PageOption = Annotated[int, typer.Option("--page", "-p", min=1, help="Page a afficher")]
ShowIdArgument = Annotated[int, typer.Argument(help="ID TMDB de la serie")]


@tv_app.command("search")
def search(
    query: Annotated[str, typer.Argument(help="Nom a rechercher")],
    page: PageOption = 1,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee de premiere diffusion")
    ] = None,
    language: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Langue des resultats (ex: fr-FR)")
    ] = None,
    adult: Annotated[
        bool, typer.Option("--adult", help="Inclure les series pour adultes")
    ] = False,
) -> None:
    """Recherche des series par nom."""
    run_async(_search_async(query, page, year, language, adult))


@with_client()
async def _search_async(
    client,
    query: str,
    page: int,
    year: Optional[int],
    language: Optional[str],
    adult: bool,
) -> None:
    """Implementation async de la commande tv search."""
    search = client.tv.search(query).page(page)
    if year is not None:
        search.year(year)
    if language:
        search.language(language)
    if adult:
        search.adult()

    render_shows(await search.exec(), title=f"Recherche: {query}")


@tv_app.command("details")
def details(show_id: ShowIdArgument) -> None:
    """Affiche la fiche complete d'une serie."""
    run_async(_details_async(show_id))


@with_client()
async def _details_async(client, show_id: int) -> None:
    """Implementation async de la commande tv details."""
    render_show_details(await client.tv.details(show_id))


@tv_app.command("credits")
def credits(
    show_id: ShowIdArgument,
    limit: Annotated[
        int, typer.Option("--limit", "-n", min=1, help="Nombre d'acteurs a afficher")
    ] = 10,
) -> None:
    """Affiche la distribution d'une serie."""
    run_async(_credits_async(show_id, limit))


@with_client()
async def _credits_async(client, show_id: int, limit: int) -> None:
    """Implementation async de la commande tv credits."""
    render_credits(await client.tv.credits(show_id), limit)


@tv_app.command("reviews")
def reviews(show_id: ShowIdArgument, page: PageOption = 1) -> None:
    """Affiche les critiques d'une serie."""
    run_async(_reviews_async(show_id, page))


@with_client()
async def _reviews_async(client, show_id: int, page: int) -> None:
    """Implementation async de la commande tv reviews."""
    render_reviews(await load_page(client.tv.reviews(show_id), page))


@tv_app.command("recommendations")
def recommendations(show_id: ShowIdArgument, page: PageOption = 1) -> None:
    """Affiche les series recommandees a partir d'une serie."""
    run_async(_recommendations_async(show_id, page))


@with_client()
async def _recommendations_async(client, show_id: int, page: int) -> None:
    """Implementation async de la commande tv recommendations."""
    cursor = await load_page(client.tv.recommendations(show_id), page)
    render_shows(cursor, title=f"Recommandations pour la serie {show_id}")


@tv_app.command("similar")
def similar(show_id: ShowIdArgument, page: PageOption = 1) -> None:
    """Affiche les series similaires a une serie."""
    run_async(_similar_async(show_id, page))


@with_client()
async def _similar_async(client, show_id: int, page: int) -> None:
    """Implementation async de la commande tv similar."""
    cursor = await load_page(client.tv.similar(show_id), page)
    render_shows(cursor, title=f"Series similaires a la serie {show_id}")


@tv_app.command("popular")
def popular(
    page: PageOption = 1,
    region: Annotated[
        Optional[str], typer.Option("--region", "-r", help="Region (ISO 3166-1, ex: FR)")
    ] = None,
) -> None:
    """Affiche les series populaires du moment."""
    run_async(_popular_async(page, region))


@with_client()
async def _popular_async(client, page: int, region: Optional[str]) -> None:
    """Implementation async de la commande tv popular."""
    cursor = client.tv.popular()
    if region:
        cursor.param("region", region)
    render_shows(await load_page(cursor, page), title="Series populaires")
