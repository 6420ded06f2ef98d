"""
Commandes CLI des films (movies search/details/credits/reviews/...).
"""

from typing import Annotated, Optional

import typer

from tmdb_cli.adapters.cli.display import (
    render_credits,
    render_movie_details,
    render_movies,
    render_reviews,
)
from tmdb_cli.adapters.cli.helpers import load_page, run_async, with_client

# Application Typer pour les commandes films
movies_app = typer.Typer(
    name="movies",
    help="Recherche et consultation des films TMDB",
    rich_markup_mode="rich",
)

PageOption = Annotated[int, typer.Option("--page", "-p", min=1, help="Page a afficher")]
MovieIdArgument = Annotated[int, typer.Argument(help="ID TMDB du film")]


@movies_app.command("search")
def search(
    query: Annotated[str, typer.Argument(help="Titre a rechercher")],
    page: PageOption = 1,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee de sortie")
    ] = None,
    primary_year: Annotated[
        Optional[int], typer.Option("--primary-year", help="Annee de sortie principale")
    ] = None,
    region: Annotated[
        Optional[str], typer.Option("--region", "-r", help="Region (ISO 3166-1, ex: FR)")
    ] = None,
    language: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Langue des resultats (ex: fr-FR)")
    ] = None,
    adult: Annotated[
        bool, typer.Option("--adult", help="Inclure les films pour adultes")
    ] = False,
) -> None:
    """Recherche des films par titre."""
    run_async(_search_async(query, page, year, primary_year, region, language, adult))


@with_client()
async def _search_async(
    client,
    query: str,
    page: int,
    year: Optional[int],
    primary_year: Optional[int],
    region: Optional[str],
    language: Optional[str],
    adult: bool,
) -> None:
    """Implementation async de la commande movies search."""
    search = client.movies.search(query).page(page)
    if year is not None:
        search.year(year)
    if primary_year is not None:
        search.primary_year(primary_year)
    if region:
        search.region(region)
    if language:
        search.language(language)
    if adult:
        search.adult()

    cursor = await search.exec()
    render_movies(cursor, title=f"Recherche: {query}")


@movies_app.command("details")
def details(movie_id: MovieIdArgument) -> None:
    """Affiche la fiche complete d'un film."""
    run_async(_details_async(movie_id))


@with_client()
async def _details_async(client, movie_id: int) -> None:
    """Implementation async de la commande movies details."""
    render_movie_details(await client.movies.details(movie_id))


@movies_app.command("credits")
def credits(
    movie_id: MovieIdArgument,
    limit: Annotated[
        int, typer.Option("--limit", "-n", min=1, help="Nombre d'acteurs a afficher")
    ] = 10,
) -> None:
    """Affiche la distribution et la realisation d'un film."""
    run_async(_credits_async(movie_id, limit))


@with_client()
async def _credits_async(client, movie_id: int, limit: int) -> None:
    """Implementation async de la commande movies credits."""
    render_credits(await client.movies.credits(movie_id), limit)


@movies_app.command("reviews")
def reviews(movie_id: MovieIdArgument, page: PageOption = 1) -> None:
    """Affiche les critiques d'un film."""
    run_async(_reviews_async(movie_id, page))


@with_client()
async def _reviews_async(client, movie_id: int, page: int) -> None:
    """Implementation async de la commande movies reviews."""
    render_reviews(await load_page(client.movies.reviews(movie_id), page))


@movies_app.command("recommendations")
def recommendations(movie_id: MovieIdArgument, page: PageOption = 1) -> None:
    """Affiche les films recommandes a partir d'un film."""
    run_async(_recommendations_async(movie_id, page))


@with_client()
async def _recommendations_async(client, movie_id: int, page: int) -> None:
    """Implementation async de la commande movies recommendations."""
    cursor = await load_page(client.movies.recommendations(movie_id), page)
    render_movies(cursor, title=f"Recommandations pour le film {movie_id}")


@movies_app.command("similar")
def similar(movie_id: MovieIdArgument, page: PageOption = 1) -> None:
    """Affiche les films similaires (genres et mots-cles) a un film."""
    run_async(_similar_async(movie_id, page))


@with_client()
async def _similar_async(client, movie_id: int, page: int) -> None:
    """Implementation async de la commande movies similar."""
    cursor = await load_page(client.movies.similar(movie_id), page)
    render_movies(cursor, title=f"Films similaires au film {movie_id}")


@movies_app.command("popular")
def popular(
    page: PageOption = 1,
    region: Annotated[
        Optional[str], typer.Option("--region", "-r", help="Region (ISO 3166-1, ex: FR)")
    ] = None,
) -> None:
    """Affiche les films populaires du moment."""
    run_async(_popular_async(page, region))


@with_client()
async def _popular_async(client, page: int, region: Optional[str]) -> None:
    """Implementation async de la commande movies popular."""
    cursor = client.movies.popular()
    if region:
        cursor.param("region", region)
    render_movies(await load_page(cursor, page), title="Films populaires")
