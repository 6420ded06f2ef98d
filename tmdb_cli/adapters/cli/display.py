"""
Rendu Rich des resultats TMDB pour la CLI.
"""

from typing import Optional

from rich.panel import Panel
from rich.table import Table

from tmdb_cli.adapters.api.cursors import Cursor
from tmdb_cli.adapters.cli.helpers import console
from tmdb_cli.core.entities import Credits, Movie, MovieDetails, Review, Show, ShowDetails

OVERVIEW_MAX_LENGTH = 300
REVIEW_MAX_LENGTH = 500


def _truncate(text: Optional[str], length: int) -> str:
    if not text:
        return ""
    return text if len(text) <= length else text[: length - 1] + "…"


def _year(year: Optional[int]) -> str:
    return str(year) if year else "-"


def render_page_footer(cursor: Cursor) -> None:
    """Affiche la position du curseur (page X/Y et nombre total de resultats)."""
    console.print(
        f"[dim]page {cursor.page}/{cursor.total_pages} "
        f"({cursor.total_results} resultat(s))[/dim]"
    )


def render_movies(cursor: Cursor[Movie], title: str) -> None:
    """Affiche une page de films sous forme de tableau."""
    if not cursor.results:
        console.print("[yellow]Aucun film trouve.[/yellow]")
        render_page_footer(cursor)
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="center")
    table.add_column("Note", justify="right")
    for movie in cursor.results:
        table.add_row(
            str(movie.id),
            movie.title,
            _year(movie.year),
            f"{movie.vote_average:.1f} ({movie.vote_count})",
        )
    console.print(table)
    render_page_footer(cursor)


def render_shows(cursor: Cursor[Show], title: str) -> None:
    """Affiche une page de series sous forme de tableau."""
    if not cursor.results:
        console.print("[yellow]Aucune serie trouvee.[/yellow]")
        render_page_footer(cursor)
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Nom", style="bold")
    table.add_column("Annee", justify="center")
    table.add_column("Pays")
    table.add_column("Note", justify="right")
    for show in cursor.results:
        table.add_row(
            str(show.id),
            show.name,
            _year(show.year),
            ", ".join(show.origin_country),
            f"{show.vote_average:.1f} ({show.vote_count})",
        )
    console.print(table)
    render_page_footer(cursor)


def render_reviews(cursor: Cursor[Review]) -> None:
    """Affiche une page de critiques, une par panneau."""
    if not cursor.results:
        console.print("[yellow]Aucune critique.[/yellow]")
        render_page_footer(cursor)
        return

    for review in cursor.results:
        rating = review.author_details.rating
        subtitle = f"note: {rating:g}/10" if rating is not None else None
        console.print(
            Panel(
                _truncate(review.content, REVIEW_MAX_LENGTH),
                title=f"[bold]{review.author}[/bold]",
                subtitle=subtitle,
            )
        )
    render_page_footer(cursor)


def render_movie_details(details: MovieDetails) -> None:
    """Affiche la fiche complete d'un film."""
    lines = [
        f"[bold]Titre original:[/bold] {details.original_title}",
        f"[bold]Sortie:[/bold] {details.release_date or '-'}",
        f"[bold]Duree:[/bold] {details.runtime or '-'} min",
        f"[bold]Genres:[/bold] {', '.join(g.name for g in details.genres) or '-'}",
        f"[bold]Note:[/bold] {details.vote_average:.1f} ({details.vote_count} votes)",
        f"[bold]Statut:[/bold] {details.status or '-'}",
    ]
    if details.imdb_id:
        lines.append(f"[bold]IMDb:[/bold] {details.imdb_id}")
    if details.tagline:
        lines.append(f"\n[italic]{details.tagline}[/italic]")
    if details.overview:
        lines.append(f"\n{_truncate(details.overview, OVERVIEW_MAX_LENGTH)}")

    console.print(
        Panel("\n".join(lines), title=f"[bold cyan]{details.title}[/bold cyan] ({_year(details.year)})")
    )


def render_show_details(details: ShowDetails) -> None:
    """Affiche la fiche complete d'une serie."""
    creators = ", ".join(c.name for c in details.created_by) or "-"
    networks = ", ".join(n.name for n in details.networks) or "-"
    lines = [
        f"[bold]Nom original:[/bold] {details.original_name}",
        f"[bold]Premiere diffusion:[/bold] {details.first_air_date or '-'}",
        f"[bold]Saisons:[/bold] {details.number_of_seasons} "
        f"({details.number_of_episodes} episodes)",
        f"[bold]Createurs:[/bold] {creators}",
        f"[bold]Chaines:[/bold] {networks}",
        f"[bold]Genres:[/bold] {', '.join(g.name for g in details.genres) or '-'}",
        f"[bold]Note:[/bold] {details.vote_average:.1f} ({details.vote_count} votes)",
        f"[bold]Statut:[/bold] {details.status or '-'}",
    ]
    if details.overview:
        lines.append(f"\n{_truncate(details.overview, OVERVIEW_MAX_LENGTH)}")

    console.print(
        Panel("\n".join(lines), title=f"[bold cyan]{details.name}[/bold cyan] ({_year(details.year)})")
    )


def render_credits(credits: Credits, limit: int) -> None:
    """Affiche les realisateurs puis les ``limit`` premiers membres de la distribution."""
    directors = credits.directors()
    if directors:
        console.print(
            f"[bold]Realisation:[/bold] {', '.join(d.name for d in directors)}"
        )

    table = Table(title="Distribution")
    table.add_column("Acteur", style="bold")
    table.add_column("Role")
    for member in credits.cast[:limit]:
        table.add_row(member.name, member.character)
    console.print(table)

    remaining = len(credits.cast) - limit
    if remaining > 0:
        console.print(f"[dim]... et {remaining} autre(s)[/dim]")
