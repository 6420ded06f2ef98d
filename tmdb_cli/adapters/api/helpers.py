"""
Fonctions utilitaires pour l'assemblage des parametres de requete TMDB.
"""

from typing import Any, Optional

QueryParams = list[tuple[str, str]]


def query_value(value: Any) -> str:
    """
    Convertit une valeur en chaine pour la query string.

    Les booleens sont rendus en minuscules ("true"/"false") comme l'attend TMDB.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def opt_param(params: QueryParams, name: str, value: Optional[Any]) -> None:
    """
    Ajoute un parametre uniquement s'il est defini.

    Un filtre absent est omis de la requete plutot qu'envoye vide.

    Args:
        params: Liste de parametres a completer (modifiee sur place)
        name: Nom du parametre
        value: Valeur du parametre, ignoree si None
    """
    if value is not None:
        params.append((name, query_value(value)))
