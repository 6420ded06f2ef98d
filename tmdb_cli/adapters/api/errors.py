"""
Exceptions levees par le client TMDB.

Toutes les erreurs d'execution derivent de TMDBError, ce qui permet a
l'appelant de les intercepter en un seul point. Chaque type correspond a
une cause distincte:
- TransportError: echec reseau (DNS, connexion, timeout, IO)
- APIStatusError: reponse recue avec un code HTTP hors 2xx
- DecodeError: corps de reponse non conforme au schema attendu

ConfigurationError ne derive pas de TMDBError: elle signale un client
mal construit, pas un incident d'execution.
"""

from typing import Optional

BODY_SNIPPET_LENGTH = 400


class TMDBError(Exception):
    """Classe de base des erreurs d'appel a l'API TMDB."""


class TransportError(TMDBError):
    """
    Exception levee quand la requete n'a pas pu aboutir (DNS, connexion, timeout).

    L'exception httpx d'origine est chainee via ``__cause__``.

    Attributes:
        url: URL appelee (sans les parametres de requete)
    """

    def __init__(self, url: str, reason: Exception) -> None:
        """
        Initialise l'erreur avec l'URL et la cause reseau.

        Args:
            url: URL appelee
            reason: Exception httpx d'origine
        """
        self.url = url
        super().__init__(f"TMDB request to {url} failed: {reason!r}")


class APIStatusError(TMDBError):
    """
    Exception levee quand l'API repond avec un code HTTP hors 2xx.

    Le corps n'est pas interprete: il est conserve tel quel (tronque)
    pour le diagnostic.

    Attributes:
        status_code: Code HTTP de la reponse
        url: URL appelee (sans les parametres de requete)
        body: Debut du corps de la reponse, ou None si vide
    """

    def __init__(self, status_code: int, url: str, body: Optional[str] = None) -> None:
        """
        Initialise l'erreur avec le code HTTP et le corps optionnel.

        Args:
            status_code: Code HTTP recu
            url: URL appelee
            body: Corps brut de la reponse (optionnel)
        """
        self.status_code = status_code
        self.url = url
        self.body = body[:BODY_SNIPPET_LENGTH] if body else None
        super().__init__(f"TMDB returned HTTP {status_code} for {url}")


class DecodeError(TMDBError):
    """
    Exception levee quand la reponse ne correspond pas au schema attendu.

    Couvre le JSON invalide comme les champs manquants ou mal types.
    L'erreur json/pydantic d'origine est chainee via ``__cause__``.

    Attributes:
        url: URL appelee (sans les parametres de requete)
        target: Nom du type attendu
    """

    def __init__(self, url: str, target: str, reason: Exception) -> None:
        self.url = url
        self.target = target
        super().__init__(f"Could not decode {target} from {url}: {reason}")


class ConfigurationError(RuntimeError):
    """Exception levee quand le client ne peut pas etre construit (jeton absent)."""
