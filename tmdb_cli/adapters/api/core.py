"""
Contexte de transport partage pour les appels a l'API TMDB.

Le Core porte l'hote, le jeton et un unique httpx.AsyncClient reutilise
par tous les handlers et curseurs d'un meme Client, ce qui conserve le
pool de connexions entre les requetes.

Politique d'erreur appliquee a chaque requete:
- echec reseau -> TransportError
- code HTTP hors 2xx -> APIStatusError
- corps non decodable -> DecodeError (via get_json)

Aucune relance automatique: chaque erreur remonte directement a l'appelant.
"""

from typing import Optional, Sequence, TypeVar
from urllib.parse import quote, urlencode

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from tmdb_cli.adapters.api.errors import APIStatusError, DecodeError, TransportError

DEFAULT_HOST = "https://api.themoviedb.org"
DEFAULT_TIMEOUT = 30.0

ModelT = TypeVar("ModelT", bound=BaseModel)


def build_http_client(timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """
    Construit le client HTTP partage.

    Args:
        timeout: Delai maximum par requete, en secondes

    Returns:
        httpx.AsyncClient configure pour recevoir du JSON
    """
    return httpx.AsyncClient(
        headers={"Accept": "application/json"},
        timeout=timeout,
    )


def decode(response: httpx.Response, model: type[ModelT], url: str) -> ModelT:
    """
    Decode le corps JSON d'une reponse dans un modele pydantic.

    Args:
        response: Reponse HTTP reussie
        model: Modele cible
        url: URL appelee, reprise dans le message d'erreur

    Returns:
        Instance du modele

    Raises:
        DecodeError: Si le corps n'est pas du JSON ou ne respecte pas le schema
    """
    try:
        payload = response.json()
    except ValueError as e:
        raise DecodeError(url, model.__name__, e) from e
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(url, model.__name__, e) from e


class Core:
    """
    Contexte bas niveau partage par les handlers d'un client TMDB.

    Attributes:
        host: URL de base de l'API (sans "/" final)
        token: Cle API v3 envoyee en parametre api_key

    Example:
        core = Core("https://api.themoviedb.org", token="xxx")
        response = await core.get(core.url("3/movie/popular"), [("page", "1")])
        await core.close()
    """

    def __init__(
        self,
        host: str,
        token: str,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le contexte de transport.

        Args:
            host: URL de base de l'API TMDB
            token: Cle API TMDB
            timeout: Delai maximum par requete en secondes (ignore si http_client est fourni)
            http_client: Client httpx a reutiliser (optionnel, construit sinon)
        """
        self.host = host.rstrip("/")
        self.token = token
        self._client = http_client if http_client is not None else build_http_client(timeout)

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP partage."""
        return self._client

    def url(self, path: str) -> str:
        """Construit une URL absolue a partir d'un chemin relatif a l'hote."""
        return f"{self.host}/{path.lstrip('/')}"

    @staticmethod
    def request_url(url: str, query: Sequence[tuple[str, str]]) -> httpx.URL:
        """
        Construit l'URL complete avec sa query string deja encodee.

        httpx regroupe les cles repetees quand on lui passe ``params``;
        encoder la query ici conserve l'ordre exact des paires.
        """
        return httpx.URL(url, query=urlencode(query, quote_via=quote).encode("ascii"))

    async def get(
        self,
        url: str,
        params: Sequence[tuple[str, str]] = (),
    ) -> httpx.Response:
        """
        Envoie une requete GET et exige une reponse 2xx.

        Le parametre api_key est toujours envoye en premier, suivi des
        parametres fournis dans leur ordre (les cles repetees sont conservees).

        Args:
            url: URL absolue a appeler
            params: Parametres de requete supplementaires

        Returns:
            httpx.Response avec un code 2xx

        Raises:
            TransportError: Si la requete n'a pas pu aboutir
            APIStatusError: Si le code HTTP est hors 2xx
        """
        query = [("api_key", self.token), *params]
        logger.debug("Requete TMDB", url=url, params=list(params))

        try:
            response = await self._client.get(self.request_url(url, query))
        except httpx.TransportError as e:
            raise TransportError(url, e) from e

        if not response.is_success:
            raise APIStatusError(response.status_code, url, response.text)
        return response

    async def get_json(
        self,
        url: str,
        model: type[ModelT],
        params: Sequence[tuple[str, str]] = (),
    ) -> ModelT:
        """
        Envoie une requete GET et decode la reponse dans ``model``.

        Raises:
            TransportError: Si la requete n'a pas pu aboutir
            APIStatusError: Si le code HTTP est hors 2xx
            DecodeError: Si le corps ne respecte pas le schema de ``model``
        """
        response = await self.get(url, params)
        return decode(response, model, url)

    @property
    def is_closed(self) -> bool:
        """Indique si le client HTTP partage a ete ferme."""
        return self._client.is_closed

    async def close(self) -> None:
        """Ferme le client HTTP partage et libere le pool de connexions."""
        if not self._client.is_closed:
            await self._client.aclose()
