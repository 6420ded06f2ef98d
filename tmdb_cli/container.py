"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration et la construction du client TMDB pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.client import Client
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        settings = container.config()
        client = container.client()  # nouveau client, a fermer apres usage
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Client TMDB - Factory: chaque commande possede son client et le ferme.
    # Leve ConfigurationError si TMDB_TOKEN est absent.
    client = providers.Factory(
        Client.from_settings,
        settings=config,
    )
