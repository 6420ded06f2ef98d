"""
Fixtures pytest partagees pour les tests tmdb-cli.

Ce module contient les fixtures communes utilisees dans les tests:
- Client TMDB et Core pointant vers un hote de test (mocke par respx)
- Isolation des variables d'environnement TMDB_*
"""

import pytest

from tmdb_cli.adapters.api.client import Client
from tmdb_cli.adapters.api.core import Core

TEST_TOKEN = "test_token"
TEST_HOST = "https://api.themoviedb.org"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Retire les variables TMDB_* de l'environnement pendant chaque test."""
    for name in ("TMDB_TOKEN", "TMDB_HOST", "TMDB_TIMEOUT", "TMDB_LOG_LEVEL", "TMDB_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def core() -> Core:
    """Core de transport avec un jeton de test."""
    return Core(TEST_HOST, TEST_TOKEN)


@pytest.fixture
def tmdb_client() -> Client:
    """Client TMDB avec un jeton de test."""
    return Client(token=TEST_TOKEN, host=TEST_HOST)
