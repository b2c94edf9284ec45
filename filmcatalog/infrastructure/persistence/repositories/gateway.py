"""
Passerelle de persistance du catalogue.

Regroupe les repositories genres, realisateurs et films sur une meme session
SQLModel : les lectures, le controle des dependances et l'ecriture d'une
operation partagent la meme transaction.
"""

from sqlmodel import Session

from filmcatalog.core.ports.repositories import ICatalogGateway
from filmcatalog.infrastructure.persistence.repositories.director_repository import (
    SQLModelDirectorRepository,
)
from filmcatalog.infrastructure.persistence.repositories.film_repository import (
    SQLModelFilmRepository,
)
from filmcatalog.infrastructure.persistence.repositories.genre_repository import (
    SQLModelGenreRepository,
)


class SQLModelCatalogGateway(ICatalogGateway):
    """
    Facade SQLModel du catalogue.

    Utilisation :
        with SQLModelCatalogGateway(session) as gateway:
            films = gateway.films.search(genre_id=4)
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self.genres = SQLModelGenreRepository(session)
        self.directors = SQLModelDirectorRepository(session)
        self.films = SQLModelFilmRepository(session)

    def rollback(self) -> None:
        """Annule la transaction en cours."""
        self._session.rollback()

    def close(self) -> None:
        """Ferme la session."""
        self._session.close()

    def __enter__(self) -> "SQLModelCatalogGateway":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
