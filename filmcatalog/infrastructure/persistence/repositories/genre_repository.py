"""
Implementation SQLModel du repository Genre.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import select

from filmcatalog.core.entities.catalog import Genre
from filmcatalog.core.exceptions import EntityNotFoundError
from filmcatalog.core.ports.repositories import IGenreRepository
from filmcatalog.infrastructure.persistence.models import FilmModel, GenreModel
from filmcatalog.infrastructure.persistence.repositories.base import (
    SQLModelRepository,
    storable_id,
)
from filmcatalog.infrastructure.persistence.repositories.film_repository import (
    load_films,
    select_films,
)


class SQLModelGenreRepository(SQLModelRepository, IGenreRepository):
    """Repository SQLModel pour les genres."""

    model = GenreModel
    entity_name = "Genre"

    def _to_entity(self, model: GenreModel, films=()) -> Genre:
        """Convertit un modele DB en entite domaine."""
        return Genre(id=model.id, name=model.name, films=tuple(films))

    def get_by_id(self, genre_id: int, with_films: bool = False) -> Optional[Genre]:
        """Recupere un genre par son ID, avec ses films si demande."""
        if not storable_id(genre_id):
            return None
        model = self._session.get(GenreModel, genre_id)
        if model is None:
            return None
        films = ()
        if with_films:
            films = load_films(
                self._session, select_films().where(FilmModel.genre_id == genre_id)
            )
        return self._to_entity(model, films)

    def list_all(self) -> list[Genre]:
        """Liste tous les genres tries par nom."""
        models = self._session.exec(
            select(GenreModel).order_by(GenreModel.name, GenreModel.id)
        ).all()
        return [self._to_entity(model) for model in models]

    def count_films(self, genre_id: int) -> int:
        """Nombre de films qui referencent ce genre."""
        if not storable_id(genre_id):
            return 0
        statement = (
            select(func.count())
            .select_from(FilmModel)
            .where(FilmModel.genre_id == genre_id)
        )
        return self._session.exec(statement).one()

    def save(self, genre: Genre) -> Genre:
        """Sauvegarde un genre (insertion ou mise a jour)."""
        if genre.id is not None:
            existing = None
            if storable_id(genre.id):
                existing = self._session.get(GenreModel, genre.id)
            if existing is None:
                raise EntityNotFoundError(self.entity_name, genre.id)
            existing.name = genre.name
            self._session.add(existing)
            self._commit_update(genre.id)
            self._session.refresh(existing)
            return self._to_entity(existing)

        model = GenreModel(name=genre.name)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)
