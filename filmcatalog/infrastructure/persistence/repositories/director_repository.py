"""
Implementation SQLModel du repository Director.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import select

from filmcatalog.core.entities.catalog import Director
from filmcatalog.core.exceptions import EntityNotFoundError
from filmcatalog.core.ports.repositories import IDirectorRepository
from filmcatalog.infrastructure.persistence.models import DirectorModel, FilmModel
from filmcatalog.infrastructure.persistence.repositories.base import (
    SQLModelRepository,
    storable_id,
)
from filmcatalog.infrastructure.persistence.repositories.film_repository import (
    load_films,
    select_films,
)


class SQLModelDirectorRepository(SQLModelRepository, IDirectorRepository):
    """Repository SQLModel pour les realisateurs."""

    model = DirectorModel
    entity_name = "Director"

    def _to_entity(self, model: DirectorModel, films=()) -> Director:
        """Convertit un modele DB en entite domaine."""
        return Director(
            id=model.id,
            name=model.name,
            country=model.country,
            films=tuple(films),
        )

    def get_by_id(
        self, director_id: int, with_films: bool = False
    ) -> Optional[Director]:
        """Recupere un realisateur par son ID, avec ses films si demande."""
        if not storable_id(director_id):
            return None
        model = self._session.get(DirectorModel, director_id)
        if model is None:
            return None
        films = ()
        if with_films:
            films = load_films(
                self._session,
                select_films().where(FilmModel.director_id == director_id),
            )
        return self._to_entity(model, films)

    def list_all(self) -> list[Director]:
        """Liste tous les realisateurs tries par nom."""
        models = self._session.exec(
            select(DirectorModel).order_by(DirectorModel.name, DirectorModel.id)
        ).all()
        return [self._to_entity(model) for model in models]

    def count_films(self, director_id: int) -> int:
        """Nombre de films qui referencent ce realisateur."""
        if not storable_id(director_id):
            return 0
        statement = (
            select(func.count())
            .select_from(FilmModel)
            .where(FilmModel.director_id == director_id)
        )
        return self._session.exec(statement).one()

    def save(self, director: Director) -> Director:
        """Sauvegarde un realisateur (insertion ou mise a jour)."""
        if director.id is not None:
            existing = None
            if storable_id(director.id):
                existing = self._session.get(DirectorModel, director.id)
            if existing is None:
                raise EntityNotFoundError(self.entity_name, director.id)
            existing.name = director.name
            existing.country = director.country
            self._session.add(existing)
            self._commit_update(director.id)
            self._session.refresh(existing)
            return self._to_entity(existing)

        model = DirectorModel(name=director.name, country=director.country)
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        return self._to_entity(model)
