"""
Implementation SQLModel du repository Film.

Les films sont toujours charges avec leur genre et leur realisateur via une
jointure explicite ; l'entite retournee est complete.
"""

from typing import Optional

from sqlmodel import Session, select

from filmcatalog.core.entities.catalog import Director, Film, Genre
from filmcatalog.core.exceptions import EntityNotFoundError
from filmcatalog.core.ports.repositories import IFilmRepository
from filmcatalog.infrastructure.persistence.models import (
    DirectorModel,
    FilmModel,
    GenreModel,
)
from filmcatalog.infrastructure.persistence.repositories.base import (
    SQLModelRepository,
    storable_id,
)


def select_films():
    """Requete de base : films joints a leur genre et leur realisateur, tries par note."""
    return (
        select(FilmModel, GenreModel, DirectorModel)
        .join(GenreModel, FilmModel.genre_id == GenreModel.id)
        .join(DirectorModel, FilmModel.director_id == DirectorModel.id)
        .order_by(FilmModel.rating.desc().nulls_last(), FilmModel.id)
    )


def film_to_entity(
    model: FilmModel, genre: GenreModel, director: DirectorModel
) -> Film:
    """
    Convertit une ligne (film, genre, realisateur) en entite domaine.

    Args :
        model : Le modele FilmModel depuis la DB
        genre : Le genre joint
        director : Le realisateur joint

    Retourne :
        L'entite Film avec genre et director resolus
    """
    return Film(
        id=model.id,
        title=model.title,
        year=model.year,
        description=model.description,
        rating=model.rating,
        genre_id=model.genre_id,
        director_id=model.director_id,
        genre=Genre(id=genre.id, name=genre.name),
        director=Director(id=director.id, name=director.name, country=director.country),
    )


def load_films(session: Session, statement) -> tuple[Film, ...]:
    """Execute une requete construite sur select_films() et convertit les lignes."""
    rows = session.exec(statement).all()
    return tuple(film_to_entity(film, genre, director) for film, genre, director in rows)


class SQLModelFilmRepository(SQLModelRepository, IFilmRepository):
    """
    Repository SQLModel pour les films.

    Implemente IFilmRepository avec conversion bidirectionnelle
    entre l'entite Film (domaine) et FilmModel (persistance).
    """

    model = FilmModel
    entity_name = "Film"

    def _to_model(self, entity: Film) -> FilmModel:
        """Convertit une entite domaine en modele DB."""
        model = FilmModel(
            title=entity.title,
            year=entity.year,
            description=entity.description,
            rating=entity.rating,
            genre_id=entity.genre_id,
            director_id=entity.director_id,
        )
        if entity.id is not None:
            model.id = entity.id
        return model

    def get_by_id(self, film_id: int) -> Optional[Film]:
        """Recupere un film par son ID, genre et realisateur resolus."""
        if not storable_id(film_id):
            return None
        films = load_films(self._session, select_films().where(FilmModel.id == film_id))
        return films[0] if films else None

    def search(
        self,
        search_string: Optional[str] = None,
        genre_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[Film]:
        """Recherche des films par fragment de titre et/ou genre."""
        statement = select_films()
        if search_string:
            statement = statement.where(
                FilmModel.title.contains(search_string, autoescape=True)
            )
        if genre_id is not None:
            if not storable_id(genre_id):
                return []
            statement = statement.where(FilmModel.genre_id == genre_id)
        if limit is not None:
            statement = statement.limit(limit)
        return list(load_films(self._session, statement))

    def save(self, film: Film) -> Film:
        """Sauvegarde un film (insertion ou mise a jour)."""
        existing = None
        if film.id is not None:
            if storable_id(film.id):
                existing = self._session.get(FilmModel, film.id)
            if existing is None:
                raise EntityNotFoundError(self.entity_name, film.id)

        if existing:
            # Mise a jour
            existing.title = film.title
            existing.year = film.year
            existing.description = film.description
            existing.rating = film.rating
            existing.genre_id = film.genre_id
            existing.director_id = film.director_id
            self._session.add(existing)
            self._commit_update(film.id)
            film_id = existing.id
        else:
            # Insertion
            model = self._to_model(film)
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
            film_id = model.id

        return self.get_by_id(film_id)
