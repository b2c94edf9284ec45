"""
Services du catalogue : genres, realisateurs, films.

Chaque service recoit une passerelle (ICatalogGateway) dont les repositories
partagent une meme session. Une operation d'ecriture :
1. valide l'entite candidate (erreurs de saisie du formulaire incluses)
2. verifie les references dans la meme transaction
3. ecrit et commit une seule fois

Les suppressions de genres et de realisateurs sont refusees tant que des films
les referencent (DependencyConflictError).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError

from filmcatalog.core.entities.catalog import CatalogStatistics, Director, Film, Genre
from filmcatalog.core.exceptions import (
    DependencyConflictError,
    EntityNotFoundError,
    ValidationErrors,
    ValidationFailedError,
)
from filmcatalog.core.ports.repositories import ICatalogGateway
from filmcatalog.services.validation import (
    FILM_DIRECTOR_UNKNOWN,
    FILM_GENRE_UNKNOWN,
    add_error,
    merge_errors,
    validate_director,
    validate_film,
    validate_genre,
)

GENRE_HAS_FILMS_MESSAGE = "Неможливо видалити жанр, який має пов'язані фільми!"
DIRECTOR_HAS_FILMS_MESSAGE = "Неможливо видалити режисера, який має пов'язані фільми!"

# Nombre de films affiches en page d'accueil
TOP_FILMS_LIMIT = 5


class _EntityService(ABC):
    """Base commune : acces a la passerelle, lecture par ID, creation et mise a jour."""

    entity_name: str = ""

    def __init__(self, gateway: ICatalogGateway) -> None:
        """
        Initialise le service.

        Args:
            gateway: Passerelle de persistance (une session par requete)
        """
        self._gateway = gateway

    @property
    @abstractmethod
    def _repository(self):
        """Repository de la passerelle sur lequel porte le service."""
        ...

    @abstractmethod
    def _validate(self, entity) -> ValidationErrors:
        """Regles de validation de l'entite."""
        ...

    def close(self) -> None:
        """Libere la session de la passerelle."""
        self._gateway.close()

    def _check(self, entity, binding_errors: Optional[ValidationErrors]) -> None:
        """Leve ValidationFailedError si la saisie ou les regles sont en echec."""
        errors = merge_errors(binding_errors, self._validate(entity))
        if errors:
            logger.debug(
                f"{self.entity_name} invalide", fields=sorted(errors), entity_id=entity.id
            )
            raise ValidationFailedError(errors)

    def _save(self, entity):
        return self._repository.save(entity)

    def create(self, entity, binding_errors: Optional[ValidationErrors] = None):
        """
        Cree une entite apres validation.

        Args:
            entity: Entite candidate (l'ID eventuel est ignore)
            binding_errors: Erreurs de conversion deja detectees sur le formulaire

        Raises:
            ValidationFailedError: Si au moins une regle n'est pas respectee
        """
        candidate = replace(entity, id=None)
        self._check(candidate, binding_errors)
        saved = self._save(candidate)
        logger.info(f"{self.entity_name} cree", entity_id=saved.id)
        return saved

    def update(
        self, entity_id: int, entity, binding_errors: Optional[ValidationErrors] = None
    ):
        """
        Met a jour l'entite designee par entity_id apres validation.

        Raises:
            EntityNotFoundError: Si l'ID est inconnu (ou a disparu pendant l'ecriture)
            ValidationFailedError: Si au moins une regle n'est pas respectee
        """
        if not self._repository.exists(entity_id):
            logger.warning(
                f"Mise a jour d'un {self.entity_name} inexistant", entity_id=entity_id
            )
            raise EntityNotFoundError(self.entity_name, entity_id)
        candidate = replace(entity, id=entity_id)
        self._check(candidate, binding_errors)
        saved = self._save(candidate)
        logger.info(f"{self.entity_name} mis a jour", entity_id=entity_id)
        return saved


class _GuardedEntityService(_EntityService):
    """Service dont les entites ne peuvent pas etre supprimees si des films les referencent."""

    conflict_message: str = ""

    def get(self, entity_id: int, with_films: bool = False):
        """Recupere l'entite ou leve EntityNotFoundError."""
        entity = self._repository.get_by_id(entity_id, with_films=with_films)
        if entity is None:
            logger.warning(f"{self.entity_name} introuvable", entity_id=entity_id)
            raise EntityNotFoundError(self.entity_name, entity_id)
        return entity

    def list(self):
        """Liste toutes les entites triees par nom."""
        return self._repository.list_all()

    def delete(self, entity_id: int) -> bool:
        """
        Supprime l'entite si aucun film ne la reference.

        Le comptage et la suppression sont faits dans la meme transaction ; si
        un film a ete ajoute entre-temps, la contrainte RESTRICT fait echouer
        le commit et la suppression est refusee de la meme facon.

        Returns:
            True si supprimee, False si l'ID n'existe pas

        Raises:
            DependencyConflictError: Si des films referencent l'entite
        """
        repository = self._repository
        if not repository.exists(entity_id):
            return False

        dependents = repository.count_films(entity_id)
        if dependents:
            logger.warning(
                f"Suppression refusee : {self.entity_name} reference par des films",
                entity_id=entity_id,
                films=dependents,
            )
            raise DependencyConflictError(
                self.entity_name, entity_id, self.conflict_message, dependents
            )

        try:
            deleted = repository.delete(entity_id)
        except IntegrityError:
            self._gateway.rollback()
            logger.warning(
                f"Suppression refusee par la base : {self.entity_name} reference",
                entity_id=entity_id,
            )
            raise DependencyConflictError(
                self.entity_name, entity_id, self.conflict_message
            ) from None

        logger.info(f"{self.entity_name} supprime", entity_id=entity_id)
        return deleted


class GenreService(_GuardedEntityService):
    """Cas d'utilisation sur les genres."""

    entity_name = "Genre"
    conflict_message = GENRE_HAS_FILMS_MESSAGE

    @property
    def _repository(self):
        return self._gateway.genres

    def _validate(self, entity: Genre) -> ValidationErrors:
        return validate_genre(entity)


class DirectorService(_GuardedEntityService):
    """Cas d'utilisation sur les realisateurs."""

    entity_name = "Director"
    conflict_message = DIRECTOR_HAS_FILMS_MESSAGE

    @property
    def _repository(self):
        return self._gateway.directors

    def _validate(self, entity: Director) -> ValidationErrors:
        return validate_director(entity)


class FilmService(_EntityService):
    """
    Cas d'utilisation sur les films.

    Example:
        service = FilmService(gateway)
        films = service.list(search_string="Дюна", genre_id=4)
        film = service.create(Film(title="Тестовий фільм", year=2024, genre_id=1, director_id=1))
    """

    entity_name = "Film"

    @property
    def _repository(self):
        return self._gateway.films

    def _validate(self, entity: Film) -> ValidationErrors:
        errors = validate_film(entity)
        # Les references ne sont verifiees que si elles sont renseignees
        if entity.genre_id is not None and not self._gateway.genres.exists(entity.genre_id):
            add_error(errors, "genre_id", FILM_GENRE_UNKNOWN)
        if entity.director_id is not None and not self._gateway.directors.exists(
            entity.director_id
        ):
            add_error(errors, "director_id", FILM_DIRECTOR_UNKNOWN)
        return errors

    def _save(self, entity: Film) -> Film:
        try:
            return self._repository.save(entity)
        except IntegrityError:
            # Genre ou realisateur supprime entre la verification et l'ecriture
            self._gateway.rollback()
            errors: ValidationErrors = {}
            if not self._gateway.genres.exists(entity.genre_id):
                add_error(errors, "genre_id", FILM_GENRE_UNKNOWN)
            if not self._gateway.directors.exists(entity.director_id):
                add_error(errors, "director_id", FILM_DIRECTOR_UNKNOWN)
            if not errors:
                raise
            raise ValidationFailedError(errors) from None

    def get(self, film_id: int) -> Film:
        """Recupere un film (genre et realisateur resolus) ou leve EntityNotFoundError."""
        film = self._repository.get_by_id(film_id)
        if film is None:
            logger.warning("Film introuvable", entity_id=film_id)
            raise EntityNotFoundError(self.entity_name, film_id)
        return film

    def list(
        self, search_string: Optional[str] = None, genre_id: Optional[int] = None
    ) -> list[Film]:
        """
        Liste les films, filtres optionnels combines par ET.

        Args:
            search_string: Fragment du titre (comparaison de texte de SQLite)
            genre_id: ID du genre

        Returns:
            Films tries par note decroissante, sans note en dernier
        """
        films = self._repository.search(search_string=search_string, genre_id=genre_id)
        logger.debug(
            "Liste des films", search=search_string, genre_id=genre_id, count=len(films)
        )
        return films

    def genres(self) -> list[Genre]:
        """Genres disponibles pour les listes deroulantes."""
        return self._gateway.genres.list_all()

    def directors(self) -> list[Director]:
        """Realisateurs disponibles pour les listes deroulantes."""
        return self._gateway.directors.list_all()

    def delete(self, film_id: int) -> bool:
        """Supprime un film. Retourne False si l'ID n'existe pas."""
        deleted = self._repository.delete(film_id)
        if deleted:
            logger.info("Film supprime", entity_id=film_id)
        return deleted


class OverviewService:
    """Statistiques et meilleurs films pour la page d'accueil."""

    def __init__(self, gateway: ICatalogGateway) -> None:
        self._gateway = gateway

    def close(self) -> None:
        """Libere la session de la passerelle."""
        self._gateway.close()

    def statistics(self) -> CatalogStatistics:
        """Nombre de films, genres et realisateurs."""
        return CatalogStatistics(
            films=self._gateway.films.count(),
            genres=self._gateway.genres.count(),
            directors=self._gateway.directors.count(),
        )

    def top_films(self, limit: int = TOP_FILMS_LIMIT) -> list[Film]:
        """Films les mieux notes."""
        return self._gateway.films.search(limit=limit)
