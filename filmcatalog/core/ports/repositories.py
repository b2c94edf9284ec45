"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance du
catalogue. Les implémentations (adaptateurs) fournissent le stockage concret
(SQLite via SQLModel).

Les entités retournées sont toujours complètement résolues : un Film porte son
Genre et son Director, aucun accès à un attribut ne déclenche de requête cachée.
"""

from abc import ABC, abstractmethod
from typing import Optional

from filmcatalog.core.entities.catalog import Director, Film, Genre


class IGenreRepository(ABC):
    """Interface de stockage des genres."""

    @abstractmethod
    def get_by_id(self, genre_id: int, with_films: bool = False) -> Optional[Genre]:
        """Récupère un genre par son ID, avec ses films si demandé."""
        ...

    @abstractmethod
    def list_all(self) -> list[Genre]:
        """Liste tous les genres triés par nom."""
        ...

    @abstractmethod
    def exists(self, genre_id: int) -> bool:
        """Vérifie l'existence d'un genre."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de genres."""
        ...

    @abstractmethod
    def count_films(self, genre_id: int) -> int:
        """Nombre de films qui référencent ce genre."""
        ...

    @abstractmethod
    def save(self, genre: Genre) -> Genre:
        """Sauvegarde un genre (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete(self, genre_id: int) -> bool:
        """Supprime un genre par ID. Retourne True si supprimé."""
        ...


class IDirectorRepository(ABC):
    """Interface de stockage des réalisateurs."""

    @abstractmethod
    def get_by_id(self, director_id: int, with_films: bool = False) -> Optional[Director]:
        """Récupère un réalisateur par son ID, avec ses films si demandé."""
        ...

    @abstractmethod
    def list_all(self) -> list[Director]:
        """Liste tous les réalisateurs triés par nom."""
        ...

    @abstractmethod
    def exists(self, director_id: int) -> bool:
        """Vérifie l'existence d'un réalisateur."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de réalisateurs."""
        ...

    @abstractmethod
    def count_films(self, director_id: int) -> int:
        """Nombre de films qui référencent ce réalisateur."""
        ...

    @abstractmethod
    def save(self, director: Director) -> Director:
        """Sauvegarde un réalisateur (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete(self, director_id: int) -> bool:
        """Supprime un réalisateur par ID. Retourne True si supprimé."""
        ...


class IFilmRepository(ABC):
    """Interface de stockage des films."""

    @abstractmethod
    def get_by_id(self, film_id: int) -> Optional[Film]:
        """Récupère un film par son ID, genre et réalisateur résolus."""
        ...

    @abstractmethod
    def search(
        self,
        search_string: Optional[str] = None,
        genre_id: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> list[Film]:
        """
        Recherche des films par fragment de titre et/ou genre.

        Args :
            search_string : Fragment contenu dans le titre (None = pas de filtre)
            genre_id : ID du genre (None = pas de filtre)
            limit : Nombre maximum de résultats

        Retourne :
            Films triés par note décroissante, films sans note en dernier
        """
        ...

    @abstractmethod
    def count(self) -> int:
        """Nombre total de films."""
        ...

    @abstractmethod
    def save(self, film: Film) -> Film:
        """Sauvegarde un film (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def delete(self, film_id: int) -> bool:
        """Supprime un film par ID. Retourne True si supprimé."""
        ...


class ICatalogGateway(ABC):
    """
    Façade de persistance du catalogue.

    Expose une collection typée par entité, toutes partagées sur une même
    transaction, et le contrôle de cette transaction.
    """

    genres: IGenreRepository
    directors: IDirectorRepository
    films: IFilmRepository

    @abstractmethod
    def rollback(self) -> None:
        """Annule la transaction en cours."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Libère la session sous-jacente."""
        ...
