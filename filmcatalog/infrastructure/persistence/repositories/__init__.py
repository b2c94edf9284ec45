"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans filmcatalog/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)

SQLModelCatalogGateway regroupe les trois repositories sur une meme session.
"""

from filmcatalog.infrastructure.persistence.repositories.director_repository import (
    SQLModelDirectorRepository,
)
from filmcatalog.infrastructure.persistence.repositories.film_repository import (
    SQLModelFilmRepository,
)
from filmcatalog.infrastructure.persistence.repositories.gateway import (
    SQLModelCatalogGateway,
)
from filmcatalog.infrastructure.persistence.repositories.genre_repository import (
    SQLModelGenreRepository,
)

__all__ = [
    "SQLModelGenreRepository",
    "SQLModelDirectorRepository",
    "SQLModelFilmRepository",
    "SQLModelCatalogGateway",
]
