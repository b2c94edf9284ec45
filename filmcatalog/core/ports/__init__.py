"""
Ports (interfaces abstraites) de la couche domaine.

Les adaptateurs de l'infrastructure implémentent ces contrats.
"""

from filmcatalog.core.ports.repositories import (
    ICatalogGateway,
    IDirectorRepository,
    IFilmRepository,
    IGenreRepository,
)

__all__ = [
    "ICatalogGateway",
    "IDirectorRepository",
    "IFilmRepository",
    "IGenreRepository",
]
