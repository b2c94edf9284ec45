"""
Module de persistance SQLite pour FilmCatalog.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Repositories par entite et passerelle (gateway) du catalogue

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from filmcatalog.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    with next(get_session()) as session:
        gateway = SQLModelCatalogGateway(session)
        films = gateway.films.search(search_string="Дюна")
"""

from filmcatalog.infrastructure.persistence.database import (
    create_catalog_engine,
    get_engine,
    get_session,
    init_db,
    set_engine,
)
from filmcatalog.infrastructure.persistence.models import (
    DirectorModel,
    FilmModel,
    GenreModel,
)

__all__ = [
    "create_catalog_engine",
    "get_engine",
    "get_session",
    "init_db",
    "set_engine",
    "GenreModel",
    "DirectorModel",
    "FilmModel",
]
