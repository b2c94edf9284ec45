"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
configuration, base de donnees, passerelle de persistance et services.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import SQLModelCatalogGateway
from .services.catalog import DirectorService, FilmService, GenreService, OverviewService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        service = container.film_service()
        try:
            films = service.list(genre_id=4)
        finally:
            service.close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Passerelle - Factory pour une session fraiche par requete
    catalog_gateway = providers.Factory(
        SQLModelCatalogGateway,
        session=session,
    )

    # Services - Factory car dependent de la passerelle (sessions fraiches)
    genre_service = providers.Factory(GenreService, gateway=catalog_gateway)
    director_service = providers.Factory(DirectorService, gateway=catalog_gateway)
    film_service = providers.Factory(FilmService, gateway=catalog_gateway)
    overview_service = providers.Factory(OverviewService, gateway=catalog_gateway)
