"""
Application FastAPI de FilmCatalog.

Initialise l'application web avec le Container DI, charge les données de
référence si la base est vide, configure les fichiers statiques et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from ..core.exceptions import EntityNotFoundError
from ..infrastructure.persistence.seed import seed_catalog
from .deps import templates
from .routes.directors import router as directors_router
from .routes.films import router as films_router
from .routes.genres import router as genres_router
from .routes.home import router as home_router

_WEB_DIR = Path(__file__).parent

# Libellés affichés sur la page 404
_ENTITY_LABELS = {
    "Film": "Фільм",
    "Genre": "Жанр",
    "Director": "Режисер",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI et la base au démarrage."""
    container = Container()
    container.database.init()
    if container.config().seed_demo_data:
        session = container.session()
        try:
            seed_catalog(session)
        finally:
            session.close()
    app.state.container = container
    logger.info("FilmCatalog prêt")
    yield


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    """Page 404 pour un identifiant inconnu."""
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {
            "entity_type": _ENTITY_LABELS.get(exc.entity, exc.entity),
            "entity_id": exc.entity_id,
        },
        status_code=404,
    )


def create_app() -> FastAPI:
    """Construit l'application : routes, fichiers statiques, gestion des 404."""
    application = FastAPI(title="FilmCatalog", lifespan=lifespan)

    # Fichiers statiques
    application.mount(
        "/static", StaticFiles(directory=_WEB_DIR / "static"), name="static"
    )

    application.add_exception_handler(EntityNotFoundError, entity_not_found_handler)

    # Routes
    application.include_router(home_router)
    application.include_router(films_router)
    application.include_router(genres_router)
    application.include_router(directors_router)
    return application


app = create_app()
