"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 utilisées par toutes les routes et les services
du catalogue, créés par le Container pour la durée d'une requête.
"""

from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..services.catalog import DirectorService, FilmService, GenreService, OverviewService

_WEB_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")


def format_rating(value: Optional[Decimal]) -> str:
    """Formate une note sans zéros superflus ('8.70' -> '8.7', '9.00' -> '9')."""
    if value is None:
        return ""
    return f"{value:.2f}".rstrip("0").rstrip(".")


templates.env.filters["rating"] = format_rating
templates.env.globals["app_version"] = f"FilmCatalog v{__version__}"


def _service(request: Request, name: str):
    """Crée un service depuis le Container de l'application."""
    return getattr(request.app.state.container, name)()


def get_film_service(request: Request) -> Iterator[FilmService]:
    """Service films, session fermée en fin de requête."""
    service = _service(request, "film_service")
    try:
        yield service
    finally:
        service.close()


def get_genre_service(request: Request) -> Iterator[GenreService]:
    """Service genres, session fermée en fin de requête."""
    service = _service(request, "genre_service")
    try:
        yield service
    finally:
        service.close()


def get_director_service(request: Request) -> Iterator[DirectorService]:
    """Service réalisateurs, session fermée en fin de requête."""
    service = _service(request, "director_service")
    try:
        yield service
    finally:
        service.close()


def get_overview_service(request: Request) -> Iterator[OverviewService]:
    """Service de la page d'accueil, session fermée en fin de requête."""
    service = _service(request, "overview_service")
    try:
        yield service
    finally:
        service.close()
