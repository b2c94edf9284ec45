"""
Routes de la page d'accueil et de la page « À propos ».

L'accueil affiche les statistiques du catalogue et les films les mieux notés.
"""

from fastapi import APIRouter, Depends, Request

from ...services.catalog import OverviewService
from ..deps import get_overview_service, templates

router = APIRouter()


@router.get("/")
@router.get("/Home")
@router.get("/Home/Index")
async def home(request: Request, service: OverviewService = Depends(get_overview_service)):
    """Page d'accueil avec statistiques du catalogue."""
    return templates.TemplateResponse(
        request,
        "home/index.html",
        {"stats": service.statistics(), "top_films": service.top_films()},
    )


@router.get("/Home/About")
async def about(request: Request):
    """Page de présentation de l'application."""
    return templates.TemplateResponse(request, "home/about.html", {})
