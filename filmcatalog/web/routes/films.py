"""
Routes des films: liste filtrée, détail, création, édition, suppression.

La liste accepte ?searchString= (fragment du titre) et ?genreId= ; les deux
filtres sont optionnels et se combinent.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse

from ...core.exceptions import ValidationErrors, ValidationFailedError
from ...services.catalog import FilmService
from ..deps import get_film_service, templates
from ..forms import bind_film, film_to_form
from ..messages import flash_context

router = APIRouter(prefix="/Films")


def _parse_genre_id(genre_id: Optional[str]) -> Optional[int]:
    """Convertit genreId en int (le formulaire envoie "" pour « tous les genres »)."""
    if genre_id:
        try:
            return int(genre_id)
        except (ValueError, TypeError):
            pass
    return None


def _render_form(
    request: Request,
    service: FilmService,
    template: str,
    form: dict,
    errors: ValidationErrors,
    film_id: Optional[int] = None,
):
    """Affiche le formulaire de création ou d'édition avec les listes de choix."""
    return templates.TemplateResponse(
        request,
        template,
        {
            "form": form,
            "errors": errors,
            "film_id": film_id,
            "genres": service.genres(),
            "directors": service.directors(),
        },
    )


@router.get("")
@router.get("/Index")
async def film_index(
    request: Request,
    search_string: Optional[str] = Query(default=None, alias="searchString"),
    genre_id: Optional[str] = Query(default=None, alias="genreId"),
    message: Optional[str] = None,
    service: FilmService = Depends(get_film_service),
):
    """Liste des films, triés par note décroissante."""
    genre_id_int = _parse_genre_id(genre_id)
    films = service.list(search_string=search_string or None, genre_id=genre_id_int)

    return templates.TemplateResponse(
        request,
        "films/index.html",
        {
            "films": films,
            "genres": service.genres(),
            "current_search": search_string or "",
            "current_genre_id": genre_id_int,
            **flash_context("films", message),
        },
    )


@router.get("/Details/{film_id}")
async def film_details(
    request: Request, film_id: int, service: FilmService = Depends(get_film_service)
):
    """Fiche d'un film."""
    film = service.get(film_id)
    return templates.TemplateResponse(request, "films/details.html", {"film": film})


@router.get("/Create")
async def film_create_form(
    request: Request, service: FilmService = Depends(get_film_service)
):
    """Formulaire de création."""
    return _render_form(request, service, "films/create.html", {}, {})


@router.post("/Create")
async def film_create(request: Request, service: FilmService = Depends(get_film_service)):
    """Crée un film ou réaffiche le formulaire avec les erreurs."""
    form = dict(await request.form())
    film, binding_errors = bind_film(form)
    try:
        service.create(film, binding_errors)
    except ValidationFailedError as exc:
        return _render_form(request, service, "films/create.html", form, exc.errors)
    return RedirectResponse(url="/Films?message=created", status_code=303)


@router.get("/Edit/{film_id}")
async def film_edit_form(
    request: Request, film_id: int, service: FilmService = Depends(get_film_service)
):
    """Formulaire d'édition pré-rempli."""
    film = service.get(film_id)
    return _render_form(
        request, service, "films/edit.html", film_to_form(film), {}, film_id=film_id
    )


@router.post("/Edit/{film_id}")
async def film_edit(
    request: Request, film_id: int, service: FilmService = Depends(get_film_service)
):
    """Met à jour un film ou réaffiche le formulaire avec les erreurs."""
    form = dict(await request.form())
    film, binding_errors = bind_film(form)
    try:
        service.update(film_id, film, binding_errors)
    except ValidationFailedError as exc:
        return _render_form(
            request, service, "films/edit.html", form, exc.errors, film_id=film_id
        )
    return RedirectResponse(url="/Films?message=updated", status_code=303)


@router.get("/Delete/{film_id}")
async def film_delete_confirm(
    request: Request, film_id: int, service: FilmService = Depends(get_film_service)
):
    """Page de confirmation de suppression."""
    film = service.get(film_id)
    return templates.TemplateResponse(request, "films/delete.html", {"film": film})


@router.post("/Delete/{film_id}")
async def film_delete(film_id: int, service: FilmService = Depends(get_film_service)):
    """Supprime le film ; un ID déjà supprimé renvoie simplement à la liste."""
    if service.delete(film_id):
        return RedirectResponse(url="/Films?message=deleted", status_code=303)
    return RedirectResponse(url="/Films", status_code=303)
