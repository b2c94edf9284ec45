"""
Routes des genres: liste, détail (avec films), création, édition, suppression.

Un genre utilisé par au moins un film ne peut pas être supprimé : la liste est
réaffichée avec ?error=has_films.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from ...core.exceptions import DependencyConflictError, ValidationFailedError
from ...services.catalog import GenreService
from ..deps import get_genre_service, templates
from ..forms import bind_genre, genre_to_form
from ..messages import flash_context

router = APIRouter(prefix="/Genres")


@router.get("")
@router.get("/Index")
async def genre_index(
    request: Request,
    message: Optional[str] = None,
    error: Optional[str] = None,
    service: GenreService = Depends(get_genre_service),
):
    """Liste des genres."""
    return templates.TemplateResponse(
        request,
        "genres/index.html",
        {"genres": service.list(), **flash_context("genres", message, error)},
    )


@router.get("/Details/{genre_id}")
async def genre_details(
    request: Request, genre_id: int, service: GenreService = Depends(get_genre_service)
):
    """Fiche d'un genre avec ses films."""
    genre = service.get(genre_id, with_films=True)
    return templates.TemplateResponse(request, "genres/details.html", {"genre": genre})


@router.get("/Create")
async def genre_create_form(request: Request):
    """Formulaire de création."""
    return templates.TemplateResponse(
        request, "genres/create.html", {"form": {}, "errors": {}}
    )


@router.post("/Create")
async def genre_create(
    request: Request, service: GenreService = Depends(get_genre_service)
):
    """Crée un genre ou réaffiche le formulaire avec les erreurs."""
    form = dict(await request.form())
    genre, binding_errors = bind_genre(form)
    try:
        service.create(genre, binding_errors)
    except ValidationFailedError as exc:
        return templates.TemplateResponse(
            request, "genres/create.html", {"form": form, "errors": exc.errors}
        )
    return RedirectResponse(url="/Genres?message=created", status_code=303)


@router.get("/Edit/{genre_id}")
async def genre_edit_form(
    request: Request, genre_id: int, service: GenreService = Depends(get_genre_service)
):
    """Formulaire d'édition pré-rempli."""
    genre = service.get(genre_id)
    return templates.TemplateResponse(
        request,
        "genres/edit.html",
        {"form": genre_to_form(genre), "errors": {}, "genre_id": genre_id},
    )


@router.post("/Edit/{genre_id}")
async def genre_edit(
    request: Request, genre_id: int, service: GenreService = Depends(get_genre_service)
):
    """Met à jour un genre ou réaffiche le formulaire avec les erreurs."""
    form = dict(await request.form())
    genre, binding_errors = bind_genre(form)
    try:
        service.update(genre_id, genre, binding_errors)
    except ValidationFailedError as exc:
        return templates.TemplateResponse(
            request,
            "genres/edit.html",
            {"form": form, "errors": exc.errors, "genre_id": genre_id},
        )
    return RedirectResponse(url="/Genres?message=updated", status_code=303)


@router.get("/Delete/{genre_id}")
async def genre_delete_confirm(
    request: Request, genre_id: int, service: GenreService = Depends(get_genre_service)
):
    """Page de confirmation de suppression."""
    genre = service.get(genre_id)
    return templates.TemplateResponse(request, "genres/delete.html", {"genre": genre})


@router.post("/Delete/{genre_id}")
async def genre_delete(genre_id: int, service: GenreService = Depends(get_genre_service)):
    """Supprime le genre s'il n'a aucun film."""
    try:
        deleted = service.delete(genre_id)
    except DependencyConflictError:
        return RedirectResponse(url="/Genres?error=has_films", status_code=303)
    if deleted:
        return RedirectResponse(url="/Genres?message=deleted", status_code=303)
    return RedirectResponse(url="/Genres", status_code=303)
