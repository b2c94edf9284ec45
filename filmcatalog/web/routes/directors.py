"""
Routes des réalisateurs: liste, détail (avec films), création, édition, suppression.

Un réalisateur qui a au moins un film ne peut pas être supprimé : la liste est
réaffichée avec ?error=has_films.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from ...core.exceptions import DependencyConflictError, ValidationFailedError
from ...services.catalog import DirectorService
from ..deps import get_director_service, templates
from ..forms import bind_director, director_to_form
from ..messages import flash_context

router = APIRouter(prefix="/Directors")


@router.get("")
@router.get("/Index")
async def director_index(
    request: Request,
    message: Optional[str] = None,
    error: Optional[str] = None,
    service: DirectorService = Depends(get_director_service),
):
    """Liste des réalisateurs."""
    return templates.TemplateResponse(
        request,
        "directors/index.html",
        {"directors": service.list(), **flash_context("directors", message, error)},
    )


@router.get("/Details/{director_id}")
async def director_details(
    request: Request,
    director_id: int,
    service: DirectorService = Depends(get_director_service),
):
    """Fiche d'un réalisateur avec ses films."""
    director = service.get(director_id, with_films=True)
    return templates.TemplateResponse(
        request, "directors/details.html", {"director": director}
    )


@router.get("/Create")
async def director_create_form(request: Request):
    """Formulaire de création."""
    return templates.TemplateResponse(
        request, "directors/create.html", {"form": {}, "errors": {}}
    )


@router.post("/Create")
async def director_create(
    request: Request, service: DirectorService = Depends(get_director_service)
):
    """Crée un réalisateur ou réaffiche le formulaire avec les erreurs."""
    form = dict(await request.form())
    director, binding_errors = bind_director(form)
    try:
        service.create(director, binding_errors)
    except ValidationFailedError as exc:
        return templates.TemplateResponse(
            request, "directors/create.html", {"form": form, "errors": exc.errors}
        )
    return RedirectResponse(url="/Directors?message=created", status_code=303)


@router.get("/Edit/{director_id}")
async def director_edit_form(
    request: Request,
    director_id: int,
    service: DirectorService = Depends(get_director_service),
):
    """Formulaire d'édition pré-rempli."""
    director = service.get(director_id)
    return templates.TemplateResponse(
        request,
        "directors/edit.html",
        {"form": director_to_form(director), "errors": {}, "director_id": director_id},
    )


@router.post("/Edit/{director_id}")
async def director_edit(
    request: Request,
    director_id: int,
    service: DirectorService = Depends(get_director_service),
):
    """Met à jour un réalisateur ou réaffiche le formulaire avec les erreurs."""
    form = dict(await request.form())
    director, binding_errors = bind_director(form)
    try:
        service.update(director_id, director, binding_errors)
    except ValidationFailedError as exc:
        return templates.TemplateResponse(
            request,
            "directors/edit.html",
            {"form": form, "errors": exc.errors, "director_id": director_id},
        )
    return RedirectResponse(url="/Directors?message=updated", status_code=303)


@router.get("/Delete/{director_id}")
async def director_delete_confirm(
    request: Request,
    director_id: int,
    service: DirectorService = Depends(get_director_service),
):
    """Page de confirmation de suppression."""
    director = service.get(director_id)
    return templates.TemplateResponse(
        request, "directors/delete.html", {"director": director}
    )


@router.post("/Delete/{director_id}")
async def director_delete(
    director_id: int, service: DirectorService = Depends(get_director_service)
):
    """Supprime le réalisateur s'il n'a aucun film."""
    try:
        deleted = service.delete(director_id)
    except DependencyConflictError:
        return RedirectResponse(url="/Directors?error=has_films", status_code=303)
    if deleted:
        return RedirectResponse(url="/Directors?message=deleted", status_code=303)
    return RedirectResponse(url="/Directors", status_code=303)
